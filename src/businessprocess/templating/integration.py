"""Kida environment setup for dashboard pages.

Creates a kida Environment from a RendererConfig and renders a
renderer's fragment inside the dashboard layout.
"""

from collections.abc import Callable
from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from businessprocess.config import RendererConfig
from businessprocess.renderer.base import Renderer
from businessprocess.renderer.breadcrumb import Breadcrumb
from businessprocess.templating.filters import BUILTIN_FILTERS


def create_environment(
    config: RendererConfig | None = None,
    filters: dict[str, Callable[..., Any]] | None = None,
) -> Environment:
    """Create a kida Environment for dashboard templates.

    Extra template directories from ``config.template_dirs`` take
    precedence over the bundled templates, so a deployment can override
    ``dashboard.html``.
    """
    config = config or RendererConfig()
    loaders = [FileSystemLoader(str(d)) for d in config.template_dirs]
    loaders.append(PackageLoader("businessprocess.templating", "templates"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )
    env.update_filters(BUILTIN_FILTERS)
    if filters:
        env.update_filters(filters)
    return env


def render_dashboard(
    env: Environment,
    renderer: Renderer,
    title: str | None = None,
    template_name: str = "dashboard.html",
) -> str:
    """Render *renderer* inside the dashboard layout.

    A breadcrumb for the same scope is rendered along with it when the
    renderer has a base URL.
    """
    breadcrumb = None
    base_url = renderer.base_url
    if base_url is not None and not renderer.is_breadcrumb():
        crumb = Breadcrumb(
            renderer.config,
            renderer.parent,
            settings=renderer.settings,
            translate=renderer.translate,
        )
        crumb.set_path(renderer.get_path()).set_base_url(base_url)
        breadcrumb = crumb.render()

    template = env.get_template(template_name)
    return template.render(
        {
            "title": title or renderer.config.get_title(),
            "content": renderer.render(),
            "breadcrumb": breadcrumb,
            "locked": renderer.is_locked(),
            "base_url": str(base_url) if base_url is not None else "",
            "child_count": renderer.count_child_nodes(),
        }
    )
