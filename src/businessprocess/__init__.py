"""businessprocess — HTML rendering for business process trees.

Renders a dependency tree of monitored hosts and services as HTML
fragments for a monitoring dashboard.

Basic usage::

    from businessprocess import BpConfig, TreeRenderer, Url

    bp = BpConfig("shop", title="Web Shop")
    web = bp.create_bp("web", operator="|")
    web.add_child(bp.create_service("web1", "http", state=0))
    bp.add_root_node("web")

    renderer = TreeRenderer(bp).set_url(Url.parse("/businessprocess/process?config=shop"))
    html = renderer.render()
"""

__version__ = "0.1.0-dev"
__all__ = [
    "BpConfig",
    "BpNode",
    "Breadcrumb",
    "BusinessProcessError",
    "ConfigurationError",
    "HostNode",
    "NodeNotFound",
    "ProgrammingError",
    "Renderer",
    "RendererConfig",
    "ServiceNode",
    "TileRenderer",
    "TreeRenderer",
    "Url",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import businessprocess`` free of kida until a renderer is needed.
    """
    if name in ("BpConfig", "BpNode", "HostNode", "ServiceNode"):
        from businessprocess import model as _model

        return getattr(_model, name)

    if name in ("BusinessProcessError", "ConfigurationError", "NodeNotFound", "ProgrammingError"):
        from businessprocess import errors as _errors

        return getattr(_errors, name)

    if name in ("Renderer", "Breadcrumb", "TileRenderer", "TreeRenderer"):
        from businessprocess import renderer as _renderer

        return getattr(_renderer, name)

    if name == "RendererConfig":
        from businessprocess.config import RendererConfig

        return RendererConfig

    if name == "Url":
        from businessprocess.url import Url

        return Url

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
