"""Base class for business process renderers.

A renderer is built per request. It knows which part of a business
process it shows (all root nodes, or the children of one parent node),
the breadcrumb path leading there, the URLs it links to, and whether
administrative actions are unlocked.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Collection, Mapping

from kida.template import Markup

from businessprocess.config import RendererConfig
from businessprocess.dates import DateFormatter
from businessprocess.errors import ProgrammingError
from businessprocess.html import Container, Element, HtmlString
from businessprocess.model import BpConfig, BpNode, Node
from businessprocess.url import Url

logger = logging.getLogger("businessprocess.renderer")


def _untranslated(message: str) -> str:
    return message


def node_classes(node: Node) -> list[str]:
    """CSS classes describing the status of *node*."""
    if node.is_missing():
        classes = ["missing"]
    else:
        classes = [node.get_state_name().lower()]
        if node.has_missing_children():
            classes.append("missing-children")

    if node.is_handled():
        classes.append("handled")

    if isinstance(node, BpNode):
        classes.append("process-node")
    else:
        classes.append("monitored-node")
    return classes


def state_badges(
    summary: Mapping[str, int],
    quiet_states: Collection[str] = ("OK", "UP"),
    translate: Callable[[str], str] = _untranslated,
) -> Container:
    """Build one badge per state with a non-zero count.

    States in *quiet_states* never get a badge. Badges follow the
    iteration order of *summary*.
    """
    container = Container.create({"class": "badges"})
    for state, count in summary.items():
        if count == 0 or state in quiet_states:
            continue
        container.add_content(
            Element.create(
                "span",
                {
                    "class": ["badge", f"badge-{state.lower()}"],
                    "title": translate(state),
                },
            ).set_content(count)
        )
    return container


class Renderer(ABC):
    """Rendering context shared by every business process view.

    Args:
        config: The business process to render.
        parent: Render only the children of this node. ``None`` renders
            the root nodes of *config*.
        settings: Renderer configuration, defaults apply when omitted.
        translate: Translation hook for state titles.

    Administrative actions are hidden until ``unlock()`` is called.
    """

    def __init__(
        self,
        config: BpConfig,
        parent: BpNode | None = None,
        *,
        settings: RendererConfig | None = None,
        translate: Callable[[str], str] = _untranslated,
    ) -> None:
        self.config = config
        self.parent = parent
        self.settings = settings or RendererConfig()
        self.translate = translate
        self.dates = DateFormatter(self.settings.datetime_format)
        self.locked = True
        self.url: Url | None = None
        self.base_url: Url | None = None
        self.path: list[str] = []
        self._is_breadcrumb = False

    @abstractmethod
    def render(self) -> Markup:
        """Render this view as an HTML fragment."""

    def __html__(self) -> str:
        return str(self.render())

    # -- Scope --

    def get_business_process(self) -> BpConfig:
        return self.config

    def wants_root_nodes(self) -> bool:
        """Whether this will render all root nodes."""
        return self.parent is None

    def renders_sub_node(self) -> bool:
        """Whether this will only render parts of the business process."""
        return self.parent is not None

    def get_parent_node(self) -> BpNode | None:
        return self.parent

    def get_parent_nodes(self) -> list[BpNode]:
        if self.parent is None:
            return []
        return self.parent.get_parents()

    def get_child_nodes(self) -> list[Node]:
        if self.parent is None:
            return list(self.config.get_root_nodes())
        return self.parent.get_children()

    def count_child_nodes(self) -> int:
        if self.parent is None:
            return self.config.count_children()
        return self.parent.count_children()

    # -- Presentation helpers --

    def render_state_badges(self, summary: Mapping[str, int]) -> Container:
        return state_badges(summary, self.settings.quiet_states, self.translate)

    def get_node_classes(self, node: Node) -> list[str]:
        return node_classes(node)

    def time_since(self, unix_ts: float | None, time_only: bool = False) -> Element | HtmlString:
        if not unix_ts:
            return HtmlString.create("")
        return Element.create(
            "span",
            {
                "class": ["relative-time", "time-since"],
                "title": self.dates.format_datetime(unix_ts),
            },
        ).set_content(self.dates.time_since(unix_ts, time_only))

    def get_node_url(self, node: Node, path: list[str]) -> Url:
        """Link to *node*, reached through the nodes named in *path*."""
        return self.get_base_url().with_params(node=node.name).with_param_list("path", path)

    def render_node_actions(self, node: Node, parent: BpNode | None = None) -> Element | HtmlString:
        """Edit and delete links for *node*, only while unlocked."""
        if self.locked:
            return HtmlString.create("")
        url = self.url or self.get_base_url()
        actions = Element.create("span", {"class": "actions"})
        actions.add_content(
            Element.create(
                "a",
                {
                    "href": str(url.with_params(editnode=node.name)),
                    "class": "action-edit",
                    "title": "Modify this node",
                },
            ).set_content(self.translate("Edit"))
        )
        delete_url = url.with_params(deletenode=node.name, deleteparent=parent.name if parent else None)
        actions.add_content(
            Element.create(
                "a",
                {"href": str(delete_url), "class": "action-delete", "title": "Delete this node"},
            ).set_content(self.translate("Delete"))
        )
        return actions

    # -- Path --

    def set_path(self, path: list[str]) -> Renderer:
        self.path = list(path)
        return self

    def get_path(self) -> list[str]:
        return self.path

    def get_current_path(self) -> list[str]:
        """The path including the parent node, when rendering a sub node."""
        path = list(self.path)
        if self.parent is not None:
            path.append(str(self.parent))
        return path

    # -- URLs --

    def set_url(self, url: Url) -> Renderer:
        """Bind the request URL, without parameters that trigger actions.

        Also derives the base URL from *url*.
        """
        self.url = url.without(self.settings.action_params)
        self.set_base_url(url)
        logger.debug("Renderer bound to %s", self.url)
        return self

    def set_base_url(self, url: Url) -> Renderer:
        self.base_url = url.without(self.settings.navigation_params)
        return self

    def get_url(self) -> Url | None:
        return self.url

    def get_base_url(self) -> Url:
        if self.base_url is None:
            raise ProgrammingError("Renderer has no base URL")
        # Url is immutable, no copy needed
        return self.base_url

    # -- Lock state --

    def is_locked(self) -> bool:
        return self.locked

    def lock(self) -> Renderer:
        self.locked = True
        logger.debug("Renderer for %s locked", self.config.name)
        return self

    def unlock(self) -> Renderer:
        self.locked = False
        logger.debug("Renderer for %s unlocked", self.config.name)
        return self

    # -- Breadcrumb --

    def set_is_breadcrumb(self) -> Renderer:
        self._is_breadcrumb = True
        return self

    def is_breadcrumb(self) -> bool:
        return self._is_breadcrumb

    def create_unbound_parent(self, config: BpConfig) -> Node:
        """The transient process node holding every unbound node of *config*."""
        logger.debug("Creating unbound parent for %s", config.name)
        return config.get_node(config.unbound_node_name)
