"""Breadcrumb navigation from the business process down to the current node."""

from __future__ import annotations

import logging
from typing import Any

from kida.template import Markup

from businessprocess.errors import NodeNotFound
from businessprocess.html import Element
from businessprocess.model import BpConfig, BpNode
from businessprocess.renderer.base import Renderer

logger = logging.getLogger("businessprocess.renderer")


class Breadcrumb(Renderer):
    """Render the current path as a ``<ul class="breadcrumb">``.

    The first entry links to the business process itself, every
    following entry to one node of ``get_current_path()``. Names that are
    not part of the business process (a stale ``path`` parameter) are left
    out.
    """

    def __init__(self, config: BpConfig, parent: BpNode | None = None, **kwargs: Any) -> None:
        super().__init__(config, parent, **kwargs)
        self.set_is_breadcrumb()

    def render(self) -> Markup:
        crumbs = Element.create("ul", {"class": "breadcrumb"})
        base_url = self.get_base_url()
        crumbs.add_content(
            Element.create("li", {"class": "process"}).set_content(
                Element.create("a", {"href": str(base_url)}).set_content(self.config.get_title())
            )
        )

        path: list[str] = []
        for name in self.get_current_path():
            try:
                node = self.config.get_node(name)
            except NodeNotFound:
                logger.warning("Skipping unknown node %r in breadcrumb of %s", name, self.config.name)
                continue
            link = Element.create("a", {"href": str(self.get_node_url(node, path))})
            crumbs.add_content(
                Element.create("li", {"class": self.get_node_classes(node)}).set_content(
                    link.set_content(node.get_alias())
                )
            )
            path = [*path, name]
        return crumbs.render()
