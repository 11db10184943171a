"""Tile rendering: one box per child node."""

from __future__ import annotations

from kida.template import Markup

from businessprocess.html import Element
from businessprocess.model import BpNode, Node
from businessprocess.renderer.base import Renderer


class TileRenderer(Renderer):
    """Render the child nodes as a grid of tiles."""

    def render(self) -> Markup:
        tiles = Element.create("div", {"class": "tiles"})
        nodes = self.get_child_nodes()
        if not nodes:
            tiles.add_content(
                Element.create("p", {"class": "empty-state"}).set_content(
                    self.translate("No nodes to show")
                )
            )
            return tiles.render()

        path = self.get_current_path()
        for node in nodes:
            tiles.add_content(self.render_tile(node, path))
        return tiles.render()

    def render_tile(self, node: Node, path: list[str]) -> Element:
        tile = Element.create("div", {"class": ["tile", *self.get_node_classes(node)]})
        if isinstance(node, BpNode):
            tile.add_content(
                Element.create("a", {"href": str(self.get_node_url(node, path))}).set_content(node.get_alias())
            )
            tile.add_content(self.render_state_badges(node.get_state_summary()).render_if_empty(False))
        else:
            tile.add_content(Element.create("span", {"class": "label"}).set_content(node.get_alias()))
        tile.add_content(self.render_node_actions(node, self.parent))
        return tile
