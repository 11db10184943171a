"""Nested list rendering of a business process."""

from __future__ import annotations

from kida.template import Markup

from businessprocess.html import Element
from businessprocess.model import BpNode, Node
from businessprocess.renderer.base import Renderer

OPERATOR_LABELS = {"&": "AND", "|": "OR"}


class TreeRenderer(Renderer):
    """Render nodes as a ``<ul class="bp">`` tree.

    When a parent node is bound, that node is the root of the tree.
    Otherwise every root node of the business process gets its own
    top-level entry.
    """

    def render(self) -> Markup:
        tree = Element.create("ul", {"class": ["bp", "tree"]})
        if self.parent is not None:
            tree.add_content(self.render_node(self.parent, list(self.path)))
        else:
            for node in self.get_child_nodes():
                tree.add_content(self.render_node(node, list(self.path)))
        return tree.render()

    def render_node(
        self,
        node: Node,
        path: list[str],
        parent: BpNode | None = None,
    ) -> Element:
        """Render *node* and, for process nodes, its subtree.

        A node with several parents appears once below each of them, so
        entries are tagged with ``data-node`` rather than a unique id.
        """
        item = Element.create("li", {"class": self.get_node_classes(node), "data-node": node.name})
        item.add_content(self.render_header(node, path, parent))

        if isinstance(node, BpNode) and node.has_children():
            child_path = [*path, node.name]
            children = Element.create("ul", {"class": "bp"})
            for child in node.get_children():
                children.add_content(self.render_node(child, child_path, node))
            item.add_content(children)
        return item

    def render_header(self, node: Node, path: list[str], parent: BpNode | None) -> Element:
        header = Element.create("div", {"class": "node-header"})
        if isinstance(node, BpNode):
            header.add_content(
                Element.create("span", {"class": "op"}).set_content(OPERATOR_LABELS[node.operator])
            )
            header.add_content(
                Element.create("a", {"href": str(self.get_node_url(node, path))}).set_content(node.get_alias())
            )
            header.add_content(self.render_state_badges(node.get_state_summary()).render_if_empty(False))
        else:
            header.add_content(Element.create("span", {"class": "label"}).set_content(node.get_alias()))
        header.add_content(self.time_since(node.last_state_change))
        header.add_content(self.render_node_actions(node, parent))
        return header
