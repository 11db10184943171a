"""Tests for the concrete renderers: tree, tiles, breadcrumb."""

import logging

import pytest

from businessprocess.errors import ProgrammingError
from businessprocess.model import BpConfig
from businessprocess.renderer import Breadcrumb, TileRenderer, TreeRenderer
from businessprocess.url import Url

BASE = Url.parse("/bp/process?config=shop")


class TestTreeRenderer:
    def test_root_tree(self, shop: BpConfig) -> None:
        html = str(TreeRenderer(shop).set_url(BASE).render())

        assert html.startswith('<ul class="bp tree">')
        assert '<li class="warning missing-children process-node" data-node="shop">' in html
        assert '<span class="op">AND</span>' in html
        assert 'href="/bp/process?config=shop&amp;node=shop"' in html
        assert "Web Shop Frontend" in html

    def test_children_link_with_path(self, shop: BpConfig) -> None:
        html = str(TreeRenderer(shop).set_url(BASE).render())

        assert 'href="/bp/process?config=shop&amp;node=web&amp;path=shop"' in html
        assert '<span class="op">OR</span>' in html

    def test_monitored_nodes(self, shop: BpConfig) -> None:
        html = str(TreeRenderer(shop).set_url(BASE).render())

        assert '<li class="critical handled monitored-node" data-node="web1;http">' in html
        assert '<span class="label">web1: http</span>' in html
        assert '<li class="missing monitored-node" data-node="db2;mysql">' in html

    def test_badges_only_for_problems(self, shop: BpConfig) -> None:
        html = str(TreeRenderer(shop).set_url(BASE).render())

        assert '<span class="badge badge-warning" title="WARNING">1</span>' in html
        assert '<span class="badge badge-missing" title="MISSING">1</span>' in html
        assert "badge-ok" not in html

    def test_state_change_time(self, shop: BpConfig) -> None:
        html = str(TreeRenderer(shop).set_url(BASE).render())
        assert 'class="relative-time time-since"' in html

    def test_sub_tree_starts_at_parent(self, shop: BpConfig) -> None:
        renderer = TreeRenderer(shop, shop.get_node("db")).set_path(["shop"]).set_url(BASE)
        html = str(renderer.render())

        assert 'data-node="db"' in html
        assert 'data-node="shop"' not in html
        assert 'data-node="web"' not in html
        assert 'href="/bp/process?config=shop&amp;node=db&amp;path=shop"' in html

    def test_actions_only_when_unlocked(self, shop: BpConfig) -> None:
        locked = str(TreeRenderer(shop).set_url(BASE).render())
        assert "action-edit" not in locked

        unlocked = str(TreeRenderer(shop).set_url(BASE).unlock().render())
        assert 'href="/bp/process?config=shop&amp;editnode=web"' in unlocked
        assert "deletenode=web&amp;deleteparent=shop" in unlocked

    def test_shared_child_rendered_below_each_parent(self) -> None:
        bp = BpConfig("x")
        root = bp.create_bp("root")
        left, right = bp.create_bp("left"), bp.create_bp("right")
        shared = bp.create_service("db 1", "mysql", state=0)
        left.add_child(shared)
        right.add_child(shared)
        root.add_child(left).add_child(right)
        bp.add_root_node("root")
        html = str(TreeRenderer(bp).set_url(BASE).render())

        assert html.count('data-node="db 1;mysql"') == 2
        assert " id=" not in html

    def test_absolute_url_kept_in_links(self, shop: BpConfig) -> None:
        url = Url.parse("https://mon.example/bp/process?config=shop&node=db")
        html = str(TreeRenderer(shop).set_url(url).render())
        assert 'href="https://mon.example/bp/process?config=shop&amp;node=web&amp;path=shop"' in html

    def test_needs_base_url(self, shop: BpConfig) -> None:
        with pytest.raises(ProgrammingError):
            TreeRenderer(shop).render()

    def test_escapes_aliases(self) -> None:
        bp = BpConfig("x")
        bp.create_bp("root", alias="<script>")
        bp.add_root_node("root")
        html = str(TreeRenderer(bp).set_url(BASE).render())
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestTileRenderer:
    def test_one_tile_per_child(self, shop: BpConfig) -> None:
        renderer = TileRenderer(shop, shop.get_node("shop")).set_url(BASE)
        html = str(renderer.render())

        assert html.startswith('<div class="tiles">')
        assert html.count('<div class="tile ') == 2
        assert '<div class="tile ok process-node">' in html
        assert '<div class="tile warning missing-children process-node">' in html

    def test_links_carry_current_path(self, shop: BpConfig) -> None:
        renderer = TileRenderer(shop, shop.get_node("shop")).set_url(BASE)
        html = str(renderer.render())
        assert 'href="/bp/process?config=shop&amp;node=db&amp;path=shop"' in html

    def test_monitored_tiles(self, shop: BpConfig) -> None:
        html = str(TileRenderer(shop, shop.get_node("web")).set_url(BASE).render())
        assert '<span class="label">web2: http</span>' in html
        assert "<a " not in html

    def test_empty(self) -> None:
        html = str(TileRenderer(BpConfig("empty")).set_url(BASE).render())
        assert html == '<div class="tiles"><p class="empty-state">No nodes to show</p></div>'

    def test_delete_action_names_parent(self, shop: BpConfig) -> None:
        renderer = TileRenderer(shop, shop.get_node("web")).set_url(BASE).unlock()
        html = str(renderer.render())
        assert "deletenode=web2%3Bhttp&amp;deleteparent=web" in html


class TestBreadcrumb:
    def test_marks_itself(self, shop: BpConfig) -> None:
        assert Breadcrumb(shop).is_breadcrumb()

    def test_root(self, shop: BpConfig) -> None:
        html = str(Breadcrumb(shop).set_url(BASE).render())
        assert html == (
            '<ul class="breadcrumb">'
            '<li class="process"><a href="/bp/process?config=shop">Web Shop</a></li>'
            "</ul>"
        )

    def test_unknown_path_entries_skipped(self, shop: BpConfig, caplog: pytest.LogCaptureFixture) -> None:
        crumb = Breadcrumb(shop, shop.get_node("db")).set_path(["gone", "shop"]).set_url(BASE)
        with caplog.at_level(logging.WARNING, logger="businessprocess.renderer"):
            html = str(crumb.render())

        assert "gone" not in html
        assert '<a href="/bp/process?config=shop&amp;node=db&amp;path=shop">db</a>' in html
        assert "Skipping unknown node 'gone'" in caplog.text

    def test_unbound_parent_kept(self, shop: BpConfig, caplog: pytest.LogCaptureFixture) -> None:
        crumb = Breadcrumb(shop, shop.get_node("__unbound__")).set_url(BASE)
        with caplog.at_level(logging.WARNING, logger="businessprocess.renderer"):
            html = str(crumb.render())

        assert '<a href="/bp/process?config=shop&amp;node=__unbound__">Unbound nodes</a>' in html
        assert "Skipping" not in caplog.text

    def test_path_entries(self, shop: BpConfig) -> None:
        crumb = Breadcrumb(shop, shop.get_node("db")).set_path(["shop"]).set_url(BASE)
        html = str(crumb.render())

        assert '<a href="/bp/process?config=shop&amp;node=shop">Web Shop Frontend</a>' in html
        assert '<a href="/bp/process?config=shop&amp;node=db&amp;path=shop">db</a>' in html
        assert html.index("node=shop") < html.index("node=db")
