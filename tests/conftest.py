"""Shared fixtures: a small web shop business process."""

import pytest

from businessprocess.model import CRITICAL, DOWN, OK, UP, WARNING, BpConfig


@pytest.fixture
def shop() -> BpConfig:
    """shop (root, AND)
    ├── web (OR): web1;http CRITICAL (acknowledged), web2;http OK
    └── db (AND): db1 UP, db1;mysql WARNING, db2;mysql missing
    """
    bp = BpConfig("shop", title="Web Shop")
    shop = bp.create_bp("shop", alias="Web Shop Frontend", last_state_change=1_000_000)
    web = bp.create_bp("web", operator="|")
    db = bp.create_bp("db")
    web.add_child(bp.create_service("web1", "http", state=CRITICAL, acknowledged=True))
    web.add_child(bp.create_service("web2", "http", state=OK))
    db.add_child(bp.create_host("db1", state=UP))
    db.add_child(bp.create_service("db1", "mysql", state=WARNING))
    db.add_child(bp.create_service("db2", "mysql", missing=True))
    shop.add_child(web).add_child(db)
    bp.add_root_node("shop")
    # An orphan process node, neither root nor child
    bp.create_bp("staging")
    bp.create_host("db3", state=DOWN)
    return bp
