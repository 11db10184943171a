"""Business process template filters.

Auto-registered on every environment built by ``create_environment()``
so dashboard templates can style nodes without a renderer in scope.
"""

from collections.abc import Mapping
from typing import Any

from kida.template import Markup

from businessprocess.dates import DateFormatter
from businessprocess.model import Node
from businessprocess.renderer.base import node_classes as _node_classes
from businessprocess.renderer.base import state_badges as _state_badges
from businessprocess.url import Url

_dates = DateFormatter()


def node_classes(node: Node) -> str:
    """CSS class string for a node.

    Example:
        <li class="{{ node | node_classes }}">
        → <li class="critical handled process-node">

    """
    return " ".join(_node_classes(node))


def state_badges(summary: Mapping[str, int]) -> Markup:
    """Render a state summary as badges, skipping OK/UP and zero counts.

    Example:
        {{ node.get_state_summary() | state_badges }}

    """
    return _state_badges(summary).render()


def url_without(value: Any, *names: str) -> str:
    """Drop query parameters from a URL.

    Example:
        {{ request_url | url_without("editnode", "deletenode") }}

    """
    url = value if isinstance(value, Url) else Url.parse(str(value))
    return str(url.without(names))


def time_since(unix_ts: float | None, time_only: bool = False) -> str:
    """Compact relative time, e.g. ``"for 5m 3s"``. Empty for missing times."""
    if not unix_ts:
        return ""
    return _dates.time_since(unix_ts, time_only)


BUILTIN_FILTERS: dict[str, Any] = {
    "node_classes": node_classes,
    "state_badges": state_badges,
    "time_since": time_since,
    "url_without": url_without,
}
