"""Business process tree model.

A ``BpConfig`` owns a registry of nodes. Process nodes (``BpNode``)
aggregate the state of their children; monitored nodes (hosts and
services) carry a state reported by the monitoring backend.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import ClassVar

from businessprocess.errors import ConfigurationError, NodeNotFound

logger = logging.getLogger("businessprocess.model")

OK = 0
WARNING = 1
CRITICAL = 2
UNKNOWN = 3
PENDING = 99

UP = 0
DOWN = 1
UNREACHABLE = 2

BP_STATE_NAMES: dict[int, str] = {
    OK: "OK",
    WARNING: "WARNING",
    CRITICAL: "CRITICAL",
    UNKNOWN: "UNKNOWN",
    PENDING: "PENDING",
}

HOST_STATE_NAMES: dict[int, str] = {
    UP: "UP",
    DOWN: "DOWN",
    UNREACHABLE: "UNREACHABLE",
    PENDING: "PENDING",
}

# Host states expressed as service states for aggregation
HOST_TO_BP_STATE: dict[int, int] = {
    UP: OK,
    DOWN: CRITICAL,
    UNREACHABLE: UNKNOWN,
    PENDING: PENDING,
}

# Severity used to pick the worst/best child state, higher is worse
SEVERITY: dict[int, int] = {
    OK: 0,
    PENDING: 1,
    WARNING: 2,
    UNKNOWN: 3,
    CRITICAL: 4,
}

OPERATORS = frozenset({"&", "|"})


class Node(ABC):
    """A node of the business process tree.

    Attributes:
        name: Unique name inside its ``BpConfig``.
        alias: Display name, falls back to ``name``.
        acknowledged: Problem acknowledged by an operator.
        in_downtime: Node is in a scheduled downtime.
        missing: The monitoring backend does not know this object.
        last_state_change: Unix timestamp of the last state change.
    """

    state_names: ClassVar[dict[int, str]] = BP_STATE_NAMES

    def __init__(
        self,
        name: str,
        *,
        alias: str | None = None,
        state: int | None = None,
        acknowledged: bool = False,
        in_downtime: bool = False,
        missing: bool = False,
        last_state_change: float | None = None,
    ) -> None:
        if not name:
            raise ConfigurationError("Node name must not be empty")
        if state is not None and state not in self.state_names:
            raise ConfigurationError(f"Invalid state {state!r} for node {name!r}")
        self.name = name
        self.alias = alias
        self._state = state
        self.acknowledged = acknowledged
        self.in_downtime = in_downtime
        self.missing = missing
        self.last_state_change = last_state_change
        self.parents: list[BpNode] = []

    def get_state(self) -> int:
        if self._state is None:
            return PENDING
        return self._state

    def set_state(self, state: int) -> Node:
        if state not in self.state_names:
            raise ConfigurationError(f"Invalid state {state!r} for node {self.name!r}")
        self._state = state
        return self

    def get_bp_state(self) -> int:
        """State on the process scale, used when aggregating."""
        return self.get_state()

    def get_state_name(self) -> str:
        return self.state_names[self.get_state()]

    def get_alias(self) -> str:
        return self.alias or self.name

    def get_parents(self) -> list[BpNode]:
        return list(self.parents)

    def is_missing(self) -> bool:
        return self.missing

    def is_handled(self) -> bool:
        return self.acknowledged or self.in_downtime

    def has_missing_children(self) -> bool:
        return False

    def has_children(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class BpNode(Node):
    """A process node aggregating its children with an operator.

    ``&`` takes the worst child state, ``|`` the best one. An explicit
    state (e.g. from a simulation) always wins over the derived one.
    """

    def __init__(self, name: str, operator: str = "&", **kwargs: object) -> None:
        if operator not in OPERATORS:
            raise ConfigurationError(f"Unknown operator {operator!r} for node {name!r}")
        super().__init__(name, **kwargs)  # type: ignore[arg-type]
        self.operator = operator
        self.children: list[Node] = []

    def add_child(self, child: Node) -> BpNode:
        """Link *child* below this node, refusing cycles."""
        if child in self.children:
            logger.warning("Node %s is already a child of %s", child, self)
            return self
        if child is self or (isinstance(child, BpNode) and child.is_ancestor_of(self)):
            raise ConfigurationError(f"Adding {child} below {self} would create a cycle")
        self.children.append(child)
        child.parents.append(self)
        return self

    def is_ancestor_of(self, node: Node) -> bool:
        pending = list(node.parents)
        seen: set[int] = set()
        while pending:
            parent = pending.pop()
            if parent is self:
                return True
            if id(parent) in seen:
                continue
            seen.add(id(parent))
            pending.extend(parent.parents)
        return False

    def get_children(self) -> list[Node]:
        return list(self.children)

    def count_children(self) -> int:
        return len(self.children)

    def has_children(self) -> bool:
        return bool(self.children)

    def get_state(self) -> int:
        if self._state is not None:
            return self._state
        states = [child.get_bp_state() for child in self.children if not child.is_missing()]
        if not states:
            return PENDING
        if self.operator == "|":
            return min(states, key=SEVERITY.__getitem__)
        return max(states, key=SEVERITY.__getitem__)

    def has_missing_children(self) -> bool:
        for child in self.children:
            if child.is_missing() or child.has_missing_children():
                return True
        return False

    def get_state_summary(self) -> dict[str, int]:
        """Count direct children per state name.

        Every state name is present, in canonical order, followed by
        ``MISSING`` for children the backend does not know.
        """
        summary = dict.fromkeys(BP_STATE_NAMES.values(), 0)
        summary["MISSING"] = 0
        for child in self.children:
            if child.is_missing():
                summary["MISSING"] += 1
            else:
                summary[BP_STATE_NAMES[child.get_bp_state()]] += 1
        return summary


class MonitoredNode(Node):
    """A host or service known to the monitoring backend."""


class HostNode(MonitoredNode):
    state_names: ClassVar[dict[int, str]] = HOST_STATE_NAMES

    def __init__(self, host_name: str, **kwargs: object) -> None:
        super().__init__(host_name, **kwargs)  # type: ignore[arg-type]
        self.host_name = host_name

    def get_bp_state(self) -> int:
        return HOST_TO_BP_STATE[self.get_state()]


class ServiceNode(MonitoredNode):
    def __init__(self, host_name: str, service_description: str, **kwargs: object) -> None:
        super().__init__(f"{host_name};{service_description}", **kwargs)  # type: ignore[arg-type]
        self.host_name = host_name
        self.service_description = service_description

    def get_alias(self) -> str:
        return self.alias or f"{self.host_name}: {self.service_description}"


class BpConfig:
    """A named business process: a node registry plus its root nodes.

    Example::

        bp = BpConfig("shop", title="Web Shop")
        web = bp.create_bp("web", operator="|")
        web.add_child(bp.create_service("web1", "http", state=0))
        bp.add_root_node("web")
    """

    def __init__(
        self,
        name: str,
        title: str | None = None,
        *,
        unbound_node_name: str = "__unbound__",
    ) -> None:
        if not unbound_node_name:
            raise ConfigurationError("unbound_node_name must not be empty")
        self.name = name
        self.title = title
        self.unbound_node_name = unbound_node_name
        self._nodes: dict[str, Node] = {}
        self._root_nodes: dict[str, BpNode] = {}

    def get_title(self) -> str:
        return self.title or self.name

    # -- Building --

    def add_node(self, node: Node) -> Node:
        if node.name == self.unbound_node_name:
            raise ConfigurationError(f"Node name {node.name!r} is reserved")
        if node.name in self._nodes:
            raise ConfigurationError(f"Duplicate node name {node.name!r}")
        self._nodes[node.name] = node
        return node

    def create_bp(self, name: str, operator: str = "&", **kwargs: object) -> BpNode:
        node = BpNode(name, operator, **kwargs)
        self.add_node(node)
        return node

    def create_host(self, host_name: str, **kwargs: object) -> HostNode:
        node = HostNode(host_name, **kwargs)
        self.add_node(node)
        return node

    def create_service(self, host_name: str, service_description: str, **kwargs: object) -> ServiceNode:
        node = ServiceNode(host_name, service_description, **kwargs)
        self.add_node(node)
        return node

    def add_root_node(self, name: str) -> BpConfig:
        node = self.get_node(name)
        if not isinstance(node, BpNode):
            raise ConfigurationError(f"Only process nodes can be root nodes, got {node!r}")
        self._root_nodes[name] = node
        return self

    # -- Queries --

    def has_node(self, name: str) -> bool:
        return name in self._nodes

    def get_node(self, name: str) -> Node:
        """Return the node called *name*.

        The reserved unbound name yields a transient process node holding
        every process node that is neither a root nor has a parent.
        """
        if name == self.unbound_node_name:
            return self._create_unbound_node()
        try:
            return self._nodes[name]
        except KeyError:
            raise NodeNotFound(name) from None

    def get_nodes(self) -> list[Node]:
        return list(self._nodes.values())

    def get_root_nodes(self) -> list[BpNode]:
        return list(self._root_nodes.values())

    def is_root_node(self, name: str) -> bool:
        return name in self._root_nodes

    def count_children(self) -> int:
        return len(self._root_nodes)

    def _create_unbound_node(self) -> BpNode:
        unbound = BpNode(self.unbound_node_name, alias="Unbound nodes")
        # Children are attached without back links so the registry stays untouched
        unbound.children = [
            node
            for node in self._nodes.values()
            if isinstance(node, BpNode) and not node.parents and node.name not in self._root_nodes
        ]
        logger.debug("Collected %d unbound nodes in %s", len(unbound.children), self.name)
        return unbound

    def __repr__(self) -> str:
        return f"BpConfig({self.name!r}, nodes={len(self._nodes)})"
