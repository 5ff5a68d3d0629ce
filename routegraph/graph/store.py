"""In-memory adjacency-list storage for the route graph."""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, TextIO

from routegraph.config import load_settings
from routegraph.obs.events import EventBus

from .model import Edge, InvalidGraphInput, Node, is_valid_label


LOGGER = logging.getLogger(__name__)


@dataclass
class Graph:
    """Undirected multigraph of named nodes joined by typed edges.

    Every connection is stored as two directed :class:`Edge` records, one in
    each endpoint's list, so ``A -> B`` exists exactly when ``B -> A`` does.
    Lists keep insertion order and never hold the same ``(destination, kind)``
    twice.

    Rejected calls are logged and recorded on :attr:`events`; they only raise
    :class:`InvalidGraphInput` when ``strict`` is enabled.  ``strict=None``
    takes its value from ``ROUTEGRAPH_STRICT``, so that variable turns the
    report-and-return contract into a raising one.  The structure is
    not safe for concurrent mutation; callers sharing a graph across threads
    must serialise access themselves.
    """

    adjacency: Dict[Node, List[Edge]] = field(default_factory=dict)
    events: EventBus = field(default_factory=EventBus)
    strict: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.strict is None:
            self.strict = load_settings().strict

    # -- nodes ------------------------------------------------------------

    def add_node(self, name: str) -> None:
        """Ensure a node called ``name`` exists; repeated calls are no-ops."""

        if not is_valid_label(name):
            self._reject("add_node", "No name provided", name)
            return
        self.adjacency.setdefault(Node(name), [])

    def remove_node(self, name: str) -> None:
        """Remove ``name`` and every edge that points at it."""

        target = Node(name)
        self.adjacency.pop(target, None)
        for node, edges in self.adjacency.items():
            kept = [edge for edge in edges if edge.destination != target]
            if len(kept) != len(edges):
                self.adjacency[node] = kept

    # -- edges ------------------------------------------------------------

    def add_edge(self, name1: str, name2: str, kind: str) -> None:
        """Connect ``name1`` and ``name2`` with an edge of ``kind``.

        Missing endpoints are created.  Each direction is appended only when
        an identical ``(destination, kind)`` is not already present.
        """

        if not (is_valid_label(name1) and is_valid_label(name2) and is_valid_label(kind)):
            self._reject("add_edge", "Edge is invalid", name1, name2, kind=kind)
            return
        if name1 == name2:
            self._reject("add_edge", "Edge is invalid: self-loop", name1, kind=kind)
            return

        node1 = Node(name1)
        node2 = Node(name2)
        edges1 = self.adjacency.setdefault(node1, [])
        edges2 = self.adjacency.setdefault(node2, [])

        forward = Edge(node2, kind)
        reverse = Edge(node1, kind)
        if forward not in edges1:
            edges1.append(forward)
        if reverse not in edges2:
            edges2.append(reverse)

    def remove_edge(self, name1: str, name2: str, kind: str) -> None:
        """Remove both directions of the ``kind`` edge between two nodes."""

        node1 = Node(name1)
        node2 = Node(name2)
        self._discard(node1, Edge(node2, kind))
        self._discard(node2, Edge(node1, kind))

    def has_edge(self, name1: str, name2: str, kind: str) -> bool:
        """Return ``True`` if ``name1`` holds an edge of ``kind`` to ``name2``."""

        return Edge(Node(name2), kind) in self.adjacency.get(Node(name1), ())

    def get_edges_of_type(self, kind: str) -> str:
        """Return every ``(source, destination)`` pair of ``kind``.

        Pairs are de-duplicated and sorted, so both directions of each
        undirected edge appear once.  An empty string means no match.
        """

        pairs = {
            f"({source.name}, {edge.destination.name})"
            for source, edges in self.adjacency.items()
            for edge in edges
            if edge.kind == kind
        }
        return " ".join(sorted(pairs))

    # -- presentation -----------------------------------------------------

    def render_lines(self) -> List[str]:
        """Return one ``"name: (dest, kind) ..."`` line per node, sorted."""

        lines = []
        for node in sorted(self.adjacency):
            edges = sorted(self.adjacency[node], key=lambda edge: edge.destination.name)
            lines.append(f"{node.name}: " + " ".join(edge.describe() for edge in edges))
        return lines

    def print(self, stream: TextIO | None = None) -> None:
        """Write :meth:`render_lines` to ``stream`` (``sys.stdout`` by default)."""

        out = stream if stream is not None else sys.stdout
        for line in self.render_lines():
            out.write(line + "\n")

    # -- accessors --------------------------------------------------------

    def nodes(self) -> Iterable[str]:
        """Iterate over node names in insertion order."""

        return [node.name for node in self.adjacency]

    def edges(self) -> Iterator[tuple[str, str, str]]:
        """Iterate over ``(source, destination, kind)`` for every stored direction."""

        for source, edges in self.adjacency.items():
            for edge in edges:
                yield source.name, edge.destination.name, edge.kind

    def edges_of(self, name: str) -> List[Edge]:
        """Return a copy of the edge list stored for ``name``."""

        return list(self.adjacency.get(Node(name), ()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and Node(name) in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)

    # -- internal helpers -------------------------------------------------

    def _discard(self, node: Node, edge: Edge) -> None:
        edges = self.adjacency.get(node)
        if edges and edge in edges:
            edges.remove(edge)

    def _reject(self, action: str, msg: str, *names: object, kind: object = None) -> None:
        LOGGER.warning("%s rejected: %s (names=%r, kind=%r)", action, msg, names, kind)
        self.events.emit(
            level="warning",
            msg=msg,
            action=action,
            actor=type(self).__name__,
            target_ids=[name for name in names if isinstance(name, str)],
            extras={"kind": kind},
        )
        if self.strict:
            raise InvalidGraphInput(f"{action}: {msg}")
