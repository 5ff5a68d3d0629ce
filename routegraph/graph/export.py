"""Graph export utilities."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Literal

import networkx as nx

from .store import Graph


def to_networkx(graph: Graph) -> nx.MultiGraph:
    """Return ``graph`` as a :class:`networkx.MultiGraph` keyed by edge kind.

    Both stored directions of a connection collapse onto one undirected edge.
    """

    result = nx.MultiGraph()
    result.add_nodes_from(graph.nodes())
    for source, target, kind in graph.edges():
        result.add_edge(source, target, key=kind, kind=kind)
    return result


@dataclass
class GraphExporter:
    """Serialize the in-memory graph to a portable representation."""

    graph: Graph

    def export(self, *, format: Literal["json", "lines"] = "json") -> str:
        """Export the graph to the requested ``format``."""

        if format == "lines":
            return "".join(line + "\n" for line in self.graph.render_lines())
        if format == "json":
            data = nx.node_link_data(to_networkx(self.graph), edges="links")
            return json.dumps(data, sort_keys=True)
        raise ValueError(f"Unsupported export format: {format}")
