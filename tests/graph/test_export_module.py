"""Tests for :mod:`routegraph.graph.export`."""

from __future__ import annotations

import json

import pytest

from routegraph.graph.export import GraphExporter, to_networkx
from routegraph.graph.store import Graph


def build_graph() -> Graph:
    graph = Graph()
    graph.add_edge("Auckland", "Christchurch", "Plane")
    graph.add_edge("Auckland", "Christchurch", "Road")
    graph.add_node("Taupo")
    return graph


def test_to_networkx_collapses_directions():
    result = to_networkx(build_graph())

    assert set(result.nodes) == {"Auckland", "Christchurch", "Taupo"}
    assert result.number_of_edges() == 2
    assert result.has_edge("Christchurch", "Auckland", key="Plane")
    assert result.edges["Auckland", "Christchurch", "Road"]["kind"] == "Road"


def test_export_lines_matches_print():
    exported = GraphExporter(graph=build_graph()).export(format="lines")

    assert exported == (
        "Auckland: (Christchurch, Plane) (Christchurch, Road)\n"
        "Christchurch: (Auckland, Plane) (Auckland, Road)\n"
        "Taupo: \n"
    )


def test_export_json_is_node_link_data():
    payload = json.loads(GraphExporter(graph=build_graph()).export())

    assert {node["id"] for node in payload["nodes"]} == {"Auckland", "Christchurch", "Taupo"}
    assert sorted(link["key"] for link in payload["links"]) == ["Plane", "Road"]


def test_graph_exporter_rejects_unknown_format():
    exporter = GraphExporter(graph=Graph())
    with pytest.raises(ValueError):
        exporter.export(format="unsupported")
