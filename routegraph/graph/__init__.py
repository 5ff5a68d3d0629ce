"""Graph subpackage containing the value types, store and exporters."""

from .export import GraphExporter, to_networkx
from .model import Edge, InvalidGraphInput, Node
from .store import Graph

__all__ = [
    "Edge",
    "Graph",
    "GraphExporter",
    "InvalidGraphInput",
    "Node",
    "to_networkx",
]
