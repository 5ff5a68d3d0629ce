"""routegraph package initialization.

This module exposes :class:`Graph`, the undirected typed-edge graph used by
external callers, along with its value types.
"""

from .graph import Edge, Graph, InvalidGraphInput, Node

__all__ = ["Edge", "Graph", "InvalidGraphInput", "Node"]
