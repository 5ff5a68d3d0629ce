"""Value types for the route graph."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class InvalidGraphInput(ValueError):
    """Raised for rejected graph calls when strict mode is enabled."""


def is_valid_label(value: Any) -> bool:
    """Return ``True`` when ``value`` is a non-empty string."""

    return isinstance(value, str) and value != ""


@dataclass(frozen=True, order=True)
class Node:
    """A vertex identified solely by its case-sensitive ``name``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Edge:
    """One direction of an undirected connection.

    Two edges are equal when both ``destination`` and ``kind`` match, which is
    what lets the graph reject duplicates per adjacency list.
    """

    destination: Node
    kind: str

    def describe(self) -> str:
        """Return the ``(destination, kind)`` form used when printing."""

        return f"({self.destination.name}, {self.kind})"


__all__ = ["Edge", "InvalidGraphInput", "Node", "is_valid_label"]
