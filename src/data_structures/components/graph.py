"""
Directed graph stored as adjacency lists.

Each vertex keeps the list of vertices it has an edge to. Vertex values
act as identifiers for lookups; adding two vertices with the same value
is allowed but makes lookups return the first one only. Parallel edges
are allowed too.

     ┌───────┐      ┌───────┐      ┌───────┐
     │   0   │ ───▶ │   1   │ ◀─── │   2   │
     └───────┘      └───────┘      └───────┘
         │     ╲        │     ╲        ▲
         ▼       ◢      ▼       ◢      │
     ┌───────┐      ┌───────┐      ┌───────┐
     │   5   │      │   4   │ ◀─── │   3   │
     └───────┘      └───────┘      └───────┘
"""

from __future__ import annotations

import logging
from typing import Generic, Iterator, List, Optional, Set, Tuple

from ..core.errors import NotFoundError
from ..core.types import H
from .queue import Queue

logger = logging.getLogger(__name__)


class Vertex(Generic[H]):
    """A vertex holding a value and references to its adjacent vertices."""

    __slots__ = ("value", "adjacent")

    def __init__(self, value: H) -> None:
        self.value = value
        self.adjacent: List[Vertex[H]] = []

    def __repr__(self) -> str:
        return f"Vertex({self.value!r} -> {[v.value for v in self.adjacent]!r})"


class Graph(Generic[H]):
    """
    Graph implements add_vertex, add_edge, get, has_path_dfs,
    has_path_bfs, remove_vertex, remove_edge and remove_all.

    Invariants:
        - Every adjacent reference points at a vertex still in the graph
        - Traversals terminate on cyclic graphs
    """

    def __init__(self) -> None:
        self.nodes: List[Vertex[H]] = []

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Vertex[H]]:
        return iter(self.nodes)

    def __contains__(self, value: object) -> bool:
        return any(node.value == value for node in self.nodes)

    def __repr__(self) -> str:
        return f"Graph({self.nodes!r})"

    def vertices(self) -> List[H]:
        return [node.value for node in self.nodes]

    def _require(self, source: H, destination: H) -> Tuple[Vertex[H], Vertex[H]]:
        """Looks up both endpoints, raising NotFoundError if either is missing."""
        source_node = self.get(source)
        if source_node is None:
            raise NotFoundError(f"Source vertex {source!r} is not found.")
        destination_node = self.get(destination)
        if destination_node is None:
            raise NotFoundError(f"Destination vertex {destination!r} is not found.")
        return source_node, destination_node

    def add_vertex(self, value: H) -> Graph[H]:
        self.nodes.append(Vertex(value))
        return self

    def add_edge(self, source: H, destination: H) -> Graph[H]:
        """Adds a directed edge from source to destination."""
        source_node, destination_node = self._require(source, destination)
        source_node.adjacent.append(destination_node)
        return self

    def get(self, value: H) -> Optional[Vertex[H]]:
        """Returns the first vertex holding value, or None. O(V)."""
        for node in self.nodes:
            if node.value == value:
                return node
        return None

    def has_path_dfs(self, source: H, destination: H) -> bool:
        """
        Returns whether destination is reachable from source,
        exploring depth-first. Visited values are remembered so
        cycles do not recurse forever.
        Time Complexity: O(V + E)
        """
        source_node, destination_node = self._require(source, destination)
        visited: Set[H] = set()

        def _visit(node: Vertex[H]) -> bool:
            if node.value in visited:
                return False
            visited.add(node.value)

            if node.value == destination_node.value:
                return True

            for child in node.adjacent:
                if _visit(child):
                    return True
            return False

        return _visit(source_node)

    def has_path_bfs(self, source: H, destination: H) -> bool:
        """
        Returns whether destination is reachable from source,
        exploring breadth-first.
        Time Complexity: O(V + E)
        """
        source_node, destination_node = self._require(source, destination)
        visited: Set[H] = set()
        queue: Queue[Vertex[H]] = Queue()
        queue.enqueue(source_node)

        while not queue.is_empty():
            current = queue.dequeue()
            assert current is not None

            if current.value == destination_node.value:
                return True

            if current.value in visited:
                continue
            visited.add(current.value)

            for child in current.adjacent:
                queue.enqueue(child)

        return False

    def remove_vertex(self, value: H) -> Optional[Vertex[H]]:
        """
        Removes and returns the first vertex holding value, then strips
        every edge pointing at it from the remaining vertices.
        Returns None if no vertex holds value.
        Time Complexity: O(V + E)
        """
        removed = self.get(value)
        if removed is None:
            return None

        self.nodes.remove(removed)

        stripped = 0
        for node in self.nodes:
            before = len(node.adjacent)
            node.adjacent = [v for v in node.adjacent if v is not removed]
            stripped += before - len(node.adjacent)

        logger.debug(f"Removed vertex {value!r} and {stripped} incoming edge(s)")
        return removed

    def remove_edge(self, source: H, destination: H) -> Optional[Graph[H]]:
        """
        Removes the first edge from source to a vertex holding destination.
        Returns the graph, or None when source has no such edge.
        Raises NotFoundError if source is not a vertex.
        """
        source_node = self.get(source)
        if source_node is None:
            raise NotFoundError(f"Source vertex {source!r} is not found.")

        for i, adjacent in enumerate(source_node.adjacent):
            if adjacent.value == destination:
                del source_node.adjacent[i]
                return self
        return None

    def remove_all(self) -> Graph[H]:
        self.nodes = []
        return self
