"""
Breadth-first and depth-first traversal over a LabeledGraph

Vertices are marked visited when they are taken off the frontier, not
when they are put on it, so a vertex can be pushed more than once.
Search results depend on this and on children being pushed in
ascending id order.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Hashable, List, Optional

import numpy as np

from .exceptions import VertexRangeError
from .labeled_graph import LabeledGraph


class GraphTraversal(ABC):
    """Base class for frontier-driven graph search"""

    def __init__(self, g: LabeledGraph):
        self.g = g
        self.visited = np.zeros(g.size(), dtype=bool)

    @abstractmethod
    def _new_frontier(self):
        """Create an empty frontier"""
        pass

    @abstractmethod
    def _take(self, frontier) -> int:
        """Remove and return the next vertex to process"""
        pass

    def _check_vertex(self, v: int):
        n = self.g.size()
        if not 0 <= v < n:
            raise VertexRangeError(f"Vertex {v} outside 0..{n - 1} in graph '{self.g.name}'",
                                   vertex=v, size=n)

    def _expand(self, frontier, v: int):
        # Child ids were range-checked when the graph was built
        for c in self.g.child_array(v):
            c = int(c)
            if not self.visited[c]:
                frontier.append(c)

    def _visit(self, start: int):
        """Yield vertices reachable from start in processing order"""
        frontier = self._new_frontier()
        frontier.append(start)

        while frontier:
            v = self._take(frontier)
            if self.visited[v]:
                continue
            self.visited[v] = True
            yield v
            self._expand(frontier, v)

    def find(self, lab: Hashable) -> Optional[int]:
        """First vertex with the given label, or None"""
        self.visited.fill(False)

        for start in range(self.g.size()):
            if self.visited[start]:
                continue
            for v in self._visit(start):
                if self.g.label[v] == lab:
                    return v
        return None

    def reach(self, i: int, k: int) -> bool:
        """Whether a directed path leads from i to k"""
        self._check_vertex(i)
        self._check_vertex(k)
        self.visited.fill(False)

        for v in self._visit(i):
            if v == k:
                return True
        return False

    def order(self, i: int) -> List[int]:
        """Vertices reachable from i, in the order they are processed"""
        self._check_vertex(i)
        self.visited.fill(False)
        return list(self._visit(i))


class BreadthFirstSearch(GraphTraversal):
    """FIFO frontier"""

    def _new_frontier(self):
        return deque()

    def _take(self, frontier) -> int:
        return frontier.popleft()


class DepthFirstSearch(GraphTraversal):
    """Explicit stack frontier"""

    def _new_frontier(self):
        return []

    def _take(self, frontier) -> int:
        return frontier.pop()
