"""
PatternMatcher contract shared by all matching algorithms
"""

from abc import ABC, abstractmethod
from typing import List, Set

import numpy as np

from .exceptions import UnsupportedOperationError
from .labeled_graph import LabeledGraph


def empty_mapping(n: int) -> List[Set[int]]:
    """The no-match result for a query with n vertices"""
    return [set() for _ in range(n)]


def is_no_match(result: List[Set[int]]) -> bool:
    """A result is a failure when any query vertex has no mates"""
    return any(len(s) == 0 for s in result)


def phi_to_sets(phi: np.ndarray) -> List[Set[int]]:
    return [set(int(v) for v in np.flatnonzero(row)) for row in phi]


class PatternMatcher(ABC):
    """
    Capability interface for matching a query graph q against a data graph g

    Subclasses keep their own run state; the base class holds only the
    two graphs, which are never modified.
    """

    def __init__(self, g: LabeledGraph, q: LabeledGraph):
        self.g = g
        self.q = q

    @abstractmethod
    def mappings(self) -> List[Set[int]]:
        """Candidate data vertices for every query vertex, or the empty mapping"""
        pass

    @abstractmethod
    def bijections(self):
        """One-to-one assignments; only isomorphism matchers provide these"""
        pass

    def _unsupported(self, operation: str):
        raise UnsupportedOperationError(operation, type(self).__name__)

    def count_mappings(self) -> int:
        return sum(len(s) for s in self.mappings())

    def show_mappings(self):
        result = self.mappings()
        print(f"{type(self).__name__}: {self.q.name} -> {self.g.name}")
        if is_no_match(result):
            print("  no match")
            return
        for u, mates in enumerate(result):
            print(f"  u{u} ({self.q.label[u]}) -> {sorted(mates)}")
