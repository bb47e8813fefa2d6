"""
Mate filters for initial candidate pruning
A filter decides whether a data vertex may stand in for a query vertex
"""

from abc import ABC, abstractmethod
from typing import List

import numpy as np

from .labeled_graph import LabeledGraph


class MateFilter(ABC):
    """Base class for all mate filters"""

    def __init__(self, name: str):
        self.name = name
        self.check_count = 0
        self.prune_count = 0

    @abstractmethod
    def allowed(self, g: LabeledGraph, q: LabeledGraph, u: int, candidates: np.ndarray) -> np.ndarray:
        """Boolean mask over candidates (data vertex ids) that may match u"""
        pass

    def apply(self, g: LabeledGraph, q: LabeledGraph, u: int, candidates: np.ndarray) -> np.ndarray:
        """Keep only the allowed candidates and update the counters"""
        mask = self.allowed(g, q, u, candidates)
        self.check_count += len(candidates)
        self.prune_count += int(len(candidates) - mask.sum())
        return candidates[mask]

    def get_stats(self):
        return {
            'name': self.name,
            'checks': self.check_count,
            'prunes': self.prune_count,
            'prune_rate': self.prune_count / max(self.check_count, 1)
        }


class OutDegreeFilter(MateFilter):
    """
    Out-degree of the data vertex must cover the query vertex

    The data graph may fan out further than the query, so the
    comparison is >= unless strict is set.
    """

    def __init__(self, strict: bool = False):
        super().__init__("OutDegree(>)" if strict else "OutDegree(>=)")
        self.strict = strict

    def allowed(self, g, q, u, candidates):
        need = q.out_degree(u)
        degrees = g.out_degrees[candidates]
        return degrees > need if self.strict else degrees >= need


class FilterManager:
    """Runs filters cheapest first and stops when nothing is left"""

    COST = {
        'OutDegree': 1,
    }

    def __init__(self, filters: List[MateFilter]):
        self.filters = sorted(filters, key=self._estimate_cost)

    def _estimate_cost(self, f: MateFilter) -> int:
        for key, cost in self.COST.items():
            if f.name.startswith(key):
                return cost
        return 100

    def apply(self, g: LabeledGraph, q: LabeledGraph, u: int, candidates: np.ndarray) -> np.ndarray:
        for f in self.filters:
            if len(candidates) == 0:
                break
            candidates = f.apply(g, q, u, candidates)
        return candidates

    def get_all_stats(self):
        return [f.get_stats() for f in self.filters]
