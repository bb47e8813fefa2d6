"""
Initial candidate mapping (feasible mates) for a query/data graph pair
"""

from typing import List

import numpy as np

from .filters import FilterManager, MateFilter, OutDegreeFilter
from .labeled_graph import LabeledGraph


class FeasibleMateInitializer:
    """
    Computes phi0(u) = {v in G : label(v) == label(u), outdeg(v) >= outdeg(u)}

    phi is a boolean matrix with one row (bitset over data vertices) per
    query vertex. Candidates are seeded from the data graph's label
    index and then passed through the configured filters.
    """

    def __init__(self, g: LabeledGraph, q: LabeledGraph, filters: List[MateFilter] = None):
        self.g = g
        self.q = q
        self.filter_manager = FilterManager(filters if filters is not None else [OutDegreeFilter()])
        self.first_empty = None

    def compute(self) -> np.ndarray:
        """
        Build phi0

        Stops at the first query vertex left without mates; the returned
        matrix is then all False and first_empty names that vertex.
        """
        phi = np.zeros((self.q.size(), self.g.size()), dtype=bool)
        self.first_empty = None

        for u in range(self.q.size()):
            seed = self.g.vertices_with_label(self.q.label[u])
            candidates = np.array(sorted(seed), dtype=np.intp)
            candidates = self.filter_manager.apply(self.g, self.q, u, candidates)

            if len(candidates) == 0:
                self.first_empty = u
                phi[:] = False
                return phi

            phi[u, candidates] = True

        return phi

    def get_stats(self):
        return self.filter_manager.get_all_stats()


def feasible_mates(g: LabeledGraph, q: LabeledGraph, strict_degree: bool = False) -> np.ndarray:
    """phi0 with the default out-degree filter"""
    return FeasibleMateInitializer(g, q, [OutDegreeFilter(strict=strict_degree)]).compute()


def is_empty(phi: np.ndarray) -> bool:
    """True when some query vertex has no candidate left"""
    return phi.shape[0] > 0 and not phi.any(axis=1).all()
