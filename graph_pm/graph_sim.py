"""
Plain graph simulation (child constraints only)
"""

import time
from typing import List, Optional, Set

import numpy as np

from .config import MatchConfig
from .exceptions import MatchCancelled
from .feasible import FeasibleMateInitializer, is_empty
from .labeled_graph import LabeledGraph
from .matcher import PatternMatcher, empty_mapping, phi_to_sets


class GraphSimulation(PatternMatcher):
    """
    Graph simulation matcher

    Removes v from phi(u) whenever a query edge (u, uc) finds no child
    of v in phi(uc), until nothing more can be removed. Unlike dual
    simulation, candidates of uc are not required to have a parent in
    phi(u), so every dual simulation result is contained in this one.
    """

    def __init__(self, g: LabeledGraph, q: LabeledGraph, config: MatchConfig = None, **options):
        super().__init__(g, q)
        options.setdefault('self_loop_intersect', True)
        self.config = config if config is not None else MatchConfig(**options)
        self.verbose = self.config.verbose
        self.query_edges = list(q.edges())
        self.stats = {'passes': 0, 'removals': 0, 'runtime': 0}
        self.phi: Optional[np.ndarray] = None

    def mappings(self) -> List[Set[int]]:
        start_time = time.time()
        self.stats = {'passes': 0, 'removals': 0, 'runtime': 0}

        phi = FeasibleMateInitializer(self.g, self.q, self.config.build_filters()).compute()
        self.phi = phi
        if is_empty(phi):
            return empty_mapping(self.q.size())

        changed = True
        while changed:
            if self.config.should_stop is not None and self.config.should_stop():
                raise MatchCancelled(self.stats['passes'])
            self.stats['passes'] += 1
            changed = False

            for u, uc in self.query_edges:
                for v in np.flatnonzero(phi[u]):
                    children = self.g.child_array(v)
                    if not phi[uc, children].any():
                        phi[u, v] = False
                        self.stats['removals'] += 1
                        changed = True
                if not phi[u].any():
                    phi[:] = False
                    self.stats['runtime'] = time.time() - start_time
                    return empty_mapping(self.q.size())

        self.stats['runtime'] = time.time() - start_time
        if self.verbose:
            print(f"  Graph simulation: {self.stats['passes']} passes, "
                  f"{self.stats['removals']} removals, {int(phi.sum())} candidates")
        return phi_to_sets(phi)

    def bijections(self):
        """Simulation relations are not one-to-one"""
        self._unsupported("bijections")
