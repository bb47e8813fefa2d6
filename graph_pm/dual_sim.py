"""
Dual graph simulation
Iteratively refines the feasible-mate mapping until a fixpoint is reached
"""

import time
from typing import Callable, Dict, List, Optional, Set

import numpy as np

from .config import MatchConfig
from .exceptions import MatchCancelled
from .feasible import FeasibleMateInitializer, is_empty
from .labeled_graph import LabeledGraph
from .matcher import PatternMatcher, empty_mapping, phi_to_sets


class DualSimulationRefiner:
    """
    Fixpoint engine over a candidate matrix phi

    For every query edge (u, uc), each v in phi(u) must have a child in
    phi(uc), and phi(uc) is narrowed to the children reached from
    phi(u). Passes over all query edges repeat until one changes nothing.
    Each step leaves phi(uc) a subset of what it was when the step
    started, and a pass counts as changed only when some row actually
    differs afterwards, so the number of passes is bounded by the total
    number of initial candidates. Overwriting a query self-loop can
    re-admit a vertex removed earlier in the same step.
    """

    def __init__(self,
                 g: LabeledGraph,
                 q: LabeledGraph,
                 self_loop_intersect: bool,
                 should_stop: Optional[Callable[[], bool]] = None,
                 verbose: bool = False):

        self.g = g
        self.q = q
        self.self_loop_intersect = self_loop_intersect
        self.should_stop = should_stop
        self.verbose = verbose
        self.query_edges = list(q.edges())

        self.stats = self._fresh_stats()
        # Candidate-set sizes per query vertex, one entry per completed pass
        self.history: List[np.ndarray] = []

    @staticmethod
    def _fresh_stats() -> Dict:
        return {
            'passes': 0,
            'removals': 0,
            'edge_checks': 0,
            'converged': False,
            'runtime': 0
        }

    def refine(self, phi: np.ndarray) -> bool:
        """
        Refine phi in place

        Returns True at a fixpoint. Returns False, with phi cleared, as
        soon as some query vertex loses its last candidate.
        """
        self.stats = self._fresh_stats()
        self.history = [phi.sum(axis=1)]
        start_time = time.time()

        try:
            changed = True
            while changed:
                if self.should_stop is not None and self.should_stop():
                    raise MatchCancelled(self.stats['passes'])

                self.stats['passes'] += 1
                changed = False

                for u, uc in self.query_edges:
                    edge_changed = self._refine_edge(phi, u, uc)
                    if edge_changed is None:
                        phi[:] = False
                        if self.verbose:
                            print(f"  Pass {self.stats['passes']}: edge ({u}, {uc}) left no mates")
                        return False
                    changed = changed or edge_changed

                self.history.append(phi.sum(axis=1))
                if self.verbose:
                    print(f"  Pass {self.stats['passes']}: {int(phi.sum())} candidates"
                          f"{'' if changed else ' (fixpoint)'}")

            self.stats['converged'] = True
            return True
        finally:
            self.stats['runtime'] = time.time() - start_time

    def _refine_edge(self, phi: np.ndarray, u: int, uc: int) -> Optional[bool]:
        """
        Enforce one query edge

        Returns None on failure, otherwise whether phi changed.
        """
        new_set = np.zeros(self.g.size(), dtype=bool)
        target = phi[uc]
        before_u = phi[u].copy()
        before_uc = target.copy()

        for v in np.flatnonzero(phi[u]):
            self.stats['edge_checks'] += 1
            children = self.g.child_array(v)
            overlap = children[target[children]]

            if overlap.size == 0:
                phi[u, v] = False
                self.stats['removals'] += 1
                if not phi[u].any():
                    return None
            else:
                new_set[overlap] = True

        if not new_set.any():
            return None

        if uc == u and self.self_loop_intersect:
            phi[uc] &= new_set
        else:
            phi[uc] = new_set

        return not (np.array_equal(phi[u], before_u) and np.array_equal(phi[uc], before_uc))


class DualSimulation(PatternMatcher):
    """
    Dual simulation matcher

    Options are given either as a MatchConfig or as its keyword
    arguments, e.g. DualSimulation(g, q, self_loop_intersect=True).
    """

    def __init__(self, g: LabeledGraph, q: LabeledGraph, config: MatchConfig = None, **options):
        super().__init__(g, q)
        self.config = config if config is not None else MatchConfig(**options)
        self.verbose = self.config.verbose

        self.stats = DualSimulationRefiner._fresh_stats()
        self.history: List[np.ndarray] = []
        self.filter_stats = []
        self.phi: Optional[np.ndarray] = None

        if self.verbose:
            self._print_init()

    def _print_init(self):
        print(f"\n{'='*70}")
        print(f"{'DUAL SIMULATION':^70}")
        print(f"{'='*70}")
        print(f"  Data graph:  {self.g}")
        print(f"  Query graph: {self.q}")
        print(f"  Self-loop policy: {'intersect' if self.config.self_loop_intersect else 'overwrite'}")
        print(f"  Degree filter: {self.config.degree_filter}")
        print(f"{'='*70}\n")

    def mappings(self) -> List[Set[int]]:
        initializer = FeasibleMateInitializer(self.g, self.q, self.config.build_filters())
        phi = initializer.compute()
        self.filter_stats = initializer.get_stats()
        self.phi = phi

        if is_empty(phi):
            self.stats = DualSimulationRefiner._fresh_stats()
            self.history = []
            if self.verbose:
                print(f"  No feasible mates for query vertex {initializer.first_empty}")
            return empty_mapping(self.q.size())

        refiner = DualSimulationRefiner(self.g, self.q,
                                        self.config.self_loop_intersect,
                                        should_stop=self.config.should_stop,
                                        verbose=self.verbose)
        matched = refiner.refine(phi)
        self.stats = refiner.stats
        self.history = refiner.history

        if self.verbose:
            self._print_results(matched)

        if not matched:
            return empty_mapping(self.q.size())
        return phi_to_sets(phi)

    def bijections(self):
        """Dual simulation is many-valued; it never yields bijections"""
        self._unsupported("bijections")

    def _print_results(self, matched: bool):
        print(f"\n{'='*70}")
        print(f"  Result: {'match' if matched else 'no match'}")
        print(f"  Passes: {self.stats['passes']}")
        print(f"  Removals: {self.stats['removals']}")
        print(f"  Runtime: {self.stats['runtime']:.4f}s")
        print(f"{'='*70}\n")
