"""
Directed labeled graph used as both data graph and query graph
Vertices are dense integer ids 0..n-1
"""

from collections import defaultdict
from types import MappingProxyType
from typing import Dict, FrozenSet, Hashable, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

import numpy as np

from .exceptions import InverseNotBuiltError, VertexRangeError

_NO_VERTICES: FrozenSet[int] = frozenset()


class LabeledGraph:
    """
    Directed (multi-)graph with vertex labels and optional edge labels

    The graph is built once from an adjacency array and a parallel label
    array and is not modified afterwards, so one instance can be shared
    by any number of matcher runs. Adjacency sets are frozensets, labels a
    tuple, edge labels a read-only mapping and the numpy arrays are
    flagged non-writeable.
    """

    def __init__(self,
                 ch: Sequence,
                 label: Sequence[Hashable],
                 elabel: Optional[Dict[Tuple[int, int], Hashable]] = None,
                 inverse: bool = False,
                 name: str = "g"):

        if len(ch) != len(label):
            raise VertexRangeError(
                f"Graph '{name}': {len(ch)} adjacency sets but {len(label)} labels",
                size=len(ch))

        self.name = name
        self.ch: Tuple[FrozenSet[int], ...] = tuple(frozenset(c) for c in ch)
        self.label: Tuple[Hashable, ...] = tuple(label)
        self.elabel: Mapping[Tuple[int, int], Hashable] = MappingProxyType(dict(elabel or {}))

        n = len(self.ch)
        for v, children in enumerate(self.ch):
            for c in children:
                if not 0 <= c < n:
                    raise VertexRangeError(
                        f"Graph '{name}': vertex {v} has child {c} outside 0..{n - 1}",
                        vertex=c, size=n)

        # Label index partitions the vertex set
        index = defaultdict(set)
        for v, lab in enumerate(self.label):
            index[lab].add(v)
        self.label_index: Mapping[Hashable, FrozenSet[int]] = MappingProxyType({
            lab: frozenset(vs) for lab, vs in index.items()
        })

        # Dense arrays for the bitset refinement
        self.out_degrees = np.array([len(c) for c in self.ch], dtype=np.intp)
        self.out_degrees.flags.writeable = False
        self._ch_idx = tuple(np.array(sorted(c), dtype=np.intp) for c in self.ch)
        for arr in self._ch_idx:
            arr.flags.writeable = False

        self.par: Optional[Tuple[FrozenSet[int], ...]] = None
        if inverse:
            parents = [set() for _ in range(n)]
            for v, children in enumerate(self.ch):
                for c in children:
                    parents[c].add(v)
            self.par = tuple(frozenset(p) for p in parents)

    def size(self) -> int:
        return len(self.ch)

    def __len__(self):
        return len(self.ch)

    def n_edges(self) -> int:
        return int(self.out_degrees.sum())

    def children(self, v: int) -> FrozenSet[int]:
        return self.ch[v]

    def child_array(self, v: int) -> np.ndarray:
        """Children of v as a sorted integer array"""
        return self._ch_idx[v]

    def out_degree(self, v: int) -> int:
        return int(self.out_degrees[v])

    def has_inverse(self) -> bool:
        return self.par is not None

    def parents(self, v: int) -> FrozenSet[int]:
        if self.par is None:
            raise InverseNotBuiltError(self.name)
        return self.par[v]

    def self_loop_count(self) -> int:
        return sum(1 for v, children in enumerate(self.ch) if v in children)

    def vertices_with_label(self, lab: Hashable) -> FrozenSet[int]:
        return self.label_index.get(lab, _NO_VERTICES)

    def labels(self) -> Set[Hashable]:
        return set(self.label_index)

    def edges(self) -> Iterator[Tuple[int, int]]:
        """All edges (u, v) in ascending order"""
        for u, children in enumerate(self._ch_idx):
            for v in children:
                yield u, int(v)

    def edge_label(self, u: int, v: int) -> Optional[Hashable]:
        return self.elabel.get((u, v))

    def missing_edge_labels(self) -> List[Tuple[int, int]]:
        """Edge-label keys that do not name an edge of the graph"""
        n = len(self.ch)
        return sorted(
            (u, v) for (u, v) in self.elabel
            if not (0 <= u < n) or v not in self.ch[u]
        )

    def validate_edge_labels(self, verbose: bool = True) -> bool:
        """
        Check that every edge label refers to an existing edge

        Inconsistent keys are reported, never removed.
        """
        missing = self.missing_edge_labels()
        if verbose:
            for u, v in missing:
                print(f"✗ {self.name}: edge label {self.elabel[(u, v)]!r} on ({u}, {v}) has no edge")
        return not missing

    def is_connected(self) -> bool:
        """
        Every vertex touches at least one edge

        A vertex counts when it is the target of some edge or has
        outgoing edges of its own. This is not a reachability closure.
        """
        touched = set()
        for v, children in enumerate(self.ch):
            if children:
                touched.add(v)
                touched.update(children)
        return len(touched) == len(self.ch)

    def clone(self) -> "LabeledGraph":
        """Copy rebuilt from scratch, sharing no containers or arrays with self"""
        return LabeledGraph(list(self.ch),
                            list(self.label),
                            dict(self.elabel),
                            inverse=self.par is not None,
                            name=self.name)

    def summary(self) -> Dict:
        return {
            'name': self.name,
            'vertices': self.size(),
            'edges': self.n_edges(),
            'labels': len(self.label_index),
            'self_loops': self.self_loop_count(),
            'max_out_degree': int(self.out_degrees.max()) if self.size() else 0,
        }

    def __repr__(self):
        return f"LabeledGraph({self.name}, V={self.size()}, E={self.n_edges()})"
