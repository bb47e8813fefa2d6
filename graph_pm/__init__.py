"""
Approximate subgraph pattern matching over labeled directed graphs
Dual graph simulation with label and degree pruning
"""

__version__ = "1.0.0"

from .labeled_graph import LabeledGraph
from .traversal import GraphTraversal, BreadthFirstSearch, DepthFirstSearch
from .filters import MateFilter, OutDegreeFilter, FilterManager
from .feasible import FeasibleMateInitializer, feasible_mates, is_empty
from .matcher import PatternMatcher, empty_mapping, is_no_match
from .dual_sim import DualSimulation, DualSimulationRefiner
from .graph_sim import GraphSimulation
from .config import MatchConfig, MatchPresets
from .exceptions import (
    GraphMatchError, VertexRangeError, InverseNotBuiltError,
    UnsupportedOperationError, MatchCancelled
)

__all__ = [
    'LabeledGraph',
    'GraphTraversal', 'BreadthFirstSearch', 'DepthFirstSearch',
    'MateFilter', 'OutDegreeFilter', 'FilterManager',
    'FeasibleMateInitializer', 'feasible_mates', 'is_empty',
    'PatternMatcher', 'empty_mapping', 'is_no_match',
    'DualSimulation', 'DualSimulationRefiner', 'GraphSimulation',
    'MatchConfig', 'MatchPresets',
    'GraphMatchError', 'VertexRangeError', 'InverseNotBuiltError',
    'UnsupportedOperationError', 'MatchCancelled'
]
