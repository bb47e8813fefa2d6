"""
Matcher configuration and presets
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .filters import MateFilter, OutDegreeFilter


@dataclass
class MatchConfig:
    """
    Options shared by the simulation matchers

    self_loop_intersect has no default: for a query self-loop (u, u) the
    caller chooses between intersecting phi(u) with the new child set or
    overwriting it.
    """
    self_loop_intersect: bool
    degree_filter: bool = True
    strict_degree: bool = False
    verbose: bool = False
    should_stop: Optional[Callable[[], bool]] = None
    extra_filters: List[MateFilter] = field(default_factory=list)

    def build_filters(self) -> List[MateFilter]:
        """Filters for one matching run (extra filters keep their counters)"""
        filters = list(self.extra_filters)
        if self.degree_filter:
            filters.append(OutDegreeFilter(strict=self.strict_degree))
        return filters


class MatchPresets:
    """Predefined configurations"""

    @staticmethod
    def intersecting(verbose: bool = False) -> MatchConfig:
        """Self-loops keep constraints from other edges into the same vertex"""
        return MatchConfig(self_loop_intersect=True, verbose=verbose)

    @staticmethod
    def overwriting(verbose: bool = False) -> MatchConfig:
        """Every query edge overwrites the child's candidate set"""
        return MatchConfig(self_loop_intersect=False, verbose=verbose)

    @staticmethod
    def label_only(self_loop_intersect: bool = True) -> MatchConfig:
        """Skip degree pruning; candidates start from the label index alone"""
        return MatchConfig(self_loop_intersect=self_loop_intersect, degree_filter=False)
