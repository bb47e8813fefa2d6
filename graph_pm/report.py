"""
Tabular views of match results
"""

from typing import List, Set

import pandas as pd

from .labeled_graph import LabeledGraph
from .matcher import is_no_match


def mapping_frame(q: LabeledGraph, result: List[Set[int]]) -> pd.DataFrame:
    """One row per query vertex with its label and candidate data vertices"""
    rows = []
    for u, mates in enumerate(result):
        rows.append({
            'Query Vertex': u,
            'Label': q.label[u],
            'Candidates': len(mates),
            'Mates': sorted(mates),
        })
    return pd.DataFrame(rows, columns=['Query Vertex', 'Label', 'Candidates', 'Mates'])


def size_history_frame(history) -> pd.DataFrame:
    """Candidate-set sizes per pass (rows) and query vertex (columns)"""
    df = pd.DataFrame([list(map(int, sizes)) for sizes in history])
    df.index.name = 'Pass'
    df.columns = [f"u{u}" for u in range(df.shape[1])]
    return df


def summarize(name: str, matcher, result: List[Set[int]]) -> dict:
    """One comparison row for a finished matcher run"""
    return {
        'Scenario': name,
        'Method': type(matcher).__name__,
        'Matched': not is_no_match(result),
        'Candidates': sum(len(s) for s in result),
        'Passes': matcher.stats.get('passes', 0),
        'Removals': matcher.stats.get('removals', 0),
        'Runtime (s)': matcher.stats.get('runtime', 0),
    }
