"""
Experiment suite
Runs the simulation matchers over a set of small reference scenarios
and tabulates the results
"""

import os
import time

import pandas as pd

from graph_pm import DualSimulation, GraphSimulation, LabeledGraph, GraphMatchError
from graph_pm.report import mapping_frame, summarize


def build_scenarios():
    """Reference (data graph, query graph) pairs keyed by scenario name"""

    cycle = LabeledGraph([{1}, {2}, {0}], ['A', 'A', 'A'], name='cycle3')

    scenarios = {
        'self-loop on cycle': (
            cycle,
            LabeledGraph([{0}], ['A'], name='loop'),
        ),
        'missing label': (
            cycle,
            LabeledGraph([set()], ['B'], name='single-B'),
        ),
        'dangling parent': (
            LabeledGraph([{1}, set(), set()], ['A', 'B', 'A'], name='chain'),
            LabeledGraph([{1}, set()], ['A', 'B'], name='edge-AB'),
        ),
    }

    # Two groups of people following each other, one group with a
    # person who follows nobody
    follows = LabeledGraph(
        [{1, 3}, {2}, {0}, {4}, set(), {6}, {7}, {5, 8}, set()],
        ['person', 'person', 'post', 'person', 'post',
         'person', 'person', 'post', 'post'],
        name='social'
    )
    triangle = LabeledGraph([{1}, {2}, {0}], ['person', 'person', 'post'], name='person-person-post')
    scenarios['social triangle'] = (follows, triangle)

    return scenarios


def run_all_experiments(save_results: bool = True, self_loop_intersect: bool = True):
    """
    Run every matcher on every scenario and compare results

    Args:
        save_results: Whether to write the comparison table to ./results
        self_loop_intersect: Self-loop policy handed to dual simulation
    """

    print("="*80)
    print(" "*25 + "GRAPH SIMULATION EXPERIMENTS")
    print("="*80)

    if save_results:
        os.makedirs('results', exist_ok=True)

    results = []
    all_mappings = {}

    for name, (g, q) in build_scenarios().items():
        print("\n" + "─"*80)
        print(f"Scenario: {name}  ({g} vs {q})")
        print("─"*80)

        matchers = [
            DualSimulation(g, q, self_loop_intersect=self_loop_intersect),
            GraphSimulation(g, q),
        ]

        for matcher in matchers:
            method = type(matcher).__name__
            try:
                start = time.time()
                result = matcher.mappings()
                elapsed = time.time() - start

                row = summarize(name, matcher, result)
                row['Runtime (s)'] = elapsed
                row['Status'] = 'Success'
                results.append(row)
                all_mappings[(name, method)] = result

                print(f"✓ {method}: {row['Candidates']} candidates in {row['Passes']} passes")
                print(mapping_frame(q, result).to_string(index=False))

            except GraphMatchError as e:
                print(f"✗ {method} failed: {e}")
                results.append({
                    'Scenario': name,
                    'Method': method,
                    'Matched': False,
                    'Candidates': 0,
                    'Passes': 0,
                    'Removals': 0,
                    'Runtime (s)': 0,
                    'Status': f'Failed: {e.code}'
                })

    print("\n" + "="*80)
    print(" "*30 + "COMPARATIVE RESULTS")
    print("="*80)

    df = pd.DataFrame(results)
    print("\n" + df.to_string(index=False))

    if save_results:
        df.to_csv('results/comparison_results.csv', index=False)
        print("\n✓ Saved comparison table to 'results/comparison_results.csv'")

    return df, all_mappings


def main():
    """Main execution"""
    results_df, _ = run_all_experiments(save_results=True)

    matched = results_df[results_df['Matched']]
    print(f"\nMatched {len(matched)}/{len(results_df)} runs")


if __name__ == "__main__":
    main()
