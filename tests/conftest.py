import pytest

from graph_pm import LabeledGraph


@pytest.fixture
def cycle3():
    """Directed 3-cycle 0 -> 1 -> 2 -> 0, every vertex labelled 'A'"""
    return LabeledGraph([{1}, {2}, {0}], ['A', 'A', 'A'], name='cycle3')


@pytest.fixture
def diamond():
    """
    0 -> {1, 2}, 1 -> 3, 2 -> 3 with labels A, B, B, C
    Used for traversal order checks.
    """
    return LabeledGraph([{1, 2}, {3}, {3}, set()], ['A', 'B', 'B', 'C'],
                        inverse=True, name='diamond')


@pytest.fixture
def social():
    """People following people who follow posts that point back at people"""
    return LabeledGraph(
        [{1, 3}, {2}, {0}, {4}, set(), {6}, {7}, {5, 8}, set()],
        ['person', 'person', 'post', 'person', 'post',
         'person', 'person', 'post', 'post'],
        name='social'
    )


@pytest.fixture
def triangle_query():
    return LabeledGraph([{1}, {2}, {0}], ['person', 'person', 'post'], name='triangle')


@pytest.fixture
def graph_factory():
    """
    Factory for LabeledGraph instances from (children, labels) lists.

    Usage:
        g = graph_factory([[1], []], ['A', 'B'])
    """

    def _factory(ch, labels, **kwargs) -> LabeledGraph:
        return LabeledGraph([set(c) for c in ch], labels, **kwargs)

    return _factory
