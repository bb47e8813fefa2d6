import pytest

from graph_pm import BreadthFirstSearch, DepthFirstSearch, VertexRangeError


@pytest.mark.parametrize(
    "search_cls,expected",
    [
        (BreadthFirstSearch, [0, 1, 2, 3]),
        (DepthFirstSearch, [0, 2, 3, 1]),   # stack pops the largest child first
    ],
)
def test_processing_order(diamond, search_cls, expected):
    assert search_cls(diamond).order(0) == expected


@pytest.mark.parametrize(
    "search_cls,label,expected",
    [
        (BreadthFirstSearch, 'B', 1),
        (DepthFirstSearch, 'B', 2),
        (BreadthFirstSearch, 'C', 3),
        (DepthFirstSearch, 'C', 3),
        (BreadthFirstSearch, 'A', 0),
        (DepthFirstSearch, 'Z', None),
    ],
)
def test_find(diamond, search_cls, label, expected):
    assert search_cls(diamond).find(label) == expected


def test_find_restarts_from_unvisited_vertices(graph_factory):
    # 1 is unreachable from 0, so the search has to start again at 1
    g = graph_factory([[], [2], []], ['A', 'B', 'C'])
    assert BreadthFirstSearch(g).find('C') == 2
    assert DepthFirstSearch(g).find('B') == 1


def test_frontier_may_hold_duplicates(diamond):
    # 3 is enqueued by both 1 and 2 before it is processed; it is still visited once
    bfs = BreadthFirstSearch(diamond)
    assert bfs.order(0).count(3) == 1
    assert bfs.visited.all()


@pytest.mark.parametrize("search_cls", [BreadthFirstSearch, DepthFirstSearch])
def test_reach(diamond, cycle3, search_cls):
    search = search_cls(diamond)
    assert search.reach(0, 3)
    assert not search.reach(3, 0)
    assert not search.reach(1, 2)
    assert search.reach(2, 2)

    assert search_cls(cycle3).reach(2, 1)


@pytest.mark.parametrize("search_cls", [BreadthFirstSearch, DepthFirstSearch])
def test_state_does_not_leak_between_calls(diamond, search_cls):
    search = search_cls(diamond)
    assert search.find('C') == 3
    assert search.reach(1, 3)
    assert search.order(2) == [2, 3]
    assert search.find('A') == 0


def test_vertex_argument_out_of_range(diamond):
    with pytest.raises(VertexRangeError):
        BreadthFirstSearch(diamond).reach(0, 9)
    with pytest.raises(VertexRangeError):
        DepthFirstSearch(diamond).order(-1)
