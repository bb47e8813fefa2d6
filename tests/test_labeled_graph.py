import numpy as np
import pytest

from graph_pm import InverseNotBuiltError, LabeledGraph, VertexRangeError


def test_basic_accessors(diamond):
    assert diamond.size() == 4
    assert len(diamond) == 4
    assert diamond.n_edges() == 4
    assert diamond.children(0) == {1, 2}
    assert diamond.out_degree(3) == 0
    assert list(diamond.edges()) == [(0, 1), (0, 2), (1, 3), (2, 3)]
    assert np.array_equal(diamond.child_array(0), np.array([1, 2]))


def test_label_index_partitions_vertices(diamond):
    assert diamond.vertices_with_label('B') == {1, 2}
    assert diamond.vertices_with_label('Z') == frozenset()
    assert diamond.labels() == {'A', 'B', 'C'}

    seen = set()
    for lab in diamond.labels():
        members = diamond.vertices_with_label(lab)
        assert seen.isdisjoint(members)
        seen |= members
    assert seen == set(range(diamond.size()))


def test_parents_match_children(diamond):
    assert diamond.has_inverse()
    for v in range(diamond.size()):
        for u in range(diamond.size()):
            assert (v in diamond.parents(u)) == (u in diamond.children(v))


def test_parents_without_inverse(cycle3):
    assert not cycle3.has_inverse()
    with pytest.raises(InverseNotBuiltError):
        cycle3.parents(0)


def test_self_loop_count(graph_factory):
    g = graph_factory([[0, 1], [1], []], ['A', 'A', 'B'])
    assert g.self_loop_count() == 2


def test_empty_graph_is_valid():
    g = LabeledGraph([], [])
    assert g.size() == 0
    assert g.n_edges() == 0
    assert g.is_connected()
    assert g.validate_edge_labels()
    assert g.summary()['max_out_degree'] == 0


@pytest.mark.parametrize(
    "ch,expected",
    [
        ([[1], [2], [0]], True),
        ([[1], [], []], False),          # vertex 2 touches no edge
        ([[1], [], [1]], True),          # 2 has an out-edge, 1 is a target
        ([[]], False),
    ],
)
def test_is_connected(graph_factory, ch, expected):
    g = graph_factory(ch, ['A'] * len(ch))
    assert g.is_connected() is expected


def test_validate_edge_labels_reports_without_mutating(graph_factory, capsys):
    elabel = {(0, 1): 'x', (1, 0): 'y', (5, 0): 'z'}
    g = graph_factory([[1], []], ['A', 'B'], elabel=elabel, name='g1')

    assert g.validate_edge_labels() is False
    out = capsys.readouterr().out
    assert "(1, 0)" in out
    assert "(5, 0)" in out
    assert "(0, 1)" not in out

    assert g.missing_edge_labels() == [(1, 0), (5, 0)]
    assert dict(g.elabel) == elabel
    assert g.edge_label(0, 1) == 'x'


def test_validate_edge_labels_quiet(graph_factory, capsys):
    g = graph_factory([[1], []], ['A', 'B'], elabel={(0, 1): 'x'})
    assert g.validate_edge_labels(verbose=False) is True
    assert capsys.readouterr().out == ""


def test_child_out_of_range_fails_fast():
    with pytest.raises(VertexRangeError) as info:
        LabeledGraph([{1}, {7}], ['A', 'B'])
    assert info.value.details['vertex'] == 7
    assert info.value.code == "VERTEX_RANGE"


def test_label_length_mismatch_fails_fast():
    with pytest.raises(ValueError):
        LabeledGraph([{1}, set()], ['A'])


def test_clone_is_independent(diamond):
    twin = diamond.clone()
    assert twin.ch == diamond.ch
    assert twin.label == diamond.label
    assert twin.has_inverse()

    assert dict(twin.elabel) == dict(diamond.elabel)
    assert twin.parents(3) == diamond.parents(3)

    assert twin.ch is not diamond.ch
    assert twin.elabel is not diamond.elabel
    assert twin.label_index is not diamond.label_index
    assert twin.out_degrees is not diamond.out_degrees
    assert all(a is not b for a, b in zip(twin._ch_idx, diamond._ch_idx))


def test_storage_is_read_only(graph_factory):
    g = graph_factory([[1], []], ['A', 'B'], elabel={(0, 1): 'x'})

    with pytest.raises(AttributeError):
        g.children(0).add(0)
    with pytest.raises(TypeError):
        g.label[0] = 'Z'
    with pytest.raises(TypeError):
        g.elabel[(1, 0)] = 'y'
    with pytest.raises(ValueError):
        g.out_degrees[0] = 5
    with pytest.raises(ValueError):
        g.child_array(0)[0] = 1

    assert g.children(0) == {1}
    assert g.edge_label(1, 0) is None


def test_repr_and_summary(cycle3):
    assert repr(cycle3) == "LabeledGraph(cycle3, V=3, E=3)"
    assert cycle3.summary() == {
        'name': 'cycle3',
        'vertices': 3,
        'edges': 3,
        'labels': 1,
        'self_loops': 0,
        'max_out_degree': 1,
    }
