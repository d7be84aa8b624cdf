import pytest

from dsakit.disjoint_set import DisjointSet, equations_possible, has_cycle_union_find


def test_new_item_is_its_own_representative():
    sets = DisjointSet()
    assert sets.find("x") == "x"
    assert "x" in sets
    assert sets.set_size("x") == 1


def test_union_reports_whether_it_merged():
    sets = DisjointSet(range(4))
    assert len(sets) == 4
    assert sets.union(0, 1)
    assert not sets.union(1, 0)
    assert sets.connected(0, 1)
    assert not sets.connected(0, 2)


def test_union_is_transitive_and_tracks_size():
    sets = DisjointSet(range(6))
    sets.union(0, 1)
    sets.union(2, 3)
    sets.union(1, 3)
    assert sets.connected(0, 2)
    assert sets.find(0) == sets.find(3)
    assert sets.set_size(2) == 4
    assert sets.set_size(5) == 1


@pytest.mark.parametrize(
    "equations, expected",
    [
        (["a==b", "b!=a"], False),
        (["b==a", "a==b"], True),
        (["a==b", "b==c", "a==c"], True),
        (["a==b", "b!=c", "c==a"], False),
        (["c==c", "b==d", "x!=z"], True),
        (["a!=a"], False),
    ],
)
def test_equations_possible(equations, expected):
    assert equations_possible(equations) is expected


def test_equations_reject_malformed_input():
    with pytest.raises(ValueError):
        equations_possible(["a=b"])
    with pytest.raises(ValueError):
        equations_possible(["a<=b"])


def test_cycle_detection_with_union_find():
    assert has_cycle_union_find([(0, 1), (1, 2), (2, 0)])
    assert not has_cycle_union_find([(0, 1), (1, 2), (2, 3)])
    assert not has_cycle_union_find([])
    assert has_cycle_union_find([(4, 4)])