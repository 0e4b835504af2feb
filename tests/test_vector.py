import io
import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from rankvector.vector import AVLVector


def _check_subtree(node, parent):
    """Verify bookkeeping and balance; return (height, size)."""
    if node is None:
        return -1, 0
    assert node.parent is parent
    left_height, left_size = _check_subtree(node.left, node)
    right_height, right_size = _check_subtree(node.right, node)
    assert node.num_left == left_size
    assert node.size == left_size + right_size + 1
    assert node.height == 1 + max(left_height, right_height)
    assert abs(left_height - right_height) <= 1
    return node.height, node.size


def _check_tree(vector):
    _, size = _check_subtree(vector._root, None)
    assert size == len(vector)


def _build(values):
    vector = AVLVector()
    for value in values:
        vector.insert_at_rank(len(vector) + 1, value)
    return vector


def test_empty_vector():
    vector = AVLVector()
    assert len(vector) == 0
    assert list(vector) == []
    assert vector.root_value() is None


def test_insert_into_empty_requires_rank_one():
    vector = AVLVector()
    with pytest.raises(IndexError, match="Rank is out of bounds!"):
        vector.insert_at_rank(2, 55)
    with pytest.raises(IndexError, match="Rank is out of bounds!"):
        vector.insert_at_rank(0, 55)
    vector.insert_at_rank(1, 55)
    assert list(vector) == [55]
    assert vector.root_value() == 55


def test_insert_positions():
    vector = AVLVector()
    vector.insert_at_rank(1, 55)
    vector.insert_at_rank(2, 66)
    vector.insert_at_rank(1, 44)
    vector.insert_at_rank(3, 60)
    assert list(vector) == [44, 55, 60, 66]
    _check_tree(vector)


def test_insert_past_end_rejected():
    vector = _build([1, 2, 3])
    with pytest.raises(IndexError):
        vector.insert_at_rank(5, 9)
    assert list(vector) == [1, 2, 3]


def test_empty_errors():
    vector = AVLVector()
    with pytest.raises(IndexError, match="cannot access"):
        vector.element_at_rank(1)
    with pytest.raises(IndexError, match="cannot replace"):
        vector.replace_at_rank(1, 5)
    with pytest.raises(IndexError, match="cannot remove"):
        vector.remove_at_rank(1)
    with pytest.raises(ValueError, match="Element not found"):
        vector.rank_of(5)


@pytest.mark.parametrize("rank", [0, -1, 4])
def test_rank_out_of_bounds(rank):
    vector = _build([10, 20, 30])
    with pytest.raises(IndexError, match="Rank is out of bounds!"):
        vector.element_at_rank(rank)
    with pytest.raises(IndexError, match="Rank is out of bounds!"):
        vector.replace_at_rank(rank, 1)
    with pytest.raises(IndexError, match="Rank is out of bounds!"):
        vector.remove_at_rank(rank)


def test_element_at_rank_matches_order():
    values = [7, 3, 9, 1, 8]
    vector = _build(values)
    assert [vector.element_at_rank(r) for r in range(1, 6)] == values


def test_replace_at_rank():
    vector = _build([10, 20, 30])
    vector.replace_at_rank(2, 99)
    assert list(vector) == [10, 99, 30]


def test_remove_returns_element():
    vector = _build([10, 20, 30, 40])
    assert vector.remove_at_rank(2) == 20
    assert list(vector) == [10, 30, 40]
    assert vector.remove_at_rank(1) == 10
    assert vector.remove_at_rank(2) == 40
    assert vector.remove_at_rank(1) == 30
    assert len(vector) == 0
    assert vector.root_value() is None


def test_rank_of_first_occurrence():
    vector = _build([5, 6, 5, 7])
    assert vector.rank_of(5) == 1
    assert vector.rank_of(7) == 4
    with pytest.raises(ValueError):
        vector.rank_of(8)


def test_ranked_items():
    vector = _build([4, 2, 9])
    assert list(vector.ranked_items()) == [(1, 4), (2, 2), (3, 9)]


def test_print_all_format():
    vector = AVLVector()
    vector.insert_at_rank(1, 55)
    vector.insert_at_rank(2, 66)
    out = io.StringIO()
    vector.print_all(out)
    assert out.getvalue() == "Rank: 1 | Element: 55\nRank: 2 | Element: 66\n\n"


def test_ascending_inserts_stay_balanced():
    n = 1000
    vector = _build(range(n))
    _check_tree(vector)
    assert list(vector) == list(range(n))
    assert vector._root.height <= 1.45 * math.log2(n + 2)


def test_front_inserts_and_removals_stay_balanced():
    vector = AVLVector()
    for value in range(300):
        vector.insert_at_rank(1, value)
    _check_tree(vector)
    assert list(vector) == list(reversed(range(300)))
    for _ in range(200):
        vector.remove_at_rank(1)
        _check_tree(vector)
    assert list(vector) == list(reversed(range(100)))


_ops = st.lists(
    st.tuples(
        st.sampled_from(["insert", "remove", "replace"]),
        st.integers(min_value=0, max_value=10_000),
        st.integers(min_value=-50, max_value=50),
    ),
    max_size=120,
)


@settings(max_examples=150, deadline=None)
@given(_ops)
def test_matches_list_model(ops):
    vector = AVLVector()
    model = []
    removed = []
    expected_removed = []
    for kind, position, value in ops:
        if kind == "insert" or not model:
            rank = position % (len(model) + 1) + 1
            vector.insert_at_rank(rank, value)
            model.insert(rank - 1, value)
        elif kind == "remove":
            rank = position % len(model) + 1
            removed.append(vector.remove_at_rank(rank))
            expected_removed.append(model.pop(rank - 1))
        else:
            rank = position % len(model) + 1
            vector.replace_at_rank(rank, value)
            model[rank - 1] = value
        _check_tree(vector)
        assert list(vector) == model
    assert removed == expected_removed
    assert len(vector) == len(model)
    assert [vector.rank_of(v) for v in model] == [model.index(v) + 1 for v in model]
    assert [vector.element_at_rank(r) for r in range(1, len(model) + 1)] == model