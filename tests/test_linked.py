import pytest

from goaltrack.linked import ListNode, from_iterable, merge_two_lists


def test_from_iterable_round_trip():
    values = [1, 2, 4]
    head = from_iterable(values)
    assert list(head) == values
    assert head.val == values[0]


def test_from_iterable_empty():
    assert from_iterable([]) is None


def test_iter_single_node():
    assert list(ListNode(5)) == [5]


@pytest.mark.parametrize(
    "a, b",
    [([1, 2, 4], [1, 3, 4]), ([5], [1, 2, 3]), ([1, 1], [1]), ([-3, 0], [7, 8])],
)
def test_merge_is_sorted_union(a, b):
    merged = merge_two_lists(from_iterable(a), from_iterable(b))
    assert list(merged) == sorted(a + b)


def test_merge_with_empty_sides():
    assert merge_two_lists(None, None) is None
    right = from_iterable([0])
    assert merge_two_lists(None, right) is right
    left = from_iterable([2, 3])
    assert merge_two_lists(left, None) is left


def test_merge_reuses_nodes():
    a = from_iterable([1, 3])
    b = from_iterable([2])
    merged = merge_two_lists(a, b)
    assert merged is a
    assert merged.next is b


def test_merge_takes_first_list_on_ties():
    a = ListNode(1)
    b = ListNode(1)
    merged = merge_two_lists(a, b)
    assert merged is a
    assert merged.next is b


def test_repr_shows_values():
    assert repr(from_iterable([1, 2])) == "ListNode([1, 2])"