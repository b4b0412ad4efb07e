"""Tests for pivot rotation on CircularList."""

import pytest

from circularlist import CircularList, EmptyListError


def test_rotation_walkthrough(one_two_three):
    """[1, 2, 3] -> [2, 3, 1] -> [3, 1, 2] -> back to [2, 3, 1]."""
    one_two_three.rotate()
    assert list(one_two_three) == [2, 3, 1]
    one_two_three.rotate()
    assert list(one_two_three) == [3, 1, 2]
    one_two_three.rotate_backward()
    assert list(one_two_three) == [2, 3, 1]


def test_rotation_does_not_move_elements(one_two_three):
    one_two_three.rotate()
    assert one_two_three._store.ordered_from(0) == [1, 2, 3]
    assert one_two_three.offset == 1


@pytest.mark.parametrize("items", [[1, 2], [1, 2, 3], list("abcdefg")])
def test_rotate_then_rotate_backward_restores_order(items):
    cl = CircularList(items)
    cl.rotate()
    cl.rotate_backward()
    assert list(cl) == items
    cl.rotate_backward()
    cl.rotate()
    assert list(cl) == items


@pytest.mark.parametrize("items", [[1, 2], [1, 2, 3], list("abcdefg")])
def test_full_turn_restores_order(items):
    cl = CircularList(items)
    for _ in range(len(items)):
        cl.rotate()
    assert list(cl) == items
    for _ in range(len(items)):
        cl.rotate_backward()
    assert list(cl) == items


def test_rotate_by_matches_repeated_rotation():
    stepped = CircularList(range(5))
    jumped = CircularList(range(5))
    for _ in range(7):
        stepped.rotate()
    jumped.rotate_by(7)
    assert stepped == jumped == [2, 3, 4, 0, 1]

    jumped.rotate_by(-2)
    assert jumped == [0, 1, 2, 3, 4]


def test_get_and_rotate_returns_previous_pivot(one_two_three):
    before = (one_two_three[0], one_two_three[1])

    assert one_two_three.get_and_rotate() == before[0]
    assert one_two_three[0] == before[1]


def test_rotate_and_get_returns_new_pivot(one_two_three):
    assert one_two_three.rotate_and_get() == 2
    assert one_two_three.pivot == 2


def test_get_and_rotate_backward_returns_previous_pivot(one_two_three):
    assert one_two_three.get_and_rotate_backward() == 1
    assert list(one_two_three) == [3, 1, 2]


def test_rotate_backward_and_get_returns_new_pivot(one_two_three):
    assert one_two_three.rotate_backward_and_get() == 3
    assert list(one_two_three) == [3, 1, 2]


@pytest.mark.parametrize(
    "operation",
    ["get_and_rotate", "rotate_and_get", "get_and_rotate_backward", "rotate_backward_and_get"],
)
def test_compound_operations_fail_on_empty_list(operation):
    cl = CircularList()
    with pytest.raises(EmptyListError, match=f"{operation} called on an empty CircularList"):
        getattr(cl, operation)()
    assert len(cl) == 0


def test_empty_list_rotation_is_silent():
    cl = CircularList()
    cl.rotate()
    cl.rotate_backward()
    cl.rotate_by(3)
    assert list(cl) == []
    assert cl.offset == 0


def test_empty_list_has_no_pivot():
    with pytest.raises(EmptyListError):
        CircularList().pivot


def test_empty_list_error_is_an_index_error():
    with pytest.raises(IndexError):
        CircularList().get_and_rotate()


@pytest.mark.parametrize(
    "operation",
    ["get_and_rotate", "rotate_and_get", "get_and_rotate_backward", "rotate_backward_and_get"],
)
def test_single_element_compound_operations(operation):
    cl = CircularList([5])
    assert getattr(cl, operation)() == 5
    assert list(cl) == [5]
    assert cl.offset == 0


def test_single_element_rotation_is_noop():
    cl = CircularList([5])
    cl.rotate()
    cl.rotate_backward()
    assert list(cl) == [5]


def test_immutable_list_can_rotate(frozen):
    frozen.rotate()
    assert frozen == [2, 3, 1]
    assert frozen.get_and_rotate() == 2
    assert frozen == [3, 1, 2]


def test_indexing_follows_pivot(rotated_four):
    assert rotated_four[0] == 3
    assert rotated_four[3] == 2
    assert rotated_four[-1] == 2
    rotated_four[1] = 40
    assert list(rotated_four) == [3, 40, 1, 2]
    assert rotated_four._store.ordered_from(0) == [1, 2, 3, 40]
