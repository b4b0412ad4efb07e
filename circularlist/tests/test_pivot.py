"""Tests for pivot.py"""

import pytest

from circularlist.pivot import PivotController, offset_after_insert, offset_after_remove


def test_to_physical_wraps_around():
    pivot = PivotController(2)
    assert [pivot.to_physical(i, 3) for i in range(3)] == [2, 0, 1]


@pytest.mark.parametrize(
    "offset,index,size,expected",
    [
        (0, 3, 3, (3, False)),  # append without rotation
        (1, 3, 3, (1, True)),   # append lands just before the pivot slot
        (2, 0, 3, (2, False)),  # new pivot element
        (2, 1, 3, (3, False)),  # between last physical slot and slot 0
        (2, 2, 3, (1, True)),
        (0, 0, 0, (0, False)),
    ],
)
def test_insertion_slot(offset, index, size, expected):
    assert PivotController(offset).insertion_slot(index, size) == expected


def test_insert_before_pivot_shifts_it():
    pivot = PivotController(1)
    pivot.after_insert(0, before_pivot=True)
    assert pivot.offset == 2


def test_append_at_pivot_slot_shifts_it():
    pivot = PivotController(1)
    pivot.after_insert(1, before_pivot=True)
    assert pivot.offset == 2


def test_insert_at_logical_zero_takes_pivot():
    pivot = PivotController(1)
    pivot.after_insert(1, before_pivot=False)
    assert pivot.offset == 1


def test_insert_after_pivot_leaves_it():
    pivot = PivotController(1)
    pivot.after_insert(3, before_pivot=False)
    assert pivot.offset == 1


def test_offset_after_insert_follows_element_by_default():
    assert offset_after_insert(2, 2) == 3
    assert offset_after_insert(2, 2, claims_slot=True) == 2
    assert offset_after_insert(2, 5) == 2


@pytest.mark.parametrize(
    "offset,slot,new_size,expected",
    [
        (2, 0, 3, 1),  # removal before the pivot
        (1, 3, 3, 1),  # removal after the pivot
        (1, 1, 3, 1),  # pivot removed, successor slides into its slot
        (2, 2, 2, 0),  # last physical slot removed, wrap to start
        (0, 0, 0, 0),  # list emptied
    ],
)
def test_offset_after_remove(offset, slot, new_size, expected):
    assert offset_after_remove(offset, slot, new_size) == expected


def test_rotate_wraps_forward_and_backward():
    pivot = PivotController(2)
    pivot.rotate(3)
    assert pivot.offset == 0
    pivot.rotate_backward(3)
    assert pivot.offset == 2


@pytest.mark.parametrize("size", [0, 1])
def test_rotation_is_noop_for_short_lists(size):
    pivot = PivotController(0)
    pivot.rotate(size)
    pivot.rotate_backward(size)
    pivot.rotate_by(5, size)
    assert pivot.offset == 0


def test_rotate_by_uses_modular_steps():
    pivot = PivotController(0)
    pivot.rotate_by(7, 3)
    assert pivot.offset == 1
    pivot.rotate_by(-4, 3)
    assert pivot.offset == 0
