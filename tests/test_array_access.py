"""Tests for the indexed access primitives of :mod:`seqops.array`."""

import pytest

from seqops import array as A
from seqops.maybe import NOTHING, Just, is_just


def test_length_counts_elements():
    assert A.length([]) == 0
    assert A.length([1, 2, 3]) == 3
    assert A.length(("a",)) == 1


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (1, 3, (2, 3)),
        (3, -1, ()),
        (10, 12, ()),
        (1, 100, (2, 3, 4)),
        (-5, 2, (1, 2)),
        (2, 2, ()),
        (3, 1, ()),
        (0, 4, (1, 2, 3, 4)),
    ],
)
def test_slice_clamps_bounds(start, end, expected):
    assert A.slice(start)(end)([1, 2, 3, 4]) == expected


def test_slice_never_wraps_negative_indices_from_the_tail():
    assert A.slice(-3)(-1)([1, 2, 3, 4]) == ()
    assert A.slice(0)(-1)([1, 2, 3, 4]) == ()


def test_slice_returns_tuple_for_any_sequence():
    assert A.slice(1)(3)(range(5)) == (1, 2)
    assert isinstance(A.slice(0)(2)([7, 8, 9]), tuple)


def test_slice_partial_application_is_reusable():
    first_two = A.slice(0)(2)
    assert first_two([1, 2, 3]) == (1, 2)
    assert first_two(["a"]) == ("a",)


def test_at_returns_just_only_within_bounds():
    seq = [1, 2, 3, 4]
    assert A.at(3)(seq) == Just(4)
    assert A.at(0)(seq) == Just(1)
    assert A.at(9)(seq) is NOTHING
    assert A.at(-2)(seq) is NOTHING
    assert A.at(0)([]) is NOTHING


@pytest.mark.parametrize("index", range(-3, 8))
def test_at_is_present_iff_index_in_range(index):
    seq = ("a", "b", "c", "d")
    assert is_just(A.at(index)(seq)) == (0 <= index < len(seq))


def test_at_wraps_falsy_values():
    assert A.at(0)([None]) == Just(None)
    assert A.at(1)([1, 0]) == Just(0)


def test_at_rejects_non_integral_index():
    with pytest.raises(TypeError):
        A.at(1.5)


@pytest.mark.parametrize(
    "make",
    [
        lambda: A.drop(1.5),
        lambda: A.slice(0.5),
        lambda: A.set(2.0),
        lambda: A.range("1"),
    ],
)
def test_integral_arguments_are_checked_on_first_application(make):
    with pytest.raises(TypeError):
        make()


def test_drop_removes_prefix():
    assert A.drop(1)([1]) == ()
    assert A.drop(1)([1, 2, 3, 4]) == (2, 3, 4)
    assert A.drop(2)([1, 2, 3, 4]) == (3, 4)
    assert A.drop(10)([1, 2, 3]) == ()


def test_drop_non_positive_is_a_no_op():
    assert A.drop(0)([1, 2, 3]) == (1, 2, 3)
    assert A.drop(-4)([1, 2, 3]) == (1, 2, 3)


@pytest.mark.parametrize("n", [-2, 0, 1, 3, 5, 9])
def test_drop_matches_slice_to_length(n):
    seq = [5, 6, 7, 8, 9]
    assert A.drop(n)(seq) == A.slice(n)(A.length(seq))(seq)


def test_set_replaces_exactly_one_element():
    assert A.set(3)(9)([0, 1, 2, 3, 4]) == (0, 1, 2, 9, 4)
    assert A.set(0)(9)([0, 1, 2]) == (9, 1, 2)
    assert A.set(2)(9)([0, 1, 2]) == (0, 1, 9)


@pytest.mark.parametrize("index", [-1, 5, 100])
def test_set_out_of_range_returns_original(index):
    assert A.set(index)(9)([0, 1, 2, 3, 4]) == (0, 1, 2, 3, 4)


def test_set_on_empty_sequence():
    assert A.set(0)("x")([]) == ()
