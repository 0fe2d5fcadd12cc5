"""Tests for OptionIter."""

import itertools

import pytest

import tagiter as ti


def _sample() -> list[ti.Option[int]]:
    return [ti.Some(1), ti.NONE, ti.Some(3)]


def test_unwrap_all_some() -> None:
    """Test unwrap yields every value when all elements are Some."""
    data = [ti.Some(1), ti.Some(2), ti.Some(3)]
    assert list(ti.OptionIter(data).unwrap()) == [1, 2, 3]


def test_unwrap_raises_on_none() -> None:
    """Test unwrap raises at the pull reaching NONE, not before."""
    it = ti.OptionIter(_sample()).unwrap()
    assert next(it) == 1
    with pytest.raises(ti.OptionUnwrapError):
        next(it)


def test_unwrap_is_lazy() -> None:
    """Test unwrap does not touch the source until pulled."""
    it = ti.OptionIter([ti.NONE]).unwrap()
    assert isinstance(it, ti.Unwrap)
    with pytest.raises(ti.UnwrapError):
        list(it)


def test_unwrap_or() -> None:
    """Test unwrap_or substitutes the default for NONE."""
    assert ti.OptionIter(_sample()).unwrap_or(5).into(list) == [1, 5, 3]


def test_unwrap_or_matches_unwrap_without_none() -> None:
    """Test unwrap_or and unwrap agree when there is nothing to substitute."""
    data = [ti.Some(4), ti.Some(5)]
    assert list(ti.OptionIter(data).unwrap_or(0)) == list(ti.OptionIter(data).unwrap())


def test_count_some() -> None:
    """Test count_some counts the Some elements."""
    assert ti.OptionIter(_sample()).count_some() == 2


def test_count_some_and_none_sum_to_length() -> None:
    """Test count_some and count_none add up to the number of elements."""
    data = [ti.NONE, ti.Some(1), ti.NONE, ti.NONE, ti.Some(2)]
    assert ti.OptionIter(data).count_none() == 3
    assert ti.OptionIter(data).count_some() + ti.OptionIter(data).count_none() == len(
        data
    )


def test_count_empty() -> None:
    """Test counts are zero on an empty source."""
    assert ti.OptionIter([]).count_some() == 0
    assert ti.OptionIter([]).count_none() == 0


def test_find_some_resumes() -> None:
    """Test find_some resumes from where the previous call stopped."""
    it = ti.OptionIter(_sample())
    assert it.find_some() == ti.Some(1)
    assert it.find_some() == ti.Some(3)
    assert it.find_some() == ti.NONE
    assert it.find_some() == ti.NONE


def test_find_some_on_infinite_source() -> None:
    """Test find_some only pulls as far as the next Some."""
    it = ti.OptionIter(itertools.cycle([ti.NONE, ti.Some(7)]))
    assert it.find_some().unwrap() == 7
    assert next(it) == ti.NONE


def test_has_some() -> None:
    """Test has_some."""
    assert ti.OptionIter([ti.NONE, ti.Some(3), ti.NONE]).has_some() is True
    assert ti.OptionIter([ti.NONE, ti.NONE, ti.NONE]).has_some() is False
    assert ti.OptionIter([]).has_some() is False


def test_has_none() -> None:
    """Test has_none."""
    assert ti.OptionIter([ti.Some(3), ti.NONE, ti.Some(1)]).has_none() is True
    assert ti.OptionIter([ti.Some(1), ti.Some(2), ti.Some(3)]).has_none() is False


def test_has_some_short_circuits() -> None:
    """Test has_some stops right after the first match."""
    it = ti.OptionIter([ti.NONE, ti.Some(1), ti.Some(2), ti.NONE])
    assert it.has_some()
    assert list(it) == [ti.Some(2), ti.NONE]


def test_has_none_short_circuits() -> None:
    """Test has_none stops right after the first match."""
    it = ti.OptionIter([ti.Some(1), ti.NONE, ti.Some(2)])
    assert it.has_none()
    assert it.find_some() == ti.Some(2)


def test_some_iter() -> None:
    """Test some_iter keeps the Some values in order."""
    it = ti.OptionIter([ti.Some(3), ti.NONE, ti.Some(1)]).some_iter()
    assert isinstance(it, ti.SomeIter)
    assert list(it) == [3, 1]


def test_some_iter_empty() -> None:
    """Test some_iter yields nothing when every element is NONE."""
    assert list(ti.OptionIter([ti.NONE, ti.NONE]).some_iter()) == []


def test_from_unpacked_values() -> None:
    """Test from_ with unpacked values and with an iterable."""
    assert ti.OptionIter.from_(ti.Some(1), ti.NONE, ti.Some(2)).count_some() == 2
    assert ti.OptionIter.from_(_sample()).count_none() == 1


def test_iterating_the_wrapper() -> None:
    """Test the wrapper is itself an iterator over the raw elements."""
    it = ti.OptionIter(_sample())
    assert iter(it) is it
    assert next(it) == ti.Some(1)
    assert it.unwrap_or(0).into(list) == [0, 3]


def test_wraps_generator() -> None:
    """Test any iterable can be wrapped, including a generator."""
    gen = (ti.Some(x) if x % 2 else ti.NONE for x in range(6))
    assert ti.OptionIter(gen).some_iter().into(list) == [1, 3, 5]
