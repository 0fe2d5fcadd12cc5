"""Tests for the Option and Result value types."""

import pytest

import tagiter as ti


def test_result_pattern_matching() -> None:
    """Test Result pattern matching."""

    def _describe(res: ti.Result[int, str]) -> str:
        match res:
            case ti.Ok(value):
                return f"ok {value}"
            case ti.Err(error):
                return f"err {error}"
            case _:
                raise AssertionError

    assert _describe(ti.Ok(42)) == "ok 42"
    assert _describe(ti.Err("Something went wrong")) == "err Something went wrong"


def test_option_pattern_matching() -> None:
    """Test Option pattern matching."""

    def _describe(opt: ti.Option[str]) -> str:
        match opt:
            case ti.Some(value):
                return value
            case _:
                return "nothing"

    assert _describe(ti.Some("hello")) == "hello"
    assert _describe(ti.NONE) == "nothing"


def test_none_singleton() -> None:
    """Test NONE compares equal to any NoneOption and reprs as NONE."""
    assert ti.NONE == ti.NoneOption()
    assert ti.NONE != ti.Some(None)
    assert repr(ti.NONE) == "NONE"


def test_option_methods() -> None:
    """Test unwrap, expect, unwrap_or and map on Option."""
    assert ti.Some(2).map(lambda x: x + 1) == ti.Some(3)
    assert ti.NONE.unwrap_or(9) == 9
    assert ti.Some(1).expect("present") == 1
    with pytest.raises(ti.OptionUnwrapError, match="missing value"):
        ti.NONE.expect("missing value")


def test_result_methods() -> None:
    """Test conversions and maps on Result."""
    assert ti.Ok(1).ok() == ti.Some(1)
    assert ti.Ok(1).err() == ti.NONE
    assert ti.Err("e").err() == ti.Some("e")
    assert ti.Err(1).map_err(str) == ti.Err("1")
    assert ti.Ok(1).map_err(str) == ti.Ok(1)
    assert ti.Err("e").unwrap_or(0) == 0
    with pytest.raises(ti.ResultUnwrapError):
        ti.Ok(1).unwrap_err()
    with pytest.raises(ti.ResultUnwrapError, match="checking: 'e'"):
        ti.Err("e").expect("checking")


def test_unwrap_errors_share_a_base() -> None:
    """Test both unwrap errors derive from UnwrapError and RuntimeError."""
    assert issubclass(ti.OptionUnwrapError, ti.UnwrapError)
    assert issubclass(ti.ResultUnwrapError, ti.UnwrapError)
    assert issubclass(ti.UnwrapError, RuntimeError)
