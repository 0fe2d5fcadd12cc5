"""Tests for slot usage in tagiter classes."""

import tagiter as ti


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(ti.OptionIter(()))
    assert _check_slots(ti.ResultIter(()))
    assert _check_slots(ti.OptionIter(()).unwrap())
    assert _check_slots(ti.OptionIter(()).unwrap_or(0))
    assert _check_slots(ti.OptionIter(()).some_iter())
    assert _check_slots(ti.ResultIter(()).ok_iter())
    assert _check_slots(ti.ResultIter(()).err_iter())
    assert _check_slots(ti.OPTION_SHAPE)
    assert _check_slots(ti.RESULT_SHAPE)
    assert _check_slots(ti.get_config())
    assert _check_slots(ti.Some(42))
    assert _check_slots(ti.NoneOption())
    assert _check_slots(ti.Err[int, object](42))
    assert _check_slots(ti.Ok[int, object](42))
