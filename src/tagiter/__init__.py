"""Extension methods for iterators of `Option` and `Result` values."""

import logging

from ._adapters import (
    Adapter,
    ErrIter,
    MainIter,
    OkIter,
    OtherIter,
    SomeIter,
    Unwrap,
    UnwrapOr,
)
from ._core import Config, Pipeable, configure, get_config
from ._iter import OptionIter, ResultIter, TaggedIter
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
    UnwrapError,
)
from ._shape import OPTION_SHAPE, RESULT_SHAPE, OptionShape, ResultShape, Shape

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "OPTION_SHAPE",
    "RESULT_SHAPE",
    "Adapter",
    "Config",
    "Err",
    "ErrIter",
    "MainIter",
    "NoneOption",
    "Ok",
    "OkIter",
    "Option",
    "OptionIter",
    "OptionShape",
    "OptionUnwrapError",
    "OtherIter",
    "Pipeable",
    "Result",
    "ResultIter",
    "ResultShape",
    "ResultUnwrapError",
    "Shape",
    "Some",
    "SomeIter",
    "TaggedIter",
    "Unwrap",
    "UnwrapError",
    "UnwrapOr",
    "configure",
    "get_config",
]
