from ._base import TaggedIter
from ._option import OptionIter
from ._result import ResultIter

__all__ = ["OptionIter", "ResultIter", "TaggedIter"]
