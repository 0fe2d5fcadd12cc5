class UnwrapError(RuntimeError):
    """Raised when a value is unwrapped from the wrong variant."""


class OptionUnwrapError(UnwrapError): ...


class ResultUnwrapError(UnwrapError): ...
