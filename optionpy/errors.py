from __future__ import annotations


DEFAULT_UNWRAP_MESSAGE = "No value in Option"


class OptionError(Exception):
    """Base class for errors raised by optionpy."""


class NoneValueError(OptionError, ValueError):
    """Raised when a present value is required but None was given."""

    def __init__(self, message: str = "Some() cannot hold None"):
        super().__init__(message)


class UnwrapError(OptionError, LookupError):
    """Raised by unwrap() on an empty Option."""

    def __init__(self, message: str = DEFAULT_UNWRAP_MESSAGE):
        super().__init__(message); self.message = message
