"""
optionpy - an Option type with exception-tolerant sync and async combinators
"""

from __future__ import annotations

import logging
from logging import NullHandler

from .errors import DEFAULT_UNWRAP_MESSAGE, NoneValueError, OptionError, UnwrapError
from .option import (
    NONE,
    Option,
    Some,
    from_nullable,
    from_throwing,
    from_throwing_async,
    none,
    some,
)

__all__ = (
    "DEFAULT_UNWRAP_MESSAGE",
    "NONE",
    "NoneValueError",
    "Option",
    "OptionError",
    "Some",
    "UnwrapError",
    "from_nullable",
    "from_throwing",
    "from_throwing_async",
    "none",
    "some",
)

# Silence "No handler found" warnings; applications opt in to DEBUG output.
logging.getLogger(__name__).addHandler(NullHandler())

del NullHandler
