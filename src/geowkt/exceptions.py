"""Exception types raised by geowkt."""

from __future__ import annotations

from typing import Any, Iterable


class GeowktError(Exception):
    """Base class for all geowkt errors."""


class InvalidOptionError(GeowktError, ValueError):
    """Raised when a generator option receives an unrecognized value.

    Attributes:
        option: Name of the offending option
        value: The value that was rejected
        expected: The accepted values for the option
    """

    def __init__(self, option: str, value: Any, expected: Iterable[Any]) -> None:
        self.option = option
        self.value = value
        self.expected = list(expected)
        super().__init__(
            f"Invalid value for option {option} passed: {value!r} "
            f"(Expected {', '.join(repr(v) for v in self.expected)})"
        )


class GenerationError(GeowktError):
    """Raised when generating text for a geometry fails for any reason.

    The underlying exception is chained and available as ``__cause__``.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Generation failed: {cause}")
