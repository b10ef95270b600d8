"""Result type for failures that are ordinary business outcomes."""

from typing import Any, Generic, TypeVar

ValueT = TypeVar("ValueT")
ErrorT = TypeVar("ErrorT", bound=BaseException)

_MISSING: Any = object()


class Result(Generic[ValueT, ErrorT]):
    """
    Either a value or an error, never both.

    Rejected answers and repeated daily submissions come back as ``Result.err``;
    the caller decides whether to re-prompt, show the existing result, or raise
    with ``unwrap()``.
    """

    __slots__ = ("_value", "_error")

    def __init__(self, value: Any = _MISSING, error: ErrorT | None = None) -> None:
        has_value = value is not _MISSING
        if has_value == (error is not None):
            raise ValueError("Result needs exactly one of value or error")
        self._value = value
        self._error = error

    @classmethod
    def ok(cls, value: ValueT) -> "Result[ValueT, ErrorT]":
        return cls(value=value)

    @classmethod
    def err(cls, error: ErrorT) -> "Result[ValueT, ErrorT]":
        return cls(error=error)

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return not self.is_ok()

    def unwrap(self) -> ValueT:
        """The value, or raise the carried error."""
        if self._error is not None:
            raise self._error
        return self._value

    def unwrap_or(self, default: ValueT) -> ValueT:
        return default if self.is_err() else self._value

    def unwrap_err(self) -> ErrorT:
        if self._error is None:
            raise ValueError("Called unwrap_err() on an Ok value")
        return self._error

    def __repr__(self) -> str:
        if self.is_err():
            return f"Result.err({self._error!r})"
        return f"Result.ok({self._value!r})"
