"""Option and Result values whose failed unwraps panic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from imkit.errors import ImError
from imkit.panic import panic

T = TypeVar("T")


@dataclass(frozen=True)
class Option(Generic[T]):
    """A value that may be absent."""

    _value: Any = None
    _some: bool = False

    @classmethod
    def some(cls, value: T) -> Option[T]:
        """Return an option holding ``value``."""
        return cls(value, True)

    @classmethod
    def none(cls) -> Option[T]:
        """Return an empty option."""
        return cls(None, False)

    def is_some(self) -> bool:
        """Tell whether a value is present."""
        return self._some

    def is_none(self) -> bool:
        """Tell whether the option is empty."""
        return not self._some

    def unwrap(self) -> T:
        """Return the value, or panic if the option is empty."""
        if not self._some:
            panic("%s", "Attempted to unwrap empty Option")
        return self._value

    def expect(self, message: str) -> T:
        """Return the value, or panic with ``message`` if the option is empty."""
        if not self._some:
            panic("%s", message)
        return self._value

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` if the option is empty."""
        return self._value if self._some else default


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an :class:`ImError`."""

    _value: Any = None
    _error: ImError | None = None

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        """Return a successful result holding ``value``."""
        return cls(value, None)

    @classmethod
    def err(cls, error: ImError) -> Result[T]:
        """Return a failed result holding ``error``."""
        if error is None:
            raise ValueError("a failed Result needs an error")
        return cls(None, error)

    def is_ok(self) -> bool:
        """Tell whether the result succeeded."""
        return self._error is None

    def is_err(self) -> bool:
        """Tell whether the result failed."""
        return self._error is not None

    def unwrap(self) -> T:
        """Return the value, or panic describing the error."""
        if self._error is not None:
            panic(
                "Attempted to unwrap empty Result. Instead had error %s: %s",
                type(self._error).__name__,
                self._error.desc,
            )
        return self._value

    def expect(self, message: str) -> T:
        """Return the value, or panic with ``message`` on error."""
        if self._error is not None:
            panic("%s", message)
        return self._value

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` on error."""
        return default if self._error is not None else self._value

    def unwrap_err(self) -> ImError:
        """Return the error, or panic if the result succeeded."""
        if self._error is None:
            panic("%s", "Attempted to unwrap Ok Result for error.")
        return self._error