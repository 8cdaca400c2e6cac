"""
Result type shared by all use cases.

A use case never raises for an expected business failure. It returns
``Return.err(Error(...))`` and lets the API layer translate the error kind
into an HTTP status.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories understood by the API layer"""

    not_found = "not_found"
    forbidden = "forbidden"
    unauthorized = "unauthorized"
    bad_request = "bad_request"
    conflict = "conflict"
    unclassified = "unclassified"


@dataclass(frozen=True)
class Error:
    code: str
    message: str
    kind: ErrorKind = ErrorKind.unclassified
    reason: Optional[str] = None


class Result(Generic[T]):
    __slots__ = ("_value", "_error")

    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self._value = value
        self._error = error

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        if self._error is not None:
            raise ValueError(f"Result is an error: {self._error.code}")
        return self._value

    @property
    def error(self) -> Error:
        if self._error is None:
            raise ValueError("Result is not an error")
        return self._error

    def __repr__(self) -> str:
        if self.is_err():
            return f"Result(error={self._error!r})"
        return f"Result(value={self._value!r})"


class Return:
    @staticmethod
    def ok(value: Optional[T] = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
