"""Uniform outcome type returned by every Jakamo client method."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, Iterable, Optional, Tuple, TypeVar, Union

from .errors import JakamoResultError


T = TypeVar("T")

UNKNOWN_ERROR = "An unknown error occurred"


class ResultStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    ERROR = "error"


def _flatten(messages: Iterable[Union[str, Iterable[str], None]]) -> Tuple[str, ...]:
    flat = []
    for message in messages:
        if message is None:
            continue
        if isinstance(message, (str, bytes)):
            items = [message]
        else:
            items = list(message)
        for item in items:
            if isinstance(item, bytes):
                item = item.decode("utf-8", errors="replace")
            if item is not None and str(item).strip():
                flat.append(str(item))
    return tuple(flat)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success with a value, not found, or error with messages.

    Build instances through ``success``, ``not_found`` and ``error`` so the
    invariants hold: an OK result always has a value and an ERROR result
    always has at least one message.
    """

    status: ResultStatus
    value: Optional[T] = None
    errors: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        if value is None:
            raise ValueError("A successful result requires a value")
        return cls(status=ResultStatus.OK, value=value)

    @classmethod
    def not_found(cls) -> "Result[T]":
        return cls(status=ResultStatus.NOT_FOUND)

    @classmethod
    def error(cls, *messages: Union[str, Iterable[str], None]) -> "Result[T]":
        """Build an error result.

        Accepts any mix of strings and iterables of strings. Blank messages
        are dropped; when nothing is left the generic unknown-error message
        is used.
        """
        errors = _flatten(messages) or (UNKNOWN_ERROR,)
        return cls(status=ResultStatus.ERROR, errors=errors)

    @property
    def is_success(self) -> bool:
        return self.status is ResultStatus.OK

    @property
    def is_not_found(self) -> bool:
        return self.status is ResultStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        return self.status is ResultStatus.ERROR

    def __bool__(self) -> bool:
        return self.is_success

    def unwrap(self) -> T:
        if self.is_success:
            return self.value  # type: ignore[return-value]
        if self.is_not_found:
            raise JakamoResultError("Result is not found")
        raise JakamoResultError("; ".join(self.errors))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "value": self.value,
            "errors": list(self.errors),
        }
