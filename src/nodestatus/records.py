"""Records shared by every snapshot producer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, TypeVar

MAX_ERROR_MESSAGE_LENGTH = 120

T = TypeVar("T")


class ErrorLevel(Enum):
    ERROR = "ERROR"
    WARN = "WARN"


@dataclass(frozen=True)
class ErrorRecord:
    """One noteworthy log line surfaced to the dashboard."""

    service: str
    level: ErrorLevel
    message: str

    @classmethod
    def from_line(cls, service: str, level: ErrorLevel, text: str) -> "ErrorRecord":
        return cls(service=service, level=level, message=text[:MAX_ERROR_MESSAGE_LENGTH])

    def to_dict(self) -> Dict[str, Any]:
        return {"service": self.service, "level": self.level.value, "message": self.message}


@dataclass
class ProducerResult(Generic[T]):
    """
    Outcome of one snapshot producer.

    ``degraded`` is set when the producer failed and ``data`` holds its fixed
    fallback record instead of measured values.
    """

    data: T
    errors: List[ErrorRecord] = field(default_factory=list)
    degraded: bool = False

    @classmethod
    def failed(cls, fallback: T) -> "ProducerResult[T]":
        return cls(data=fallback, errors=[], degraded=True)


__all__ = ["ErrorLevel", "ErrorRecord", "MAX_ERROR_MESSAGE_LENGTH", "ProducerResult"]
