#!/usr/bin/env python3
"""
Data models for xmlutil.
Defines the result type returned by the strict operations and the
exceptions raised by the package.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .config import FAILURE_META


class FailureReason(Enum):
    """Why a parse or serialize operation produced no value."""
    PARSE_ERROR = "PARSE_ERROR"
    ENCODING_ERROR = "ENCODING_ERROR"
    TRANSFORM_ERROR = "TRANSFORM_ERROR"
    IO_ERROR = "IO_ERROR"

    def __str__(self) -> str:
        return self.value


@dataclass
class XmlResult:
    """
    Outcome of a parse or serialize operation.

    Attributes:
        value: The parsed Document or serialized string (None on failure)
        failure: Reason for failure, None on success
        message: Text of the underlying error, if any
    """
    value: Any = None
    failure: Optional[FailureReason] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "XmlResult":
        return cls(value=value)

    @classmethod
    def failed(cls, reason: FailureReason, message: Optional[str] = None) -> "XmlResult":
        return cls(failure=reason, message=message)

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def is_failure(self) -> bool:
        return self.failure is not None

    def value_or(self, default: Any = None) -> Any:
        """Return the value, or ``default`` when the operation failed."""
        if self.failure is not None:
            return default
        return self.value

    def describe(self) -> str:
        """Human-readable outcome string."""
        if self.failure is None:
            return "OK"
        text = FAILURE_META.get(self.failure.value, self.failure.value)
        if self.message:
            return f"{text}: {self.message}"
        return text


class XmlUtilError(Exception):
    """Base exception for xmlutil operations."""
    pass


class NotATextNodeError(XmlUtilError):
    """A matched element's first child is missing or is not a text node."""

    def __init__(self, tag: str, node_type: Optional[str] = None):
        self.tag = tag
        self.node_type = node_type
        found = node_type or "no child"
        super().__init__(f"First child of <{tag}> is not a text node (found {found})")
