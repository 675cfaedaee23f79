"""
Structured service outcomes.

Used where a failure is an expected, user-facing result (validation, missing
entity, summary that could not be built) rather than a fault to propagate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    success: True if the operation completed
    data: the result payload (None on failure)
    error_message: human-readable reason when success is False
    success_message: optional confirmation text for the caller to display
    """

    success: bool
    data: Optional[T] = None
    error_message: Optional[str] = None
    success_message: Optional[str] = None

    @staticmethod
    def ok(data: Optional[T] = None, message: Optional[str] = None) -> "ServiceResult[T]":
        return ServiceResult(success=True, data=data, success_message=message)

    @staticmethod
    def fail(message: str, data: Optional[T] = None) -> "ServiceResult[T]":
        return ServiceResult(success=False, data=data, error_message=message)


__all__ = ["ServiceResult"]
