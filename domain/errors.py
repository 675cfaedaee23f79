"""Domain error codes and validation outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_SALE = "INVALID_SALE"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError, ValueError):
    """Raised when input fails a business rule. Nothing has been persisted."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_SALE) -> None:
        super().__init__(code, message)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a pure validation check: a flag plus a human-readable reason."""

    is_valid: bool
    error_message: Optional[str] = None

    @staticmethod
    def valid() -> "ValidationResult":
        return ValidationResult(is_valid=True)

    @staticmethod
    def invalid(message: str) -> "ValidationResult":
        return ValidationResult(is_valid=False, error_message=message)
