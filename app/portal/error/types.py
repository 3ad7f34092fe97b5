"""Error type definitions

Validation results are produced synchronously and never persisted.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


@dataclass
class ValidationResult:
    """Result of a local validation pass

    Attributes:
        is_valid: Whether validation passed
        message: User-facing reason when validation failed
        field: Name of the first failing field, if known
    """
    is_valid: bool
    message: Optional[str] = None
    field: Optional[str] = None

    def __bool__(self):
        return self.is_valid

    @classmethod
    def success(cls) -> 'ValidationResult':
        """Create successful validation result"""
        return cls(is_valid=True)

    @classmethod
    def failure(cls, message: str, field: Optional[str] = None) -> 'ValidationResult':
        """Create validation error result"""
        return cls(is_valid=False, message=message, field=field)


class ErrorType(Enum):
    """Failure classes surfaced to the user"""
    VALIDATION = auto()   # Rejected locally, no request sent
    APPLICATION = auto()  # Backend reported failure
    TRANSPORT = auto()    # Backend unreachable or unreadable
    STORAGE = auto()      # Local key-value store failed
