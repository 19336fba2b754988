"""Data models for the link checker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

# Status recorded when the request never produced an HTTP response.
ERROR_STATUS = "ERROR"

StatusCode = Union[int, str]


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single health check of one URL."""

    is_broken: bool
    status_code: StatusCode
    error_message: Optional[str] = None

    @classmethod
    def from_status(cls, status_code: int) -> CheckResult:
        """Classify an HTTP status: anything other than exactly 200 is broken."""
        if status_code == 200:
            return cls(is_broken=False, status_code=status_code)
        return cls(
            is_broken=True,
            status_code=status_code,
            error_message=f"HTTP {status_code}",
        )

    @classmethod
    def from_error(cls, message: str) -> CheckResult:
        """A check that failed before any HTTP status was received."""
        return cls(is_broken=True, status_code=ERROR_STATUS, error_message=message)
