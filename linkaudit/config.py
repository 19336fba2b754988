"""Centralised settings for the ad link audit.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

A :class:`Settings` value is built once at the start of a run and handed to
the components that need it; it is frozen so nothing can reconfigure a run
half-way through.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    # ------------------------------------------------------------------
    # Workspace / storage
    # ------------------------------------------------------------------
    workspace_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("LINKAUDIT_WORKSPACE", Path.home() / ".linkaudit")
        )
    )

    @property
    def db_path(self) -> Path:
        """Absolute path to the SQLite run-history database."""
        return self.workspace_dir / "audits.db"

    # ------------------------------------------------------------------
    # Link checking
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "10"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "LINKAUDIT_USER_AGENT",
            "Mozilla/5.0 (compatible; LinkAudit/1.0; +https://github.com/linkaudit)",
        )
    )

    # ------------------------------------------------------------------
    # Ad selection / remediation
    # ------------------------------------------------------------------
    auto_pause_enabled: bool = field(
        default_factory=lambda: _env_flag("AUTO_PAUSE_ENABLED")
    )
    include_paused: bool = field(
        default_factory=lambda: _env_flag("INCLUDE_PAUSED")
    )
