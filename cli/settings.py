"""Building run settings from the environment plus command-line overrides."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from linkaudit.config import Settings


def load_settings(**overrides: Any) -> Settings:
    """Return :class:`Settings` from the environment with non-``None`` overrides applied."""
    settings = Settings()
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(settings, **changes) if changes else settings
