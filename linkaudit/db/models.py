"""Dataclass models representing DB rows.

These are plain Python objects – not ORM models.  The DB layer serialises /
deserialises to and from these types.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AuditRun:
    id: str
    account_id: str | None
    checked_at: str
    ads_scanned: int
    ads_skipped: int
    urls_checked: int
    cache_hits: int
    broken_count: int
    paused_count: int
    created_at: int
