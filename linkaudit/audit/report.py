"""Report models produced by an audit run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from linkaudit.checker.models import StatusCode


@dataclass(frozen=True)
class BrokenLinkRecord:
    """One ad pointing at a URL that failed its health check."""

    campaign_name: str
    campaign_id: str
    ad_id: str
    ad_type: str
    url: str
    status_code: StatusCode
    error_message: Optional[str]
    was_paused: bool = False


@dataclass(frozen=True)
class AuditReport:
    """Ordered broken-link findings plus run metadata.

    ``records`` keeps the order in which ads were enumerated.  The report is
    built once at the end of a run and never modified afterwards.
    """

    checked_at: datetime
    records: tuple[BrokenLinkRecord, ...] = ()
    ads_scanned: int = 0
    ads_skipped: int = 0
    urls_checked: int = 0
    cache_hits: int = 0
    account_id: Optional[str] = field(default=None)

    @property
    def broken_count(self) -> int:
        return len(self.records)

    @property
    def paused_count(self) -> int:
        return sum(1 for r in self.records if r.was_paused)

    @property
    def has_findings(self) -> bool:
        return bool(self.records)
