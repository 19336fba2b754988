"""Data models for the ads being audited."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ENABLED = "ENABLED"
PAUSED = "PAUSED"
REMOVED = "REMOVED"


@dataclass(frozen=True)
class AdDescriptor:
    """One ad as yielded by the ad enumerator."""

    campaign_name: str
    campaign_id: str
    ad_id: str
    ad_type: str
    destination_url: Optional[str]
    status: str = ENABLED

    @property
    def checkable_url(self) -> Optional[str]:
        """The destination URL stripped of surrounding whitespace, or ``None`` if blank."""
        if not self.destination_url:
            return None
        url = self.destination_url.strip()
        return url or None
