"""Pausing ads whose destination URL is broken."""

from __future__ import annotations

from linkaudit.ads.account import AdPlatform
from linkaudit.ads.models import PAUSED, AdDescriptor


class AdRemediator:
    """Pauses ads through an :class:`AdPlatform`, absorbing mutation failures.

    A failed pause (ad removed, permission denied, concurrent modification …)
    is logged and reported as ``False``; it never propagates, so one ad cannot
    stop the audit of the next.  Within one run, ads already paused by this
    remediator are not mutated a second time; :meth:`begin_run` forgets them.
    """

    def __init__(self, platform: AdPlatform) -> None:
        self.platform = platform
        self._paused: set[tuple[str, str]] = set()

    def begin_run(self) -> None:
        """Forget the ads paused during the previous run."""
        self._paused.clear()

    def remediate(self, ad: AdDescriptor, auto_pause_enabled: bool) -> bool:
        """Try to pause *ad*.  Returns whether the ad was paused in this run."""
        if not auto_pause_enabled:
            return False

        if ad.status == PAUSED:
            print(f"[PAUSE] Ad {ad.ad_id} is already paused on the platform; skipping.")
            return False

        key = (ad.campaign_id, ad.ad_id)
        if key in self._paused:
            print(f"[PAUSE] Ad {ad.ad_id} already paused in this run.")
            return True

        print(f"[PAUSE] Pausing ad {ad.ad_id} in campaign {ad.campaign_name!r} …")
        try:
            self.platform.pause_ad(ad)
        except Exception as exc:
            print(f"[PAUSE] ✗ Failed to pause ad {ad.ad_id}: {exc}")
            return False

        self._paused.add(key)
        print(f"[PAUSE] ✓ Ad {ad.ad_id} paused.")
        return True
