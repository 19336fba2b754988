"""Audit orchestrator: walks the ads once and collects broken links.

``LinkAuditor`` is the single entry point of the engine.  It wires together
the per-run URL cache, the prober, the optional remediator and the report
sinks.  Processing is strictly sequential: each ad is fully resolved (checked,
possibly paused, possibly recorded) before the next one is read, which keeps
outbound request rate and platform mutations at one at a time.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable, Iterable, Optional, Sequence

from linkaudit.ads.models import AdDescriptor
from linkaudit.audit.report import AuditReport, BrokenLinkRecord
from linkaudit.checker.cache import ProbeFn, UrlCheckCache
from linkaudit.config import Settings
from linkaudit.remediation import AdRemediator

if TYPE_CHECKING:
    from linkaudit.audit.sinks import ReportSink


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LinkAuditor:
    """Runs broken-link audits over a sequence of ads.

    Args:
        settings: Run configuration; only ``auto_pause_enabled`` is read here.
        probe: Callable checking one URL, e.g. a
            :class:`~linkaudit.checker.prober.UrlProber`.
        remediator: Pauses broken ads.  When ``None`` nothing is ever paused.
        clock: Returns the report timestamp.  Defaults to UTC now.
    """

    def __init__(
        self,
        settings: Settings,
        probe: ProbeFn,
        remediator: Optional[AdRemediator] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.settings = settings
        self.probe = probe
        self.remediator = remediator
        self.clock = clock

    def run(self, ads: Iterable[AdDescriptor], account_id: Optional[str] = None) -> AuditReport:
        """Check every ad once and return the finished :class:`AuditReport`.

        Errors raised while iterating *ads* propagate; no partial report is
        returned in that case.
        """
        checked_at = self.clock()
        cache = UrlCheckCache()
        records: list[BrokenLinkRecord] = []
        scanned = 0
        skipped = 0
        if self.remediator is not None:
            self.remediator.begin_run()

        print(f"[AUDIT] Starting broken link check (auto-pause={self.settings.auto_pause_enabled}) …")

        for ad in ads:
            url = ad.checkable_url
            if url is None:
                skipped += 1
                continue

            scanned += 1
            result = cache.lookup_or_compute(url, self.probe)
            if not result.is_broken:
                continue

            print(f"[BROKEN] {url} (Status: {result.status_code}) in campaign {ad.campaign_name!r}, ad {ad.ad_id}")
            was_paused = False
            if self.remediator is not None:
                was_paused = self.remediator.remediate(ad, self.settings.auto_pause_enabled)

            records.append(
                BrokenLinkRecord(
                    campaign_name=ad.campaign_name,
                    campaign_id=ad.campaign_id,
                    ad_id=ad.ad_id,
                    ad_type=ad.ad_type,
                    url=url,
                    status_code=result.status_code,
                    error_message=result.error_message,
                    was_paused=was_paused,
                )
            )

        report = AuditReport(
            checked_at=checked_at,
            records=tuple(records),
            ads_scanned=scanned,
            ads_skipped=skipped,
            urls_checked=cache.misses,
            cache_hits=cache.hits,
            account_id=account_id,
        )

        if report.has_findings:
            print(
                f"[AUDIT] Found {report.broken_count} broken link(s) across {scanned} ad(s); "
                f"{report.paused_count} ad(s) paused."
            )
        else:
            print(f"[AUDIT] No broken links found across {scanned} ad(s).")
        return report

    def audit(
        self,
        ads: Iterable[AdDescriptor],
        sinks: Sequence[ReportSink] = (),
        account_id: Optional[str] = None,
    ) -> AuditReport:
        """Run the audit and hand the finished report to every sink in order."""
        report = self.run(ads, account_id=account_id)
        for sink in sinks:
            sink.submit(report)
        return report
