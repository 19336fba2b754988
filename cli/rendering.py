"""Utilities for rendering audit results in the CLI."""

from __future__ import annotations

from typing import List

from linkaudit.audit.report import AuditReport, BrokenLinkRecord
from linkaudit.checker.models import ERROR_STATUS
from linkaudit.db.models import AuditRun


def render_summary(report: AuditReport) -> str:
    """Render the run counters as a short block of ``label : value`` lines."""
    lines = [
        f"Checked at : {report.checked_at.isoformat(timespec='seconds')}",
        f"Ads scanned: {report.ads_scanned}",
        f"Skipped    : {report.ads_skipped} (no destination URL)",
        f"URLs probed: {report.urls_checked} ({report.cache_hits} cache hit(s))",
        f"Broken     : {report.broken_count}",
        f"Paused     : {report.paused_count}",
    ]
    return "\n".join(lines)


def render_records(records: List[BrokenLinkRecord]) -> str:
    """Render broken-link records as an aligned plain-text table."""
    if not records:
        return "No broken links."

    header = ["Campaign", "Ad ID", "Ad Type", "Status", "Paused", "URL"]
    rows = [
        [
            r.campaign_name,
            r.ad_id,
            r.ad_type,
            str(r.status_code),
            "yes" if r.was_paused else "no",
            r.url,
        ]
        for r in records
    ]
    # The URL column is last and left unpadded.
    widths = [max(len(row[i]) for row in [header, *rows]) for i in range(len(header) - 1)]

    def _line(row: List[str]) -> str:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        return "  ".join([*cells, row[-1]])

    lines = [_line(header), _line(["-" * w for w in widths] + ["---"])]
    lines.extend(_line(row) for row in rows)
    for r in records:
        if r.error_message and r.status_code == ERROR_STATUS:
            lines.append(f"  ! {r.url}: {r.error_message}")
    return "\n".join(lines)


def render_run_line(run: AuditRun) -> str:
    """One-line description of a stored run."""
    account = f"  account={run.account_id}" if run.account_id else ""
    return (
        f"  {run.id}  {run.checked_at}  scanned={run.ads_scanned}  "
        f"broken={run.broken_count}  paused={run.paused_count}{account}"
    )
