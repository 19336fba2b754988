"""Report sinks: where a finished :class:`AuditReport` is handed off.

All sinks share one interface, ``submit(report)``.  The orchestrator calls it
once per run, after the report is complete.
"""

from __future__ import annotations

import csv
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from linkaudit.audit.report import AuditReport
from linkaudit.db.models import AuditRun
from linkaudit.db.reports import save_report

REPORT_COLUMNS = [
    "Date Checked",
    "Campaign",
    "Ad ID",
    "Ad Type",
    "URL",
    "Status Code",
    "Error",
    "Paused",
]


def report_rows(report: AuditReport) -> list[list[str]]:
    """Flatten *report* into sheet rows matching :data:`REPORT_COLUMNS`."""
    checked = report.checked_at.isoformat(timespec="seconds")
    return [
        [
            checked,
            r.campaign_name,
            r.ad_id,
            r.ad_type,
            r.url,
            str(r.status_code),
            r.error_message or "",
            "Yes" if r.was_paused else "No",
        ]
        for r in report.records
    ]


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------

class ReportSink(ABC):
    """Destination for a completed audit report."""

    @abstractmethod
    def submit(self, report: AuditReport) -> None:
        """Persist or publish *report*."""


# ---------------------------------------------------------------------------
# CSV sheet
# ---------------------------------------------------------------------------

class CsvReportSink(ReportSink):
    """Writes the report as a sheet, replacing whatever the file held before.

    The header row is always written, so a run without findings leaves a
    header-only file rather than stale rows from an earlier run.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def submit(self, report: AuditReport) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh)
            writer.writerow(REPORT_COLUMNS)
            writer.writerows(report_rows(report))
        print(f"[REPORT] Wrote {report.broken_count} broken link(s) to {self.path}")


# ---------------------------------------------------------------------------
# SQLite run history
# ---------------------------------------------------------------------------

class SqliteReportSink(ReportSink):
    """Appends each report to the run history database.

    The connection must already be initialised with
    :func:`~linkaudit.db.migrations.init_db`.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn
        self.last_run: Optional[AuditRun] = None

    def submit(self, report: AuditReport) -> None:
        self.last_run = save_report(self.conn, report)
        print(f"[REPORT] Saved run {self.last_run.id}")
