"""Persistence of audit reports in the ``audit_runs`` / ``broken_links`` tables."""

from __future__ import annotations

import sqlite3
import uuid
from time import time
from typing import Optional

from linkaudit.audit.report import AuditReport, BrokenLinkRecord
from linkaudit.checker.models import StatusCode
from linkaudit.db.models import AuditRun


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _row_to_run(row: sqlite3.Row) -> AuditRun:
    return AuditRun(
        id=row["id"],
        account_id=row["account_id"],
        checked_at=row["checked_at"],
        ads_scanned=row["ads_scanned"],
        ads_skipped=row["ads_skipped"],
        urls_checked=row["urls_checked"],
        cache_hits=row["cache_hits"],
        broken_count=row["broken_count"],
        paused_count=row["paused_count"],
        created_at=row["created_at"],
    )


def _parse_status(raw: str) -> StatusCode:
    return int(raw) if raw.isdigit() else raw


def _row_to_record(row: sqlite3.Row) -> BrokenLinkRecord:
    return BrokenLinkRecord(
        campaign_name=row["campaign_name"],
        campaign_id=row["campaign_id"],
        ad_id=row["ad_id"],
        ad_type=row["ad_type"],
        url=row["url"],
        status_code=_parse_status(row["status_code"]),
        error_message=row["error_message"],
        was_paused=bool(row["was_paused"]),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def save_report(conn: sqlite3.Connection, report: AuditReport) -> AuditRun:
    """Insert *report* and all its records in one transaction.

    Returns:
        The newly created :class:`~linkaudit.db.models.AuditRun`.
    """
    run_id = str(uuid.uuid4())
    now = int(time())

    with conn:
        conn.execute(
            """
            INSERT INTO audit_runs (id, account_id, checked_at, ads_scanned, ads_skipped,
                                    urls_checked, cache_hits, broken_count, paused_count, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                run_id,
                report.account_id,
                report.checked_at.isoformat(),
                report.ads_scanned,
                report.ads_skipped,
                report.urls_checked,
                report.cache_hits,
                report.broken_count,
                report.paused_count,
                now,
            ),
        )
        conn.executemany(
            """
            INSERT INTO broken_links (run_id, position, campaign_name, campaign_id, ad_id,
                                      ad_type, url, status_code, error_message, was_paused)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    run_id,
                    position,
                    r.campaign_name,
                    r.campaign_id,
                    r.ad_id,
                    r.ad_type,
                    r.url,
                    str(r.status_code),
                    r.error_message,
                    int(r.was_paused),
                )
                for position, r in enumerate(report.records)
            ],
        )

    return get_run(conn, run_id)  # type: ignore[return-value]


def get_run(conn: sqlite3.Connection, run_id: str) -> Optional[AuditRun]:
    """Fetch a single run by its UUID.  Returns ``None`` if not found."""
    row = conn.execute(
        "SELECT * FROM audit_runs WHERE id = ?", (run_id,)
    ).fetchone()
    return _row_to_run(row) if row else None


def list_runs(conn: sqlite3.Connection, limit: int = 20) -> list[AuditRun]:
    """Return the most recent runs, newest first."""
    rows = conn.execute(
        "SELECT * FROM audit_runs ORDER BY created_at DESC, rowid DESC LIMIT ?",
        (limit,),
    ).fetchall()
    return [_row_to_run(r) for r in rows]


def get_run_records(conn: sqlite3.Connection, run_id: str) -> list[BrokenLinkRecord]:
    """Return the broken-link records of a run in their original order."""
    rows = conn.execute(
        "SELECT * FROM broken_links WHERE run_id = ? ORDER BY position",
        (run_id,),
    ).fetchall()
    return [_row_to_record(r) for r in rows]
