"""Tests for the run-history database layer.

All tests use an in-memory SQLite database so they are:
- Fast (no disk I/O)
- Isolated (each fixture gets a fresh DB)
- Side-effect free (nothing written to ~/.linkaudit)
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import pytest

from linkaudit.audit.report import AuditReport, BrokenLinkRecord
from linkaudit.db.connection import get_connection
from linkaudit.db.migrations import current_version, init_db, migrate
from linkaudit.db.reports import get_run, get_run_records, list_runs, save_report


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def conn() -> Generator[sqlite3.Connection, None, None]:
    """In-memory connection with the schema initialised."""
    connection = get_connection(":memory:")
    init_db(connection)
    yield connection
    connection.close()


def _report(*records: BrokenLinkRecord, scanned: int = 5) -> AuditReport:
    return AuditReport(
        checked_at=datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc),
        records=records,
        ads_scanned=scanned,
        ads_skipped=1,
        urls_checked=3,
        cache_hits=2,
        account_id="123-456-7890",
    )


_RECORD_404 = BrokenLinkRecord("Brand", "1", "11", "RESPONSIVE_SEARCH_AD", "https://x.test/a", 404, "HTTP 404", True)
_RECORD_ERR = BrokenLinkRecord("Sale", "2", "21", "IMAGE_AD", "https://slow.test/", "ERROR", "timed out", False)


# ---------------------------------------------------------------------------
# connection / init
# ---------------------------------------------------------------------------

class TestConnection:
    def test_foreign_keys_enabled(self, conn: sqlite3.Connection) -> None:
        row = conn.execute("PRAGMA foreign_keys").fetchone()
        assert row[0] == 1

    def test_row_factory(self, conn: sqlite3.Connection) -> None:
        row = conn.execute("SELECT 1 AS one").fetchone()
        assert row["one"] == 1

    def test_creates_parent_directory(self, tmp_path: Path) -> None:
        db_path = tmp_path / "nested" / "audits.db"
        connection = get_connection(db_path)
        connection.close()
        assert db_path.parent.is_dir()


class TestInitDb:
    def test_tables_exist(self, conn: sqlite3.Connection) -> None:
        names = {
            r["name"]
            for r in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
        }
        assert {"audit_runs", "broken_links", "schema_version"} <= names

    def test_idempotent(self, conn: sqlite3.Connection) -> None:
        init_db(conn)
        init_db(conn)
        assert current_version(conn) == 0

    def test_migrate_applies_pending_versions_once(self, conn: sqlite3.Connection) -> None:
        migrations = [(1, "ALTER TABLE audit_runs ADD COLUMN note TEXT")]
        migrate(conn, migrations)
        migrate(conn, migrations)

        assert current_version(conn) == 1
        columns = {r["name"] for r in conn.execute("PRAGMA table_info(audit_runs)").fetchall()}
        assert "note" in columns


# ---------------------------------------------------------------------------
# reports
# ---------------------------------------------------------------------------

class TestReports:
    def test_save_and_get_run(self, conn: sqlite3.Connection) -> None:
        run = save_report(conn, _report(_RECORD_404, _RECORD_ERR))

        fetched = get_run(conn, run.id)
        assert fetched == run
        assert run.account_id == "123-456-7890"
        assert run.checked_at == "2026-03-01T08:00:00+00:00"
        assert run.ads_scanned == 5
        assert run.broken_count == 2
        assert run.paused_count == 1
        assert run.urls_checked == 3
        assert run.cache_hits == 2

    def test_records_round_trip_in_order(self, conn: sqlite3.Connection) -> None:
        run = save_report(conn, _report(_RECORD_404, _RECORD_ERR))

        assert get_run_records(conn, run.id) == [_RECORD_404, _RECORD_ERR]

    def test_empty_report_is_stored(self, conn: sqlite3.Connection) -> None:
        run = save_report(conn, _report())

        assert run.broken_count == 0
        assert get_run_records(conn, run.id) == []

    def test_get_missing_run(self, conn: sqlite3.Connection) -> None:
        assert get_run(conn, "does-not-exist") is None

    def test_list_runs_newest_first(self, conn: sqlite3.Connection) -> None:
        first = save_report(conn, _report(scanned=1))
        second = save_report(conn, _report(scanned=2))

        runs = list_runs(conn)
        assert [r.id for r in runs] == [second.id, first.id]

    def test_list_runs_limit(self, conn: sqlite3.Connection) -> None:
        for _ in range(3):
            save_report(conn, _report())

        assert len(list_runs(conn, limit=2)) == 2
