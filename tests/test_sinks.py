"""Tests for the report sinks."""

from __future__ import annotations

import csv
from datetime import datetime, timezone
from pathlib import Path

from linkaudit.audit.report import AuditReport, BrokenLinkRecord
from linkaudit.audit.sinks import REPORT_COLUMNS, CsvReportSink, SqliteReportSink, report_rows
from linkaudit.db import get_connection, init_db
from linkaudit.db.reports import get_run_records, list_runs

_CHECKED_AT = datetime(2026, 5, 4, 12, 0, 30, tzinfo=timezone.utc)

_REPORT = AuditReport(
    checked_at=_CHECKED_AT,
    records=(
        BrokenLinkRecord("Brand", "1", "11", "RESPONSIVE_SEARCH_AD", "https://x.test/a", 404, "HTTP 404", True),
        BrokenLinkRecord("Sale", "2", "21", "IMAGE_AD", "https://slow.test/", "ERROR", "timed out", False),
    ),
    ads_scanned=4,
)


def test_report_rows_match_columns() -> None:
    rows = report_rows(_REPORT)

    assert len(REPORT_COLUMNS) == 8
    assert rows[0] == [
        "2026-05-04T12:00:30+00:00",
        "Brand",
        "11",
        "RESPONSIVE_SEARCH_AD",
        "https://x.test/a",
        "404",
        "HTTP 404",
        "Yes",
    ]
    assert rows[1][5:] == ["ERROR", "timed out", "No"]


class TestCsvReportSink:
    def test_writes_header_and_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "out" / "broken.csv"

        CsvReportSink(path).submit(_REPORT)

        with path.open(newline="", encoding="utf-8") as fh:
            rows = list(csv.reader(fh))
        assert rows[0] == REPORT_COLUMNS
        assert len(rows) == 3
        assert rows[1][4] == "https://x.test/a"

    def test_overwrites_previous_content(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.csv"
        sink = CsvReportSink(path)
        sink.submit(_REPORT)

        sink.submit(AuditReport(checked_at=_CHECKED_AT))

        with path.open(newline="", encoding="utf-8") as fh:
            rows = list(csv.reader(fh))
        assert rows == [REPORT_COLUMNS]


class TestSqliteReportSink:
    def test_saves_run(self) -> None:
        conn = get_connection(":memory:")
        init_db(conn)
        sink = SqliteReportSink(conn)

        sink.submit(_REPORT)

        assert sink.last_run is not None
        assert [r.id for r in list_runs(conn)] == [sink.last_run.id]
        assert get_run_records(conn, sink.last_run.id) == list(_REPORT.records)
        conn.close()
