"""Link audit CLI — entry-point for all audit operations.

Usage:
    python cli/main.py --help

Commands:
    run       → audit every ad of an account export, optionally pausing broken ones
    check     → probe a single URL
    reports   → browse stored audit runs
    db        → run-history database maintenance
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkaudit.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from linkaudit.ads.account import JsonAdAccount
from linkaudit.audit.orchestrator import LinkAuditor
from linkaudit.audit.sinks import CsvReportSink, ReportSink, SqliteReportSink
from linkaudit.checker.prober import UrlProber
from linkaudit.db import get_connection, init_db
from linkaudit.errors import LinkAuditError
from linkaudit.remediation import AdRemediator

from cli.commands.reports import reports_app
from cli.rendering import render_records, render_summary
from cli.settings import load_settings

app = typer.Typer(
    name="linkaudit",
    help="Audit ad destination URLs for broken links.",
    no_args_is_help=True,
)
app.add_typer(reports_app, name="reports")

# ---------------------------------------------------------------------------
# DB commands
# ---------------------------------------------------------------------------
db_app = typer.Typer(help="Run-history database operations.", no_args_is_help=True)
app.add_typer(db_app, name="db")


@db_app.command("init")
def db_init() -> None:
    """Initialise the SQLite database (create tables if they do not exist)."""
    settings = load_settings()
    conn = get_connection(settings.db_path)
    init_db(conn)
    conn.close()
    typer.echo(f"[db init] Database ready at {settings.db_path}")


# ---------------------------------------------------------------------------
# Audit
# ---------------------------------------------------------------------------
@app.command("run")
def run_audit(
    account_file: Path = typer.Argument(..., help="JSON export of the account's campaigns and ads."),
    auto_pause: Optional[bool] = typer.Option(
        None, "--auto-pause/--no-auto-pause", help="Pause ads whose URL is broken."
    ),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Per-request timeout in seconds."),
    include_paused: Optional[bool] = typer.Option(
        None, "--include-paused/--enabled-only", help="Also check ads that are already paused."
    ),
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="Write the report to this CSV file."),
    save: bool = typer.Option(True, "--save/--no-save", help="Store the run in the history database."),
    fail_on_broken: bool = typer.Option(
        False, "--fail-on-broken", help="Exit with code 2 when broken links are found."
    ),
) -> None:
    """Check every ad's destination URL and report the broken ones."""
    settings = load_settings(
        auto_pause_enabled=auto_pause,
        request_timeout=timeout,
        include_paused=include_paused,
    )

    try:
        account = JsonAdAccount(account_file, include_paused=settings.include_paused)
    except LinkAuditError as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=1)

    sinks: list[ReportSink] = []
    conn = None
    if save:
        conn = get_connection(settings.db_path)
        init_db(conn)
        sinks.append(SqliteReportSink(conn))
    if csv_path is not None:
        sinks.append(CsvReportSink(csv_path))

    typer.echo(f"[run] Auditing {account_file} (timeout={settings.request_timeout:g}s) …")
    try:
        with UrlProber(timeout=settings.request_timeout, user_agent=settings.user_agent) as prober:
            auditor = LinkAuditor(settings, prober.probe, AdRemediator(account))
            report = auditor.audit(account, sinks, account_id=account.account_id)
    except LinkAuditError as exc:
        typer.echo(f"❌ Audit aborted: {exc}")
        raise typer.Exit(code=1)
    finally:
        if conn is not None:
            conn.close()

    typer.echo("")
    typer.echo(render_summary(report))
    typer.echo("")
    typer.echo(render_records(list(report.records)))

    if fail_on_broken and report.has_findings:
        raise typer.Exit(code=2)


@app.command("check")
def check_url(
    url: str = typer.Argument(..., help="URL to check."),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds."),
) -> None:
    """Probe a single URL and print its classification."""
    settings = load_settings(request_timeout=timeout)

    with UrlProber(timeout=settings.request_timeout, user_agent=settings.user_agent) as prober:
        result = prober.probe(url)

    if result.is_broken:
        typer.echo(f"✗ BROKEN  {url}  status={result.status_code}  error={result.error_message}")
        raise typer.Exit(code=1)
    typer.echo(f"✓ OK  {url}  status={result.status_code}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
