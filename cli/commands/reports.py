"""Commands for browsing stored audit runs."""

import typer

from linkaudit.db import get_connection, init_db
from linkaudit.db.reports import get_run, get_run_records, list_runs

from cli.rendering import render_records, render_run_line
from cli.settings import load_settings

reports_app = typer.Typer(help="Browse the history of audit runs.", no_args_is_help=True)


@reports_app.command("list")
def reports_list(
    limit: int = typer.Option(20, "--limit", help="Maximum number of runs to show."),
) -> None:
    """List the most recent audit runs."""
    settings = load_settings()
    conn = get_connection(settings.db_path)
    init_db(conn)

    try:
        runs = list_runs(conn, limit=limit)
    finally:
        conn.close()

    if not runs:
        typer.echo("No audit runs recorded yet.")
        return

    typer.echo("Audit runs (newest first):")
    for run in runs:
        typer.echo(render_run_line(run))


@reports_app.command("show")
def reports_show(
    run_id: str = typer.Argument(..., help="ID of the run to display."),
) -> None:
    """Show the broken links found by one run."""
    settings = load_settings()
    conn = get_connection(settings.db_path)
    init_db(conn)

    try:
        run = get_run(conn, run_id)
        if run is None:
            typer.echo(f"❌ No run with id {run_id!r}.")
            raise typer.Exit(code=1)
        records = get_run_records(conn, run_id)
    finally:
        conn.close()

    typer.echo(render_run_line(run).strip())
    typer.echo("")
    typer.echo(render_records(records))
