"""CLI commands for the habit tracker.

Usage:
    flask init-db                          # Create the tracker table
    flask habits-stats                     # Stats for the current month
    flask habits-stats --month 2 --year 2024
"""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import with_appcontext


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create the tracker tables if they do not exist."""
    from habitcal.domains.habits.models import tracker_models  # noqa: F401
    from habitcal.extensions import db

    db.create_all()
    click.echo("Tracker tables ready.")


@click.command("habits-stats")
@click.option("--month", "-m", type=click.IntRange(1, 12), help="Calendar month (1-12)")
@click.option("--year", "-y", type=int, help="Calendar year")
@with_appcontext
def habits_stats_command(month: int | None, year: int | None):
    """Print done counts, current streak and tier for every habit."""
    from habitcal.domains.habits.services import calendar_service, persistence_service, stats_service

    today = calendar_service.local_today()
    state = persistence_service.load_state(today, default=current_app.config["HABITS_DEFAULT_NAME"])
    view_year = year or today.year
    # Commands take 1-12; the services use zero-based months.
    view_month = (month - 1) if month else today.month - 1
    max_days = current_app.config["HABITS_STREAK_MAX_DAYS"]

    click.echo(f"Habits for {view_year}-{view_month + 1:02d} (today {today.isoformat()}):")
    for name in state.catalog:
        stats = stats_service.habit_stats(
            state.records.get(name), view_month, view_year, today, max_days
        )
        marker = "*" if name == state.selected_habit else " "
        click.echo(
            f" {marker} {name}: {stats['month_done']} this month, "
            f"{stats['total_done']} total, streak {stats['current_streak']} ({stats['tier']})"
        )


def register_commands(app) -> None:
    app.cli.add_command(init_db_command)
    app.cli.add_command(habits_stats_command)
