"""Flask CLI commands for HabitFlow."""

from __future__ import annotations

import click


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("habitflow-seed")
    def habitflow_seed() -> None:
        """Load the sample habits unless habits already exist."""

        from .extensions import get_store
        from .services.seed import seed_sample_data

        summary = seed_sample_data(get_store())
        if summary.habits:
            click.echo(f"Seeded {summary.habits} habits with {summary.completions} completions.")
        else:
            click.echo("Habits already exist; nothing seeded.")

    @app.cli.command("habitflow-recompute")
    def habitflow_recompute() -> None:
        """Refresh cached streaks against today's date."""

        from .extensions import get_store

        count = get_store().recompute_all()
        click.echo(f"Recomputed streaks for {count} habits.")
