"""Command-line interface for profile insights.

Entry point: `profile-insights` command (defined in pyproject.toml).
"""

import json
import logging

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from profile_insights.config import Config

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _load(ctx: click.Context, profile_json: str):
    """Load a profile file, exiting with status 1 on a bad record."""
    from profile_insights.models import load_profile

    try:
        return load_profile(profile_json)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: {escape(profile_json)} is not valid JSON ({e})[/red]")
    except ValidationError as e:
        console.print(f"[red]Error: invalid profile record in {escape(profile_json)}[/red]")
        console.print(str(e), markup=False)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error: cannot read {escape(profile_json)} ({escape(str(e))})[/red]")
    ctx.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Profile page analytics."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = Config()


@main.command()
@click.argument("profile_json", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--max-buckets",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum chart buckets (default: PI_MAX_PROJECT_RANK or 12)",
)
@click.pass_context
def rank(ctx: click.Context, profile_json: str, max_buckets: int | None) -> None:
    """Show the popularity distribution of a user's projects."""
    from profile_insights.analytics.ranking import bucket_sum, rank_profile, share_percent

    config = ctx.obj["config"]
    if max_buckets is not None:
        config.max_project_rank = max_buckets

    profile = _load(ctx, profile_json)
    buckets = rank_profile(profile, config)
    if not buckets:
        console.print("[yellow]No public projects to rank.[/yellow]")
        return

    total = bucket_sum(buckets)
    table = Table(title=f"Popularity of @{escape(profile.username)}'s projects")
    table.add_column("#", justify="right")
    table.add_column("Project")
    table.add_column("Score", justify="right")
    table.add_column("Share", justify="right")
    for i, bucket in enumerate(buckets, 1):
        table.add_row(
            str(i),
            escape(bucket.name),
            str(bucket.amount),
            f"{share_percent(bucket.amount, total):.2f}%",
        )
    console.print(table)
    console.print(f"  Total: {total}")


@main.command()
@click.argument("profile_json", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def timeline(ctx: click.Context, profile_json: str) -> None:
    """Show a user's activity timeline, newest first."""
    from profile_insights.analytics.timeline import build_timeline
    from profile_insights.output.timeline import generate_timeline

    config = ctx.obj["config"]
    profile = _load(ctx, profile_json)
    events = build_timeline(profile)
    console.print(f"[cyan]Activity of @{escape(profile.username)} ({len(events)} events)[/cyan]")
    console.print(generate_timeline(events, config), markup=False, highlight=False)


@main.command()
@click.argument("profile_json", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def summary(ctx: click.Context, profile_json: str) -> None:
    """Show the totals from a user's info cards."""
    from profile_insights.analytics.summary import summarize

    profile = _load(ctx, profile_json)
    stats = summarize(profile)

    console.print(f"[green]@{escape(profile.username)}[/green] ({escape(profile.role)})")
    console.print(f"  Projects:      {stats.total_projects}")
    console.print(f"  Popular:       {stats.ranked_projects}")
    console.print(f"  Staff picks:   {stats.staff_picked_projects}")
    console.print(f"  Private:       {stats.private_projects}")
    console.print(f"  Views:         {stats.total_views}")
    console.print(f"  Likes:         {stats.total_likes}")
    console.print(f"  Comments:      {stats.total_comments}")
    console.print(f"  Remakes:       {stats.total_remakes}")
    console.print(f"  Joined:        {stats.joined_year or '-'}")
    console.print(f"  Followers:     {stats.followers}")
    console.print(f"  Following:     {stats.followings}")
