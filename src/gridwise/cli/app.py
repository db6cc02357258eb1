# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for gridwise."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from gridwise import __version__
from gridwise.config import AdvisorConfig, load_config
from gridwise.data.catalog import CatalogError
from gridwise.data.models import AdvisoryResult, UserProfile
from gridwise.data.profiles import PROFILES, get_profile
from gridwise.reporting.terminal import TerminalRenderer
from gridwise.scoring.engine import ScoringEngine

PROFILE_CHOICES = list(PROFILES.keys())

logger = logging.getLogger(__name__)


def _setup_logging(level: str, console: Console) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_profile(profile_name: str, profile_file: str | None) -> UserProfile:
    """Return the profile from *profile_file* when given, else the named preset."""
    if profile_file:
        raw = json.loads(Path(profile_file).read_text(encoding="utf-8"))
        return UserProfile.model_validate(raw)
    return get_profile(profile_name)


def _run_advice(
    ctx: click.Context, profile_name: str, profile_file: str | None
) -> AdvisoryResult:
    """Build the engine, score the profile and return the result."""
    console: Console = ctx.obj["console"]
    config: AdvisorConfig = ctx.obj["config"]

    profile = _load_profile(profile_name, profile_file)
    with console.status("[bold cyan]Scoring actions..."):
        engine = ScoringEngine.from_config(config)
        result = engine.advise(profile)
    logger.info(
        "Scored PC4 %s: %d recommendations", profile.pc4, len(result.recommendations)
    )
    return result


def _fail(console: Console, exc: Exception) -> None:
    console.print(f"[red]{escape(str(exc))}[/red]")
    raise SystemExit(1)


profile_option = click.option(
    "--profile", "-p",
    type=click.Choice(PROFILE_CHOICES),
    default="renter_apartment",
    help="Household profile preset",
)
profile_file_option = click.option(
    "--profile-file", type=click.Path(exists=True, dir_okay=False), default=None,
    help="JSON file with questionnaire answers (overrides --profile)",
)


@click.group()
@click.version_option(version=__version__)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--config", "-c", type=click.Path(), default=None,
    help="Advisor config YAML file",
)
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool, config: str | None) -> None:
    """gridwise: household energy-transition advisor

    Ranks energy actions (insulation, heat pumps, pledges, ...) for a
    household by peak-hour relief, energy savings and accessibility.
    """
    ctx.ensure_object(dict)
    console = Console(no_color=no_color)
    ctx.obj["console"] = console

    try:
        advisor_config = load_config(config) if config else AdvisorConfig()
    except (FileNotFoundError, ValueError) as exc:
        _fail(console, exc)
    ctx.obj["config"] = advisor_config

    _setup_logging("DEBUG" if verbose else advisor_config.log_level, console)


@cli.command()
@profile_option
@profile_file_option
@click.option("--top", "-n", type=click.IntRange(min=1), default=None, help="Number of recommendations to show")
@click.option("--all", "show_all", is_flag=True, help="Show every eligible recommendation")
@click.option(
    "--export-json", type=click.Path(), default=None,
    help="Export the raw result as JSON at this path",
)
@click.pass_context
def recommend(
    ctx: click.Context,
    profile: str,
    profile_file: str | None,
    top: int | None,
    show_all: bool,
    export_json: str | None,
) -> None:
    """Rank the action catalog for a household profile."""
    console: Console = ctx.obj["console"]
    config: AdvisorConfig = ctx.obj["config"]

    try:
        result = _run_advice(ctx, profile, profile_file)
    except (CatalogError, FileNotFoundError, ValidationError, ValueError) as exc:
        _fail(console, exc)

    top_n = None if show_all else (top if top is not None else config.top_n)
    TerminalRenderer(console).render(result, top_n=top_n)

    if export_json:
        _export_json(result, export_json, console)


@cli.command()
@click.option("--output", "-o", type=click.Path(), required=True, help="Output file path")
@profile_option
@profile_file_option
@click.pass_context
def export(
    ctx: click.Context, output: str, profile: str, profile_file: str | None
) -> None:
    """Export the ranked recommendations to JSON."""
    console: Console = ctx.obj["console"]
    try:
        result = _run_advice(ctx, profile, profile_file)
    except (CatalogError, FileNotFoundError, ValidationError, ValueError) as exc:
        _fail(console, exc)
    _export_json(result, output, console)


@cli.command()
@click.pass_context
def catalog(ctx: click.Context) -> None:
    """List every action in the catalog."""
    console: Console = ctx.obj["console"]
    try:
        engine = ScoringEngine.from_config(ctx.obj["config"])
    except (CatalogError, FileNotFoundError) as exc:
        _fail(console, exc)
    TerminalRenderer(console).render_catalog(list(engine.catalog))


@cli.command()
@click.pass_context
def profiles(ctx: click.Context) -> None:
    """List the household profile presets."""
    console: Console = ctx.obj["console"]

    table = Table(show_header=True, header_style="bold", padding=(0, 1))
    table.add_column("Preset", style="bold")
    table.add_column("PC4")
    table.add_column("Tenure")
    table.add_column("Heating")
    table.add_column("Budget", justify="right")

    for name, preset in PROFILES.items():
        table.add_row(
            name,
            preset.pc4,
            preset.tenure.value if preset.tenure else "-",
            preset.heating.value if preset.heating else "-",
            f"€{preset.investment_capacity_eur:,.0f}",
        )
    console.print(table)


def _export_json(result: AdvisoryResult, path: str, console: Console) -> None:
    """Export to JSON."""
    with open(path, "w") as f:
        f.write(result.model_dump_json(indent=2, by_alias=True))
    console.print(f"  [green]JSON report exported to:[/green] {path}")
