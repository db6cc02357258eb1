"""Rich terminal report renderer.

Composes Rich tables and panels into the user-facing terminal output for
an advisory run and for the action catalog.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from gridwise import __version__
from gridwise.data.models import ActionDefinition, AdvisoryResult, Recommendation
from gridwise.scoring.thresholds import score_to_color

_PEAK_COLORS = {"high": "green", "medium": "yellow", "low": "red"}


def mini_gauge(score: float, width: int = 10) -> str:
    """Compact gauge for inline use in tables."""
    clamped = max(0.0, min(100.0, score))
    filled = int(clamped / 100 * width)
    color = score_to_color(clamped)
    bar = "█" * filled + "░" * (width - filled)
    return f"[{color}]{bar}[/] {clamped:.0f}"


def _eur_range(value: tuple[float, float]) -> str:
    low, high = value
    if low == high:
        return f"€{low:,.0f}"
    return f"€{low:,.0f}-{high:,.0f}"


class TerminalRenderer:
    """Renders advisory results to the terminal using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, result: AdvisoryResult, top_n: int | None = None) -> None:
        """Render the profile header, ranked recommendations and totals.

        When *top_n* is given only that many recommendations are listed.
        """
        self._render_header(result)
        recs = result.recommendations if top_n is None else result.top(top_n)
        if not recs:
            self.console.print()
            self.console.print(
                "  [yellow]No recommendations match this profile and budget.[/]"
            )
        else:
            self._render_recommendations(recs)
            self._render_how_to(recs[0])
        self._render_footer(result)

    def render_catalog(self, actions: list[ActionDefinition]) -> None:
        """Render the full action catalog as a table."""
        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("ID", style="bold", min_width=20)
        table.add_column("Category", min_width=10)
        table.add_column("Cost", justify="right", min_width=12)
        table.add_column("Savings/yr", justify="right", min_width=10)
        table.add_column("Peak", justify="center", width=7)
        table.add_column("Audience", min_width=10)
        table.add_column("Requires", min_width=10)

        for action in actions:
            peak = action.peak_relief.value
            table.add_row(
                action.id,
                action.category.value,
                _eur_range(action.cost_range_eur),
                _eur_range(action.annual_savings_eur),
                f"[{_PEAK_COLORS[peak]}]{peak}[/]",
                ", ".join(t.value for t in action.audience) or "[dim]any[/dim]",
                ", ".join(f"{k}={v}" for k, v in action.requires.items()) or "[dim]-[/dim]",
            )

        self.console.print()
        self.console.print(Rule(f"[bold]ACTION CATALOG[/bold] ({len(actions)} actions)"))
        self.console.print(table)

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _render_header(self, result: AdvisoryResult) -> None:
        profile = result.profile
        header_text = Text()
        header_text.append("GRIDWISE", style="bold cyan")
        header_text.append(" | ", style="dim")
        header_text.append(f"PC4 {profile.pc4}", style="bold")
        header_text.append(" | ", style="dim")
        header_text.append(profile.tenure.value if profile.tenure else "tenure unknown")
        header_text.append(" | ", style="dim")
        header_text.append(profile.heating.value if profile.heating else "heating unknown")
        header_text.append(" | ", style="dim")
        header_text.append(f"budget €{profile.investment_capacity_eur:,.0f}")

        self.console.print()
        self.console.print(Panel(header_text, title="Energy Transition Plan"))
        if result.in_grid_constrained_area:
            self.console.print(
                "  [bold yellow]Grid constrained area[/bold yellow]: "
                "peak relief actions weigh more."
            )

    def _render_recommendations(self, recommendations: list[Recommendation]) -> None:
        """Render ranked recommendations table."""
        self.console.print()
        self.console.print(Rule("[bold]RECOMMENDATIONS[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("#", justify="right", style="bold", width=3)
        table.add_column("Action", min_width=30)
        table.add_column("Score", justify="center", min_width=14)
        table.add_column("Grade", justify="center", width=6)
        table.add_column("Cost", justify="right", min_width=12)
        table.add_column("Savings/yr", justify="right", min_width=10)
        table.add_column("Peak", justify="center", width=7)

        for rank, rec in enumerate(recommendations, start=1):
            peak = rec.peak_relief.value
            grade_color = rec.grade.color
            table.add_row(
                str(rank),
                rec.title or rec.id,
                mini_gauge(rec.score),
                f"[{grade_color}]{rec.grade.value}[/{grade_color}]",
                _eur_range(rec.cost_range_eur),
                _eur_range(rec.annual_savings_eur),
                f"[{_PEAK_COLORS[peak]}]{peak}[/]",
            )

        self.console.print(table)

        total = sum(r.mean_annual_savings_eur for r in recommendations)
        total_co2 = sum(r.mean_annual_co2_kg for r in recommendations)
        self.console.print(
            f"\n  [bold]Potential Savings:[/bold] "
            f"[green]€{total:,.0f}/year[/green] "
            f"([green]€{total / 12:,.0f}/month[/green]) | "
            f"[green]{total_co2:,.0f} kg CO2/year[/green]"
        )

    def _render_how_to(self, rec: Recommendation) -> None:
        """Render the steps and subsidy hints of the top recommendation."""
        if not rec.how_to and not rec.subsidies:
            return
        lines = [f"[dim]•[/dim] {step}" for step in rec.how_to]
        lines.extend(
            f"[cyan]{hint.code.value}[/cyan]: {hint.note}" for hint in rec.subsidies
        )
        self.console.print()
        self.console.print(
            Panel(
                "\n".join(lines),
                title=f"[bold]FIRST STEP[/bold] | {rec.title or rec.id}",
                border_style=rec.grade.color,
                padding=(1, 2),
            )
        )

    def _render_footer(self, result: AdvisoryResult) -> None:
        self.console.print()
        self.console.print(Rule(style="dim"))
        self.console.print(
            f"  [dim]Generated: {result.timestamp.strftime('%Y-%m-%d %H:%M UTC')} | "
            f"gridwise v{__version__}[/dim]"
        )
        self.console.print()
