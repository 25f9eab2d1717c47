"""
Recruit Match Command Line Interface

Provides CLI commands for computing candidate matches and statistics
for a job posting, plus configuration and database utilities.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from recruit_match.utils.constants import APP_NAME, MatchFactor

app = typer.Typer(
    name=APP_NAME,
    help="Candidate-job compatibility matching CLI",
    add_completion=False,
)
console = Console()

LEVEL_COLORS = {
    "excellent": "green",
    "good": "blue",
    "fair": "yellow",
    "poor": "red",
}


@app.callback()
def main():
    """Configure logging before running any command."""
    from recruit_match.utils.logger import setup_logging

    setup_logging()


def _build_engine(data_file: Optional[Path]):
    """Create a matching engine reading from a JSON file or MongoDB."""
    from recruit_match.core.matching import MatchingEngine
    from recruit_match.data.sources import JsonFileDataSource, RepositoryDataSource

    if data_file is not None:
        if not data_file.exists():
            console.print(f"[red]Error: File not found: {data_file}[/red]")
            raise typer.Exit(1)
        return MatchingEngine(data_source=JsonFileDataSource(data_file))

    from recruit_match.data.database import get_database_manager

    if not get_database_manager().check_sync_connection():
        console.print("[red]Error: Could not connect to MongoDB.[/red]")
        console.print("[dim]Use --data to read candidates and jobs from a JSON file instead.[/dim]")
        raise typer.Exit(1)
    return MatchingEngine(data_source=RepositoryDataSource())


def _parse_weights(raw: Optional[str], strict: bool):
    """Parse comma separated percentages in factor order into MatchWeights."""
    from recruit_match.data.models import MatchWeights
    from recruit_match.utils.exceptions import InvalidWeightsError

    if raw is None:
        weights = MatchWeights.from_defaults()
    else:
        parts = [p.strip() for p in raw.split(",")]
        factors = [f.value for f in MatchFactor]
        if len(parts) != len(factors):
            console.print(
                f"[red]Error: Expected {len(factors)} weights ({', '.join(factors)}), got {len(parts)}[/red]"
            )
            raise typer.Exit(1)
        try:
            weights = MatchWeights.from_percentages(
                **{factor: float(part) for factor, part in zip(factors, parts)}
            )
        except (ValueError, InvalidWeightsError) as e:
            console.print(f"[red]Error: Invalid weights: {e}[/red]")
            raise typer.Exit(1)

    if strict:
        try:
            weights.validate_total()
        except InvalidWeightsError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)
    return weights


@app.command()
def version():
    """Show application version."""
    from recruit_match import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from recruit_match.data.models import MatchWeights
    from recruit_match.utils.config import get_settings

    settings = get_settings()

    table = Table(title="Recruit Match Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Database Host", settings.database.host)
    table.add_row("Database Name", settings.database.name)
    table.add_row("Default Min Score", str(settings.matching.default_min_score))
    table.add_row("Parallel Threshold", str(settings.matching.parallel_threshold))
    table.add_row("Max Workers", str(settings.matching.max_workers))
    table.add_row("Log Level", settings.logging.level)
    for factor, weight in MatchWeights.from_defaults().to_dict().items():
        table.add_row(f"Weight: {factor}", f"{weight:.0%}")

    console.print(table)


@app.command()
def init_db():
    """Create the indexes used by the matching reads."""
    from recruit_match.data.database import get_database_manager

    console.print("[yellow]Initializing database...[/yellow]")

    db_manager = get_database_manager()
    if not db_manager.check_sync_connection():
        console.print("[red]Error: Could not connect to MongoDB.[/red]")
        console.print("[dim]Make sure MongoDB is running and connection settings are correct.[/dim]")
        raise typer.Exit(1)

    console.print("  [green]✓[/green] Connected to MongoDB")
    db_manager.ensure_indexes()
    console.print("  [green]✓[/green] Indexes created")
    db_manager.close_all()


@app.command()
def match(
    job_id: str = typer.Argument(..., help="Job ID to match candidates against"),
    min_score: Optional[int] = typer.Option(
        None, "--min-score", "-m", min=0, max=100, help="Minimum composite score (default from settings)"
    ),
    top_n: Optional[int] = typer.Option(None, "--top", "-n", min=1, help="Only show the top N matches"),
    weights: Optional[str] = typer.Option(
        None,
        "--weights",
        "-w",
        help="Percentages for competencies,experience,education,location,salary,disc",
    ),
    strict_weights: bool = typer.Option(
        False, "--strict-weights", help="Require the weights to sum to 100"
    ),
    data_file: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Read jobs and candidates from a JSON file"
    ),
):
    """Rank candidates against a job posting."""
    from recruit_match.utils.exceptions import NotFoundError

    match_weights = _parse_weights(weights, strict_weights)
    engine = _build_engine(data_file)

    try:
        results = engine.compute_matches(job_id, min_score=min_score, weights=match_weights)
    except NotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not results:
        console.print("[yellow]No candidates matched the threshold.[/yellow]")
        raise typer.Exit(0)

    shown = results[:top_n] if top_n else results

    table = Table(title=f"Matches for job {job_id}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Candidate", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Level", justify="center")
    for factor in MatchFactor:
        table.add_column(factor.value.capitalize(), justify="right")

    for i, result in enumerate(shown, 1):
        level = result.score_level.value
        color = LEVEL_COLORS[level]
        table.add_row(
            str(i),
            result.candidate.display_name,
            str(result.score),
            f"[{color}]{level.upper()}[/{color}]",
            *(str(result.breakdown.factor(f).score) for f in MatchFactor),
        )

    console.print(table)
    console.print(f"[dim]{len(results)} candidate(s) matched[/dim]")


@app.command()
def stats(
    job_id: str = typer.Argument(..., help="Job ID to compute statistics for"),
    data_file: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Read jobs and candidates from a JSON file"
    ),
):
    """Show score statistics over a job's full candidate pool."""
    from recruit_match.utils.exceptions import NotFoundError

    engine = _build_engine(data_file)

    try:
        statistics = engine.compute_statistics(job_id)
    except NotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Match statistics for job {job_id}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")

    table.add_row("Candidates", str(statistics.total))
    table.add_row("Score >= 70", str(statistics.at_least_70))
    table.add_row("Score >= 80", str(statistics.at_least_80))
    table.add_row("Score >= 90", str(statistics.at_least_90))
    table.add_row("Max score", str(statistics.max_score))
    table.add_row("Mean score", str(statistics.mean_score))
    console.print(table)

    histogram = Table(title="Score distribution")
    histogram.add_column("Range", style="cyan")
    histogram.add_column("Candidates", justify="right")
    for label, count in statistics.histogram.items():
        histogram.add_row(label, str(count))
    console.print(histogram)


if __name__ == "__main__":
    app()
