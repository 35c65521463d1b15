"""CLI entry point for Swiss Grade Calculator."""

import logging
from dataclasses import asdict

import typer
from rich.console import Console
from rich.logging import RichHandler

from .config import (
    CURVE_SAMPLE_STEPS,
    DEFAULT_CONFIG,
    AlgorithmType,
    GradingConfig,
    normalize_config,
    validate_config,
)
from .scoring import grade_scale, grade_students, sample_curve
from .stats import compute_stats, grade_distribution
from .output import (
    format_config,
    format_curve,
    format_distribution,
    format_json,
    format_scale_table,
    format_stats,
    format_students_table,
)

app = typer.Typer(
    name="swiss-grades",
    help="Convert exam points to grades on a configurable curve and summarize the results.",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def parse_entry(entry: str) -> dict | None:
    """
    Parse a roster entry of the form NAME=POINTS or POINTS.

    Returns a student dict with name and points, or None if invalid.
    """
    name, _, points_text = entry.rpartition("=")
    name = name.strip() or None

    try:
        points = float(points_text.strip())
    except ValueError:
        return None

    return {"name": name, "points": points}


@app.callback()
def main(
    ctx: typer.Context,
    max_points: float = typer.Option(
        DEFAULT_CONFIG.max_possible_points,
        "--max-points",
        help="Maximum possible points on the exam",
    ),
    points_for_6: float = typer.Option(
        DEFAULT_CONFIG.points_for_6,
        "--points-for-6",
        help="Points needed for the maximum grade",
    ),
    points_for_4: float = typer.Option(
        DEFAULT_CONFIG.points_for_4,
        "--points-for-4",
        help="Points needed for the passing grade 4.0",
    ),
    grade_min: float = typer.Option(DEFAULT_CONFIG.grade_min, "--grade-min", help="Lowest grade"),
    grade_max: float = typer.Option(DEFAULT_CONFIG.grade_max, "--grade-max", help="Highest grade"),
    step: float = typer.Option(
        DEFAULT_CONFIG.rounding_step,
        "--step",
        "-s",
        help="Rounding step: 0.1, 0.25, 0.5 or 1",
    ),
    algorithm: AlgorithmType = typer.Option(
        DEFAULT_CONFIG.algorithm,
        "--algorithm",
        "-a",
        case_sensitive=False,
        help="Curve shape above the passing mark",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Set up the grading configuration shared by all commands."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )

    config = GradingConfig(
        max_possible_points=max_points,
        points_for_6=points_for_6,
        points_for_4=points_for_4,
        grade_min=grade_min,
        grade_max=grade_max,
        rounding_step=step,
        algorithm=algorithm,
    )
    ctx.obj = {"config": config}


def _get_config(ctx: typer.Context) -> GradingConfig:
    """Repair and validate the configuration for commands that grade points."""
    config = ctx.obj["config"]

    normalized = normalize_config(config)
    if normalized != config:
        console.print(
            f"[yellow]Points for 4 adjusted to {normalized.points_for_4:g} "
            f"(must be below points for 6)[/yellow]"
        )
        config = normalized

    problems = validate_config(config)
    if problems:
        for problem in problems:
            console.print(f"[red]Invalid configuration: {problem}[/red]")
        raise typer.Exit(1)

    logger.debug("Using configuration %s", config)
    return config


@app.command()
def grade(
    ctx: typer.Context,
    entries: list[str] = typer.Argument(..., help="Students as NAME=POINTS or plain POINTS"),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table or json",
    ),
) -> None:
    """Grade a roster of point totals and show statistics."""
    config = _get_config(ctx)

    students = []
    invalid = []
    for entry in entries:
        student = parse_entry(entry)
        if student is None:
            invalid.append(entry)
        else:
            students.append(student)

    if invalid:
        console.print(f"[red]Invalid entries: {', '.join(invalid)}[/red]")
        console.print("Use NAME=POINTS or POINTS, e.g. 'Anna=42'")
        raise typer.Exit(1)

    graded = grade_students(students, config)
    grades = [s["grade"] for s in graded]
    stats = compute_stats(grades)

    if output_format == "json":
        format_json({"students": graded, "stats": stats}, console)
        return

    format_config(config, console)
    format_students_table(graded, config, console)
    format_stats(stats, console)
    format_distribution(grade_distribution(grades), console)


@app.command()
def scale(
    ctx: typer.Context,
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table or json",
    ),
) -> None:
    """Show the minimum points needed for each grade."""
    config = _get_config(ctx)
    rows = grade_scale(config)

    if output_format == "json":
        format_json(rows, console)
        return

    format_config(config, console)
    format_scale_table(rows, config, console)


@app.command()
def curve(
    ctx: typer.Context,
    steps: int = typer.Option(
        CURVE_SAMPLE_STEPS,
        "--steps",
        min=1,
        help="Number of sample intervals between 0 and the maximum points",
    ),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table or json",
    ),
) -> None:
    """Sample the unrounded grading curve."""
    config = _get_config(ctx)
    samples = sample_curve(config, steps)

    if output_format == "json":
        format_json({"config": asdict(config), "samples": samples}, console)
        return

    format_config(config, console)
    format_curve(samples, console)


@app.command()
def stats(
    grades: list[float] = typer.Argument(..., help="Grades to summarize"),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table or json",
    ),
) -> None:
    """Summarize a list of already computed grades."""
    result = compute_stats(grades)

    if output_format == "json":
        format_json(result, console)
        return

    format_stats(result, console)
    format_distribution(grade_distribution(grades), console)


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"swiss-grades version {__version__}")


if __name__ == "__main__":
    app()
