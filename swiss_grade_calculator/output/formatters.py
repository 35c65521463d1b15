"""Output formatters for grading results."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..config import PASS_RATE_GOOD, PASSING_GRADE, GradingConfig


def format_config(config: GradingConfig, console: Console) -> None:
    """Print the active grading configuration as a header panel."""
    header = Text()
    header.append("Swiss Grade Calculator\n", style="bold cyan")
    header.append(
        f"Max: {config.max_possible_points:g} pts  |  "
        f"6.0 at {config.points_for_6:g} pts  |  "
        f"4.0 at {config.points_for_4:g} pts  |  "
        f"Scale {config.grade_min:g}-{config.grade_max:g}  |  "
        f"Step {config.rounding_step:g}  |  "
        f"{config.algorithm.value}"
    )
    console.print(Panel(header, title="[bold]Configuration[/bold]", border_style="cyan"))


def format_students_table(students: list[dict], config: GradingConfig, console: Console) -> None:
    """Print graded students as a rich table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Points", justify="right")
    table.add_column("Grade", justify="right")
    table.add_column("Status")

    for student in students:
        points = student.get("points", 0)
        points_display = f"{points:g}"
        if points > config.max_possible_points:
            points_display = f"[bold red]{points_display}[/bold red]"

        table.add_row(
            str(student.get("name") or "-"),
            points_display,
            _grade_display(student["grade"], config.rounding_step),
            "[green]Passed[/green]" if student.get("is_passing") else "[red]Failed[/red]",
        )

    console.print(table)


def format_scale_table(rows: list[dict], config: GradingConfig, console: Console) -> None:
    """Print the grade scale (minimum points per grade)."""
    table = Table(
        show_header=True,
        header_style="bold",
        title=f"Grade Scale (step {config.rounding_step:g})",
    )
    table.add_column("Grade", justify="right")
    table.add_column("Min. Points", justify="right", style="dim")

    for row in rows:
        table.add_row(
            _grade_display(row["grade"], config.rounding_step),
            f"{row['min_points']:.2f}",
        )

    console.print(table)


def format_stats(stats: dict, console: Console) -> None:
    """Print roster statistics as a compact panel."""
    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column("Key", style="dim")
    stats_table.add_column("Value")

    pass_rate = stats.get("pass_rate", 0)
    color = "green" if pass_rate >= PASS_RATE_GOOD else "yellow"

    stats_table.add_row("Average", f"{stats.get('average', 0):g}")
    stats_table.add_row("Median", f"{stats.get('median', 0):g}")
    stats_table.add_row("Min / Max", f"{stats.get('min', 0):g} / {stats.get('max', 0):g}")
    stats_table.add_row("Pass Rate", f"[{color}]{pass_rate}%[/{color}]")
    stats_table.add_row("Std. Dev.", f"{stats.get('std_dev', 0):g}")

    console.print(Panel(stats_table, title="[bold]Statistics[/bold]", border_style="dim"))


def format_distribution(buckets: list[dict], console: Console) -> None:
    """Print grade distribution as a horizontal bar chart."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Range", style="dim")
    table.add_column("Bar")
    table.add_column("Count", justify="right")

    for bucket in buckets:
        color = "green" if bucket["min"] >= PASSING_GRADE else "red"
        bar = f"[{color}]{'#' * bucket['count']}[/{color}]"
        table.add_row(bucket["name"], bar, str(bucket["count"]))

    console.print(Panel(table, title="[bold]Grade Distribution[/bold]", border_style="dim"))


def format_curve(samples: list[dict], console: Console) -> None:
    """Print sampled curve points with their raw grades."""
    table = Table(show_header=True, header_style="bold", title="Grading Curve")
    table.add_column("Points", justify="right")
    table.add_column("Raw Grade", justify="right")

    for sample in samples:
        raw = sample["grade"]
        color = "green" if raw >= PASSING_GRADE else "red"
        table.add_row(f"{sample['points']:g}", f"[{color}]{raw:.3f}[/{color}]")

    console.print(table)


def format_json(results, console: Console) -> None:
    """Format and print results as JSON."""
    console.print_json(json.dumps(results, indent=2, default=str))


def grade_decimals(step: float) -> int:
    """Decimals needed to show a grade on the given step."""
    if step == 1:
        return 0
    if step == 0.25:
        return 2
    return 1


def _grade_display(value: float, step: float) -> str:
    """Format a grade with pass/fail coloring."""
    text = f"{value:.{grade_decimals(step)}f}"
    if value >= PASSING_GRADE:
        return f"[green]{text}[/green]"
    return f"[red]{text}[/red]"
