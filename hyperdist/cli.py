"""Typer CLI entry-point for hyperdist."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from hyperdist.models import DistanceReport
from hyperdist.query import load_query, solve_query, validate_query, write_report

app = typer.Typer(
    name="hyperdist",
    help="Distance from a point to a hyperellipsoid.",
    add_completion=False,
)

# examples/ lives at repo root, one level above hyperdist/
_EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"

_DEMO_YAMLS = [
    "outside_major_axis_2d.yaml",
    "outside_minor_axis_2d.yaml",
    "inside_on_plane_2d.yaml",
    "skew_3d.yaml",
    "rotated_3d.yaml",
    "center_3d.yaml",
]


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        "--log-level",
        envvar="HYPERDIST_LOG_LEVEL",
        case_sensitive=False,
        help="Logging level.",
    ),
) -> None:
    """Distance from a point to a hyperellipsoid."""
    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _format_coords(coords: list[float]) -> str:
    return "[" + ", ".join(f"{v:.6f}" for v in coords) + "]"


@app.command()
def solve(
    query_yaml: Path = typer.Argument(
        ...,
        exists=True,
        readable=True,
        help="Path to a query YAML file.",
    ),
    out: Path = typer.Option(
        Path("out"),
        "--out",
        "-o",
        help="Output directory for result reports.",
    ),
) -> None:
    """Solve a query YAML and write its result report."""
    try:
        query = load_query(query_yaml)
        report = solve_query(query)
    except ValidationError as exc:
        typer.echo("Validation errors:")
        for err in exc.errors():
            typer.echo(f"  - {err['msg']}")
        raise typer.Exit(code=2)
    except yaml.YAMLError as exc:
        typer.echo("Validation errors:")
        typer.echo(f"  - YAML parse error: {exc}")
        raise typer.Exit(code=2)

    report_path = write_report(report, out)
    result = report.result
    typer.echo(
        f"distance={result.distance:.6f} "
        f"closest={_format_coords(result.closest_point_coords)}"
    )
    typer.echo(f"Report: {report_path}")


@app.command()
def validate(
    query_yaml: Path = typer.Argument(
        ...,
        exists=True,
        readable=True,
        help="Path to a query YAML file.",
    ),
) -> None:
    """Validate a query YAML against the schema (nothing is solved)."""
    errors = validate_query(query_yaml)
    if not errors:
        typer.echo("OK")
        raise typer.Exit(code=0)

    typer.echo("Validation errors:")
    for err in errors:
        typer.echo(f"  - {err}")
    raise typer.Exit(code=1)


def _format_row(filename: str, report: DistanceReport) -> str:
    """Build one row of the demo summary table."""
    result = report.result
    return (
        f"  {filename:<30s} {result.distance:>12.6f} "
        f"{result.branch.value:<12s} {result.iterations}"
    )


@app.command()
def demo(
    out: Path = typer.Option(
        Path("out"),
        "--out",
        "-o",
        help="Output directory for result reports.",
    ),
) -> None:
    """Solve the bundled example queries and print a summary table."""
    if not _EXAMPLES_DIR.is_dir():
        typer.echo(f"Examples directory not found: {_EXAMPLES_DIR}")
        raise typer.Exit(code=1)

    typer.echo(f"  {'FILE':<30s} {'DISTANCE':>12s} {'BRANCH':<12s} ITERATIONS")
    typer.echo(f"  {'─' * 30} {'─' * 12} {'─' * 12} {'─' * 10}")

    for name in _DEMO_YAMLS:
        report = solve_query(load_query(_EXAMPLES_DIR / name))
        write_report(report, out)
        typer.echo(_format_row(name, report))

    typer.echo(f"\nReports written to: {out}/")


if __name__ == "__main__":
    app()
