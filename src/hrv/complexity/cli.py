"""Typer CLI for multiscale entropy analysis."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Optional

import polars as pl
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hrv.complexity.entropy import count_template_matches
from hrv.complexity.exceptions import ComplexityError, InvalidInputError
from hrv.complexity.multiscale import multiscale_entropy, shuffled_baseline
from hrv.complexity.params import DEFAULT_MAX_SCALE, DEFAULT_SAMPEN_M, DEFAULT_SAMPEN_R, MSEParams
from hrv.complexity.results import MSEResult

app = typer.Typer(help="hrv-complexity CLI")
console = Console()


@app.command("mse")
def mse(
    series_path: Path = typer.Argument(..., help="Path to CSV/Parquet/JSON series"),
    max_scale: int = typer.Option(DEFAULT_MAX_SCALE, help="Largest coarse-graining scale"),
    sampen_r: float = typer.Option(DEFAULT_SAMPEN_R, help="Tolerance as a fraction of the signal's std"),
    sampen_m: int = typer.Option(DEFAULT_SAMPEN_M, help="Template length"),
    column: str = typer.Option("value", help="Column holding the signal"),
    shuffled: bool = typer.Option(False, "--shuffled/--no-shuffled", help="Also compute a shuffled baseline"),
    seed: Optional[int] = typer.Option(None, help="Random seed for the shuffled baseline"),
    jobs: int = typer.Option(1, help="Worker threads"),
    output: Optional[Path] = typer.Option(None, help="Optional JSON output path"),
) -> None:
    """Compute the multiscale entropy profile of a series."""
    try:
        series = _load_series(series_path, column)
        params = MSEParams.build(max_scale=max_scale, sampen_m=sampen_m, sampen_r=sampen_r)
        result = multiscale_entropy(series, params=params, n_jobs=jobs)
        baseline = (
            shuffled_baseline(series, params=params, random_state=seed, n_jobs=jobs)
            if shuffled
            else None
        )
    except ComplexityError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(_render_table(result, baseline))
    console.print(f"Complexity index: {result.complexity_index:.4f}")

    if output:
        payload = {"original": result.to_dict()}
        if baseline is not None:
            payload["shuffled"] = baseline.to_dict()
        output.write_text(json.dumps(payload))
        console.print(f"[green]Wrote MSE results to {output}[/green]")


@app.command("sampen")
def sampen(
    series_path: Path = typer.Argument(..., help="Path to CSV/Parquet/JSON series"),
    m: int = typer.Option(DEFAULT_SAMPEN_M, help="Template length"),
    r: float = typer.Option(DEFAULT_SAMPEN_R, help="Absolute matching tolerance"),
    column: str = typer.Option("value", help="Column holding the signal"),
) -> None:
    """Compute sample entropy of a series as-is (no normalization)."""
    try:
        series = _load_series(series_path, column)
        matches = count_template_matches(series, m=m, r=r)
    except ComplexityError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"Sample Entropy, r={r} m={m}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Templates", str(matches.n_templates))
    table.add_row("B (length m matches)", str(matches.b))
    table.add_row("A (length m+1 matches)", str(matches.a))
    table.add_row("Sample entropy", _format_value(matches.entropy))
    console.print(table)


def _render_table(result: MSEResult, baseline: MSEResult | None = None) -> Table:
    """Render MSE values against the scale axis; undefined values show as gaps."""
    params = result.params
    table = Table(title=f"MSE, r={params.sampen_r} m={params.sampen_m}")
    table.add_column("Scale factor", style="cyan", justify="right")
    table.add_column("Original", style="green", justify="right")
    if baseline is not None:
        table.add_column("Shuffled", style="red", justify="right")

    values, scales = result.as_pair()
    for i, scale in enumerate(scales):
        row = [str(scale), _format_value(values[i])]
        if baseline is not None:
            row.append(_format_value(baseline.entropy_values[i]))
        table.add_row(*row)
    return table


def _format_value(value: float) -> str:
    return "-" if math.isnan(value) else f"{value:.4f}"


def _load_series(path: Path, column: str = "value") -> list[float]:
    suffix = path.suffix.lower()
    try:
        if suffix == ".parquet":
            df = pl.read_parquet(path)
        elif suffix == ".csv":
            df = pl.read_csv(path)
        else:
            with path.open() as f:
                data = json.load(f)
            df = pl.DataFrame(data)
    except (OSError, ValueError, TypeError, pl.exceptions.PolarsError) as exc:
        raise InvalidInputError(
            "Could not read series file",
            parameter="series_path",
            value=str(path),
            context={"error": type(exc).__name__},
        ) from exc
    if column not in df.columns:
        raise InvalidInputError(
            f"Expected column '{column}'",
            parameter="column",
            value=column,
            valid_range=", ".join(df.columns),
        )
    return df[column].to_list()


if __name__ == "__main__":
    app()
