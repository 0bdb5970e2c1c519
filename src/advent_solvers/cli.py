"""Typer entry point for the puzzle solvers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
import yaml

from .config import resolve_parameters
from .errors import PuzzleError
from .input_reader import read_input
from .logging_setup import setup_logging
from .registry import SOLVERS, solve
from .report import build_run_meta, emit_report_json, render
from .version import __version__

logger = logging.getLogger(__name__)

app = typer.Typer(help="Puzzle solvers reading their input from stdin or a file")


@app.callback(invoke_without_command=True)
def common_options(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", help="Show application version and exit", is_eager=True
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def run(
    day: int = typer.Option(..., "--day", "-d", help="Puzzle day to solve"),
    input_path: str = typer.Option(
        None, "--input", "-i", help="Puzzle input file ('-' or omitted for stdin)"
    ),
    config: str = typer.Option(None, "--config", help="Path to config file (YAML/JSON)"),
    output_format: str = typer.Option(None, "--format", help="text|json"),
    out_report: str = typer.Option(None, "--out-report", help="report.json output path"),
    force: bool = typer.Option(False, "--force", help="Overwrite the report if it exists"),
    log_file: str = typer.Option(None, "--log-file", help="Log file path"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG|INFO|WARNING|ERROR"),
) -> None:
    """Read the puzzle input, solve both parts and print the answers."""

    cli_overrides = {}
    if input_path:
        cli_overrides["input"] = input_path
    if output_format:
        cli_overrides["output_format"] = output_format
    if out_report:
        cli_overrides["out_report"] = out_report
    if force:
        cli_overrides["force"] = True
    if log_file:
        cli_overrides["log_file"] = log_file
    if log_level:
        cli_overrides["log_level"] = log_level

    try:
        resolved, _cfg_path = resolve_parameters(config_path_str=config, cli_overrides=cli_overrides)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        # logging is not configured yet, report straight to stderr
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=2)

    setup_logging(
        level=str(resolved.get("log_level", "WARNING")),
        log_file=resolved.get("log_file"),
        json_format=(str(resolved.get("log_format", "text")) == "json"),
    )

    fmt = str(resolved.get("output_format", "text"))
    if fmt not in ("text", "json"):
        logger.error("Unsupported output format: %s", fmt)
        raise typer.Exit(code=2)

    logger.info("Solving day %d", day)
    try:
        text = read_input(resolved.get("input"))
        result = solve(day, text)
    except PuzzleError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        raise typer.Exit(code=exc.exit_code)

    typer.echo(render(result, fmt))

    if resolved.get("out_report"):
        report_path = Path(resolved["out_report"])
        try:
            emit_report_json(
                report_path,
                result=result,
                run_meta=build_run_meta(app_version=__version__, input_text=text),
                overwrite=bool(resolved.get("force", False)),
            )
        except OSError as exc:
            logger.error("Could not write report: %s", exc)
            raise typer.Exit(code=1)
        logger.info("Report written to %s", report_path)

    raise typer.Exit(code=0)


@app.command("list")
def list_puzzles() -> None:
    """List the puzzles that can be solved."""
    for day in sorted(SOLVERS):
        typer.echo(f"{day}: {SOLVERS[day].title}")


def main(_argv: list[str] | None = None) -> int:
    try:
        app(standalone_mode=True)
        return 0
    except SystemExit as e:
        return int(e.code) if e.code is not None else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
