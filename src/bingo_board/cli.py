from __future__ import annotations

import logging
import sys
from typing import List, Optional, Tuple

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .board import FREE_CELL_POLICIES, Board, build_board
from .config import resolve_parameters
from .errors import BingoError
from .labels import LabelPool
from .logging_setup import make_console, setup_logging
from .report import label_frequencies
from .rng import create_rng
from .version import __version__
from .win import completed_lines, is_completed

logger = logging.getLogger(__name__)

app = typer.Typer(help="Bingo board generator CLI")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(0)


@app.callback()
def common_options(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show application version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Bingo board generator."""


def parse_mark(value: str) -> Tuple[int, int]:
    """Parse a ``ROW,COL`` pair."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2 or not all(p.lstrip("-").isdigit() for p in parts):
        raise typer.BadParameter(f"expected ROW,COL, got {value!r}", param_hint="--mark")
    return int(parts[0]), int(parts[1])


def _as_int(value: object, param_hint: str) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise typer.BadParameter(f"expected an integer, got {value!r}", param_hint=param_hint)


def render_board(board: Board) -> Table:
    table = Table(show_header=False, show_lines=True, padding=(0, 1))
    for _ in range(board.size):
        table.add_column(justify="center", min_width=8)
    for row in board.rows:
        cells = []
        for sq in row:
            if sq.free:
                cells.append(f"[bold magenta]{escape(sq.label)}[/]")
            elif sq.checked:
                cells.append(f"[reverse]{escape(sq.label)}[/]")
            else:
                cells.append(escape(sq.label))
        table.add_row(*cells)
    return table


@app.command()
def generate(
    config: str = typer.Option(None, "--config", help="Path to config file (YAML/JSON)"),
    label: List[str] = typer.Option(None, "--label", help="Label to add to the pool (repeatable)"),
    labels_file: str = typer.Option(None, "--labels-file", help="File with one label per line"),
    free_index: Optional[int] = typer.Option(
        None, "--free-index", help="Index of the label used for the free cell"
    ),
    size: Optional[int] = typer.Option(None, "--size", help="Board side length"),
    free_cell: Optional[str] = typer.Option(None, "--free-cell", help="center|random"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible boards"),
    rng_engine: Optional[str] = typer.Option(None, "--rng-engine", help="py_random|numpy_pcg64"),
    mark: List[str] = typer.Option(None, "--mark", help="Toggle square ROW,COL (repeatable)"),
    stats: bool = typer.Option(False, "--stats", help="Print per-label counts"),
    log_file: str = typer.Option(None, "--log-file", help="Log file path"),
    colors: str = typer.Option(None, "--colors", help="auto|always|never"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG|INFO|WARN|ERROR"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Resolve params and exit"),
) -> None:
    """Generate a board, apply marks and report whether it is completed."""

    marks = [parse_mark(m) for m in (mark or [])]

    cli_overrides: dict = {}
    if label:
        cli_overrides["labels"] = list(label)
    if labels_file:
        cli_overrides["labels_file"] = labels_file
    if free_index is not None:
        cli_overrides["free_index"] = free_index
    if size is not None:
        cli_overrides["size"] = size
    if free_cell:
        cli_overrides["free_cell"] = free_cell
    if seed is not None:
        cli_overrides["seed.value"] = seed
    if rng_engine:
        cli_overrides["seed.engine"] = rng_engine
    if log_file:
        cli_overrides["log_file"] = log_file
    if colors:
        cli_overrides["colors"] = colors
    if log_level:
        cli_overrides["log_level"] = log_level

    try:
        resolved, params_hash, _cfg_path_unused = resolve_parameters(
            config_path_str=config, cli_overrides=cli_overrides
        )
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config")

    setup_logging(
        level=str(resolved.get("log_level", "INFO")),
        log_file=resolved.get("log_file"),
        colors=str(resolved.get("colors", "auto")),
    )

    if dry_run:
        typer.echo(f"Params hash: {params_hash}")
        raise typer.Exit(0)

    policy = str(resolved.get("free_cell", "center"))
    if policy not in FREE_CELL_POLICIES:
        raise typer.BadParameter(
            f"must be one of {', '.join(FREE_CELL_POLICIES)}", param_hint="--free-cell"
        )
    board_size = _as_int(resolved.get("size", 5), "--size")
    if board_size < 1:
        raise typer.BadParameter("must be >= 1", param_hint="--size")
    seed_cfg = resolved.get("seed") or {}
    seed_value = seed_cfg.get("value")
    if seed_value is not None:
        seed_value = _as_int(seed_value, "--seed")
    free_idx = resolved.get("free_index")
    if free_idx is not None:
        free_idx = _as_int(free_idx, "--free-index")

    try:
        pool = LabelPool()
        for text in resolved.get("labels") or []:
            pool.add(str(text))
        if free_idx is not None:
            pool.set_free_designation(free_idx)

        rng = create_rng(
            str(seed_cfg.get("engine", "py_random")),
            seed_value,
        )
        board = build_board(pool, board_size, policy=policy, rng=rng)
        for row, col in marks:
            board.toggle(row, col)
    except BingoError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=2)

    console = make_console(str(resolved.get("colors", "auto")))
    console.print(render_board(board))

    if stats:
        freqs = label_frequencies(board)
        table = Table("label", "count")
        for name in sorted(freqs):
            table.add_row(escape(name), str(freqs[name]))
        console.print(table)

    if is_completed(board):
        n_lines = len(completed_lines(board))
        console.print(Panel(f"BINGO! {n_lines} line(s) completed", style="bold green"))
    else:
        typer.echo("Not completed yet.")

    raise typer.Exit(code=0)


def main(_argv: list[str] | None = None) -> int:
    try:
        app(standalone_mode=True)
        return 0
    except SystemExit as e:
        return int(e.code) if e.code is not None else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
