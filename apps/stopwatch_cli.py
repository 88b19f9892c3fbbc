from __future__ import annotations

import json
import logging
import time
from typing import Optional

import typer

from fine_grained import (
    Stopwatch,
    StopwatchError,
    StopwatchReport,
    get_config,
    report_dump,
    resolve_clock,
    resolve_log_level,
)
from fine_grained.clock import Clock

app = typer.Typer(add_completion=False, no_args_is_help=True)

# (label, ticks, tick_ms) for the independent measurement demo
INDEPENDENT_TASKS = (("Foo", 6, 450), ("Bar", 30, 30), ("Foobar", 10, 300))


def _simulate(ticks: int, tick_ms: int, label: Optional[str] = None) -> None:
    """Sleep ``ticks`` times, printing a progress dot after each tick."""
    if label:
        typer.echo(f"{label:>6}: ", nl=False)
    for _ in range(ticks):
        time.sleep(tick_ms / 1000)
        typer.echo(".", nl=False)
    if label:
        typer.echo()


def _emit_json(stopwatch: Stopwatch) -> None:
    typer.echo(json.dumps(report_dump(StopwatchReport.from_stopwatch(stopwatch))))


@app.callback()
def main(
    ctx: typer.Context,
    clock: Optional[str] = typer.Option(
        None,
        "--clock",
        help="Clock source: 'perf_counter', 'monotonic' or 'module:function'",
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level, e.g. DEBUG"),
) -> None:
    """Time simulated workloads with a nanosecond stopwatch."""

    cfg = get_config()
    try:
        level = resolve_log_level(log_level) if log_level else cfg.make_log_level()
        ctx.obj = resolve_clock(clock) if clock else cfg.make_clock()
    except StopwatchError as exc:
        typer.echo(f"[fine-grained] {exc}", err=True)
        raise typer.Exit(code=2)
    logging.basicConfig(level=level)


@app.command()
def single(
    ctx: typer.Context,
    ticks: int = typer.Option(6, min=1, help="Number of ticks the task takes"),
    tick_ms: int = typer.Option(500, min=0, help="Length of one tick in milliseconds"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report instead of text"),
) -> None:
    """Time one long task."""

    clock: Clock = ctx.obj
    stopwatch = Stopwatch.start_new(clock)

    _simulate(ticks, tick_ms)
    typer.echo()
    if as_json:
        _emit_json(stopwatch)
    else:
        typer.echo(f"Duration: {stopwatch}")
    stopwatch.stop()


@app.command()
def repetitive(
    ctx: typer.Context,
    rounds: int = typer.Option(10, min=1, help="Number of repetitions to time"),
    tick_ms: int = typer.Option(500, min=0, help="Length of one repetition in milliseconds"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report instead of text"),
) -> None:
    """Time each round of a repeated task, plus the total."""

    clock: Clock = ctx.obj
    running = Stopwatch.start_new(clock)

    for _ in range(rounds):
        _simulate(1, tick_ms)
        running.lap()
    stopwatch = running.stop()

    # the dots above do not end with a newline
    typer.echo()

    if as_json:
        _emit_json(stopwatch)
        return
    for i, lap in enumerate(stopwatch.laps()):
        typer.echo(f"   Round {i}:  {lap}ns")
    typer.echo(f"Total time: {stopwatch}")


@app.command()
def independent(
    ctx: typer.Context,
    tick_ms: Optional[int] = typer.Option(
        None, min=0, help="Length of one tick in milliseconds for every task (default: per task)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report instead of text"),
) -> None:
    """Time several different tasks one after another, plus the total."""

    clock: Clock = ctx.obj
    running = Stopwatch.start_new(clock)

    durations = []
    for label, ticks, task_tick_ms in INDEPENDENT_TASKS:
        _simulate(ticks, task_tick_ms if tick_ms is None else tick_ms, label=label)
        durations.append((label, running.lap()))
    stopwatch = running.stop()

    if as_json:
        _emit_json(stopwatch)
        return
    width = max(len(label) for label, _, _ in INDEPENDENT_TASKS)
    for label, duration in durations:
        typer.echo(f"Time to do {label.lower():<{width}}: {duration}ns")
    typer.echo(f"Total time: {stopwatch}")


if __name__ == "__main__":
    app()
