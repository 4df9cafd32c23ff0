from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple

import typer
import yaml

from .config import ConfigError, StatBarConfig, load_config
from .formatting import build_detail_report, build_status_text, build_tooltip
from .models import build_editor_context
from .service import StatsService

app = typer.Typer(help="Document statistics CLI.", no_args_is_help=True)


@app.command()
def stats(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    words_per_minute: int | None = typer.Option(
        None, "--words-per-minute", "-w", help="Override the reading rate."
    ),
    selection: str | None = typer.Option(
        None,
        "--selection",
        "-s",
        help="Character range START:END to treat as the active selection.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON payload."),
    detail: bool = typer.Option(
        False, "--detail", help="Print the detailed statistics report."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs."),
) -> None:
    """Compute statistics for a text file (or a selection within it)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    cfg = _load_config_with_overrides(config, words_per_minute)
    try:
        text = input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(
            f"{input_path} is not valid UTF-8 text.", param_hint="--input-path"
        ) from exc
    try:
        context = build_editor_context(text, _parse_selection(selection))
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--selection") from exc

    service = StatsService()
    current = service.compute_stats(context, cfg.words_per_minute)
    full = (
        service.compute_full_document_stats(context.full_text, cfg.words_per_minute)
        if context.is_selection
        else None
    )

    if as_json:
        payload: Dict[str, Any] = {
            "scope": context.scope.value,
            "word_count": current.word_count,
            "char_count": current.char_count,
            "char_no_spaces": context.char_no_spaces,
            "read_time": current.read_time,
            "status_text": build_status_text(context, current, cfg),
        }
        if full is not None:
            payload["document"] = full.to_dict()
        typer.echo(json.dumps(payload, indent=2))
    elif detail:
        typer.echo(build_detail_report(context, current, cfg, full))
    else:
        typer.echo(build_status_text(context, current, cfg))
        typer.echo(build_tooltip(context, current, cfg))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = StatBarConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_config_with_overrides(
    path: Path | None, words_per_minute: int | None
) -> StatBarConfig:
    """Load the YAML config and apply CLI overrides, validating the result."""
    try:
        cfg = load_config(path)
        if words_per_minute is not None:
            cfg.words_per_minute = words_per_minute
        return cfg.validate()
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _parse_selection(raw: str | None) -> Tuple[int, int] | None:
    """Parse ``START:END`` into a pair of character offsets."""
    if raw is None:
        return None
    start, sep, end = raw.partition(":")
    if not sep:
        raise ValueError(f"Selection must look like START:END, got {raw!r}.")
    try:
        return int(start), int(end)
    except ValueError as exc:
        raise ValueError(f"Selection offsets must be integers, got {raw!r}.") from exc


if __name__ == "__main__":
    main()
