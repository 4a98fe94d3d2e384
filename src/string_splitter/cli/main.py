import json
from pathlib import Path
from typing import Any, List

import typer

from ..api import split as split_text
from ..api import stream_split
from ..core.config import Settings
from ..core.errors import InvalidArgumentError
from ..core.logging import log, setup_logging
from ..io import split_file, stream_file

app = typer.Typer(add_completion=False, help="String Splitter CLI")


@app.callback()
def _init(
    ctx: typer.Context,
    config_file: str | None = typer.Option(
        None,
        "--config",
        help="Config file (.string-splitter.yaml auto-discovered)",
    ),
) -> None:
    try:
        settings = Settings.load_config(config_file)
    except Exception as e:
        typer.echo(f"❌ Config error: {e}", err=True)
        raise typer.Exit(1) from e

    setup_logging(settings.LOG_FORMAT, settings.LOG_LEVEL)  # type: ignore[arg-type]
    log.debug("config.loaded", config_file=config_file or "auto-discovered")
    ctx.obj = settings


def parse_delimiters(values: list[str] | None, separator: str) -> List[Any] | None:
    """Turn ``"<,>"`` style options into pairs and anything else into symmetric tokens."""
    if not values:
        return None
    delimiters: List[Any] = []
    for value in values:
        open_token, sep, close_token = value.partition(separator)
        if sep and open_token and close_token and separator not in close_token:
            delimiters.append([open_token, close_token])
        else:
            delimiters.append(value)
    return delimiters


def _require_one_source(text: str | None, file: Path | None) -> None:
    if (text is None) == (file is None):
        typer.echo("❌ Provide exactly one of TEXT or --file", err=True)
        raise typer.Exit(1)


@app.command()
def version() -> None:
    from .. import __version__

    typer.echo(__version__)


@app.command()
def split(
    ctx: typer.Context,
    text: str | None = typer.Argument(None, help="Text to split"),
    file: Path | None = typer.Option(None, "--file", "-f", help="Read the text from a file"),
    splitters: list[str] = typer.Option(..., "--splitter", "-s", help="Splitter token (repeatable, first wins)"),
    delimiters: list[str] | None = typer.Option(
        None, "--delimiter", "-d", help="Delimiter token, or OPEN,CLOSE pair (repeatable)"
    ),
    keep_splitters: bool = typer.Option(False, "--keep-splitters", help="Keep splitter text at the end of each part"),
    trim: bool = typer.Option(False, "--trim", help="Trim whitespace around each part"),
    pair_separator: str | None = typer.Option(None, "--pair-separator", help="Separator between OPEN and CLOSE"),
    format_output: str = typer.Option("text", "--format", help="Output format (text, json)"),
) -> None:
    """Split text on splitters, leaving delimited spans intact."""
    settings: Settings = ctx.obj or Settings()
    _require_one_source(text, file)
    if format_output not in ("text", "json"):
        typer.echo(f"❌ Unknown format: {format_output}", err=True)
        raise typer.Exit(1)

    parsed = parse_delimiters(delimiters, pair_separator or settings.SPLITTER_PAIR_SEPARATOR)
    try:
        if file is not None:
            parts = split_file(
                file,
                splitters,
                parsed,
                remove_splitters=not keep_splitters,
                trim_parts=trim,
                encoding=settings.SPLITTER_ENCODING,
            )
        else:
            parts = split_text(
                text,  # type: ignore[arg-type]
                splitters,
                parsed,
                remove_splitters=not keep_splitters,
                trim_parts=trim,
            )
    except (InvalidArgumentError, OSError, UnicodeDecodeError, LookupError) as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e

    log.info("cli.split", parts=len(parts), source="file" if file else "text")
    if format_output == "json":
        typer.echo(json.dumps(parts, ensure_ascii=False))
    else:
        for part in parts:
            typer.echo(part)


@app.command()
def stream(
    ctx: typer.Context,
    text: str | None = typer.Argument(None, help="Text to split"),
    file: Path | None = typer.Option(None, "--file", "-f", help="Read the text from a file"),
    splitters: list[str] = typer.Option(..., "--splitter", "-s", help="Splitter token (repeatable, first wins)"),
    delimiters: list[str] | None = typer.Option(
        None, "--delimiter", "-d", help="Delimiter token, or OPEN,CLOSE pair (repeatable)"
    ),
    keep_splitters: bool = typer.Option(False, "--keep-splitters", help="Keep splitter text at the end of each part"),
    trim: bool = typer.Option(False, "--trim", help="Trim whitespace around each part"),
    pair_separator: str | None = typer.Option(None, "--pair-separator", help="Separator between OPEN and CLOSE"),
    chunk_size: int | None = typer.Option(None, "--chunk-size", help="Characters per chunk (default SPLITTER_CHUNK_SIZE)"),
) -> None:
    """Split text chunk by chunk, printing one JSON array of parts per chunk."""
    settings: Settings = ctx.obj or Settings()
    _require_one_source(text, file)

    size = chunk_size if chunk_size is not None else settings.SPLITTER_CHUNK_SIZE
    parsed = parse_delimiters(delimiters, pair_separator or settings.SPLITTER_PAIR_SEPARATOR)
    batches = 0
    try:
        if file is not None:
            stream_iter = stream_file(
                file,
                splitters,
                parsed,
                remove_splitters=not keep_splitters,
                trim_parts=trim,
                chunk_size=size,
                encoding=settings.SPLITTER_ENCODING,
            )
        else:
            stream_iter = stream_split(
                text,  # type: ignore[arg-type]
                splitters,
                parsed,
                remove_splitters=not keep_splitters,
                trim_parts=trim,
                chunk_size=size,
            )
        for batch in stream_iter:
            batches += 1
            typer.echo(json.dumps(batch, ensure_ascii=False))
    except (InvalidArgumentError, OSError, UnicodeDecodeError, LookupError) as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e

    log.info("cli.stream", batches=batches, chunk_size=size)


if __name__ == "__main__":
    app()
