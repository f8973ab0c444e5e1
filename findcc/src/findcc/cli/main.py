"""Typer-based command line interface for findcc."""
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, List, NoReturn, Optional

import structlog
import typer

from ..config import AppConfig, ScanSettings, dump_default_config, load_config
from ..exceptions import ConfigurationError, FindccError, InputOpenError
from ..logging import configure_logging
from ..models import Algorithm
from ..paths import runtime_config_dir
from ..reporting import HEADER, format_record, record_to_json
from ..scanner import Scanner

logger = structlog.get_logger("findcc.cli")

app = typer.Typer(
    help=(
        "Search for sequences of a set number of ASCII digits that either pass "
        "validation with the Luhn algorithm or have a final digit equal to the "
        "modulus 10 sum of the other digits. If no filename is given, standard "
        "input is used."
    ),
    add_completion=False,
)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    configure_logging(ctx.obj.logging.normalized_level())


def _fail(exc: FindccError) -> NoReturn:
    logger.error("scan failed", exit_code=int(exc.exit_code), error=str(exc))
    typer.echo(str(exc), err=True)
    raise typer.Exit(code=int(exc.exit_code))


@contextmanager
def _open_input(path: Optional[Path]) -> Iterator[BinaryIO]:
    if path is None:
        yield typer.get_binary_stream("stdin")
        return
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise InputOpenError(str(path), exc) from exc
    with handle:
        yield handle


def _settings_for_run(
    settings: ScanSettings,
    length: Optional[int],
    mod10: Optional[bool],
    quiet: bool,
) -> ScanSettings:
    overrides: dict[str, object] = {}
    if length is not None:
        overrides["window_length"] = length
    if mod10 is not None:
        overrides["algorithm"] = Algorithm.MOD10 if mod10 else Algorithm.LUHN
    if quiet:
        overrides["quiet"] = True
    return settings.model_copy(update=overrides)


@app.command()
def scan(
    ctx: typer.Context,
    filenames: Optional[List[Path]] = typer.Argument(None, metavar="[FILENAME]", show_default=False),
    length: Optional[int] = typer.Option(
        None, "-n", "--length", min=1, help="Length of number to find, including the check digit."
    ),
    mod10: Optional[bool] = typer.Option(
        None, "--mod10/--luhn", help="Use a simple sum modulus 10 instead of the Luhn algorithm."
    ),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Be quiet; don't print the header."),
    json_output: bool = typer.Option(False, "--json", help="Print one JSON object per match."),
) -> None:
    """Print the offset, line and digits of every checksum-valid number."""
    config: AppConfig = ctx.obj
    paths = filenames or []
    if len(paths) > 1:
        _fail(ConfigurationError("Multiple input files are not supported."))

    settings = _settings_for_run(config.scan, length, mod10, quiet)
    scanner = Scanner(settings.to_scanner_config())
    render = record_to_json if json_output else format_record

    try:
        with _open_input(paths[0] if paths else None) as stream:
            if not (settings.quiet or json_output):
                typer.echo(HEADER)
            for record in scanner.scan(stream):
                typer.echo(render(record))
    except FindccError as exc:
        _fail(exc)


@app.command("init-config")
def init_config(
    destination: Path = typer.Option(
        runtime_config_dir() / "config.yaml", "--destination", help="Where to write the default configuration"
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration as YAML."""
    if destination.exists() and not force:
        raise typer.BadParameter(f"{destination} already exists; use --force to overwrite", param_hint="--destination")
    dump_default_config(destination)
    typer.echo(f"Default configuration written to {destination}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(f"findcc {__version__}")


if __name__ == "__main__":  # pragma: no cover
    app()
