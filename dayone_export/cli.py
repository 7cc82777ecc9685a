"""Command-line interface for dayone-export.

Responsibilities:
- Expose user-facing commands for converting Day One exports.
- Convert CLI arguments into `ConverterConfig` and run the converter.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated
import zipfile

import typer

from .cli_rendering import echo_session_summary, exit_with_command_error
from .config import ConfigLoader, ConverterConfig
from .errors import (
    ConversionError,
    DocumentNotFound,
    InputNotFound,
    MalformedDocument,
    UnsupportedFileType,
)
from .io.archive import ZipArchiveContainer
from .io.source_locator import find_source_candidates
from .io.storage import OutputStore
from .pipeline import JournalConverter
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="dayone-export",
    no_args_is_help=True,
    help="Convert a Day One JSON export into one chronological Markdown document.",
)


def _load_yaml_config(config_path: Path | None) -> ConverterConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ConversionError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ConversionError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    input_path: Path | None,
    out: Path | None,
    app_name: str | None,
    source_filename: str | None,
    to_stdout: bool,
) -> ConverterConfig:
    """Resolve effective command config from YAML defaults and explicit CLI overrides."""

    loaded = _load_yaml_config(config_file)
    if loaded is None:
        if input_path is None:
            raise ConversionError(
                stage="config",
                detail="Input path is required when `--config` is not provided.",
                hint="Pass `<export.zip>` or use `--config <path.yaml>` with `input_path`.",
            )
        loaded = ConverterConfig(input_path=input_path)

    config = ConverterConfig(
        input_path=input_path if input_path is not None else loaded.input_path,
        output_dir=out if out is not None else loaded.output_dir,
        app_name=app_name if app_name is not None else loaded.app_name,
        source_filename=(
            source_filename if source_filename is not None else loaded.source_filename
        ),
        placeholder=loaded.placeholder,
        write_output=loaded.write_output and not to_stdout,
    )
    try:
        config.validate()
    except ValueError as exc:
        raise ConversionError(stage="config", detail=str(exc)) from exc
    return config


@app.command("convert")
def convert_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(
            help="Day One `.zip` export or `Journal.json`. Required unless set by `--config`.",
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output directory (overrides config file value)."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
    app_name: Annotated[
        str | None,
        typer.Option("--app-name", help="Output filename prefix."),
    ] = None,
    source_filename: Annotated[
        str | None,
        typer.Option("--source-filename", help="Archive member suffix to convert."),
    ] = None,
    to_stdout: Annotated[
        bool,
        typer.Option("--stdout", help="Print the document instead of writing a file."),
    ] = False,
) -> None:
    """Convert an export into `<app-name>-<yyyy-mm-dd>.md`."""

    try:
        config = _resolve_command_config(
            config_file=config_file,
            input_path=input_path,
            out=out,
            app_name=app_name,
            source_filename=source_filename,
            to_stdout=to_stdout,
        )
        converter = JournalConverter.from_config(config, run_logger=RunLogger())
        session = converter.run(config.input_path)
        if session.error is not None:
            raise session.error
        written = None
        if config.write_output and session.has_output:
            written = OutputStore(config.output_dir).save_document(
                session.output, config.app_name
            )
    except Exception as exc:
        exit_with_command_error("convert", exc)

    if to_stdout:
        typer.echo(session.output)
        echo_session_summary(session, err=True)
        return
    echo_session_summary(session)
    if written is not None:
        typer.echo(f"Output: {written}")


@app.command("locate")
def locate_command(
    archive: Annotated[Path, typer.Argument(help="Day One `.zip` export.")],
    source_filename: Annotated[
        str,
        typer.Option("--source-filename", help="Archive member suffix to look for."),
    ] = "journal.json",
) -> None:
    """List archive members matching the journal filename, selected one first."""

    try:
        if not archive.name.lower().endswith(".zip"):
            raise UnsupportedFileType(archive.name)
        if not archive.is_file():
            raise InputNotFound(str(archive))
        try:
            with ZipArchiveContainer(archive) as container:
                candidates = find_source_candidates(container, source_filename)
        except zipfile.BadZipFile as exc:
            raise MalformedDocument(f"Could not open zip export `{archive.name}`: {exc}") from exc
        if not candidates:
            raise DocumentNotFound(source_filename)
    except Exception as exc:
        exit_with_command_error("locate", exc)

    typer.echo(f"Selected: {candidates[0]}")
    for name in candidates[1:]:
        typer.echo(f"Skipped: {name}")


def main() -> None:
    """Run the Typer application."""

    app()


if __name__ == "__main__":
    main()
