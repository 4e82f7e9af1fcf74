"""Command-line interface for Typograph.

Responsibilities:
- Expose user-facing commands for converting, previewing, and copying text.
- Resolve configuration and input sources before invoking the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_rendered_text, echo_report_summary, exit_with_command_error
from .clipboard import ClipboardWriter
from .config import ConfigLoader, TypographConfig
from .errors import PipelineStageError
from .models.datatypes import OutputMode
from .pipeline import TypographPipeline
from .telemetry.logger import RunLogger
from .text.locale import detect_locale

app = typer.Typer(
    name="typograph",
    no_args_is_help=True,
    help="Typograph CLI: locale-aware typography for plain text.",
)

InputArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a UTF-8 text file. Reads stdin when omitted."),
]
TextOption = Annotated[
    str | None,
    typer.Option("--text", "-t", help="Inline text to process instead of a file."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
UnicodeOption = Annotated[
    bool,
    typer.Option(
        "--unicode",
        "-u",
        help="Produce Unicode glyphs instead of the configured default (HTML entities).",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Emit stage logs and a run summary to stderr."),
]


def _load_config(config_path: Path | None) -> TypographConfig:
    """Load config from YAML when requested, else from the environment."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `TYPOGRAPH_*` environment variables.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _read_input(input_path: Path | None, text: str | None) -> str:
    """Return input text from exactly one source: file, `--text`, or stdin."""

    if input_path is not None and text is not None:
        raise PipelineStageError(
            stage="input",
            detail="Provide either `<input>` or `--text`, not both.",
            hint="Drop one of the two input sources.",
        )
    if text is not None:
        return text
    if input_path is None:
        return typer.get_text_stream("stdin").read()

    try:
        return input_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="input",
            detail=f"Input file not found: `{input_path}`.",
            hint="Check the path or pass text via `--text`.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise PipelineStageError(
            stage="input",
            detail=f"Input file `{input_path}` is not valid UTF-8.",
            hint="Re-encode the file as UTF-8 and rerun.",
        ) from exc


def _build_pipeline(config: TypographConfig, verbose: bool) -> TypographPipeline:
    """Create a pipeline, attaching a run logger when debugging is requested."""

    if verbose or config.debug:
        return TypographPipeline(run_logger=RunLogger())
    return TypographPipeline()


@app.command("convert")
def convert_command(
    input_path: InputArgument = None,
    text: TextOption = None,
    unicode: UnicodeOption = False,
    config_file: ConfigOption = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write the result to this file instead of stdout."),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Convert text and print it (HTML entities by default)."""

    try:
        config = _load_config(config_file)
        raw_text = _read_input(input_path, text)
        pipeline = _build_pipeline(config, verbose)
        mode = pipeline.copy_mode(unicode, config.default_mode)
        report = pipeline.render_with_report(raw_text, mode)
        if out is not None:
            out.write_text(report.text, encoding="utf-8")
    except Exception as exc:
        exit_with_command_error("convert", exc)

    if verbose:
        echo_report_summary(report)
    if out is None:
        echo_rendered_text(report.text)
    else:
        typer.echo(f"Output: {out}", err=True)


@app.command("preview")
def preview_command(
    input_path: InputArgument = None,
    text: TextOption = None,
) -> None:
    """Print the HTML-entity rendering exactly as a read-only preview shows it."""

    try:
        raw_text = _read_input(input_path, text)
        rendered = TypographPipeline().render(raw_text, OutputMode.HTML)
    except Exception as exc:
        exit_with_command_error("preview", exc)

    echo_rendered_text(rendered)


@app.command("copy")
def copy_command(
    input_path: InputArgument = None,
    text: TextOption = None,
    unicode: UnicodeOption = False,
    config_file: ConfigOption = None,
) -> None:
    """Convert text and place it on the system clipboard."""

    try:
        config = _load_config(config_file)
        raw_text = _read_input(input_path, text)
        pipeline = _build_pipeline(config, verbose=False)
        mode = pipeline.copy_mode(unicode, config.default_mode)
        rendered = pipeline.render(raw_text, mode)
    except Exception as exc:
        exit_with_command_error("copy", exc)

    copied = ClipboardWriter(command=config.clipboard_command).write(rendered)
    if copied:
        typer.echo(f"Copied ({mode.value}).", err=True)
        return

    typer.secho(
        "Clipboard unavailable; printing the text instead.",
        fg=typer.colors.YELLOW,
        err=True,
    )
    echo_rendered_text(rendered)


@app.command("detect-locale")
def detect_locale_command(
    input_path: InputArgument = None,
    text: TextOption = None,
) -> None:
    """Print the locale (`ru` or `en`) detected for the input."""

    try:
        raw_text = _read_input(input_path, text)
    except Exception as exc:
        exit_with_command_error("detect-locale", exc)

    typer.echo(detect_locale(raw_text).value)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
