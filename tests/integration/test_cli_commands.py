"""CLI integration tests for convert, preview, copy, and detect-locale."""

from __future__ import annotations

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from typograph.cli import app


def test_convert_inline_text_defaults_to_html_entities() -> None:
    """Convert should print HTML entities when no modifier flag is given."""

    runner = CliRunner()
    result = runner.invoke(app, ["convert", "--text", "a - b"])

    assert result.exit_code == 0, result.output
    assert result.stdout == "a &mdash; b\n"


def test_convert_unicode_flag_selects_glyphs() -> None:
    """The modifier flag should switch the output to Unicode glyphs."""

    runner = CliRunner()
    result = runner.invoke(app, ["convert", "-u", "--text", 'He said "hi" now.'])

    assert result.exit_code == 0, result.output
    assert result.stdout == "He said “hi” now.\n"


def test_convert_reads_stdin_when_no_input_is_given() -> None:
    """Stdin should be used when neither a path nor `--text` is provided."""

    runner = CliRunner()
    result = runner.invoke(app, ["convert", "--unicode"], input="it's 12 345")

    assert result.exit_code == 0, result.output
    assert result.stdout == "it’s 12\u00a0345\n"


def test_convert_reads_file_and_keeps_trailing_newline(tmp_path: Path) -> None:
    """File input should be rendered with its own trailing newline preserved once."""

    input_path = tmp_path / "note.txt"
    input_path.write_text('Он сказал "привет"\n', encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["convert", str(input_path)])

    assert result.exit_code == 0, result.output
    assert result.stdout == "Он сказал &laquo;привет&raquo;\n"


def test_convert_writes_output_file(tmp_path: Path) -> None:
    """`--out` should write the rendered text to disk instead of stdout."""

    out_path = tmp_path / "result.txt"

    runner = CliRunner()
    result = runner.invoke(
        app, ["convert", "-u", "--text", "Цена 1 500₽", "--out", str(out_path)]
    )

    assert result.exit_code == 0, result.output
    assert out_path.read_text(encoding="utf-8") == "Цена 1\u00a0500 ₽"
    assert f"Output: {out_path}" in result.output


def test_convert_uses_default_mode_from_yaml_config(tmp_path: Path) -> None:
    """A configured Unicode default should apply without the modifier flag."""

    config_path = tmp_path / "typograph.yaml"
    config_path.write_text("default_mode: unicode\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["convert", "--config", str(config_path), "--text", "«x»"])

    assert result.exit_code == 0, result.output
    assert result.stdout == "«x»\n"


def test_convert_uses_default_mode_from_environment(monkeypatch: MonkeyPatch) -> None:
    """`TYPOGRAPH_DEFAULT_MODE` should be honoured when no config file is given."""

    monkeypatch.setenv("TYPOGRAPH_DEFAULT_MODE", "unicode")

    runner = CliRunner()
    result = runner.invoke(app, ["convert", "--text", "a - b"])

    assert result.exit_code == 0, result.output
    assert result.stdout == "a — b\n"


def test_convert_verbose_prints_stage_logs_and_summary() -> None:
    """Verbose runs should report locale, mode, applied rules, and stage events."""

    runner = CliRunner()
    result = runner.invoke(app, ["convert", "--verbose", "--text", "a - b"])

    assert result.exit_code == 0, result.output
    assert "a &mdash; b" in result.output
    assert "Locale: en" in result.output
    assert "Mode: html" in result.output
    assert "Rules applied: em-dash" in result.output
    assert "[stage] level=INFO stage=encode event=complete" in result.output


def test_preview_always_renders_html_entities() -> None:
    """Preview should show entity-encoded text even when Unicode is the default."""

    runner = CliRunner()
    result = runner.invoke(app, ["preview", "--text", "«x» — 1 000"])

    assert result.exit_code == 0, result.output
    assert result.stdout == "&laquo;x&raquo; &mdash; 1&nbsp;000\n"


def test_detect_locale_reports_ru_and_en() -> None:
    """Detect-locale should print the locale tag alone."""

    runner = CliRunner()

    russian = runner.invoke(app, ["detect-locale", "--text", "Hello, Мир"])
    english = runner.invoke(app, ["detect-locale", "--text", "Hello, world"])

    assert russian.exit_code == 0
    assert russian.stdout == "ru\n"
    assert english.stdout == "en\n"


def test_copy_places_html_rendering_on_clipboard(
    recording_clipboard: type,
) -> None:
    """Copy should hand the HTML rendering to the clipboard writer by default."""

    runner = CliRunner()
    result = runner.invoke(app, ["copy", "--text", "it's"])

    assert result.exit_code == 0, result.output
    assert "Copied (html)." in result.output
    assert recording_clipboard.instances[0].payloads == ["it&#146;s"]
    assert recording_clipboard.instances[0].command is None


def test_copy_unicode_flag_places_glyphs_on_clipboard(
    recording_clipboard: type,
) -> None:
    """The modifier flag should put Unicode glyphs on the clipboard."""

    runner = CliRunner()
    result = runner.invoke(app, ["copy", "-u", "--text", "it's"])

    assert result.exit_code == 0, result.output
    assert "Copied (unicode)." in result.output
    assert recording_clipboard.instances[0].payloads == ["it’s"]


def test_copy_passes_configured_clipboard_command(
    monkeypatch: MonkeyPatch, recording_clipboard: type
) -> None:
    """A configured clipboard command should reach the clipboard writer."""

    monkeypatch.setenv("TYPOGRAPH_CLIPBOARD_COMMAND", "xsel --clipboard --input")

    runner = CliRunner()
    result = runner.invoke(app, ["copy", "--text", "x"])

    assert result.exit_code == 0, result.output
    assert recording_clipboard.instances[0].command == "xsel --clipboard --input"


def test_copy_falls_back_to_stdout_when_clipboard_fails(
    recording_clipboard: type,
) -> None:
    """Clipboard failure should not fail the command; the text is printed instead."""

    recording_clipboard.succeed = False

    runner = CliRunner()
    result = runner.invoke(app, ["copy", "--text", "a - b"])

    assert result.exit_code == 0, result.output
    assert "Clipboard unavailable; printing the text instead." in result.output
    assert "a &mdash; b" in result.output
