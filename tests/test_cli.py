import json
from pathlib import Path

from typer.testing import CliRunner

from docstats.cli import app

runner = CliRunner()


def _write_doc(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "note.md"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_stats_prints_status_and_tooltip(tmp_path: Path):
    """stats command prints the status line followed by the tooltip."""
    doc = _write_doc(tmp_path, "# Title\n\nHello [[wiki link]] world.")
    result = runner.invoke(app, ["stats", "--input-path", str(doc)])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "Words: 5 or Characters: 35"
    assert lines[1] == "Document Stats:"


def test_cli_stats_json_with_selection(tmp_path: Path):
    """JSON output describes the selection and adds full-document stats."""
    doc = _write_doc(tmp_path, "alpha beta gamma delta")
    result = runner.invoke(
        app,
        ["stats", "--input-path", str(doc), "--selection", "6:16", "--json"],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["scope"] == "selection"
    assert payload["word_count"] == 2
    assert payload["char_count"] == 10
    assert payload["char_no_spaces"] == 9
    assert payload["status_text"].startswith("[SEL] Words: 2")
    assert payload["document"]["word_count"] == 4


def test_cli_stats_detail(tmp_path: Path):
    doc = _write_doc(tmp_path, "one two three")
    result = runner.invoke(
        app, ["stats", "--input-path", str(doc), "--detail", "-w", "100"]
    )
    assert result.exit_code == 0
    assert "Document Statistics" in result.stdout
    assert "Based on 100 words per minute" in result.stdout


def test_cli_stats_reads_config(tmp_path: Path):
    doc = _write_doc(tmp_path, "word " * 300)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "words_per_minute: 150\nshow_word_count: false\nshow_char_count: false\n"
        "show_read_time: true\n",
        encoding="utf-8",
    )
    result = runner.invoke(
        app, ["stats", "--input-path", str(doc), "--config", str(config_path)]
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines()[0] == "2:00 min read"


def test_cli_rejects_non_positive_rate(tmp_path: Path):
    doc = _write_doc(tmp_path, "one two")
    result = runner.invoke(
        app, ["stats", "--input-path", str(doc), "--words-per-minute", "0"]
    )
    assert result.exit_code == 2


def test_cli_rejects_bad_selection(tmp_path: Path):
    doc = _write_doc(tmp_path, "one two")
    for bad in ("3", "a:b", "0:99"):
        result = runner.invoke(
            app, ["stats", "--input-path", str(doc), "--selection", bad]
        )
        assert result.exit_code == 2


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "words_per_minute: 200" in result.stdout


def test_cli_rejects_non_utf8_file(tmp_path: Path):
    doc = tmp_path / "latin1.txt"
    doc.write_bytes("caf\xe9 au lait".encode("latin-1"))
    result = runner.invoke(app, ["stats", "--input-path", str(doc)])
    assert result.exit_code == 2
    assert not isinstance(result.exception, UnicodeDecodeError)
