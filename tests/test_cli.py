"""Smoke tests for the Typer CLI router."""
import json

from typer.testing import CliRunner

from metricize.cli.main import app

runner = CliRunner()

_SPAN = '<span class="metric-converted" title="5x7">12.70x17.78 cm</span>'


def test_help_shows_commands() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("convert", "parse", "scan", "config"):
        assert command in result.stdout


def test_version_option() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "metricize" in result.stdout


def test_convert_text_argument() -> None:
    result = runner.invoke(app, ["convert", 'Print 5x7"'])
    assert result.exit_code == 0
    assert result.stdout == f'Print {_SPAN}"\n'


def test_convert_reads_stdin() -> None:
    result = runner.invoke(app, ["convert", "--css-class", "dim"], input="size 5x7")
    assert result.exit_code == 0
    assert 'class="dim"' in result.stdout
    assert "12.70x17.78 cm" in result.stdout


def test_convert_files_and_log(tmp_path) -> None:
    source = tmp_path / "in.txt"
    source.write_text('Box 3 1/0 x 2"\nFrame 5x7"\n', encoding="utf-8")
    output = tmp_path / "out" / "converted.txt"
    log_file = tmp_path / "events.jsonl"

    result = runner.invoke(
        app,
        ["convert", "--input", str(source), "--output", str(output), "--strict", "--log-file", str(log_file)],
    )

    assert result.exit_code == 0
    assert output.read_text(encoding="utf-8") == f'Box 3 1/0 x 2"\nFrame {_SPAN}"\n'
    events = [json.loads(line)["event"] for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert events == ["convert.start", "dimensions.conversion_failed", "convert.completed"]


def test_convert_rejects_text_and_input(tmp_path) -> None:
    source = tmp_path / "in.txt"
    source.write_text("5x7", encoding="utf-8")
    result = runner.invoke(app, ["convert", "5x7", "--input", str(source)])
    assert result.exit_code != 0


def test_parse_command() -> None:
    result = runner.invoke(app, ["parse", "31 1/8"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"token": "31 1/8", "kind": "mixed_fraction", "value": 31.125, "fraction": "249/8"}


def test_parse_command_lone_glyph() -> None:
    result = runner.invoke(app, ["parse", "¾"])
    assert result.exit_code == 1
    assert json.loads(result.stdout)["value"] is None

    result = runner.invoke(app, ["parse", "¾", "--allow-bare-glyph"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["value"] == 0.75


def test_scan_command() -> None:
    result = runner.invoke(app, ["scan", 'A 5x7" and B 31 1/8 x 5 x 2"'])
    assert result.exit_code == 0
    rows = [json.loads(line) for line in result.stdout.splitlines()]
    assert [row["metric"] for row in rows] == ["12.70x17.78 cm", "79.06x12.70x5.08 cm"]
    assert rows[1]["original"] == "31 1/8x5x2"


def test_config_show(tmp_path) -> None:
    config = tmp_path / "metricize.toml"
    config.write_text('[metricize]\ncss_class = "dim"\n', encoding="utf-8")
    result = runner.invoke(app, ["config", "show", "--config-file", str(config)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["config_source"] == str(config)
    assert payload["settings"]["css_class"] == "dim"
