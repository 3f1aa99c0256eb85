"""
CLI tests using click's CliRunner.

Rich and log output go to stderr, so in quiet mode a successful run
leaves exactly the cipher output on the terminal.
"""

import json

import pytest
from click.testing import CliRunner

import common.config
from chunkcipher import __version__
from chunkcipher.cli import cli


@pytest.fixture(autouse=True)
def default_config_path(tmp_path, monkeypatch):
    """Point the default config location at a file that starts out absent."""
    path = tmp_path / "default" / "chunkcipher.toml"
    monkeypatch.setattr(common.config, "_DEFAULT_CONFIG_PATH", path)
    return path


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fast_config(tmp_path):
    path = tmp_path / "chunkcipher.toml"
    path.write_text("[runner]\npoll_interval = 0.05\n", encoding="utf-8")
    return str(path)


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_caesar_from_stdin(runner, fast_config):
    result = runner.invoke(
        cli, ["--config", fast_config, "-q", "run", "-c", "caesar", "-k", "3"],
        input="abc xyz",
    )
    assert result.exit_code == 0, result.output
    assert result.output == "DEFABC\n"


def test_default_family_is_caesar(runner, fast_config):
    result = runner.invoke(
        cli, ["--config", fast_config, "-q", "run", "-k", "1"], input="Hal 9",
    )
    assert result.exit_code == 0
    assert result.output == "IBMOJOF\n"


def test_decrypt_vigenere(runner, fast_config):
    result = runner.invoke(
        cli,
        ["--config", fast_config, "-q", "run", "-c", "vigenere", "-k", "LEMON",
         "--decrypt", "-w", "3"],
        input="LXFOPVEFRNHR\n",
    )
    assert result.exit_code == 0
    assert result.output == "ATTACKATDAWN\n"


def test_files_and_report(runner, fast_config, tmp_path):
    source = tmp_path / "plain.txt"
    source.write_text("Hide the gold in the tree stump", encoding="utf-8")
    target = tmp_path / "secret.txt"
    report = tmp_path / "reports" / "run.json"

    result = runner.invoke(cli, [
        "--config", fast_config, "-q", "run",
        "-c", "playfair", "-k", "playfairexample",
        "-i", str(source), "-o", str(target), "--report", str(report),
    ])

    assert result.exit_code == 0, result.output
    assert target.read_text(encoding="utf-8") == "BMODZBXDNABEKUDMUIXMMOUVIF\n"
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["run"]["family"] == "playfair"
    assert data["run"]["mode"] == "encrypt"
    assert data["run"]["worker_count"] == 10
    assert data["output"] == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert data["report_metadata"]["version"] == __version__


def test_config_sets_workers_and_family(runner, tmp_path):
    config = tmp_path / "custom.toml"
    config.write_text(
        '[runner]\nworker_count = 2\npoll_interval = 0.05\ndefault_family = "vigenere"\n',
        encoding="utf-8",
    )
    report = tmp_path / "run.json"
    result = runner.invoke(
        cli,
        ["--config", str(config), "-q", "run", "-k", "LEMON", "--report", str(report)],
        input="attack at dawn",
    )
    assert result.exit_code == 0
    assert result.output == "LXFOPVEFRNHR\n"
    assert json.loads(report.read_text())["run"]["worker_count"] == 2


def test_default_config_file_is_read(runner, default_config_path, tmp_path):
    default_config_path.parent.mkdir()
    default_config_path.write_text(
        "[runner]\nworker_count = 2\npoll_interval = 0.05\n", encoding="utf-8",
    )
    report = tmp_path / "run.json"
    result = runner.invoke(
        cli, ["-q", "run", "-k", "3", "--report", str(report)], input="abc xyz",
    )
    assert result.exit_code == 0, result.output
    assert result.output == "DEFABC\n"
    assert json.loads(report.read_text())["run"]["worker_count"] == 2


def test_empty_key_exits_with_error(runner, fast_config):
    result = runner.invoke(
        cli, ["--config", fast_config, "run", "-c", "caesar", "-k", ""], input="ABC",
    )
    assert result.exit_code == 1
    assert "[error] problem constructing requested caesar cipher" in result.output


def test_bad_alpha_key_exits_with_error(runner, fast_config):
    result = runner.invoke(
        cli, ["--config", fast_config, "-q", "run", "-c", "vigenere", "-k", "L3MON"],
        input="ABC",
    )
    assert result.exit_code == 1
    assert "problem constructing requested vigenere cipher" in result.output


def test_missing_input_file(runner, fast_config, tmp_path):
    missing = tmp_path / "nope.txt"
    result = runner.invoke(
        cli, ["--config", fast_config, "run", "-k", "3", "-i", str(missing)],
    )
    assert result.exit_code == 1
    assert "failed to read input file" in result.output


def test_unknown_cipher_rejected_by_click(runner):
    result = runner.invoke(cli, ["run", "-c", "enigma", "-k", "3"], input="ABC")
    assert result.exit_code == 2


def test_invalid_configuration(runner, tmp_path):
    config = tmp_path / "bad.toml"
    config.write_text("[runner]\nworker_count = 0\n", encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(config), "families"])
    assert result.exit_code == 1
    assert "invalid configuration" in result.output


def test_summary_shown_without_quiet(runner, fast_config):
    result = runner.invoke(
        cli, ["--config", fast_config, "run", "-c", "caesar", "-k", "3"], input="abc",
    )
    assert result.exit_code == 0
    assert "DEF" in result.output
    assert "Run Summary" in result.output


def test_families(runner):
    result = runner.invoke(cli, ["families"])
    assert result.exit_code == 0
    for name in ("caesar", "playfair", "vigenere"):
        assert name in result.output
