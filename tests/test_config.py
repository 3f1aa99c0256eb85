"""
Configuration loading tests.
"""

import pytest

from common.config import GlobalConfig, RunnerConfig, ToolkitConfig


def test_defaults():
    config = ToolkitConfig()
    assert config.runner.worker_count == 10
    assert config.runner.poll_interval == 1.0
    assert config.runner.default_family == "caesar"
    assert config.global_settings.log_level == "WARNING"


def test_load_from_toml(tmp_path):
    path = tmp_path / "chunkcipher.toml"
    path.write_text(
        '[global]\nlog_level = "DEBUG"\n\n'
        '[runner]\nworker_count = 4\ndefault_family = "vigenere"\n',
        encoding="utf-8",
    )
    config = ToolkitConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.runner.worker_count == 4
    assert config.runner.default_family == "vigenere"
    assert config.runner.poll_interval == 1.0


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "chunkcipher.toml"
    path.write_text("[runner]\nworker_count = 2\nturbo = true\n\n[extra]\nx = 1\n")
    assert ToolkitConfig.load(path).runner.worker_count == 2


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ToolkitConfig.load(tmp_path / "absent.toml")


@pytest.mark.parametrize("body", [
    "[runner]\nworker_count = 0\n",
    "[runner]\npoll_interval = 0\n",
    "[runner]\nworker_count = \"ten\"\n",
])
def test_out_of_range_runner_settings(tmp_path, body):
    path = tmp_path / "chunkcipher.toml"
    path.write_text(body)
    with pytest.raises(ValueError):
        ToolkitConfig.load(path)


def test_to_dict():
    data = ToolkitConfig(
        global_settings=GlobalConfig(log_level="INFO"),
        runner=RunnerConfig(worker_count=3),
    ).to_dict()
    assert data["global_settings"]["log_level"] == "INFO"
    assert data["runner"]["worker_count"] == 3
