"""
Engine tests: run statistics, configuration defaults and typed failures.
"""

import asyncio

import pytest

from common.config import RunnerConfig, ToolkitConfig
from chunkcipher.core.engine import CipherEngine
from chunkcipher.core.exceptions import ConstructionError
from chunkcipher.core.models import CipherFamily, CipherMode


@pytest.fixture
def engine():
    return CipherEngine(ToolkitConfig(runner=RunnerConfig(poll_interval=0.01)))


def test_report_statistics(engine):
    report = engine.process_sync("caesar", "3", "encrypt", "ABCXYZ", 2)
    assert report.output == "DEFABC"
    assert report.family is CipherFamily.CAESAR
    assert report.mode is CipherMode.ENCRYPT
    assert report.worker_count == 2
    assert report.chunk_length == 4
    assert report.chunk_count == 2
    assert report.input_length == 6
    assert report.output_length == 6
    assert report.end_time is not None
    assert report.duration_seconds >= 0


def test_process_is_awaitable(engine):
    report = asyncio.run(
        engine.process(CipherFamily.VIGENERE, "LEMON", CipherMode.ENCRYPT, "ATTACKATDAWN", 3)
    )
    assert report.output == "LXFOPVEFRNHR"
    # Vigenère chunks are aligned to the key length
    assert report.chunk_length % 5 == 0


def test_family_name_is_case_insensitive(engine):
    report = engine.process_sync("VigeNere", "lemon", "decrypt", "LXFOPVEFRNHR")
    assert report.output == "ATTACKATDAWN"


def test_worker_count_defaults_to_configuration():
    config = ToolkitConfig(runner=RunnerConfig(worker_count=3, poll_interval=0.01))
    report = CipherEngine(config).process_sync("caesar", "1", "encrypt", "ABCDEFGHIJ")
    assert report.worker_count == 3
    assert report.chunk_count == 3
    assert report.output == "BCDEFGHIJK"


def test_playfair_input_length_counts_prepared_text(engine):
    report = engine.process_sync("playfair", "PLAYFAIREXAMPLE", "encrypt", "BALLOON", 4)
    assert report.input_length == len("BALXLOON")
    assert report.output_length == report.input_length


def test_empty_text_produces_empty_report(engine):
    report = engine.process_sync("caesar", "5", "encrypt", "")
    assert report.output == ""
    assert report.chunk_count == 0


def test_invalid_key_raises_construction_error(engine):
    with pytest.raises(ConstructionError):
        engine.process_sync("caesar", "", "encrypt", "ABC")


def test_unknown_family(engine):
    with pytest.raises(ConstructionError):
        engine.process_sync("rot13", "1", "encrypt", "ABC")


def test_worker_count_below_one(engine):
    with pytest.raises(ValueError):
        engine.process_sync("caesar", "1", "encrypt", "ABC", 0)
