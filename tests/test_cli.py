"""Tests for the CLI."""

import logging
import re

from click.testing import CliRunner

from noise_seed.cli import main
from noise_seed.log import setup_logging

SYNTH = ["run", "--source", "synthetic", "--duration", "0.01", "--sample-rate", "1000"]


class TestCLI:
    def test_version(self):
        r = CliRunner().invoke(main, ["--version"])
        assert r.exit_code == 0
        assert "0.1.0" in r.output

    def test_scan(self):
        r = CliRunner().invoke(main, ["scan"])
        assert r.exit_code == 0
        assert "Platform" in r.output
        assert "synthetic" in r.output


class TestRun:
    def test_synthetic(self):
        r = CliRunner().invoke(main, SYNTH + ["--length", "5"])
        assert r.exit_code == 0
        lines = r.output.strip().splitlines()
        assert re.fullmatch(r"Random data \(hex\): [0-9a-f]{10}", lines[0])
        assert lines[1] in ("Monobit test passed: True", "Monobit test passed: False")
        assert lines[2] in ("Runs test passed: True", "Runs test passed: False")

    def test_insufficient_samples(self):
        r = CliRunner().invoke(main, SYNTH + ["--length", "50"])
        assert r.exit_code == 1
        assert "InsufficientSamples" in r.output
        assert "Random data" not in r.output

    def test_invalid_num_lsb(self):
        r = CliRunner().invoke(main, SYNTH + ["--num-lsb", "12"])
        assert r.exit_code == 1
        assert "InvalidParameter" in r.output

    def test_zero_sample_rate_rejected(self):
        r = CliRunner().invoke(main, ["run", "--source", "synthetic", "--sample-rate", "0"])
        assert r.exit_code == 2

    def test_sample_rate_sets_capture_length(self, tmp_path):
        path = tmp_path / "noise.f32"
        r = CliRunner().invoke(main, SYNTH + ["--save", str(path)])
        assert r.exit_code == 0
        assert path.stat().st_size == 10 * 4

    def test_save_failure(self, tmp_path):
        path = str(tmp_path / "missing" / "noise.f32")
        r = CliRunner().invoke(main, SYNTH + ["--save", path])
        assert r.exit_code == 1
        assert "cannot write" in r.output
        assert "Random data" not in r.output

    def test_save_and_replay(self, tmp_path):
        path = str(tmp_path / "noise.f32")
        first = CliRunner().invoke(main, SYNTH + ["--save", path])
        assert first.exit_code == 0
        second = CliRunner().invoke(main, ["run", "--input", path, "--duration", "0.01"])
        assert second.exit_code == 0
        assert first.output == second.output


class TestCheck:
    def test_passes(self):
        r = CliRunner().invoke(main, ["check", "aa55"])
        assert r.exit_code == 0
        assert "Monobit" in r.output
        assert r.output.count("pass") == 2

    def test_not_hex(self):
        r = CliRunner().invoke(main, ["check", "zz"])
        assert r.exit_code == 2

    def test_empty(self):
        r = CliRunner().invoke(main, ["check", ""])
        assert r.exit_code == 1
        assert "EmptyInput" in r.output


def test_setup_logging_single_handler():
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.INFO)
    try:
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
