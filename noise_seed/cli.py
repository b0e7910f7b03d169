"""CLI for noise-seed."""

from __future__ import annotations

import logging
import sys

import click

from noise_seed import __version__
from noise_seed.errors import NoiseSeedError
from noise_seed.log import setup_logging


@click.group()
@click.version_option(__version__)
def main() -> None:
    """noise-seed — raw entropy seeds from ambient analog noise."""


# ────────────────────────────────────────────────────────────
# Discovery
# ────────────────────────────────────────────────────────────


@main.command()
def scan() -> None:
    """List the sample sources available on this machine."""
    from noise_seed.platform import detect_available_sources, platform_info

    info = platform_info()
    click.echo(f"Platform: {info['system']} {info['machine']} (Python {info['python']})")
    click.echo()

    sources = detect_available_sources()
    click.echo(f"Found {len(sources)} available sample source(s):\n")
    for src in sources:
        click.echo(f"  {src.name:<15} {src.description}")
    if not sources:
        click.echo("  (none found)")


# ────────────────────────────────────────────────────────────
# Run — capture, extract, test
# ────────────────────────────────────────────────────────────


@main.command()
@click.option("--source", "source_name", type=click.Choice(["microphone", "synthetic"]),
              default="microphone", help="Where to capture samples from.")
@click.option("--input", "input_path", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Replay a raw float32 recording instead of capturing.")
@click.option("--save", "save_path", type=click.Path(dir_okay=False), default=None,
              help="Write the captured samples (raw float32) to this path.")
@click.option("--duration", default=5.0, type=float, show_default=True, help="Record duration in seconds.")
@click.option("--sample-rate", default=None, type=click.IntRange(min=1),
              help="Capture rate in Hz (device default for the microphone, 44100 otherwise).")
@click.option("--num-lsb", default=8, type=int, show_default=True, help="Bits kept from each difference.")
@click.option("--length", "output_length", default=5, type=int, show_default=True, help="Output bytes.")
@click.option("--seed", default=0, type=int, show_default=True, help="Seed for the synthetic source.")
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline progress to stderr.")
def run(
    source_name: str,
    input_path: str | None,
    save_path: str | None,
    duration: float,
    sample_rate: int | None,
    num_lsb: int,
    output_length: int,
    seed: int,
    verbose: bool,
) -> None:
    """Capture noise once and print the extracted bytes with test verdicts.

    Examples:

        noise-seed run --length 32

        noise-seed run --source synthetic --duration 0.1 --seed 7

        noise-seed run --save noise.f32 && noise-seed run --input noise.f32
    """
    from noise_seed import pipeline
    from noise_seed.sources import MicrophoneSource, RawFileSource, SyntheticNoiseSource
    from noise_seed.sources.file import save_raw

    if verbose:
        setup_logging(logging.DEBUG)

    try:
        if input_path is not None:
            source = RawFileSource(input_path)
        elif source_name == "synthetic":
            source = SyntheticNoiseSource(seed=seed)
        else:
            source = MicrophoneSource()

        config = pipeline.PipelineConfig(
            sample_rate=sample_rate,
            duration=duration,
            num_lsb=num_lsb,
            output_length=output_length,
        )
        samples = pipeline.capture(source, config)
        if save_path is not None:
            try:
                save_raw(samples, save_path)
            except OSError as e:
                click.echo(f"Error: cannot write {save_path}: {e}", err=True)
                sys.exit(1)
        result = pipeline.process(samples, config)
    except NoiseSeedError as e:
        click.echo(f"Error: {e.__class__.__name__}: {e}", err=True)
        sys.exit(1)

    for line in pipeline.format_report(result):
        click.echo(line)


# ────────────────────────────────────────────────────────────
# Check — tests on existing bytes
# ────────────────────────────────────────────────────────────


@main.command()
@click.argument("hex_data")
def check(hex_data: str) -> None:
    """Run the monobit and runs tests on HEX_DATA."""
    from noise_seed.stats import run_all_tests

    try:
        data = bytes.fromhex(hex_data)
    except ValueError:
        click.echo(f"Error: not a hex string: {hex_data!r}", err=True)
        sys.exit(2)

    try:
        verdict = run_all_tests(data)
    except NoiseSeedError as e:
        click.echo(f"Error: {e.__class__.__name__}: {e}", err=True)
        sys.exit(1)

    for r in (verdict.monobit, verdict.runs):
        mark = "pass" if r.passed else "FAIL"
        click.echo(f"  {r.name:<8} {mark:<5} statistic={r.statistic:.4f}  {r.details}")
