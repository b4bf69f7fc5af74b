"""
shacore - Main Entry Point
SHA-256 digests of hex-encoded messages, one message per input line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer

from shacore.config import ConfigError, ShaCoreConfig, load_config
from shacore.core_crypto.sha256 import sha256_string
from shacore.integration.hex_lines import digest_lines
from shacore.integration.selftest import run_self_test
from shacore.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="SHA-256 (FIPS 180-4) digest tool")


def _load_config(path: Optional[Path], overrides: dict[str, Any]) -> ShaCoreConfig:
    try:
        return load_config(path, overrides=overrides)
    except ConfigError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc


@app.command()
def digest(
    input_file: typer.FileBinaryRead = typer.Argument("-", help="File of hex messages, one per line ('-' reads stdin)"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON config file"),
    fail_fast: bool = typer.Option(False, "--fail-fast", help="Stop with exit code 1 at the first malformed line"),
    trace: bool = typer.Option(False, "--trace", help="Log every intermediate chaining value at DEBUG"),
) -> None:
    """Print the SHA-256 digest of each hex-encoded input line."""

    overrides: dict[str, Any] = {}
    if fail_fast:
        overrides["runtime.fail_fast"] = True
    if trace:
        overrides["runtime.trace_chaining_values"] = True
        overrides["runtime.log_level"] = "DEBUG"

    cfg = _load_config(config, overrides)
    logger = configure_logging(level=cfg.runtime.log_level, log_path=cfg.runtime.log_path)
    placeholder = cfg.output.rejected_placeholder

    processed = 0
    rejected = 0
    for result in digest_lines(
        input_file,
        strip_whitespace=cfg.input.strip_whitespace,
        skip_blank_lines=cfg.input.skip_blank_lines,
        trace=cfg.runtime.trace_chaining_values,
    ):
        processed += 1
        if result.ok:
            typer.echo(result.hexdigest)
            continue

        rejected += 1
        logger.error("InvalidInputEncoding: %s", result.error)
        if placeholder is not None:
            typer.echo(placeholder)
        if cfg.runtime.fail_fast:
            logger.info("Stopped at line %d", result.line_number)
            raise typer.Exit(code=1)

    logger.info("Hashed %d line(s), rejected %d", processed - rejected, rejected)


@app.command()
def text(
    message: str = typer.Argument(..., help="Text to hash"),
    encoding: str = typer.Option("utf-8", help="Encoding applied before hashing"),
) -> None:
    """Print the SHA-256 digest of a text string."""

    try:
        digest_bytes = sha256_string(message, encoding)
    except (LookupError, UnicodeEncodeError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--encoding") from exc
    typer.echo(digest_bytes.hex())


@app.command()
def selftest(
    samples: Optional[int] = typer.Option(None, min=0, help="Random messages to cross-check against cryptography"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON config file"),
) -> None:
    """Check known-answer vectors and cross-check random messages."""

    overrides: dict[str, Any] = {}
    if samples is not None:
        overrides["runtime.selftest_samples"] = samples

    cfg = _load_config(config, overrides)
    configure_logging(level=cfg.runtime.log_level, log_path=cfg.runtime.log_path)

    report = run_self_test(samples=cfg.runtime.selftest_samples)
    for check in report.checks:
        typer.echo(str(check))

    passed = len(report.checks) - len(report.failures)
    typer.echo(f"Overall: {passed}/{len(report.checks)} checks passed")
    if not report.passed:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
