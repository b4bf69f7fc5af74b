"""Pydantic models describing shacore configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InputConfig(BaseModel):
    """How hex input lines are read."""

    model_config = ConfigDict(extra="forbid")

    strip_whitespace: bool = True
    skip_blank_lines: bool = False


class OutputConfig(BaseModel):
    """How digests are written."""

    model_config = ConfigDict(extra="forbid")

    # Line written in place of a rejected input line; None omits the line.
    rejected_placeholder: Optional[str] = ""


class RuntimeConfig(BaseModel):
    """Execution-time settings for the CLI."""

    model_config = ConfigDict(extra="forbid")

    fail_fast: bool = False
    trace_chaining_values: bool = False
    log_level: LogLevel = "WARNING"
    log_path: Optional[Path] = None
    selftest_samples: int = Field(default=32, ge=0)


class ShaCoreConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="forbid")

    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)


__all__ = [
    "InputConfig",
    "LogLevel",
    "OutputConfig",
    "RuntimeConfig",
    "ShaCoreConfig",
]
