"""Configuration models and loaders for shacore."""

from .loader import ConfigError, ENV_LOG_LEVEL, dump_example_config, load_config
from .models import InputConfig, OutputConfig, RuntimeConfig, ShaCoreConfig

__all__ = [
    "ConfigError",
    "ENV_LOG_LEVEL",
    "InputConfig",
    "OutputConfig",
    "RuntimeConfig",
    "ShaCoreConfig",
    "dump_example_config",
    "load_config",
]
