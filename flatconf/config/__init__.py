"""Configuration store, loaders and errors."""

from flatconf.config.errors import (
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    ConfigSchemaError,
    ConfigTypeError,
)
from flatconf.config.loader import load_config_file
from flatconf.config.resolver import flatten, select_environment
from flatconf.config.store import FlatConfig, read_from_env, read_from_file

__all__ = [
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "ConfigSchemaError",
    "ConfigTypeError",
    "FlatConfig",
    "flatten",
    "load_config_file",
    "read_from_env",
    "read_from_file",
    "select_environment",
]
