"""flatconf

Merges JSON files and environment variables into one flat, dot-keyed
configuration store with typed accessors.
"""

__version__ = "0.1.0"

# Environment providers
from flatconf.adapters import OsEnvironment, StaticEnvironment

# Configuration store
from flatconf.config import (
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    ConfigSchemaError,
    ConfigTypeError,
    FlatConfig,
    read_from_env,
    read_from_file,
)

__all__ = [
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "ConfigSchemaError",
    "ConfigTypeError",
    "FlatConfig",
    "OsEnvironment",
    "StaticEnvironment",
    "read_from_env",
    "read_from_file",
]
