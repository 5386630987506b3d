"""Environment provider adapters."""

from flatconf.adapters.environment import OsEnvironment, StaticEnvironment, parse_environ_entries

__all__ = ["OsEnvironment", "StaticEnvironment", "parse_environ_entries"]
