"""Core value types and ports."""

from flatconf.core.interfaces import EnvironmentPort
from flatconf.core.value import ValueKind, classify

__all__ = ["EnvironmentPort", "ValueKind", "classify"]
