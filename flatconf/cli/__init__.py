"""Command-line interface helpers."""

from flatconf.cli.arguments import parse_arguments
from flatconf.cli.dump import render_config

__all__ = ["parse_arguments", "render_config"]
