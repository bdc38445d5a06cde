"""Constant codes for modtrace.

These constants prevent stringly-typed roles and formats
across the API and the CLI.
"""

from enum import Enum


class NodeRole(str, Enum):
    """Which query argument a node name was given as."""

    PARENT = "parent"
    TARGET = "target"


class OutputFormat(str, Enum):
    """How the CLI renders a trace result."""

    TEXT = "text"
    JSON = "json"
