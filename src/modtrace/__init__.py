"""modtrace: trace every dependency path between two packages of a module graph."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("modtrace")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from modtrace.api import trace, trace_graph, TraceResult
from modtrace.kernel.errors import ModtraceError, MalformedEdgeError, UnknownNodeError

__all__ = [
    "__version__",
    "trace",
    "trace_graph",
    "TraceResult",
    "ModtraceError",
    "MalformedEdgeError",
    "UnknownNodeError",
]
