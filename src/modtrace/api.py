"""Public API for modtrace.

High-level functions that return complete, structured results.
"""

from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from modtrace.codes import NodeRole
from modtrace.config import DEFAULT_MIN_RATIO
from modtrace.kernel.edges import AdjacencyList, AdjacencyListItem, parse_graph
from modtrace.kernel.graph import GraphIndex, TraceSink, build_graph_index
from modtrace.kernel.paths import Paths
from modtrace._internal.suggest import prepare_extended_message


class TraceResult(BaseModel):
    """Stable result model for a parent -> target trace."""
    parent: str
    target: str
    found: bool  # False when parent or target is not in the graph
    message: Optional[str] = None  # Diagnostic for an unknown parent/target
    paths: List[List[str]] = Field(default_factory=list)  # Every path, parent first
    libraries: List[str] = Field(default_factory=list)  # Names on any path, first occurrence order
    edges: List[Tuple[str, str]] = Field(default_factory=list)  # Induced subgraph, input order

    def render(self) -> str:
        """Render as the command line prints it: the diagnostic or one edge per line."""
        if not self.found:
            return f"{self.message}\n"
        return str(AdjacencyList(AdjacencyListItem(*edge) for edge in self.edges))


def check_node(
    index: GraphIndex,
    name: str,
    role: NodeRole,
    min_ratio: float = DEFAULT_MIN_RATIO,
) -> Optional[str]:
    """Return the "not found" diagnostic for `name`, or None if it is indexed."""
    if name in index:
        return None
    return prepare_extended_message(index, min_ratio, name, role.value)


def trace_graph(
    graph: AdjacencyList,
    parent: str,
    target: str,
    *,
    min_ratio: float = DEFAULT_MIN_RATIO,
    sink: Optional[TraceSink] = None,
) -> TraceResult:
    """Find all parent -> target paths in an already parsed graph."""
    index = build_graph_index(graph)
    for name, role in ((parent, NodeRole.PARENT), (target, NodeRole.TARGET)):
        message = check_node(index, name, role, min_ratio)
        if message is not None:
            return TraceResult(parent=parent, target=target, found=False, message=message)

    paths: Paths = index.find_paths(parent, target, trace=sink)
    if sink is not None:
        sink(f"paths: {paths}")
    libraries = paths.list_involved_libraries()
    minimized = graph.with_only(libraries)
    return TraceResult(
        parent=parent,
        target=target,
        found=True,
        paths=[list(path) for path in paths],
        libraries=libraries,
        edges=[(item.parent, item.child) for item in minimized],
    )


def trace(
    lines: Iterable[str],
    parent: str,
    target: str,
    *,
    min_ratio: float = DEFAULT_MIN_RATIO,
    sink: Optional[TraceSink] = None,
) -> TraceResult:
    """
    Parse `parent child` lines and trace every path from parent to target.

    Args:
        lines: Raw edge lines, e.g. the output of `go mod graph`.
        parent: Node the paths start at.
        target: Node the paths end at.
        min_ratio: Threshold for "did you mean" suggestions.
        sink: Optional callable receiving path-search trace lines.

    Returns:
        TraceResult; `found` is False with `message` set when either
        name is unknown.

    Raises:
        MalformedEdgeError: a line is not in `<parent> <child>` form.
    """
    return trace_graph(parse_graph(lines), parent, target, min_ratio=min_ratio, sink=sink)
