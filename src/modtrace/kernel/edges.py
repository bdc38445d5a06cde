"""Parse `parent child` lines into an adjacency list and project subgraphs."""

from typing import Iterable, List, NamedTuple

from .errors import MalformedEdgeError

# Library is the string name of a dependency (module, package, node).
Library = str


class AdjacencyListItem(NamedTuple):
    """A directed edge: `parent` depends on `child`."""
    parent: Library
    child: Library


class AdjacencyList(List[AdjacencyListItem]):
    """Ordered edge list; duplicates and self-edges are preserved."""

    def __str__(self) -> str:
        return "".join(f"{item.parent} {item.child}\n" for item in self)

    def with_only(self, libraries: Iterable[Library]) -> "AdjacencyList":
        """Return the edges whose both endpoints are in `libraries`, in original order."""
        lib_index = set(libraries)
        return AdjacencyList(
            item for item in self
            if item.parent in lib_index and item.child in lib_index
        )


def parse_graph(lines: Iterable[str]) -> AdjacencyList:
    """Parse raw input lines into an adjacency list.

    Each non-empty line is split on its first space. The child keeps
    anything after that space untouched.

    Raises:
        MalformedEdgeError: a non-empty line has no space separator.
    """
    adjacency_list = AdjacencyList()
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        parent, sep, child = line.partition(" ")
        if not sep:
            raise MalformedEdgeError(line_number, line)
        adjacency_list.append(AdjacencyListItem(parent, child))
    return adjacency_list
