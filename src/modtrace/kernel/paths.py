"""Paths between two nodes of the dependency graph."""

from typing import List

from .edges import Library


class Path(List[Library]):
    """Node names from the queried parent to the queried target, inclusive."""

    def __str__(self) -> str:
        return "[" + ", ".join(self) + "]"


class Paths(List[Path]):
    """All paths found between one (parent, target) pair, in discovery order."""

    def __str__(self) -> str:
        return "[" + " ".join(str(path) for path in self) + "]"

    def list_involved_libraries(self) -> List[Library]:
        """Return every library occurring on any path, first occurrence kept."""
        seen = set()
        result = []
        for path in self:
            for name in path:
                if name in seen:
                    continue
                seen.add(name)
                result.append(name)
        return result
