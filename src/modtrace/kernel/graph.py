"""Graph index over an adjacency list and all-paths search."""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Set

from .edges import AdjacencyList, Library
from .errors import UnknownNodeError
from .paths import Path, Paths

# Receives human-readable trace lines from the path search.
TraceSink = Callable[[str], None]


@dataclass
class Node:
    """A node of the graph.

    Adjacency is stored as names keyed into the owning GraphIndex,
    one entry per edge, in edge input order.
    """
    name: Library
    predecessors: List[Library] = field(default_factory=list)  # nodes that depend on this one ("from")
    successors: List[Library] = field(default_factory=list)  # nodes this one depends on ("to")

    def __str__(self) -> str:
        return "{%s from: [%s] to: [%s]}" % (
            self.name,
            ", ".join(self.predecessors),
            ", ".join(self.successors),
        )


class GraphIndex:
    """Name -> Node table built once from an adjacency list.

    The index is read-only after construction.
    """

    def __init__(self, adjacency_list: AdjacencyList):
        self.nodes: Dict[Library, Node] = {}
        self._build(adjacency_list)

    def _build(self, adjacency_list: AdjacencyList) -> None:
        for parent, child in adjacency_list:
            node_from = self._get_or_create(parent)
            node_to = self._get_or_create(child)
            node_from.successors.append(node_to.name)
            node_to.predecessors.append(node_from.name)

    def _get_or_create(self, name: Library) -> Node:
        node = self.nodes.get(name)
        if node is None:
            node = Node(name=name)
            self.nodes[name] = node
        return node

    def __contains__(self, name: object) -> bool:
        return name in self.nodes

    def __iter__(self) -> Iterator[Library]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, name: Library) -> Node:
        return self.nodes[name]

    def __str__(self) -> str:
        return "\n".join(str(node) for node in self.nodes.values())

    def get_dependencies(self, name: Library) -> List[Library]:
        """Get direct dependencies (successors) of a node."""
        return list(self.nodes[name].successors)

    def get_dependents(self, name: Library) -> List[Library]:
        """Get nodes that directly depend on this node (predecessors)."""
        return list(self.nodes[name].predecessors)

    def find_paths(
        self,
        parent: Library,
        target: Library,
        seen: Optional[Set[Library]] = None,
        trace: Optional[TraceSink] = None,
    ) -> Paths:
        """Find all paths from `parent` to `target` that never revisit a node.

        The search walks backward from `target` over predecessors: a parent
        usually has many dependencies that never reach the target, while
        every path ends at the target.

        A node is marked seen once it becomes the frontier of a branch and
        unmarked when that branch is finished, so the seen set always holds
        exactly the frontiers of the current branch. Sibling predecessors
        never see each other's marks. A predecessor already seen on the
        current branch is skipped. Results are concatenated in predecessor
        (edge input) order.

        The walk uses an explicit stack, so chain depth is bounded by the
        number of nodes, not by the interpreter's recursion limit.

        Args:
            parent: Name of the node paths start at.
            target: Name of the node paths end at.
            seen: Names already on the current branch; not mutated.
            trace: Optional sink for trace lines.

        Raises:
            UnknownNodeError: `parent` or `target` is not in the index.
                Callers are expected to validate names first.
        """
        if parent not in self.nodes:
            raise UnknownNodeError(parent, "parent")
        if target not in self.nodes:
            raise UnknownNodeError(target, "target")

        if parent == target:
            return Paths([Path([parent])])

        branch_seen = set(seen) if seen else set()
        branch_seen.add(target)
        stack = [_Frame(target)]

        while True:
            frame = stack[-1]
            predecessors = self.nodes[frame.target].predecessors
            if frame.position < len(predecessors):
                name = predecessors[frame.position]
                frame.position += 1
                if trace is not None:
                    trace(f"visiting {self.nodes[name]}")
                if name in branch_seen:
                    if trace is not None:
                        trace(
                            f"already seen, parent: {parent}, child: {name}, "
                            f"seen: {sorted(branch_seen)}"
                        )
                    continue
                if name == parent:
                    # exit condition: the branch reached the parent
                    self._extend(frame, parent, Paths([Path([parent])]), parent, trace)
                    continue
                branch_seen.add(name)
                stack.append(_Frame(name))
                continue

            stack.pop()
            if trace is not None:
                trace(f"result {parent} -> {frame.target}: {frame.paths}")
            if not stack:
                return frame.paths
            branch_seen.discard(frame.target)
            self._extend(stack[-1], frame.target, frame.paths, parent, trace)

    @staticmethod
    def _extend(
        frame: "_Frame",
        child: Library,
        sub_paths: Paths,
        parent: Library,
        trace: Optional[TraceSink],
    ) -> None:
        """Append `frame.target` to every sub-path and collect them on the frame."""
        if trace is not None:
            trace(f"sub-paths {parent} -> {child}: {sub_paths}")
        for sub_path in sub_paths:
            frame.paths.append(Path(sub_path + [frame.target]))


@dataclass
class _Frame:
    """One pending node of the path search."""
    target: Library
    position: int = 0  # next predecessor to visit
    paths: Paths = field(default_factory=Paths)


def build_graph_index(adjacency_list: AdjacencyList) -> GraphIndex:
    """Build a graph index for direct access to every node of the graph."""
    return GraphIndex(adjacency_list)
