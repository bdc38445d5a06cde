"""Errors raised by the modtrace kernel."""


class ModtraceError(Exception):
    """Base exception for modtrace kernel errors."""
    pass


class MalformedEdgeError(ModtraceError, ValueError):
    """Raised when an input line is not in `<parent> <child>` form.

    A partially parsed graph could silently omit edges, so parsing
    stops at the first bad line and nothing is returned.
    """
    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"invalid format of dependency graph at line {line_number}: {line!r}, "
            "probably no adjacency list form was provided"
        )


class UnknownNodeError(ModtraceError, KeyError):
    """Raised when a path query names a node absent from the graph index."""
    def __init__(self, name: str, role: str):
        self.name = name
        self.role = role  # "parent" | "target"
        super().__init__(f"cannot find `{role}` node {name!r}, check input")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
