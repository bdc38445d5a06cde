"""Suggestions ("did you mean") for node names missing from the index."""

from typing import Iterable


def string_match_ratio(a: str, b: str) -> float:
    """Share of equal characters at the same positions, over the shorter string."""
    if a == b:
        return 1.0
    min_len = min(len(a), len(b))
    if min_len == 0:
        return 0.0
    found = sum(1 for i in range(min_len) if a[i] == b[i])
    return found / min_len


def prepare_extended_message(
    names: Iterable[str],
    min_ratio: float,
    element: str,
    element_type: str,
) -> str:
    """Build the diagnostic for an unknown node.

    The first name (in index order) whose match ratio exceeds `min_ratio`
    is offered as a suggestion.
    """
    message = "check input"
    for name in names:
        if string_match_ratio(name, element) > min_ratio:
            message = f"did you mean '{name}'?"
            break
    return f"No {element_type} package: '{element}' found in package index, {message}"
