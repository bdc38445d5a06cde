"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed modtrace package.
"""

import pytest

from modtrace.kernel.edges import AdjacencyList, AdjacencyListItem


def pytest_addoption(parser):
    """Add gated perf test option."""
    parser.addoption(
        "--run-perf",
        action="store_true",
        default=False,
        help="Run performance sentinel benchmarks (gated)."
    )


def pytest_collection_modifyitems(config, items):
    """Skip perf-marked tests unless --run-perf is set."""
    if config.getoption("--run-perf"):
        return
    skip_perf = pytest.mark.skip(reason="perf tests gated; pass --run-perf")
    for item in items:
        if "perf" in item.keywords:
            item.add_marker(skip_perf)


# A──────►B─────►C─────►D
# │       │      ▲      ▲
# │       │      │      │
# └───────►E─────┴──────┘
#         └──►X
# A depends on B and on E
# B depends on C and E
# C depends on D
# E depends on C, D and X
DEFAULT_LINES = ["A B", "A E", "B C", "B E", "C D", "E C", "E D", "E X"]

# Same graph with E depending back on B (cycle between B and E).
CYCLIC_LINES = ["A B", "A E", "B C", "B E", "C D", "E B", "E C", "E D", "E X"]


def _to_adjacency_list(lines):
    return AdjacencyList(AdjacencyListItem(*line.split(" ", 1)) for line in lines)


@pytest.fixture
def default_lines():
    return list(DEFAULT_LINES)


@pytest.fixture
def default_adj_list():
    return _to_adjacency_list(DEFAULT_LINES)


@pytest.fixture
def cyclic_adj_list():
    return _to_adjacency_list(CYCLIC_LINES)
