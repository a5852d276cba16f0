"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed xmltree2json package.
"""

import logging

import pytest

from xmltree2json.kernel.node import Node


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


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """CLI runs reconfigure the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)


@pytest.fixture
def osm_tree():
    """Tree of a small OSM document, attributes inserted out of order."""
    bounds = Node().add_child("-minlat", Node(data="54.0889580"))
    osm = (
        Node()
        .add_child("-version", Node(data="0.6"))
        .add_child("-generator", Node(data="CGImap 0.0.2"))
        .add_child("bounds", bounds)
        .add_child("foo", Node(data="bar"))
    )
    return Node().add_child("osm", osm)
