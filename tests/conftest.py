"""Shared pytest fixtures for slippytile tests."""

import pytest

from slippytile import BBox, Tile, utils


@pytest.fixture(autouse=True)
def quiet(monkeypatch):
    """Keep the module level VERBOSE switch from leaking between tests."""
    monkeypatch.setattr(utils, "VERBOSE", False)


@pytest.fixture
def sample_tiles():
    """Provide tiles spread over several zoom levels."""
    return [
        Tile(0, 0, 0),
        Tile(1, 1, 0),
        Tile(3, 1, 2),
        Tile(5, 17, 30),
        Tile(10, 301, 385),
        Tile(18, 140000, 95000),
    ]


@pytest.fixture
def sample_bbox():
    """Provide a Web Mercator box over the Alps, covering 3x2 tiles at zoom 7."""
    return BBox(1137489.0, 5980732.0, 1711100.0, 6428543.0)
