"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from skeletonne.api.main import app
from skeletonne.dsl.schema import PlaygroundState
from skeletonne.engine.ids import SequentialIdFactory
from skeletonne.tests.factories import horizontal, vertical


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def ids() -> SequentialIdFactory:
    """Deterministic id factory."""
    return SequentialIdFactory()


@pytest.fixture
def three_column_row() -> PlaygroundState:
    """A heading line followed by a balanced row of three."""
    return PlaygroundState(
        skeletons=(
            vertical("title", width="60%", height="32px"),
            horizontal("a", "row-a", width="33.3333%"),
            horizontal("b", "row-a", width="33.3333%"),
            horizontal("c", "row-a", width="33.3333%"),
        )
    )


@pytest.fixture
def scattered_row() -> PlaygroundState:
    """A row whose members are split by a vertical element."""
    return PlaygroundState(
        skeletons=(
            vertical("v1"),
            horizontal("h1", "row-x", width="50%"),
            vertical("v2"),
            horizontal("h2", "row-x", width="50%"),
            horizontal("solo", None, width="40px"),
        )
    )
