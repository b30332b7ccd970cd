"""Pytest fixtures for server module testing."""

from collections.abc import Iterator

import pytest

from server.main import hub


@pytest.fixture(autouse=True)
def reset_hub() -> Iterator[None]:
    hub.reset()
    yield
    hub.reset()
