"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict

from loadable.state.models import Loadable, LoadableStatus


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    """Sample remote document payload."""
    return {
        "id": "doc-001",
        "title": "Quarterly report",
        "revision": 3,
    }


@pytest.fixture
def fetch_error() -> RuntimeError:
    """Error a collaborator reports when a fetch fails."""
    return RuntimeError("connection reset by peer")


@pytest.fixture
def loaded_document(sample_document) -> Loadable:
    """Loadable holding a successfully loaded document."""
    return Loadable(sample_document, LoadableStatus.LOADED)


@pytest.fixture
def config_dir(tmp_path):
    """Empty config directory."""
    directory = tmp_path / "config"
    directory.mkdir()
    return directory
