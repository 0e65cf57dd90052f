"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from dynamic_installer.adapters.mock import MockAdapter


@pytest.fixture
def mock_adapter() -> MockAdapter:
    """A process adapter that records commands and succeeds by default."""
    return MockAdapter(default_output="added 1 package")


@pytest.fixture
def sink_lines() -> list[str]:
    """A list to use as a live log sink: pass ``sink_lines.append``."""
    return []


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent
