"""Shared fixtures for remote-driver tests."""

from unittest.mock import MagicMock

import pytest

from remote_driver.interfaces import Executor
from remote_driver.session import Session


@pytest.fixture
def executor() -> MagicMock:
    """Executor double; set ``execute.return_value`` or ``side_effect``."""
    mock = MagicMock(spec=Executor)
    mock.execute.return_value = None
    return mock


@pytest.fixture
def session_executor() -> MagicMock:
    """Session double for page-level tests."""
    mock = MagicMock(spec=Session)
    mock.execute.return_value = None
    mock.url = "http://127.0.0.1:9515/session/some-session"
    return mock
