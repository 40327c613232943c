from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def session() -> MagicMock:
    mock = MagicMock()
    mock.headers = {}
    return mock
