from __future__ import annotations

import pytest

from core.logging.logger import get_logger


@pytest.fixture
def logger():
    return get_logger("tests", service="tests")
