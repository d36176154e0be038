#!/usr/bin/env python3
"""
Shared fixtures for plasmid manager tests.
"""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop loguru sinks bound to streams captured during a test."""
    yield
    logger.remove()
