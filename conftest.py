"""
Pytest fixtures for TicTacToe tests.
"""

import pytest

from fakes import FakeSurface, QuietConfig


@pytest.fixture
def config():
    return QuietConfig()


@pytest.fixture
def surface():
    return FakeSurface()
