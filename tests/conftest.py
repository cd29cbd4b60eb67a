"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessmoves.core.board import Board


@pytest.fixture
def initial_board() -> Board:
    """Fresh board in the standard starting layout."""
    return Board.initial()
