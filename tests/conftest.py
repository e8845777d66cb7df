"""
Pytest fixtures for tests.

This module provides centralized player factories to reduce duplication
across the test suite. Import ``make_player`` from here instead of building
Player objects by hand.
"""

import random

import pytest

from domain.models.player import Player
from domain.models.team import ROLES

TEST_SEED = 1234
"""Seed for tests that need a reproducible random source."""


def make_player(
    index: int,
    rating: int = 300,
    primary_role: str | None = "Fill",
    secondary_role: str | None = "Fill",
    riot_id: str | None = None,
) -> Player:
    """Create a player with a predictable id and name."""
    return Player(
        player_id=f"p{index}",
        name=f"Player{index}",
        rating=rating,
        primary_role=primary_role,
        secondary_role=secondary_role,
        riot_id=riot_id,
    )


@pytest.fixture
def rng():
    """Seeded request-scoped random source."""
    return random.Random(TEST_SEED)


@pytest.fixture
def double_cover_players():
    """Ten players whose primaries cover every role exactly twice, no secondary."""
    return [
        make_player(i, rating=300 + i * 10, primary_role=ROLES[i % 5], secondary_role=None)
        for i in range(10)
    ]


@pytest.fixture
def all_top_players():
    """Ten players who only want to play Top."""
    return [
        make_player(i, rating=300 + i * 25, primary_role="Top", secondary_role=None)
        for i in range(10)
    ]


@pytest.fixture
def make_pool():
    """Factory for pools of mixed-preference players."""

    def _make_pool(count: int) -> list[Player]:
        return [
            make_player(
                i,
                rating=150 + (i * 37) % 600,
                primary_role=ROLES[i % 5],
                secondary_role=ROLES[(i + 2) % 5],
            )
            for i in range(count)
        ]

    return _make_pool
