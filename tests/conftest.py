"""
Pytest fixtures for tests.

Provides shared player pools and seeded random sources so randomized
balancing paths stay reproducible.
"""

import random

import pytest

from domain.models.player import Player


def make_players(ratings: list[int]) -> list[Player]:
    """Build players with ids 1..n and names P1..Pn."""
    return [Player(id=i, name=f"P{i}", rating=r) for i, r in enumerate(ratings, 1)]


@pytest.fixture
def rng():
    """Seeded random source for deterministic shuffles and perturbations."""
    return random.Random(1234)


@pytest.fixture
def sample_players():
    """A realistic 10-player pool with a spread of ratings."""
    return make_players([92, 88, 85, 79, 74, 70, 66, 61, 55, 48])


@pytest.fixture
def odd_players():
    """A 9-player pool, so one player sits out as substitute."""
    return make_players([95, 90, 82, 77, 70, 64, 58, 51, 45])


@pytest.fixture
def sample_records():
    """Caller-style {id, name, rating} records."""
    return [
        {"id": 1, "name": "Marcos", "rating": 84},
        {"id": 2, "name": "Cafu", "rating": 88},
        {"id": 3, "name": "Lucio", "rating": 86},
        {"id": 4, "name": "Edmilson", "rating": 80},
        {"id": 5, "name": "Roque Junior", "rating": 79},
        {"id": 6, "name": "Gilberto Silva", "rating": 82},
        {"id": 7, "name": "Kleberson", "rating": 78},
        {"id": 8, "name": "Roberto Carlos", "rating": 89},
        {"id": 9, "name": "Ronaldinho", "rating": 91},
        {"id": 10, "name": "Rivaldo", "rating": 92},
        {"id": 11, "name": "Ronaldo", "rating": 95},
    ]
