"""Shared pytest fixtures for equity tests."""

import pytest

from simulation.equity import EquitySimulator
from tests.helpers.card_utils import make_cards, make_hand


@pytest.fixture
def seed():
    """Provide a reproducible seed."""
    return 42


@pytest.fixture
def simulator(seed):
    """A seeded simulator with a small trial count."""
    return EquitySimulator(trials=2000, seed=seed)


@pytest.fixture
def nuts_hand():
    """Quad aces with a king-full board: nothing beats it."""
    return make_hand("As", "Ah", ["Ad", "Ac", "Ks", "Kh", "Kd"])


@pytest.fixture
def pocket_aces():
    """Pocket aces preflop."""
    return make_cards(["As", "Ah"]), []


@pytest.fixture(params=[0, 3, 4, 5])
def board_size(request):
    """Parametrize over every legal community card count."""
    return request.param
