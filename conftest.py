import pytest

from dropfour.game.rules import Game
from dropfour.utils import Player


@pytest.fixture
def players():
    return Player(0, "red"), Player(1, "yellow")


@pytest.fixture
def game(players):
    return Game(6, 7, players)
