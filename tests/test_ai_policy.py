import random
from collections import Counter

import pytest

from strategy_rps.ai_policy import (
    STRATEGIES, Strategy, pick_strategy, select_computer_move
)
from strategy_rps.game_logic import MOVES, Move


def hist(rock=0, paper=0, scissors=0):
    return Counter({Move.ROCK: rock, Move.PAPER: paper, Move.SCISSORS: scissors})


@pytest.mark.parametrize("counts, expected", [
    ((0, 3, 3), Move.PAPER),      # least = Rock
    ((3, 0, 3), Move.SCISSORS),   # least = Paper
    ((3, 3, 0), Move.ROCK),       # least = Scissors
    ((1, 1, 1), Move.PAPER),      # tie -> Rock first
    ((2, 1, 1), Move.SCISSORS),   # tie Paper/Scissors -> Paper
])
def test_least_used_offset(counts, expected):
    rng = random.Random(0)
    assert select_computer_move(Strategy.LEAST_USED, hist(*counts), None, rng) == expected


@pytest.mark.parametrize("counts, expected", [
    ((5, 1, 1), Move.SCISSORS),   # most = Rock
    ((1, 5, 1), Move.ROCK),       # most = Paper
    ((1, 1, 5), Move.PAPER),      # most = Scissors
    ((0, 0, 0), Move.SCISSORS),   # tie -> Rock first
    ((1, 4, 4), Move.ROCK),       # tie Paper/Scissors -> Paper
])
def test_most_used_offset(counts, expected):
    rng = random.Random(0)
    assert select_computer_move(Strategy.MOST_USED, hist(*counts), None, rng) == expected


def test_histogram_strategies_are_pure():
    h = hist(2, 7, 4)
    snapshot = Counter(h)
    for strategy in (Strategy.LEAST_USED, Strategy.MOST_USED):
        first = select_computer_move(strategy, h, Move.ROCK, random.Random(1))
        second = select_computer_move(strategy, h, Move.ROCK, random.Random(99))
        assert first == second
    assert h == snapshot


def test_last_used_mimics_previous_move():
    rng = random.Random(3)
    for m in MOVES:
        assert select_computer_move(Strategy.LAST_USED, hist(), m, rng) == m


def test_last_used_without_history_is_random():
    rng = random.Random(7)
    seen = Counter(select_computer_move(Strategy.LAST_USED, hist(), None, rng) for _ in range(3000))
    assert set(seen) == set(MOVES)
    for m in MOVES:
        assert 0.28 < seen[m] / 3000 < 0.39


def test_cheat_frequency_against_rock():
    rng = random.Random(2024)
    n = 12000
    seen = Counter(select_computer_move(Strategy.CHEAT, hist(), Move.ROCK, rng) for _ in range(n))
    assert abs(seen[Move.PAPER] / n - 0.40) < 0.03
    assert abs(seen[Move.ROCK] / n - 0.30) < 0.03
    assert abs(seen[Move.SCISSORS] / n - 0.30) < 0.03


class _AlwaysCheat:
    def random(self):
        return 0.0

    def choice(self, seq):
        return seq[-1]


def test_cheat_counters_last_move():
    rng = _AlwaysCheat()
    assert select_computer_move(Strategy.CHEAT, hist(), Move.ROCK, rng) == Move.PAPER
    assert select_computer_move(Strategy.CHEAT, hist(), Move.PAPER, rng) == Move.SCISSORS
    assert select_computer_move(Strategy.CHEAT, hist(), Move.SCISSORS, rng) == Move.ROCK


def test_cheat_without_history_falls_back_to_random():
    # choice() returns the last element, so a random fallback yields Scissors
    assert select_computer_move(Strategy.CHEAT, hist(), None, _AlwaysCheat()) == Move.SCISSORS


def test_pick_strategy_covers_all_five():
    rng = random.Random(11)
    seen = {pick_strategy(rng) for _ in range(500)}
    assert seen == set(STRATEGIES)
    assert len(STRATEGIES) == 5
