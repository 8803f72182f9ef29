from collections import Counter
from enum import Enum
from typing import Optional

from strategy_rps.game_logic import MOVES, LOSES_TO, Move

CHEAT_PROBABILITY = 0.1


class Strategy(Enum):
    RANDOM = "Random"
    LEAST_USED = "Least Used"
    MOST_USED = "Most Used"
    LAST_USED = "Last Used"
    CHEAT = "Cheat"


STRATEGIES = tuple(Strategy)


class AIPolicy:
    """
    A policy looks at the player's choice histogram and previous move and
    returns the computer's move. `rng` is anything with `choice()` and
    `random()` (the `random` module or a `random.Random`).
    """
    def choose(self, histogram: "Counter[Move]", last_move: Optional[Move], rng) -> Move:
        raise NotImplementedError


class RandomPolicy(AIPolicy):
    def choose(self, histogram, last_move, rng):
        return rng.choice(MOVES)


class LeastUsedPolicy(AIPolicy):
    """Counter the player's least used move (first in Rock/Paper/Scissors order on ties)."""
    def choose(self, histogram, last_move, rng):
        least = min(MOVES, key=lambda m: histogram[m])
        return MOVES[(MOVES.index(least) + 1) % 3]


class MostUsedPolicy(AIPolicy):
    """
    Named after the player's most used move, but the +2 offset actually
    yields the move that move defeats. Kept as is.
    """
    def choose(self, histogram, last_move, rng):
        most = max(MOVES, key=lambda m: histogram[m])
        return MOVES[(MOVES.index(most) + 2) % 3]


class LastUsedPolicy(AIPolicy):
    """Mimic the player's previous move; random before the first round."""
    def choose(self, histogram, last_move, rng):
        if last_move is None:
            return rng.choice(MOVES)
        return last_move


class CheatPolicy(AIPolicy):
    def choose(self, histogram, last_move, rng):
        if rng.random() < CHEAT_PROBABILITY:
            # nothing to peek at on the first round
            if last_move is None:
                return rng.choice(MOVES)
            return LOSES_TO[last_move]
        return rng.choice(MOVES)


POLICIES = {
    Strategy.RANDOM: RandomPolicy(),
    Strategy.LEAST_USED: LeastUsedPolicy(),
    Strategy.MOST_USED: MostUsedPolicy(),
    Strategy.LAST_USED: LastUsedPolicy(),
    Strategy.CHEAT: CheatPolicy(),
}


def pick_strategy(rng) -> Strategy:
    return rng.choice(STRATEGIES)


def select_computer_move(strategy: Strategy, histogram: "Counter[Move]",
                         last_move: Optional[Move], rng) -> Move:
    return POLICIES[strategy].choose(histogram, last_move, rng)
