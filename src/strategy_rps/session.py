import random
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Union

from loguru import logger

from strategy_rps.ai_policy import Strategy, pick_strategy, select_computer_move
from strategy_rps.game_logic import MOVES, Move, Outcome, adjudicate, describe_round, parse_move


@dataclass
class Tally:
    player_wins: int = 0
    computer_wins: int = 0
    ties: int = 0

    @property
    def rounds(self) -> int:
        return self.player_wins + self.computer_wins + self.ties

    def record(self, outcome: Outcome):
        if outcome == Outcome.PLAYER_WIN:
            self.player_wins += 1
        elif outcome == Outcome.COMPUTER_WIN:
            self.computer_wins += 1
        else:
            self.ties += 1


@dataclass(frozen=True)
class RoundResult:
    player_move: Move
    computer_move: Move
    outcome: Outcome
    strategy: Strategy

    def describe(self) -> str:
        return describe_round(self.player_move, self.computer_move, self.outcome)


def _empty_histogram() -> "Counter[Move]":
    return Counter({m: 0 for m in MOVES})


@dataclass
class SessionState:
    """Everything one game session owns. Lives until the process quits."""
    histogram: "Counter[Move]" = field(default_factory=_empty_histogram)
    tally: Tally = field(default_factory=Tally)
    last_move: Optional[Move] = None
    log: List[RoundResult] = field(default_factory=list)

    def log_lines(self) -> List[str]:
        return [r.describe() for r in self.log]


def play_round(session: SessionState, player_move: Union[Move, str], rng=None) -> Optional[RoundResult]:
    """
    Play one round for `player_move` and update `session` in place.

    The histogram is bumped before the computer moves, so LeastUsed/MostUsed
    already see this round's choice; `last_move` is only replaced afterwards.
    An unknown label leaves the session untouched and returns None.
    """
    move = parse_move(player_move)
    if move is None:
        logger.warning(f"Ignoring unknown move {player_move!r}")
        return None
    if rng is None:
        rng = random

    session.histogram[move] += 1
    strategy = pick_strategy(rng)
    computer = select_computer_move(strategy, session.histogram, session.last_move, rng)
    outcome = adjudicate(move, computer)
    session.tally.record(outcome)
    session.last_move = move

    result = RoundResult(move, computer, outcome, strategy)
    session.log.append(result)
    logger.info(f"Round {session.tally.rounds}: {move.value} vs {computer.value} "
                f"[{strategy.value}] -> {outcome.value}")
    return result
