from enum import Enum
from typing import Optional


class Move(Enum):
    ROCK = "Rock"
    PAPER = "Paper"
    SCISSORS = "Scissors"


class Outcome(Enum):
    PLAYER_WIN = "Player wins"
    COMPUTER_WIN = "Computer wins"
    TIE = "Tie"


# Fixed order Rock < Paper < Scissors; strategies index into it.
MOVES = (Move.ROCK, Move.PAPER, Move.SCISSORS)
BEATS = {Move.ROCK: Move.SCISSORS, Move.PAPER: Move.ROCK, Move.SCISSORS: Move.PAPER}
LOSES_TO = {v: k for k, v in BEATS.items()}  # inverse


def parse_move(label) -> Optional[Move]:
    """Map a button/key label to a Move, or None if it is not one."""
    if isinstance(label, Move):
        return label
    text = str(label or "").strip().lower()
    for move in MOVES:
        if move.value.lower() == text:
            return move
    return None


def adjudicate(player: Move, computer: Move) -> Outcome:
    if player == computer:
        return Outcome.TIE
    return Outcome.PLAYER_WIN if BEATS[player] == computer else Outcome.COMPUTER_WIN


def describe_round(player: Move, computer: Move, outcome: Outcome) -> str:
    """One line of the results log."""
    if outcome == Outcome.TIE:
        return f"{player.value} ties {computer.value} ({outcome.value})"
    if outcome == Outcome.PLAYER_WIN:
        return f"{player.value} breaks {computer.value} ({outcome.value})"
    return f"{computer.value} beats {player.value} ({outcome.value})"
