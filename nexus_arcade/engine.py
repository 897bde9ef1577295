"""Move algebra for Rock-Paper-Scissors rounds."""

from enum import Enum


class Move(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


class Outcome(Enum):
    """Result of a round, always from the human player's side."""
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


class InvalidMoveError(ValueError):
    """Raised when input cannot be read as a Move."""


# Canonical cycle order: each move is beaten by the one after it
MOVES = [Move.ROCK, Move.PAPER, Move.SCISSORS]

# What each move beats
BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
    Move.PAPER: Move.ROCK,
}

# What beats each move
BEATEN_BY = {v: k for k, v in BEATS.items()}

# Keyboard shortcuts accepted alongside the full names
_ALIASES = {
    "r": Move.ROCK,
    "p": Move.PAPER,
    "s": Move.SCISSORS,
}


def beats(move: Move) -> Move:
    """Return the move that `move` defeats."""
    return BEATS[move]


def counters(move: Move) -> Move:
    """Return the move that beats `move`."""
    return BEATEN_BY[move]


def determine_outcome(human: Move, opponent: Move) -> Outcome:
    """Score a round for the human player."""
    if human == opponent:
        return Outcome.DRAW
    return Outcome.WIN if BEATS[human] == opponent else Outcome.LOSE


def parse_move(value) -> Move:
    """Read a Move from user input.

    Accepts a Move, a full name ("rock") or its first letter ("r"), in any
    case and with surrounding whitespace. Anything else is rejected with
    InvalidMoveError rather than coerced to a default.
    """
    if isinstance(value, Move):
        return value
    if not isinstance(value, str):
        raise InvalidMoveError(f"Not a move: {value!r}")
    text = value.strip().lower()
    if text in _ALIASES:
        return _ALIASES[text]
    try:
        return Move(text)
    except ValueError:
        choices = ", ".join(m.value for m in MOVES)
        raise InvalidMoveError(f"Unknown move: '{value}'. Choose one of: {choices}") from None
