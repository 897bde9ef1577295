"""Pattern and frequency analysis over a human move history.

All functions take any indexable sequence of Moves (a list, tuple or a
HistoryView) and never modify it.
"""

from collections import Counter
from typing import Optional, Sequence

from .engine import Move, MOVES

REPETITION_WINDOW = 3
ROTATION_WINDOW = 5

_CYCLE_INDEX = {move: i for i, move in enumerate(MOVES)}


def detect_repetition(history: Sequence[Move], window: int = REPETITION_WINDOW) -> Optional[Move]:
    """Return the repeated move if the last `window` moves are identical."""
    if len(history) < window:
        return None
    recent = history[-window:]
    first = recent[0]
    if all(m == first for m in recent):
        return first
    return None


def detect_rotation(history: Sequence[Move], window: int = ROTATION_WINDOW) -> Optional[Move]:
    """Predict the next move of a forward R -> P -> S rotation.

    Looks at up to the last `window` moves. Every consecutive pair must step
    exactly one place forward in the cycle; a single break means no pattern.
    """
    recent = history[-window:]
    if len(recent) < 3:
        return None

    for prev, nxt in zip(recent, recent[1:]):
        if (_CYCLE_INDEX[prev] + 1) % 3 != _CYCLE_INDEX[nxt]:
            return None

    return MOVES[(_CYCLE_INDEX[recent[-1]] + 1) % 3]


def detect_pattern(
    history: Sequence[Move],
    repetition_window: int = REPETITION_WINDOW,
    rotation_window: int = ROTATION_WINDOW,
) -> Optional[Move]:
    """Return the move the human is expected to play next, if any.

    Repetition takes precedence; rotation is only checked when the last
    moves are not all the same.
    """
    repeated = detect_repetition(history, repetition_window)
    if repeated is not None:
        return repeated
    return detect_rotation(history, rotation_window)


def most_frequent(history: Sequence[Move]) -> Optional[Move]:
    """Most common move across the whole history, or None if empty.

    Ties go to the move that first appeared earliest: Counter keeps
    insertion order and most_common() is stable.
    """
    if not history:
        return None
    return Counter(history).most_common(1)[0][0]
