"""Append-only log of the human player's moves."""

from collections.abc import Sequence

from .engine import Move


class HistoryView(Sequence):
    """Live, read-only sequence over a list of moves.

    Shares the list instead of copying it, so the view follows every later
    append. Sequence supplies ``in``, ``index``, ``count`` and reversal.
    """

    def __init__(self, moves: list):
        self._moves = moves

    def __getitem__(self, key):
        return self._moves[key]

    def __len__(self):
        return len(self._moves)

    def __iter__(self):
        return iter(self._moves)

    def __repr__(self):
        return f"HistoryView({self._moves!r})"


class HistoryLog:
    """Moves made by the human, oldest first.

    Moves are only ever appended; the whole log is cleared on reset.
    """

    def __init__(self):
        self._moves: list[Move] = []
        self.view = HistoryView(self._moves)

    def record(self, move: Move):
        self._moves.append(move)

    def last_n(self, n: int) -> list[Move]:
        """Return the most recent `n` moves in chronological order."""
        if n <= 0:
            return []
        return self._moves[-n:]

    def snapshot(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def clear(self):
        # In place, so the view stays attached
        self._moves.clear()

    def __len__(self):
        return len(self._moves)

    def __iter__(self):
        return iter(self._moves)

    def __repr__(self):
        return f"HistoryLog({self._moves!r})"
