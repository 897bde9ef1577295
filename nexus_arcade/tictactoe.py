"""Two-player Tic-Tac-Toe with scores kept in a store."""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Mark(Enum):
    O = "O"
    X = "X"


class IllegalMoveError(ValueError):
    """Raised for a placement the board cannot accept."""


WIN_PATTERNS = [
    (0, 1, 2),
    (0, 3, 6),
    (0, 4, 8),
    (1, 4, 7),
    (2, 5, 8),
    (2, 4, 6),
    (3, 4, 5),
    (6, 7, 8),
]

_SCORE_KEYS = {Mark.O: "scoreO", Mark.X: "scoreX"}


def find_winner(cells: list) -> Optional[Mark]:
    """Return the mark holding a complete line, if any."""
    for a, b, c in WIN_PATTERNS:
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return cells[a]
    return None


class TicTacToe:
    """Board, turn order and running score.

    O starts the first game; each play_again() hands the opening move to
    the other mark.  A store is optional; without one scores live only as
    long as the object.
    """

    def __init__(self, store=None):
        self.store = store
        self.cells: list[Optional[Mark]] = [None] * 9
        self.first_turn = Mark.O
        self.turn = Mark.O
        self.winner: Optional[Mark] = None
        self.draw = False
        self.scores = {Mark.O: 0, Mark.X: 0}
        self._load_scores()

    def _load_scores(self):
        if self.store is None:
            return
        for mark, key in _SCORE_KEYS.items():
            saved = self.store.get(key)
            if saved is not None:
                self.scores[mark] = int(saved)

    def _save_scores(self):
        if self.store is None:
            return
        for mark, key in _SCORE_KEYS.items():
            self.store.set(key, self.scores[mark])

    @property
    def game_over(self) -> bool:
        return self.winner is not None or self.draw

    def place(self, index: int) -> Optional[Mark]:
        """Put the current mark on cell `index` (0-8).

        Returns the winner if this move completed a line.
        """
        if self.game_over:
            raise IllegalMoveError("The game is over; start a new one")
        if not 0 <= index < 9:
            raise IllegalMoveError(f"Cell {index} is off the board")
        if self.cells[index] is not None:
            raise IllegalMoveError(f"Cell {index} is already taken")

        mark = self.turn
        self.cells[index] = mark
        self.turn = Mark.X if mark == Mark.O else Mark.O

        self.winner = find_winner(self.cells)
        if self.winner is not None:
            self.scores[self.winner] += 1
            self._save_scores()
            logger.info("%s wins the game", self.winner.value)
        elif all(cell is not None for cell in self.cells):
            self.draw = True
            logger.info("game drawn")
        return self.winner

    def reset_board(self):
        self.cells = [None] * 9
        self.turn = self.first_turn
        self.winner = None
        self.draw = False

    def play_again(self):
        """Start the next game with the other mark moving first."""
        self.first_turn = Mark.X if self.first_turn == Mark.O else Mark.O
        self.reset_board()

    def reset_score(self):
        self.scores = {Mark.O: 0, Mark.X: 0}
        if self.store is not None:
            for key in _SCORE_KEYS.values():
                self.store.remove(key)

    def render(self) -> str:
        rows = []
        for r in range(3):
            row = []
            for c in range(3):
                i = r * 3 + c
                row.append(self.cells[i].value if self.cells[i] else str(i + 1))
            rows.append(" | ".join(row))
        return "\n---------\n".join(rows)
