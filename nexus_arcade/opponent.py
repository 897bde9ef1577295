"""The CPU opponent: pattern-reading decision engine."""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from .analysis import detect_pattern, most_frequent
from .config import OpponentConfig
from .engine import Move, MOVES, Outcome, InvalidMoveError, counters, determine_outcome
from .history import HistoryLog

logger = logging.getLogger(__name__)

# Produces uniform floats in [0, 1)
RandomSource = Callable[[], float]


@dataclass
class SessionStreaks:
    """Consecutive round wins for each side."""
    human: int = 0
    opponent: int = 0

    def update(self, outcome: Outcome):
        if outcome == Outcome.WIN:
            self.human += 1
            self.opponent = 0
        elif outcome == Outcome.LOSE:
            self.opponent += 1
            self.human = 0
        else:
            self.human = 0
            self.opponent = 0

    def reset(self):
        self.human = 0
        self.opponent = 0


class NexusOpponent:
    """Heuristic opponent that reads the human's habits.

    Plays randomly during the bootstrap rounds, then on each call tries, in
    order: countering a detected repeat or rotation, breaking a human win
    streak, a random throw, and finally countering the human's favourite
    move.  Each branch is gated by a fresh draw from the random source, so
    tests can pin the exact branch by feeding a fixed sequence of draws.

    **Pattern**: last 3 identical, or a forward R -> P -> S rotation
    **Frequency**: whole-session move counts
    """
    name = "Nexus"

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        config: Optional[OpponentConfig] = None,
    ):
        self._random = random_source or random.random
        self.config = config or OpponentConfig()
        self.history = HistoryLog()
        self.streaks = SessionStreaks()
        self.round_index = 0
        self.last_outcome: Optional[Outcome] = None

    def reset(self):
        """Forget the session and return to the bootstrap phase."""
        self.history.clear()
        self.streaks.reset()
        self.round_index = 0
        self.last_outcome = None

    def decide(self, human_move: Move) -> Move:
        """Choose the CPU's answer to `human_move` and settle the round.

        The human move is recorded as part of the call. Pattern detection
        sees the history from before this move; the frequency fallback sees
        it including this move.
        """
        if not isinstance(human_move, Move):
            raise InvalidMoveError(f"Not a move: {human_move!r}")

        # Only the detector windows matter to pattern analysis
        previous = self.history.last_n(max(self.config.repetition_window, self.config.rotation_window))
        self.history.record(human_move)

        cpu_move = self._choose(human_move, previous)

        outcome = determine_outcome(human_move, cpu_move)
        self.streaks.update(outcome)
        self.last_outcome = outcome
        self.round_index += 1
        return cpu_move

    def _choose(self, human_move: Move, previous: list) -> Move:
        cfg = self.config

        if self.round_index < cfg.bootstrap_rounds:
            logger.debug("round %d: bootstrap, random move", self.round_index)
            return self._random_move()

        pattern = detect_pattern(previous, cfg.repetition_window, cfg.rotation_window)
        if pattern is not None and self._random() > cfg.pattern_threshold:
            logger.debug("round %d: countering pattern %s", self.round_index, pattern.value)
            return counters(pattern)

        if self.streaks.human >= cfg.streak_length and self._random() > cfg.streak_threshold:
            logger.debug("round %d: breaking human streak of %d", self.round_index, self.streaks.human)
            return counters(human_move)

        if self._random() < cfg.random_rate:
            logger.debug("round %d: random move", self.round_index)
            return self._random_move()

        favourite = most_frequent(self.history.view)
        if favourite is None:
            return self._random_move()
        logger.debug("round %d: countering most frequent %s", self.round_index, favourite.value)
        return counters(favourite)

    def _random_move(self) -> Move:
        return MOVES[int(self._random() * 3)]

    def __repr__(self):
        return f"<{self.name} round={self.round_index}>"
