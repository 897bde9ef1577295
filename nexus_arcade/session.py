"""One Rock-Paper-Scissors session: scoreboard around the CPU opponent."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .engine import Move, Outcome, parse_move
from .opponent import NexusOpponent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Round:
    """A single settled round."""
    human: Move
    cpu: Move
    outcome: Outcome

    def describe(self) -> str:
        if self.outcome == Outcome.WIN:
            return f"You win! {self.human.value.capitalize()} beats {self.cpu.value}"
        if self.outcome == Outcome.LOSE:
            return f"You lose! {self.cpu.value.capitalize()} beats {self.human.value}"
        return f"It's a draw! Both chose {self.human.value}"


class GameSession:
    """Scores, streaks and move log for a human playing the CPU.

    Every session owns its own opponent, so sessions never share state.
    """

    def __init__(
        self,
        opponent: Optional[NexusOpponent] = None,
        on_round: Optional[Callable[[Round], None]] = None,
    ):
        self.opponent = opponent or NexusOpponent()
        self.on_round = on_round
        self.player_score = 0
        self.cpu_score = 0
        self.cpu_moves: list[Move] = []
        self.last_result: Optional[Outcome] = None

    @property
    def round_index(self) -> int:
        return self.opponent.round_index

    @property
    def streaks(self):
        return self.opponent.streaks

    def play(self, move) -> Round:
        """Play one round. `move` may be a Move or text such as "rock" or "r"."""
        human = parse_move(move)
        cpu = self.opponent.decide(human)
        rnd = Round(human=human, cpu=cpu, outcome=self.opponent.last_outcome)

        self.cpu_moves.append(cpu)
        self.last_result = rnd.outcome
        if rnd.outcome == Outcome.WIN:
            self.player_score += 1
        elif rnd.outcome == Outcome.LOSE:
            self.cpu_score += 1

        logger.info("round %d: %s vs %s -> %s",
                    self.round_index, human.value, cpu.value, rnd.outcome.value)
        if self.on_round:
            self.on_round(rnd)
        return rnd

    def streak_message(self) -> str:
        """Current streak banner, e.g. 'Current streak: 2 Player wins'."""
        if self.streaks.human > 0:
            streak, side = self.streaks.human, "Player"
        else:
            streak, side = self.streaks.opponent, "CPU"
        return f"Current streak: {streak} {side} {'win' if streak == 1 else 'wins'}"

    def reset(self):
        self.player_score = 0
        self.cpu_score = 0
        self.cpu_moves = []
        self.last_result = None
        self.opponent.reset()
