"""Scripted human players and simulated matches against the CPU."""

import random
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from .config import OpponentConfig
from .engine import Move, MOVES, BEATS, Outcome, determine_outcome
from .history import HistoryView
from .opponent import NexusOpponent


class Strategy(ABC):
    """Base class for scripted human players."""

    def __init__(self):
        self.rng: random.Random = random.Random()
        self.reset()

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def choose(self, round_num: int, my_history: list[Move], cpu_history: list[Move]) -> Move:
        ...

    def reset(self):
        """Reset any internal state between matches."""
        pass

    def __repr__(self):
        return f"<{self.name}>"


class AlwaysRock(Strategy):
    """Always plays Rock. The repetition detector should pick this up fast."""
    name = "Always Rock"

    def choose(self, round_num, my_history, cpu_history):
        return Move.ROCK


class Cycle(Strategy):
    """Rock -> Paper -> Scissors, over and over."""
    name = "Cycle"

    def choose(self, round_num, my_history, cpu_history):
        return MOVES[round_num % 3]


class PureRandom(Strategy):
    """Uniformly random. Nothing to exploit."""
    name = "Pure Random"

    def choose(self, round_num, my_history, cpu_history):
        return self.rng.choice(MOVES)


class Mirror(Strategy):
    """Copies the CPU's previous move; opens with Rock."""
    name = "Mirror"

    def choose(self, round_num, my_history, cpu_history):
        if not cpu_history:
            return Move.ROCK
        return cpu_history[-1]


class WinStay(Strategy):
    """Repeats a winning move, otherwise picks a random one."""
    name = "Win Stay"

    def choose(self, round_num, my_history, cpu_history):
        if my_history and BEATS[my_history[-1]] == cpu_history[-1]:
            return my_history[-1]
        return self.rng.choice(MOVES)


ALL_STRATEGY_CLASSES = [AlwaysRock, Cycle, PureRandom, Mirror, WinStay]


def get_all_strategies() -> list[Strategy]:
    return [cls() for cls in ALL_STRATEGY_CLASSES]


def get_strategy_by_name(name: str) -> Strategy:
    """Get a single strategy instance by name (case-insensitive)."""
    name_lower = name.lower()
    for cls in ALL_STRATEGY_CLASSES:
        if cls.name.lower() == name_lower:
            return cls()
    available = ", ".join(cls.name for cls in ALL_STRATEGY_CLASSES)
    raise ValueError(f"Unknown strategy: '{name}'. Available: {available}")


@dataclass
class MatchResult:
    """Result of a scripted player's match against the CPU."""
    strategy_name: str
    rounds: int
    human_wins: int = 0
    cpu_wins: int = 0
    draws: int = 0
    human_moves: list = field(default_factory=list)
    cpu_moves: list = field(default_factory=list)

    @property
    def human_win_pct(self) -> float:
        return (self.human_wins / self.rounds * 100) if self.rounds else 0.0

    @property
    def cpu_win_pct(self) -> float:
        return (self.cpu_wins / self.rounds * 100) if self.rounds else 0.0

    @property
    def draw_pct(self) -> float:
        return (self.draws / self.rounds * 100) if self.rounds else 0.0

    @property
    def human_move_distribution(self) -> dict[str, int]:
        return dict(Counter(m.value for m in self.human_moves))

    @property
    def cpu_move_distribution(self) -> dict[str, int]:
        return dict(Counter(m.value for m in self.cpu_moves))

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy_name,
            "rounds": self.rounds,
            "human_wins": self.human_wins,
            "cpu_wins": self.cpu_wins,
            "draws": self.draws,
            "human_win_pct": round(self.human_win_pct, 2),
            "cpu_win_pct": round(self.cpu_win_pct, 2),
            "draw_pct": round(self.draw_pct, 2),
            "human_move_distribution": self.human_move_distribution,
            "cpu_move_distribution": self.cpu_move_distribution,
        }


def run_match(
    strategy: Strategy,
    rounds: int = 100,
    seed: Optional[int] = None,
    config: Optional[OpponentConfig] = None,
) -> MatchResult:
    """Play `strategy` against a fresh CPU opponent for `rounds` rounds.

    The strategy and the CPU each get their own RNG derived from the
    master seed, so a fixed seed replays the same match.
    """
    master_rng = random.Random(seed)
    strategy.rng = random.Random(master_rng.randint(0, 2**31))
    cpu_rng = random.Random(master_rng.randint(0, 2**31))
    strategy.reset()
    cpu = NexusOpponent(random_source=cpu_rng.random, config=config)

    result = MatchResult(strategy_name=strategy.name, rounds=rounds)
    human_history = result.human_moves
    cpu_history = result.cpu_moves

    # Read-only views handed to the strategy; they see each new append
    human_view = HistoryView(human_history)
    cpu_view = HistoryView(cpu_history)

    for round_num in range(rounds):
        human_move = strategy.choose(round_num, human_view, cpu_view)
        cpu_move = cpu.decide(human_move)

        outcome = determine_outcome(human_move, cpu_move)
        if outcome == Outcome.WIN:
            result.human_wins += 1
        elif outcome == Outcome.LOSE:
            result.cpu_wins += 1
        else:
            result.draws += 1

        human_history.append(human_move)
        cpu_history.append(cpu_move)

    return result


def run_all(
    rounds: int = 100,
    seed: Optional[int] = None,
    config: Optional[OpponentConfig] = None,
) -> list[MatchResult]:
    """Run every scripted strategy against the CPU."""
    results = []
    for i, strategy in enumerate(get_all_strategies()):
        match_seed = (seed * 1000 + i) if seed is not None else None
        results.append(run_match(strategy, rounds=rounds, seed=match_seed, config=config))
    return results
