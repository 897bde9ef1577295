"""Tunable settings, read from the environment with built-in defaults."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_STORE_PATH = Path.home() / ".nexus_arcade" / "store.json"


@dataclass(frozen=True)
class OpponentConfig:
    """Thresholds of the CPU decision policy.

    The pattern and streak branches fire when their draw is *above* the
    threshold; the random branch fires when its draw is *below* it.
    """
    bootstrap_rounds: int = 3
    pattern_threshold: float = 0.4
    streak_length: int = 2
    streak_threshold: float = 0.5
    random_rate: float = 0.3
    repetition_window: int = 3
    rotation_window: int = 5

    @classmethod
    def from_env(cls) -> "OpponentConfig":
        return cls(
            bootstrap_rounds=int(os.environ.get('NEXUS_BOOTSTRAP_ROUNDS', '3')),
            pattern_threshold=float(os.environ.get('NEXUS_PATTERN_THRESHOLD', '0.4')),
            streak_length=int(os.environ.get('NEXUS_STREAK_LENGTH', '2')),
            streak_threshold=float(os.environ.get('NEXUS_STREAK_THRESHOLD', '0.5')),
            random_rate=float(os.environ.get('NEXUS_RANDOM_RATE', '0.3')),
            repetition_window=int(os.environ.get('NEXUS_REPETITION_WINDOW', '3')),
            rotation_window=int(os.environ.get('NEXUS_ROTATION_WINDOW', '5')),
        )


def store_path() -> Path:
    """Location of the score store; NEXUS_STORE_PATH overrides the default."""
    override = os.environ.get('NEXUS_STORE_PATH')
    return Path(override) if override else DEFAULT_STORE_PATH
