"""Export simulated match results to JSON or CSV."""

import json
import csv
from pathlib import Path
from .simulation import MatchResult


def export_json(results: list[MatchResult], path: str):
    """Export results to a JSON file."""
    data = {
        "matches": [r.to_dict() for r in results],
    }

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w") as f:
        json.dump(data, f, indent=2)
    print(f"  ✓ Results exported to {out}")


def export_csv(results: list[MatchResult], path: str):
    """Export one row per match to a CSV file."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "strategy", "rounds", "human_wins", "cpu_wins", "draws",
        "human_win_pct", "cpu_win_pct", "draw_pct",
    ]

    with open(out, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        writer.writeheader()
        for r in results:
            writer.writerow(r.to_dict())
    print(f"  ✓ Results exported to {out}")
