"""Summaries and pretty-printing for simulated matches."""

from .simulation import MatchResult


def print_match_summary(result: MatchResult):
    """Print a detailed summary of a single match."""
    print("=" * 60)
    print(f"  {result.strategy_name}  vs  CPU")
    print(f"  Rounds: {result.rounds}")
    print("=" * 60)
    print(f"  {'':20s} {'Human':>10s} {'CPU':>10s}")
    print(f"  {'Wins':20s} {result.human_wins:>10d} {result.cpu_wins:>10d}")
    print(f"  {'Draws':20s} {result.draws:>10d} {result.draws:>10d}")
    print(f"  {'Win %':20s} {result.human_win_pct:>9.1f}% {result.cpu_win_pct:>9.1f}%")
    print()
    print(f"  Human move distribution: {result.human_move_distribution}")
    print(f"  CPU move distribution:   {result.cpu_move_distribution}")

    if result.human_wins > result.cpu_wins:
        winner = result.strategy_name
    elif result.cpu_wins > result.human_wins:
        winner = "CPU"
    else:
        winner = "DRAW"
    print(f"\n  ★ Winner: {winner}")
    print("=" * 60)


def print_results_table(results: list[MatchResult]):
    """Print one line per strategy, weakest (for the human) first."""
    ranked = sorted(results, key=lambda r: (r.human_win_pct, -r.cpu_win_pct))
    print()
    print("=" * 72)
    print(f"  {'Strategy':<22s} {'Rounds':>7s} {'HumW':>6s} {'CpuW':>6s} {'Draw':>6s} "
          f"{'Hum%':>7s} {'Cpu%':>7s}")
    print("-" * 72)
    for r in ranked:
        print(f"  {r.strategy_name:<22s} {r.rounds:>7d} {r.human_wins:>6d} {r.cpu_wins:>6d} "
              f"{r.draws:>6d} {r.human_win_pct:>6.1f}% {r.cpu_win_pct:>6.1f}%")
    print("=" * 72)
    print()
