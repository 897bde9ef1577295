"""CLI entry point for the NEXUS arcade games."""

import argparse
import logging
import random
import sys
import time

from .config import OpponentConfig, store_path
from .engine import InvalidMoveError, parse_move
from .export import export_json, export_csv
from .opponent import NexusOpponent
from .session import GameSession
from .simulation import ALL_STRATEGY_CLASSES, get_strategy_by_name, run_match, run_all
from .stats import print_match_summary, print_results_table
from .store import JsonStore, StoreError
from .tictactoe import TicTacToe, IllegalMoveError

logger = logging.getLogger(__name__)


def list_strategies():
    """Print all scripted strategy names."""
    print("\nAvailable Strategies:")
    print("-" * 40)
    for i, cls in enumerate(ALL_STRATEGY_CLASSES, 1):
        print(f"  {i:>2d}. {cls.name}")
    print()


def cmd_play(args, stream=None):
    """Play Rock-Paper-Scissors against the CPU, one move per input line."""
    stream = stream or sys.stdin
    rng = random.Random(args.seed)
    session = GameSession(NexusOpponent(random_source=rng.random, config=OpponentConfig.from_env()))

    print("\n✊ Rock-Paper-Scissors vs NEXUS")
    print("  Moves: r / p / s (or rock / paper / scissors), 'reset', 'quit'")
    print("  Make your move to begin")

    for line in stream:
        command = line.strip().lower()
        if not command:
            continue
        if command in ("q", "quit", "exit"):
            break
        if command == "reset":
            session.reset()
            print("  Game reset. Make your move to begin")
            continue

        try:
            human = parse_move(command)
        except InvalidMoveError as e:
            print(f"  ✗ {e}")
            continue

        if args.delay:
            print("  CPU thinking...")
            time.sleep(args.delay)
        rnd = session.play(human)

        print(f"  You: {rnd.human.value:<9s} CPU: {rnd.cpu.value:<9s} {rnd.describe()}")
        print(f"  Score  You {session.player_score} - {session.cpu_score} CPU  |  {session.streak_message()}")

    print(f"\n  Final score  You {session.player_score} - {session.cpu_score} CPU "
          f"({session.round_index} rounds)")


def cmd_simulate(args):
    """Run scripted strategies against the CPU."""
    config = OpponentConfig.from_env()
    if args.strategy.lower() == "all":
        print(f"\n🤖 All strategies vs CPU  |  {args.rounds} rounds"
              + (f"  |  seed={args.seed}" if args.seed is not None else ""))
        results = run_all(rounds=args.rounds, seed=args.seed, config=config)
        print_results_table(results)
    else:
        strategy = get_strategy_by_name(args.strategy)
        print(f"\n⚔️  {strategy.name} vs CPU  |  {args.rounds} rounds"
              + (f"  |  seed={args.seed}" if args.seed is not None else ""))
        results = [run_match(strategy, rounds=args.rounds, seed=args.seed, config=config)]
        print_match_summary(results[0])

    if args.export and args.output:
        _export(args, results)


def cmd_tictactoe(args, stream=None):
    """Two local players take turns entering cells 1-9."""
    stream = stream or sys.stdin
    path = args.store or store_path()
    try:
        game = TicTacToe(store=JsonStore(path))
    except StoreError as e:
        logger.warning("score store unusable, playing without it: %s", e)
        print(f"  ✗ {e}. Scores will not be saved this session.")
        game = TicTacToe()

    print("\n⭕ Tic-Tac-Toe  ❌")
    print("  Cells 1-9, 'reset', 'score-reset', 'quit'")
    _print_board(game)

    for line in stream:
        command = line.strip().lower()
        if not command:
            continue
        if command in ("q", "quit", "exit"):
            break
        if command == "reset":
            game.reset_board()
            _print_board(game)
            continue
        if command == "score-reset":
            try:
                game.reset_score()
            except StoreError as e:
                print(f"  ✗ Could not clear saved scores: {e}")
            _print_scores(game)
            continue

        try:
            game.place(int(command) - 1)
        except ValueError as e:
            # IllegalMoveError is a ValueError, as is a non-numeric cell
            message = str(e) if isinstance(e, IllegalMoveError) else f"Not a cell: '{command}'"
            print(f"  ✗ {message}")
            continue
        except StoreError as e:
            # The move stands; only saving the score failed
            print(f"  ✗ Could not save scores: {e}")

        _print_board(game)
        if game.game_over:
            if game.winner is not None:
                print(f"  🏆 Winner! {game.winner.value} wins the game")
            else:
                print("  🤝 Draw")
            _print_scores(game)
            game.play_again()
            _print_board(game)


def _print_board(game):
    print()
    print(game.render())
    if not game.game_over:
        print(f"\n  Turn: {game.turn.value}")


def _print_scores(game):
    print("  Score  " + "  ".join(f"{mark.value}: {score}" for mark, score in game.scores.items()))


def _export(args, results):
    """Handle export based on CLI args."""
    fmt = args.export.lower()
    if fmt == "json":
        export_json(results, args.output)
    elif fmt == "csv":
        export_csv(results, args.output)
    else:
        print(f"  ✗ Unknown export format: {fmt}. Use 'json' or 'csv'.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nexus_arcade",
        description="🎮 NEXUS arcade: Rock-Paper-Scissors vs CPU and Tic-Tac-Toe",
    )
    parser.add_argument("--list", action="store_true", help="List the scripted strategies")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command")

    # play
    play = subparsers.add_parser("play", help="Play Rock-Paper-Scissors against the CPU")
    play.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    play.add_argument("--delay", type=float, default=0.0, help="CPU thinking pause in seconds")

    # simulate
    sim = subparsers.add_parser("simulate", help="Run scripted strategies against the CPU")
    sim.add_argument("--strategy", default="all", help="Strategy name, or 'all' (default)")
    sim.add_argument("--rounds", type=int, default=100, help="Number of rounds (default: 100)")
    sim.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    sim.add_argument("--export", choices=["json", "csv"], help="Export format")
    sim.add_argument("--output", help="Export file path")

    # tictactoe
    ttt = subparsers.add_parser("tictactoe", help="Two-player Tic-Tac-Toe")
    ttt.add_argument("--store", default=None, help="Score store file (default: NEXUS_STORE_PATH)")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        list_strategies()
        return 0

    try:
        if args.command == "play":
            cmd_play(args)
        elif args.command == "simulate":
            cmd_simulate(args)
        elif args.command == "tictactoe":
            cmd_tictactoe(args)
        else:
            parser.print_help()
    except (ValueError, StoreError) as e:
        print(f"  ✗ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
