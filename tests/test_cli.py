import io
import json

from nexus_arcade.config import OpponentConfig, store_path, DEFAULT_STORE_PATH
from nexus_arcade.main import build_parser, cmd_play, cmd_tictactoe, main


def test_list_strategies(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "Always Rock" in out
    assert "Win Stay" in out


def test_play_reads_moves_until_quit(capsys):
    args = build_parser().parse_args(["play", "--seed", "3"])
    cmd_play(args, stream=io.StringIO("r\nlizard\n\npaper\nreset\ns\nquit\nr\n"))
    out = capsys.readouterr().out
    assert "Unknown move: 'lizard'" in out
    assert "Game reset" in out
    assert out.count("CPU: ") == 3
    assert "(1 rounds)" in out


def test_simulate_single_strategy_with_export(tmp_path, capsys):
    out_file = tmp_path / "sim.json"
    code = main(["simulate", "--strategy", "Always Rock", "--rounds", "20",
                 "--seed", "1", "--export", "json", "--output", str(out_file)])
    assert code == 0
    assert "Winner" in capsys.readouterr().out
    assert json.loads(out_file.read_text())["matches"][0]["rounds"] == 20


def test_simulate_unknown_strategy_fails_cleanly(capsys):
    assert main(["simulate", "--strategy", "Lizard"]) == 1
    assert "Unknown strategy" in capsys.readouterr().out


def test_tictactoe_session(tmp_path, capsys):
    store_file = tmp_path / "store.json"
    args = build_parser().parse_args(["tictactoe", "--store", str(store_file)])
    cmd_tictactoe(args, stream=io.StringIO("1\n4\n1\nx\n2\n5\n3\nquit\n"))
    out = capsys.readouterr().out
    assert "already taken" in out
    assert "Not a cell: 'x'" in out
    assert "Winner! O wins the game" in out
    assert json.loads(store_file.read_text()) == {"scoreO": 1, "scoreX": 0}


def test_opponent_config_from_env(monkeypatch):
    monkeypatch.setenv("NEXUS_BOOTSTRAP_ROUNDS", "5")
    monkeypatch.setenv("NEXUS_RANDOM_RATE", "0.1")
    cfg = OpponentConfig.from_env()
    assert cfg.bootstrap_rounds == 5
    assert cfg.random_rate == 0.1
    assert cfg.pattern_threshold == 0.4


def test_store_path_override(monkeypatch, tmp_path):
    monkeypatch.delenv("NEXUS_STORE_PATH", raising=False)
    assert store_path() == DEFAULT_STORE_PATH
    monkeypatch.setenv("NEXUS_STORE_PATH", str(tmp_path / "s.json"))
    assert store_path() == tmp_path / "s.json"


def test_tictactoe_survives_store_corrupted_mid_session(tmp_path, capsys):
    store_file = tmp_path / "store.json"

    def lines():
        yield from ("1\n", "4\n", "2\n", "5\n")
        store_file.write_text("{broken")
        yield from ("3\n", "7\n", "score-reset\n", "quit\n")

    args = build_parser().parse_args(["tictactoe", "--store", str(store_file)])
    cmd_tictactoe(args, stream=lines())
    out = capsys.readouterr().out
    assert "Could not save scores" in out
    assert "Winner! O wins the game" in out
    # Play carried on after the failed save: X opened the next game on cell 7
    assert "X | 8 | 9" in out
    assert "Could not clear saved scores" in out
    assert out.rstrip().endswith("Score  O: 0  X: 0")


def test_tictactoe_unreadable_store_at_start(tmp_path, monkeypatch, capsys):
    store_file = tmp_path / "store.json"
    store_file.write_text("[1]")
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n4\n2\n5\n3\nquit\n"))
    assert main(["tictactoe", "--store", str(store_file)]) == 0
    out = capsys.readouterr().out
    assert "Scores will not be saved" in out
    assert "Winner! O wins the game" in out
    assert store_file.read_text() == "[1]"


def test_invalid_move_is_rejected_before_thinking_pause(monkeypatch, capsys):
    pauses = []
    monkeypatch.setattr("nexus_arcade.main.time.sleep", pauses.append)
    args = build_parser().parse_args(["play", "--seed", "3", "--delay", "0.5"])
    cmd_play(args, stream=io.StringIO("lizard\nr\nquit\n"))
    out = capsys.readouterr().out
    assert pauses == [0.5]
    assert out.count("CPU thinking") == 1
    assert out.index("Unknown move") < out.index("CPU thinking")
