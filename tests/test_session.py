import pytest

from nexus_arcade.engine import Move, Outcome, InvalidMoveError
from nexus_arcade.opponent import NexusOpponent
from nexus_arcade.session import GameSession, Round

R, P, S = Move.ROCK, Move.PAPER, Move.SCISSORS


def make_session(rng, **kwargs):
    return GameSession(NexusOpponent(random_source=rng), **kwargs)


def test_play_updates_scoreboard(scripted):
    # CPU plays Scissors, Scissors, Paper
    session = make_session(scripted(0.99, 0.99, 0.5))
    first = session.play("r")
    assert first == Round(human=R, cpu=S, outcome=Outcome.WIN)
    session.play("rock")
    third = session.play(R)
    assert third.outcome == Outcome.LOSE

    assert session.player_score == 2
    assert session.cpu_score == 1
    assert session.cpu_moves == [S, S, P]
    assert session.last_result == Outcome.LOSE
    assert session.round_index == 3


def test_draw_changes_no_score(scripted):
    session = make_session(scripted(0.0))
    rnd = session.play("rock")
    assert rnd.outcome == Outcome.DRAW
    assert (session.player_score, session.cpu_score) == (0, 0)
    assert rnd.describe() == "It's a draw! Both chose rock"


def test_invalid_move_is_rejected_before_the_engine(scripted):
    rng = scripted()
    session = make_session(rng)
    with pytest.raises(InvalidMoveError):
        session.play("lizard")
    assert session.round_index == 0
    assert rng.calls == 0


def test_streak_message(scripted):
    session = make_session(scripted(0.99, 0.99, 0.5))
    assert session.streak_message() == "Current streak: 0 CPU wins"
    session.play("r")
    assert session.streak_message() == "Current streak: 1 Player win"
    session.play("r")
    assert session.streak_message() == "Current streak: 2 Player wins"
    session.play("r")
    assert session.streak_message() == "Current streak: 1 CPU win"


def test_describe_messages():
    assert Round(R, S, Outcome.WIN).describe() == "You win! Rock beats scissors"
    assert Round(R, P, Outcome.LOSE).describe() == "You lose! Paper beats rock"


def test_on_round_callback(scripted):
    seen = []
    session = make_session(scripted(0.5), on_round=seen.append)
    rnd = session.play("s")
    assert seen == [rnd]


def test_reset_clears_session_and_engine(scripted):
    session = make_session(scripted(0.99, 0.99, 0.0))
    session.play("r")
    session.play("r")
    session.reset()
    assert (session.player_score, session.cpu_score) == (0, 0)
    assert session.cpu_moves == []
    assert session.last_result is None
    assert session.round_index == 0
    assert session.streaks.human == 0
    assert session.play("p").cpu == R
