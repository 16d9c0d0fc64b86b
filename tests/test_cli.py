import io
import random
import sys

import pytest

from tictac_neat.cli import (
    DynamicNeatAgent,
    RandomAgent,
    describe_result,
    parse_yes_no,
    play_loop,
    string_to_player_move,
)
from tictac_neat.game import (
    Agent,
    CellLocation,
    Disqualified,
    GameBoard,
    Player,
    PlayingGameState,
    Tied,
    Won,
    new_game,
)


class FirstAvailableAgent(Agent):
    def select_move(self, state):
        return next(state.gameboard.available_moves())


class RecordingPhenome:
    def __init__(self):
        self.seen = []

    def activate(self, inputs):
        self.seen.append(list(inputs))
        return [1.0 if i == 4 else 0.0 for i in range(9)]


@pytest.mark.parametrize(
    "key, loc",
    [
        ("q", CellLocation.TOP_LFT),
        ("w", CellLocation.TOP_MID),
        ("e", CellLocation.TOP_RGT),
        ("a", CellLocation.MID_LFT),
        ("s", CellLocation.MID_MID),
        ("d", CellLocation.MID_RGT),
        ("z", CellLocation.BOT_LFT),
        ("x", CellLocation.BOT_MID),
        ("c", CellLocation.BOT_RGT),
        ("Q", CellLocation.TOP_LFT),
    ],
)
def test_string_to_player_move(key, loc):
    assert string_to_player_move(key) is loc


@pytest.mark.parametrize("text", ["", "f", "qq", " q"])
def test_string_to_player_move_rejects(text):
    assert string_to_player_move(text) is None


@pytest.mark.parametrize(
    "text, expected",
    [("yes", True), ("Y", True), ("no", False), ("N", False), ("maybe", None), ("", None)],
)
def test_parse_yes_no(text, expected):
    assert parse_yes_no(text) is expected


def test_describe_result_messages():
    assert describe_result(Tied(), Player.CROSS) == "No winners - game is tied!"
    assert describe_result(Won(Player.CROSS), Player.CROSS) == "User (you) have won!"
    assert describe_result(Won(Player.CIRCLE), Player.CROSS) == "AI has won!"
    user_dq = describe_result(Disqualified(Player.CIRCLE, CellLocation.MID_MID), Player.CIRCLE)
    ai_dq = describe_result(Disqualified(Player.CROSS, CellLocation.MID_MID), Player.CIRCLE)
    assert user_dq.startswith("User (you) have tried to play an illegal move")
    assert ai_dq.startswith("AI tried to play an illegal move")
    assert "MID_MID" in user_dq and "MID_MID" in ai_dq


def test_random_agent_picks_only_empty_cell():
    cells = [Player.CROSS] * 9
    cells[5] = None
    state = PlayingGameState(GameBoard(tuple(cells)), Player.CIRCLE)
    assert RandomAgent(random.Random(1)).select_move(state) is CellLocation.MID_RGT


def test_random_agent_always_legal():
    agent = RandomAgent(random.Random(3))
    state = new_game(Player.CROSS).apply_move(CellLocation.TOP_LFT)
    for _ in range(20):
        assert state.gameboard.is_cell_empty(agent.select_move(state))


def test_random_agent_raises_on_full_board():
    state = PlayingGameState(GameBoard((Player.CROSS,) * 9), Player.CIRCLE)
    with pytest.raises(ValueError):
        RandomAgent().select_move(state)


def test_dynamic_agent_uses_mover_perspective():
    phenome = RecordingPhenome()
    agent = DynamicNeatAgent(phenome)
    state = new_game(Player.CROSS).apply_move(CellLocation.TOP_LFT)
    assert agent.select_move(state) is CellLocation.MID_MID
    # Each move uses a fresh copy, so the original sees nothing.
    assert phenome.seen == []


def test_play_loop_user_wins(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("maybe\ny\ne\ns\nz\nn\n"))
    play_loop(FirstAvailableAgent())
    out = capsys.readouterr().out
    assert "You did not enter a valid response. Try again." in out
    assert "User (you) have won!" in out
    assert "Do you want to play again?" in out


def test_play_loop_user_disqualified(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("y\ns\nq\nn\n"))
    play_loop(FirstAvailableAgent())
    out = capsys.readouterr().out
    assert "User (you) have tried to play an illegal move (TOP_LFT)" in out


def test_play_loop_rejects_bad_move_key(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("y\nk\ne\ns\nz\nno\n"))
    play_loop(FirstAvailableAgent())
    out = capsys.readouterr().out
    assert out.count("Select move from qweasdzxc") == 4
    assert "User (you) have won!" in out


def test_play_loop_raises_on_closed_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(EOFError):
        play_loop(FirstAvailableAgent())