import pytest

from tictac_neat.game import (
    Agent,
    CellLocation,
    CellOccupiedError,
    Disqualified,
    GameBoard,
    GameOver,
    Player,
    PlayingGameState,
    Tied,
    Won,
    new_game,
    play_game,
)


class FirstAvailableAgent(Agent):
    def select_move(self, state):
        return next(state.gameboard.available_moves())


class ConstantAgent(Agent):
    def __init__(self, location):
        self.location = location

    def select_move(self, state):
        return self.location


def _play(state, location):
    nxt = state.apply_move(location)
    assert isinstance(nxt, PlayingGameState)
    return nxt


def test_new_game_is_empty():
    state = new_game(Player.CROSS)
    assert state.player_turn is Player.CROSS
    assert all(cell is None for cell in state.gameboard.cells)


def test_apply_move_switches_player():
    state = new_game(Player.CROSS)
    nxt = state.apply_move(CellLocation.MID_MID)
    assert isinstance(nxt, PlayingGameState)
    assert nxt.player_turn is Player.CIRCLE
    assert nxt.gameboard.get_cell(CellLocation.MID_MID) is Player.CROSS


def test_apply_move_to_occupied_cell_raises():
    state = _play(new_game(Player.CROSS), CellLocation.MID_MID)
    with pytest.raises(CellOccupiedError) as info:
        state.apply_move(CellLocation.MID_MID)
    assert info.value.location is CellLocation.MID_MID


def test_apply_move_or_disqualify_on_occupied():
    state = _play(new_game(Player.CROSS), CellLocation.MID_MID)
    result = state.apply_move_or_disqualify(CellLocation.MID_MID)
    assert isinstance(result, GameOver)
    assert result.result == Disqualified(Player.CIRCLE, CellLocation.MID_MID)
    assert result.board == state.gameboard


def test_detect_win():
    state = new_game(Player.CROSS)
    state = _play(state, CellLocation.TOP_LFT)
    state = _play(state, CellLocation.MID_LFT)
    state = _play(state, CellLocation.TOP_MID)
    state = _play(state, CellLocation.MID_MID)
    result = state.apply_move(CellLocation.TOP_RGT)
    assert isinstance(result, GameOver)
    assert result.result == Won(Player.CROSS)


def test_detect_tie():
    moves = [
        CellLocation.TOP_LFT,
        CellLocation.TOP_MID,
        CellLocation.TOP_RGT,
        CellLocation.MID_RGT,
        CellLocation.MID_LFT,
        CellLocation.BOT_LFT,
        CellLocation.MID_MID,
        CellLocation.BOT_RGT,
        CellLocation.BOT_MID,
    ]
    state = new_game(Player.CROSS)
    for loc in moves[:-1]:
        state = _play(state, loc)
    result = state.apply_move(moves[-1])
    assert isinstance(result, GameOver)
    assert result.result == Tied()
    assert result.board.is_full()


def test_cell_location_from_index_roundtrip():
    for i in range(9):
        assert int(CellLocation.from_index(i)) == i


@pytest.mark.parametrize("bad", [9, 100, -1])
def test_cell_location_from_index_out_of_range(bad):
    with pytest.raises(ValueError):
        CellLocation.from_index(bad)


def test_player_opponent():
    assert Player.CROSS.opponent() is Player.CIRCLE
    assert Player.CIRCLE.opponent() is Player.CROSS


def test_cell_location_all_returns_nine():
    locations = CellLocation.all()
    assert len(locations) == 9
    assert [int(loc) for loc in locations] == list(range(9))


def test_available_moves_decreases_as_game_progresses():
    state = new_game(Player.CROSS)
    assert len(list(state.gameboard.available_moves())) == 9
    state = _play(state, CellLocation.MID_MID)
    moves = list(state.gameboard.available_moves())
    assert len(moves) == 8
    assert CellLocation.MID_MID not in moves


def test_diagonal_winner():
    board = GameBoard.empty()
    for loc in (CellLocation.BOT_LFT, CellLocation.MID_MID, CellLocation.TOP_RGT):
        board = board.with_cell(loc, Player.CIRCLE)
    assert board.winner() is Player.CIRCLE
    assert board.game_over_state() == Won(Player.CIRCLE)


def test_empty_board_has_no_result():
    board = GameBoard.empty()
    assert board.winner() is None
    assert board.game_over_state() is None
    assert not board.is_full()


def test_with_cell_leaves_original_unchanged():
    board = GameBoard.empty()
    updated = board.with_cell(CellLocation.TOP_LFT, Player.CROSS)
    assert board.is_cell_empty(CellLocation.TOP_LFT)
    assert not updated.is_cell_empty(CellLocation.TOP_LFT)


def test_board_requires_nine_cells():
    with pytest.raises(ValueError):
        GameBoard((None,) * 8)


def test_play_game_first_available_cross_wins():
    result = play_game(FirstAvailableAgent(), FirstAvailableAgent(), new_game(Player.CROSS))
    # Cross fills 0, 2, 4, 6 -> completes the anti-diagonal.
    assert result.result == Won(Player.CROSS)


def test_play_game_disqualifies_repeated_move():
    agent = ConstantAgent(CellLocation.TOP_LFT)
    result = play_game(agent, agent, new_game(Player.CROSS))
    assert result.result == Disqualified(Player.CIRCLE, CellLocation.TOP_LFT)
    assert result.board.get_cell(CellLocation.TOP_LFT) is Player.CROSS