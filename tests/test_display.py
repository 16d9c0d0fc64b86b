from tictac_neat.display import board_to_string, cell_to_char
from tictac_neat.game import CellLocation, GameBoard, Player


def test_cell_to_char_values():
    assert cell_to_char(Player.CROSS) == "X"
    assert cell_to_char(Player.CIRCLE) == "O"
    assert cell_to_char(None) == "_"


def test_empty_board_string():
    assert board_to_string(GameBoard.empty()) == "_ _ _\n_ _ _\n_ _ _"


def test_board_string_shape():
    board = GameBoard.empty().with_cell(CellLocation.MID_MID, Player.CROSS)
    rows = board_to_string(board).split("\n")
    assert len(rows) == 3
    assert all(len(row.split(" ")) == 3 for row in rows)


def test_board_string_places_pieces_in_order():
    board = (
        GameBoard.empty()
        .with_cell(CellLocation.TOP_LFT, Player.CROSS)
        .with_cell(CellLocation.BOT_RGT, Player.CIRCLE)
    )
    symbols = board_to_string(board).split()
    assert symbols[0] == "X"
    assert symbols[8] == "O"
    assert symbols.count("_") == 7
    assert [cell_to_char(board.get_cell(loc)) for loc in CellLocation] == symbols