"""Tic-tac-toe rules: board, moves, game results and a simple game driver."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union


class Player(enum.Enum):
    """One of the two sides of a game."""

    CROSS = "cross"
    CIRCLE = "circle"

    def opponent(self) -> Player:
        """Return the other player."""
        return Player.CIRCLE if self is Player.CROSS else Player.CROSS


class CellLocation(enum.IntEnum):
    """The nine board squares, numbered row by row from the top left."""

    TOP_LFT = 0
    TOP_MID = 1
    TOP_RGT = 2
    MID_LFT = 3
    MID_MID = 4
    MID_RGT = 5
    BOT_LFT = 6
    BOT_MID = 7
    BOT_RGT = 8

    @classmethod
    def from_index(cls, i: int) -> CellLocation:
        """Return the location with board index ``i``; ValueError if out of range."""
        if isinstance(i, bool) or not isinstance(i, int):
            raise TypeError(f"cell index must be an int, got {type(i).__name__}")
        if not 0 <= i < 9:
            raise ValueError(f"cell index {i} is outside 0..8")
        return cls(i)

    @classmethod
    def all(cls) -> tuple[CellLocation, ...]:
        """All nine locations in board order."""
        return tuple(cls)


Cell = Optional[Player]

_LINES: tuple[tuple[CellLocation, CellLocation, CellLocation], ...] = (
    # Horizontal
    (CellLocation.TOP_LFT, CellLocation.TOP_MID, CellLocation.TOP_RGT),
    (CellLocation.MID_LFT, CellLocation.MID_MID, CellLocation.MID_RGT),
    (CellLocation.BOT_LFT, CellLocation.BOT_MID, CellLocation.BOT_RGT),
    # Vertical
    (CellLocation.TOP_LFT, CellLocation.MID_LFT, CellLocation.BOT_LFT),
    (CellLocation.TOP_MID, CellLocation.MID_MID, CellLocation.BOT_MID),
    (CellLocation.TOP_RGT, CellLocation.MID_RGT, CellLocation.BOT_RGT),
    # Diagonal
    (CellLocation.TOP_LFT, CellLocation.MID_MID, CellLocation.BOT_RGT),
    (CellLocation.BOT_LFT, CellLocation.MID_MID, CellLocation.TOP_RGT),
)


@dataclass(frozen=True)
class Tied:
    """The board filled up with no winner."""


@dataclass(frozen=True)
class Won:
    """A player completed a line."""

    player: Player


@dataclass(frozen=True)
class Disqualified:
    """A player tried to move onto an occupied cell."""

    player: Player
    location: CellLocation


GameOverState = Union[Tied, Won, Disqualified]


@dataclass(frozen=True)
class GameBoard:
    """An immutable 3x3 board; each cell holds a Player or None."""

    cells: tuple[Cell, ...] = field(default=(None,) * 9)

    def __post_init__(self) -> None:
        if len(self.cells) != 9:
            raise ValueError(f"a board has 9 cells, got {len(self.cells)}")
        object.__setattr__(self, "cells", tuple(self.cells))

    @classmethod
    def empty(cls) -> GameBoard:
        """A board with every cell empty."""
        return cls((None,) * 9)

    def get_cell(self, location: CellLocation) -> Cell:
        return self.cells[location]

    def is_cell_empty(self, location: CellLocation) -> bool:
        return self.cells[location] is None

    def available_moves(self) -> Iterator[CellLocation]:
        """Empty locations, in board order."""
        return (loc for loc in CellLocation if self.is_cell_empty(loc))

    def with_cell(self, location: CellLocation, player: Player) -> GameBoard:
        """Return a copy of the board with ``player`` placed at ``location``."""
        cells = list(self.cells)
        cells[location] = player
        return GameBoard(tuple(cells))

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def winner(self) -> Optional[Player]:
        """The player owning a complete line, if any."""
        for a, b, c in _LINES:
            first = self.cells[a]
            if first is not None and first == self.cells[b] == self.cells[c]:
                return first
        return None

    def game_over_state(self) -> Optional[GameOverState]:
        """Won or Tied if the game has ended on this board, otherwise None."""
        player = self.winner()
        if player is not None:
            return Won(player)
        if self.is_full():
            return Tied()
        return None


class CellOccupiedError(Exception):
    """Raised when a move targets a cell that is already taken."""

    def __init__(self, location: CellLocation) -> None:
        super().__init__(f"cell {location.name} is already occupied")
        self.location = location


@dataclass(frozen=True)
class GameOver:
    """A finished game: the final board and how it ended."""

    board: GameBoard
    result: GameOverState


@dataclass(frozen=True)
class PlayingGameState:
    """A game in progress: the board and whose turn it is."""

    gameboard: GameBoard
    player_turn: Player

    def apply_move(self, location: CellLocation) -> GameState:
        """Play ``location`` for the current player; raise CellOccupiedError if taken."""
        if not self.gameboard.is_cell_empty(location):
            raise CellOccupiedError(location)
        board = self.gameboard.with_cell(location, self.player_turn)
        ended = board.game_over_state()
        if ended is not None:
            return GameOver(board, ended)
        return PlayingGameState(board, self.player_turn.opponent())

    def apply_move_or_disqualify(self, location: CellLocation) -> GameState:
        """Like apply_move, but an illegal move ends the game with Disqualified."""
        try:
            return self.apply_move(location)
        except CellOccupiedError:
            return GameOver(self.gameboard, Disqualified(self.player_turn, location))


GameState = Union[PlayingGameState, GameOver]


class Agent(abc.ABC):
    """Something that chooses moves."""

    @abc.abstractmethod
    def select_move(self, state: PlayingGameState) -> CellLocation:
        """Return the location to play in ``state``."""


def new_game(first_player: Player) -> PlayingGameState:
    """A fresh game with ``first_player`` to move."""
    return PlayingGameState(GameBoard.empty(), first_player)


def play_game(cross_agent: Agent, circle_agent: Agent, state: PlayingGameState) -> GameOver:
    """Let the two agents alternate from ``state`` until the game ends."""
    while True:
        agent = cross_agent if state.player_turn is Player.CROSS else circle_agent
        next_state = state.apply_move_or_disqualify(agent.select_move(state))
        if isinstance(next_state, GameOver):
            return next_state
        state = next_state