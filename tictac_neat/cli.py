"""Interactive terminal play against a random, perfect or evolved opponent."""

from __future__ import annotations

import argparse
import copy
import random
import sys
from typing import Callable, Optional, Sequence, TypeVar

from .display import board_to_string
from .game import (
    Agent,
    CellLocation,
    Disqualified,
    GameBoard,
    GameOverState,
    Player,
    PlayingGameState,
    Tied,
    Won,
    new_game,
    play_game,
)
from .minimax import MinimaxAgent
from .neat_agent import NeatAgent

T = TypeVar("T")

_MOVE_KEYS = {
    "q": CellLocation.TOP_LFT,
    "w": CellLocation.TOP_MID,
    "e": CellLocation.TOP_RGT,
    "a": CellLocation.MID_LFT,
    "s": CellLocation.MID_MID,
    "d": CellLocation.MID_RGT,
    "z": CellLocation.BOT_LFT,
    "x": CellLocation.BOT_MID,
    "c": CellLocation.BOT_RGT,
}


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("stdin closed unexpectedly")
    return line.rstrip("\r\n")


def _clear_screen() -> None:
    sys.stdout.write("\x1b[3J")
    sys.stdout.flush()


def _get_valid_input(ask: Callable[[], Optional[T]]) -> T:
    while True:
        result = ask()
        if result is not None:
            return result
        print("You did not enter a valid response. Try again.")


def string_to_player_move(s: str) -> Optional[CellLocation]:
    """Map a key from qweasdzxc (any case) to its cell, or None."""
    return _MOVE_KEYS.get(s.lower())


def parse_yes_no(line: str) -> Optional[bool]:
    """True for yes/y, False for no/n (any case), None otherwise."""
    answer = line.lower()
    if answer in ("yes", "y"):
        return True
    if answer in ("no", "n"):
        return False
    return None


def _ask_yes_no(message: str) -> Optional[bool]:
    print(f"Yes or No\n{message}")
    return parse_yes_no(_read_line())


def _ask_move() -> Optional[CellLocation]:
    print("Select move from qweasdzxc")
    return string_to_player_move(_read_line())


def describe_result(result: GameOverState, user_player: Player) -> str:
    """The end-of-game message from the user's point of view."""
    if isinstance(result, Tied):
        return "No winners - game is tied!"
    if isinstance(result, Won):
        return "User (you) have won!" if result.player is user_player else "AI has won!"
    if isinstance(result, Disqualified):
        if result.player is user_player:
            return (
                f"User (you) have tried to play an illegal move ({result.location.name}) "
                "and are disqualified!"
            )
        return f"AI tried to play an illegal move ({result.location.name}) and is disqualified!"
    raise TypeError(f"unknown game result: {result!r}")


class RandomAgent(Agent):
    """Plays a uniformly random empty cell."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def select_move(self, state: PlayingGameState) -> CellLocation:
        moves = list(state.gameboard.available_moves())
        if not moves:
            raise ValueError("select_move called with no available moves")
        return self._rng.choice(moves)


class CliAgent(Agent):
    """Asks the user at the terminal for each move."""

    def select_move(self, state: PlayingGameState) -> CellLocation:
        return _get_user_move(state.gameboard)


def _get_user_move(board: GameBoard) -> CellLocation:
    _clear_screen()
    print(board_to_string(board))
    return _get_valid_input(_ask_move)


class DynamicNeatAgent(Agent):
    """Plays a network from whichever side is to move, with fresh network state each turn."""

    def __init__(self, phenome) -> None:
        self.phenome = phenome

    def select_move(self, state: PlayingGameState) -> CellLocation:
        agent = NeatAgent(copy.deepcopy(self.phenome), state.player_turn)
        return agent.select_move(state)


def _end_game(board: GameBoard, result: GameOverState, user_player: Player) -> None:
    _clear_screen()
    print(board_to_string(board))
    print(describe_result(result, user_player))


def play_loop(opponent: Agent) -> None:
    """Play games between the user and ``opponent`` until the user stops."""
    user = CliAgent()
    while True:
        user_first = _get_valid_input(lambda: _ask_yes_no("Do you want to play first?"))
        user_player = Player.CROSS if user_first else Player.CIRCLE
        initial = new_game(Player.CROSS)

        if user_player is Player.CROSS:
            finished = play_game(user, opponent, initial)
        else:
            finished = play_game(opponent, user, initial)

        _end_game(finished.board, finished.result, user_player)

        if not _get_valid_input(lambda: _ask_yes_no("Do you want to play again?")):
            break


def game_loop() -> None:
    """Play against a random opponent."""
    play_loop(RandomAgent())


def game_loop_minimax() -> None:
    """Play against a perfect opponent."""
    play_loop(MinimaxAgent())


def play_against_neat(phenome) -> None:
    """Play against an evolved network."""
    play_loop(DynamicNeatAgent(phenome))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play tic-tac-toe against the perfect opponent."""
    parser = argparse.ArgumentParser(
        prog="tictac-neat",
        description="Play tic-tac-toe against a perfect minimax opponent.",
    )
    parser.parse_args(argv)
    game_loop_minimax()
    return 0


if __name__ == "__main__":
    sys.exit(main())