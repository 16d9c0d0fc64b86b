"""Encoding boards for neural networks and decoding their outputs into moves."""

from __future__ import annotations

import math
from typing import Protocol, Sequence

from .game import Agent, CellLocation, GameBoard, Player, PlayingGameState


class _Activatable(Protocol):
    def activate(self, inputs: Sequence[float]) -> Sequence[float]: ...


def board_to_inputs(board: GameBoard, perspective: Player) -> list[float]:
    """Own pieces 1.0, opponent pieces -1.0, empty 0.0, then a bias input of 1.0."""
    inputs = [
        0.0 if cell is None else (1.0 if cell is perspective else -1.0) for cell in board.cells
    ]
    inputs.append(1.0)
    return inputs


def outputs_to_move(outputs: Sequence[float]) -> CellLocation:
    """The cell with the highest output; on ties the last one wins.

    Legality is not checked. Raises ValueError for empty outputs, NaN, or an
    index that is not a board cell.
    """
    if not outputs:
        raise ValueError("outputs must not be empty")
    if any(math.isnan(value) for value in outputs):
        raise ValueError("NaN in network outputs")
    index = max(range(len(outputs)), key=lambda i: (outputs[i], i))
    try:
        return CellLocation.from_index(index)
    except ValueError:
        raise ValueError(
            f"output index {index} does not map to a valid cell location"
        ) from None


class NeatAgent(Agent):
    """Plays by activating a network from a fixed player's perspective."""

    def __init__(self, phenome: _Activatable, player: Player) -> None:
        self.phenome = phenome
        self.player = player

    def select_move(self, state: PlayingGameState) -> CellLocation:
        inputs = board_to_inputs(state.gameboard, self.player)
        return outputs_to_move(self.phenome.activate(inputs))