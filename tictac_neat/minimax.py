"""Perfect-play tic-tac-toe search and scoring of agents against it."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Callable, Iterable

from .game import (
    Agent,
    CellLocation,
    GameOver,
    Player,
    PlayingGameState,
    Tied,
    Won,
)


class OutcomeKind(enum.Enum):
    """Result of a position under perfect play, for the player to move."""

    WIN = "win"
    DRAW = "draw"
    LOSS = "loss"


@dataclass(frozen=True)
class Outcome:
    """A perfect-play result; ``depth`` is the number of moves until it happens."""

    kind: OutcomeKind
    depth: int = 0

    @classmethod
    def win(cls, depth: int) -> Outcome:
        return cls(OutcomeKind.WIN, depth)

    @classmethod
    def draw(cls) -> Outcome:
        return cls(OutcomeKind.DRAW, 0)

    @classmethod
    def loss(cls, depth: int) -> Outcome:
        return cls(OutcomeKind.LOSS, depth)

    def negate(self) -> Outcome:
        """The same outcome seen from the opponent's side."""
        if self.kind is OutcomeKind.WIN:
            return Outcome.loss(self.depth)
        if self.kind is OutcomeKind.LOSS:
            return Outcome.win(self.depth)
        return self

    def score(self) -> int:
        """1 for a win, 0 for a draw, -1 for a loss."""
        return {OutcomeKind.WIN: 1, OutcomeKind.DRAW: 0, OutcomeKind.LOSS: -1}[self.kind]

    def is_better_than(self, other: Outcome) -> bool:
        """Strict preference: quicker wins and slower losses are better."""
        if self.kind is OutcomeKind.WIN:
            if other.kind is OutcomeKind.WIN:
                return self.depth < other.depth
            return True
        if self.kind is OutcomeKind.DRAW:
            return other.kind is OutcomeKind.LOSS
        if other.kind is OutcomeKind.LOSS:
            return self.depth > other.depth
        return False

    def _one_move_later(self) -> Outcome:
        if self.kind is OutcomeKind.DRAW:
            return self
        return Outcome(self.kind, self.depth + 1)


_Cache = dict


def _best(outcomes: Iterable[Outcome]) -> Outcome:
    best = None
    for outcome in outcomes:
        if best is None or outcome.is_better_than(best):
            best = outcome
    if best is None:
        raise ValueError("no moves available in a playing state")
    return best


def _outcome_for_move(state: PlayingGameState, location: CellLocation, cache: _Cache) -> Outcome:
    next_state = state.apply_move(location)
    if isinstance(next_state, GameOver):
        result = next_state.result
        if isinstance(result, Won):
            return Outcome.win(1) if result.player is state.player_turn else Outcome.loss(1)
        if isinstance(result, Tied):
            return Outcome.draw()
        raise RuntimeError("disqualification should not occur from legal moves")
    return _minimax(next_state, cache).negate()._one_move_later()


def _minimax(state: PlayingGameState, cache: _Cache) -> Outcome:
    key = (state.gameboard.cells, state.player_turn)
    cached = cache.get(key)
    if cached is not None:
        return cached
    result = _best(
        _outcome_for_move(state, loc, cache) for loc in state.gameboard.available_moves()
    )
    cache[key] = result
    return result


def _optimal_moves_with_cache(
    state: PlayingGameState, cache: _Cache
) -> tuple[Outcome, list[CellLocation]]:
    scored = [
        (loc, _outcome_for_move(state, loc, cache)) for loc in state.gameboard.available_moves()
    ]
    best = _best(outcome for _, outcome in scored)
    optimal = [loc for loc, outcome in scored if outcome.score() == best.score()]
    return best, optimal


def optimal_moves(state: PlayingGameState) -> tuple[Outcome, list[CellLocation]]:
    """The position's perfect-play outcome and every move that keeps it."""
    return _optimal_moves_with_cache(state, {})


class MinimaxAgent(Agent):
    """Always plays the first optimal move; remembers evaluated positions."""

    def __init__(self) -> None:
        self._cache: _Cache = {}

    def select_move(self, state: PlayingGameState) -> CellLocation:
        _, moves = _optimal_moves_with_cache(state, self._cache)
        return moves[0]


def score_against_perfect_play(
    initial_state: PlayingGameState,
    agent_player: Player,
    get_agent_move: Callable[[PlayingGameState], CellLocation],
    rng: random.Random,
) -> tuple[int, int]:
    """Play one game against a random-optimal opponent.

    Returns (correct, total): how many of the agent's moves were optimal,
    out of how many it made.
    """
    cache: _Cache = {}
    correct = 0
    total = 0
    state = initial_state
    while True:
        _, optimal = _optimal_moves_with_cache(state, cache)
        if state.player_turn is not agent_player:
            if not optimal:
                raise ValueError("optimal_moves returned empty list")
            move = rng.choice(optimal)
        else:
            move = get_agent_move(state)
            if move in optimal:
                correct += 1
            total += 1
        next_state = state.apply_move_or_disqualify(move)
        if isinstance(next_state, GameOver):
            return correct, total
        state = next_state