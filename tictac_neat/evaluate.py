"""Head-to-head tic-tac-toe evaluation of organisms in a match."""

from __future__ import annotations

from .arena import Match
from .game import (
    Disqualified,
    GameOver,
    GameOverState,
    Player,
    Tied,
    Won,
    new_game,
)
from .neat_agent import board_to_inputs, outputs_to_move


def play_one_game(match: Match, cross_idx: int, circle_idx: int) -> GameOverState:
    """Play one game between two organisms of ``match`` and return how it ended.

    Moves are not filtered for legality: an organism that picks an occupied
    cell is disqualified.
    """
    state = new_game(Player.CROSS)
    while True:
        organism_idx = cross_idx if state.player_turn is Player.CROSS else circle_idx
        inputs = board_to_inputs(state.gameboard, state.player_turn)
        outputs = match.organisms[organism_idx].activate(inputs)
        next_state = state.apply_move_or_disqualify(outputs_to_move(outputs))
        if isinstance(next_state, GameOver):
            return next_state.result
        state = next_state


def record_game_outcome(
    result: GameOverState, cross_idx: int, circle_idx: int, match: Match
) -> None:
    """Add win, loss, draw and disqualification counters to both organisms' stats."""
    organisms = match.organisms
    if isinstance(result, Won):
        if result.player is Player.CROSS:
            winner_idx, loser_idx = cross_idx, circle_idx
        else:
            winner_idx, loser_idx = circle_idx, cross_idx
        organisms[winner_idx].stats.increment("wins", 1.0)
        organisms[loser_idx].stats.increment("losses", 1.0)
    elif isinstance(result, Tied):
        organisms[cross_idx].stats.increment("draws", 1.0)
        organisms[circle_idx].stats.increment("draws", 1.0)
    elif isinstance(result, Disqualified):
        if result.player is Player.CROSS:
            dq_idx, winner_idx = cross_idx, circle_idx
        else:
            dq_idx, winner_idx = circle_idx, cross_idx
        organisms[dq_idx].stats.increment("disqualifications", 1.0)
        organisms[dq_idx].stats.increment("losses", 1.0)
        organisms[winner_idx].stats.increment("wins_by_opponent_dq", 1.0)
        organisms[winner_idx].stats.increment("wins", 1.0)
    else:
        raise TypeError(f"unknown game result: {result!r}")
    organisms[cross_idx].stats.increment("games_played", 1.0)
    organisms[circle_idx].stats.increment("games_played", 1.0)


def score_game(result: GameOverState, organism_idx: int, cross_idx: int) -> tuple[float, float]:
    """Points for (the organism, its opponent).

    A win scores 3, a draw 1 each; a disqualified player gets -1 and its
    opponent 2.
    """
    organism_player = Player.CROSS if organism_idx == cross_idx else Player.CIRCLE
    if isinstance(result, Won):
        return (3.0, 0.0) if result.player is organism_player else (0.0, 3.0)
    if isinstance(result, Tied):
        return (1.0, 1.0)
    if isinstance(result, Disqualified):
        return (-1.0, 2.0) if result.player is organism_player else (2.0, -1.0)
    raise TypeError(f"unknown game result: {result!r}")


def evaluate_tictactoe_match(match: Match) -> None:
    """Play the first two organisms against each other once from each side."""
    if len(match.organisms) < 2:
        raise ValueError(
            "evaluate_tictactoe_match requires at least 2 organisms, "
            f"got {len(match.organisms)}"
        )

    first = play_one_game(match, 0, 1)
    record_game_outcome(first, 0, 1, match)
    score_0a, score_1a = score_game(first, 0, 0)

    second = play_one_game(match, 1, 0)
    record_game_outcome(second, 1, 0, match)
    score_1b, score_0b = score_game(second, 1, 1)

    match.organisms[0].add_fitness(score_0a + score_0b)
    match.organisms[1].add_fitness(score_1a + score_1b)