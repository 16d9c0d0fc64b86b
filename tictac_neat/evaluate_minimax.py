"""Fitness from how often an organism's moves match perfect play."""

from __future__ import annotations

import random
from typing import Callable

from . import size_penalty
from .arena import Match
from .game import Player, new_game
from .minimax import score_against_perfect_play
from .neat_agent import board_to_inputs, outputs_to_move
from .size_penalty import NetworkSize, PenaltyFn

_U64_MASK = (1 << 64) - 1

EvaluateFn = Callable[[Match, int], None]


def evaluate_organism(match: Match, organism_idx: int) -> tuple[float, NetworkSize]:
    """Play one game as each side against a random-optimal opponent.

    Returns the number of optimal moves made (the raw fitness) and the
    organism's active network size. Move counters go into its stats.
    """
    organism = match.organisms[organism_idx]
    rng = random.Random((match.seed + organism_idx) & _U64_MASK)

    total_correct = 0
    total_moves = 0
    for agent_player in (Player.CROSS, Player.CIRCLE):

        def agent_move(state, perspective=agent_player):
            return outputs_to_move(organism.activate(board_to_inputs(state.gameboard, perspective)))

        correct, moves = score_against_perfect_play(
            new_game(Player.CROSS), agent_player, agent_move, rng
        )
        total_correct += correct
        total_moves += moves

    organism.stats.increment("optimal_moves", float(total_correct))
    organism.stats.increment("total_moves", float(total_moves))

    network_size = NetworkSize(
        nodes=organism.active_node_count(),
        connections=organism.active_connection_count(),
    )
    return float(total_correct), network_size


def make_evaluate_minimax(penalty_fn: PenaltyFn) -> EvaluateFn:
    """An evaluation function that scales raw fitness by ``penalty_fn``."""

    def evaluate(match: Match, generation: int) -> None:
        for idx, organism in enumerate(match.organisms):
            raw_fitness, network_size = evaluate_organism(match, idx)
            penalised = size_penalty.apply(raw_fitness, network_size, generation, penalty_fn)

            organism.stats.increment("raw_fitness", raw_fitness)
            organism.stats.increment("size_penalty_factor", penalty_fn(network_size, generation))
            organism.stats.increment("node_count", float(network_size.nodes))
            organism.stats.increment("connection_count", float(network_size.connections))

            organism.add_raw_fitness(raw_fitness)
            organism.add_fitness(penalised)

    return evaluate


def evaluate_minimax_fitness(match: Match, generation: int) -> None:
    """Evaluate every organism against perfect play with no size penalty."""
    for idx, organism in enumerate(match.organisms):
        raw_fitness, network_size = evaluate_organism(match, idx)
        fitness = size_penalty.apply(
            raw_fitness, network_size, generation, size_penalty.no_penalty
        )
        organism.add_raw_fitness(raw_fitness)
        organism.add_fitness(fitness)