"""Fitness multipliers based on network size.

Each penalty function takes a NetworkSize and a generation number and
returns a factor, normally in [0.0, 1.0], that multiplies raw fitness.
1.0 means no penalty; 0.0 means total penalty.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class NetworkSize:
    """Node and connection counts of a network."""

    nodes: int
    connections: int


PenaltyFn = Callable[[NetworkSize, int], float]


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _excess(value: int, threshold: int) -> int:
    return max(value - threshold, 0)


def _nodes(size: NetworkSize) -> int:
    return size.nodes


def _connections(size: NetworkSize) -> int:
    return size.connections


def _seasonal_rate(generation: int, period: int, min_rate: float, max_rate: float) -> float:
    # cos peaks at generation 0, so the cycle starts at the harshest rate.
    phase = 2.0 * math.pi * generation / period
    seasonal_factor = (1.0 + math.cos(phase)) / 2.0
    return min_rate + (max_rate - min_rate) * seasonal_factor


def _linear_on(metric: Callable[[NetworkSize], int], rate: float) -> PenaltyFn:
    def penalty(size: NetworkSize, generation: int) -> float:
        return _clamp(1.0 - rate * metric(size), 0.0, 1.0)

    return penalty


_ZERO_RATE = _linear_on(_nodes, 0.0)


def no_penalty(size: NetworkSize, generation: int) -> float:
    """The baseline: a linear penalty with a zero rate, so always 1.0."""
    return _ZERO_RATE(size, generation)


def linear_nodes(rate: float) -> PenaltyFn:
    """Scale by ``1 - rate * nodes``, clamped to [0, 1]."""
    return _linear_on(_nodes, rate)


def linear_connections(rate: float) -> PenaltyFn:
    """Scale by ``1 - rate * connections``, clamped to [0, 1]."""
    return _linear_on(_connections, rate)


def _threshold_on(metric: Callable[[NetworkSize], int], threshold: int, rate: float) -> PenaltyFn:
    def penalty(size: NetworkSize, generation: int) -> float:
        return _clamp(1.0 - rate * _excess(metric(size), threshold), 0.0, 1.0)

    return penalty


def threshold_nodes(threshold: int, rate: float) -> PenaltyFn:
    """No penalty up to ``threshold`` nodes, then ``rate`` per excess node."""
    return _threshold_on(_nodes, threshold, rate)


def threshold_connections(threshold: int, rate: float) -> PenaltyFn:
    """No penalty up to ``threshold`` connections, then ``rate`` per excess."""
    return _threshold_on(_connections, threshold, rate)


def _seasonal_on(
    metric: Callable[[NetworkSize], int], period: int, min_rate: float, max_rate: float
) -> PenaltyFn:
    def penalty(size: NetworkSize, generation: int) -> float:
        rate = _seasonal_rate(generation, period, min_rate, max_rate)
        return _clamp(1.0 - rate * metric(size), 0.0, 1.0)

    return penalty


def seasonal_nodes(period: int, min_rate: float, max_rate: float) -> PenaltyFn:
    """Linear node penalty whose rate oscillates between min and max over ``period``."""
    return _seasonal_on(_nodes, period, min_rate, max_rate)


def seasonal_connections(period: int, min_rate: float, max_rate: float) -> PenaltyFn:
    """Linear connection penalty whose rate oscillates over ``period``."""
    return _seasonal_on(_connections, period, min_rate, max_rate)


def _seasonal_with_threshold_on(
    metric: Callable[[NetworkSize], int],
    threshold: int,
    period: int,
    min_rate: float,
    max_rate: float,
) -> PenaltyFn:
    def penalty(size: NetworkSize, generation: int) -> float:
        value = metric(size)
        if value <= threshold:
            return 1.0
        rate = _seasonal_rate(generation, period, min_rate, max_rate)
        return _clamp(1.0 - rate * (value - threshold), 0.5, 1.0)

    return penalty


def seasonal_nodes_with_threshold(
    threshold: int, period: int, min_rate: float, max_rate: float
) -> PenaltyFn:
    """Seasonal penalty on nodes above ``threshold``; never below 0.5."""
    return _seasonal_with_threshold_on(_nodes, threshold, period, min_rate, max_rate)


def seasonal_connections_with_threshold(
    threshold: int, period: int, min_rate: float, max_rate: float
) -> PenaltyFn:
    """Seasonal penalty on connections above ``threshold``; never below 0.5."""
    return _seasonal_with_threshold_on(_connections, threshold, period, min_rate, max_rate)


def _exponential_on(metric: Callable[[NetworkSize], int], rate: float) -> PenaltyFn:
    def penalty(size: NetworkSize, generation: int) -> float:
        return math.exp(-rate * metric(size))

    return penalty


def exponential_nodes(rate: float) -> PenaltyFn:
    """``exp(-rate * nodes)``."""
    return _exponential_on(_nodes, rate)


def exponential_connections(rate: float) -> PenaltyFn:
    """``exp(-rate * connections)``."""
    return _exponential_on(_connections, rate)


def _exponential_with_threshold_on(
    metric: Callable[[NetworkSize], int], threshold: int, rate: float
) -> PenaltyFn:
    def penalty(size: NetworkSize, generation: int) -> float:
        return math.exp(-rate * _excess(metric(size), threshold))

    return penalty


def exponential_nodes_with_threshold(threshold: int, rate: float) -> PenaltyFn:
    """Exponential decay on nodes above ``threshold``."""
    return _exponential_with_threshold_on(_nodes, threshold, rate)


def exponential_connections_with_threshold(threshold: int, rate: float) -> PenaltyFn:
    """Exponential decay on connections above ``threshold``."""
    return _exponential_with_threshold_on(_connections, threshold, rate)


def _step_on(
    metric: Callable[[NetworkSize], int], threshold: int, penalty_multiplier: float
) -> PenaltyFn:
    above = _clamp(penalty_multiplier, 0.0, 1.0)

    def penalty(size: NetworkSize, generation: int) -> float:
        return 1.0 if metric(size) <= threshold else above

    return penalty


def step_nodes(threshold: int, penalty_multiplier: float) -> PenaltyFn:
    """1.0 up to ``threshold`` nodes, a flat multiplier above."""
    return _step_on(_nodes, threshold, penalty_multiplier)


def step_connections(threshold: int, penalty_multiplier: float) -> PenaltyFn:
    """1.0 up to ``threshold`` connections, a flat multiplier above."""
    return _step_on(_connections, threshold, penalty_multiplier)


def compose(a: PenaltyFn, b: PenaltyFn) -> PenaltyFn:
    """Multiply the factors of two penalty functions."""

    def penalty(size: NetworkSize, generation: int) -> float:
        return a(size, generation) * b(size, generation)

    return penalty


def apply(raw_fitness: float, size: NetworkSize, generation: int, penalty_fn: PenaltyFn) -> float:
    """Raw fitness scaled by the penalty factor."""
    return raw_fitness * penalty_fn(size, generation)