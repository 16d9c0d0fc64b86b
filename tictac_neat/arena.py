"""Competitive evaluation building blocks: organisms, matches and reports."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Protocol, Sequence


class Phenome(Protocol):
    """What an organism needs from the network it wraps."""

    def activate(self, inputs: Sequence[float]) -> Sequence[float]: ...

    def node_count(self) -> int: ...

    def connection_count(self) -> int: ...

    def active_node_count(self) -> int: ...

    def active_connection_count(self) -> int: ...


class OrganismStats:
    """Named counters an evaluation can accumulate for one organism."""

    def __init__(self) -> None:
        self._values: dict[str, float] = {}

    def increment(self, key: str, value: float) -> None:
        """Add ``value`` to the counter ``key``, starting from 0.0."""
        self._values[key] = self._values.get(key, 0.0) + value

    def as_dict(self) -> dict[str, float]:
        """A copy of the counters, ordered by key."""
        return dict(sorted(self._values.items()))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"OrganismStats({self.as_dict()!r})"


@dataclass
class Organism:
    """A network taking part in matches, with the fitness it has collected."""

    id: int
    phenome: Phenome
    fitness: float = 0.0
    raw_fitness: float = 0.0
    stats: OrganismStats = field(default_factory=OrganismStats)

    def node_count(self) -> int:
        return self.phenome.node_count()

    def connection_count(self) -> int:
        return self.phenome.connection_count()

    def active_node_count(self) -> int:
        """Nodes that take part in computation."""
        return self.phenome.active_node_count()

    def active_connection_count(self) -> int:
        """Enabled connections between active nodes."""
        return self.phenome.active_connection_count()

    def activate(self, inputs: Sequence[float]) -> list[float]:
        return list(self.phenome.activate(inputs))

    def add_fitness(self, delta: float) -> None:
        """Add to the (possibly penalised) fitness."""
        self.fitness += delta

    def add_raw_fitness(self, delta: float) -> None:
        """Add to the unpenalised fitness."""
        self.raw_fitness += delta


@dataclass
class Match:
    """A group of organisms competing together, with a seed for any randomness."""

    organisms: list[Organism]
    seed: int


@dataclass(frozen=True)
class MatchConfig:
    """How organisms are grouped for competition."""

    players_per_match: int = 2
    matches_per_organism: int = 5


@dataclass(frozen=True)
class SizeStats:
    """Node and connection counts."""

    nodes: int
    connections: int


@dataclass(frozen=True)
class GenerationReport:
    """Summary of one evaluated generation."""

    generation: int
    best_penalised_fitness: float
    mean_penalised_fitness: float
    best_raw_fitness: float
    mean_raw_fitness: float
    best_size: SizeStats
    mean_size: SizeStats
    species_count: int
    population_size: int
    compatibility_threshold: float


def build_matchups(
    population_size: int, match_config: MatchConfig, rng: random.Random
) -> list[list[int]]:
    """Shuffle each organism into ``matches_per_organism`` slots and group them.

    Only full groups of ``players_per_match`` are kept.
    """
    players = match_config.players_per_match
    if players <= 0:
        raise ValueError("players_per_match must be positive")
    repeats = match_config.matches_per_organism
    total_slots = population_size * repeats
    matches_needed = -(-total_slots // players)

    slots = [i for i in range(population_size) for _ in range(repeats)]
    rng.shuffle(slots)

    groups = (slots[start : start + players] for start in range(0, len(slots), players))
    full = [group for group in groups if len(group) == players]
    return full[:matches_needed]


def find_best_index(fitnesses: Sequence[float]) -> int:
    """Index of the highest fitness (the last one on ties); 0 when empty."""
    if any(math.isnan(value) for value in fitnesses):
        raise ValueError("NaN in fitnesses")
    if not fitnesses:
        return 0
    return max(range(len(fitnesses)), key=lambda i: (fitnesses[i], i))


def _best_and_mean(values: Sequence[float]) -> tuple[float, float]:
    best = max(values, default=-math.inf)
    mean = sum(values) / len(values) if values else 0.0
    return best, mean


def build_report(
    generation: int,
    sizes: Sequence[SizeStats],
    penalised_fitnesses: Sequence[float],
    raw_fitnesses: Sequence[float],
    species_count: int,
    compatibility_threshold: float,
) -> GenerationReport:
    """Summarise fitnesses and network sizes of an evaluated population."""
    best_penalised, mean_penalised = _best_and_mean(penalised_fitnesses)
    best_raw, mean_raw = _best_and_mean(raw_fitnesses)

    best_idx = find_best_index(penalised_fitnesses)
    best_size = sizes[best_idx] if best_idx < len(sizes) else SizeStats(0, 0)

    count = max(len(sizes), 1)
    mean_size = SizeStats(
        nodes=sum(s.nodes for s in sizes) // count,
        connections=sum(s.connections for s in sizes) // count,
    )

    return GenerationReport(
        generation=generation,
        best_penalised_fitness=best_penalised,
        mean_penalised_fitness=mean_penalised,
        best_raw_fitness=best_raw,
        mean_raw_fitness=mean_raw,
        best_size=best_size,
        mean_size=mean_size,
        species_count=species_count,
        population_size=len(sizes),
        compatibility_threshold=compatibility_threshold,
    )