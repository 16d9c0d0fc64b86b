# tictac-neat

A small tic-tac-toe toolkit for training and testing game-playing neural
networks.

- `tictac_neat.game`: the board (`GameBoard`), cells (`CellLocation`),
  players (`Player`), moves, win and tie detection, and disqualification for
  moves onto occupied cells. `new_game` starts a game, `PlayingGameState`
  applies moves (`apply_move` raises `CellOccupiedError`,
  `apply_move_or_disqualify` ends the game with `Disqualified` instead), and
  `play_game` lets two `Agent`s play until a `GameOver`.
- `tictac_neat.display`: `board_to_string` renders a board as three rows of
  `X`, `O` and `_`.
- `tictac_neat.minimax`: a cached perfect-play solver. `optimal_moves`
  returns a position's `Outcome` and every move that keeps it;
  `MinimaxAgent` always plays the first optimal move;
  `score_against_perfect_play` plays a game against an opponent that picks
  randomly among optimal moves and counts how many of the agent's moves were
  optimal.
- `tictac_neat.neat_agent`: `board_to_inputs` encodes a board as ten
  network inputs (own pieces 1.0, opponent's -1.0, empty 0.0, plus a bias of
  1.0); `outputs_to_move` picks the cell with the highest output (the last
  one on ties) without checking legality; `NeatAgent` plays a network from a
  fixed side.
- `tictac_neat.size_penalty`: fitness multipliers that discourage large
  networks: linear, threshold, seasonal, exponential and step penalties on
  nodes or connections, `compose` to multiply two of them, and `apply` to
  scale a raw fitness.
- `tictac_neat.arena`: `Organism` (a network with accumulated fitness and
  `OrganismStats` counters), `Match`, `MatchConfig`, `build_matchups` for
  shuffling organisms into matches, and `build_report` for a
  `GenerationReport` of fitnesses and network sizes.
- `tictac_neat.evaluate`: `evaluate_tictactoe_match` plays the first two
  organisms of a match against each other once from each side (win 3,
  draw 1 each, disqualified -1 and its opponent 2).
- `tictac_neat.evaluate_minimax`: `evaluate_minimax_fitness` and
  `make_evaluate_minimax(penalty_fn)` score every organism by the number of
  optimal moves it makes against perfect play, optionally scaled by a size
  penalty.

## Installation

```
pip install .
```

## Playing in the terminal

```
tictac-neat
```

You are asked whether you want to move first, then play against the
perfect minimax opponent. Moves are entered with the keys

```
q w e
a s d
z x c
```

which map onto the board's cells. Answer `y`/`yes` or `n`/`no` (any case)
when asked whether to play again.

`tictac_neat.cli` also offers `game_loop` (a random opponent) and
`play_against_neat(phenome)` (an evolved network) for use from Python.

## Using the library

```python
from tictac_neat.game import Player, Tied, new_game, play_game
from tictac_neat.minimax import MinimaxAgent, optimal_moves

outcome, moves = optimal_moves(new_game(Player.CROSS))
# The empty board is a draw with perfect play; the centre is among the best moves.

finished = play_game(MinimaxAgent(), MinimaxAgent(), new_game(Player.CROSS))
assert finished.result == Tied()  # two perfect players always tie
```

Size penalties are plain callables taking a `NetworkSize` and a generation
number and returning a factor, normally in `[0, 1]`:

```python
from tictac_neat.size_penalty import NetworkSize, apply, compose, threshold_connections, threshold_nodes

penalty = compose(threshold_nodes(10, 0.1), threshold_connections(20, 0.1))
fitness = apply(0.8, NetworkSize(nodes=15, connections=25), 0, penalty)  # 0.2
```

## What this package does not do

There are no genomes, networks, speciation or evolution loop here, and no
checkpointing. Organisms, `NeatAgent`, `DynamicNeatAgent` and
`play_against_neat` work with any network object you supply that has an
`activate(inputs)` method (and, for `Organism`, `node_count`,
`connection_count`, `active_node_count` and `active_connection_count`).
The only command is `tictac-neat`, which plays against the minimax opponent;
there is no training command.

## Running the tests

```
pip install ".[test]"
pytest
```