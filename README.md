# learn2slither

A snake game on a square board and a small neural-network agent that learns to
play it with deep Q-learning. Everything runs on NumPy.

## The game

`learn2slither.snake.Game` holds a `Board` (10 × 10 by default) and a `Snake`.
The board holds one red apple and two green apples; the snake starts with
length 3 at a random place, facing a random direction.

- Eating a green apple grows the snake by one: reward `+5`.
- Eating a red apple shrinks it by one: reward `-1`.
- Hitting a wall or its own body, or shrinking to length 0, kills it: reward `-5`.
- Any other move: reward `0`.

Asking the snake to reverse onto itself is ignored and it keeps going straight.
`Game.is_terminal()` is true once the snake is dead or has reached length 15.
`Game.step(direction)` moves the snake once and returns the new state and the
reward.

The snake sees only the row and the column of its head, walls included
(`Snake.vision()`, drawn as text by `Snake.show_vision()`). `Snake.state()`
encodes each cell as a number divided by 3 (empty `0`, head `1`, body `2`,
wall `3`, green apple `-1`, red apple `-2`), the head row first and then the
head column without the head, which gives 23 values on a 10 × 10 board.
`Board.render(head)` returns the whole board as text.

## The agent

`learn2slither.agent.init_model()` builds a `Sequential` model of `Dense` and
`ReLU` layers (23 → 64 → 32 → 4). `training()` uses epsilon-greedy
exploration (epsilon from 1.0, decaying by 0.9995 per episode down to 0.05), a
`ReplayBuffer` of 10 000 experiences, batches of 32, a discount of 0.99 and a
TD error clipped to [-1, 1]. After every episode the reward is printed to
standard output and the mean squared error to standard error; whenever an
episode beats the best reward so far the model is saved. It returns the total
reward of each episode.

## Installation

```
pip install .
```

## Usage

Train a model from the command line:

```
learn2slither
```

Options:

- `--lr` learning rate (default `0.0001`)
- `--output` model file to write (default `First_Session.lts`)
- `--episodes` number of episodes (default `1000`)
- `--draw` print the board as text after every move

Or drive the pieces from Python. Weight initialisation takes a NumPy
generator; the game and the training loop take a `random.Random`:

```python
import random

import numpy as np

from learn2slither.agent import init_model, training
from learn2slither.snake import Game

model = init_model(np.random.default_rng(0))
rng = random.Random(0)
game = Game(10, rng)
rewards = training(model, 0.0001, "first_session.lts", False, 100, game, rng)
```

A saved model is loaded with `Sequential.load_model`, which appends the stored
layers to the model:

```python
from learn2slither.sequential import Sequential

model = Sequential()
model.load_model("first_session.lts")
```

Unopenable or malformed model files raise subclasses of
`learn2slither.errors.ModelError`.

## What it does not do

There is no graphical window: `--draw` only prints the board as text. There
is no keyboard play, and no command for playing back a saved model; loading
one is done from Python.

## Tests

```
pip install .[test]
pytest
```