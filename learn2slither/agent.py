"""Epsilon-greedy Q-learning of the snake game."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Sequence

import numpy as np

from .geometry import ACTIONS, Direction, Reward
from .layers import Dense, ReLU
from .replay import Experience, ReplayBuffer
from .sequential import Sequential
from .snake import Game

REPLAY_CAPACITY = 10000
EPSILON_START = 1.0
EPSILON_MIN = 0.05
EPSILON_DECAY = 0.9995
GAMMA = 0.99
BATCH_SIZE = 32
DEFAULT_EPISODES = 1000
DEFAULT_LR = 0.0001
DEFAULT_SAVE_PATH = "First_Session.lts"


def state_to_tensor(state: Sequence[float]) -> np.ndarray:
    """A state as a single-row float32 batch."""
    return np.asarray(state, dtype=np.float32).reshape(1, -1)


def epsilon_greedy(
    model: Sequential,
    state: Sequence[float],
    epsilon: float,
    rng: random.Random | None = None,
) -> Direction:
    """A random action with probability about `epsilon`, else the best-rated one."""
    rng = rng if rng is not None else random.Random()
    if rng.randint(0, 100) < epsilon * 100:
        return ACTIONS[rng.randint(0, 100) % len(ACTIONS)]
    q_values = model.forward(state_to_tensor(state))
    return Direction.from_index(int(np.argmax(q_values)))


def take_action(game: Game, action: Direction) -> tuple[list[float], Reward]:
    """Play `action` and return the following state and its reward."""
    return game.step(action)


def _learn_from(model: Sequential, batch: list[Experience], lr: float) -> list[float]:
    squared_errors = []
    for exp in batch:
        current_qs = model.forward(state_to_tensor(exp.state))
        target = float(exp.reward)
        if not exp.done:
            next_qs = model.forward(state_to_tensor(exp.next_state))
            target += GAMMA * float(np.max(next_qs))

        action_idx = exp.action.index()
        error = float(current_qs[0, action_idx]) - target
        squared_errors.append(error * error)

        grad_output = np.zeros(current_qs.shape, dtype=np.float32)
        grad_output[0, action_idx] = error if abs(error) <= 1.0 else math.copysign(1.0, error)
        model.backward(grad_output, lr)
    return squared_errors


def training(
    model: Sequential,
    lr: float,
    save_path: str,
    draw: bool = False,
    episodes: int = DEFAULT_EPISODES,
    game: Game | None = None,
    rng: random.Random | None = None,
) -> list[int]:
    """Train `model` over `episodes` games, saving it whenever the reward improves.

    Returns the total reward of each episode.
    """
    rng = rng if rng is not None else random.Random()
    game = game if game is not None else Game(rng=rng)
    replay = ReplayBuffer(REPLAY_CAPACITY, rng)
    epsilon = EPSILON_START
    best_reward = -math.inf
    history: list[int] = []

    for episode in range(episodes):
        game.reset()
        state = game.snake.state()
        total_reward = 0
        squared_errors: list[float] = []

        while not game.is_terminal():
            action = epsilon_greedy(model, state, epsilon, rng)
            next_state, reward = take_action(game, action)
            if draw:
                sys.stdout.write(game.board.render(game.snake.pos))

            replay.add(Experience(state, action, reward, next_state, game.is_terminal()))
            state = next_state
            total_reward += int(reward)

            if replay.is_ready(BATCH_SIZE):
                squared_errors.extend(_learn_from(model, replay.sample(BATCH_SIZE), lr))

        epsilon = max(epsilon * EPSILON_DECAY, EPSILON_MIN)
        mean_loss = sum(squared_errors) / len(squared_errors) if squared_errors else 0.0

        print(f"Episode {episode}: Reward = {total_reward}")
        print(f"Episode {episode}: Loss   = {mean_loss:g}", file=sys.stderr)

        history.append(total_reward)
        if total_reward > best_reward:
            best_reward = total_reward
            model.save_model(save_path)
    return history


def init_model(rng: np.random.Generator | None = None) -> Sequential:
    """The Q-network: 23 inputs, two hidden ReLU layers, one output per action."""
    model = Sequential()
    model.add(Dense(23, 64, rng))
    model.add(ReLU())
    model.add(Dense(64, 32, rng))
    model.add(ReLU())
    model.add(Dense(32, len(ACTIONS), rng))
    return model


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="learn2slither", description="Train a snake agent.")
    parser.add_argument("--lr", type=float, default=DEFAULT_LR, help="learning rate")
    parser.add_argument("--output", default=DEFAULT_SAVE_PATH, help="model file to write")
    parser.add_argument("--episodes", type=int, default=DEFAULT_EPISODES)
    parser.add_argument("--draw", action="store_true", help="print the board after each move")
    args = parser.parse_args(argv)

    model = init_model()
    training(model, args.lr, args.output, args.draw, args.episodes)
    return 0


if __name__ == "__main__":
    sys.exit(main())