"""Experience tuples and the replay memory they are sampled from."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass

from .geometry import Direction, Reward


@dataclass(frozen=True)
class Experience:
    """One transition observed while playing."""

    state: list[float]
    action: Direction
    reward: Reward | int
    next_state: list[float]
    done: bool


class ReplayBuffer:
    """Bounded memory of experiences; the oldest are dropped first."""

    def __init__(self, capacity: int, rng: random.Random | None = None) -> None:
        if capacity <= 0:
            raise ValueError("Replay buffer capacity must be positive")
        self.capacity = capacity
        self.rng = rng if rng is not None else random.Random()
        self._buffer: deque[Experience] = deque(maxlen=capacity)

    def add(self, experience: Experience) -> None:
        self._buffer.append(experience)

    def sample(self, batch_size: int) -> list[Experience]:
        """Pick up to `batch_size` distinct experiences, kept in insertion order."""
        items = list(self._buffer)
        count = min(max(batch_size, 0), len(items))
        chosen = sorted(self.rng.sample(range(len(items)), count))
        return [items[i] for i in chosen]

    def is_ready(self, batch_size: int) -> bool:
        return len(self._buffer) >= batch_size

    def __len__(self) -> int:
        return len(self._buffer)