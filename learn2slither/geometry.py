"""Grid directions, positions and reward values."""

from __future__ import annotations

from enum import Enum, IntEnum

Pos = tuple[int, int]

WIDTH = 1920
HEIGHT = 950


class Direction(Enum):
    """A unit step on the grid, as a (row, column) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    RIGHT = (0, 1)
    LEFT = (0, -1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    def index(self) -> int:
        """Position of this direction in the network's action vector."""
        return _ACTION_INDEX[self]

    def inverse(self) -> Direction:
        """The opposite direction."""
        return Direction((-self.dr, -self.dc))

    @classmethod
    def from_index(cls, index: int) -> Direction:
        """Direction for an action index as produced by `index`."""
        return ACTIONS[index]


ACTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)
_ACTION_INDEX = {direction: i for i, direction in enumerate(ACTIONS)}


class Reward(IntEnum):
    """Reward handed out for the outcome of one move."""

    NOTHING = 0
    EAT_RED = -1
    DIED = -5
    EAT_GREEN = 5


def move_pos(pos: Pos, direction: Direction) -> Pos:
    """Return the position one step from `pos` in `direction`."""
    return (pos[0] + direction.dr, pos[1] + direction.dc)


def format_pos(pos: Pos) -> str:
    """Format a position as ``{row, col}``."""
    return f"{{{pos[0]}, {pos[1]}}}"