"""The snake, what it sees, and the game that wraps board and snake."""

from __future__ import annotations

import random

from .board import Board
from .errors import OutOfBoundsError
from .geometry import Direction, Pos, Reward, move_pos
from .square import GameObject, ObjectType, SquareChar, UpdateType

INITIAL_LENGTH = 3
MAX_LENGTH = 15
DEFAULT_BOARD_SIZE = 10

_SPAWN_DIRECTIONS = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)

# Raw cell codes, divided by 3 to keep the state within [-1, 1].
_CELL_CODES = {
    SquareChar.EMPTY.value: 0,
    SquareChar.SNAKE_HEAD.value: 1,
    SquareChar.WALL.value: 3,
    SquareChar.SNAKE_BODY.value: 2,
    SquareChar.GREEN_APPLE.value: -1,
    SquareChar.RED_APPLE.value: -2,
}
_NORMALIZER = 3.0

Vision = tuple[list[str], list[str]]


class Snake:
    """A snake living on a board.

    Each body square carries a timer; the head has the largest one and the
    timers count down as the snake moves on.
    """

    def __init__(self, board: Board, rng: random.Random | None = None) -> None:
        self.board = board
        self.rng = rng if rng is not None else board.rng
        self.length = INITIAL_LENGTH
        self.dead = False
        self.pos: Pos = (0, 0)
        self.direction = Direction.UP
        self._place()

    def _in_bounds(self, pos: Pos) -> bool:
        size = self.board.size
        return 0 <= pos[0] < size and 0 <= pos[1] < size

    def _place(self) -> None:
        """Put a three-square snake at a random spot facing a random way."""
        while True:
            head = self.board.random_pos()
            direction = self.rng.choice(_SPAWN_DIRECTIONS)

            first_turn = self.rng.choice(_SPAWN_DIRECTIONS)
            while first_turn == direction:
                first_turn = self.rng.choice(_SPAWN_DIRECTIONS)
            tail1 = move_pos(head, first_turn)
            if not self._in_bounds(tail1):
                continue

            tail2 = move_pos(tail1, self.rng.choice(_SPAWN_DIRECTIONS))
            if not self._in_bounds(tail2) or tail2 == head:
                continue

            self.pos = head
            self.direction = direction
            for timer, cell in ((3, head), (2, tail1), (1, tail2)):
                self.board.get_square(cell).update(timer, UpdateType.NEW_SNAKE)
            return

    def reset(self) -> None:
        """Place a fresh snake on the board."""
        self._place()
        self.length = INITIAL_LENGTH
        self.dead = False

    def _die(self) -> Reward:
        self.dead = True
        return Reward.DIED

    def move(self, direction: Direction | None = None) -> Reward:
        """Advance one square, turning to `direction` unless it is a reversal."""
        new_dir = self.direction
        if direction is not None and direction != self.direction.inverse():
            new_dir = direction
        new_pos = move_pos(self.pos, new_dir)

        try:
            square = self.board.get_square(new_pos)
        except OutOfBoundsError:
            return self._die()
        if square.has_snake():
            return self._die()

        reward = Reward.NOTHING
        update = UpdateType.NORMAL
        object_type = square.obj.type
        if object_type == ObjectType.GREEN_APPLE:
            self.length += 1
            update = UpdateType.GROW
            reward = Reward.EAT_GREEN
        elif object_type == ObjectType.RED_APPLE:
            self.length -= 1
            update = UpdateType.SHRINK
            if self.length == 0:
                return self._die()
            reward = Reward.EAT_RED

        if update != UpdateType.NORMAL:
            self.board.spawn_object(object_type)
            square.obj = GameObject.of(ObjectType.EMPTY)

        square.update(self.length, UpdateType.NEW_SNAKE)
        self.board.update(self.length, update, new_pos)
        self.pos = new_pos
        self.direction = new_dir
        return reward

    def vision(self) -> Vision:
        """The walled row and column of board characters through the head."""
        chars = self.board.char_rep(self.pos)
        stride = self.board.size + 2
        row = self.pos[0] + 1
        col = self.pos[1] + 1
        horizontal = chars[row * stride:(row + 1) * stride]
        vertical = chars[col::stride]
        return horizontal, vertical

    def state(self) -> list[float]:
        """Normalised vision: the head row, then the head column without the head."""
        horizontal, vertical = self.vision()
        values = [_CELL_CODES.get(c, 0) / _NORMALIZER for c in horizontal]
        values.extend(
            _CELL_CODES.get(c, 0) / _NORMALIZER
            for c in vertical
            if c != SquareChar.SNAKE_HEAD.value
        )
        return values

    def show_vision(self) -> str:
        """Text picture of what the snake sees: a cross centred on its head."""
        horizontal, vertical = self.vision()
        size = len(horizontal)
        center_y = self.pos[0] + 1
        center_x = self.pos[1] + 1
        lines = []
        for y in range(size):
            if y == center_y:
                line = "".join(
                    SquareChar.SNAKE_HEAD.value if x == center_x else horizontal[x]
                    for x in range(size)
                )
            else:
                line = "".join(vertical[y] if x == center_x else " " for x in range(size))
            lines.append(line)
        return "".join(f"{line}\n" for line in lines)


class Game:
    """A board together with its snake."""

    def __init__(self, size: int = DEFAULT_BOARD_SIZE, rng: random.Random | None = None) -> None:
        self.board = Board(size, rng)
        self.snake = Snake(self.board, self.board.rng)

    def reset(self) -> None:
        """Clear the board, respawn apples and a new snake."""
        self.board.reset()
        self.snake.reset()

    def is_terminal(self) -> bool:
        return self.snake.dead or self.snake.length >= MAX_LENGTH

    def step(self, action: Direction) -> tuple[list[float], Reward]:
        """Move the snake once and return the new state with the reward."""
        reward = self.snake.move(action)
        return self.snake.state(), reward