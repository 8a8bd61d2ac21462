"""The square game board with its apples."""

from __future__ import annotations

import random

from .errors import OutOfBoundsError, SquareNotEmptyError
from .geometry import Pos
from .square import GameObject, ObjectType, Square, SquareChar, UpdateType

_INITIAL_OBJECTS = (ObjectType.RED_APPLE, ObjectType.GREEN_APPLE, ObjectType.GREEN_APPLE)


class Board:
    """A `size` x `size` grid of squares holding one red and two green apples."""

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        if size <= 0:
            raise OutOfBoundsError("Board size must be positive")
        self.size = size
        self.rng = rng if rng is not None else random.Random()
        self.squares = [Square((row, col)) for row in range(size) for col in range(size)]
        self._spawn_initial()

    def _spawn_initial(self) -> None:
        for object_type in _INITIAL_OBJECTS:
            self.spawn_object(object_type)

    def update(self, timer: int, update_type: UpdateType, head: Pos) -> None:
        """Advance every snake square except the head."""
        for square in self.squares:
            if square.has_snake() and square.pos != tuple(head):
                square.update(timer, update_type)

    def get_square(self, pos: Pos) -> Square:
        row, col = pos
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfBoundsError()
        return self.squares[col + row * self.size]

    def random_pos(self) -> Pos:
        return (self.rng.randrange(self.size), self.rng.randrange(self.size))

    def spawn_object(self, object_type: ObjectType) -> None:
        """Place an object on a random square that holds neither object nor snake."""
        if not any(
            sq.obj.type == ObjectType.EMPTY and not sq.has_snake() for sq in self.squares
        ):
            raise SquareNotEmptyError("No free square to spawn object")
        obj = GameObject.of(object_type)
        while True:
            square = self.get_square(self.random_pos())
            if square.obj.type == ObjectType.EMPTY and not square.has_snake():
                square.obj = obj
                return

    def char_rep(self, head: Pos) -> list[str]:
        """Board characters row by row, surrounded by a wall, head marked."""
        stride = self.size + 2
        wall = SquareChar.WALL.value
        chars = [wall] * stride
        head = tuple(head)
        for row in range(self.size):
            chars.append(wall)
            for col in range(self.size):
                if (row, col) == head:
                    chars.append(SquareChar.SNAKE_HEAD.value)
                else:
                    chars.append(self.get_square((row, col)).to_char())
            chars.append(wall)
        chars.extend([wall] * stride)
        return chars

    def reset(self) -> None:
        for square in self.squares:
            square.reset()
        self._spawn_initial()

    def render(self, head: Pos) -> str:
        """Text picture of the board, one line per row and a blank line after."""
        chars = self.char_rep(head)
        stride = self.size + 2
        rows = ("".join(chars[start:start + stride]) for start in range(0, len(chars), stride))
        return "".join(f"{row}\n" for row in rows) + "\n"