"""Board cells, the objects they hold and how the snake occupies them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .geometry import Pos, format_pos

SNAKE_COLOR = "lime"


class ObjectType(IntEnum):
    EMPTY = 1
    RED_APPLE = 2
    GREEN_APPLE = 3


class SquareChar(str, Enum):
    EMPTY = "0"
    SNAKE_HEAD = "H"
    WALL = "W"
    SNAKE_BODY = "S"
    GREEN_APPLE = "G"
    RED_APPLE = "R"


class UpdateType(IntEnum):
    """How a snake-occupied square changes on a tick; the value is the timer decrement."""

    GROW = 0
    NORMAL = 1
    SHRINK = 2
    NEW_SNAKE = 3
    RESET = 4


_OBJECT_NAMES = {
    ObjectType.EMPTY: "EMPTY",
    ObjectType.RED_APPLE: "RED_APPLE",
    ObjectType.GREEN_APPLE: "GREEN_APPLE",
}


@dataclass(frozen=True)
class GameObject:
    """An item lying on a square, with its display colour and character."""

    type: ObjectType
    color: str
    char: SquareChar

    @classmethod
    def of(cls, object_type: ObjectType) -> GameObject:
        return _OBJECTS[ObjectType(object_type)]

    def __str__(self) -> str:
        return f"{{ObjectType : {_OBJECT_NAMES[self.type]}}}"


_OBJECTS = {
    ObjectType.EMPTY: GameObject(ObjectType.EMPTY, "gray", SquareChar.EMPTY),
    ObjectType.RED_APPLE: GameObject(ObjectType.RED_APPLE, "red", SquareChar.RED_APPLE),
    ObjectType.GREEN_APPLE: GameObject(ObjectType.GREEN_APPLE, "green", SquareChar.GREEN_APPLE),
}


class Square:
    """One cell of the board.

    `timer` counts how many more ticks the snake occupies the square;
    -1 means the snake is not on it.
    """

    def __init__(self, pos: Pos = (0, 0), obj: GameObject | None = None) -> None:
        self.pos: Pos = pos
        self.timer: int = -1
        self.obj: GameObject = obj if obj is not None else GameObject.of(ObjectType.EMPTY)

    def has_snake(self) -> bool:
        return self.timer >= 0

    def update(self, new_timer: int, update_type: UpdateType) -> None:
        """Advance the snake timer of this square."""
        if self.timer < 0 and update_type != UpdateType.NEW_SNAKE:
            return
        if update_type == UpdateType.NEW_SNAKE:
            if self.timer <= 0:
                self.timer = new_timer
            return
        self.timer -= int(update_type)
        if self.timer <= 0:
            self.timer = -1
            self.obj = GameObject.of(ObjectType.EMPTY)

    def to_char(self) -> str:
        if self.has_snake():
            return SquareChar.SNAKE_BODY.value
        return self.obj.char.value

    def color(self) -> str:
        if self.timer >= 1:
            return SNAKE_COLOR
        return self.obj.color

    def reset(self) -> None:
        self.timer = -1
        self.obj = GameObject.of(ObjectType.EMPTY)

    def describe(self) -> str:
        return (
            f"Square at pos : {format_pos(self.pos)}\n"
            f"Object : {self.obj}\n"
            f"Snake_timer : {self.timer}"
        )