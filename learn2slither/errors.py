"""Exceptions raised by the game and by the model code."""

from __future__ import annotations


class SnakeGameError(Exception):
    """Base class of every error raised by this package."""

    default_message = "Snake game error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class OutOfBoundsError(SnakeGameError, ValueError):
    default_message = "Out of bounds arguments"


class SquareNotEmptyError(SnakeGameError, ValueError):
    default_message = "Square is not empty"


class SnakeOnSquareError(SnakeGameError, ValueError):
    default_message = "Snake already on square"


class ModelError(SnakeGameError, RuntimeError):
    default_message = "Model error"


class LayerTypeError(ModelError):
    default_message = "Mismatch between layers type"


class ModelOpenError(ModelError):
    default_message = "Failed to open model file"


class DenseDimensionError(ModelError):
    default_message = "Dimension error in Dense layer"


class UnknownLayerError(ModelError):
    default_message = "Unknown LayerType in model file"


class ModelReadError(ModelError):
    default_message = "Error while reading model file"