import pytest

from learn2slither.errors import (
    DenseDimensionError,
    LayerTypeError,
    ModelError,
    ModelOpenError,
    ModelReadError,
    OutOfBoundsError,
    SnakeGameError,
    SnakeOnSquareError,
    SquareNotEmptyError,
    UnknownLayerError,
)


@pytest.mark.parametrize(
    "cls, message",
    [
        (OutOfBoundsError, "Out of bounds arguments"),
        (SquareNotEmptyError, "Square is not empty"),
        (SnakeOnSquareError, "Snake already on square"),
        (LayerTypeError, "Mismatch between layers type"),
        (DenseDimensionError, "Dimension error in Dense layer"),
        (UnknownLayerError, "Unknown LayerType in model file"),
        (ModelReadError, "Error while reading model file"),
    ],
)
def test_default_messages(cls, message):
    with pytest.raises(cls) as info:
        raise cls()
    assert str(info.value) == message


@pytest.mark.parametrize(
    "cls, message",
    [
        (OutOfBoundsError, "Out of bounds arguments"),
        (SquareNotEmptyError, "Square is not empty"),
        (SnakeOnSquareError, "Snake already on square"),
    ],
)
def test_argument_errors_are_value_errors(cls, message):
    err = cls()
    assert str(err) == message
    assert isinstance(err, ValueError)
    assert isinstance(err, SnakeGameError)


@pytest.mark.parametrize(
    "cls",
    [LayerTypeError, ModelOpenError, DenseDimensionError, UnknownLayerError, ModelReadError],
)
def test_model_errors_hierarchy(cls):
    err = cls("broken model")
    assert str(err) == "broken model"
    assert isinstance(err, ModelError)
    assert isinstance(err, RuntimeError)
    assert isinstance(err, SnakeGameError)


def test_custom_message():
    err = ModelOpenError("Failed to open file for saving model")
    assert str(err) == "Failed to open file for saving model"