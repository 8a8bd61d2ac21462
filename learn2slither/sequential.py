"""A stack of layers with a binary save format."""

from __future__ import annotations

import os
import struct
from typing import BinaryIO

import numpy as np

from .errors import (
    DenseDimensionError,
    LayerTypeError,
    ModelOpenError,
    ModelReadError,
    UnknownLayerError,
)
from .layers import Dense, Layer, LayerType, ReLU

_SIZE = struct.Struct("<Q")
_TYPE = struct.Struct("<i")
_U32 = struct.Struct("<I")
_FLOAT = np.dtype("<f4")


def _read(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise ModelReadError()
    return data


def _read_struct(stream: BinaryIO, layout: struct.Struct) -> int:
    return layout.unpack(_read(stream, layout.size))[0]


def _read_floats(stream: BinaryIO, count: int) -> np.ndarray:
    return np.frombuffer(_read(stream, count * _FLOAT.itemsize), dtype=_FLOAT)


class Sequential:
    """Layers applied one after another."""

    def __init__(self) -> None:
        self.layers: list[Layer] = []

    def add(self, layer: Layer) -> None:
        self.layers.append(layer)

    def forward(self, x: np.ndarray) -> np.ndarray:
        out = x
        for layer in self.layers:
            out = layer.forward(out)
        return out

    def backward(self, grad_output: np.ndarray, lr: float) -> np.ndarray:
        grad = grad_output
        for layer in reversed(self.layers):
            grad = layer.backward(grad, lr)
        return grad

    def save_model(self, path: str | os.PathLike[str]) -> None:
        """Write layer types, then each dense layer's weights (column-major) and biases."""
        try:
            stream = open(path, "wb")
        except OSError as exc:
            raise ModelOpenError("Failed to open file for saving model") from exc
        with stream:
            stream.write(_SIZE.pack(len(self.layers)))
            for layer in self.layers:
                stream.write(_TYPE.pack(layer.layer_type))
            for layer in self.layers:
                if not layer.can_load:
                    continue
                weights = np.asarray(layer.weights, dtype=_FLOAT)
                in_dim, out_dim = weights.shape
                stream.write(_TYPE.pack(layer.layer_type))
                stream.write(_U32.pack(2))
                stream.write(_U32.pack(in_dim) + _U32.pack(out_dim))
                stream.write(weights.tobytes(order="F"))
                biases = np.asarray(layer.biases, dtype=_FLOAT)
                stream.write(_SIZE.pack(biases.size))
                stream.write(biases.tobytes(order="F"))

    def load_model(self, path: str | os.PathLike[str]) -> None:
        """Read layers from a file written by `save_model` and append them."""
        try:
            stream = open(path, "rb")
        except OSError as exc:
            raise ModelOpenError("Failed to open file for loading model") from exc
        with stream:
            total = _read_struct(stream, _SIZE)
            types = [_read_struct(stream, _TYPE) for _ in range(total)]
            self.layers.extend([self._read_layer(stream, t) for t in types])

    @staticmethod
    def _read_layer(stream: BinaryIO, raw_type: int) -> Layer:
        if raw_type == LayerType.RELU:
            return ReLU()
        if raw_type != LayerType.DENSE:
            raise UnknownLayerError()

        if _read_struct(stream, _TYPE) != raw_type:
            raise LayerTypeError()
        if _read_struct(stream, _U32) != 2:
            raise DenseDimensionError()
        in_dim = _read_struct(stream, _U32)
        out_dim = _read_struct(stream, _U32)
        if in_dim == 0 or out_dim == 0:
            raise DenseDimensionError()
        weights = _read_floats(stream, in_dim * out_dim).reshape((in_dim, out_dim), order="F")

        bias_size = _read_struct(stream, _SIZE)
        if bias_size != out_dim:
            raise DenseDimensionError()
        biases = _read_floats(stream, bias_size).reshape((1, out_dim))

        dense = Dense(in_dim, out_dim)
        dense.weights = weights.astype(np.float32)
        dense.biases = biases.astype(np.float32)
        return dense