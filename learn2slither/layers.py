"""Network layers: a fully connected layer and a ReLU activation."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import IntEnum

import numpy as np

from .errors import ModelError

WEIGHT_DECAY = 1e-4


class LayerType(IntEnum):
    BASE = 0
    DENSE = 1
    RELU = 2


class Layer(ABC):
    """A layer that maps a batch forward and its gradient backward."""

    layer_type: LayerType = LayerType.BASE
    can_load: bool = False

    @abstractmethod
    def forward(self, x: np.ndarray) -> np.ndarray:
        """Compute the layer output, remembering what backward needs."""

    @abstractmethod
    def backward(self, grad_output: np.ndarray, lr: float) -> np.ndarray:
        """Update parameters and return the gradient for the previous layer."""


class Dense(Layer):
    """Fully connected layer with He initialisation and clipped gradients."""

    layer_type = LayerType.DENSE
    can_load = True

    def __init__(self, in_dim: int, out_dim: int, rng: np.random.Generator | None = None) -> None:
        rng = rng if rng is not None else np.random.default_rng()
        stddev = math.sqrt(2.0 / in_dim)
        self.weights = (rng.standard_normal((in_dim, out_dim)) * stddev).astype(np.float32)
        self.biases = np.zeros((1, out_dim), dtype=np.float32)
        self._x: np.ndarray | None = None

    def forward(self, x: np.ndarray) -> np.ndarray:
        self._x = np.asarray(x, dtype=np.float32)
        return self._x @ self.weights + self.biases

    def backward(self, grad_output: np.ndarray, lr: float) -> np.ndarray:
        if self._x is None:
            raise ModelError("backward called before forward")
        grad_output = np.asarray(grad_output, dtype=np.float32)
        d_weights = np.clip(self._x.T @ grad_output, -1.0, 1.0)
        d_biases = np.clip(grad_output.sum(axis=0, keepdims=True), -1.0, 1.0)
        d_input = grad_output @ self.weights.T

        self.weights = (self.weights - lr * (d_weights + WEIGHT_DECAY * self.weights)).astype(
            np.float32
        )
        self.biases = (self.biases - lr * d_biases).astype(np.float32)
        return d_input


class ReLU(Layer):
    """Rectified linear activation."""

    layer_type = LayerType.RELU

    def __init__(self) -> None:
        self._mask: np.ndarray | None = None

    def forward(self, x: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float32)
        self._mask = (x > 0).astype(np.float32)
        return x * self._mask

    def backward(self, grad_output: np.ndarray, lr: float) -> np.ndarray:
        if self._mask is None:
            raise ModelError("backward called before forward")
        return np.asarray(grad_output, dtype=np.float32) * self._mask