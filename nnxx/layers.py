"""Layer interface and element-wise activation layers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from . import activation as act
from .initialization import he_biases, he_weights, xavier_biases, xavier_weights
from .matrix import Matrix

Scalar = Callable[[float], float]
Initializer = Callable[[int, int, int], float]


@dataclass(frozen=True)
class ActivationTraits:
    """An activation function, its derivative and the initialisers that suit it."""

    activation_fn: Scalar
    activation_dx_fn: Scalar
    w_init_fn: Initializer
    b_init_fn: Initializer


IDENTITY_TRAITS = ActivationTraits(act.identity, act.identity_dx, he_weights, he_biases)
RELU_TRAITS = ActivationTraits(act.relu, act.relu_dx, he_weights, he_biases)
LEAKY_RELU_TRAITS = ActivationTraits(act.leaky_relu, act.leaky_relu_dx, he_weights, he_biases)
SIGMOID_TRAITS = ActivationTraits(act.sigmoid, act.sigmoid_dx, xavier_weights, xavier_biases)


class Layer(ABC):
    """A layer mapping a ``prev_size`` column vector to a ``size`` column vector.

    ``activate`` records the input and output of a training pass, and
    ``backprop`` leaves the gradient with respect to the input in
    ``last_gradient`` for the layer before it.
    """

    def __init__(self, prev_size: int, size: int) -> None:
        if prev_size < 1 or size < 1:
            raise ValueError(f"layer sizes must be positive, got {prev_size} -> {size}")
        self.prev_size = prev_size
        self.size = size
        self.last_input = Matrix(prev_size, 1)
        self.last_gradient = Matrix(prev_size, 1)
        self.last_output = Matrix(size, 1)

    @staticmethod
    def _check(vector: Matrix, rows: int, what: str) -> None:
        if vector.shape != (rows, 1):
            raise ValueError(f"{what} must be a {rows}x1 column, got {vector.rows}x{vector.cols}")

    def forward(self, input: Matrix) -> Matrix:
        """Return the layer's output for ``input`` without recording anything."""
        self._check(input, self.prev_size, "input")
        return self._forward(input)

    def activate(self, input: Matrix) -> None:
        """Run a training pass on ``input`` and remember its values."""
        self._check(input, self.prev_size, "input")
        self._activate(input)

    def backprop(self, gradient: Matrix, rate: float) -> None:
        """Take the loss gradient of the output and update the layer."""
        self._check(gradient, self.size, "gradient")
        self._backprop(gradient, rate)

    @abstractmethod
    def _forward(self, input: Matrix) -> Matrix:
        """Compute the output for a checked input."""

    @abstractmethod
    def _activate(self, input: Matrix) -> None:
        """Record a training pass for a checked input."""

    @abstractmethod
    def _backprop(self, gradient: Matrix, rate: float) -> None:
        """Propagate a checked gradient."""


class ActivationLayer(Layer):
    """Applies a scalar function to every element; has nothing to learn."""

    def __init__(self, size: int, activation_fn: Scalar, activation_dx_fn: Scalar) -> None:
        super().__init__(size, size)
        self.activation_fn = activation_fn
        self.activation_dx_fn = activation_dx_fn

    def forward(self, input: Matrix) -> Matrix:
        return super().forward(input)

    def activate(self, input: Matrix) -> None:
        super().activate(input)

    def backprop(self, gradient: Matrix, rate: float) -> None:
        super().backprop(gradient, rate)

    def _forward(self, input: Matrix) -> Matrix:
        return input.copy().apply(self.activation_fn)

    def _activate(self, input: Matrix) -> None:
        self.last_input = input.copy()
        self.last_output = input.copy().apply(self.activation_fn)

    def _backprop(self, gradient: Matrix, rate: float) -> None:
        derivative = self.last_input.copy().apply(self.activation_dx_fn)
        self.last_gradient = gradient * derivative


def relu_layer(size: int) -> ActivationLayer:
    return ActivationLayer(size, act.relu, act.relu_dx)


def leaky_relu_layer(size: int) -> ActivationLayer:
    return ActivationLayer(size, act.leaky_relu, act.leaky_relu_dx)


def tanh_layer(size: int) -> ActivationLayer:
    return ActivationLayer(size, act.tanh, act.tanh_dx)


def sigmoid_layer(size: int) -> ActivationLayer:
    return ActivationLayer(size, act.sigmoid, act.sigmoid_dx)


def hard_sigmoid_layer(size: int) -> ActivationLayer:
    return ActivationLayer(size, act.hard_sigmoid, act.hard_sigmoid_dx)


def hard_silu_layer(size: int) -> ActivationLayer:
    return ActivationLayer(size, act.hard_silu, act.hard_silu_dx)