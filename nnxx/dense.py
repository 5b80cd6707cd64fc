"""Fully connected layers followed by an activation function."""

from __future__ import annotations

import itertools

from .layers import IDENTITY_TRAITS, RELU_TRAITS, SIGMOID_TRAITS, ActivationTraits, Layer
from .matrix import Matrix

_offsets = itertools.count()


class DenseLayer(Layer):
    """Computes ``activation(weights @ input + biases)``.

    Every weight is drawn with the same initialiser arguments, so all weights of
    one layer start equal. Without an explicit ``offset`` each new layer takes
    fresh offsets from a process-wide counter.
    """

    def __init__(
        self,
        prev_size: int,
        size: int,
        traits: ActivationTraits = IDENTITY_TRAITS,
        offset: int | None = None,
    ) -> None:
        super().__init__(prev_size, size)
        self.traits = traits
        self.weights = Matrix(size, prev_size)
        self.biases = Matrix(size, 1)
        self.raw_out = Matrix(size, 1)
        self.randomize(offset)

    def randomize(self, offset: int | None = None) -> None:
        """Refill weights and biases from the traits' initialisers."""
        if offset is None:
            w_offset, b_offset = next(_offsets), next(_offsets)
        else:
            w_offset = b_offset = offset
        self.weights.fill_with(self.traits.w_init_fn, w_offset, self.prev_size, self.size)
        self.biases.fill_with(self.traits.b_init_fn, b_offset, self.prev_size, self.size)

    def forward(self, input: Matrix) -> Matrix:
        return super().forward(input)

    def activate(self, input: Matrix) -> None:
        super().activate(input)

    def backprop(self, gradient: Matrix, rate: float) -> None:
        super().backprop(gradient, rate)

    def _forward(self, input: Matrix) -> Matrix:
        return (self.weights @ input + self.biases).apply(self.traits.activation_fn)

    def _activate(self, input: Matrix) -> None:
        self.last_input = input.copy()
        self.raw_out = self.weights @ self.last_input + self.biases
        self.last_output = self.raw_out.copy().apply(self.traits.activation_fn)

    def _backprop(self, gradient: Matrix, rate: float) -> None:
        derivative = self.raw_out.copy().apply(self.traits.activation_dx_fn)
        local = gradient * derivative
        weights_gradient = local @ self.last_input.transposed()

        self.weights -= weights_gradient * rate
        self.biases -= local * rate

        self.last_gradient = self.weights.transposed() @ local


def dense_layer(prev_size: int, size: int) -> DenseLayer:
    return DenseLayer(prev_size, size, IDENTITY_TRAITS)


def relu_dense_layer(prev_size: int, size: int) -> DenseLayer:
    return DenseLayer(prev_size, size, RELU_TRAITS)


def sigmoid_dense_layer(prev_size: int, size: int) -> DenseLayer:
    return DenseLayer(prev_size, size, SIGMOID_TRAITS)