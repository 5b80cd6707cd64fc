"""Sequential models built from layers, and fully connected networks."""

from __future__ import annotations

from collections.abc import Iterable

from .dense import DenseLayer
from .layers import ActivationTraits, Layer
from .loss import mse, mse_dx
from .matrix import Matrix


class GenericModel:
    """A chain of layers, each feeding its output to the next."""

    def __init__(self, layers: Iterable[Layer]) -> None:
        self.layers: list[Layer] = list(layers)
        if not self.layers:
            raise ValueError("a model needs at least one layer")
        for before, after in zip(self.layers, self.layers[1:]):
            if before.size != after.prev_size:
                raise ValueError(
                    f"layer of size {before.size} cannot feed a layer expecting {after.prev_size}"
                )

    @property
    def depth(self) -> int:
        """Number of layers."""
        return len(self.layers)

    @property
    def input_n(self) -> int:
        """Size of the input vector."""
        return self.layers[0].prev_size

    @property
    def output_n(self) -> int:
        """Size of the output vector."""
        return self.layers[-1].size

    def forward(self, input: Matrix) -> Matrix:
        """Return the model's output for ``input`` without recording anything."""
        output = input
        for layer in self.layers:
            output = layer.forward(output)
        return output

    def activate(self, input: Matrix) -> None:
        """Run a training pass, each layer remembering its input and output."""
        current = input
        for layer in self.layers:
            layer.activate(current)
            current = layer.last_output

    def backprop(self, expected: Matrix, rate: float) -> None:
        """Propagate the mean squared error gradient back through every layer."""
        last = self.layers[-1]
        gradient = mse_dx(last.last_output, expected)
        for layer in reversed(self.layers):
            layer.backprop(gradient, rate)
            gradient = layer.last_gradient

    def _split(self, testset: Matrix) -> list[tuple[Matrix, Matrix]]:
        width = self.input_n + self.output_n
        if testset.cols != width:
            raise ValueError(
                f"test set rows must hold {width} values ({self.input_n} in, "
                f"{self.output_n} out), got {testset.cols}"
            )
        last = testset.rows - 1
        inputs = testset.submatrix(0, 0, last, self.input_n - 1)
        outputs = testset.submatrix(0, self.input_n, last, width - 1)
        return [
            (inputs.row(i).transposed(), outputs.row(i).transposed())
            for i in range(testset.rows)
        ]

    def cost(self, testset: Matrix) -> float:
        """Mean over the test set of the squared error of each case.

        Each row of ``testset`` holds the inputs followed by the expected outputs.
        """
        cases = self._split(testset)
        total = sum((mse(self.forward(inp), expected) for inp, expected in cases), 0.0)
        return total / len(cases)

    def train(self, testset: Matrix, iterations: int, rate: float) -> None:
        """Run ``iterations`` epochs of per-case gradient descent over ``testset``."""
        if iterations < 0:
            raise ValueError(f"iterations must not be negative, got {iterations}")
        cases = self._split(testset)
        for _ in range(iterations):
            for inp, expected in cases:
                self.activate(inp)
                self.backprop(expected, rate)


def dense_neural_network(traits: ActivationTraits, *args: int) -> GenericModel:
    """Build a fully connected network whose layer sizes are ``args``, input first."""
    if len(args) < 2:
        raise ValueError("a dense network needs at least an input and an output size")
    return GenericModel(
        DenseLayer(prev_size, size, traits) for prev_size, size in zip(args, args[1:])
    )