"""Train a small network on the logical 'and' and print what it learned."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .layers import RELU_TRAITS
from .matrix import Matrix
from .model import dense_neural_network

TEST_AND = Matrix.from_rows([
    [0, 0, 0],
    [0, 1, 0],
    [1, 0, 0],
    [1, 1, 1],
])

TEST_XOR = Matrix.from_rows([
    [0, 0, 0],
    [0, 1, 1],
    [1, 0, 1],
    [1, 1, 0],
])

_DATASETS = {"and": TEST_AND, "xor": TEST_XOR}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="nnxx", description=__doc__)
    parser.add_argument("--iterations", type=int, default=130, help="training epochs")
    parser.add_argument("--rate", type=float, default=1e-3, help="learning rate")
    parser.add_argument("--dataset", choices=sorted(_DATASETS), default="and")
    args = parser.parse_args(argv)
    if args.iterations < 0:
        parser.error("--iterations must not be negative")

    testset = _DATASETS[args.dataset]
    model = dense_neural_network(RELU_TRAITS, 2, 4, 1)
    for layer in model.layers:
        layer.randomize(0)
    model.train(testset, args.iterations, args.rate)

    print(f"nnxx : trained '{args.dataset}' model over {args.iterations} epochs")
    print(f"nnxx : model cost : {model.cost(testset):.4f}")

    for i in (0.0, 1.0):
        for j in (0.0, 1.0):
            result = float(model.forward(Matrix(2, 1, [i, j])))
            print(f"{i:.2f} op {j:.2f} eq {result:.4f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())