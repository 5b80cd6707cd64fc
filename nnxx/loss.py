"""Mean squared error over column vectors."""

from __future__ import annotations

from .matrix import Matrix


def _check_columns(output: Matrix, expected: Matrix) -> None:
    if output.cols != 1 or expected.cols != 1:
        raise ValueError("loss functions take column vectors")
    if output.rows != expected.rows:
        raise ValueError(f"size mismatch: {output.rows} vs {expected.rows}")


def mse(output: Matrix, expected: Matrix) -> float:
    """Mean of the squared differences between two column vectors."""
    _check_columns(output, expected)
    diff = expected - output
    diff *= diff
    return diff.accumulate() / output.rows


def mse_dx(output: Matrix, expected: Matrix) -> Matrix:
    """Gradient of :func:`mse` with respect to ``output``."""
    _check_columns(output, expected)
    size = output.rows
    return (output - expected).apply(lambda v: v * 2).apply(lambda v: v / size)