"""Scalar activation functions and their derivatives."""

from __future__ import annotations

import math

_LEAK = 0.01
_IDENTITY_SLOPE = 1


def identity(val: float) -> float:
    return float(val)


def identity_dx(val: float) -> float:
    """The identity has a constant slope of one."""
    return float(_IDENTITY_SLOPE)


def relu(val: float) -> float:
    return val if val > 0.0 else 0.0


def relu_dx(val: float) -> float:
    return float(val >= 0.0)


def leaky_relu(val: float) -> float:
    return val if val > 0.0 else val * _LEAK


def leaky_relu_dx(val: float) -> float:
    return 1.0 if val >= 0.0 else _LEAK


def tanh(val: float) -> float:
    return math.tanh(val)


def tanh_dx(val: float) -> float:
    """Derivative of tanh expressed in terms of the tanh output."""
    return 1.0 - val * val


def sigmoid(val: float) -> float:
    if val >= 0.0:
        return 1.0 / (1.0 + math.exp(-val))
    exp_val = math.exp(val)
    return exp_val / (1.0 + exp_val)


def sigmoid_dx(val: float) -> float:
    """Derivative of the sigmoid expressed in terms of the sigmoid output."""
    return val * (1.0 - val)


def hard_sigmoid(val: float) -> float:
    if val <= -3.0:
        return 0.0
    if val >= 3.0:
        return 1.0
    return val / 6.0 + 0.5


def hard_sigmoid_dx(val: float) -> float:
    if val <= -3.0:
        return 0.0
    if val >= 3.0:
        return 1.0
    return 1.0 / 6.0


def hard_silu(val: float) -> float:
    if val < -3.0:
        return 0.0
    if val > 3.0:
        return val
    return val * (val + 3.0) / 6.0


def hard_silu_dx(val: float) -> float:
    if val < -3.0:
        return 0.0
    if val > 3.0:
        return 1.0
    return (2.0 * val + 3.0) / 6.0