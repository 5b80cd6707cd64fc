"""Deterministic weight and bias initialisers."""

from __future__ import annotations

import random
from collections.abc import Hashable

_HE_SEED = 29
_XAVIER_SEED = 47


def rand_float(seed: int | str | bytes) -> float:
    """Return a float in ``[0, 1)`` that depends only on ``seed``."""
    return random.Random(seed).random()


def _require_positive(**sizes: int) -> None:
    for name, value in sizes.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def he_weights(offset: int, n_in: int, n_out: int) -> float:
    """He-style weight scaled by ``2 / n_in``."""
    _require_positive(n_in=n_in)
    return rand_float(_HE_SEED + offset) * (2.0 / n_in)


def he_biases(offset: int, n_in: int, n_out: int) -> float:
    return 0.0


def xavier_weights(offset: int, n_in: int, n_out: int) -> float:
    """Xavier-style weight scaled by ``2 / (n_in + n_out)``."""
    _require_positive(n_in=n_in, n_out=n_out)
    return rand_float(_XAVIER_SEED + offset) * (2.0 / (n_in + n_out))


def xavier_biases(offset: int, n_in: int, n_out: int) -> float:
    return 0.0