import pytest

from nnxx.initialization import (
    he_biases,
    he_weights,
    rand_float,
    xavier_biases,
    xavier_weights,
)


def test_rand_float_deterministic():
    forward = [rand_float(seed) for seed in range(5)]
    backward = [rand_float(seed) for seed in reversed(range(5))]
    assert forward == backward[::-1]
    assert all(0.0 <= value < 1.0 for value in forward)
    text_value = rand_float("seed")
    assert rand_float("se" + "ed") == text_value
    assert 0.0 <= text_value < 1.0


@pytest.mark.parametrize("seed", range(20))
def test_rand_float_range(seed):
    assert 0.0 <= rand_float(seed) < 1.0


def test_rand_float_varies_with_seed():
    assert len({rand_float(seed) for seed in range(50)}) > 40


@pytest.mark.parametrize("offset", range(10))
def test_he_weights_bounded(offset):
    value = he_weights(offset, 4, 3)
    assert 0.0 <= value < 2.0 / 4


def test_he_weights_deterministic_and_offset_dependent():
    assert he_weights(3, 2, 5) == he_weights(3, 2, 5)
    assert len({he_weights(off, 2, 5) for off in range(20)}) > 15


def test_he_weights_ignore_n_out():
    assert he_weights(1, 3, 1) == he_weights(1, 3, 9)


@pytest.mark.parametrize("offset", range(10))
def test_xavier_weights_bounded(offset):
    value = xavier_weights(offset, 2, 6)
    assert 0.0 <= value < 2.0 / (2 + 6)


def test_xavier_depends_on_both_sizes():
    assert xavier_weights(0, 2, 2) == pytest.approx(xavier_weights(0, 1, 3))
    assert xavier_weights(0, 2, 2) == pytest.approx(2 * xavier_weights(0, 4, 4))


def test_biases_are_zero():
    assert he_biases(5, 3, 2) == 0.0
    assert xavier_biases(5, 3, 2) == 0.0


def test_invalid_sizes():
    with pytest.raises(ValueError):
        he_weights(0, 0, 1)
    with pytest.raises(ValueError):
        xavier_weights(0, 2, 0)