import pytest

from nnxx.dense import DenseLayer
from nnxx.layers import IDENTITY_TRAITS, RELU_TRAITS, SIGMOID_TRAITS, relu_layer
from nnxx.matrix import Matrix
from nnxx.model import GenericModel, dense_neural_network


def _linear_model():
    return GenericModel([DenseLayer(2, 1, IDENTITY_TRAITS, offset=0)])


def _sum_dataset():
    return Matrix.from_rows([
        [0, 0, 0],
        [0, 1, 1],
        [1, 0, 1],
        [1, 1, 2],
    ])


def test_shape_properties():
    model = dense_neural_network(RELU_TRAITS, 3, 5, 2)
    assert model.depth == 2
    assert model.input_n == 3
    assert model.output_n == 2


def test_dense_network_layer_sizes():
    model = dense_neural_network(SIGMOID_TRAITS, 2, 4, 3, 1)
    assert [(layer.prev_size, layer.size) for layer in model.layers] == [(2, 4), (4, 3), (3, 1)]
    assert all(layer.traits is SIGMOID_TRAITS for layer in model.layers)


def test_dense_network_needs_two_sizes():
    with pytest.raises(ValueError):
        dense_neural_network(RELU_TRAITS, 3)


def test_empty_model_rejected():
    with pytest.raises(ValueError):
        GenericModel([])


def test_mismatched_layers_rejected():
    with pytest.raises(ValueError):
        GenericModel([DenseLayer(2, 3, offset=0), DenseLayer(4, 1, offset=0)])


def test_mixed_layer_kinds_chain():
    model = GenericModel([DenseLayer(2, 3, offset=0), relu_layer(3), DenseLayer(3, 1, offset=0)])
    out = model.forward(Matrix(2, 1, [1.0, -1.0]))
    assert out.shape == (1, 1)


def test_forward_output_shape():
    model = dense_neural_network(RELU_TRAITS, 2, 4, 3)
    assert model.forward(Matrix(2, 1, [0.5, 1.0])).shape == (3, 1)


def test_forward_rejects_wrong_input():
    model = dense_neural_network(RELU_TRAITS, 2, 4, 1)
    with pytest.raises(ValueError):
        model.forward(Matrix(3, 1))


def test_activate_matches_forward():
    model = GenericModel([DenseLayer(2, 3, RELU_TRAITS, offset=1), DenseLayer(3, 1, offset=2)])
    inp = Matrix(2, 1, [0.3, 0.9])
    model.activate(inp)
    assert model.layers[-1].last_output == model.forward(inp)
    assert model.layers[0].last_input == inp


def test_backprop_with_exact_target_keeps_weights():
    model = GenericModel([DenseLayer(2, 2, offset=0), DenseLayer(2, 1, offset=0)])
    inp = Matrix(2, 1, [1.0, 2.0])
    target = model.forward(inp)
    before = [layer.weights.copy() for layer in model.layers]
    model.activate(inp)
    model.backprop(target, 0.5)
    assert [layer.weights for layer in model.layers] == before


def test_cost_zero_for_perfect_model():
    layer = DenseLayer(1, 1, IDENTITY_TRAITS, offset=0)
    layer.weights.fill(1.0)
    layer.biases.fill(0.0)
    model = GenericModel([layer])
    testset = Matrix.from_rows([[1, 1], [2, 2], [-3, -3]])
    assert model.cost(testset) == pytest.approx(0.0)


def test_cost_of_zero_model():
    layer = DenseLayer(1, 1, IDENTITY_TRAITS, offset=0)
    layer.weights.fill(0.0)
    model = GenericModel([layer])
    assert model.cost(Matrix.from_rows([[1, 2]])) == pytest.approx(4.0)


def test_cost_rejects_wrong_width():
    model = _linear_model()
    with pytest.raises(ValueError):
        model.cost(Matrix(4, 2))


def test_training_reduces_cost():
    model = _linear_model()
    data = _sum_dataset()
    before = model.cost(data)
    model.train(data, 200, 0.05)
    after = model.cost(data)
    assert after < before
    assert after == pytest.approx(0.0, abs=1e-3)


def test_zero_iterations_changes_nothing():
    model = _linear_model()
    weights = model.layers[0].weights.copy()
    model.train(_sum_dataset(), 0, 0.1)
    assert model.layers[0].weights == weights


def test_negative_iterations_rejected():
    with pytest.raises(ValueError):
        _linear_model().train(_sum_dataset(), -1, 0.1)


def test_train_rejects_wrong_width():
    with pytest.raises(ValueError):
        _linear_model().train(Matrix(2, 4), 1, 0.1)