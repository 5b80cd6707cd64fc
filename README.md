# nnxx

Small dense neural networks in pure Python, with no dependencies.

nnxx provides a fixed-shape `Matrix` type and the usual activation
functions. It also provides a mean-squared-error loss and layers that
support forward passes and backpropagation. You can use these parts to
build and train small fully connected networks.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Quick start

A training set is a `Matrix` with one row per case. Each row holds the
input values first and then the expected output values.

```python
from nnxx.matrix import Matrix
from nnxx.dense import relu_dense_layer
from nnxx.model import GenericModel

test_and = Matrix.from_rows([
    [0, 0, 0],
    [0, 1, 0],
    [1, 0, 0],
    [1, 1, 1],
])

model = GenericModel([relu_dense_layer(2, 4), relu_dense_layer(4, 1)])
model.train(test_and, 130, 1e-3)

print(model.cost(test_and))
print(float(model.forward(Matrix(2, 1, [1.0, 1.0]))))
```

`dense_neural_network(traits, *sizes)` in `nnxx.model` builds a chain of
`DenseLayer`s from a list of layer sizes, input size first. Every layer
uses the same `ActivationTraits`. For example:

```python
from nnxx.layers import RELU_TRAITS
from nnxx.model import dense_neural_network

model = dense_neural_network(RELU_TRAITS, 2, 4, 1)
```

`GenericModel` checks that the size of each layer matches the input size
of the next one. It raises `ValueError` when they do not match, and also
when a test set's width is not `input_n + output_n`.

## Building blocks

- `nnxx.matrix.Matrix(rows, cols, data=None)` is a row-major matrix of
  floats. `Matrix.from_rows` builds one from a list of rows. It supports:
  - element-wise `+`, `-` and `*` between matrices of the same shape;
  - `*` and `/` by a scalar;
  - matrix product with `a @ b`;
  - element access with `m[row, col]` and `at()`;
  - `transposed()`, `row()`, `col()`, `submatrix(x1, y1, x2, y2)`, with
    both ranges inclusive;
  - `apply()`, `fill()`, `fill_with()`, `accumulate()`, `copy()`,
    `tolist()` and `shape`.

  A 1x1 matrix converts to `float`. Out-of-range indices raise
  `IndexError`. Mismatched shapes raise `ValueError`.
- `nnxx.activation` has `identity`, `relu`, `leaky_relu`, `tanh`,
  `sigmoid`, `hard_sigmoid` and `hard_silu`. Each has a matching `*_dx`
  derivative. `sigmoid_dx` and `tanh_dx` take the function's output, not
  its input.
- `nnxx.loss` has `mse` and its gradient `mse_dx`, both over column
  vectors.
- `nnxx.initialization` has `he_weights`, `he_biases`, `xavier_weights`
  and `xavier_biases`, plus `rand_float(seed)`. All of them are
  deterministic. The bias initialisers return `0.0`.
- `nnxx.layers` has:
  - `ActivationTraits`, with the ready-made `IDENTITY_TRAITS`,
    `RELU_TRAITS`, `LEAKY_RELU_TRAITS` and `SIGMOID_TRAITS`;
  - the abstract `Layer`;
  - `ActivationLayer`, with the factories `relu_layer`,
    `leaky_relu_layer`, `tanh_layer`, `sigmoid_layer`,
    `hard_sigmoid_layer` and `hard_silu_layer`.
- `nnxx.dense` has:
  - `DenseLayer(prev_size, size, traits, offset)`, which computes
    `activation(weights @ input + biases)`;
  - the factories `dense_layer`, `relu_dense_layer` and
    `sigmoid_dense_layer`.

  All weights of one layer start with the same value. When no `offset` is
  given, each new layer takes fresh offsets from a process-wide counter.
  `randomize(offset)` refills the weights and biases.
- `nnxx.model` has `GenericModel`, with `depth`, `input_n`, `output_n`,
  `forward`, `activate`, `backprop`, `cost` and `train`. It also has
  `dense_neural_network`.

## Demo

```
nnxx-demo
nnxx-demo --dataset xor --iterations 500 --rate 0.01
```

The demo trains a 2-4-1 ReLU network on logical AND by default, for 130
epochs at a learning rate of 0.001. Before training, every layer is
initialised with offset 0. The demo then prints the model's cost and its
output for each pair of inputs. The options are:

- `--dataset` selects `and` or `xor`;
- `--iterations` sets the number of epochs;
- `--rate` sets the learning rate.

## What it does not do

- It does not save or load trained models.
- It has no graphical view of a network or of training.
- The only loss it computes is mean squared error.
- It trains with plain per-case gradient descent.