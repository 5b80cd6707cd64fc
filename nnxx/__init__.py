"""Small dense neural networks: matrices, activations, loss, layers, models and a demo."""

__version__ = "0.0.1"

__all__ = ["activation", "dense", "demo", "initialization", "layers", "loss", "matrix", "model"]