[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nnxx"
version = "0.0.1"
description = "Small dense neural networks built from plain Python matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "machine learning", "matrix", "backpropagation", "dense layer"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nnxx-demo = "nnxx.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["nnxx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
