[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "candle"
version = "0.1.0"
description = "Core of a layered game engine: events, input, layers, cameras, scenes and a renderer front end"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game-engine", "events", "layers", "camera", "scene", "entity", "renderer", "profiling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.setuptools.packages.find]
include = ["candle*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
