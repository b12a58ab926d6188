"""Core of a layered game engine: events, input, layers, cameras, scenes, shaders, profiling and a renderer front end."""

__version__ = "0.1.0"