"""Shader sources, the ``#type`` section format and a named shader library."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

TYPE_TOKEN = "#type"
_LINE_BREAKS = "\r\n"


class ShaderType(Enum):
    """Pipeline stage a shader section is compiled for."""

    VERTEX = "vertex"
    FRAGMENT = "fragment"


class ShaderSyntaxError(ValueError):
    """A combined shader source does not follow the ``#type`` section format."""


_TYPE_NAMES = {
    "vertex": ShaderType.VERTEX,
    "fragment": ShaderType.FRAGMENT,
    "pixel": ShaderType.FRAGMENT,
}


def shader_type_from_string(name: str) -> ShaderType:
    """Map a ``#type`` name (vertex, fragment or pixel) to its stage."""
    try:
        return _TYPE_NAMES[name]
    except KeyError:
        raise ValueError(f"unknown shader type: {name!r}") from None


def read_source(path: str | os.PathLike[str]) -> str:
    """Read a shader file exactly as stored, line endings included."""
    with open(path, encoding="utf-8", newline="") as stream:
        return stream.read()


def _find_first_of(source: str, chars: str, start: int) -> int:
    return next((i for i in range(start, len(source)) if source[i] in chars), -1)


def _find_first_not_of(source: str, chars: str, start: int) -> int:
    return next((i for i in range(start, len(source)) if source[i] not in chars), -1)


def preprocess(source: str) -> dict[ShaderType, str]:
    """Split a combined source into per-stage sources.

    Each section starts with a line ``#type <name>`` and runs up to the next
    such line or the end of the text.
    """
    sources: dict[ShaderType, str] = {}
    pos = source.find(TYPE_TOKEN)
    while pos != -1:
        eol = _find_first_of(source, _LINE_BREAKS, pos)
        if eol == -1:
            raise ShaderSyntaxError("shader type declaration is not followed by a line break")
        begin = pos + len(TYPE_TOKEN) + 1
        type_name = source[begin:eol]
        try:
            stage = shader_type_from_string(type_name)
        except ValueError as error:
            raise ShaderSyntaxError(f"invalid shader type: {type_name!r}") from error

        body_start = _find_first_not_of(source, _LINE_BREAKS, eol)
        if body_start == -1:
            raise ShaderSyntaxError(f"shader section {type_name!r} has no code")

        pos = source.find(TYPE_TOKEN, body_start)
        sources[stage] = source[body_start:] if pos == -1 else source[body_start:pos]
    return sources


def shader_name_from_path(path: str | os.PathLike[str]) -> str:
    """Shader name derived from a file path: its file name without extension."""
    return Path(path).stem


@dataclass
class Shader:
    """A named set of stage sources and the uniform values set on it."""

    name: str
    sources: dict[ShaderType, str] = field(default_factory=dict)
    uniforms: dict[str, Any] = field(default_factory=dict)


def _load_shader(path: str | os.PathLike[str]) -> Shader:
    return Shader(shader_name_from_path(path), preprocess(read_source(path)))


class ShaderLibrary:
    """Shaders registered under unique names."""

    def __init__(self) -> None:
        self._shaders: dict[str, Shader] = {}

    def add(self, shader: Shader, name: str | None = None) -> None:
        """Register ``shader`` under ``name`` (its own name by default)."""
        key = shader.name if name is None else name
        if self.exists(key):
            raise ValueError(f"shader already exists: {key!r}")
        self._shaders[key] = shader

    def load(self, path: str | os.PathLike[str], name: str | None = None) -> Shader:
        """Read, split and register the shader file at ``path``."""
        shader = _load_shader(path)
        self.add(shader, name)
        return shader

    def get(self, name: str) -> Shader:
        try:
            return self._shaders[name]
        except KeyError:
            raise KeyError(f"shader does not exist: {name!r}") from None

    def exists(self, name: str) -> bool:
        return name in self._shaders

    def __contains__(self, name: object) -> bool:
        return name in self._shaders

    def __len__(self) -> int:
        return len(self._shaders)