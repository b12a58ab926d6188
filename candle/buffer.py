"""Shader data types and vertex buffer layouts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from enum import Enum


class ShaderDataType(Enum):
    """Type of one vertex attribute as seen by a shader."""

    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3,
    ShaderDataType.MAT4: 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of ``data_type``."""
    try:
        return _SIZES[ShaderDataType(data_type)]
    except KeyError:
        raise ValueError(f"unknown shader data type: {data_type!r}") from None


@dataclass(frozen=True)
class BufferElement:
    """One named attribute within a vertex layout."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    offset: int = 0
    size: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_type", ShaderDataType(self.data_type))
        object.__setattr__(self, "size", shader_data_type_size(self.data_type))

    def component_count(self) -> int:
        """Number of scalar components (matrices count their columns)."""
        return _COMPONENTS[self.data_type]


class BufferLayout:
    """Ordered attributes with offsets packed back to back."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        offset = 0
        laid_out: list[BufferElement] = []
        for element in elements:
            laid_out.append(replace(element, offset=offset))
            offset += element.size
        self._elements = tuple(laid_out)
        self._stride = offset

    @property
    def stride(self) -> int:
        """Bytes from one vertex to the next."""
        return self._stride

    @property
    def elements(self) -> tuple[BufferElement, ...]:
        return self._elements

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"BufferLayout({list(self._elements)!r})"