import pytest

from candle.buffer import (
    BufferElement,
    BufferLayout,
    ShaderDataType,
    shader_data_type_size,
)

FLOAT_LIKE = [
    ShaderDataType.FLOAT,
    ShaderDataType.FLOAT2,
    ShaderDataType.FLOAT3,
    ShaderDataType.FLOAT4,
    ShaderDataType.INT,
    ShaderDataType.INT2,
    ShaderDataType.INT3,
    ShaderDataType.INT4,
]


@pytest.mark.parametrize("data_type", FLOAT_LIKE)
def test_vector_size_is_four_bytes_per_component(data_type):
    element = BufferElement(data_type, "a")
    assert element.size == 4 * element.component_count()
    assert shader_data_type_size(data_type) == element.size


def test_matrix_sizes():
    assert shader_data_type_size(ShaderDataType.MAT3) == 4 * 3 * 3
    assert shader_data_type_size(ShaderDataType.MAT4) == 4 * 4 * 4
    assert BufferElement(ShaderDataType.MAT3, "m").component_count() == 3
    assert BufferElement(ShaderDataType.MAT4, "m").component_count() == 4


def test_bool_is_one_byte():
    assert shader_data_type_size(ShaderDataType.BOOL) == 1
    assert BufferElement(ShaderDataType.BOOL, "flag").component_count() == 1


def test_none_type_is_rejected():
    with pytest.raises(ValueError):
        shader_data_type_size(ShaderDataType.NONE)
    with pytest.raises(ValueError):
        BufferElement(ShaderDataType.NONE, "nothing")


def test_element_defaults():
    element = BufferElement(ShaderDataType.FLOAT3, "a_Position")
    assert element.name == "a_Position"
    assert element.normalized is False
    assert element.offset == 0


def test_layout_offsets_accumulate_and_stride_is_total():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT3, "a_Color"),
            BufferElement(ShaderDataType.FLOAT2, "a_UV"),
        ]
    )
    elements = list(layout)
    assert len(layout) == 3
    assert [e.name for e in elements] == ["a_Position", "a_Color", "a_UV"]
    assert elements[0].offset == 0
    assert elements[1].offset == elements[0].size
    assert elements[2].offset == elements[0].size + elements[1].size
    assert layout.stride == sum(e.size for e in elements)


def test_layout_does_not_change_given_elements():
    first = BufferElement(ShaderDataType.FLOAT, "x")
    second = BufferElement(ShaderDataType.FLOAT4, "y")
    layout = BufferLayout([first, second])
    assert second.offset == 0
    assert layout.elements[1].offset == first.size


def test_empty_layout():
    layout = BufferLayout()
    assert len(layout) == 0
    assert layout.stride == 0
    assert list(layout) == []