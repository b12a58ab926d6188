import pytest

from candle.components import (
    CameraComponent,
    IDComponent,
    TagComponent,
    TransformComponent,
)
from candle.ids import UUID
from candle.scene import Entity, Scene


@pytest.fixture
def scene():
    return Scene()


def test_new_entity_has_default_components(scene):
    entity = scene.create_entity()
    assert entity.has_component(IDComponent)
    assert entity.has_component(TransformComponent)
    assert entity.has_component(TagComponent)
    assert entity.name() == "Entity"


def test_named_entity(scene):
    assert scene.create_entity("Player").name() == "Player"


def test_create_with_uuid_and_lookup(scene):
    entity = scene.create_entity_with_uuid(UUID(1234), "Box")
    assert entity.uuid() == 1234
    assert scene.get_entity_by_uuid(1234) == entity


def test_lookup_unknown_uuid_raises(scene):
    with pytest.raises(KeyError):
        scene.get_entity_by_uuid(UUID(99))


def test_get_by_name(scene):
    scene.create_entity("A")
    wanted = scene.create_entity("B")
    assert scene.get_entity_by_name("B") == wanted


def test_get_by_missing_name_is_null(scene):
    scene.create_entity("A")
    found = scene.get_entity_by_name("missing")
    assert not found
    assert found == Entity()


def test_destroy_removes_entity(scene):
    entity = scene.create_entity("Gone")
    identifier = entity.uuid()
    scene.destroy_entity(entity)
    assert len(scene) == 0
    with pytest.raises(KeyError):
        scene.get_entity_by_uuid(identifier)
    assert not scene.get_entity_by_name("Gone")


def test_destroy_twice_raises(scene):
    entity = scene.create_entity()
    scene.destroy_entity(entity)
    with pytest.raises(ValueError):
        scene.destroy_entity(entity)


def test_add_duplicate_component_raises(scene):
    entity = scene.create_entity()
    with pytest.raises(ValueError):
        entity.add_component(TagComponent("again"))


def test_add_or_replace_replaces(scene):
    entity = scene.create_entity("Old")
    entity.add_or_replace_component(TagComponent("New"))
    assert entity.name() == "New"


def test_add_get_and_remove_component(scene):
    entity = scene.create_entity()
    camera = entity.add_component(CameraComponent(60.0))
    assert entity.get_component(CameraComponent) is camera
    entity.remove_component(CameraComponent)
    assert not entity.has_component(CameraComponent)
    with pytest.raises(KeyError):
        entity.get_component(CameraComponent)
    with pytest.raises(KeyError):
        entity.remove_component(CameraComponent)


def test_entities_are_distinct(scene):
    first, second = scene.create_entity(), scene.create_entity()
    assert first != second
    assert int(first) != int(second)
    assert first.uuid() != second.uuid()
    assert set(scene) == {first, second}


def test_null_entity(scene):
    null = Entity()
    assert not null
    with pytest.raises(ValueError):
        null.has_component(TagComponent)
    with pytest.raises(ValueError):
        int(null)


def test_same_handle_in_other_scene_differs(scene):
    other = Scene()
    assert scene.create_entity() != other.create_entity()