import pytest

from candle.events import (
    AppRenderEvent,
    AppTickEvent,
    AppUpdateEvent,
    Event,
    EventCategory,
    EventDispatcher,
    EventType,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)


def test_window_resize_string_and_fields():
    event = WindowResizeEvent(1280, 720)
    assert str(event) == "WindowResizeEvent: 1280, 720"
    assert (event.width, event.height) == (1280, 720)
    assert event.event_type is EventType.WINDOW_RESIZE


@pytest.mark.parametrize(
    "event, name",
    [
        (WindowCloseEvent(), "WindowClose"),
        (AppTickEvent(), "AppTick"),
        (AppUpdateEvent(), "AppUpdate"),
        (AppRenderEvent(), "AppRender"),
    ],
)
def test_plain_events_use_name_as_string(event, name):
    assert event.name == name
    assert str(event) == name
    assert event.is_in_category(EventCategory.APPLICATION)
    assert not event.is_in_category(EventCategory.INPUT)


def test_key_event_strings():
    assert str(KeyPressedEvent(65, 1)) == "KeyPressedEvent: 65 (1 repeats)"
    assert str(KeyReleasedEvent(65)) == "KeyReleasedEvent: 65"
    assert str(KeyTypedEvent(65)) == "KeyTypedEvent: 65"


def test_key_events_are_keyboard_input():
    event = KeyReleasedEvent(70)
    assert event.is_in_category(EventCategory.KEYBOARD)
    assert event.is_in_category(EventCategory.INPUT)
    assert not event.is_in_category(EventCategory.MOUSE)


def test_mouse_events():
    moved = MouseMovedEvent(1.5, 2.5)
    assert moved.xy == (1.5, 2.5)
    assert str(moved) == "MouseEvent: 1.5, 2.5"
    assert moved.is_in_category(EventCategory.MOUSE)
    scrolled = MouseScrolledEvent(0.5, -1.5)
    assert str(scrolled) == "MouseScrolledEvent: 0.5, -1.5"
    assert str(MouseButtonPressedEvent(1)) == "MouseButtonPressed: 1"
    assert str(MouseButtonReleasedEvent(2)) == "MouseButtonReleased: 2"
    assert not scrolled.is_in_category(EventCategory.KEYBOARD)


def test_events_start_unhandled():
    assert WindowCloseEvent().handled is False


def test_dispatch_matching_type_marks_handled():
    event = WindowCloseEvent()
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(WindowCloseEvent, handler) is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_other_type_skips_handler():
    event = WindowResizeEvent(10, 20)
    seen = []
    result = EventDispatcher(event).dispatch(WindowCloseEvent, seen.append)
    assert result is False
    assert seen == []
    assert event.handled is False


def test_dispatch_keeps_handled_flag_once_set():
    event = MouseScrolledEvent(0.0, 1.0)
    dispatcher = EventDispatcher(event)
    dispatcher.dispatch(MouseScrolledEvent, lambda e: True)
    dispatcher.dispatch(MouseScrolledEvent, lambda e: False)
    assert event.handled is True


def test_dispatch_false_handler_leaves_unhandled():
    event = KeyPressedEvent(32, 0)
    assert EventDispatcher(event).dispatch(KeyPressedEvent, lambda e: False) is True
    assert event.handled is False


def test_base_event_string_is_name():
    assert str(Event()) == Event.name