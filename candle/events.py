"""Application, keyboard and mouse events and a type-based dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto
from typing import Callable, ClassVar, TypeVar


class EventType(Enum):
    """Concrete kind of an event."""

    NONE = 0
    WINDOW_CLOSE = auto()
    WINDOW_RESIZE = auto()
    WINDOW_FOCUS = auto()
    WINDOW_LOST_FOCUS = auto()
    WINDOW_MOVED = auto()
    APP_TICK = auto()
    APP_UPDATE = auto()
    APP_RENDER = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()
    KEY_TYPED = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()
    MOUSE_MOVED = auto()
    MOUSE_SCROLLED = auto()


class EventCategory(IntFlag):
    """Bit flags grouping events into broad categories."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _number(value: float) -> str:
    return f"{value:g}"


@dataclass
class Event:
    """Base of all events; ``handled`` stops further propagation."""

    event_type: ClassVar[EventType] = EventType.NONE
    category_flags: ClassVar[EventCategory] = EventCategory.NONE
    name: ClassVar[str] = "None"

    handled: bool = field(default=False, init=False, compare=False)

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


# ---------------------------------------------------------------- application


@dataclass
class WindowResizeEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION
    name: ClassVar[str] = "WindowResize"

    width: int
    height: int

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


@dataclass
class WindowCloseEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION
    name: ClassVar[str] = "WindowClose"


@dataclass
class AppTickEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_TICK
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION
    name: ClassVar[str] = "AppTick"


@dataclass
class AppUpdateEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_UPDATE
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION
    name: ClassVar[str] = "AppUpdate"


@dataclass
class AppRenderEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_RENDER
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION
    name: ClassVar[str] = "AppRender"


# ------------------------------------------------------------------- keyboard


@dataclass
class KeyEvent(Event):
    """Base of keyboard events."""

    category_flags: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT

    key_code: int


@dataclass
class KeyPressedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_PRESSED
    name: ClassVar[str] = "KeyPressed"

    repeat_count: int = 0

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ({self.repeat_count} repeats)"


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_RELEASED
    name: ClassVar[str] = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


@dataclass
class KeyTypedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_TYPED
    name: ClassVar[str] = "KeyTyped"

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self.key_code}"


# ---------------------------------------------------------------------- mouse


@dataclass
class MouseMovedEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_MOVED
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT
    name: ClassVar[str] = "MouseMoved"

    x: float
    y: float

    @property
    def xy(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"MouseEvent: {_number(self.x)}, {_number(self.y)}"


@dataclass
class MouseScrolledEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLLED
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT
    name: ClassVar[str] = "MouseScrolled"

    x_offset: float
    y_offset: float

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_number(self.x_offset)}, {_number(self.y_offset)}"


@dataclass
class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    button: int


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED
    name: ClassVar[str] = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressed: {self.button}"


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED
    name: ClassVar[str] = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleased: {self.button}"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to handlers registered for its concrete type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], handler: Callable[[E], bool]) -> bool:
        """Call ``handler`` if the event is of ``event_class``; return whether it was."""
        if self.event.event_type is not event_class.event_type:
            return False
        if handler(self.event):  # type: ignore[arg-type]
            self.event.handled = True
        return True