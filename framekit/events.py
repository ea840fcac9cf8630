"""Deferred object events, applied between frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from framekit.drawing import EventType, Layer
from framekit.gameobject import GameObject


@dataclass
class Event:
    """A queued event; two events are equal when type and object match."""

    type: EventType
    obj: Optional[GameObject] = None
    layer: Optional[Layer] = field(default=None, compare=False)


class EventManager:
    """Queues object deletions and applies them at the end of a frame."""

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._dead: list[GameObject] = []

    @property
    def pending(self) -> tuple[Event, ...]:
        return tuple(self._events)

    @property
    def dead(self) -> tuple[GameObject, ...]:
        """Objects marked dead last update, released on the next one."""
        return tuple(self._dead)

    def update(self) -> None:
        self._dead.clear()
        events, self._events = self._events, []
        for event in events:
            self._execute(event)

    def delete_object(self, obj: GameObject) -> None:
        """Queue obj for deletion unless it is already queued."""
        event = Event(EventType.DELETE_OBJECT, obj)
        if event not in self._events:
            self._events.append(event)

    def _execute(self, event: Event) -> None:
        if event.type is EventType.DELETE_OBJECT and event.obj is not None:
            event.obj.set_dead()
            self._dead.append(event.obj)