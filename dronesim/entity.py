"""Entity base class and the interfaces entities interact with."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, ClassVar

from dronesim.jsonutil import get_double, get_float_vector, get_string


class EntityObserver(ABC):
    """Receives notifications from entities."""

    @abstractmethod
    def on_event(self, event: Mapping[str, Any], entity: EntityBase) -> None:
        """Handle ``event`` sent by ``entity``."""


class Graph(ABC):
    """Route provider for ground and smart paths."""

    @abstractmethod
    def get_path(self, start: Sequence[float], end: Sequence[float]) -> list[list[float]]:
        """Return a list of points leading from ``start`` to ``end``."""


class EntityBase:
    """Common state for every entity in the delivery system."""

    kind: ClassVar[str] = "entity"
    _id_counter: ClassVar[itertools.count] = itertools.count()

    def __init__(self, details: Mapping[str, Any] | None = None) -> None:
        self.observers: list[EntityObserver] = []
        self.version = 0
        self.dynamic = False
        self.sleep = False
        if details is None:
            self.details: dict[str, Any] = {}
            self.position: list[float] = []
            self.direction: list[float] = []
            self.id = 0
            self.name = ""
            self.radius = 0.0
            return
        self.position = get_float_vector(details, "position")
        self.direction = get_float_vector(details, "direction")
        self.id = next(EntityBase._id_counter)
        self.name = get_string(details, "name")
        self.radius = get_double(details, "radius")
        self.details = dict(details)

    def set_observers(self, observers: Iterable[EntityObserver]) -> None:
        """Replace the observers with a copy of ``observers``."""
        self.observers = list(observers)

    def notify_observers(self, event: Mapping[str, Any]) -> None:
        """Send ``event`` to every observer, in order."""
        for observer in self.observers:
            observer.on_event(event, self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, name={self.name!r})"


def reset_ids() -> None:
    """Restart entity id numbering from zero."""
    EntityBase._id_counter = itertools.count()