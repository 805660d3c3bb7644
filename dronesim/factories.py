"""Factories that build entities from their JSON descriptions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from dronesim.customer import Customer
from dronesim.drone import Drone
from dronesim.entity import EntityBase
from dronesim.jsonutil import get_string
from dronesim.package import Package
from dronesim.robot import Robot


class EntityFactory(ABC):
    """Builds an entity from a description, or declines with ``None``."""

    @abstractmethod
    def create_entity(self, details: Mapping[str, Any]) -> EntityBase | None:
        """Return a new entity for ``details``, or ``None`` if this factory does not handle it."""


class _KindFactory(EntityFactory):
    """Creates one entity class when the description's ``type`` matches its kind."""

    entity_class: type[EntityBase]

    def create_entity(self, details: Mapping[str, Any]) -> EntityBase | None:
        if get_string(details, "type") == self.entity_class.kind:
            return self.entity_class(details)
        return None


class DroneFactory(_KindFactory):
    """Creates drones."""

    entity_class = Drone

    def create_entity(self, details: Mapping[str, Any]) -> Drone | None:
        return super().create_entity(details)  # type: ignore[return-value]


class RobotFactory(_KindFactory):
    """Creates robots."""

    entity_class = Robot

    def create_entity(self, details: Mapping[str, Any]) -> Robot | None:
        return super().create_entity(details)  # type: ignore[return-value]


class PackageFactory(_KindFactory):
    """Creates packages."""

    entity_class = Package

    def create_entity(self, details: Mapping[str, Any]) -> Package | None:
        return super().create_entity(details)  # type: ignore[return-value]


class CustomerFactory(_KindFactory):
    """Creates customers."""

    entity_class = Customer

    def create_entity(self, details: Mapping[str, Any]) -> Customer | None:
        return super().create_entity(details)  # type: ignore[return-value]


class CompositeFactory(EntityFactory):
    """Delegates creation to the first of its factories that accepts a description."""

    def __init__(self, factories: Iterable[EntityFactory] = ()) -> None:
        self.factories: list[EntityFactory] = list(factories)

    def add_factory(self, factory: EntityFactory) -> None:
        """Append ``factory`` to the ones consulted, after those already added."""
        self.factories.append(factory)

    def create_entity(self, details: Mapping[str, Any]) -> EntityBase | None:
        for factory in self.factories:
            entity = factory.create_entity(details)
            if entity is not None:
                return entity
        return None


def default_factory() -> CompositeFactory:
    """Return a composite that builds drones, packages, customers and robots."""
    return CompositeFactory(
        [DroneFactory(), PackageFactory(), CustomerFactory(), RobotFactory()]
    )