"""The delivery system facade: entity creation, scheduling and time stepping."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Mapping
from typing import Any

from dronesim.customer import Customer
from dronesim.drone import Drone
from dronesim.entity import EntityBase, EntityObserver, Graph
from dronesim.factories import EntityFactory, default_factory
from dronesim.package import Package
from dronesim.robot import Robot
from dronesim.schedule import (
    RECHARGE_THRESHOLD,
    assign_delivery,
    assign_recharge,
    nearest_carrier,
    nearest_recharger,
)

log = logging.getLogger(__name__)


class DeliverySimulation:
    """Owns the entities of a delivery run and advances them through time."""

    def __init__(self) -> None:
        self._entities: list[EntityBase] = []
        self._observers: list[EntityObserver] = []
        self._factory = default_factory()
        self.graph: Graph | None = None
        self._unscheduled: deque[Package] = deque()
        self._empty_carriers: deque[EntityBase] = deque()

    @property
    def entities(self) -> tuple[EntityBase, ...]:
        """Every entity added to the simulation, in the order added."""
        return tuple(self._entities)

    @property
    def observers(self) -> tuple[EntityObserver, ...]:
        """Observers handed to entities as they are added."""
        return tuple(self._observers)

    @property
    def unscheduled(self) -> tuple[Package, ...]:
        """Packages waiting for a free carrier."""
        return tuple(self._unscheduled)

    @property
    def empty_carriers(self) -> tuple[EntityBase, ...]:
        """Carriers waiting for a recharge."""
        return tuple(self._empty_carriers)

    def create_entity(self, details: Mapping[str, Any]) -> EntityBase | None:
        """Build an entity from ``details`` without adding it; ``None`` if no factory accepts it."""
        return self._factory.create_entity(details)

    def add_factory(self, factory: EntityFactory) -> None:
        """Let ``factory`` build entities the built-in factories do not handle."""
        self._factory.add_factory(factory)

    def add_entity(self, entity: EntityBase) -> None:
        """Add ``entity`` to the simulation, giving it the current observers."""
        entity.set_observers(self._observers)
        self._entities.append(entity)

    def set_graph(self, graph: Graph | None) -> None:
        """Use ``graph`` for route planning."""
        self.graph = graph

    def schedule_delivery(self, package: Package, dest: Customer) -> None:
        """Deliver ``package`` to ``dest`` with the nearest free carrier, or queue it."""
        package.customer = dest
        carrier = nearest_carrier(self._entities, package)
        if carrier is None:
            self._unscheduled.append(package)
        else:
            assign_delivery(package, dest, carrier, self.graph)

    def schedule_recharge(self, empty: EntityBase) -> None:
        """Send the nearest drone with spare charge to ``empty``, if there is one."""
        recharger = nearest_recharger(self._entities, empty)
        if recharger is None:
            return
        assign_recharge(empty, recharger, self.graph)
        try:
            self._empty_carriers.remove(empty)
        except ValueError:
            pass

    def add_observer(self, observer: EntityObserver) -> None:
        """Register ``observer`` for entities added from now on."""
        self._observers.append(observer)

    def remove_observer(self, observer: EntityObserver) -> None:
        """Stop handing ``observer`` to entities added from now on."""
        self._observers = [o for o in self._observers if o is not observer]

    def update(self, dt: float) -> None:
        """Advance the simulation by ``dt`` time units."""
        for entity in list(self._entities):
            if isinstance(entity, Drone):
                self._update_carrier(entity, dt)
                if (
                    not entity.dynamic
                    and not self._handled_queue
                    and self._empty_carriers
                    and entity.battery.remaining > RECHARGE_THRESHOLD
                ):
                    self.schedule_recharge(self._empty_carriers[0])
            elif isinstance(entity, Robot):
                self._update_carrier(entity, dt)

    def _update_carrier(self, carrier: Drone | Robot, dt: float) -> None:
        """Move a busy carrier, or give an idle one a waiting package."""
        self._handled_queue = True
        if carrier.dynamic:
            if carrier.battery.empty:
                self._empty_carriers.append(carrier)
                carrier.drop_no_charge()
            else:
                carrier.move(dt)
            return
        if self._unscheduled:
            package = self._unscheduled.popleft()
            self.schedule_delivery(package, package.customer)
            return
        self._handled_queue = False

    def run_script(self, script: Iterable[Mapping[str, Any]]) -> list[EntityBase]:
        """Carry out a list of scene commands; return the entities it created."""
        created: list[EntityBase] = []
        for item in script:
            command = item["command"]
            params = item["params"]
            if command == "createEntity":
                entity = self.create_entity(params)
                if entity is None:
                    log.warning("Null entity")
                else:
                    created.append(entity)
            elif command == "addEntity":
                index = int(params["index"])
                if 0 <= index < len(created):
                    self.add_entity(created[index])
            elif command == "scheduleDelivery":
                pkg_index = int(params["pkg_index"])
                dest_index = int(params["dest_index"])
                if 0 <= pkg_index < len(self._entities):
                    if 0 <= dest_index < len(self._entities):
                        package = self._entities[pkg_index]
                        dest = self._entities[dest_index]
                        self.schedule_delivery(package, dest)  # type: ignore[arg-type]
                else:
                    log.warning("Failed to schedule delivery: invalid indexes")
        return created


def get_entity_system(name: str) -> DeliverySimulation:
    """Return a new delivery system; every name gives the default one."""
    return DeliverySimulation()