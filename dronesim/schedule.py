"""Choosing carriers for deliveries and recharges, and handing them their routes."""

from __future__ import annotations

from collections.abc import Iterable

from dronesim.customer import Customer
from dronesim.drone import Drone
from dronesim.entity import EntityBase, Graph
from dronesim.package import Package, PackageStatus
from dronesim.robot import CarrierStatus, Robot
from dronesim.vectors import Vector3D

MAX_DISTANCE = 100000000.0
RECHARGE_THRESHOLD = 1000.0


def _distance(a: EntityBase, b: EntityBase) -> float:
    return Vector3D([x - y for x, y in zip(a.position[:3], b.position[:3])]).magnitude()


def _nearest(candidates: Iterable[EntityBase], target: EntityBase) -> EntityBase | None:
    best: EntityBase | None = None
    best_distance = MAX_DISTANCE
    for entity in candidates:
        distance = _distance(target, entity)
        if distance < best_distance:
            best_distance = distance
            best = entity
    return best


def _available(entity: EntityBase) -> bool:
    return not entity.dynamic and not entity.sleep


def nearest_carrier(
    entities: Iterable[EntityBase], package: EntityBase
) -> Drone | Robot | None:
    """Return the idle, awake drone or robot closest to ``package``, or ``None``."""
    candidates = (
        e for e in entities if isinstance(e, (Drone, Robot)) and _available(e)
    )
    return _nearest(candidates, package)  # type: ignore[return-value]


def nearest_recharger(entities: Iterable[EntityBase], empty: EntityBase) -> Drone | None:
    """Return the idle, awake drone with spare charge closest to ``empty``, or ``None``."""
    candidates = (
        e
        for e in entities
        if isinstance(e, Drone)
        and _available(e)
        and e.battery.remaining > RECHARGE_THRESHOLD
    )
    return _nearest(candidates, empty)  # type: ignore[return-value]


def assign_delivery(
    package: Package,
    dest: Customer,
    carrier: EntityBase,
    graph: Graph | None,
) -> bool:
    """Give an idle carrier the package, its customer and both routes; return whether it was assigned."""
    if not isinstance(carrier, (Drone, Robot)) or carrier.dynamic:
        return False
    carrier.dynamic = True
    carrier.package = package
    carrier.customer = dest
    if isinstance(carrier, Drone):
        carrier.path_to_package = carrier.get_path(carrier.position, package.position, graph)
        carrier.path_to_customer = carrier.get_path(package.position, dest.position, graph)
    else:
        if graph is None:
            raise ValueError("A robot needs a graph to plan its route")
        carrier.path_to_package = graph.get_path(carrier.position, package.position)
        carrier.path_to_customer = graph.get_path(package.position, dest.position)
    package.notify(PackageStatus.SCHEDULED)
    carrier.notify(CarrierStatus.MOVING)
    return True


def assign_recharge(empty: EntityBase, carrier: Drone, graph: Graph | None) -> bool:
    """Send an idle drone to recharge ``empty``; return whether it was assigned."""
    if carrier.dynamic:
        return False
    carrier.dynamic = True
    carrier.sleep = False
    carrier.empty = empty
    carrier.path_to_package = carrier.get_path(carrier.position, empty.position, graph)
    carrier.notify(CarrierStatus.MOVING)
    return True