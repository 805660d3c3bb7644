"""Ground robots that pick up packages and carry them to customers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, ClassVar

from dronesim.battery import Battery
from dronesim.customer import Customer
from dronesim.entity import EntityBase
from dronesim.jsonutil import contains_key, create_notification, encode_array, get_double
from dronesim.package import Package, PackageStatus
from dronesim.vectors import Vector3D


class CarrierStatus(str, Enum):
    """States a drone or robot reports to observers."""

    MOVING = "moving"
    IDLE = "idle"


class _Carrier(EntityBase):
    """Shared state and movement of entities that deliver packages."""

    def __init__(self, details: Mapping[str, Any]) -> None:
        super().__init__(details)
        self.speed = get_double(details, "speed")
        self.path_to_package: list[list[float]] = []
        self.path_to_customer: list[list[float]] = []
        self.package: Package | None = None
        self.customer: Customer | None = None
        self.has_package = False
        self._package_index = 0
        self._customer_index = 0
        if contains_key(details, "battery_capacity"):
            self.battery = Battery(get_double(details, "battery_capacity"))
        else:
            self.battery = Battery()

    def _send_status(self, status: CarrierStatus | str) -> None:
        status = CarrierStatus(status)
        event = create_notification()
        event["value"] = status.value
        if status is CarrierStatus.MOVING:
            route = self.path_to_customer if self.has_package else self.path_to_package
            event["path"] = encode_array(route)
        self.notify_observers(event)

    def _hand_over(self) -> None:
        if self.package is None:
            raise RuntimeError(f"{self!r} has no package to drop")
        self.package.notify(PackageStatus.DELIVERED)
        self._customer_index = 0
        self.path_to_customer = []
        self.customer = None
        self.package.position = [0.0, 0.0, 0.0]
        self.package = None
        self._package_index = 0
        self.path_to_package = []
        self.has_package = False
        self.dynamic = False
        self._send_status(CarrierStatus.IDLE)

    def _power_down(self) -> None:
        self.dynamic = False
        self._send_status(CarrierStatus.IDLE)
        self.sleep = True

    def _advance(self, target: Sequence[float], dt: float) -> bool:
        """Move toward ``target`` for ``dt``; return whether it was reached."""
        diff = Vector3D([t - p for t, p in zip(target[:3], self.position[:3])])
        reach = self.speed * dt
        if diff.magnitude() > reach:
            diff.normalize()
            self.direction = diff.vec
            self.position = [p + d * reach for p, d in zip(self.position, self.direction)]
            return False
        self.position = list(target)
        return True

    def _travel(self, dt: float) -> None:
        """Follow the route to the package, then the route to the customer."""
        if self.package is None:
            raise RuntimeError(f"{self!r} has no package assigned")
        if not self.has_package:
            if self._advance(self.path_to_package[self._package_index], dt):
                self._package_index += 1
                if self._package_index == len(self.path_to_package):
                    self._pick_up()
            return
        reached = self._advance(self.path_to_customer[self._customer_index], dt)
        self.package.position = list(self.position)
        if reached:
            self._customer_index += 1
            if self._customer_index == len(self.path_to_customer):
                self._hand_over()

    def _pick_up(self) -> None:
        assert self.package is not None
        self.has_package = True
        self.package.dynamic = True
        self.package.notify(PackageStatus.EN_ROUTE)
        self._send_status(CarrierStatus.MOVING)

    def _drain(self, dt: float) -> None:
        self.battery.reduce(dt)
        self.battery.check_empty()


class Robot(_Carrier):
    """A ground carrier that follows the graph's routes."""

    kind: ClassVar[str] = "robot"

    def notify(self, status: CarrierStatus | str) -> None:
        """Tell every observer the robot's state; moving also sends its current route."""
        self._send_status(status)

    def move(self, dt: float) -> None:
        """Advance the robot along its current route by ``dt`` time units."""
        self._travel(dt)
        self._drain(dt)

    def drop(self) -> None:
        """Hand the package over at the customer and become idle."""
        self._hand_over()

    def drop_no_charge(self) -> None:
        """Stop where the robot is because its battery ran out."""
        self._power_down()