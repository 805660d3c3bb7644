"""Drones that deliver packages and can recharge stranded carriers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from dronesim.entity import EntityBase, Graph
from dronesim.jsonutil import contains_key, get_string
from dronesim.paths import PathStrategy, strategy_for
from dronesim.robot import CarrierStatus, _Carrier


class Drone(_Carrier):
    """A flying carrier whose route style is chosen by its ``path`` detail."""

    kind: ClassVar[str] = "drone"

    def __init__(self, details: Mapping[str, Any]) -> None:
        super().__init__(details)
        self.route = get_string(details, "path") if contains_key(details, "path") else "smart"
        self.strategy: PathStrategy | None = None
        self.empty: EntityBase | None = None

    def notify(self, status: CarrierStatus | str) -> None:
        """Tell every observer the drone's state; moving also sends its current route."""
        self._send_status(status)

    def get_path(
        self, start: Sequence[float], end: Sequence[float], graph: Graph | None
    ) -> list[list[float]]:
        """Plan a route from ``start`` to ``end`` using the drone's route style."""
        self.strategy = strategy_for(self.route)
        return self.strategy.get_path(start, end, graph)

    def move(self, dt: float) -> None:
        """Advance the drone by ``dt``: toward a carrier to recharge, or along its delivery."""
        if self.empty is not None:
            self._recharge_leg(dt)
        else:
            self._travel(dt)
        self._drain(dt)

    def drop(self) -> None:
        """Hand the package over at the customer and become idle."""
        self._hand_over()

    def drop_no_charge(self) -> None:
        """Stop where the drone is because its battery ran out."""
        self._power_down()

    def _recharge_leg(self, dt: float) -> None:
        if not self._advance(self.path_to_package[self._package_index], dt):
            return
        self._package_index += 1
        if self._package_index != len(self.path_to_package):
            return
        target = self.empty
        assert target is not None
        share = self.battery.remaining / 2
        if isinstance(target, _Carrier):
            target.battery.remaining = share
            target.battery.empty = False
            target._send_status(CarrierStatus.MOVING)
        self.battery.remaining = share
        target.dynamic = True
        self._package_index = 0
        self.path_to_package = []
        self.has_package = False
        self.dynamic = False
        self.empty = None
        self.notify(CarrierStatus.IDLE)