"""Battery carried by drones and robots."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_CHARGE = 10000.0


@dataclass
class Battery:
    """Charge store with a fixed maximum and an empty flag."""

    remaining: float = MAX_CHARGE
    empty: bool = False
    max_charge: float = field(default=MAX_CHARGE, init=False)

    def reduce(self, amount: float) -> None:
        """Use up ``amount`` of charge."""
        self.remaining -= amount

    def check_empty(self) -> None:
        """Mark the battery empty once no charge remains."""
        if self.remaining <= 0:
            self.empty = True