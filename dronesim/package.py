"""Packages that carriers deliver to customers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar

from dronesim.customer import Customer
from dronesim.entity import EntityBase
from dronesim.jsonutil import create_notification


class PackageStatus(str, Enum):
    """States a package reports to observers."""

    SCHEDULED = "scheduled"
    EN_ROUTE = "en route"
    DELIVERED = "delivered"


class Package(EntityBase):
    """An item to be delivered, with a weight and a destination customer."""

    kind: ClassVar[str] = "package"

    def __init__(self, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(details)
        self.weight = 0.0
        self.customer: Customer | None = None

    def notify(self, status: PackageStatus | str) -> None:
        """Tell every observer that the package has entered ``status``."""
        event = create_notification()
        event["value"] = PackageStatus(status).value
        self.notify_observers(event)