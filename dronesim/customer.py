"""Customers: the destinations of deliveries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from dronesim.entity import EntityBase


class Customer(EntityBase):
    """An entity that receives packages."""

    kind: ClassVar[str] = "customer"

    def __init__(self, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(details)