"""Route strategies that carriers use to plan their movement."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence

from dronesim.entity import Graph

BEELINE_HEIGHT = 370.0
PARABOLA_STEPS = 100
PARABOLA_HEIGHT = 200.0


class PathStrategy(ABC):
    """Computes a list of points from a start to an end position."""

    @abstractmethod
    def get_path(
        self, start: Sequence[float], end: Sequence[float], graph: Graph | None
    ) -> list[list[float]]:
        """Return the points to travel through from ``start`` to ``end``."""


class SmartPath(PathStrategy):
    """Follows the route the graph computes."""

    def get_path(
        self, start: Sequence[float], end: Sequence[float], graph: Graph | None
    ) -> list[list[float]]:
        if graph is None:
            raise ValueError("A smart path needs a graph")
        return graph.get_path(start, end)


class BeelinePath(PathStrategy):
    """Rises to a fixed height, flies straight across, then descends."""

    def get_path(
        self, start: Sequence[float], end: Sequence[float], graph: Graph | None
    ) -> list[list[float]]:
        return [
            list(start),
            [start[0], BEELINE_HEIGHT, start[2]],
            [end[0], BEELINE_HEIGHT, end[2]],
            list(end),
        ]


class ParabolicPath(PathStrategy):
    """Flies along a parabola that peaks midway between start and end."""

    def get_path(
        self, start: Sequence[float], end: Sequence[float], graph: Graph | None
    ) -> list[list[float]]:
        diff = [e - s for s, e in zip(start[:3], end[:3])]
        mid = [(s + e) / 2 for s, e in zip(start[:3], end[:3])]
        half_sq = sum((m - s) ** 2 for m, s in zip(mid, start[:3]))
        path = []
        for i in range(PARABOLA_STEPS):
            point = [s + d * i / PARABOLA_STEPS for s, d in zip(start[:3], diff)]
            dist_sq = sum((p - m) ** 2 for p, m in zip(point, mid))
            ratio = dist_sq / half_sq if half_sq else math.nan
            point[1] += (1 - ratio) * PARABOLA_HEIGHT
            path.append(point)
        return path


_STRATEGIES: dict[str, type[PathStrategy]] = {
    "smart": SmartPath,
    "beeline": BeelinePath,
    "parabolic": ParabolicPath,
}


def strategy_for(name: str) -> PathStrategy:
    """Return a new strategy for the route name ``smart``, ``beeline`` or ``parabolic``."""
    try:
        return _STRATEGIES[name]()
    except KeyError:
        raise ValueError(f"Unknown path strategy: {name}") from None