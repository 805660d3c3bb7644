"""Package-delivery simulation with drones, robots, path strategies and recharging."""

__version__ = "0.1.0"

__all__ = [
    "battery",
    "customer",
    "drone",
    "entity",
    "factories",
    "jsonutil",
    "package",
    "paths",
    "robot",
    "schedule",
    "simulation",
    "vectors",
]