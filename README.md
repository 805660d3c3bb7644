# dronesim

A small package-delivery simulation library. Drones and robots pick up
packages and carry them to customers; drones follow a selectable path
strategy, every carrier draws down a battery as it moves, and idle drones with
spare charge fly out to recharge carriers that have run flat.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `dronesim.simulation` – `DeliverySimulation`, the facade that creates and
  holds entities, schedules deliveries and advances time with `update(dt)`;
  `get_entity_system(name)` returns a new `DeliverySimulation` for any name.
- `dronesim.entity` – `EntityBase` (position, direction, id, name, radius,
  version, `dynamic` and `sleep` flags, observers), the `EntityObserver` and
  `Graph` interfaces, and `reset_ids()` to restart id numbering at zero.
- `dronesim.drone`, `dronesim.robot`, `dronesim.package`, `dronesim.customer` –
  the entity classes `Drone`, `Robot`, `Package` and `Customer`, plus the
  status enums `CarrierStatus` (`moving`, `idle`) and `PackageStatus`
  (`scheduled`, `en route`, `delivered`).
- `dronesim.factories` – `DroneFactory`, `RobotFactory`, `PackageFactory`,
  `CustomerFactory`, the `CompositeFactory` that tries each in turn, and
  `default_factory()` which returns a composite with all four.
- `dronesim.paths` – `SmartPath` (asks the graph for a route), `BeelinePath`
  (climb to height 370, fly straight, descend) and `ParabolicPath` (100 points
  along an arc peaking 200 above the straight line), and `strategy_for(name)`.
- `dronesim.schedule` – `nearest_carrier`, `nearest_recharger`,
  `assign_delivery` and `assign_recharge`.
- `dronesim.battery` – `Battery`, holding 10000 units by default.
- `dronesim.vectors` – `Vector2D` and `Vector3D` with `magnitude()` and
  in-place `normalize()`.
- `dronesim.jsonutil` – typed lookups in description dicts (`get_string`,
  `get_double`, `get_float_vector`, …) that raise `MissingKeyError` for absent
  keys, `create_notification()`, `encode_array()` and
  `format_entity_details()`, which returns a readable report as a string.

## Entities

Entities are built from a `dict` holding `type`, `name`, `position`,
`direction` and `radius`. Drones and robots also need `speed`, and may give
`battery_capacity` as their starting charge. A drone may give `path` as
`"smart"` (the default), `"beeline"` or `"parabolic"`; any other name raises
`ValueError` when the drone plans a route. Ids come from one counter shared by
all entity kinds.

A `Graph` is any object with `get_path(start, end)` returning a list of
`[x, y, z]` points. Robots always route through it, and so do drones with the
smart strategy; both raise `ValueError` when no graph is set.

Observers are objects with `on_event(event, entity)`. They receive dicts such
as `{"type": "notify", "value": "moving", "path": [...]}`. They are handed to
entities when the entities are added, so register them before `add_entity`;
`remove_observer` only affects entities added afterwards.

## Example

```python
from dronesim.simulation import DeliverySimulation


class StraightLine:
    def get_path(self, start, end):
        return [list(start), list(end)]


class Printer:
    def on_event(self, event, entity):
        print(entity.name, event["value"])


sim = DeliverySimulation()
sim.set_graph(StraightLine())
sim.add_observer(Printer())

drone = sim.create_entity({
    "type": "drone", "name": "drone", "radius": 1, "speed": 30,
    "position": [0, 0, 0], "direction": [1, 0, 0],
})
package = sim.create_entity({
    "type": "package", "name": "package", "radius": 1,
    "position": [10, 0, 0], "direction": [1, 0, 0],
})
customer = sim.create_entity({
    "type": "customer", "name": "customer", "radius": 1,
    "position": [20, 0, 0], "direction": [1, 0, 0],
})
for entity in (drone, package, customer):
    sim.add_entity(entity)

sim.schedule_delivery(package, customer)
for _ in range(100):
    sim.update(0.05)
```

A scene can be replayed with `DeliverySimulation.run_script`, which takes a
list of `{"command": ..., "params": {...}}` entries using the commands
`createEntity`, `addEntity` (by index into the created entities) and
`scheduleDelivery` (by `pkg_index` and `dest_index` into the added entities),
and returns the entities it created.

## Scheduling

A new delivery goes to the nearest drone or robot that is neither busy nor
asleep. If none is free, the package waits in a queue and is handed to an idle
carrier on a later update. Each move uses `dt` units of charge; a carrier whose
battery runs out stops, goes to sleep and joins a queue of empty carriers. An
idle drone with more than 1000 units of charge is then sent to the first of
them and, on arrival, splits its remaining charge evenly with it, after which
the recharged carrier carries on.

## What it does not do

The package is a library only: it has no command-line program, no web viewer
or server, and no map loading. Route planning for robots and smart-path drones
relies on a `Graph` object that the caller supplies.