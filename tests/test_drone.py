import pytest

from dronesim.drone import Drone
from dronesim.entity import EntityObserver, reset_ids
from dronesim.package import Package
from dronesim.robot import Robot


class _Recorder(EntityObserver):
    def __init__(self):
        self.events = []

    def on_event(self, event, entity):
        self.events.append((dict(event), entity))


def _details(kind="drone", **extra):
    details = {
        "type": kind,
        "name": kind,
        "radius": 1.0,
        "speed": 30.0,
        "position": [1.0, 2.0, 3.0],
        "direction": [1.0, 0.0, 0.0],
    }
    details.update(extra)
    return details


def _package():
    return Package(
        {
            "type": "package",
            "name": "package",
            "radius": 1.0,
            "position": [0.0, 0.0, 10.0],
            "direction": [1.0, 0.0, 0.0],
        }
    )


@pytest.fixture
def drone():
    reset_ids()
    Drone(_details())
    return Drone(_details())


def test_constructor(drone):
    assert drone.position == pytest.approx([1, 2, 3])
    assert drone.direction == pytest.approx([1, 0, 0])
    assert drone.id == 1
    assert drone.radius == pytest.approx(1)
    assert drone.version == 0
    assert drone.speed == pytest.approx(30)
    assert drone.dynamic is False
    assert drone.sleep is False


def test_get_speed(drone):
    assert drone.speed == pytest.approx(30)


def test_set_speed(drone):
    drone.speed = 10
    assert drone.speed == 10


def test_has_package(drone):
    drone.has_package = True
    assert drone.has_package is True


def test_route_defaults_to_smart(drone):
    assert drone.route == "smart"


def test_route_from_details():
    assert Drone(_details(path="parabolic")).route == "parabolic"


def test_battery_capacity_from_details():
    drone = Drone(_details(battery_capacity=500.0))
    assert drone.battery.remaining == pytest.approx(500)


def test_beeline_get_path():
    drone = Drone(_details(path="beeline"))
    path = drone.get_path([1.0, 2.0, 3.0], [4.0, 5.0, 6.0], None)
    assert path == [[1.0, 2.0, 3.0], [1.0, 370.0, 3.0], [4.0, 370.0, 6.0], [4.0, 5.0, 6.0]]


def test_smart_get_path_uses_graph(drone):
    class _Graph:
        def get_path(self, start, end):
            return [list(start), [9.0, 9.0, 9.0], list(end)]

    path = drone.get_path([0.0, 0.0, 0.0], [1.0, 1.0, 1.0], _Graph())
    assert path == [[0.0, 0.0, 0.0], [9.0, 9.0, 9.0], [1.0, 1.0, 1.0]]


def test_unknown_route_raises():
    drone = Drone(_details(path="zigzag"))
    with pytest.raises(ValueError):
        drone.get_path([0.0, 0.0, 0.0], [1.0, 1.0, 1.0], None)


def test_delivery_cycle():
    drone = Drone(_details(speed=5.0, position=[0.0, 0.0, 0.0]))
    package = _package()
    drone_log, package_log = _Recorder(), _Recorder()
    drone.set_observers([drone_log])
    package.set_observers([package_log])
    drone.package = package
    drone.dynamic = True
    drone.path_to_package = [[0.0, 0.0, 10.0]]
    drone.path_to_customer = [[0.0, 0.0, 20.0]]

    drone.move(1.0)
    assert drone.position == pytest.approx([0, 0, 5])
    drone.move(1.0)
    assert drone.has_package is True
    assert package_log.events[-1][0]["value"] == "en route"
    assert drone_log.events[-1][0]["path"] == [[0.0, 0.0, 20.0]]

    drone.move(1.0)
    assert package.position == pytest.approx([0, 0, 15])
    drone.move(1.0)
    assert drone.package is None
    assert drone.dynamic is False
    assert package.position == [0.0, 0.0, 0.0]
    assert package_log.events[-1][0]["value"] == "delivered"
    assert drone_log.events[-1][0]["value"] == "idle"
    assert drone.battery.remaining == pytest.approx(9996)


def test_recharge_stranded_robot():
    drone = Drone(_details(speed=10.0, position=[0.0, 0.0, 0.0]))
    robot = Robot(_details("robot", battery_capacity=0.0, position=[0.0, 0.0, 5.0]))
    robot.battery.empty = True
    robot_log, drone_log = _Recorder(), _Recorder()
    robot.set_observers([robot_log])
    drone.set_observers([drone_log])
    drone.dynamic = True
    drone.empty = robot
    drone.path_to_package = [[0.0, 0.0, 5.0]]

    drone.move(1.0)

    assert robot.battery.remaining == pytest.approx(5000)
    assert robot.battery.empty is False
    assert robot.dynamic is True
    assert robot_log.events[-1][0]["value"] == "moving"
    assert drone.battery.remaining == pytest.approx(4999)
    assert drone.empty is None
    assert drone.dynamic is False
    assert drone.path_to_package == []
    assert drone_log.events[-1][0] == {"type": "notify", "value": "idle"}


def test_recharge_moves_toward_target_first():
    drone = Drone(_details(speed=1.0, position=[0.0, 0.0, 0.0]))
    other = Drone(_details(position=[0.0, 0.0, 10.0]))
    drone.empty = other
    drone.path_to_package = [[0.0, 0.0, 10.0]]
    drone.move(2.0)
    assert drone.position == pytest.approx([0, 0, 2])
    assert drone.empty is other
    assert other.dynamic is False


def test_drop_no_charge(drone):
    recorder = _Recorder()
    drone.set_observers([recorder])
    drone.dynamic = True
    drone.drop_no_charge()
    assert drone.dynamic is False
    assert drone.sleep is True
    assert recorder.events[0][0]["value"] == "idle"


def test_notify_moving_sends_route_to_package(drone):
    recorder = _Recorder()
    drone.set_observers([recorder])
    drone.path_to_package = [[1.0, 1.0, 1.0]]
    drone.path_to_customer = [[2.0, 2.0, 2.0]]
    drone.notify("moving")
    assert recorder.events[0][0]["path"] == [[1.0, 1.0, 1.0]]
    drone.has_package = True
    drone.notify("moving")
    assert recorder.events[1][0]["path"] == [[2.0, 2.0, 2.0]]