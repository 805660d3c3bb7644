import pytest

from dronesim.customer import Customer
from dronesim.entity import EntityObserver, reset_ids
from dronesim.package import Package, PackageStatus


class Recorder(EntityObserver):
    def __init__(self):
        self.events = []

    def on_event(self, event, entity):
        self.events.append((dict(event), entity))


def make_details(kind="package", name="package"):
    return {
        "type": kind,
        "name": name,
        "radius": 1.0,
        "position": [1.0, 2.0, 3.0],
        "direction": [1.0, 0.0, 0.0],
    }


@pytest.fixture
def package():
    reset_ids()
    return Package(make_details())


def test_constructor(package):
    assert package.position == pytest.approx([1, 2, 3])
    assert package.direction == pytest.approx([1, 0, 0])
    assert package.name == "package"
    assert package.radius == pytest.approx(1)
    assert package.version == 0
    assert package.dynamic is False
    assert package.customer is None


def test_id_follows_earlier_entities():
    reset_ids()
    for _ in range(11):
        Customer(make_details("customer", "customer"))
    package = Package(make_details())
    assert package.id == 11


def test_weight(package):
    assert package.weight == 0
    package.weight = 1.0
    assert package.weight == pytest.approx(1)


def test_customer_assignment(package):
    customer = Customer(make_details("customer", "customer"))
    package.customer = customer
    assert package.customer is customer


@pytest.mark.parametrize(
    "status, value",
    [
        (PackageStatus.SCHEDULED, "scheduled"),
        (PackageStatus.EN_ROUTE, "en route"),
        (PackageStatus.DELIVERED, "delivered"),
        ("en route", "en route"),
    ],
)
def test_notify_sends_event(package, status, value):
    recorder = Recorder()
    package.set_observers([recorder])
    package.notify(status)
    assert recorder.events == [({"type": "notify", "value": value}, package)]


def test_notify_reaches_every_observer(package):
    first, second = Recorder(), Recorder()
    package.set_observers([first, second])
    package.notify(PackageStatus.DELIVERED)
    assert len(first.events) == 1
    assert len(second.events) == 1


def test_notify_unknown_status_raises(package):
    with pytest.raises(ValueError):
        package.notify("lost")


def test_default_package():
    package = Package()
    assert package.id == 0
    assert package.name == ""
    assert package.weight == 0
    assert package.customer is None