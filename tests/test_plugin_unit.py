import pytest

from bridgedev.clusters import ClusterId, GlobalAttribute, OnOffAttribute
from bridgedev.device import AttributeAccessError
from bridgedev.plugin_unit import OnOffPluginUnit


@pytest.fixture
def reports():
    return []


@pytest.fixture
def unit(reports):
    dev = OnOffPluginUnit("Lamp", lambda *args: reports.append(args))
    dev.endpoint_id = 3
    dev.set_reachable(True)
    reports.clear()
    return dev


def test_starts_off(unit):
    assert unit.is_on is False


def test_set_on_reports_and_notifies(unit, reports):
    calls = []
    unit.on_change = lambda: calls.append(1)
    unit.set_on_off(True)
    assert unit.is_on is True
    assert reports == [(3, ClusterId.ON_OFF, OnOffAttribute.ON_OFF)]
    assert len(calls) == 1


def test_same_state_does_not_report(unit, reports):
    calls = []
    unit.on_change = lambda: calls.append(1)
    unit.set_on_off(False)
    assert unit.is_on is False
    assert unit.read_attribute(ClusterId.ON_OFF, OnOffAttribute.ON_OFF, 1) == b"\x00"
    assert reports == []
    assert calls == []


def test_toggle_twice_restores_state(unit, reports):
    unit.toggle()
    assert unit.is_on is True
    unit.toggle()
    assert unit.is_on is False
    assert len(reports) == 2


def test_read_on_off(unit):
    unit.set_on_off(True)
    assert unit.read_attribute(ClusterId.ON_OFF, OnOffAttribute.ON_OFF, 1) == b"\x01"


def test_read_global_attributes(unit):
    revision = unit.read_attribute(ClusterId.ON_OFF, GlobalAttribute.CLUSTER_REVISION, 2)
    assert int.from_bytes(revision, "little") == OnOffPluginUnit.ON_OFF_REVISION
    feature_map = unit.read_attribute(ClusterId.ON_OFF, GlobalAttribute.FEATURE_MAP, 4)
    assert feature_map == bytes(4)


def test_read_invalid_length_fails(unit):
    with pytest.raises(AttributeAccessError):
        unit.read_attribute(ClusterId.ON_OFF, OnOffAttribute.ON_OFF, 4)


def test_read_other_cluster_yields_nothing(unit):
    assert unit.read_attribute(ClusterId.THERMOSTAT, 0, 2) == b""


def test_read_unreachable_fails():
    dev = OnOffPluginUnit("Lamp")
    with pytest.raises(AttributeAccessError):
        dev.read_attribute(ClusterId.ON_OFF, OnOffAttribute.ON_OFF, 1)


def test_write_switches_state(unit):
    unit.write_attribute(ClusterId.ON_OFF, OnOffAttribute.ON_OFF, b"\x07")
    assert unit.is_on is True
    unit.write_attribute(ClusterId.ON_OFF, OnOffAttribute.ON_OFF, b"\x00")
    assert unit.is_on is False


def test_write_other_attribute_fails(unit):
    with pytest.raises(AttributeAccessError):
        unit.write_attribute(ClusterId.ON_OFF, GlobalAttribute.CLUSTER_REVISION, b"\x01")


def test_write_unreachable_fails():
    dev = OnOffPluginUnit("Lamp")
    with pytest.raises(AttributeAccessError):
        dev.write_attribute(ClusterId.ON_OFF, OnOffAttribute.ON_OFF, b"\x01")