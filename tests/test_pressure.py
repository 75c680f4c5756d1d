import struct

import pytest

from bridgedev.clusters import ClusterId, GlobalAttribute, MeasurementAttribute
from bridgedev.device import AttributeAccessError
from bridgedev.pressure import PressureSensor


@pytest.fixture
def reports():
    return []


@pytest.fixture
def sensor(reports):
    dev = PressureSensor("Barometer", 300, 1100, 1000, lambda *args: reports.append(args))
    dev.endpoint_id = 5
    dev.set_reachable(True)
    reports.clear()
    return dev


def test_initial_value(sensor):
    assert sensor.measured_value == 1000
    assert (sensor.min_value, sensor.max_value) == (300, 1100)


def test_set_value_reports_and_notifies(sensor, reports):
    calls = []
    sensor.on_change = lambda: calls.append(1)
    sensor.set_measured_value(950)
    assert sensor.measured_value == 950
    assert reports == [(5, ClusterId.PRESSURE_MEASUREMENT, MeasurementAttribute.MEASURED_VALUE)]
    assert len(calls) == 1


def test_value_is_clamped(sensor):
    sensor.set_measured_value(-20)
    assert sensor.measured_value == sensor.min_value
    sensor.set_measured_value(5000)
    assert sensor.measured_value == sensor.max_value


def test_clamped_to_same_value_does_not_report(sensor, reports):
    sensor.set_measured_value(5000)
    reports.clear()
    sensor.set_measured_value(6000)
    assert sensor.measured_value == 1100
    assert reports == []


def test_read_measurements(sensor):
    sensor.set_measured_value(812)
    cluster = ClusterId.PRESSURE_MEASUREMENT
    assert sensor.read_attribute(cluster, MeasurementAttribute.MEASURED_VALUE, 2) == struct.pack(
        "<h", 812
    )
    assert sensor.read_attribute(
        cluster, MeasurementAttribute.MIN_MEASURED_VALUE, 2
    ) == struct.pack("<h", 300)
    assert sensor.read_attribute(
        cluster, MeasurementAttribute.MAX_MEASURED_VALUE, 2
    ) == struct.pack("<h", 1100)


def test_read_negative_range():
    dev = PressureSensor("Probe", -500, 500, -250)
    dev.set_reachable(True)
    data = dev.read_attribute(
        ClusterId.PRESSURE_MEASUREMENT, MeasurementAttribute.MEASURED_VALUE, 2
    )
    assert struct.unpack("<h", data)[0] == -250


def test_read_global_attributes(sensor):
    revision = sensor.read_attribute(
        ClusterId.PRESSURE_MEASUREMENT, GlobalAttribute.CLUSTER_REVISION, 2
    )
    assert int.from_bytes(revision, "little") == PressureSensor.PRESSURE_REVISION
    feature_map = sensor.read_attribute(
        ClusterId.PRESSURE_MEASUREMENT, GlobalAttribute.FEATURE_MAP, 4
    )
    assert feature_map == bytes(4)


def test_read_wrong_length_fails(sensor):
    with pytest.raises(AttributeAccessError):
        sensor.read_attribute(
            ClusterId.PRESSURE_MEASUREMENT, MeasurementAttribute.MEASURED_VALUE, 1
        )


def test_read_other_cluster_fails(sensor):
    with pytest.raises(AttributeAccessError):
        sensor.read_attribute(ClusterId.TEMPERATURE_MEASUREMENT, 0, 2)


def test_read_unreachable_fails():
    dev = PressureSensor("Barometer", 300, 1100, 1000)
    with pytest.raises(AttributeAccessError):
        dev.read_attribute(
            ClusterId.PRESSURE_MEASUREMENT, MeasurementAttribute.MEASURED_VALUE, 2
        )