import struct

import pytest

from bridgedev.clusters import (
    BridgedBasicAttribute,
    ClusterId,
    GlobalAttribute,
    SwitchAttribute,
)
from bridgedev.device import AttributeAccessError
from bridgedev.switch import Switch


@pytest.fixture
def setup():
    reports = []
    events = []
    changes = []
    switch = Switch(
        "button",
        lambda ep, cl, at: reports.append((ep, cl, at)),
        lambda ev, ep, pos: events.append((ev, ep, pos)),
    )
    switch.endpoint_id = 7
    switch.on_change = lambda: changes.append(True)
    switch.set_reachable(True)
    reports.clear()
    return switch, reports, events, changes


def test_defaults(setup):
    switch, _, _, _ = setup
    assert switch.number_of_positions == 2
    assert switch.current_position == 0
    assert switch.multi_press_max == 2


def test_read_defaults(setup):
    switch, _, _, _ = setup
    assert switch.read_attribute(ClusterId.SWITCH, SwitchAttribute.NUMBER_OF_POSITIONS, 1) == bytes([2])
    assert switch.read_attribute(ClusterId.SWITCH, SwitchAttribute.CURRENT_POSITION, 1) == bytes([0])
    assert switch.read_attribute(ClusterId.SWITCH, SwitchAttribute.MULTI_PRESS_MAX, 1) == bytes([2])


def test_read_global_attributes(setup):
    switch, _, _, _ = setup
    assert switch.read_attribute(ClusterId.SWITCH, GlobalAttribute.FEATURE_MAP, 4) == struct.pack(
        "<I", Switch.SWITCH_FEATURE_MAP
    )
    assert switch.read_attribute(
        ClusterId.SWITCH, GlobalAttribute.CLUSTER_REVISION, 2
    ) == struct.pack("<H", Switch.SWITCH_REVISION)
    assert Switch.SWITCH_FEATURE_MAP == 6


def test_read_wrong_length_fails(setup):
    switch, _, _, _ = setup
    with pytest.raises(AttributeAccessError):
        switch.read_attribute(ClusterId.SWITCH, SwitchAttribute.CURRENT_POSITION, 2)


def test_read_other_cluster_fails(setup):
    switch, _, _, _ = setup
    with pytest.raises(AttributeAccessError):
        switch.read_attribute(ClusterId.ON_OFF, 0, 1)


def test_read_unreachable_fails():
    switch = Switch("button")
    with pytest.raises(AttributeAccessError):
        switch.read_attribute(ClusterId.SWITCH, SwitchAttribute.CURRENT_POSITION, 1)


def test_read_delegates_bridged_basic(setup):
    switch, _, _, _ = setup
    assert switch.read_attribute(
        ClusterId.BRIDGED_DEVICE_BASIC_INFORMATION, BridgedBasicAttribute.REACHABLE, 1
    ) == b"\x01"


def test_press_and_release_events(setup):
    switch, reports, events, changes = setup
    switch.set_current_position(1)
    switch.set_current_position(0)
    assert events == [(Switch.INITIAL_PRESS, 7, 1), (Switch.SHORT_RELEASE, 7, 0)]
    assert reports == [(7, ClusterId.SWITCH, SwitchAttribute.CURRENT_POSITION)] * 2
    assert len(changes) == 2


def test_unchanged_position_is_silent(setup):
    switch, reports, events, changes = setup
    switch.set_current_position(0)
    assert reports == []
    assert events == []
    assert changes == []


def test_set_number_of_positions_reports(setup):
    switch, reports, events, changes = setup
    switch.set_number_of_positions(3)
    assert switch.number_of_positions == 3
    assert reports == [(7, ClusterId.SWITCH, SwitchAttribute.NUMBER_OF_POSITIONS)]
    assert events == []
    assert len(changes) == 1


def test_set_multi_press_max_reports(setup):
    switch, reports, _, changes = setup
    switch.set_multi_press_max(4)
    assert switch.multi_press_max == 4
    assert reports == [(7, ClusterId.SWITCH, SwitchAttribute.MULTI_PRESS_MAX)]
    assert len(changes) == 1


@pytest.mark.parametrize(
    "attribute, name",
    [
        (SwitchAttribute.CURRENT_POSITION, "current_position"),
        (SwitchAttribute.NUMBER_OF_POSITIONS, "number_of_positions"),
        (SwitchAttribute.MULTI_PRESS_MAX, "multi_press_max"),
    ],
)
def test_write_then_read_round_trip(setup, attribute, name):
    switch, _, _, _ = setup
    switch.write_attribute(ClusterId.SWITCH, attribute, bytes([5]))
    assert getattr(switch, name) == 5
    assert switch.read_attribute(ClusterId.SWITCH, attribute, 1) == bytes([5])


def test_write_other_cluster_fails(setup):
    switch, _, _, _ = setup
    with pytest.raises(AttributeAccessError):
        switch.write_attribute(ClusterId.ON_OFF, SwitchAttribute.CURRENT_POSITION, b"\x01")


def test_write_unsupported_attribute_fails(setup):
    switch, _, _, _ = setup
    with pytest.raises(AttributeAccessError):
        switch.write_attribute(ClusterId.SWITCH, GlobalAttribute.FEATURE_MAP, b"\x01")


def test_write_unreachable_fails():
    switch = Switch("button")
    with pytest.raises(AttributeAccessError):
        switch.write_attribute(ClusterId.SWITCH, SwitchAttribute.CURRENT_POSITION, b"\x01")
    assert switch.current_position == 0


def test_out_of_range_value_rejected(setup):
    switch, _, _, _ = setup
    with pytest.raises(ValueError):
        switch.set_current_position(256)