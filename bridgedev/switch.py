"""Bridged generic switch device."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .clusters import ClusterId, GlobalAttribute, SwitchAttribute
from .device import AttributeAccessError, Device, Reporter

logger = logging.getLogger(__name__)

EventSink = Callable[[str, int, int], None]


def _check_byte(value: int, label: str) -> int:
    value = int(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{label} must fit in one byte, got {value}")
    return value


class Switch(Device):
    """A bridged device exposing the Switch cluster.

    Changes of the current position emit an ``INITIAL_PRESS`` event when the
    new position is non-zero and a ``SHORT_RELEASE`` event when it is zero.
    The event sink is called with ``(event, endpoint_id, position)``.
    """

    SWITCH_FEATURE_MAP = 6  # momentary switch with release support
    SWITCH_REVISION = 1

    INITIAL_PRESS = "initial_press"
    SHORT_RELEASE = "short_release"

    def __init__(
        self,
        name: str,
        reporter: Reporter | None = None,
        event_sink: EventSink | None = None,
    ) -> None:
        super().__init__(name, reporter)
        self._event_sink = event_sink
        self._number_of_positions = 2
        self._current_position = 0
        self._multi_press_max = 2

    @property
    def number_of_positions(self) -> int:
        return self._number_of_positions

    @property
    def current_position(self) -> int:
        return self._current_position

    @property
    def multi_press_max(self) -> int:
        return self._multi_press_max

    def set_number_of_positions(self, number_of_positions: int) -> None:
        """Set the number of switch positions."""
        number_of_positions = _check_byte(number_of_positions, "number_of_positions")
        changed = self._number_of_positions != number_of_positions
        self._number_of_positions = number_of_positions
        if changed:
            self.report(ClusterId.SWITCH, SwitchAttribute.NUMBER_OF_POSITIONS)
            self.notify_change()

    def set_current_position(self, current_position: int) -> None:
        """Set the current position and emit the matching press or release event."""
        current_position = _check_byte(current_position, "current_position")
        changed = self._current_position != current_position
        self._current_position = current_position
        if changed:
            self.report(ClusterId.SWITCH, SwitchAttribute.CURRENT_POSITION)
            if self._event_sink is not None:
                event = self.INITIAL_PRESS if current_position else self.SHORT_RELEASE
                self._event_sink(event, self.endpoint_id, current_position)
            self.notify_change()

    def set_multi_press_max(self, multi_press_max: int) -> None:
        """Set the maximum number of presses in a multi-press sequence."""
        multi_press_max = _check_byte(multi_press_max, "multi_press_max")
        changed = self._multi_press_max != multi_press_max
        self._multi_press_max = multi_press_max
        if changed:
            self.report(ClusterId.SWITCH, SwitchAttribute.MULTI_PRESS_MAX)
            self.notify_change()

    def read_attribute(self, cluster_id: int, attribute_id: int, max_read_length: int) -> bytes:
        """Read a Switch or Bridged Device Basic Information attribute."""
        if not self.reachable:
            raise AttributeAccessError("device is not reachable")
        logger.debug(
            "HandleReadSwitchAttribute: clusterId=%d attrId=%d", cluster_id, attribute_id
        )
        if cluster_id == ClusterId.BRIDGED_DEVICE_BASIC_INFORMATION:
            return self.read_bridged_basic_attribute(cluster_id, attribute_id, max_read_length)
        if cluster_id != ClusterId.SWITCH:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")
        fields = {
            SwitchAttribute.CURRENT_POSITION: ("B", self._current_position),
            SwitchAttribute.NUMBER_OF_POSITIONS: ("B", self._number_of_positions),
            SwitchAttribute.MULTI_PRESS_MAX: ("B", self._multi_press_max),
            GlobalAttribute.FEATURE_MAP: ("I", self.SWITCH_FEATURE_MAP),
            GlobalAttribute.CLUSTER_REVISION: ("H", self.SWITCH_REVISION),
        }
        return self._read_fields(fields, attribute_id, max_read_length)

    def write_attribute(self, cluster_id: int, attribute_id: int, data: bytes) -> None:
        """Write a Switch attribute from the first byte of ``data``."""
        if not self.reachable:
            raise AttributeAccessError("device is not reachable")
        if cluster_id != ClusterId.SWITCH:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")
        setters = {
            SwitchAttribute.CURRENT_POSITION: self.set_current_position,
            SwitchAttribute.NUMBER_OF_POSITIONS: self.set_number_of_positions,
            SwitchAttribute.MULTI_PRESS_MAX: self.set_multi_press_max,
        }
        setter = setters.get(attribute_id)
        if setter is None:
            raise AttributeAccessError(f"unsupported attribute 0x{attribute_id:04x}")
        setter(self._first_byte(data))