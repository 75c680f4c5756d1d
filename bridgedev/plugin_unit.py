"""Bridged on/off plug-in unit device."""

from __future__ import annotations

import logging

from .clusters import ClusterId, GlobalAttribute, OnOffAttribute
from .device import AttributeAccessError, Device, Reporter

logger = logging.getLogger(__name__)


class OnOffPluginUnit(Device):
    """A bridged device exposing the On/Off cluster."""

    ON_OFF_FEATURE_MAP = 0
    ON_OFF_REVISION = 5

    def __init__(self, name: str, reporter: Reporter | None = None) -> None:
        super().__init__(name, reporter)
        self._is_on = False

    @property
    def is_on(self) -> bool:
        return self._is_on

    def set_on_off(self, on: bool) -> None:
        """Switch the unit on or off, reporting and notifying when it changes."""
        on = bool(on)
        changed = on != self._is_on
        self._is_on = on
        logger.info("DeviceOnOffPluginUnit[%s]: %s", self.name, "ON" if on else "OFF")
        if changed:
            self.report(ClusterId.ON_OFF, OnOffAttribute.ON_OFF)
            self.notify_change()

    def toggle(self) -> None:
        """Invert the on/off state."""
        self.set_on_off(not self._is_on)

    def read_attribute(self, cluster_id: int, attribute_id: int, max_read_length: int) -> bytes:
        """Read an On/Off or Bridged Device Basic Information attribute.

        Reads of other clusters succeed without producing any data.
        """
        if not self.reachable:
            raise AttributeAccessError("device is not reachable")
        if cluster_id == ClusterId.BRIDGED_DEVICE_BASIC_INFORMATION:
            return self.read_bridged_basic_attribute(cluster_id, attribute_id, max_read_length)
        if cluster_id != ClusterId.ON_OFF:
            return b""
        fields = {
            OnOffAttribute.ON_OFF: ("B", 1 if self._is_on else 0),
            GlobalAttribute.CLUSTER_REVISION: ("H", self.ON_OFF_REVISION),
            GlobalAttribute.FEATURE_MAP: ("I", self.ON_OFF_FEATURE_MAP),
        }
        return self._read_fields(fields, attribute_id, max_read_length)

    def write_attribute(self, cluster_id: int, attribute_id: int, data: bytes) -> None:
        """Write the On/Off attribute; any non-zero first byte means on."""
        if not self.reachable:
            raise AttributeAccessError("device is not reachable")
        if cluster_id != ClusterId.ON_OFF or attribute_id != OnOffAttribute.ON_OFF:
            raise AttributeAccessError(
                f"attribute 0x{attribute_id:04x} of cluster 0x{cluster_id:04x} is not writable"
            )
        self.set_on_off(bool(self._first_byte(data)))