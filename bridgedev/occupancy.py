"""Bridged occupancy sensor device."""

from __future__ import annotations

import logging

from .clusters import ClusterId, GlobalAttribute, OccupancyAttribute
from .device import AttributeAccessError, Device, Reporter

logger = logging.getLogger(__name__)


class OccupancySensor(Device):
    """A bridged device exposing the Occupancy Sensing cluster."""

    OCCUPANCY_FEATURE_MAP = 0
    OCCUPANCY_REVISION = 3

    def __init__(self, name: str, reporter: Reporter | None = None) -> None:
        super().__init__(name, reporter)
        self._occupancy = False

    @property
    def occupancy(self) -> bool:
        return self._occupancy

    def set_occupancy(self, occupied: bool) -> None:
        """Set the occupancy state, reporting and notifying when it changes."""
        occupied = bool(occupied)
        changed = self._occupancy != occupied
        logger.info("OccupancySensorDevice[%s]: New state='%d'", self.name, occupied)
        self._occupancy = occupied
        if changed:
            self.report(ClusterId.OCCUPANCY_SENSING, OccupancyAttribute.OCCUPANCY)
            self.notify_change()

    def read_attribute(self, cluster_id: int, attribute_id: int, max_read_length: int) -> bytes:
        """Read an Occupancy Sensing or Bridged Device Basic Information attribute."""
        if not self.reachable:
            raise AttributeAccessError("device is not reachable")
        if cluster_id == ClusterId.BRIDGED_DEVICE_BASIC_INFORMATION:
            return self.read_bridged_basic_attribute(cluster_id, attribute_id, max_read_length)
        if cluster_id != ClusterId.OCCUPANCY_SENSING:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")
        fields = {
            OccupancyAttribute.OCCUPANCY: ("B", 1 if self._occupancy else 0),
            GlobalAttribute.FEATURE_MAP: ("I", self.OCCUPANCY_FEATURE_MAP),
            GlobalAttribute.CLUSTER_REVISION: ("H", self.OCCUPANCY_REVISION),
        }
        return self._read_fields(fields, attribute_id, max_read_length)