"""Bridged window covering device."""

from __future__ import annotations

import logging
from enum import IntEnum

from .clusters import ClusterId, GlobalAttribute, WindowCoveringAttribute
from .device import AttributeAccessError, Device, Reporter

logger = logging.getLogger(__name__)


class OperationalStatus(IntEnum):
    """Movement states a window covering can be put in."""

    OPENING = 0x00
    CLOSING = 0x01
    STOPPED = 0x02


_STATUS_BITMAPS = {
    OperationalStatus.OPENING: 0x05,
    OperationalStatus.CLOSING: 0x0A,
    OperationalStatus.STOPPED: 0x00,
}


def _check_lift_position(value: int) -> int:
    value = int(value)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"lift position must fit in two bytes, got {value}")
    return value


class WindowCovering(Device):
    """A bridged roller shade exposing the Window Covering cluster.

    Lift positions are in hundredths of a percent, from 0 to ``MAX_LIFT_POSITION``.
    """

    MAX_LIFT_POSITION = 10000
    WINDOW_COVERING_FEATURE_MAP = 5  # lift and position-aware lift
    WINDOW_COVERING_REVISION = 5

    TYPE_ROLLER_SHADE = 0
    CONFIG_STATUS_OPERATIONAL = 1
    END_PRODUCT_TYPE_ROLLER_SHADE = 0
    MODE_NONE = 0

    def __init__(self, name: str, reporter: Reporter | None = None) -> None:
        super().__init__(name, reporter)
        self._operational_status = int(OperationalStatus.STOPPED)
        self._requested_lift_position = 0
        self._actual_lift_position = 0

    @property
    def operational_status(self) -> int:
        """The operational status bitmap as served on the cluster."""
        return self._operational_status

    @property
    def requested_lift_position(self) -> int:
        return self._requested_lift_position

    @property
    def actual_lift_position(self) -> int:
        return self._actual_lift_position

    def set_operational_status(self, status: int) -> None:
        """Set the movement state; unknown states are treated as stopped."""
        try:
            known = OperationalStatus(status)
        except ValueError:
            logger.error(
                "WindowCoveringDevice[%s]: unknown operational status='%s'", self.name, status
            )
            bitmap = 0x00
        else:
            logger.info(
                "WindowCoveringDevice[%s]: operational status='%s'",
                self.name,
                known.name.lower(),
            )
            bitmap = _STATUS_BITMAPS[known]
        self._operational_status = bitmap
        self.report(ClusterId.WINDOW_COVERING, WindowCoveringAttribute.OPERATIONAL_STATUS)
        self.notify_change()

    def set_requested_lift_position(self, lift_position: int) -> None:
        """Set the target lift position, capped at the maximum."""
        lift_position = min(_check_lift_position(lift_position), self.MAX_LIFT_POSITION)
        logger.info(
            "WindowCoveringDevice[%s]: new requested position='%d'", self.name, lift_position
        )
        self._requested_lift_position = lift_position
        self.report(
            ClusterId.WINDOW_COVERING,
            WindowCoveringAttribute.TARGET_POSITION_LIFT_PERCENT_100THS,
        )
        self.notify_change()

    def set_actual_lift_position(self, lift_position: int) -> None:
        """Set the current lift position, capped at the maximum."""
        lift_position = min(_check_lift_position(lift_position), self.MAX_LIFT_POSITION)
        logger.info(
            "WindowCoveringDevice[%s]: new actual position='%d'", self.name, lift_position
        )
        self._actual_lift_position = lift_position
        self.report(
            ClusterId.WINDOW_COVERING,
            WindowCoveringAttribute.CURRENT_POSITION_LIFT_PERCENT_100THS,
        )
        self.notify_change()

    def read_attribute(self, cluster_id: int, attribute_id: int, max_read_length: int) -> bytes:
        """Read a Window Covering or Bridged Device Basic Information attribute."""
        if not self.reachable:
            raise AttributeAccessError("device is not reachable")
        logger.debug(
            "HandleReadWindowCoveringAttribute: clusterId=%d attrId=%d", cluster_id, attribute_id
        )
        if cluster_id == ClusterId.BRIDGED_DEVICE_BASIC_INFORMATION:
            return self.read_bridged_basic_attribute(cluster_id, attribute_id, max_read_length)
        if cluster_id != ClusterId.WINDOW_COVERING:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")
        fields = {
            WindowCoveringAttribute.TYPE: ("B", self.TYPE_ROLLER_SHADE),
            WindowCoveringAttribute.CURRENT_POSITION_LIFT_PERCENT_100THS: (
                "H",
                self._actual_lift_position,
            ),
            WindowCoveringAttribute.TARGET_POSITION_LIFT_PERCENT_100THS: (
                "H",
                self._requested_lift_position,
            ),
            WindowCoveringAttribute.CONFIG_STATUS: ("B", self.CONFIG_STATUS_OPERATIONAL),
            WindowCoveringAttribute.OPERATIONAL_STATUS: ("B", self._operational_status),
            WindowCoveringAttribute.END_PRODUCT_TYPE: ("B", self.END_PRODUCT_TYPE_ROLLER_SHADE),
            WindowCoveringAttribute.MODE: ("B", self.MODE_NONE),
            GlobalAttribute.FEATURE_MAP: ("I", self.WINDOW_COVERING_FEATURE_MAP),
            GlobalAttribute.CLUSTER_REVISION: ("H", self.WINDOW_COVERING_REVISION),
        }
        return self._read_fields(fields, attribute_id, max_read_length)