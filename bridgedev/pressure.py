"""Bridged pressure sensor device."""

from __future__ import annotations

import logging

from .clusters import ClusterId, GlobalAttribute, MeasurementAttribute
from .device import AttributeAccessError, Device, Reporter

logger = logging.getLogger(__name__)


class PressureSensor(Device):
    """A bridged device exposing the Pressure Measurement cluster."""

    PRESSURE_FEATURE_MAP = 0
    PRESSURE_REVISION = 3

    def __init__(
        self,
        name: str,
        min_value: int,
        max_value: int,
        measured_value: int,
        reporter: Reporter | None = None,
    ) -> None:
        super().__init__(name, reporter)
        self.min_value = min_value
        self.max_value = max_value
        self._measured_value = measured_value

    @property
    def measured_value(self) -> int:
        return self._measured_value

    def set_measured_value(self, measurement: int) -> None:
        """Store a measurement clamped to the sensor's range."""
        measurement = max(self.min_value, min(measurement, self.max_value))
        changed = self._measured_value != measurement
        logger.info("PressureSensorDevice[%s]: new measurement='%d'", self.name, measurement)
        self._measured_value = measurement
        if changed:
            self.report(ClusterId.PRESSURE_MEASUREMENT, MeasurementAttribute.MEASURED_VALUE)
            self.notify_change()

    def read_attribute(self, cluster_id: int, attribute_id: int, max_read_length: int) -> bytes:
        """Read a Pressure Measurement or Bridged Device Basic Information attribute."""
        if not self.reachable:
            raise AttributeAccessError("device is not reachable")
        if cluster_id == ClusterId.BRIDGED_DEVICE_BASIC_INFORMATION:
            return self.read_bridged_basic_attribute(cluster_id, attribute_id, max_read_length)
        if cluster_id != ClusterId.PRESSURE_MEASUREMENT:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")
        fields = {
            MeasurementAttribute.MEASURED_VALUE: ("h", self._measured_value),
            MeasurementAttribute.MIN_MEASURED_VALUE: ("h", self.min_value),
            MeasurementAttribute.MAX_MEASURED_VALUE: ("h", self.max_value),
            GlobalAttribute.FEATURE_MAP: ("I", self.PRESSURE_FEATURE_MAP),
            GlobalAttribute.CLUSTER_REVISION: ("H", self.PRESSURE_REVISION),
        }
        return self._read_fields(fields, attribute_id, max_read_length)