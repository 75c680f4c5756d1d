"""Bridged heating thermostat device."""

from __future__ import annotations

import logging
import struct

from .clusters import ClusterId, GlobalAttribute, ThermostatAttribute
from .device import AttributeAccessError, Device, Reporter

logger = logging.getLogger(__name__)


class Thermostat(Device):
    """A bridged device exposing a heating-only Thermostat cluster.

    Temperatures are in hundredths of a degree Celsius.
    """

    CONTROL_SEQUENCE_OF_OPERATION = 2  # heating only
    THERMOSTAT_FEATURE_MAP = 1  # heating capability
    THERMOSTAT_REVISION = 5

    DEFAULT_ABS_MIN_HEATING_SETPOINT = 700
    DEFAULT_MIN_HEATING_SETPOINT = 1600
    DEFAULT_ABS_MAX_HEATING_SETPOINT = 3200
    DEFAULT_MAX_HEATING_SETPOINT = 3000

    def __init__(
        self,
        name: str,
        local_temperature: int,
        heating_setpoint: int,
        reporter: Reporter | None = None,
    ) -> None:
        super().__init__(name, reporter)
        self._local_temperature = local_temperature
        self._heating_setpoint = heating_setpoint
        self._system_mode = 0
        self._abs_min_heating_setpoint = self.DEFAULT_ABS_MIN_HEATING_SETPOINT
        self._min_heating_setpoint = self.DEFAULT_MIN_HEATING_SETPOINT
        self._abs_max_heating_setpoint = self.DEFAULT_ABS_MAX_HEATING_SETPOINT
        self._max_heating_setpoint = self.DEFAULT_MAX_HEATING_SETPOINT

    # -- properties -------------------------------------------------------

    @property
    def local_temperature(self) -> int:
        return self._local_temperature

    @property
    def heating_setpoint(self) -> int:
        return self._heating_setpoint

    @property
    def system_mode(self) -> int:
        return self._system_mode

    @property
    def abs_min_heating_setpoint(self) -> int:
        return self._abs_min_heating_setpoint

    @property
    def min_heating_setpoint(self) -> int:
        return self._min_heating_setpoint

    @property
    def abs_max_heating_setpoint(self) -> int:
        return self._abs_max_heating_setpoint

    @property
    def max_heating_setpoint(self) -> int:
        return self._max_heating_setpoint

    # -- state changes ----------------------------------------------------

    def set_local_temperature(self, local_temperature: int) -> None:
        """Store the measured local temperature."""
        changed = self._local_temperature != local_temperature
        logger.info("ThermostatDevice[%s]: new local temp='%d'", self.name, local_temperature)
        self._local_temperature = local_temperature
        if changed:
            self.report(ClusterId.THERMOSTAT, ThermostatAttribute.LOCAL_TEMPERATURE)
            self.notify_change()

    def set_heating_setpoint(self, heating_setpoint: int) -> None:
        """Store the heating setpoint clamped to the absolute limits.

        Whether a change is reported depends on the requested value,
        not on the clamped one.
        """
        changed = self._heating_setpoint != heating_setpoint
        heating_setpoint = max(self._abs_min_heating_setpoint, heating_setpoint)
        heating_setpoint = min(self._abs_max_heating_setpoint, heating_setpoint)
        logger.info(
            "ThermostatDevice[%s]: new heating setpoint='%d'", self.name, heating_setpoint
        )
        self._heating_setpoint = heating_setpoint
        if changed:
            self.report(ClusterId.THERMOSTAT, ThermostatAttribute.OCCUPIED_HEATING_SETPOINT)
            self.notify_change()

    def set_system_mode(self, system_mode: int) -> None:
        """Store the system mode, a single byte."""
        system_mode = int(system_mode)
        if not 0 <= system_mode <= 0xFF:
            raise ValueError(f"system_mode must fit in one byte, got {system_mode}")
        changed = self._system_mode != system_mode
        logger.info("ThermostatDevice[%s]: new system mode='%d'", self.name, system_mode)
        self._system_mode = system_mode
        if changed:
            self.report(ClusterId.THERMOSTAT, ThermostatAttribute.SYSTEM_MODE)
            self.notify_change()

    def set_abs_min_heating_setpoint(self, value: int) -> None:
        """Set the absolute minimum; ignored if above the current minimum."""
        if value > self._min_heating_setpoint:
            return
        self._abs_min_heating_setpoint = value

    def set_min_heating_setpoint(self, value: int) -> None:
        """Set the minimum; ignored if below the absolute minimum."""
        if value < self._abs_min_heating_setpoint:
            return
        self._min_heating_setpoint = value

    def set_abs_max_heating_setpoint(self, value: int) -> None:
        """Set the absolute maximum; ignored if below the current maximum."""
        if self._max_heating_setpoint > value:
            return
        self._abs_max_heating_setpoint = value

    def set_max_heating_setpoint(self, value: int) -> None:
        """Set the maximum; ignored if above the absolute maximum."""
        if value > self._abs_max_heating_setpoint:
            return
        self._max_heating_setpoint = value

    # -- attribute access -------------------------------------------------

    def read_attribute(self, cluster_id: int, attribute_id: int, max_read_length: int) -> bytes:
        """Read a Thermostat or Bridged Device Basic Information attribute."""
        if not self.reachable:
            raise AttributeAccessError("device is not reachable")
        logger.debug(
            "HandleReadThermostatAttribute: clusterId=%d attrId=%d", cluster_id, attribute_id
        )
        if cluster_id == ClusterId.BRIDGED_DEVICE_BASIC_INFORMATION:
            return self.read_bridged_basic_attribute(cluster_id, attribute_id, max_read_length)
        if cluster_id != ClusterId.THERMOSTAT:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")
        fields = {
            ThermostatAttribute.LOCAL_TEMPERATURE: ("h", self._local_temperature),
            ThermostatAttribute.OCCUPIED_HEATING_SETPOINT: ("h", self._heating_setpoint),
            ThermostatAttribute.SYSTEM_MODE: ("B", self._system_mode),
            ThermostatAttribute.CONTROL_SEQUENCE_OF_OPERATION: (
                "B",
                self.CONTROL_SEQUENCE_OF_OPERATION,
            ),
            ThermostatAttribute.ABS_MIN_HEAT_SETPOINT_LIMIT: (
                "h",
                self._abs_min_heating_setpoint,
            ),
            ThermostatAttribute.ABS_MAX_HEAT_SETPOINT_LIMIT: (
                "h",
                self._abs_max_heating_setpoint,
            ),
            ThermostatAttribute.MIN_HEAT_SETPOINT_LIMIT: ("h", self._min_heating_setpoint),
            ThermostatAttribute.MAX_HEAT_SETPOINT_LIMIT: ("h", self._max_heating_setpoint),
            GlobalAttribute.FEATURE_MAP: ("I", self.THERMOSTAT_FEATURE_MAP),
            GlobalAttribute.CLUSTER_REVISION: ("H", self.THERMOSTAT_REVISION),
        }
        return self._read_fields(fields, attribute_id, max_read_length)

    def write_attribute(self, cluster_id: int, attribute_id: int, data: bytes) -> None:
        """Write the heating setpoint (little-endian int16) or the system mode (one byte)."""
        if not self.reachable:
            raise AttributeAccessError("device is not reachable")
        if cluster_id != ClusterId.THERMOSTAT:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")
        if attribute_id == ThermostatAttribute.OCCUPIED_HEATING_SETPOINT:
            if len(data) < 2:
                raise AttributeAccessError("heating setpoint needs two bytes")
            (setpoint,) = struct.unpack_from("<h", data)
            self.set_heating_setpoint(setpoint)
        elif attribute_id == ThermostatAttribute.SYSTEM_MODE:
            self.set_system_mode(self._first_byte(data))
        else:
            raise AttributeAccessError(f"unsupported attribute 0x{attribute_id:04x}")