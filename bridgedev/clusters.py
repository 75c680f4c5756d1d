"""Cluster and attribute identifiers used by bridged devices."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class ClusterId(IntEnum):
    """Identifiers of the clusters served by bridged devices."""

    IDENTIFY = 0x0003
    GROUPS = 0x0004
    ON_OFF = 0x0006
    BRIDGED_DEVICE_BASIC_INFORMATION = 0x0039
    SWITCH = 0x003B
    WINDOW_COVERING = 0x0102
    THERMOSTAT = 0x0201
    TEMPERATURE_MEASUREMENT = 0x0402
    PRESSURE_MEASUREMENT = 0x0403
    OCCUPANCY_SENSING = 0x0406


@unique
class GlobalAttribute(IntEnum):
    """Attributes present on every cluster."""

    FEATURE_MAP = 0xFFFC
    CLUSTER_REVISION = 0xFFFD


@unique
class BridgedBasicAttribute(IntEnum):
    """Attributes of the Bridged Device Basic Information cluster."""

    VENDOR_NAME = 0x0001
    PRODUCT_NAME = 0x0003
    NODE_LABEL = 0x0005
    SERIAL_NUMBER = 0x000F
    REACHABLE = 0x0011


@unique
class IdentifyAttribute(IntEnum):
    """Attributes of the Identify cluster."""

    IDENTIFY_TIME = 0x0000
    IDENTIFY_TYPE = 0x0001


@unique
class GroupsAttribute(IntEnum):
    """Attributes of the Groups cluster."""

    NAME_SUPPORT = 0x0000


@unique
class OnOffAttribute(IntEnum):
    """Attributes of the On/Off cluster."""

    ON_OFF = 0x0000


@unique
class OccupancyAttribute(IntEnum):
    """Attributes of the Occupancy Sensing cluster."""

    OCCUPANCY = 0x0000


@unique
class MeasurementAttribute(IntEnum):
    """Attributes shared by the temperature and pressure measurement clusters."""

    MEASURED_VALUE = 0x0000
    MIN_MEASURED_VALUE = 0x0001
    MAX_MEASURED_VALUE = 0x0002


@unique
class SwitchAttribute(IntEnum):
    """Attributes of the Switch cluster."""

    NUMBER_OF_POSITIONS = 0x0000
    CURRENT_POSITION = 0x0001
    MULTI_PRESS_MAX = 0x0002


@unique
class ThermostatAttribute(IntEnum):
    """Attributes of the Thermostat cluster."""

    LOCAL_TEMPERATURE = 0x0000
    ABS_MIN_HEAT_SETPOINT_LIMIT = 0x0003
    ABS_MAX_HEAT_SETPOINT_LIMIT = 0x0004
    OCCUPIED_HEATING_SETPOINT = 0x0012
    MIN_HEAT_SETPOINT_LIMIT = 0x0015
    MAX_HEAT_SETPOINT_LIMIT = 0x0016
    CONTROL_SEQUENCE_OF_OPERATION = 0x001B
    SYSTEM_MODE = 0x001C


@unique
class WindowCoveringAttribute(IntEnum):
    """Attributes of the Window Covering cluster."""

    TYPE = 0x0000
    CURRENT_POSITION_LIFT = 0x0003
    CONFIG_STATUS = 0x0007
    OPERATIONAL_STATUS = 0x000A
    TARGET_POSITION_LIFT_PERCENT_100THS = 0x000B
    END_PRODUCT_TYPE = 0x000D
    CURRENT_POSITION_LIFT_PERCENT_100THS = 0x000E
    MODE = 0x0017