"""Common behaviour of bridged devices: basic information, identify and groups."""

from __future__ import annotations

import logging
import struct
from collections.abc import Callable, Mapping
from enum import IntFlag

from .clusters import (
    BridgedBasicAttribute,
    ClusterId,
    GlobalAttribute,
    GroupsAttribute,
    IdentifyAttribute,
)

logger = logging.getLogger(__name__)

Reporter = Callable[[int, int, int], None]

DESC_STR_SIZE = 32


class AttributeAccessError(Exception):
    """Raised when an attribute cannot be read or written."""


class Changed(IntFlag):
    """Bits describing which basic properties of a device changed."""

    REACHABLE = 1 << 0
    LOCATION = 1 << 1
    NAME = 1 << 2
    VENDOR_NAME = 1 << 3
    PRODUCT_NAME = 1 << 4
    SERIAL_NUMBER = 1 << 5
    LAST = 1 << 5


_STATUS_REPORTS = (
    (Changed.REACHABLE, BridgedBasicAttribute.REACHABLE),
    (Changed.NAME, BridgedBasicAttribute.NODE_LABEL),
    (Changed.VENDOR_NAME, BridgedBasicAttribute.VENDOR_NAME),
    (Changed.PRODUCT_NAME, BridgedBasicAttribute.PRODUCT_NAME),
    (Changed.SERIAL_NUMBER, BridgedBasicAttribute.SERIAL_NUMBER),
)


def _truncate(text: str) -> str:
    """Cut text so that it fits a fixed descriptor buffer with its terminator."""
    encoded = text.encode("utf-8")[: DESC_STR_SIZE - 1]
    return encoded.decode("utf-8", errors="ignore")


class Device:
    """A bridged device with basic information, identify and groups clusters."""

    DESC_STR_SIZE = DESC_STR_SIZE

    BRIDGED_BASIC_FEATURE_MAP = 0
    BRIDGED_BASIC_REVISION = 2
    IDENTIFY_FEATURE_MAP = 0
    IDENTIFY_REVISION = 4
    GROUPS_FEATURE_MAP = 0
    GROUPS_REVISION = 4

    DEFAULT_VENDOR_NAME = "Silicon Labs"
    DEFAULT_PRODUCT_NAME = "Matter device"
    DEFAULT_SERIAL_NUMBER = "0000000042"

    def __init__(self, name: str, reporter: Reporter | None = None) -> None:
        self._reporter = reporter
        self._reachable = False
        self.online = False
        self._identify_in_progress = False
        self.identify_time = 0
        self.identify_type = 0
        self.groups_name_support = 0
        self._name = _truncate(name)
        self._vendor_name = _truncate(self.DEFAULT_VENDOR_NAME)
        self._product_name = _truncate(self.DEFAULT_PRODUCT_NAME)
        self._serial_number = _truncate(self.DEFAULT_SERIAL_NUMBER)
        self._location = ""
        self.endpoint_id = 0
        self.parent_endpoint_id = 0
        self.on_change: Callable[[], None] | None = None
        self.on_identify_change: Callable[[int, int, int], None] | None = None

    # -- properties -------------------------------------------------------

    @property
    def reachable(self) -> bool:
        return self._reachable

    @property
    def name(self) -> str:
        return self._name

    @property
    def vendor_name(self) -> str:
        return self._vendor_name

    @property
    def product_name(self) -> str:
        return self._product_name

    @property
    def serial_number(self) -> str:
        return self._serial_number

    @property
    def location(self) -> str:
        return self._location

    @property
    def identify_in_progress(self) -> bool:
        return self._identify_in_progress

    # -- state changes ----------------------------------------------------

    def set_reachable(self, reachable: bool) -> None:
        """Change reachability and report it when it differs."""
        reachable = bool(reachable)
        if self._reachable == reachable:
            return
        self._reachable = reachable
        logger.info("Device[%s]: %s", self._name, "ONLINE" if reachable else "OFFLINE")
        self._handle_status_changed(Changed.REACHABLE)

    def _set_text(self, field: str, value: str, flag: Changed, label: str) -> None:
        if getattr(self, field) == value:
            return
        logger.info("Device[%s]: New %s=%r", self._name, label, value)
        setattr(self, field, _truncate(value))
        self._handle_status_changed(flag)

    def set_name(self, name: str) -> None:
        self._set_text("_name", name, Changed.NAME, "DeviceName")

    def set_vendor_name(self, vendor_name: str) -> None:
        self._set_text("_vendor_name", vendor_name, Changed.VENDOR_NAME, "VendorName")

    def set_product_name(self, product_name: str) -> None:
        self._set_text("_product_name", product_name, Changed.PRODUCT_NAME, "ProductName")

    def set_serial_number(self, serial_number: str) -> None:
        self._set_text("_serial_number", serial_number, Changed.SERIAL_NUMBER, "SerialNumber")

    def set_location(self, location: str) -> None:
        if self._location == location:
            return
        self._location = location
        logger.info("Device[%s]: New location=%r", self._name, location)
        self._handle_status_changed(Changed.LOCATION)

    def notify_change(self) -> None:
        """Invoke the device change callback, if one is set."""
        if self.on_change is not None:
            self.on_change()

    def report(self, cluster_id: int, attribute_id: int) -> None:
        """Schedule a report of an attribute on this device's endpoint."""
        if self._reporter is not None:
            self._reporter(self.endpoint_id, cluster_id, attribute_id)

    def _handle_status_changed(self, mask: int) -> None:
        for flag, attribute in _STATUS_REPORTS:
            if mask & flag:
                self.report(ClusterId.BRIDGED_DEVICE_BASIC_INFORMATION, attribute)

    # -- attribute access helpers ----------------------------------------

    @staticmethod
    def _read_fields(
        fields: Mapping[int, tuple[str, int]],
        attribute_id: int,
        max_read_length: int,
    ) -> bytes:
        """Encode the field for an attribute if the requested length matches it."""
        entry = fields.get(attribute_id)
        if entry is None:
            raise AttributeAccessError(f"unsupported attribute 0x{attribute_id:04x}")
        fmt, value = entry
        fmt = "<" + fmt
        if struct.calcsize(fmt) != max_read_length:
            raise AttributeAccessError(
                f"invalid read length {max_read_length} for attribute 0x{attribute_id:04x}"
            )
        return struct.pack(fmt, value)

    @staticmethod
    def _first_byte(data: bytes) -> int:
        if not data:
            raise AttributeAccessError("no data to write")
        return data[0]

    # -- attribute access -------------------------------------------------

    def read_attribute(self, cluster_id: int, attribute_id: int, max_read_length: int) -> bytes:
        """Read an attribute of the device's own clusters."""
        raise AttributeAccessError(f"cluster 0x{cluster_id:04x} is not readable")

    def write_attribute(self, cluster_id: int, attribute_id: int, data: bytes) -> None:
        """Write an attribute of the device's own clusters."""
        raise AttributeAccessError(f"cluster 0x{cluster_id:04x} is not writable")

    def read_bridged_basic_attribute(
        self, cluster_id: int, attribute_id: int, max_read_length: int
    ) -> bytes:
        """Read a Bridged Device Basic Information attribute."""
        if not self._reachable:
            raise AttributeAccessError("device is not reachable")
        if cluster_id != ClusterId.BRIDGED_DEVICE_BASIC_INFORMATION:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")

        strings = {
            BridgedBasicAttribute.NODE_LABEL: self._name,
            BridgedBasicAttribute.VENDOR_NAME: self._vendor_name,
            BridgedBasicAttribute.PRODUCT_NAME: self._product_name,
            BridgedBasicAttribute.SERIAL_NUMBER: self._serial_number,
        }
        if attribute_id in strings:
            if max_read_length != DESC_STR_SIZE:
                raise AttributeAccessError(f"invalid read length {max_read_length}")
            encoded = strings[attribute_id].encode("utf-8")
            return bytes([len(encoded)]) + encoded

        fields = {
            BridgedBasicAttribute.REACHABLE: ("B", 1 if self._reachable else 0),
            GlobalAttribute.CLUSTER_REVISION: ("H", self.BRIDGED_BASIC_REVISION),
            GlobalAttribute.FEATURE_MAP: ("I", self.BRIDGED_BASIC_FEATURE_MAP),
        }
        return self._read_fields(fields, attribute_id, max_read_length)

    def read_identify_attribute(
        self, cluster_id: int, attribute_id: int, max_read_length: int
    ) -> bytes:
        """Read an Identify cluster attribute."""
        if cluster_id != ClusterId.IDENTIFY:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")
        fields = {
            IdentifyAttribute.IDENTIFY_TIME: ("H", self.identify_time),
            IdentifyAttribute.IDENTIFY_TYPE: ("B", self.identify_type),
            GlobalAttribute.FEATURE_MAP: ("I", self.IDENTIFY_FEATURE_MAP),
            GlobalAttribute.CLUSTER_REVISION: ("H", self.IDENTIFY_REVISION),
        }
        return self._read_fields(fields, attribute_id, max_read_length)

    def write_identify_attribute(self, cluster_id: int, attribute_id: int, data: bytes) -> None:
        """Write an Identify cluster attribute and signal the change."""
        if cluster_id != ClusterId.IDENTIFY:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")
        if attribute_id == IdentifyAttribute.IDENTIFY_TIME:
            self._first_byte(data)
            self.identify_time = int.from_bytes(data[:2], "little")
        elif attribute_id == IdentifyAttribute.IDENTIFY_TYPE:
            self.identify_type = self._first_byte(data)
        else:
            raise AttributeAccessError(f"unsupported attribute 0x{attribute_id:04x}")
        if self.on_identify_change is not None:
            self.on_identify_change(self.endpoint_id, ClusterId.IDENTIFY, attribute_id)

    def read_groups_attribute(
        self, cluster_id: int, attribute_id: int, max_read_length: int
    ) -> bytes:
        """Read a Groups cluster attribute."""
        if cluster_id != ClusterId.GROUPS:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")
        fields = {
            GroupsAttribute.NAME_SUPPORT: ("B", self.groups_name_support),
            GlobalAttribute.FEATURE_MAP: ("I", self.GROUPS_FEATURE_MAP),
            GlobalAttribute.CLUSTER_REVISION: ("H", self.GROUPS_REVISION),
        }
        return self._read_fields(fields, attribute_id, max_read_length)

    def write_groups_attribute(self, cluster_id: int, attribute_id: int, data: bytes) -> None:
        """Write a Groups cluster attribute."""
        if cluster_id != ClusterId.GROUPS:
            raise AttributeAccessError(f"unexpected cluster 0x{cluster_id:04x}")
        if attribute_id != GroupsAttribute.NAME_SUPPORT:
            raise AttributeAccessError(f"unsupported attribute 0x{attribute_id:04x}")
        self.groups_name_support = self._first_byte(data)

    # -- identify ---------------------------------------------------------

    def start_identify(self) -> None:
        self._identify_in_progress = True

    def stop_identify(self) -> None:
        self._identify_in_progress = False