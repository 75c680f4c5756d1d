# bridgedev

Models of bridged smart-home devices. Each device does three things:

- keeps its own state;
- serves attribute reads and writes by cluster id and attribute id;
- tells a callback which attributes changed.

## Devices

| Class | Module | Cluster |
| --- | --- | --- |
| `OccupancySensor` | `bridgedev.occupancy` | Occupancy Sensing |
| `OnOffPluginUnit` | `bridgedev.plugin_unit` | On/Off |
| `PressureSensor` | `bridgedev.pressure` | Pressure Measurement |
| `Switch` | `bridgedev.switch` | Switch |
| `TemperatureSensor` | `bridgedev.temperature` | Temperature Measurement |
| `Thermostat` | `bridgedev.thermostat` | Thermostat (heating only) |
| `WindowCovering` | `bridgedev.window_covering` | Window Covering |

All of them derive from `Device` in `bridgedev.device`.

`Device` holds the Bridged Device Basic Information state: reachability, name, vendor name, product name, serial number and location. Names are cut to 31 bytes of UTF-8.

It also holds the Identify state (`identify_time`, `identify_type`, `start_identify()`, `stop_identify()`) and the Groups state (`groups_name_support`).

Cluster and attribute ids are `IntEnum`s in `bridgedev.clusters`:

- `ClusterId`
- `GlobalAttribute`
- `BridgedBasicAttribute`
- `IdentifyAttribute`
- `GroupsAttribute`
- `OnOffAttribute`
- `OccupancyAttribute`
- `MeasurementAttribute`
- `SwitchAttribute`
- `ThermostatAttribute`
- `WindowCoveringAttribute`

## Installation

```
pip install .
```

## Usage

Each device takes an optional `reporter`. The reporter is a callable, and it is called with `(endpoint_id, cluster_id, attribute_id)` when a reportable attribute changes. After the report, `Device.notify_change()` calls `device.on_change` if you have set it.

```python
from bridgedev.clusters import ClusterId, OnOffAttribute
from bridgedev.plugin_unit import OnOffPluginUnit

reports = []
plug = OnOffPluginUnit("Desk lamp", reporter=lambda *path: reports.append(path))
plug.set_reachable(True)

plug.toggle()
assert plug.read_attribute(ClusterId.ON_OFF, OnOffAttribute.ON_OFF, 1) == b"\x01"
assert reports[-1] == (0, ClusterId.ON_OFF, OnOffAttribute.ON_OFF)
```

### Reads

`read_attribute` returns the value as little-endian bytes. The requested length must equal the attribute's size.

On every device, reads of the Bridged Device Basic Information cluster go to `read_bridged_basic_attribute`. That method serves the string attributes as a length byte followed by UTF-8 text, and only when the requested length is 32.

Identify and Groups attributes are read and written through separate methods, and these work whether or not the device is reachable:

- `read_identify_attribute` and `write_identify_attribute`
- `read_groups_attribute` and `write_groups_attribute`

A write to an Identify attribute calls `device.on_identify_change(endpoint_id, cluster_id, attribute_id)` if that callback is set.

### Failures

A read or write raises `bridgedev.device.AttributeAccessError` in these cases:

- the device is not reachable;
- the cluster or attribute is not served;
- the length does not match;
- the write data is missing.

There is one exception. `OnOffPluginUnit.read_attribute` returns `b""` for a cluster other than On/Off or Bridged Device Basic Information.

### Device notes

- **`PressureSensor`, `TemperatureSensor`:** `set_measured_value` clamps the value to `min_value`..`max_value`.
- **`Thermostat`:**
  - Temperatures are in hundredths of a degree Celsius.
  - The heating setpoint is clamped to the absolute minimum and maximum limits.
  - A limit setter ignores any value that would break the order of the limits.
  - Writes take the setpoint as a little-endian int16 and the system mode as one byte.
- **`Switch`:**
  - A change of the current position calls the optional `event_sink` with `(event, endpoint_id, position)`.
  - `event` is `Switch.INITIAL_PRESS` for a non-zero position and `Switch.SHORT_RELEASE` for zero.
- **`WindowCovering`:**
  - Lift positions are in hundredths of a percent, capped at `MAX_LIFT_POSITION` (10000).
  - `set_operational_status` takes an `OperationalStatus`. Unknown values are treated as stopped.

## Colour helpers

`bridgedev.color` has two functions:

- `hsv_to_rgb(hue, saturation, value)` takes a hue in degrees in [0, 360) and saturation and value in [0, 1]. It returns an `(r, g, b)` tuple of bytes.
- `rgb_to_hsv(red, green, blue)` returns the hue in degrees, with saturation and value on a 0..255 scale.

Both raise `ValueError` for inputs out of range.

## What it does not do

There is no network stack, commissioning, persistence or command-line tool. The devices only model state and attribute encoding. Sending reports, events and attribute data anywhere is up to the callables you pass in.

## Running the tests

```
pip install .[test]
pytest
```