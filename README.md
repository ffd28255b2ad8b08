# galbitools

Small device-side utilities in plain Python, with no runtime dependencies.

## Modules

- `galbitools.linked_list`: `LinkedList`. `add(data, dealloc)` puts an item at the head. `remove()` takes the oldest item from the tail. `search(equal, key, remove)` returns the first item, counting from the head, for which `equal(key, item)` is true. `flush()` drops every item and calls each item's `dealloc` callback if it was given one. `remove()` and `search()` raise `EmptyListError` when the list is empty.
- `galbitools.msg_q`: `MessageQueue`, a thread-safe FIFO queue. `send(msg, dealloc)` adds a message. `receive(timeout)` blocks until a message arrives and raises `TimeoutError` if the timeout runs out. `flush()` empties the queue. After `unblock()` every waiter wakes up, and later sends and receives raise `QueueUnblockedError`. The module also defines the `MsgQStatus` and `LocEngMsgId` enumerations.
- `galbitools.loc_log`:
  - `LocLogger` is a logger gated by a numeric debug level from 0 to 5. Its methods are `error`, `warning`, `info`, `debug`, `verbose` and `format_entry`.
  - `NameVal` tables work with `name_from_val` and `name_from_mask`.
  - `msg_q_status_name` and `succ_fail_string` return names for status codes.
  - `loc_get_time()` gives local `HH:MM:SS.mmm`.
  - `get_timestamp()` gives `HH:MM:SS.uuuuuu` of the UTC day.
- `galbitools.loc_cfg`:
  - `GpsConfig` holds the GPS parameters with their default values.
  - `parse_gps_conf(lines, config)` applies `NAME = value` lines, which may hold decimal, `0x` hexadecimal or floating-point values.
  - `read_gps_conf(path, logger)` reads a file, `/etc/gps.conf` by default, and sets the logger's level and timestamping from it. If the file is missing, the defaults are kept.
- `galbitools.lights`: `LightsDevice(root)` writes to sysfs-style files below `root`. It drives:
  - the LCD backlight;
  - the notification, battery and attention LED, where attention has priority over notifications and notifications over battery;
  - the button lights.

  Helpers are `is_lit`, `rgb_to_brightness` and `blink_pattern`. `open(name)` returns the setter for `"backlight"`, `"notifications"`, `"battery"` or `"attention"`.
- `galbitools.hwaddrs`: `read_mac_bytes`, `format_bdaddr`, `write_bdaddr` and the `main` command.

## Installation

```
pip install .
```

## Command

```
galbi-hwaddrs [--misc PATH] [--output PATH]
```

The command reads six bytes at offset `0x4000` of the misc partition. The default partition is `/dev/block/platform/msm_sdcc.1/by-name/misc`. It writes the bytes as `xx:xx:xx:xx:xx:xx` to the output file, `/data/misc/bdaddr` by default. It exits with status 1 if the partition cannot be read or is too short.

## Example

```python
from pathlib import Path

from galbitools.msg_q import MessageQueue
from galbitools.lights import LightsDevice, LightState

q = MessageQueue()
q.send("hello", None)
print(q.receive(timeout=1.0))  # hello

root = Path("/tmp/fake-sysfs")
backlight = root / "sys/class/leds/lcd-backlight/brightness"
backlight.parent.mkdir(parents=True, exist_ok=True)
backlight.touch()

device = LightsDevice(root)
device.set_backlight(LightState(color=0xFFFFFF))
print(backlight.read_text())  # 255
```

## What it does not do

The package contains no location engine. `LocEngMsgId` only names message identifiers; nothing here sends them to a GPS service or receives them from one. `LightsDevice` writes only to files that already exist, and it raises `OSError` from `set_backlight` when the backlight file cannot be opened.