"""Control of the backlight, notification LED and button lights through sysfs."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import IntEnum
from pathlib import Path
from typing import Union

LCD_FILE = "/sys/class/leds/lcd-backlight/brightness"
PTN_BLINK_FILE = "/sys/class/g2_rgb_led/use_patterns/blink_patterns"
BACKBTN_LEFT_FILE = "/sys/class/leds/button-backlight1/brightness"
BACKBTN_RIGHT_FILE = "/sys/class/leds/button-backlight2/brightness"

LIGHT_ID_BACKLIGHT = "backlight"
LIGHT_ID_NOTIFICATIONS = "notifications"
LIGHT_ID_BATTERY = "battery"
LIGHT_ID_ATTENTION = "attention"

_log = logging.getLogger("galbitools.lights")


class FlashMode(IntEnum):
    """How a light flashes."""

    NONE = 0
    TIMED = 1
    HARDWARE = 2


@dataclass(frozen=True)
class LightState:
    """Requested state of one light; ``color`` is 0xAARRGGBB."""

    color: int = 0
    flash_mode: FlashMode = FlashMode.NONE
    flash_on_ms: int = 0
    flash_off_ms: int = 0


def is_lit(state: LightState) -> bool:
    """Return True when the RGB part of the colour is not black."""
    return bool(state.color & 0x00FFFFFF)


def rgb_to_brightness(state: LightState) -> int:
    """Return the perceived brightness (0-255) of the state's colour."""
    color = state.color & 0x00FFFFFF
    red = (color >> 16) & 0xFF
    green = (color >> 8) & 0xFF
    blue = color & 0xFF
    return (77 * red + 150 * green + 29 * blue) >> 8


def blink_pattern(state: LightState) -> str:
    """Build the ``0xCOLOR,ON,OFF`` pattern for the LED controller."""
    if state.flash_mode == FlashMode.TIMED:
        on_ms, off_ms = state.flash_on_ms, state.flash_off_ms
    else:
        on_ms, off_ms = -1, -1
    return f"0x{state.color & 0xFFFFFFFF:x},{on_ms},{off_ms}"


class LightsDevice:
    """The lights of the phone, written below the file system ``root``."""

    def __init__(self, root: Union[str, os.PathLike] = "/") -> None:
        self._root = Path(root)
        self._lock = threading.Lock()
        self._notification = LightState()
        self._battery = LightState()
        self._attention = LightState()
        self._warned: set[str] = set()

    def _path(self, name: str) -> Path:
        return self._root / name.lstrip("/")

    def _write(self, name: str, text: str, kind: str) -> None:
        path = self._path(name)
        try:
            fd = os.open(path, os.O_RDWR)
        except OSError:
            if kind not in self._warned:
                _log.error("%s failed to open %s", kind, path)
                self._warned.add(kind)
            raise
        try:
            os.write(fd, text.encode("ascii"))
        finally:
            os.close(fd)

    def _write_int(self, name: str, value: int) -> None:
        self._write(name, f"{value}\n", "write_int")

    def _write_int_quietly(self, name: str, value: int) -> None:
        try:
            self._write_int(name, value)
        except OSError:
            pass

    def _set_speaker_light_locked(self, state: LightState) -> None:
        try:
            self._write(PTN_BLINK_FILE, f"{blink_pattern(state)}\n", "write_str")
        except OSError:
            pass

    def _handle_led_prioritized_locked(self) -> None:
        for state in (self._attention, self._notification, self._battery):
            if is_lit(state):
                self._set_speaker_light_locked(state)
                return
        self._set_speaker_light_locked(self._notification)

    def set_backlight(self, state: LightState) -> None:
        """Set the LCD backlight; raises OSError if it cannot be written."""
        brightness = rgb_to_brightness(state)
        with self._lock:
            self._write_int(LCD_FILE, brightness)

    def set_notifications(self, state: LightState) -> None:
        """Set the notification state and update the LED."""
        with self._lock:
            self._notification = state
            self._handle_led_prioritized_locked()

    def set_battery(self, state: LightState) -> None:
        """Set the battery state and update the LED."""
        with self._lock:
            self._battery = state
            self._handle_led_prioritized_locked()

    def set_attention(self, state: LightState) -> None:
        """Set the attention state, update the LED and the button lights.

        Zero on and off times turn the attention light off.
        """
        with self._lock:
            if state.flash_on_ms == 0 and state.flash_off_ms == 0:
                state = replace(state, color=0)
            self._attention = state
            brightness = rgb_to_brightness(state)
            self._handle_led_prioritized_locked()
            self._write_int_quietly(BACKBTN_LEFT_FILE, brightness)
            self._write_int_quietly(BACKBTN_RIGHT_FILE, brightness)

    def open(self, name: str) -> Callable[[LightState], None]:
        """Return the setter for the light called ``name``."""
        setters = {
            LIGHT_ID_BACKLIGHT: self.set_backlight,
            LIGHT_ID_NOTIFICATIONS: self.set_notifications,
            LIGHT_ID_BATTERY: self.set_battery,
            LIGHT_ID_ATTENTION: self.set_attention,
        }
        try:
            return setters[name]
        except KeyError:
            raise ValueError(f"unknown light: {name!r}") from None