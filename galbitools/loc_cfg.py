"""Reading of the GPS configuration file (``gps.conf``)."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple, Optional

from galbitools.loc_log import LocLogger, loc_logger

LOC_MAX_PARAM_NAME = 36
LOC_MAX_PARAM_STRING = 80
LOC_MAX_PARAM_LINE = 80
GPS_CONF_FILE = "/etc/gps.conf"

_C_SPACE = " \t\n\v\f\r"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_ULONG_MASK = 0xFFFFFFFF

_HEX_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_DEC_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d*)")
_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

# Configuration key, attribute name, kind ('n' integer, 'f' floating point).
_PARAMETER_TABLE = (
    ("INTERMEDIATE_POS", "intermediate_pos", "n"),
    ("ACCURACY_THRES", "accuracy_thres", "n"),
    ("ENABLE_WIPER", "enable_wiper", "n"),
    ("DEBUG_LEVEL", "debug_level", "n"),
    ("SUPL_VER", "supl_ver", "n"),
    ("CAPABILITIES", "capabilities", "n"),
    ("TIMESTAMP", "timestamp", "n"),
    ("GYRO_BIAS_RANDOM_WALK", "gyro_bias_random_walk", "f"),
    ("SENSOR_ACCEL_BATCHES_PER_SEC", "sensor_accel_batches_per_sec", "n"),
    ("SENSOR_ACCEL_SAMPLES_PER_BATCH", "sensor_accel_samples_per_batch", "n"),
    ("SENSOR_GYRO_BATCHES_PER_SEC", "sensor_gyro_batches_per_sec", "n"),
    ("SENSOR_GYRO_SAMPLES_PER_BATCH", "sensor_gyro_samples_per_batch", "n"),
    ("SENSOR_CONTROL_MODE", "sensor_control_mode", "n"),
    ("SENSOR_USAGE", "sensor_usage", "n"),
)


class ParsedValue(NamedTuple):
    """Numeric readings of a configuration value.

    ``real`` is None for hexadecimal values, which carry no floating point
    reading.
    """

    integer: int
    real: Optional[float]


def _clamp_int(value: int) -> int:
    return max(_INT_MIN, min(_INT_MAX, value))


def trim_space(text: str) -> str:
    """Remove leading and trailing white space."""
    return text.strip(_C_SPACE)


def _parse_hex(text: str) -> int:
    match = _HEX_RE.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return _clamp_int(-value if sign == "-" else value)


def _parse_dec(text: str) -> int:
    token = _DEC_RE.match(text).group(1)
    try:
        return _clamp_int(int(token))
    except ValueError:
        return 0


def _parse_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


def parse_value(text: str) -> ParsedValue:
    """Read ``text`` as hexadecimal (``0x`` prefix) or as decimal and float."""
    if len(text) >= 2 and text[0] == "0" and text[1] in "xX":
        return ParsedValue(_parse_hex(text[2:]), None)
    return ParsedValue(_parse_dec(text), _parse_float(text))


@dataclass
class GpsConfig:
    """GPS engine parameters, initialised to their defaults."""

    intermediate_pos: int = 0
    accuracy_thres: int = 0
    enable_wiper: int = 0
    debug_level: int = 3
    supl_ver: int = 0x10000
    capabilities: int = 0x7
    timestamp: int = 0
    gyro_bias_random_walk_valid: int = 0
    gyro_bias_random_walk: float = 0.0
    sensor_accel_batches_per_sec: int = 2
    sensor_accel_samples_per_batch: int = 5
    sensor_gyro_batches_per_sec: int = 2
    sensor_gyro_samples_per_batch: int = 5
    sensor_control_mode: int = 0
    sensor_usage: int = 0

    def set_param(self, name: str, text: str) -> bool:
        """Set the parameter ``name`` from its textual value.

        Returns True when ``name`` is a known parameter.  A hexadecimal value
        given to a floating point parameter sets it to 0.
        """
        return self._assign(name, parse_value(text), 0.0)

    def _assign(self, name: str, value: ParsedValue, last_real: float) -> bool:
        if name == "GYRO_BIAS_RANDOM_WALK":
            self.gyro_bias_random_walk_valid = 1
        real = value.real if value.real is not None else last_real
        known = False
        for key, attr, kind in _PARAMETER_TABLE:
            if key != name:
                continue
            known = True
            if kind == "n":
                setattr(self, attr, value.integer & _ULONG_MASK)
            else:
                setattr(self, attr, real)
        return known


def _chunks(line: str) -> Iterable[str]:
    size = LOC_MAX_PARAM_LINE - 1
    while line:
        yield line[:size]
        line = line[size:]


def parse_gps_conf(lines: Iterable[str], config: Optional[GpsConfig] = None) -> GpsConfig:
    """Apply ``NAME = value`` lines to ``config`` (a fresh one by default).

    Lines are read in pieces of at most 79 characters, as the device does.
    Pieces without a name and a value separated by ``=`` are skipped.
    """
    if config is None:
        config = GpsConfig()
    last_real = 0.0
    for line in lines:
        for piece in _chunks(line):
            tokens = [token for token in piece.split("=") if token]
            if len(tokens) < 2:
                continue
            name = trim_space(tokens[0])
            value = parse_value(trim_space(tokens[1]))
            if value.real is not None:
                last_real = value.real
            config._assign(name, value, last_real)
    return config


def read_gps_conf(
    path: str = GPS_CONF_FILE, logger: Optional[LocLogger] = None
) -> GpsConfig:
    """Read the configuration file at ``path`` and configure ``logger`` from it.

    A missing or unreadable file leaves every parameter at its default.
    """
    if logger is None:
        logger = loc_logger
    config = GpsConfig()
    logger.configure(config.debug_level, False)
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as handle:
            logger.debug(f"read_gps_conf: using {path}")
            parse_gps_conf(handle, config)
    except OSError:
        logger.warning(f"read_gps_conf: no {path} file, using defaults")
        return config
    logger.configure(config.debug_level, bool(config.timestamp))
    return config