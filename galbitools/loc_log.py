"""Name lookup tables, time stamps and the level-gated location logger."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from galbitools.msg_q import MsgQStatus

UNKNOWN_STR = "UNKNOWN"

BOOL_STR = ("False", "True")
VOID_RET = "None"
FROM_AFW = "===>"
TO_MODEM = "--->"
FROM_MODEM = "<---"
TO_AFW = "<==="
EXIT_TAG = "Exiting"
ENTRY_TAG = "Entering"

VERBOSE = 5
logging.addLevelName(VERBOSE, "VERBOSE")


@dataclass(frozen=True)
class NameVal:
    """A symbolic name paired with its numeric value."""

    name: str
    val: int


def name_from_mask(table: Iterable[NameVal], mask: int) -> str:
    """Return the name of the first entry sharing a bit with ``mask``."""
    for entry in table:
        if entry.val & mask:
            return entry.name
    return UNKNOWN_STR


def name_from_val(table: Iterable[NameVal], value: int) -> str:
    """Return the name of the first entry whose value equals ``value``."""
    for entry in table:
        if entry.val == value:
            return entry.name
    return UNKNOWN_STR


MSG_Q_STATUS_NAMES = tuple(
    NameVal(f"eMSG_Q_{status.name}", int(status)) for status in MsgQStatus
)


def msg_q_status_name(status: int) -> str:
    """Return the symbolic name of a message queue status code."""
    return name_from_val(MSG_Q_STATUS_NAMES, status)


def succ_fail_string(is_succ: Any) -> str:
    """Return "successful" for a true value and "failed" otherwise."""
    return "successful" if is_succ else "failed"


def loc_get_time(now: Optional[datetime] = None) -> str:
    """Format local wall-clock time as ``HH:MM:SS.mmm``."""
    if now is None:
        now = datetime.now()
    return f"{now:%H:%M:%S}.{now.microsecond // 1000:03d}"


def get_timestamp(now: Optional[float] = None) -> str:
    """Format seconds since the epoch as ``HH:MM:SS.uuuuuu`` of the UTC day."""
    if now is None:
        now = time.time()
    seconds = int(now)
    micros = int((now - seconds) * 1_000_000)
    hh = seconds // 3600 % 24
    mm = seconds % 3600 // 60
    ss = seconds % 60
    return f"{hh:02d}:{mm:02d}:{ss:02d}.{micros:06d}"


class LocLogger:
    """Logger whose output is gated by a numeric debug level.

    Levels: 0 none, 1 error, 2 warning, 3 info, 4 debug, 5 verbose.  A
    message at or below the configured level is emitted at ERROR severity
    with a one-letter prefix; with level 0 every message is passed on at its
    own severity instead.
    """

    def __init__(
        self,
        debug_level: int = 0,
        timestamp: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.debug_level = debug_level
        self.timestamp = bool(timestamp)
        self.logger = logger if logger is not None else logging.getLogger("galbitools.loc")

    def configure(self, debug_level: int, timestamp: bool) -> None:
        """Set the debug level and whether entries carry a time stamp."""
        self.debug_level = debug_level
        self.timestamp = bool(timestamp)

    def _gated(self, threshold: int, prefix: str, fallback: int, message: str) -> None:
        if self.debug_level >= threshold:
            self.logger.error("%s/%s", prefix, message)
        elif self.debug_level <= 0:
            self.logger.log(fallback, "W/%s", message)

    def error(self, message: str) -> None:
        """Always emit ``message`` as an error."""
        self.logger.error("E/%s", message)

    def warning(self, message: str) -> None:
        """Emit a warning when the level is 2 or more (or 0)."""
        self._gated(2, "W", logging.WARNING, message)

    def info(self, message: str) -> None:
        """Emit an informational message when the level is 3 or more (or 0)."""
        self._gated(3, "I", logging.INFO, message)

    def debug(self, message: str) -> None:
        """Emit a debug message when the level is 4 or more (or 0)."""
        self._gated(4, "D", logging.DEBUG, message)

    def verbose(self, message: str) -> None:
        """Emit a verbose message when the level is 5 or more (or 0)."""
        self._gated(5, "V", VERBOSE, message)

    def format_entry(
        self, tag: str, what: str, value: Any, now: Optional[float] = None
    ) -> str:
        """Build a call-flow entry, prefixed by a time stamp when enabled."""
        body = f"{tag} {what} {value}"
        if self.timestamp:
            return f"[{get_timestamp(now)}] {body}"
        return body


loc_logger = LocLogger()