"""Thread-safe first-in first-out message queue that can be unblocked."""

from __future__ import annotations

import threading
from collections.abc import Callable
from enum import IntEnum
from typing import Any, Optional

from galbitools.linked_list import LinkedList

Dealloc = Callable[[Any], None]


class MsgQStatus(IntEnum):
    """Status codes of message queue operations."""

    SUCCESS = 0
    FAILURE_GENERAL = -1
    INVALID_PARAMETER = -2
    INVALID_HANDLE = -3
    UNAVAILABLE_RESOURCE = -4
    INSUFFICIENT_BUFFER = -5


class LocEngMsgId(IntEnum):
    """Identifiers of messages exchanged with the location engine."""

    QUIT = 0x200
    ENGINE_DOWN = 0x201
    ENGINE_UP = 0x202
    START_FIX = 0x203
    STOP_FIX = 0x204
    SET_POSITION_MODE = 0x205
    SET_TIME = 0x206
    INJECT_XTRA_DATA = 0x207
    INJECT_LOCATION = 0x208
    DELETE_AIDING_DATA = 0x209
    SET_APN = 0x20A
    SET_SERVER_URL = 0x20B
    SET_SERVER_IPV4 = 0x20C
    ENABLE_DATA = 0x20D
    SUPL_VERSION = 0x20E
    SET_SENSOR_CONTROL_CONFIG = 0x20F
    SET_SENSOR_PROPERTIES = 0x210
    SET_SENSOR_PERF_CONTROL_CONFIG = 0x211
    MUTE_SESSION = 0x212
    ATL_OPEN_SUCCESS = 0x213
    ATL_CLOSED = 0x214
    ATL_OPEN_FAILED = 0x215
    REPORT_POSITION = 0x216
    REPORT_SV = 0x217
    REPORT_STATUS = 0x218
    REPORT_NMEA = 0x219
    REQUEST_BIT = 0x21A
    RELEASE_BIT = 0x21B
    REQUEST_ATL = 0x21C
    RELEASE_ATL = 0x21D
    REQUEST_NI = 0x21E
    INFORM_NI_RESPONSE = 0x21F
    REQUEST_XTRA_DATA = 0x220
    REQUEST_TIME = 0x221
    REQUEST_POSITION = 0x222


class MessageQueueError(Exception):
    """Base class for message queue failures."""

    status = MsgQStatus.FAILURE_GENERAL


class QueueUnblockedError(MessageQueueError):
    """Raised when a queue that has been unblocked is used."""

    status = MsgQStatus.UNAVAILABLE_RESOURCE


class MessageQueue:
    """Blocking queue handing messages out in the order they were sent.

    Once :meth:`unblock` is called every waiting receiver wakes up and the
    queue refuses further sends and receives.
    """

    def __init__(self) -> None:
        self._list = LinkedList()
        self._cond = threading.Condition()
        self._unblocked = False

    def __len__(self) -> int:
        with self._cond:
            return len(self._list)

    def send(self, msg: Any, dealloc: Optional[Dealloc] = None) -> None:
        """Queue ``msg``; ``dealloc`` is called on it if the queue is flushed."""
        if msg is None:
            raise ValueError("msg must not be None")
        with self._cond:
            if self._unblocked:
                raise QueueUnblockedError("message queue has been unblocked")
            self._list.add(msg, dealloc)
            self._cond.notify()

    def receive(self, timeout: Optional[float] = None) -> Any:
        """Wait for and return the oldest message.

        Raises :class:`QueueUnblockedError` if the queue is or becomes
        unblocked with nothing left to hand out, and :class:`TimeoutError`
        if ``timeout`` seconds pass without a message.
        """
        with self._cond:
            if self._unblocked:
                raise QueueUnblockedError("message queue has been unblocked")
            ready = self._cond.wait_for(
                lambda: not self._list.is_empty() or self._unblocked, timeout
            )
            if not ready:
                raise TimeoutError("no message received in time")
            if self._list.is_empty():
                raise QueueUnblockedError("message queue has been unblocked")
            return self._list.remove()

    def flush(self) -> None:
        """Drop every queued message, calling its release callback."""
        with self._cond:
            self._list.flush()

    def unblock(self) -> None:
        """Stop the queue and wake every waiting receiver."""
        with self._cond:
            if self._unblocked:
                raise QueueUnblockedError("message queue has been unblocked")
            self._unblocked = True
            self._cond.notify_all()

    @property
    def unblocked(self) -> bool:
        """True once :meth:`unblock` has been called."""
        with self._cond:
            return self._unblocked