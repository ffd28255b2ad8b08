"""Device-side utilities: a linked list and message queue, location logging and gps.conf parsing, LED control and Bluetooth address extraction."""

__version__ = "0.1.0"