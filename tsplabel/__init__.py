"""TSPL label commands from JSON descriptions, USB VID/PID helpers and string encoding helpers."""

__version__ = "0.1.0"
__all__ = ["label", "usb", "strconv"]