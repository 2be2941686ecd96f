"""USB device identifiers: VID/PID parsing and filtering of device instance ids."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import islice
from typing import Iterable

__all__ = [
    "VidPid",
    "UsbDevice",
    "vid_pid_includes",
    "split_null_terminated",
    "parse_instance_id",
    "parse_interface_path",
    "filter_devices",
]

_HEX_FIELD = r"\s*(?:0[xX])?([0-9A-Fa-f]+)"
_INSTANCE_ID_RE = re.compile(r"USB\\VID_" + _HEX_FIELD + r"&PID_" + _HEX_FIELD)
_INTERFACE_RE = re.compile(r"\\\\\?\\USB#VID_" + _HEX_FIELD + r"&PID_" + _HEX_FIELD)


@dataclass(frozen=True)
class VidPid:
    """A USB vendor id and product id pair."""

    vid: int
    pid: int

    def __post_init__(self) -> None:
        for name, value in (("vid", self.vid), ("pid", self.pid)):
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} must fit in 16 bits, got {value}")

    def __str__(self) -> str:
        return f"VID_{self.vid:04X}&PID_{self.pid:04X}"


@dataclass
class UsbDevice:
    """A present USB device and the properties known about it."""

    instance_id: str
    vid_pid: VidPid
    interface: str = ""
    friendly_name: str = ""
    symbolic_name: str = ""
    dev_inst: int = 0


def vid_pid_includes(vid_pids: Iterable[VidPid], vid_pid: VidPid) -> bool:
    """Whether vid_pid is one of vid_pids."""
    return any(item.vid == vid_pid.vid and item.pid == vid_pid.pid for item in vid_pids)


def split_null_terminated(data: str, max_segments: int | None = None) -> list[str]:
    """Split a NUL-separated string list, stopping at the first empty entry.

    At most max_segments entries are returned when it is given.
    """
    if max_segments is not None and max_segments < 0:
        raise ValueError("max_segments must not be negative")
    segments: list[str] = []
    for segment in data.split("\0"):
        if max_segments is not None and len(segments) >= max_segments:
            break
        if not segment:
            break
        segments.append(segment)
    return segments


def _match_vid_pid(pattern: re.Pattern[str], text: str) -> VidPid | None:
    match = pattern.match(text)
    if match is None:
        return None
    vid, pid = (int(group, 16) & 0xFFFF for group in match.groups())
    return VidPid(vid, pid)


def parse_instance_id(instance_id: str) -> VidPid | None:
    """VID/PID from a device instance id such as 'USB\\VID_xxxx&PID_xxxx\\...', or None."""
    return _match_vid_pid(_INSTANCE_ID_RE, instance_id)


def parse_interface_path(path: str) -> VidPid | None:
    """VID/PID from a device interface path such as '\\\\?\\USB#VID_xxxx&PID_xxxx#...', or None."""
    return _match_vid_pid(_INTERFACE_RE, path)


def filter_devices(
    instance_ids: Iterable[str] | str,
    filters: Iterable[VidPid],
    limit: int | None = None,
) -> list[UsbDevice]:
    """Devices among instance_ids whose VID/PID is in filters.

    instance_ids may be a NUL-separated list. At most limit ids are examined.
    """
    if isinstance(instance_ids, str):
        ids: Iterable[str] = split_null_terminated(instance_ids, limit)
    else:
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")
        ids = islice(instance_ids, limit)
    wanted = list(filters)
    devices = []
    for instance_id in ids:
        vid_pid = parse_instance_id(instance_id)
        if vid_pid is not None and vid_pid_includes(wanted, vid_pid):
            devices.append(UsbDevice(instance_id=instance_id, vid_pid=vid_pid))
    return devices