import pytest

from tsplabel.usb import (
    UsbDevice,
    VidPid,
    filter_devices,
    parse_instance_id,
    parse_interface_path,
    split_null_terminated,
    vid_pid_includes,
)

PRINTER = VidPid(0x1A86, 0x7523)
OTHER = VidPid(0x0001, 0x0002)


def test_vid_pid_includes_found():
    assert vid_pid_includes([OTHER, PRINTER], VidPid(0x1A86, 0x7523)) is True


def test_vid_pid_includes_missing():
    assert vid_pid_includes([OTHER], PRINTER) is False
    assert vid_pid_includes([], PRINTER) is False


def test_vid_pid_range_checked():
    with pytest.raises(ValueError):
        VidPid(0x10000, 0)
    with pytest.raises(ValueError):
        VidPid(0, -1)


def test_vid_pid_str():
    assert str(VidPid(0x1A86, 0x7523)) == "VID_1A86&PID_7523"


def test_split_null_terminated_stops_at_empty():
    assert split_null_terminated("a\0bc\0\0ignored\0") == ["a", "bc"]


def test_split_null_terminated_max_segments():
    assert split_null_terminated("a\0b\0c\0\0", 2) == ["a", "b"]
    assert split_null_terminated("a\0b\0", 0) == []


def test_split_null_terminated_empty():
    assert split_null_terminated("") == []
    assert split_null_terminated("\0abc") == []


def test_parse_instance_id():
    assert parse_instance_id("USB\\VID_1A86&PID_7523\\5&1234") == PRINTER


def test_parse_instance_id_rejects_other_buses():
    assert parse_instance_id("HID\\VID_1A86&PID_7523") is None
    assert parse_instance_id("USB\\ROOT_HUB30\\4&1234") is None


def test_parse_interface_path():
    path = "\\\\?\\USB#VID_1A86&PID_7523#5&1234#{a5dcbf10-6530-11d2-901f-00c04fb951ed}"
    assert parse_interface_path(path) == PRINTER


def test_parse_interface_path_rejects_instance_id():
    assert parse_interface_path("USB\\VID_1A86&PID_7523") is None


def test_filter_devices_from_list():
    ids = ["USB\\VID_0001&PID_0002\\A", "USB\\VID_1A86&PID_7523\\B", "USB\\ROOT_HUB\\C"]
    devices = filter_devices(ids, [PRINTER])
    assert devices == [UsbDevice(instance_id="USB\\VID_1A86&PID_7523\\B", vid_pid=PRINTER)]


def test_filter_devices_from_null_separated_string():
    data = "USB\\VID_1A86&PID_7523\\A\0USB\\VID_0001&PID_0002\\B\0\0"
    devices = filter_devices(data, [PRINTER, OTHER])
    assert [d.instance_id for d in devices] == [
        "USB\\VID_1A86&PID_7523\\A",
        "USB\\VID_0001&PID_0002\\B",
    ]


def test_filter_devices_limit_applies_to_examined_ids():
    ids = ["USB\\VID_0001&PID_0002\\A", "USB\\VID_1A86&PID_7523\\B"]
    assert filter_devices(ids, [PRINTER], limit=1) == []
    assert len(filter_devices(ids, [PRINTER], limit=2)) == 1