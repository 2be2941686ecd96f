from tsplabel.strconv import StrConv

TITLE = "无标题"


def test_set_u8_fills_all_forms():
    conv = StrConv(encoding="gbk").set_u8(TITLE.encode("utf-8"))
    assert conv.u16 == TITLE
    assert conv.ascii.decode("gbk") == TITLE
    assert conv.u8 == TITLE.encode("utf-8")


def test_set_ascii_round_trip():
    conv = StrConv(encoding="gbk")
    conv.set_u16(TITLE)
    ansi = conv.ascii
    other = StrConv(encoding="gbk").set_ascii(ansi)
    assert other.u16 == TITLE
    assert other.u8 == conv.u8


def test_set_u16_round_trip_through_u8():
    conv = StrConv(encoding="gbk").set_u16("Label 123")
    again = StrConv(encoding="gbk").set_u8(conv.u8)
    assert again.u16 == "Label 123"
    assert again.ascii == conv.ascii


def test_methods_chain():
    conv = StrConv(encoding="gbk")
    assert conv.set_u16("a").set_u8(b"b") is conv
    assert conv.u16 == "b"


def test_unmappable_becomes_question_mark():
    conv = StrConv(encoding="ascii").set_u16("caf\u00e9")
    assert conv.ascii == b"caf?"
    assert conv.u8 == "caf\u00e9".encode("utf-8")


def test_invalid_utf8_is_replaced():
    conv = StrConv(encoding="gbk").set_u8(b"ab\xffcd")
    assert conv.u16 == "ab\ufffdcd"


def test_input_stops_at_nul():
    conv = StrConv(encoding="gbk").set_u8(b"abc\0def")
    assert conv.u8 == b"abc"
    assert conv.u16 == "abc"
    assert StrConv(encoding="gbk").set_u16("xy\0z").ascii == b"xy"


def test_starts_empty():
    conv = StrConv(encoding="gbk")
    assert (conv.ascii, conv.u8, conv.u16) == (b"", b"", "")