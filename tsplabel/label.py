"""Label layout model that renders to TSPL printer commands."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, ClassVar, Mapping

__all__ = [
    "LabelFont",
    "ECCLevel",
    "LabelLayout",
    "LabelPrintState",
    "wrap_text",
    "text_row_offset",
    "QRCodeElement",
    "TextElement",
    "BoxElement",
    "Label",
    "create_label",
]

DEFAULT_TITLE = "无标题"


class LabelFont(IntEnum):
    """Built-in printer fonts."""

    TSS16 = 0
    TSS20 = 1
    TSS24 = 2
    TSS32 = 3
    TST24 = 4

    @property
    def size(self) -> int:
        """Glyph size in dots for a full-width character."""
        return _FONT_SIZES[self]

    @property
    def file_name(self) -> str:
        """Font file name as the printer knows it."""
        return f"{self.name}.BF2"


_FONT_SIZES = {
    LabelFont.TSS16: 16,
    LabelFont.TSS20: 20,
    LabelFont.TSS24: 24,
    LabelFont.TSS32: 32,
    LabelFont.TST24: 24,
}


class ECCLevel(IntEnum):
    """QR code error correction level."""

    L = 0
    M = 1
    Q = 2
    H = 3


class LabelLayout(IntEnum):
    """Alignment of text inside its rectangle."""

    CENTER = 0
    LEFT = 1
    RIGHT = 2
    TOP = 3
    BOTTOM = 4


class LabelPrintState(IntEnum):
    """Printing progress of a label."""

    PRINT_WAIT = 0
    PRINT_ERROR = 1
    PRINT_SUCCESS = 2


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _char_width(ch: str, english_width: int, chinese_width: int) -> int:
    return chinese_width if ord(ch) > 0x7F else english_width


def _text_width(text: str, english_width: int, chinese_width: int) -> int:
    return sum(_char_width(ch, english_width, chinese_width) for ch in text)


def wrap_text(text: str, english_width: int, chinese_width: int, rect_width: int) -> list[str]:
    """Split text into rows no wider than rect_width.

    Characters above U+007F take chinese_width, the others english_width.
    Raises ValueError if a single character cannot fit in a row.
    """
    lines: list[str] = []
    current: list[str] = []
    width = 0
    for ch in text:
        char_width = _char_width(ch, english_width, chinese_width)
        if width + char_width > rect_width:
            if char_width > rect_width:
                raise ValueError(
                    f"character {ch!r} of width {char_width} does not fit in width {rect_width}"
                )
            lines.append("".join(current))
            current = []
            width = 0
        current.append(ch)
        width += char_width
    if current:
        lines.append("".join(current))
    return lines


def text_row_offset(
    x_start: int,
    x_end: int,
    text: str,
    english_width: int,
    chinese_width: int,
    h_layout: LabelLayout,
) -> int:
    """Horizontal offset of a text row inside [x_start, x_end] for the given alignment."""
    row_width = x_end - x_start
    text_width = _text_width(text, english_width, chinese_width)
    if h_layout == LabelLayout.RIGHT:
        return x_end - text_width - x_start
    if h_layout == LabelLayout.CENTER:
        return _cdiv(row_width - text_width, 2)
    return 0


def _get_int(item: Mapping[str, Any], key: str, default: int) -> int:
    if key not in item:
        return default
    value = item[key]
    if value is None:
        return 0
    if isinstance(value, (bool, int, float)):
        return int(value)
    raise TypeError(f"{key!r} must be a number, got {type(value).__name__}")


def _as_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _get_enum(item: Mapping[str, Any], key: str, enum_type: type[IntEnum], default: IntEnum) -> Any:
    if key not in item:
        return default
    value = _get_int(item, key, default)
    try:
        return enum_type(value)
    except ValueError:
        return default


def _require_mapping(item: Any) -> Mapping[str, Any]:
    if not isinstance(item, Mapping):
        raise TypeError(f"expected a JSON object, got {type(item).__name__}")
    return item


@dataclass
class QRCodeElement:
    """A QR code placed at (x, y)."""

    type: ClassVar[str] = "qrcode"

    x: int = 0
    y: int = 0
    ecc_level: ECCLevel = ECCLevel.L
    cell_width: int = 1
    text: str = "\x01"

    @classmethod
    def from_json(cls, item: Mapping[str, Any]) -> QRCodeElement:
        """Build from a decoded JSON object."""
        item = _require_mapping(item)
        return cls(
            x=_get_int(item, "x", 0),
            y=_get_int(item, "y", 0),
            ecc_level=_get_enum(item, "eccLevel", ECCLevel, ECCLevel.L),
            cell_width=_get_int(item, "cellWidth", 1),
            text=_as_str(item["text"], "text") if "text" in item else "\x01",
        )

    def tspl_command(self) -> str:
        """Render as a QRCODE command."""
        return (
            f"QRCODE {self.x},{self.y},{self.ecc_level.name},{self.cell_width},"
            f'A,0,"{self.text}"\n'
        )


@dataclass
class TextElement:
    """Rows of text laid out inside a rectangle."""

    type: ClassVar[str] = "text"

    x_start: int = 0
    y_start: int = 0
    x_end: int = 0
    y_end: int = 0
    font: LabelFont = LabelFont.TSS16
    rotation: int = 0
    x_multiplication: int = 1
    y_multiplication: int = 1
    texts: list[str] = field(default_factory=list)
    h_layout: LabelLayout = LabelLayout.LEFT
    v_layout: LabelLayout = LabelLayout.TOP

    @property
    def font_width(self) -> int:
        """Width of a full-width glyph after scaling."""
        return self.font.size * self.x_multiplication

    @property
    def font_height(self) -> int:
        """Height of a row after scaling."""
        return self.font.size * self.y_multiplication

    @classmethod
    def from_json(cls, item: Mapping[str, Any]) -> TextElement:
        """Build from a decoded JSON object, wrapping texts when x_end is set."""
        item = _require_mapping(item)
        element = cls(
            x_start=_get_int(item, "x_start", 0),
            y_start=_get_int(item, "y_start", 0),
            x_end=_get_int(item, "x_end", 0),
            y_end=_get_int(item, "y_end", 0),
            font=_get_enum(item, "font", LabelFont, LabelFont.TSS16),
            rotation=_get_int(item, "rotation", 0),
            x_multiplication=_get_int(item, "xMultiplication", 1),
            y_multiplication=_get_int(item, "yMultiplication", 1),
            h_layout=_get_enum(item, "hLayout", LabelLayout, LabelLayout.LEFT),
            v_layout=_get_enum(item, "vLayout", LabelLayout, LabelLayout.TOP),
        )
        raw_texts = item.get("texts")
        if isinstance(raw_texts, list):
            for raw in raw_texts:
                if raw is None:
                    continue
                text = _as_str(raw, "texts")
                if element.x_end == 0:
                    element.texts.append(text)
                else:
                    element.texts.extend(
                        wrap_text(
                            text,
                            _cdiv(element.font_width, 2),
                            element.font_width,
                            element.x_end - element.x_start,
                        )
                    )
        return element

    def _initial_y_offset(self) -> int:
        rows_height = len(self.texts) * self.font_height
        if self.v_layout == LabelLayout.BOTTOM:
            return self.y_end - rows_height - self.y_start
        if self.v_layout == LabelLayout.CENTER:
            return _cdiv((self.y_end - self.y_start) - rows_height, 2)
        return 0

    def tspl_command(self) -> str:
        """Render as one TEXT command per row."""
        commands = []
        y_offset = self._initial_y_offset()
        english_width = _cdiv(self.font_width, 2)
        for text in self.texts:
            x_offset = text_row_offset(
                self.x_start, self.x_end, text, english_width, self.font_width, self.h_layout
            )
            if self.x_end == 0:
                x_offset = 0
            if self.y_end == 0:
                y_offset = 0
            commands.append(
                f"TEXT {self.x_start + x_offset},{self.y_start + y_offset},"
                f'"{self.font.file_name}",{self.rotation},'
                f'{self.x_multiplication},{self.y_multiplication},"{text}"\n'
            )
            y_offset += self.font_height
        return "".join(commands)


@dataclass
class BoxElement:
    """A rectangle outline."""

    type: ClassVar[str] = "box"

    x_start: int = 0
    y_start: int = 0
    x_end: int = 0
    y_end: int = 0
    line_width: int = 1

    @classmethod
    def from_json(cls, item: Mapping[str, Any]) -> BoxElement:
        """Build from a decoded JSON object."""
        item = _require_mapping(item)
        return cls(
            x_start=_get_int(item, "x_start", 0),
            y_start=_get_int(item, "y_start", 0),
            x_end=_get_int(item, "x_end", 0),
            y_end=_get_int(item, "y_end", 0),
            line_width=_get_int(item, "lineWidth", 1),
        )

    def tspl_command(self) -> str:
        """Render as a BOX command."""
        return (
            f"BOX {self.x_start},{self.y_start},{self.x_end},{self.y_end},{self.line_width}\n"
        )


LabelElement = QRCodeElement | TextElement | BoxElement

_ELEMENT_TYPES: dict[str, Any] = {
    QRCodeElement.type: QRCodeElement,
    TextElement.type: TextElement,
    BoxElement.type: BoxElement,
}


def _now_string() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M")


@dataclass
class Label:
    """A printable label: page setup plus a list of elements."""

    title: str = DEFAULT_TITLE
    width: int = 0
    height: int = 0
    gap_m: int = 2
    gap_n: int = 2
    num: int = 1
    elements: list[LabelElement] = field(default_factory=list)
    state: LabelPrintState = LabelPrintState.PRINT_WAIT
    create_time: str = field(default_factory=_now_string)

    @classmethod
    def from_json(cls, root: Mapping[str, Any]) -> Label:
        """Build from a decoded JSON object; unknown or untyped elements are skipped."""
        root = _require_mapping(root)
        label = cls(
            title=_as_str(root["title"], "title") if "title" in root else DEFAULT_TITLE,
            width=_get_int(root, "width", 0),
            height=_get_int(root, "height", 0),
            gap_m=_get_int(root, "gapM", 2),
            gap_n=_get_int(root, "gapN", 2),
            num=_get_int(root, "num", 1),
        )
        raw_elements = root.get("elements")
        if isinstance(raw_elements, list):
            for raw in raw_elements:
                if not isinstance(raw, Mapping) or "type" not in raw:
                    continue
                element_type = _ELEMENT_TYPES.get(_as_str(raw["type"], "type"))
                if element_type is not None:
                    label.elements.append(element_type.from_json(raw))
        return label

    def tspl_command(self) -> str:
        """Render the full TSPL program for this label."""
        header = (
            f"SIZE {self.width} mm,{self.height} mm\n"
            f"GAP {self.gap_m} mm,{self.gap_n} mm\n"
            "DIRECTION 0,0\n"
            "DENSITY 15\n"
            "CLS\n"
        )
        body = "".join(element.tspl_command() for element in self.elements)
        return f"{header}{body}PRINT {self.num}\n"


def create_label(root: Mapping[str, Any] | str | bytes) -> Label:
    """Create a label from a JSON object or a JSON document."""
    if isinstance(root, (str, bytes)):
        root = json.loads(root)
    return Label.from_json(root)