# tsplabel

Turn JSON label descriptions into TSPL commands for thermal label printers.
It also has helpers for USB vendor/product ids and for keeping a string in
several encodings.

## Installing

```
pip install tsplabel
```

## Building a label

A label is described by a plain dictionary. This can be one loaded with
`json.load`. `create_label` also accepts a JSON document as `str` or `bytes`.
Elements of type `text`, `qrcode` and `box` are recognised. Elements with
any other type, or with no `type`, are skipped.

```python
from tsplabel.label import create_label

label = create_label({
    "title": "Shipping",
    "width": 60,
    "height": 40,
    "num": 2,
    "elements": [
        {"type": "box", "x_start": 10, "y_start": 10, "x_end": 400, "y_end": 300},
        {"type": "text", "x_start": 20, "y_start": 20, "x_end": 380,
         "texts": ["Order 1001"], "font": 2},
        {"type": "qrcode", "x": 20, "y": 120, "cellWidth": 4, "text": "1001"},
    ],
})

print(label.tspl_command())
```

`Label.tspl_command()` returns one string. It starts with the `SIZE`, `GAP`,
`DIRECTION 0,0`, `DENSITY 15` and `CLS` header. After the header comes each
element's command in order, and the string ends with `PRINT <num>`.

### Label fields

These are the keys a label reads and the defaults it uses when a key is missing:

| Key     | Default  |
|---------|----------|
| `title` | `无标题` |
| `width` | 0        |
| `height`| 0        |
| `gapM`  | 2        |
| `gapN`  | 2        |
| `num`   | 1        |

A `Label` also carries `state`, a `LabelPrintState` that starts as
`PRINT_WAIT`. It carries `create_time` too, which is the local time of
creation formatted as `YYYY-MM-DD HH:MM`. All fields are plain dataclass
attributes and can be changed directly.

### Elements

- `QRCodeElement` reads `x`, `y`, `eccLevel` (an `ECCLevel`: 0–3 for L, M, Q, H), `cellWidth` and `text`. It renders as `QRCODE x,y,<ecc>,<cell>,A,0,"text"`.
- `BoxElement` reads `x_start`, `y_start`, `x_end`, `y_end` and `lineWidth`. It renders as `BOX x_start,y_start,x_end,y_end,line_width`.
- `TextElement` reads the following keys and renders one `TEXT` command per row:
  - `x_start`, `y_start`, `x_end` and `y_end`
  - `font`, a `LabelFont`: 0–4 for TSS16, TSS20, TSS24, TSS32, TST24
  - `rotation`
  - `xMultiplication` and `yMultiplication`
  - `texts`, a list of strings
  - `hLayout` and `vLayout`

An enum value that is out of range falls back to the default. The defaults are `ECCLevel.L`, `LabelFont.TSS16`, `LabelLayout.LEFT` and `LabelLayout.TOP`.

### Text wrapping and alignment

When a text element's `x_end` is non-zero, each entry of `texts` is wrapped into rows that fit between `x_start` and `x_end`:

- A character above U+007F counts as one full font width.
- Any other character counts as half a font width.

Rows are aligned horizontally with `hLayout` and vertically with `vLayout`, using the `LabelLayout` values `CENTER`, `LEFT`, `RIGHT`, `TOP` and `BOTTOM`. Alignment does not apply in these cases:

- Horizontal alignment is off when `x_end` is 0.
- Vertical alignment is off when `y_end` is 0.

The same rules are available on their own:

```python
from tsplabel.label import LabelLayout, text_row_offset, wrap_text

wrap_text("abcdef", 8, 16, 24)                                # ['abc', 'def']
text_row_offset(0, 100, "abcd", 8, 16, LabelLayout.RIGHT)     # 68
```

`wrap_text` raises `ValueError` if a single character is wider than the row.

## USB helpers

`tsplabel.usb` works on the text form of device identifiers:

- `parse_instance_id` reads a device instance id such as `USB\VID_1234&PID_5678\...`.
- `parse_interface_path` reads an interface path such as `\\?\USB#VID_1234&PID_5678#...`.
- Both return a `VidPid`, or `None` when the text does not match.
- `vid_pid_includes` tests membership of a `VidPid` in a collection.
- `split_null_terminated` splits a NUL-separated list of strings and stops at the first empty entry.
- `filter_devices` keeps the ids whose VID/PID is in a filter list and returns `UsbDevice` records. It accepts a sequence of ids or a NUL-separated string, plus an optional limit on how many ids are examined.

```python
from tsplabel.usb import VidPid, filter_devices, parse_instance_id

printer = VidPid(0x1234, 0x5678)
parse_instance_id("USB\\VID_1234&PID_5678\\0000")  # VidPid(vid=4660, pid=22136)
filter_devices(["USB\\VID_1234&PID_5678\\0000"], [printer], 16)
```

`VidPid` raises `ValueError` for values outside 16 bits. Its `str()` form is `VID_1234&PID_5678`.

## Text encodings

`tsplabel.strconv.StrConv` keeps one value in three forms at once:

- `ascii`: bytes in a chosen encoding. This defaults to the locale's preferred encoding.
- `u8`: UTF-8 bytes.
- `u16`: a `str`.

`set_ascii`, `set_u8` and `set_u16` set one form and update the other two. Each of them returns the object, so calls can be chained. Input stops at the first NUL. Characters that cannot be represented become `?` when encoding and U+FFFD when decoding.

```python
from tsplabel.strconv import StrConv

conv = StrConv(encoding="gbk").set_u16("标签")
conv.u8     # b'\xe6\xa0\x87\xe7\xad\xbe'
```

## What this package does not do

The package produces and parses text only:

- It does not talk to printers or USB devices.
- It does not send TSPL commands anywhere.
- It does not enumerate the devices present on the system or read their properties.
- It does not watch for devices arriving or leaving.

The `interface`, `friendly_name`, `symbolic_name` and `dev_inst` fields of `UsbDevice` are left at their empty defaults for you to fill in. The package has no command-line program.