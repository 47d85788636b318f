"""Describing folders of loose files as archive entries, and the global texture format."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .enums import BobType, TextureFormat

_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_EXTENSION_TYPES = {
    "fon": BobType.FONT,
    "fonx": BobType.FONT,
    "bmp": BobType.BITMAP,
    "bbm": BobType.PALETTE,
    "act": BobType.PALETTE,
    "txt": BobType.TEXT,
    "ger": BobType.TEXT,
    "eng": BobType.TEXT,
    "links": BobType.TEXT,
    "empty": BobType.NONE,
    "midi": BobType.SOUND,
    "xmi": BobType.SOUND,
    "wav": BobType.SOUND,
}

_PART_TYPES = {
    "rle": BobType.BITMAP_RLE,
    "player": BobType.BITMAP_PLAYER,
    "shadow": BobType.BITMAP_SHADOW,
    "paletteanims": BobType.PALETTE_ANIM,
    "palette": BobType.PALETTE,
}

_texture_format = TextureFormat.ORIGINAL


def set_global_texture_format(fmt: TextureFormat) -> TextureFormat:
    """Set the texture format used for output and return the previous one."""
    global _texture_format
    old, _texture_format = _texture_format, TextureFormat(fmt)
    return old


def get_global_texture_format() -> TextureFormat:
    """Return the texture format used for output."""
    return _texture_format


@dataclass
class FileEntry:
    """A file of a folder together with what its name says about it."""

    file_path: Path
    name: str = ""
    nr: int = -1
    """Index in the archive, or -1 if the name holds none."""
    bob_type: BobType = BobType.UNSET
    nx: int = 0
    """Origin (bitmaps) or letter spacing (fonts) in x."""
    ny: int = 0
    """Origin (bitmaps) or letter spacing (fonts) in y."""

    def __post_init__(self) -> None:
        self.file_path = Path(self.file_path)


def _hex_to_int(text: str) -> int:
    if not _HEX_RE.fullmatch(text):
        raise ValueError(f"Invalid hex number 0x{text}")
    value = int(text, 16)
    if value > 0xFFFFFFFF:
        raise ValueError(f"Invalid hex number 0x{text}")
    return value


def _try_int(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _to_int(text: str) -> int:
    value = _try_int(text)
    if value is None:
        raise ValueError(f"Invalid number: {text!r}")
    return value


def _parse_entry(path: Path) -> FileEntry:
    entry = FileEntry(path)
    parts = path.name.lower().split(".")

    bob_type = _EXTENSION_TYPES.get(parts[-1])
    if bob_type is not None:
        entry.bob_type = bob_type
        parts.pop()

    first = parts[0] if parts else ""
    if first[:2] in ("u+", "0x"):
        entry.nr = _hex_to_int(first[2:])
        parts.pop(0)
    else:
        number = _try_int(first)
        if number is not None:
            entry.nr = number
            parts.pop(0)
        else:
            entry.nr = -1

    for part in parts:
        part_type = _PART_TYPES.get(part)
        if part_type is not None:
            entry.bob_type = part_type
        elif part[:2] in ("nx", "dx"):
            entry.nx = _to_int(part[2:])
        elif part[:2] in ("ny", "dy"):
            entry.ny = _to_int(part[2:])
        else:
            entry.name = f"{entry.name}.{part}" if entry.name else part
    return entry


def read_folder_info(folder_path: str | PathLike) -> list[FileEntry]:
    """List the files and sub folders of a folder as entries described by their names."""
    entries = []
    for path in sorted(Path(folder_path).iterdir()):
        if not (path.is_file() or path.is_dir()):
            continue
        entries.append(_parse_entry(path))
    return entries