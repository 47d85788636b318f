"""Enumerations, error codes and the file error exception."""

from __future__ import annotations

from enum import Enum, IntEnum


class TextureFormat(Enum):
    """Pixel formats a texture or buffer can use."""

    ORIGINAL = 0
    PALETTED = 1
    BGRA = 2


class BobType(IntEnum):
    """Kinds of archive items. The numeric values are stored in files."""

    NONE = 0
    SOUND = 1
    BITMAP_RLE = 2
    FONT = 3
    BITMAP_PLAYER = 4
    PALETTE = 5
    BOB = 6
    BITMAP_SHADOW = 7
    MAP = 8
    TEXT = 9
    RAW = 10
    MAP_HEADER = 11
    # Extensions beyond the types used by the game's own files
    INI = 12
    UNSET = 13
    BITMAP = 14
    PALETTE_ANIM = 15


NUM_BOB_TYPES = BobType.PALETTE_ANIM + 1


class SoundType(IntEnum):
    """Kinds of sound items."""

    NONE = 0
    WAVE = 1
    MIDI = 2
    XMIDI = 3
    # Extensions beyond the types used by the game's own files
    MP3 = 4
    OGG = 5
    OTHER = 99


class Animal(IntEnum):
    """Animals as stored in map files."""

    NONE = 0
    RABBIT = 1
    FOX = 2
    STAG = 3
    DEER = 4
    DUCK = 5
    SHEEP = 6
    DEER2 = 7
    DUCK2 = 8
    DONKEY = 9


class Resource(IntEnum):
    """Resource values as stored in map files."""

    NONE = 0x00
    WATER = 0x21
    FISH = 0x87
    COAL = 0x40
    IRON = 0x48
    GOLD = 0x50
    GRANITE = 0x58


class ObjectInfo(IntEnum):
    """Object index ranges as stored in map files."""

    EMPTY = 0x00
    STONE_BEGIN = 0x01
    STONE_END = 0x06
    TREE_OR_PALM_BEGIN = 0x30
    TREE_OR_PALM_END = 0x37
    TREE1_BEGIN = 0x70
    TREE1_END = 0x77
    TREE2_BEGIN = 0xB0
    TREE2_END = 0xB7
    PALM_BEGIN = 0xF0
    PALM_END = 0xF7


class ObjectType(IntEnum):
    """Object type values as stored in map files."""

    EMPTY = 0x00
    STONE1 = 0xCC
    STONE2 = 0xCD
    TREE_OR_PALM = 0xC4
    PALM = 0xC5
    # Combined with object index 0x00-0x06 giving the player number
    HEADQUARTER_MASK = 0x80


HARBOR_MASK = 0x40
"""Combined with terrain values to allow harbour placement."""


class ImgDir(IntEnum):
    """Direction a figure faces: east first, then clockwise."""

    E = 0
    SE = 1
    SW = 2
    W = 3
    NW = 4
    NE = 5


class ErrorCode(IntEnum):
    """Error codes of reading and writing functions."""

    NONE = 0
    FILE_NOT_FOUND = 1
    FILE_NOT_ACCESSIBLE = 2
    WRONG_HEADER = 3
    WRONG_FORMAT = 4
    WRONG_ARCHIVE = 5
    UNEXPECTED_EOF = 6
    PALETTE_MISSING = 7
    INVALID_BUFFER = 8
    UNSUPPORTED_FORMAT = 9
    CUSTOM = 0x1000


class FileError(Exception):
    """Raised when a file cannot be read or written; carries an error code."""

    def __init__(self, code):
        try:
            self.code = ErrorCode(code)
            label = self.code.name
        except ValueError:
            self.code = int(code)
            if self.code > ErrorCode.CUSTOM:
                label = f"CUSTOM+{self.code - ErrorCode.CUSTOM}"
            else:
                label = str(self.code)
        super().__init__(f"file error: {label}")