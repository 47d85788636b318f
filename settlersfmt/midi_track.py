"""MIDI and XMIDI track data and the standard MIDI file header."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO

from .enums import ErrorCode, FileError

_HEADER = struct.Struct(">4sIHHh")


@dataclass
class MidiHeader:
    """The 14 byte 'MThd' chunk of a standard MIDI file."""

    id: bytes = b"MThd"
    header_size: int = 6
    format: int = 0
    num_tracks: int = 0
    ppqs: int = 0

    SIZE = _HEADER.size

    @classmethod
    def unpack(cls, data) -> MidiHeader:
        """Parse a header from the first 14 bytes of data."""
        if len(data) < _HEADER.size:
            raise ValueError(f"MIDI header needs {_HEADER.size} bytes, got {len(data)}")
        return cls(*_HEADER.unpack_from(bytes(data[:_HEADER.size])))

    def pack(self) -> bytes:
        """Return the header as 14 big-endian bytes."""
        return _HEADER.pack(self.id, self.header_size, self.format, self.num_tracks, self.ppqs)


def _read_exact(stream: BinaryIO, length: int) -> bytes:
    data = stream.read(length)
    if data is None or len(data) < length:
        raise FileError(ErrorCode.UNEXPECTED_EOF)
    return bytes(data)


class MidiTrack:
    """The raw bytes of one standard MIDI track."""

    def __init__(self, data=b""):
        self.data = bytes(data)

    def read(self, stream: BinaryIO, length: int) -> None:
        """Replace the data with `length` bytes from the stream."""
        self.clear()
        if length == 0:
            return
        self.data = _read_exact(stream, length)

    def clear(self) -> None:
        self.data = b""

    @property
    def mid(self) -> bytes | None:
        """The track bytes, or None if the track is empty."""
        return self.data or None

    @property
    def mid_length(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MidiTrack):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"MidiTrack({len(self.data)} bytes)"


@dataclass
class Timbre:
    """A patch and bank pair used by an XMIDI track."""

    patch: int = 0
    bank: int = 0


@dataclass
class XMidiTrack:
    """The raw bytes of one XMIDI event track and its timbres."""

    data: bytes = b""
    timbres: list[Timbre] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.data = bytes(self.data)

    def read(self, stream: BinaryIO, length: int) -> None:
        """Replace the data with `length` bytes from the stream."""
        self.data = b""
        self.data = _read_exact(stream, length)

    def clear(self) -> None:
        """Drop the event data; the timbres are kept."""
        self.data = b""