"""Conversion between ANSI (Windows-1252) and OEM (code page 437) bytes."""

from __future__ import annotations

# OEM value for each ANSI byte from 128 on; zero where there is none.
_ANSI_TO_OEM_HIGH = bytes((
    0x00, 0x00, 0x00, 0x9F, 0x00, 0x00, 0x00, 0xD8, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x60, 0x27, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0xFF, 0xAD, 0x9B, 0x9C, 0x0F, 0x9D, 0x7C, 0x15, 0x22, 0x63, 0xA6, 0xAE, 0xAA, 0x2D, 0x52, 0x00,
    0xF8, 0xF1, 0xFD, 0x33, 0x27, 0xE6, 0x14, 0xFA, 0x2C, 0x31, 0xA7, 0xAF, 0xAC, 0xAB, 0x00, 0xA8,
    0x41, 0x41, 0x41, 0x41, 0x8E, 0x8F, 0x92, 0x80, 0x45, 0x90, 0x45, 0x45, 0x49, 0x49, 0x49, 0x49,
    0x44, 0xA5, 0x4F, 0x4F, 0x4F, 0x4F, 0x99, 0x78, 0x4F, 0x55, 0x55, 0x55, 0x9A, 0x59, 0x00, 0xE1,
    0x85, 0xA0, 0x83, 0x61, 0x84, 0x86, 0x91, 0x87, 0x8A, 0x82, 0x88, 0x89, 0x8D, 0xA1, 0x8C, 0x8B,
    0x64, 0xA4, 0x95, 0xA2, 0x93, 0x6F, 0x94, 0xF6, 0x6F, 0x97, 0xA3, 0x96, 0x81, 0x79, 0x00, 0x98,
))


def _build_ansi_to_oem() -> bytes:
    return bytes(c if c <= 128 else _ANSI_TO_OEM_HIGH[c & 0x7F] for c in range(256))


def _build_oem_to_ansi() -> bytes:
    table = bytearray(range(129)) + bytearray(127)
    for oem in range(129, 256):
        # The first ANSI byte (from 0x83 on) mapping to this OEM byte wins.
        table[oem] = next(
            (ansi for ansi in range(0x83, 256) if _ANSI_TO_OEM_HIGH[ansi - 0x80] == oem),
            0,
        )
    return bytes(table)


_ANSI_TO_OEM = _build_ansi_to_oem()
_OEM_TO_ANSI = _build_oem_to_ansi()


def ansi_to_oem(data) -> bytes:
    """Convert ANSI bytes to OEM bytes. Bytes up to 128 are kept."""
    return bytes(data).translate(_ANSI_TO_OEM)


def oem_to_ansi(data) -> bytes:
    """Convert OEM bytes to ANSI bytes. Unknown bytes above 128 become zero."""
    return bytes(data).translate(_OEM_TO_ANSI)