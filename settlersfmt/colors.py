"""RGB and BGRA colour values."""

from __future__ import annotations

from dataclasses import dataclass, fields


def _check_channels(obj) -> None:
    for field in fields(obj):
        value = getattr(obj, field.name)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"channel {field.name} out of range: {value}")


@dataclass(frozen=True)
class ColorRGB:
    """A colour with red, green and blue channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        _check_channels(self)

    @classmethod
    def from_bgr(cls, data) -> ColorRGB:
        """Create a colour from the first three bytes of a BGR buffer."""
        if len(data) < 3:
            raise ValueError("BGR buffer needs at least 3 bytes")
        return cls(data[2], data[1], data[0])

    def to_bgr(self) -> bytes:
        """Return the colour as three bytes in BGR order."""
        return bytes((self.b, self.g, self.r))


@dataclass(frozen=True)
class ColorBGRA:
    """A colour with blue, green, red and alpha channels."""

    b: int = 0
    g: int = 0
    r: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        _check_channels(self)

    @classmethod
    def from_value(cls, value: int) -> ColorBGRA:
        """Create a colour from a 32 bit value whose highest byte is alpha."""
        return cls(value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF, (value >> 24) & 0xFF)

    def as_value(self) -> int:
        """Return the colour as a 32 bit value whose highest byte is alpha."""
        return self.b | (self.g << 8) | (self.r << 16) | (self.a << 24)

    @classmethod
    def from_bgra(cls, data) -> ColorBGRA:
        """Create a colour from the first four bytes of a BGRA buffer."""
        if len(data) < 4:
            raise ValueError("BGRA buffer needs at least 4 bytes")
        return cls(data[0], data[1], data[2], data[3])

    def to_bgra(self) -> bytes:
        """Return the colour as four bytes in BGRA order."""
        return bytes((self.b, self.g, self.r, self.a))

    @classmethod
    def from_rgb(cls, rgb: ColorRGB, alpha: int = 0xFF) -> ColorBGRA:
        """Create a colour from an RGB colour and an alpha value."""
        return cls(rgb.b, rgb.g, rgb.r, alpha)

    def to_rgb(self) -> ColorRGB:
        """Return the colour without its alpha channel."""
        return ColorRGB(self.r, self.g, self.b)