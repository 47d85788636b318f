"""Lookup table mapping values through a gamma curve."""

from __future__ import annotations

import math
import struct


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


class GammaTable:
    """Table of integers 0..size-1 mapped through a gamma curve."""

    def __init__(self, size: int, gamma: float = 1.0):
        self._table = [0] * max(size, 2)
        self._gamma = -1.0
        self.set_gamma(gamma)

    @property
    def gamma(self) -> float:
        return self._gamma

    def set_gamma(self, gamma: float) -> None:
        """Recompute the table for a new gamma (at least 0.001)."""
        gamma = _f32(max(gamma, 0.001))
        if gamma == self._gamma:
            return
        self._gamma = gamma
        size_f = _f32(len(self._table) - 1)
        exponent = _f32(1 / gamma)
        self._table = [
            int(_f32(_f32(math.pow(_f32(i / size_f), exponent)) * size_f))
            for i in range(len(self._table))
        ]

    def __getitem__(self, index: int) -> int:
        return self._table[index]

    def __len__(self) -> int:
        return len(self._table)