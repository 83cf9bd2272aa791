"""Block positions packed into one 64-bit integer (x:26, z:26, y:12)."""

from __future__ import annotations

_XZ_MASK = 0x3FFFFFF
_Y_MASK = 0xFFF


def _sign_extend(value: int, bits: int) -> int:
    if value & (1 << (bits - 1)):
        value -= 1 << bits
    return value


def position_from_xyz(x: int, y: int, z: int) -> int:
    """Pack coordinates; each is truncated to its field width."""
    return ((x & _XZ_MASK) << 38) | ((z & _XZ_MASK) << 12) | (y & _Y_MASK)


def position_to_xyz(position: int) -> tuple[int, int, int]:
    """Unpack a position into signed (x, y, z)."""
    x = _sign_extend((position >> 38) & _XZ_MASK, 26)
    z = _sign_extend((position >> 12) & _XZ_MASK, 26)
    y = _sign_extend(position & _Y_MASK, 12)
    return x, y, z