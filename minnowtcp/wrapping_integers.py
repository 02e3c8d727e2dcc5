"""Sequence numbers that wrap around at 2**32."""

from __future__ import annotations

_MOD32 = 1 << 32
_MASK32 = _MOD32 - 1
_MOD64 = 1 << 64


class Wrap32:
    """A 32-bit unsigned value counted from an arbitrary zero point.

    Arithmetic wraps back to zero after 2**32 - 1.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw_value: int) -> None:
        self._raw = int(raw_value) & _MASK32

    @property
    def raw_value(self) -> int:
        """The underlying 32-bit value."""
        return self._raw

    @staticmethod
    def wrap(n: int, zero_point: Wrap32) -> Wrap32:
        """Convert the absolute sequence number ``n`` relative to ``zero_point``."""
        return zero_point + n

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value."""
        offset = (self._raw - zero_point._raw) & _MASK32
        base = (checkpoint >> 32) << 32
        candidates = (
            (base - _MOD32 + offset) % _MOD64,
            (base + offset) % _MOD64,
            (base + _MOD32 + offset) % _MOD64,
        )
        # On a tie the lower candidate wins, as the candidates are ordered.
        return min(candidates, key=lambda candidate: abs(candidate - checkpoint))

    def __add__(self, n: int) -> Wrap32:
        if not isinstance(n, int):
            return NotImplemented
        return Wrap32(self._raw + (n & _MASK32))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wrap32):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Wrap32({self._raw})"