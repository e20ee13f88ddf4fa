"""Bit-level encoding of bytes as a stream of user signals."""

from __future__ import annotations

import signal

BITS_PER_BYTE = 8


def char_to_bits(byte: int) -> list[int]:
    """Return the eight bits of ``byte``, most significant first."""
    byte &= 0xFF
    return [(byte >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1)]


def signal_for_bit(bit: int) -> signal.Signals:
    """Map a 0 bit to SIGUSR1 and a 1 bit to SIGUSR2."""
    if bit == 0:
        return signal.SIGUSR1
    if bit == 1:
        return signal.SIGUSR2
    raise ValueError(f"bit must be 0 or 1, got {bit!r}")


def bit_for_signal(signum: int) -> int:
    """Map SIGUSR1 to a 0 bit and SIGUSR2 to a 1 bit."""
    if signum == signal.SIGUSR1:
        return 0
    if signum == signal.SIGUSR2:
        return 1
    raise ValueError(f"signal {signum!r} carries no bit")


class BitDecoder:
    """Collects bits, most significant first, into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the completed byte after every eighth bit."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._value = ((self._value << 1) | bit) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte