"""Receiving end: rebuilds bytes from SIGUSR1/SIGUSR2 and prints them."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import BinaryIO

from minitalk.printf import printf
from minitalk.protocol import BitDecoder, bit_for_signal


class Server:
    """Decodes incoming signals into bytes written to ``output``."""

    def __init__(self, output: BinaryIO | None = None) -> None:
        self._output = output
        self._decoder = BitDecoder()

    def _write(self, byte: int) -> None:
        stream = self._output if self._output is not None else sys.stdout.buffer
        stream.write(bytes([byte]))
        stream.flush()

    def handle_signal(self, signum: int, frame: FrameType | None) -> None:
        """Take one bit from ``signum`` and emit the byte once it is complete."""
        byte = self._decoder.feed(bit_for_signal(signum))
        if byte is not None:
            self._write(byte)

    def install(self) -> None:
        """Register this server as the handler of both user signals."""
        signal.signal(signal.SIGUSR1, self.handle_signal)
        signal.signal(signal.SIGUSR2, self.handle_signal)


def main(argv: list[str] | None = None) -> int:
    """Print the process id and wait for messages until interrupted."""
    printf("The server pid is %d\n", os.getpid())
    server = Server()
    server.install()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0