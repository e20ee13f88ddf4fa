"""Sending end: transmits a message to a server process bit by bit."""

from __future__ import annotations

import os
import sys
import time

from minitalk.convert import atoi
from minitalk.printf import printf
from minitalk.protocol import char_to_bits, signal_for_bit

DEFAULT_DELAY = 0.0006
USAGE = "Usage :./client <pid_server> <string_to_pass>\n"
INVALID_PID = "Unvalid Pid\n"


class InvalidPidError(ValueError):
    """The process id is malformed or no process accepts signals at it."""


def check_pid(text: str) -> bool:
    """Return whether ``text`` consists only of decimal digits."""
    return all("0" <= ch <= "9" for ch in text)


def parse_pid(text: str) -> int:
    """Parse a server process id, raising InvalidPidError when it is unusable."""
    pid = atoi(text)
    if pid == 0 or not check_pid(text):
        raise InvalidPidError(f"invalid pid: {text!r}")
    return pid


def send_char(byte: int, pid: int, delay: float = DEFAULT_DELAY) -> None:
    """Send the eight bits of ``byte`` to ``pid``, pausing ``delay`` seconds after each."""
    for bit in char_to_bits(byte):
        try:
            os.kill(pid, signal_for_bit(bit))
        except OSError as exc:
            raise InvalidPidError(f"cannot signal pid {pid}") from exc
        time.sleep(delay)


def send_message(message: str | bytes, pid: int, delay: float = DEFAULT_DELAY) -> None:
    """Send every byte of ``message`` (UTF-8 encoded when text) to ``pid``."""
    data = message.encode() if isinstance(message, str) else message
    for byte in data:
        send_char(byte, pid, delay)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``client <pid_server> <string_to_pass>``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        printf("%s", USAGE)
        return 0
    try:
        send_message(args[1], parse_pid(args[0]))
    except InvalidPidError:
        printf("%s", INVALID_PID)
    return 0