from unittest import mock

import pytest

from minitalk.client import (
    InvalidPidError,
    check_pid,
    main,
    parse_pid,
    send_char,
    send_message,
)
from minitalk.protocol import BitDecoder, bit_for_signal


def _decode_calls(kill):
    decoder = BitDecoder()
    out = []
    for call in kill.call_args_list:
        _pid, signum = call.args
        byte = decoder.feed(bit_for_signal(signum))
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_check_pid():
    assert check_pid("123") is True
    assert check_pid("12a") is False
    assert check_pid("-5") is False


def test_parse_pid_valid():
    assert parse_pid("4242") == 4242


@pytest.mark.parametrize("text", ["0", "abc", "12a", "-5", " 12"])
def test_parse_pid_invalid(text):
    with pytest.raises(InvalidPidError):
        parse_pid(text)


def test_send_char_emits_eight_signals():
    with mock.patch("minitalk.client.os.kill") as kill:
        send_char(ord("A"), 4242, 0)
    assert kill.call_count == 8
    assert {call.args[0] for call in kill.call_args_list} == {4242}
    assert _decode_calls(kill) == b"A"


def test_send_message_round_trip():
    with mock.patch("minitalk.client.os.kill") as kill:
        send_message("hé!", 4242, 0)
    assert _decode_calls(kill) == "hé!".encode()


def test_send_message_accepts_bytes():
    with mock.patch("minitalk.client.os.kill") as kill:
        send_message(b"\x00\xff", 4242, 0)
    assert _decode_calls(kill) == b"\x00\xff"


def test_unreachable_process_raises():
    with mock.patch("minitalk.client.os.kill", side_effect=ProcessLookupError):
        with pytest.raises(InvalidPidError):
            send_char(ord("A"), 4242, 0)


def test_main_usage(capsys):
    assert main(["4242"]) == 0
    assert capsys.readouterr().out == "Usage :./client <pid_server> <string_to_pass>\n"


def test_main_invalid_pid(capsys):
    with mock.patch("minitalk.client.os.kill") as kill:
        assert main(["abc", "hello"]) == 0
    assert kill.call_count == 0
    assert capsys.readouterr().out == "Unvalid Pid\n"


def test_main_unreachable_pid(capsys):
    with mock.patch("minitalk.client.os.kill", side_effect=ProcessLookupError):
        assert main(["4242", "hello"]) == 0
    assert capsys.readouterr().out == "Unvalid Pid\n"


def test_main_sends_message(capsys):
    with mock.patch("minitalk.client.os.kill") as kill:
        assert main(["4242", "hey"]) == 0
    assert _decode_calls(kill) == b"hey"
    assert capsys.readouterr().out == ""