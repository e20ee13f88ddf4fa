# minitalk

A tiny signal-based messenger for POSIX systems. A server prints its process
id and waits. A client sends a message to that id one bit at a time. Each bit
goes as a `SIGUSR1` (for 0) or a `SIGUSR2` (for 1), most significant bit
first, with a short pause after each signal. The server puts every eight bits
back together into a byte and writes it to standard output.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal:

```
minitalk-server
```

It prints a line like:

```
The server pid is 4242
```

It then waits for signals until it is interrupted with Ctrl-C.

Send a message from another terminal:

```
minitalk-client 4242 "hello there"
```

The client encodes the text as UTF-8 and sends it byte by byte. The bytes
show up in the server's terminal. There is no reply and no end-of-message
marker.

The client checks its arguments first:

- With anything but exactly two arguments it prints
  `Usage :./client <pid_server> <string_to_pass>` and stops.
- If the pid contains anything other than digits, is zero, or no process can
  be signalled at that pid, it prints `Unvalid Pid` and stops.

## Library use

The pieces behind the commands can be imported:

- `minitalk.protocol` holds `char_to_bits`, `signal_for_bit`,
  `bit_for_signal` and the `BitDecoder` class. `BitDecoder.feed` takes one bit
  at a time and returns the finished byte after every eighth bit, `None`
  otherwise. Values other than 0 and 1, or signals other than the two user
  signals, raise `ValueError`.
- `minitalk.client` holds `check_pid`, `parse_pid`, `send_char` and
  `send_message`. `parse_pid`, `send_char` and `send_message` raise
  `InvalidPidError` when the target pid is no good. The pause after each
  signal defaults to `DEFAULT_DELAY` (0.6 ms) and can be passed as `delay`.
- `minitalk.server` holds `Server`. Its `handle_signal` method decodes one
  signal and writes each completed byte to the binary stream given to the
  constructor, or to standard output. Its `install` method registers it for
  both user signals.
- `minitalk.printf` holds `format_string`, which returns the rendered text,
  and `printf`, which writes it to standard output and returns its length.
  They support the conversions `c s p d i u x X %` and the flags `-`, `0`,
  `.`, `*` and a field width. Missing arguments or arguments of the wrong
  kind raise `TypeError`.
- `minitalk.conversions` renders single conversions from a `FormatFlags`
  value, and `minitalk.convert` holds `atoi` and `itoa_base`.

```python
from minitalk.printf import format_string

format_string("[%-5d|%05x]", 42, 255)   # '[42   |000ff]'
```

## Limits

Signals are not queued, so a server that falls behind loses bits and every
byte after them comes out wrong. There is no acknowledgement from the server,
and the package runs only where `SIGUSR1`, `SIGUSR2` and `signal.pause` exist.

## Tests

```
pip install .[test]
pytest
```