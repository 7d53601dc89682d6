# sigtalk

sigtalk carries text from one process to another using only the POSIX user
signals. Each byte is sent as nine signals. The first eight carry the bits
of the byte, least significant first: `SIGUSR1` for a 0 bit and `SIGUSR2`
for a 1 bit. The ninth signal tells the receiver that the byte is complete.
The server puts the bits back together and writes each byte to its standard
output as soon as it arrives.

sigtalk needs a POSIX system, because it depends on `SIGUSR1`, `SIGUSR2`
and `signal.pause`.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
for signals until it is stopped:

```
sigtalk-server
```

```
Server PID: 4242
```

From another terminal, send it a message:

```
sigtalk-client 4242 "hello there"
```

The text appears on the server's side. Both commands print an error and
exit with status 1 when given wrong arguments:

- the server takes no arguments (`ERROR: Too many arguments`);
- the client needs exactly two arguments, a positive process id and a
  message that is not empty (`ERROR: Not enough arguments`,
  `ERROR: Too many arguments`, `ERROR: Invalid arguments` or
  `ERROR: Invalid PID`). If a signal cannot be delivered, the client prints
  the system's error message and exits with status 1.

The client pauses 0.1 ms after every signal.

## Library

The wire format is available on its own in `sigtalk.protocol`:

```python
from sigtalk.protocol import Decoder, encode_message

decoder = Decoder()
received = [decoder.feed(bit) for bit in encode_message("hi")]
data = bytes(b for b in received if b is not None)   # b"hi"
```

- `encode_char(ch)` gives the nine bits (0 or 1) for one byte, given as a
  one-character string or an integer.
- `encode_message(message)` yields the bits for a whole message; a string is
  sent as UTF-8, and sending stops at the first NUL byte.
- `Decoder.feed(bit)` takes one bit at a time and returns the finished byte
  (an `int`) on every ninth bit, otherwise `None`.

`sigtalk.client.send_message(pid, message, delay=0.0001, kill=None)` sends a
message to a process id, raising `ClientError` for a process id that is not
positive. `kill` replaces `os.kill` as the function that delivers each
signal. `sigtalk.client.main(argv=None)` is the client command.

`sigtalk.server.Server(stream=None)` is the receiving end. It writes each
byte to `stream` (the binary standard output by default) and flushes it.
`Server.handle(signo, frame=None)` is its signal handler and
`Server.install()` registers it for both signals.
`sigtalk.server.main(argv=None)` is the server command.

The package also contains the helpers the programs are built from:

- `sigtalk.printf`: `printf(fmt, *args, stream=None)` with
  `%c %s %d %i %u %x %X %p %%`, returning the number of characters written;
  `sformat` returns the formatted text instead; `format_number`,
  `format_hex` and `format_address` format single values;
- `sigtalk.strings`: `strlen`, `strlcpy`, `strlcat`, `strncmp`, `strchr`,
  `strrchr`, `strnstr`, `atoi`, `itoa`, `strdup`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`, `striteri`. Searches return an index or
  `None`; `strlcpy` and `strlcat` return the resulting text together with
  the length they report;
- `sigtalk.ctype`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower` for ASCII characters or code points;
- `sigtalk.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp`, `calloc` on byte buffers, raising `ValueError` for spans
  outside the buffer;
- `sigtalk.output`: `put_char`, `put_str`, `put_endl` and `put_number`,
  writing to a text stream (standard output by default);
- `sigtalk.linkedlist`: a singly linked `LinkedList` of `Node`s with
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each`,
  `map`, `len()` and iteration.

## Limitations

- Delivery is not confirmed: the server sends nothing back, and signals
  that arrive faster than they are handled can be lost, which shifts every
  later bit.
- Bytes are encoded as signed chars, so bytes of 128 and above (and hence
  non-ASCII text) do not arrive unchanged.
- A message cannot contain a NUL byte; everything after the first one is
  dropped.

## Running the tests

```
pip install ".[test]"
pytest
```