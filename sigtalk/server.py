"""Receive messages sent as user signals and write them out byte by byte."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, List, Optional

from sigtalk.printf import printf
from sigtalk.protocol import Decoder


class Server:
    """Decodes SIGUSR1/SIGUSR2 bits and writes each finished byte to a stream."""

    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self.stream = sys.stdout.buffer if stream is None else stream
        self._decoder = Decoder()

    def handle(self, signo: int, frame=None) -> None:
        """Signal handler: SIGUSR2 carries a 1 bit, anything else a 0 bit."""
        byte = self._decoder.feed(1 if signo == signal.SIGUSR2 else 0)
        if byte is not None:
            self.stream.write(bytes([byte]))
            flush = getattr(self.stream, "flush", None)
            if flush is not None:
                flush()

    def install(self) -> None:
        """Register this server as the handler of SIGUSR1 and SIGUSR2."""
        signal.signal(signal.SIGUSR1, self.handle)
        signal.signal(signal.SIGUSR2, self.handle)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the server: print its PID, then receive messages forever."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        printf("ERROR: Too many arguments\n")
        return 1
    server = Server()
    try:
        server.install()
    except (OSError, ValueError):
        return 1
    printf("Server PID: %d\n", os.getpid())
    sys.stdout.flush()
    while True:
        signal.pause()


if __name__ == "__main__":
    sys.exit(main())