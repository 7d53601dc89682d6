"""Send a message to a server process as a stream of user signals."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, List, Optional, Union

from sigtalk.printf import printf
from sigtalk.protocol import encode_message
from sigtalk.strings import atoi

DEFAULT_DELAY = 0.0001


class ClientError(Exception):
    """Raised when a message cannot be sent."""


def send_message(
    pid: int,
    message: Union[str, bytes],
    delay: float = DEFAULT_DELAY,
    kill: Optional[Callable[[int, int], None]] = None,
) -> None:
    """Signal ``message`` to process ``pid``, pausing ``delay`` seconds per bit."""
    if pid <= 0:
        raise ClientError("Invalid PID")
    send = os.kill if kill is None else kill
    for bit in encode_message(message):
        send(pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
        if delay > 0:
            time.sleep(delay)


def _argument_error(count: int) -> str:
    if count < 2:
        return "Not enough arguments"
    if count > 2:
        return "Too many arguments"
    return "Invalid arguments"


def main(argv: Optional[List[str]] = None) -> int:
    """Run the client: ``client <server-pid> <message>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2 or not args[1]:
        printf("ERROR: %s\n", _argument_error(len(args)))
        return 1
    pid = atoi(args[0])
    if pid <= 0:
        printf("ERROR: Invalid PID\n")
        return 1
    try:
        send_message(pid, os.fsencode(args[1]))
    except OSError as exc:
        printf("ERROR: %s\n", exc.strerror or str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())