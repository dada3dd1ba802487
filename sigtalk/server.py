"""Receive text sent one bit per signal and print it."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Optional, Sequence

from .encoding import BitDecoder
from .formatting import printf


class Server:
    """Decodes SIGUSR1 (zero) and SIGUSR2 (one) into bytes written to a stream."""

    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self._stream = sys.stdout.buffer if stream is None else stream
        self._decoder = BitDecoder()

    def handle(self, signum: int, sender_pid: int) -> None:
        """Take one signal as one bit; at a complete byte write it out.

        A zero byte ends a message: a newline follows it and the sender is
        acknowledged with SIGUSR2.
        """
        byte = self._decoder.feed(1 if signum == signal.SIGUSR2 else 0)
        if byte is None:
            return
        self._stream.write(bytes((byte,)))
        if byte == 0:
            self._stream.write(b"\n")
            os.kill(sender_pid, signal.SIGUSR2)
        self._stream.flush()

    def serve(self) -> None:
        """Print this process id, then handle incoming signals forever."""
        printf("Server PID: %d\n", os.getpid())
        sys.stdout.flush()
        signals = {signal.SIGUSR1, signal.SIGUSR2}
        signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, signals)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: run the server until interrupted."""
    try:
        Server().serve()
    except KeyboardInterrupt:
        pass
    return 0