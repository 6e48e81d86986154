"""The host side of the terminal: a command running on a pseudo-terminal."""

from __future__ import annotations

import contextlib
import fcntl
import os
import struct
import subprocess
import termios
import time
from typing import Callable, Optional, Sequence

RESPAWN_DELAY = 2.0


def _take_controlling_tty() -> None:
    with contextlib.suppress(OSError):
        fcntl.ioctl(0, termios.TIOCSCTTY, 0)


def _char_delay(baud: int) -> float:
    if baud <= 0:
        return 0.0
    chars_per_second = baud // 11
    if chars_per_second == 0:
        raise ValueError(f"baud rate too low: {baud}")
    return 1.0 / chars_per_second


class PtyHost:
    """Runs a command on a pseudo-terminal and relays its bytes."""

    def __init__(
        self,
        command: Sequence[str],
        rows: int,
        cols: int,
        xpixel: int = 0,
        ypixel: int = 0,
        term: str = "dumb",
    ):
        if not command:
            raise ValueError("no command to run")
        self.command = list(command)
        self.term = term
        self.process: Optional[subprocess.Popen] = None
        self._closed = False
        self._master, slave = os.openpty()
        try:
            self._slave_name = os.ttyname(slave)
        finally:
            os.close(slave)
        winsize = struct.pack("HHHH", rows, cols, xpixel, ypixel)
        fcntl.ioctl(self._master, termios.TIOCSWINSZ, winsize)

    def spawn(self) -> subprocess.Popen:
        """Start the command with the pseudo-terminal as its controlling terminal."""
        if self.process is not None:
            self.process.poll()
        env = dict(os.environ, TERM=self.term)
        slave = os.open(self._slave_name, os.O_RDWR | os.O_NOCTTY)
        try:
            self.process = subprocess.Popen(
                self.command,
                stdin=slave,
                stdout=slave,
                stderr=slave,
                env=env,
                start_new_session=True,
                preexec_fn=_take_controlling_tty,
            )
        finally:
            os.close(slave)
        return self.process

    def write(self, data: bytes) -> None:
        """Send bytes to the command."""
        view = memoryview(data)
        while view:
            written = os.write(self._master, view)
            view = view[written:]

    def read_byte(self) -> int:
        """Read one byte of output; raise EOFError when no more can come."""
        if self._closed:
            raise EOFError("host is closed")
        try:
            data = os.read(self._master, 1)
        except OSError as exc:
            raise EOFError(str(exc)) from exc
        if not data:
            raise EOFError("end of output")
        return data[0]

    def pump(self, sink: Callable[[int], object], baud: int = 0, rerun: bool = False) -> None:
        """Feed output bytes to ``sink`` until the command ends, optionally at a baud rate."""
        delay = _char_delay(baud)
        while True:
            try:
                byte = self.read_byte()
            except EOFError:
                if self.process is not None:
                    self.process.poll()
                if rerun and not self._closed:
                    time.sleep(RESPAWN_DELAY)
                    self.spawn()
                    continue
                return
            sink(byte)
            if delay:
                time.sleep(delay)

    def close(self) -> None:
        """Release the pseudo-terminal."""
        if self._closed:
            return
        self._closed = True
        os.close(self._master)
        if self.process is not None:
            self.process.poll()

    def __enter__(self) -> "PtyHost":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()