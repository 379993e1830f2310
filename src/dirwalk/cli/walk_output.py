"""Output destination for a single dirwalk CLI run.

A WalkOutput owns the file descriptor the formatted walk is written to and the
SIGINT/SIGPIPE handlers for the duration of the run. A signal only records
itself; the next write raises BrokenPipeError, which ends the walk loop in
``main`` without pulling further results from the walker. Handlers are restored
when the run leaves the ``with`` block.
"""

import errno
import os
import signal
import sys
import types
from pathlib import Path
from typing import Any, Dict, Optional, Type

# SIGPIPE does not exist on Windows
STOP_SIGNALS = tuple(getattr(signal, name) for name in ("SIGINT", "SIGPIPE") if hasattr(signal, name))

EXIT_CODES = {signal.SIGINT: 130}
if hasattr(signal, "SIGPIPE"):
    EXIT_CODES[signal.SIGPIPE] = 141


class WalkOutput:
    """Writes formatted walk results to stdout or a file until a stop signal arrives.

    Attributes:
        destination: File to write to, or None for stdout.
        received: Number of the first stop signal received, or None.
        fd: Descriptor being written to, -1 outside the ``with`` block.
    """

    def __init__(self, destination: Optional[Path] = None, install_handlers: bool = True):
        self.destination = destination
        self.install_handlers = install_handlers
        self.received: Optional[int] = None
        self.fd = -1
        self._file: Optional[Any] = None
        self._previous_handlers: Dict[int, Any] = {}

    @property
    def exit_code(self) -> int:
        """Exit status for the CLI: 130 after SIGINT, 141 after a broken pipe, else 0."""
        if self.received is None:
            return 0
        return EXIT_CODES.get(self.received, 1)

    def record_signal(self, signum: int, frame: Optional[types.FrameType]) -> None:
        """Signal handler: remember the first stop signal and restore the previous handler."""
        if self.received is None:
            self.received = signum
        previous = self._previous_handlers.pop(signum, None)
        if previous is not None:
            signal.signal(signum, previous)

    def write(self, text: str) -> None:
        """Write text in full, or raise BrokenPipeError once the walk must stop.

        Args:
            text: Formatted output. Names decoded with ``surrogateescape`` are
                written back as their original bytes.

        Raises:
            BrokenPipeError: If a stop signal was received or the reader went away.
            OSError: If any other I/O error occurs.
        """
        if self.received is not None:
            raise BrokenPipeError()
        if not text:
            return

        payload = text.encode("utf-8", "surrogateescape")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                if self.received is None and hasattr(signal, "SIGPIPE"):
                    self.received = signal.SIGPIPE
                raise BrokenPipeError() from e
            raise

    def __enter__(self) -> "WalkOutput":
        if self.destination is None:
            self.fd = sys.stdout.fileno()
        else:
            self._file = self.destination.open("wb")
            self.fd = self._file.fileno()

        if self.install_handlers:
            for signum in STOP_SIGNALS:
                self._previous_handlers[signum] = signal.signal(signum, self.record_signal)
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        for signum, previous in self._previous_handlers.items():
            if previous is not None:
                signal.signal(signum, previous)
        self._previous_handlers.clear()

        try:
            if self._file is not None:
                self._file.close()
        except OSError as e:
            if e.errno != errno.EPIPE and exc_type is None:
                raise
        finally:
            self._file = None

        if self.destination is None and self.received == getattr(signal, "SIGPIPE", None):
            # Keep interpreter shutdown from flushing into the closed pipe
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, self.fd)
            os.close(devnull)
        self.fd = -1
