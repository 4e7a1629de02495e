"""Signal-aware output for the treetrim CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from treetrim.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes pruned tree text to a file descriptor or a file path.

    Writing stops with BrokenPipeError as soon as SIGPIPE or SIGINT has been seen, or
    when the pipe on the other end is closed, so the CLI can stop without a traceback.
    Files opened by the writer are closed when it is closed or used as a context
    manager; file descriptors passed in (such as stdout) are left open.

    Attributes:
        file: The file descriptor or path given to the writer.
        fd: The file descriptor actually written to.
    """

    def __init__(self, file: Union[int, str, Path], encoding: str = "utf-8"):
        """Initialize the safe writer.

        Args:
            file: A file descriptor, or a path to create or truncate.
            encoding: Text encoding of the output. Defaults to UTF-8, which the
                box-drawing glyphs require.

        Raises:
            TypeError: If file is neither an int nor a path.
        """
        self.file = file
        self.encoding = encoding
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding=encoding)
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write text, unless an interruption has been received.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is broken.
            OSError: If another I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode(self.encoding)
        try:
            # os.write may write only part of the buffer
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if the writer opened it; broken pipes on close are tolerated."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence over a close error
            if exc_type is None:
                raise
