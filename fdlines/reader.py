"""Line-by-line reading from a raw file descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 10


def _validate(fd: int, buffer_size: int) -> None:
    if fd < 0:
        raise ValueError(f"invalid file descriptor: {fd}")
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")


def _read_line(fd: int, pending: bytes, buffer_size: int) -> tuple[bytes, bytes]:
    """Return the next line from ``fd`` and the bytes left over after it.

    Reading starts from ``pending`` and pulls ``buffer_size`` bytes at a time
    until a newline is buffered or end of file is reached. The line keeps its
    trailing newline; at end of file an empty line is returned.
    """
    data = bytearray(pending)
    newline = data.find(b"\n")
    while newline < 0:
        chunk = os.read(fd, buffer_size)
        if not chunk:
            return bytes(data), b""
        start = len(data)
        data += chunk
        newline = data.find(b"\n", start)
    return bytes(data[: newline + 1]), bytes(data[newline + 1 :])


class LineReader:
    """Read newline-terminated lines from one file descriptor.

    Bytes read past the end of a line are kept and served by later calls.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        _validate(fd, buffer_size)
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def readline(self) -> bytes:
        """Return the next line, newline included, or ``b""`` at end of file.

        A read error discards any buffered bytes and propagates ``OSError``.
        """
        pending, self._pending = self._pending, b""
        line, self._pending = _read_line(self.fd, pending, self.buffer_size)
        return line

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        line = self.readline()
        if not line:
            raise StopIteration
        return line