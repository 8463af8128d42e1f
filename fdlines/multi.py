"""Line reading that keeps separate state for many file descriptors."""

from __future__ import annotations

from collections.abc import Iterator

from fdlines.reader import _read_line, _validate

BUFFER_SIZE = 200
FD_MAX = 4096


class MultiLineReader:
    """Read lines from any descriptor below ``fd_max``, each with its own buffer."""

    def __init__(self, buffer_size: int = BUFFER_SIZE, fd_max: int = FD_MAX) -> None:
        _validate(0, buffer_size)
        self.buffer_size = buffer_size
        self.fd_max = fd_max
        self._pending: dict[int, bytes] = {}

    def _check_fd(self, fd: int) -> None:
        if fd < 0 or fd >= self.fd_max:
            raise ValueError(f"file descriptor {fd} out of range [0, {self.fd_max})")

    def readline(self, fd: int) -> bytes:
        """Return the next line from ``fd``, or ``b""`` at end of file.

        A read error discards the bytes buffered for ``fd`` and propagates
        ``OSError``.
        """
        self._check_fd(fd)
        pending = self._pending.pop(fd, b"")
        line, rest = _read_line(fd, pending, self.buffer_size)
        if rest:
            self._pending[fd] = rest
        return line

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield the remaining lines of ``fd`` until end of file."""
        while line := self.readline(fd):
            yield line

    def discard(self, fd: int) -> None:
        """Forget any bytes buffered for ``fd``."""
        self._check_fd(fd)
        self._pending.pop(fd, None)


_default_reader = MultiLineReader()


def get_next_line(fd: int) -> bytes:
    """Return the next line from ``fd`` using a shared per-descriptor reader."""
    return _default_reader.readline(fd)