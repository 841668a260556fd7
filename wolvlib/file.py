"""File access with cached size, memory mapping and change tracking."""

from __future__ import annotations

import enum
import mmap
import os
import threading
from pathlib import Path
from types import TracebackType
from typing import IO, Callable

from . import fs
from .strings import strnlen

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class FileMode(enum.Enum):
    """How a :class:`File` is opened."""

    READ = "read"
    WRITE = "write"
    CREATE = "create"


class File:
    """A binary file opened for reading, writing or creation.

    Opening never raises: if the file cannot be opened the object is
    simply invalid (see :meth:`is_valid`) and every operation on it is a
    no-op returning an empty result. ``WRITE`` opens an existing file
    without truncating it and creates it if it is missing; ``CREATE``
    always starts from an empty file.
    """

    def __init__(self, path: fs.PathLike, mode: FileMode = FileMode.READ) -> None:
        self._path = Path(path)
        self._mode = FileMode(mode)
        self._file: IO[bytes] | None = None
        self._map: mmap.mmap | None = None
        self._size = 0

        if self._mode is FileMode.READ:
            self._file = self._open("rb")
        elif self._mode is FileMode.WRITE:
            self._file = self._open("r+b")

        if self._mode is FileMode.CREATE or (
            self._mode is FileMode.WRITE and self._file is None
        ):
            self._file = self._open("w+b")

        self.update_size()

    def _open(self, how: str, buffering: int = -1) -> IO[bytes] | None:
        try:
            return open(self._path, how, buffering=buffering)
        except (OSError, ValueError):
            return None

    def is_valid(self) -> bool:
        """Return whether the file is open."""
        return self._file is not None

    def clone(self) -> File:
        """Open the same path again with the same mode."""
        return File(self._path, self._mode)

    def seek(self, offset: int) -> None:
        """Move the file position to ``offset`` bytes from the start."""
        if self._file is not None:
            self._file.seek(offset, os.SEEK_SET)

    def close(self) -> None:
        """Close the file if it is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def map(self) -> None:
        """Map the file into memory; the mapping stays ``None`` on failure."""
        if self._file is None:
            return
        access = mmap.ACCESS_READ if self._mode is FileMode.READ else mmap.ACCESS_WRITE
        try:
            self._file.flush()
            self._map = mmap.mmap(self._file.fileno(), self._size, access=access)
        except (OSError, ValueError):
            self._map = None

    def unmap(self) -> None:
        """Release the memory mapping, if any."""
        if self._map is not None:
            self._map.close()
            self._map = None

    @property
    def mapping(self) -> mmap.mmap | None:
        """The current memory mapping, or ``None``."""
        return self._map

    def read_buffer(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the current position."""
        if self._file is None:
            return b""
        return self._file.read(size)

    def read_vector(self, num_bytes: int = 0) -> bytes:
        """Read ``num_bytes`` bytes, or the cached file size if it is 0."""
        if self._file is None:
            return b""
        size = num_bytes if num_bytes else self._size
        if size == 0:
            return b""
        return self._file.read(size)

    def read_string(self, num_bytes: int = 0) -> str:
        """Read like :meth:`read_vector` and decode up to the first NUL."""
        if self._file is None or self._size == 0:
            return ""
        data = self.read_vector(num_bytes)
        if not data:
            return ""
        return data[: strnlen(data, len(data))].decode(_ENCODING, _ERRORS)

    def write_buffer(self, data: bytes | bytearray | memoryview) -> int:
        """Write ``data`` and return the number of bytes written."""
        if self._file is None:
            return 0
        return self._file.write(data) or 0

    def write_vector(self, data: bytes | bytearray | memoryview) -> int:
        """Write ``data`` and return the number of bytes written."""
        return self.write_buffer(data)

    def write_string(self, string: str) -> int:
        """Write ``string`` encoded as UTF-8 and return the bytes written."""
        return self.write_buffer(string.encode(_ENCODING, _ERRORS))

    @property
    def size(self) -> int:
        """The file size as last measured by :meth:`update_size`."""
        return self._size

    def set_size(self, size: int) -> None:
        """Truncate or extend the file to ``size`` bytes."""
        if self._file is None:
            return
        try:
            self._file.truncate(size)
        except OSError:
            pass
        self.update_size()

    def update_size(self) -> None:
        """Measure the file size again, remapping if it changed."""
        if self._file is None:
            self._size = 0
            return
        try:
            position = self._file.tell()
            self._file.seek(0, os.SEEK_END)
            size = self._file.tell()
            self._file.seek(position, os.SEEK_SET)
        except OSError:
            size = -1

        if self._map is not None and size != self._size:
            self.unmap()
            self._size = max(size, 0)
            self.map()

        self._size = max(size, 0)

    def flush(self) -> None:
        """Flush buffered writes to the operating system."""
        if self._file is not None:
            self._file.flush()

    def remove(self) -> bool:
        """Close the file and delete it; return whether it was deleted."""
        self.unmap()
        self.close()
        return fs.remove(self._path)

    @property
    def path(self) -> Path:
        """The path the file was opened with."""
        return self._path

    def disable_buffering(self) -> None:
        """Reopen the file unbuffered at the same position."""
        if self._file is None:
            return
        self._file.flush()
        position = self._file.tell()
        how = "rb" if self._mode is FileMode.READ else "r+b"
        self._file.close()
        self._file = self._open(how, buffering=0)
        if self._file is not None:
            self._file.seek(position, os.SEEK_SET)

    def file_info(self) -> os.stat_result | None:
        """Return the file's status, or ``None`` if it cannot be read."""
        try:
            return os.stat(self._path)
        except (OSError, ValueError):
            return None

    def __enter__(self) -> File:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unmap()
        self.close()


class ChangeTracker:
    """Watch a file in a background thread and report modifications."""

    _POLL_INTERVAL = 0.1

    def __init__(self, path: fs.PathLike | File = "") -> None:
        if isinstance(path, File):
            self._path = str(path.path)
        else:
            self._path = os.fspath(path)
        self._thread: threading.Thread | None = None
        self._stop = threading.Event()

    @property
    def path(self) -> str:
        """The watched path."""
        return self._path

    def start_tracking(self, callback: Callable[[], object]) -> None:
        """Call ``callback`` whenever the file is modified.

        Does nothing for an empty path. Raises :class:`FileNotFoundError`
        if the file cannot be watched. If the file disappears, the
        callback is called once more and tracking ends.
        """
        if not self._path:
            return
        self.stop_tracking()
        try:
            previous = self._snapshot()
        except OSError as error:
            raise FileNotFoundError(f"cannot watch {self._path!r}") from error

        self._stop = threading.Event()
        stop = self._stop

        def track() -> None:
            nonlocal previous
            while not stop.wait(self._POLL_INTERVAL):
                try:
                    current = self._snapshot()
                except OSError:
                    callback()
                    return
                if current != previous:
                    previous = current
                    callback()

        self._thread = threading.Thread(target=track, daemon=True)
        self._thread.start()

    def stop_tracking(self) -> None:
        """Stop the background thread and wait for it to finish."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _snapshot(self) -> tuple[int, int, int]:
        info = os.stat(self._path)
        return info.st_mtime_ns, info.st_size, info.st_ino