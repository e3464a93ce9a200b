"""
Generator contexts.

A context maps a relative output path to a scoped, writable binary sink.
Sinks are context managers; leaving the ``with`` block flushes and releases
them whether or not the body raised.
"""

import io
import os
from contextlib import contextmanager
from typing import BinaryIO, Dict, Iterator, List, Protocol, runtime_checkable

from ..common import GeneratorException, create_directory


@runtime_checkable
class GeneratorContext(Protocol):
    """Anything the driver can ask for output sinks."""

    def open(self, path: str):
        """Return a context manager yielding a writable binary sink for path."""
        ...


def _check_relative(path: str) -> None:
    if not path:
        raise GeneratorException("Cannot open an output sink for an empty path.")
    if os.path.isabs(path) or ".." in path.replace("\\", "/").split("/"):
        raise GeneratorException(f'Output path "{path}" must be relative and stay inside the output directory.')


class DirectoryContext:
    """Writes every sink to a file below ``root``."""

    def __init__(self, root: str) -> None:
        self.root    = root
        self.written: List[str] = []

    def resolve(self, path: str) -> str:
        _check_relative(path)
        return os.path.join(self.root, path)

    @contextmanager
    def open(self, path: str) -> Iterator[BinaryIO]:
        filepath = self.resolve(path)
        create_directory(os.path.dirname(filepath))

        try:
            f = open(filepath, "wb")
        except IOError as exc:
            raise GeneratorException(f'Failed to open "{filepath}" for writing: {exc}') from exc

        with f:
            yield f

        self.written.append(path)


class _MemorySink(io.BytesIO):
    pass


class MemoryContext:
    """
    Keeps every sink in memory. Useful for dry runs and tests.

    ``opened`` lists every path a sink was requested for, in order, and
    ``files`` maps each path to the bytes written once its sink is released.
    A path opened twice keeps the content of the last sink.
    """

    def __init__(self) -> None:
        self.opened: List[str]       = []
        self.files:  Dict[str, bytes] = {}

    @contextmanager
    def open(self, path: str) -> Iterator[BinaryIO]:
        _check_relative(path)
        self.opened.append(path)

        sink = _MemorySink()
        try:
            yield sink
        finally:
            self.files[path] = sink.getvalue()
            sink.close()

    def read_text(self, path: str) -> str:
        return self.files[path].decode("utf-8")
