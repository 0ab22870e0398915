from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, TextIO


class LineIter(Iterator[str]):
    """
    Iterate the lines of a text stream with line terminators removed.

    `source` is either an open text stream or a path. A path is opened here
    (and closed by `close()` or on reaching the end); a stream passed in
    stays owned by the caller.
    Override `is_valid_line` to skip lines.
    """

    def __init__(self, source: TextIO | str | os.PathLike, *, encoding: str = "utf-8"):
        if isinstance(source, (str, os.PathLike)):
            self._stream: TextIO = open(Path(source), "r", encoding=encoding, newline="")
            self._owns_stream = True
        else:
            self._stream = source
            self._owns_stream = False
        self._exhausted = False

    def is_valid_line(self, line: str) -> bool:
        return True

    def __iter__(self) -> LineIter:
        return self

    def __next__(self) -> str:
        if self._exhausted:
            raise StopIteration
        while True:
            raw = self._stream.readline()
            if not raw:
                self._exhausted = True
                # owned files are released as soon as they run out
                self.close()
                raise StopIteration
            line = raw.rstrip("\r\n")
            if self.is_valid_line(line):
                return line

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def close(self) -> None:
        if self._owns_stream:
            self._stream.close()

    def __enter__(self) -> LineIter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
