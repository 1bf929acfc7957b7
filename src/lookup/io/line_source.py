from __future__ import annotations

import zlib
from pathlib import Path
from typing import Optional, TextIO

from lookup.core.errors import EntryFileNotFoundError, EntryIOError, PushbackOverflowError
from lookup.core.interfaces.logging import LoggerLikeProtocol
from lookup.core.interfaces.readers import OpenerRegistryProtocol
from lookup.io.openers import get_global_opener_registry
from lookup.logging.helpers import get_logger, trace_io


class LineSource:
    """Lines of a single entry file, one at a time.

    Lines are returned without their terminator. ``line_number`` is the
    1-based number of the last line taken from the file (0 before the first
    read) and is not changed by a pushback, so it keeps describing the line
    that will be handed out again.

    The file is opened on construction; a missing file raises
    :class:`EntryFileNotFoundError` and any other failure
    :class:`EntryIOError`, both naming the attempted path.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        encoding: str = 'utf-8',
        registry: Optional[OpenerRegistryProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._path = Path(path)
        self._log = logger or get_logger('io.linesource')
        self._registry = registry or get_global_opener_registry(self._log)
        self._line_number = 0
        self._pushback: Optional[str] = None
        self._fp: Optional[TextIO] = self._open(encoding)

    def _open(self, encoding: str) -> TextIO:
        try:
            fp = self._registry.open(self._path, encoding=encoding)
        except FileNotFoundError as exc:
            raise EntryFileNotFoundError(str(self._path)) from exc
        except OSError as exc:
            raise EntryIOError(str(self._path), reason=exc.strerror or str(exc)) from exc
        trace_io(self._log, 'opened entry file', path=str(self._path))
        return fp

    @property
    def filename(self) -> str:
        return str(self._path)

    @property
    def line_number(self) -> int:
        return self._line_number

    @property
    def closed(self) -> bool:
        return self._fp is None

    def read_line(self) -> Optional[str]:
        """Return the next line, or None at end of file."""
        if self._pushback is not None:
            line, self._pushback = self._pushback, None
            return line
        if self._fp is None:
            return None
        # gzip reports a truncated or corrupt stream as EOFError or zlib.error.
        try:
            raw = self._fp.readline()
        except (OSError, UnicodeDecodeError, EOFError, zlib.error) as exc:
            raise EntryIOError(
                str(self._path),
                filename=self.filename,
                line_number=self._line_number + 1,
                reason=str(exc),
            ) from exc
        if not raw:
            return None
        self._line_number += 1
        return raw[:-1] if raw.endswith('\n') else raw

    def pushback(self, line: str) -> None:
        """Make *line* the result of the next read_line()."""
        if self._pushback is not None:
            raise PushbackOverflowError(
                f'cannot push back {line!r}: {self._pushback!r} is still pending '
                f'({self.filename}:{self._line_number})'
            )
        self._pushback = line

    def close(self) -> None:
        if self._fp is None:
            return
        try:
            self._fp.close()
        finally:
            self._fp = None
            trace_io(self._log, 'closed entry file', path=str(self._path), lines=self._line_number)

    def __enter__(self) -> 'LineSource':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f'LineSource({self.filename!r}, line={self._line_number})'
