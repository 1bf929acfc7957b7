from __future__ import annotations

"""Segmentation of entry files into :class:`~lookup.core.models.Entry` records.

Entries are either *short* (a paragraph, ended by one blank line, or by two
consecutive blank lines when ``two_blank_lines`` is set) or *long* (opened by
a line matching ``entry_start_re`` and closed by ``entry_stop_re``, by the
start of the next long entry, or by the end of input).

No entry spans a file boundary: when the include machinery switches the
active file, the entry in progress ends and the line that came from the
other file is pushed back to begin the next entry.
"""

import re
from pathlib import Path
from typing import Iterator, List, Optional

from lookup.core.interfaces.logging import LoggerLikeProtocol
from lookup.core.interfaces.readers import LineSourceProtocol, OpenerRegistryProtocol
from lookup.core.models import Entry, Position
from lookup.logging.helpers import get_logger
from lookup.parsing.config import ReaderConfig
from lookup.processing.comment_filter import CommentFilter
from lookup.processing.include_resolver import IncludeResolver


def is_blank(line: str) -> bool:
    return not line.strip()


class EntryReader:
    """Lazy reader of the entries in an entry file and everything it includes.

    Usage::

        with EntryReader(path, ReaderConfig.build()) as reader:
            for entry in reader:
                ...

    The reader is single-pass: iterating again continues where the previous
    iteration stopped. Open a new reader to start over.
    """

    def __init__(
        self,
        root: Path | str,
        config: Optional[ReaderConfig] = None,
        *,
        registry: Optional[OpenerRegistryProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._cfg = config or ReaderConfig.build()
        self._log = logger or get_logger('reader')
        self._lines = IncludeResolver(
            root,
            include_re=self._cfg.include_re,
            comment_filter=CommentFilter(self._cfg.comment_re),
            encoding=self._cfg.encoding,
            registry=registry,
            logger=self._log,
        )
        self._entries = 0

    @property
    def config(self) -> ReaderConfig:
        return self._cfg

    @property
    def entries_read(self) -> int:
        return self._entries

    # Line-level access ------------------------------------------------------

    @property
    def filename(self) -> Optional[str]:
        """File of the last line read (kept after the input is exhausted)."""
        return self._lines.filename

    @property
    def line_number(self) -> int:
        return self._lines.line_number

    @property
    def position(self) -> Position:
        return self._lines.position

    @property
    def depth(self) -> int:
        """Number of files currently open on the include stack."""
        return self._lines.depth

    def read_line(self) -> Optional[str]:
        return self._lines.read_line()

    def pushback(self, line: str) -> None:
        self._lines.pushback(line)

    # Entries ----------------------------------------------------------------

    def get_entry(self) -> Optional[Entry]:
        """Return the next entry, or None when the input is exhausted."""
        line = self.read_line()
        while line is not None and is_blank(line):
            line = self.read_line()
        if line is None:
            return None

        source = self._lines.current
        filename = self.filename or ''
        line_number = self.line_number

        m = self._cfg.entry_start_re.search(line)
        if m is not None:
            entry = self._read_long(line, m, source, filename, line_number)
        else:
            entry = self._read_short(line, source, filename, line_number)
        self._entries += 1
        return entry

    def __iter__(self) -> Iterator[Entry]:
        while True:
            entry = self.get_entry()
            if entry is None:
                return
            yield entry

    def _left_source(self, source: Optional[LineSourceProtocol], line: str) -> bool:
        """True (and *line* pushed back) if *line* came from another file."""
        if self._lines.current is source:
            return False
        self.pushback(line)
        return True

    def _read_long(
        self,
        line: str,
        m: re.Match[str],
        source: Optional[LineSourceProtocol],
        filename: str,
        line_number: int,
    ) -> Entry:
        first = line[:m.start()] + (m.group(1) or '') + line[m.end():]
        sep = self._cfg.line_separator
        body: List[str] = [first + sep]
        while True:
            line = self.read_line()
            if line is None or self._left_source(source, line):
                break
            if self._cfg.entry_start_re.search(line):
                self.pushback(line)
                break
            if self._cfg.entry_stop_re.search(line):
                break
            body.append(line + sep)
        return Entry(
            first_line=first,
            body=''.join(body),
            filename=filename,
            line_number=line_number,
            short_entry=False,
        )

    def _read_short(
        self,
        line: str,
        source: Optional[LineSourceProtocol],
        filename: str,
        line_number: int,
    ) -> Entry:
        sep = self._cfg.line_separator
        body: List[str] = [line + sep]
        # A single blank line is held back until the next line shows whether
        # it separates entries (two in a row) or belongs to the body.
        held: Optional[str] = None
        first = line
        while True:
            line = self.read_line()
            if line is None or self._left_source(source, line):
                break
            if is_blank(line):
                if not self._cfg.two_blank_lines or held is not None:
                    break
                held = line
                continue
            if held is not None:
                body.append(held + sep)
                held = None
            body.append(line + sep)
        return Entry(
            first_line=first,
            body=''.join(body),
            filename=filename,
            line_number=line_number,
            short_entry=True,
        )

    # Lifecycle --------------------------------------------------------------

    def close(self) -> None:
        self._lines.close()

    def __enter__(self) -> 'EntryReader':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
