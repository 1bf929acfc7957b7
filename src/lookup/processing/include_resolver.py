from __future__ import annotations

"""Include-directive splicing over a stack of line sources.

The resolver owns every open :class:`LineSource`. A line fully matching the
include pattern is swallowed and the named file becomes the new top of the
stack; when that file runs out it is closed and popped, and reading resumes
in the includer right after the directive. Traversal is iterative, so deep
include chains do not grow the Python call stack.

Include cycles are not detected: a file that includes itself keeps opening
new handles until the operating system refuses, which surfaces as
:class:`EntryIOError`.
"""

from pathlib import Path
from typing import List, Optional, Pattern

from lookup.core.errors import (
    EntryFileNotFoundError,
    EntryIOError,
    MalformedPatternError,
    PushbackOverflowError,
)
from lookup.core.interfaces.logging import LoggerLikeProtocol
from lookup.core.interfaces.readers import LineSourceProtocol, OpenerRegistryProtocol
from lookup.core.models import Position
from lookup.io.line_source import LineSource
from lookup.logging.helpers import get_logger, trace_io
from lookup.processing.comment_filter import CommentFilter
from lookup.utils.paths import resolve_include


class IncludeResolver:
    """Comment-filtered, include-expanded line stream rooted at one file."""

    def __init__(
        self,
        root: Path | str,
        *,
        include_re: Optional[Pattern[str]] = None,
        comment_filter: Optional[CommentFilter] = None,
        encoding: str = 'utf-8',
        registry: Optional[OpenerRegistryProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('include')
        self._include_re = include_re
        self._comments = comment_filter or CommentFilter(None)
        self._encoding = encoding
        self._registry = registry
        self._stack: List[LineSourceProtocol] = []
        self._last = Position()
        self._stack.append(self._open(Path(root)))

    def _open(self, path: Path) -> LineSourceProtocol:
        return LineSource(path, encoding=self._encoding, registry=self._registry, logger=self._log)

    # Position ---------------------------------------------------------------

    @property
    def current(self) -> Optional[LineSourceProtocol]:
        """The source the next line comes from (None once exhausted)."""
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def filename(self) -> Optional[str]:
        top = self.current
        return top.filename if top is not None else self._last.filename

    @property
    def line_number(self) -> int:
        top = self.current
        return top.line_number if top is not None else self._last.line_number

    @property
    def position(self) -> Position:
        return Position(filename=self.filename, line_number=self.line_number)

    # Reading ----------------------------------------------------------------

    def read_line(self) -> Optional[str]:
        """Return the next content line, or None when every file is exhausted."""
        while self._stack:
            src = self._stack[-1]
            line = src.read_line()
            if line is None:
                self._pop()
                continue
            if self._comments.is_comment(line):
                continue
            target = self._include_target(line)
            if target is not None:
                self._push(resolve_include(target, src.filename))
                continue
            return line
        return None

    def pushback(self, line: str) -> None:
        """Return *line* to the source that produced it."""
        top = self.current
        if top is None:
            raise PushbackOverflowError(f'cannot push back {line!r}: no entry file is open')
        top.pushback(line)

    def _include_target(self, line: str) -> Optional[str]:
        if self._include_re is None:
            return None
        m = self._include_re.fullmatch(line)
        if m is None:
            return None
        target = m.group(1)
        if target is None:
            raise MalformedPatternError('include_re', self._include_re.pattern, f'group 1 did not participate in {line!r}')
        return target

    def _push(self, path: Path) -> None:
        here = self._stack[-1]
        try:
            src = self._open(path)
        except EntryFileNotFoundError as exc:
            raise EntryFileNotFoundError(exc.path, filename=here.filename, line_number=here.line_number) from exc
        except EntryIOError as exc:
            raise EntryIOError(
                exc.path, filename=here.filename, line_number=here.line_number, reason=exc.reason
            ) from exc
        self._stack.append(src)
        trace_io(self._log, 'include push', path=src.filename, by=here.filename, line=here.line_number, depth=self.depth)

    def _pop(self) -> None:
        src = self._stack.pop()
        self._last = Position(filename=src.filename, line_number=src.line_number)
        src.close()
        trace_io(self._log, 'include pop', path=src.filename, depth=self.depth)

    # Lifecycle --------------------------------------------------------------

    def close(self) -> None:
        """Close every open source, innermost first."""
        while self._stack:
            self._pop()

    def __enter__(self) -> 'IncludeResolver':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
