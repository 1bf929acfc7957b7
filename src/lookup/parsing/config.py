from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Pattern, Union

from lookup.constants import (
    DEFAULT_COMMENT_RE,
    DEFAULT_ENTRY_START_RE,
    DEFAULT_ENTRY_STOP_RE,
    DEFAULT_INCLUDE_RE,
    LINE_SEP,
)
from lookup.core.errors import MalformedPatternError

PatternLike = Union[str, Pattern[str]]


def compile_pattern(
    option: str,
    value: PatternLike,
    *,
    min_groups: int = 0,
    max_groups: Optional[int] = None,
    flags: int = 0,
) -> Pattern[str]:
    """Compile *value* and check its capture-group count.

    Already-compiled patterns are only checked. Failures raise
    :class:`MalformedPatternError` naming *option*.
    """
    if isinstance(value, str):
        try:
            rx = re.compile(value, flags)
        except re.error as exc:
            raise MalformedPatternError(option, value, str(exc)) from exc
    else:
        rx = value
    if rx.groups < min_groups:
        raise MalformedPatternError(option, rx.pattern, f'needs at least {min_groups} capture group(s), has {rx.groups}')
    if max_groups is not None and rx.groups > max_groups:
        raise MalformedPatternError(option, rx.pattern, f'allows at most {max_groups} capture group(s), has {rx.groups}')
    return rx


@dataclass(frozen=True)
class ReaderConfig:
    """Immutable settings of an :class:`~lookup.parsing.entry_reader.EntryReader`.

    Build instances with :meth:`build`, which compiles and validates every
    pattern up front so that a bad option fails before any file is opened.

    Attributes:
        entry_start_re: Starts a long entry; group 1 replaces the match to
            form the entry's first line.
        entry_stop_re: Ends a long entry; the stop line is consumed.
        comment_re: Whole-line comment pattern, or None to keep every line.
        include_re: Whole-line include directive, group 1 is the file name,
            or None to disable includes.
        two_blank_lines: Short entries end at two consecutive blank lines
            instead of one.
        line_separator: Terminator appended to each line of an entry body.
        encoding: Text encoding of entry files.
    """
    entry_start_re: Pattern[str]
    entry_stop_re: Pattern[str]
    comment_re: Optional[Pattern[str]] = None
    include_re: Optional[Pattern[str]] = None
    two_blank_lines: bool = False
    line_separator: str = LINE_SEP
    encoding: str = 'utf-8'

    @classmethod
    def build(
        cls,
        *,
        entry_start_re: PatternLike = DEFAULT_ENTRY_START_RE,
        entry_stop_re: PatternLike = DEFAULT_ENTRY_STOP_RE,
        comment_re: Optional[PatternLike] = DEFAULT_COMMENT_RE,
        include_re: Optional[PatternLike] = DEFAULT_INCLUDE_RE,
        two_blank_lines: bool = False,
        line_separator: str = LINE_SEP,
        encoding: str = 'utf-8',
    ) -> 'ReaderConfig':
        # An empty comment pattern means "no comments".
        comment = None
        if comment_re is not None and (comment_re if isinstance(comment_re, str) else comment_re.pattern):
            comment = compile_pattern('comment_re', comment_re)
        include = None
        if include_re is not None:
            include = compile_pattern('include_re', include_re, min_groups=1, max_groups=1)
        return cls(
            entry_start_re=compile_pattern('entry_start_re', entry_start_re, min_groups=1),
            entry_stop_re=compile_pattern('entry_stop_re', entry_stop_re),
            comment_re=comment,
            include_re=include,
            two_blank_lines=bool(two_blank_lines),
            line_separator=line_separator,
            encoding=encoding,
        )

    def describe(self) -> dict:
        """Plain-data view of the settings, for verbose logging."""
        return {
            'entry_start_re': self.entry_start_re.pattern,
            'entry_stop_re': self.entry_stop_re.pattern,
            'comment_re': self.comment_re.pattern if self.comment_re else None,
            'include_re': self.include_re.pattern if self.include_re else None,
            'two_blank_lines': self.two_blank_lines,
            'encoding': self.encoding,
        }
