from __future__ import annotations

"""Keyword and regular-expression predicates over entries.

An entry matches when *every* keyword matches the searched text: the body
of a short entry (or of any entry when ``search_body`` is set), otherwise
the long entry's description.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Pattern, Sequence

from lookup.core.interfaces.logging import LoggerLikeProtocol
from lookup.core.models import Entry
from lookup.logging.helpers import get_logger
from lookup.parsing.config import PatternLike, compile_pattern


@dataclass(frozen=True)
class SearchOptions:
    keywords: Sequence[str]
    regular_expressions: bool = False
    case_sensitive: bool = False
    word_match: bool = False
    search_body: bool = False
    description_re: Optional[Pattern[str]] = None

    @classmethod
    def build(
        cls,
        keywords: Sequence[str],
        *,
        regular_expressions: bool = False,
        case_sensitive: bool = False,
        word_match: bool = False,
        search_body: bool = False,
        description_re: Optional[PatternLike] = None,
    ) -> 'SearchOptions':
        desc = None
        if description_re:
            desc = compile_pattern('description_re', description_re, min_groups=1)
        return cls(
            keywords=tuple(keywords),
            regular_expressions=regular_expressions,
            case_sensitive=case_sensitive,
            word_match=word_match,
            search_body=search_body,
            description_re=desc,
        )


class EntryMatcher:
    """Compiled form of :class:`SearchOptions`.

    Regex keywords are compiled here, so an invalid one is reported before
    any entry is read.
    """

    def __init__(self, options: SearchOptions, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._opts = options
        self._log = logger or get_logger('search')
        flags = 0 if options.case_sensitive else re.IGNORECASE
        self._patterns: List[Pattern[str]] = []
        self._needles: List[str] = []
        if options.regular_expressions:
            self._patterns = [compile_pattern('keyword', k, flags=flags) for k in options.keywords]
        elif options.word_match:
            self._patterns = [re.compile(rf'\b{re.escape(k)}\b', flags) for k in options.keywords]
        elif options.case_sensitive:
            self._needles = list(options.keywords)
        else:
            self._needles = [k.lower() for k in options.keywords]

    @property
    def options(self) -> SearchOptions:
        return self._opts

    def text_for(self, entry: Entry) -> str:
        if self._opts.search_body or entry.short_entry:
            return entry.body
        return entry.description(self._opts.description_re)

    def matches(self, entry: Entry) -> bool:
        text = self.text_for(entry)
        if self._patterns:
            return all(p.search(text) for p in self._patterns)
        if not self._opts.case_sensitive:
            text = text.lower()
        return all(k in text for k in self._needles)

    def filter(self, entries: Iterable[Entry]) -> Iterator[Entry]:
        for entry in entries:
            if self.matches(entry):
                yield entry
