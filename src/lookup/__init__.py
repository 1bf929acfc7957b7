from __future__ import annotations

"""lookup – search entry files paragraph by paragraph.

The reading core (:class:`EntryReader` and its line stream) is usable on its
own; :class:`Lookup` wires it to keyword matching and result printing.
"""

__version__ = '1.0.0'

from lookup.core.errors import (
    EntryFileNotFoundError,
    EntryIOError,
    EntryLookupError,
    MalformedPatternError,
    PushbackOverflowError,
    UsageError,
)
from lookup.core.models import Entry, Position
from lookup.io.line_source import LineSource
from lookup.io.openers import OpenerRegistry, get_global_opener_registry
from lookup.processing.comment_filter import CommentFilter
from lookup.processing.include_resolver import IncludeResolver
from lookup.parsing.config import ReaderConfig
from lookup.parsing.entry_reader import EntryReader
from lookup.search.matcher import EntryMatcher, SearchOptions
from lookup.rendering.printer import ResultPrinter
from lookup.cli import Lookup

__all__ = [
    '__version__',
    'Entry',
    'Position',
    'EntryReader',
    'ReaderConfig',
    'LineSource',
    'IncludeResolver',
    'CommentFilter',
    'OpenerRegistry',
    'get_global_opener_registry',
    'EntryMatcher',
    'SearchOptions',
    'ResultPrinter',
    'Lookup',
    'EntryLookupError',
    'EntryFileNotFoundError',
    'EntryIOError',
    'MalformedPatternError',
    'PushbackOverflowError',
    'UsageError',
]
