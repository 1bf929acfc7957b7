"""Core data model, error taxonomy and protocol seams for lookup."""
from .errors import (
    EntryFileNotFoundError,
    EntryIOError,
    EntryLookupError,
    MalformedPatternError,
    PushbackOverflowError,
    UsageError,
)
from .models import Entry, Position

__all__ = [
    'Entry',
    'Position',
    'EntryLookupError',
    'EntryFileNotFoundError',
    'EntryIOError',
    'MalformedPatternError',
    'PushbackOverflowError',
    'UsageError',
]
