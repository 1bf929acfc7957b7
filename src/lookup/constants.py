from __future__ import annotations

"""Project-wide constants used across modules.

Default patterns mirror the legacy entry-file format so existing corpora
keep parsing the same way.
"""

DEFAULT_ENTRY_FILE: str = '~/lookup/root'

DEFAULT_ENTRY_START_RE: str = r'^>entry *()'
DEFAULT_ENTRY_STOP_RE: str = r'^<entry'
DEFAULT_COMMENT_RE: str = r'^%.*'
DEFAULT_INCLUDE_RE: str = r'\\include\{(.*)\}'

LINE_SEP: str = '\n'

# Exit status for fatal conditions (unreadable files, bad patterns, usage).
EXIT_FATAL: int = 254

# Verbose progress is reported once per this many entries.
PROGRESS_EVERY: int = 1000
