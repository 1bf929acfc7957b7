from __future__ import annotations

"""Error taxonomy for entry reading and searching.

Every error carries an ``exit_code`` so the command-line driver can map it
to a process status without inspecting the concrete type.
"""

from typing import Optional

from lookup.constants import EXIT_FATAL


class EntryLookupError(Exception):
    """Base class for all fatal lookup conditions."""

    exit_code: int = EXIT_FATAL


class _LocatedError(EntryLookupError):
    """Error raised while some file was being read (or about to be).

    ``filename``/``line_number`` describe where the reader stood, which for
    an include is the directive line in the including file.
    """

    def __init__(
        self,
        path: str,
        *,
        filename: Optional[str] = None,
        line_number: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(self._format(str(path), filename, line_number, reason))
        self.path = str(path)
        self.filename = filename
        self.line_number = line_number
        self.reason = reason

    def __str__(self) -> str:
        # OSError.__str__ would switch to its errno layout once filename is set.
        return str(self.args[0])

    @staticmethod
    def _format(path: str, filename: Optional[str], line_number: Optional[int], reason: Optional[str]) -> str:
        if filename is None:
            msg = f"Can't read {path}"
        else:
            msg = f"Can't read {path} at line {line_number} in file {filename}"
        return f'{msg}: {reason}' if reason else msg


class EntryFileNotFoundError(_LocatedError, FileNotFoundError):
    """The root entry file or an included file cannot be opened."""


class EntryIOError(_LocatedError, OSError):
    """Any other failure while opening or reading an entry file."""


class MalformedPatternError(EntryLookupError, ValueError):
    """A configured pattern does not compile or has the wrong group count."""

    def __init__(self, option: str, pattern: str, reason: str) -> None:
        super().__init__(f'{option}: bad pattern {pattern!r} ({reason})')
        self.option = option
        self.pattern = pattern
        self.reason = reason


class PushbackOverflowError(EntryLookupError, RuntimeError):
    """A second line was pushed back before the first one was re-read."""


class UsageError(EntryLookupError):
    """Command-line usage problem."""

    def __init__(self, message: str, *, exit_code: int = EXIT_FATAL) -> None:
        super().__init__(message)
        self.exit_code = exit_code
