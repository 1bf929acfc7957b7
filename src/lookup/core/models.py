from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Pattern


@dataclass(frozen=True)
class Position:
    """A 1-based line inside a named file."""
    filename: Optional[str] = None
    line_number: int = 0

    def format(self) -> str:
        return f'{self.filename or "<none>"}:{self.line_number}'


@dataclass(frozen=True)
class Entry:
    """One searchable unit read from an entry file.

    Attributes:
        first_line: Description line. For long entries this is the start
            line with the start marker removed (possibly empty).
        body: All lines of the entry, each terminated by the line separator.
        filename: File in which the entry began.
        line_number: 1-based line of that file where the entry began.
        short_entry: True for paragraph entries, False for delimited ones.
    """
    first_line: str
    body: str
    filename: str
    line_number: int
    short_entry: bool

    @property
    def position(self) -> Position:
        return Position(filename=self.filename, line_number=self.line_number)

    def description(self, pattern: Optional[Pattern[str]] = None) -> str:
        """Return group 1 of *pattern* searched in the first line, else the first line."""
        if pattern is None:
            return self.first_line
        m = pattern.search(self.first_line)
        if m is None:
            return self.first_line
        return m.group(1)
