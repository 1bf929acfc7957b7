from __future__ import annotations

"""Rendering of matched entries as the text printed on stdout."""

from dataclasses import dataclass
from typing import List, Optional, Pattern, Sequence

from lookup.constants import LINE_SEP
from lookup.core.errors import UsageError
from lookup.core.models import Entry

RULE = '-------------------------'


@dataclass(frozen=True)
class ResultPrinter:
    """Formats a list of matching entries.

    One match prints its body. Several matches print a numbered synopsis
    unless ``print_all`` (every body, separated by dashed rules) or
    ``item_num`` (one 1-based pick) is given.
    """
    print_all: bool = False
    item_num: Optional[int] = None
    show_location: bool = False
    description_re: Optional[Pattern[str]] = None
    line_separator: str = LINE_SEP

    def render(self, entries: Sequence[Entry]) -> str:
        nl = self.line_separator
        count = len(entries)
        if count == 0:
            return f'Nothing found.{nl}'
        if count == 1:
            return self._single(entries[0])
        if self.item_num is not None:
            if self.item_num < 1:
                raise UsageError(f'Illegal --item-num {self.item_num}, should be positive', exit_code=1)
            if self.item_num > count:
                raise UsageError(f'Illegal --item-num {self.item_num}, should be <= {count}', exit_code=1)
            return self._single(entries[self.item_num - 1])

        out: List[str] = []
        if self.print_all:
            out.append(f'{count} matches found (separated by dashes below){nl}')
            for e in entries:
                out.append(f'{nl}{RULE}{nl}')
                if self.show_location:
                    out.append(self._location(e))
                out.append(e.body)
        else:
            out.append(f'{count} matches found. Use -i to print a specific match or -a to see them all.{nl}')
            for i, e in enumerate(entries, start=1):
                if self.show_location:
                    out.append(f'  -i={i} {e.filename}:{e.line_number}: {e.first_line}{nl}')
                else:
                    out.append(f'  -i={i} {e.description(self.description_re)}{nl}')
        return ''.join(out)

    def _single(self, e: Entry) -> str:
        if self.show_location:
            return self._location(e) + e.body
        return e.body

    def _location(self, e: Entry) -> str:
        return f'{e.filename}:{e.line_number}:{self.line_separator}'
