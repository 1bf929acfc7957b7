# src/lookup/processing/comment_filter.py
import re
from typing import Iterable, Iterator, Optional, Pattern, Union


class CommentFilter:
    """Recognizes comment lines, which are dropped before segmentation.

    Only a line matched *in full* by the pattern is a comment. A comment is
    neither content nor a blank-line separator. A missing or empty pattern
    disables filtering.
    """

    def __init__(self, pattern: Union[Pattern[str], str, None] = None) -> None:
        if isinstance(pattern, str):
            pattern = re.compile(pattern) if pattern else None
        if pattern is not None and not pattern.pattern:
            pattern = None
        self._rx: Optional[Pattern[str]] = pattern

    @property
    def enabled(self) -> bool:
        return self._rx is not None

    @property
    def pattern(self) -> Optional[Pattern[str]]:
        return self._rx

    def is_comment(self, line: str) -> bool:
        return self._rx is not None and self._rx.fullmatch(line) is not None

    def filter(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield the lines of *lines* that are not comments."""
        for ln in lines:
            if not self.is_comment(ln):
                yield ln
