from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Sequence, TextIO, runtime_checkable


@runtime_checkable
class OpenerProtocol(Protocol):
    def open(self, path: Path, *, encoding: str) -> TextIO:
        ...


@runtime_checkable
class OpenerRegistryProtocol(Protocol):
    def register(self, suffixes: Sequence[str], opener: OpenerProtocol) -> None:
        ...

    def open(self, path: Path, *, encoding: str) -> TextIO:
        ...


@runtime_checkable
class LineSourceProtocol(Protocol):
    """Line stream with one line of lookahead and position tracking."""

    @property
    def filename(self) -> Optional[str]:
        ...

    @property
    def line_number(self) -> int:
        ...

    def read_line(self) -> Optional[str]:
        ...

    def pushback(self, line: str) -> None:
        ...

    def close(self) -> None:
        ...
