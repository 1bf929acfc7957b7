from __future__ import annotations

"""
Suffix-keyed openers for entry files.

This module exposes:
  * `OpenerRegistry`: maps file suffixes to openers, with a plain-text default.
  * `PlainTextOpener`, `GzipOpener`: built-in openers.
  * `get_global_opener_registry`: process-wide registry ('.gz' pre-registered).

Every opener returns a text stream in universal-newline mode, so callers
only ever see '\\n' line endings.
"""

import gzip
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Sequence, TextIO

from lookup.core.interfaces.logging import LoggerLikeProtocol
from lookup.core.interfaces.readers import OpenerProtocol
from lookup.utils.suffixes import normalize_suffixes


class FileOpener(ABC):
    @abstractmethod
    def open(self, path: Path, *, encoding: str) -> TextIO:
        raise NotImplementedError


class PlainTextOpener(FileOpener):
    def open(self, path: Path, *, encoding: str) -> TextIO:
        return path.open('r', encoding=encoding)


class GzipOpener(FileOpener):
    """Opens gzip-compressed entry files; a corrupt stream fails on first read."""

    def open(self, path: Path, *, encoding: str) -> TextIO:
        return gzip.open(path, 'rt', encoding=encoding)  # type: ignore[return-value]


class OpenerRegistry:
    def __init__(self, default_opener: Optional[OpenerProtocol] = None) -> None:
        self._map: Dict[str, OpenerProtocol] = {}
        self._default: OpenerProtocol = default_opener or PlainTextOpener()

    def register(self, suffixes: Sequence[str], opener: OpenerProtocol) -> None:
        """Register *opener* for the given suffixes (case-insensitive)."""
        for key in normalize_suffixes(suffixes):
            self._map[key] = opener

    def for_path(self, path: Path) -> OpenerProtocol:
        return self._map.get(path.suffix.lower(), self._default)

    def open(self, path: Path, *, encoding: str) -> TextIO:
        return self.for_path(path).open(path, encoding=encoding)

    @property
    def suffixes(self) -> List[str]:
        return sorted(self._map)


_GLOBAL_REGISTRY: Optional[OpenerRegistry] = None


def get_global_opener_registry(logger: Optional[LoggerLikeProtocol] = None) -> OpenerRegistry:
    global _GLOBAL_REGISTRY
    if _GLOBAL_REGISTRY is None:
        reg = OpenerRegistry(default_opener=PlainTextOpener())
        reg.register(['.gz'], GzipOpener())
        _GLOBAL_REGISTRY = reg
        if logger is not None:
            logger.debug('opener registry ready: %s', reg.suffixes)
    return _GLOBAL_REGISTRY
