# src/lookup/utils/paths.py
"""
paths – Entry-file path helpers.

Provides:
  • expand_filename(str)            – '~' and $VAR expansion
  • split_search_list(str)          – colon-separated candidates, expanded (trailing empties dropped)
  • resolve_entry_file(str)         – first readable candidate, or None
  • resolve_include(target, parent) – include target relative to its includer
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional


def expand_filename(name: str) -> str:
    """Expand a leading '~' and environment variables in *name*."""
    return os.path.expandvars(os.path.expanduser(name))


def split_search_list(search_list: str) -> List[str]:
    """Return the expanded candidates of a colon-separated search list.

    Empty candidates are kept except at the end of the list.
    """
    tokens = (search_list or '').split(':')
    while tokens and not tokens[-1]:
        tokens.pop()
    return [expand_filename(tok) for tok in tokens]


def resolve_entry_file(search_list: str) -> Optional[Path]:
    """Return the first readable file named in *search_list*.

    Only the first hit is used; later candidates are ignored even when the
    winner includes nothing from them.
    """
    for cand in split_search_list(search_list):
        if not cand:
            continue
        p = Path(cand)
        if p.is_file() and os.access(p, os.R_OK):
            return p
    return None


def resolve_include(target: str, including_file: Optional[str]) -> Path:
    """Resolve an include target; relative names are taken from the includer's directory."""
    p = Path(expand_filename(target))
    if p.is_absolute() or not including_file:
        return p
    return Path(including_file).parent / p
