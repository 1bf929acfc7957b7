from __future__ import annotations
"""Suffix helpers shared by the opener registry.

Tokens without a leading dot are treated as bare extensions:
    normalize_suffixes(["gz"])    -> [".gz"]
    normalize_suffixes([".GZ"])   -> [".gz"]
"""

from typing import Sequence


def normalize_suffixes(suffixes: Sequence[str] | None) -> list[str]:
    """Return lower-cased, dot-prefixed, de-duplicated suffixes."""
    out: list[str] = []
    for raw in suffixes or ():
        tok = (raw or '').strip().lower()
        if not tok:
            continue
        if not tok.startswith('.'):
            tok = '.' + tok
        if tok not in out:
            out.append(tok)
    return out
