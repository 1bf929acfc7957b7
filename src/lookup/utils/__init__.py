"""
lookup.utils – Small shared utilities (paths, suffix normalization).
"""
from .paths import expand_filename, resolve_entry_file, resolve_include, split_search_list
from .suffixes import normalize_suffixes

__all__ = ["expand_filename", "resolve_entry_file", "resolve_include", "split_search_list", "normalize_suffixes"]
