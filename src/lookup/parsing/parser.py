# lookup/parsing/parser.py
from __future__ import annotations

import argparse
import os

from lookup.constants import (
    DEFAULT_COMMENT_RE,
    DEFAULT_ENTRY_FILE,
    DEFAULT_ENTRY_START_RE,
    DEFAULT_ENTRY_STOP_RE,
    DEFAULT_INCLUDE_RE,
)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser.

    Notes:
        - The default entry file honours $LOOKUP_ENTRY_FILE at parser build
          time, so tests can point it at a fixture tree.
        - Pattern options are kept as strings here; compilation and
          capture-group checks happen in ReaderConfig / SearchOptions.
    """
    p = argparse.ArgumentParser(
        prog="lookup",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [options] <keyword> ...",
        description=(
            "lookup – paragraph-wise grep over entry files\n"
            "Prints each entry (paragraph, or >entry … <entry block) that "
            "contains all the keywords. Comment lines are ignored and "
            "\\include{file} directives are followed."
        ),
    )

    g_where = p.add_argument_group("Where to search")
    g_what = p.add_argument_group("What to search for")
    g_print = p.add_argument_group("How to print matches")
    g_fmt = p.add_argument_group("Customizing format of files to be searched")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Where to search
    # -----------------------
    g_where.add_argument(
        "-f",
        "--entry-file",
        metavar="LIST",
        dest="entry_file",
        default=os.getenv("LOOKUP_ENTRY_FILE") or DEFAULT_ENTRY_FILE,
        help=(
            "Colon-separated search list for the file to search. Only the "
            "first readable file is used, though it may include others.\n"
            "[default: $LOOKUP_ENTRY_FILE or %(default)s]"
        ),
    )
    g_where.add_argument(
        "-b",
        "--search-body",
        action="store_true",
        dest="search_body",
        help="Search the body of long entries, not just their description.",
    )

    # -----------------------
    # What to search for
    # -----------------------
    g_what.add_argument(
        "-e",
        "--regular-expressions",
        action="store_true",
        dest="regular_expressions",
        help="Keywords are regular expressions rather than plain text.",
    )
    g_what.add_argument(
        "-c",
        "--case-sensitive",
        action="store_true",
        dest="case_sensitive",
        help="Match keywords case-sensitively (default: case-insensitive).",
    )
    g_what.add_argument(
        "-w",
        "--word-match",
        action="store_true",
        dest="word_match",
        help="Match a text keyword only as a whole word. Ignored with -e.",
    )

    # -----------------------
    # How to print matches
    # -----------------------
    g_print.add_argument(
        "-a",
        "--print-all",
        action="store_true",
        dest="print_all",
        help="Print the body of every match instead of a synopsis.",
    )
    g_print.add_argument(
        "-i",
        "--item-num",
        metavar="N",
        type=int,
        dest="item_num",
        default=None,
        help="Print only the N-th match (1-based) when several entries match.",
    )
    g_print.add_argument(
        "-l",
        "--show-location",
        action="store_true",
        dest="show_location",
        help="Show the file name and line number of each match.",
    )

    # -----------------------
    # Format of entry files
    # -----------------------
    g_fmt.add_argument(
        "--two-blank-lines",
        action="store_true",
        dest="two_blank_lines",
        help="Short entries are separated by two blank lines instead of one.",
    )
    g_fmt.add_argument(
        "--entry-start-re",
        metavar="REGEX",
        dest="entry_start_re",
        default=DEFAULT_ENTRY_START_RE,
        help="Start of a long entry; group 1 replaces the match. [default: %(default)s]",
    )
    g_fmt.add_argument(
        "--entry-stop-re",
        metavar="REGEX",
        dest="entry_stop_re",
        default=DEFAULT_ENTRY_STOP_RE,
        help="End of a long entry. [default: %(default)s]",
    )
    g_fmt.add_argument(
        "--description-re",
        metavar="REGEX",
        dest="description_re",
        default=None,
        help="Extracts (group 1) a long entry's description from its first line.",
    )
    g_fmt.add_argument(
        "--comment-re",
        metavar="REGEX",
        dest="comment_re",
        default=DEFAULT_COMMENT_RE,
        help="Matches an entire comment line; empty disables comments. [default: %(default)s]",
    )
    g_fmt.add_argument(
        "--include-re",
        metavar="REGEX",
        dest="include_re",
        default=DEFAULT_INCLUDE_RE,
        help="Matches an include directive; group 1 is the file name. [default: %(default)s]",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Log option settings and progress to stderr.",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (also LOOKUP_JSON_LOGS=1).",
    )

    p.add_argument("keywords", nargs="*", metavar="keyword", help="Search terms; all must match.")
    return p
