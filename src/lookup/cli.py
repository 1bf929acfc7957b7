from __future__ import annotations

import logging
import os
import sys
from typing import List, NoReturn, Sequence

from lookup.constants import PROGRESS_EVERY
from lookup.core.errors import EntryLookupError, UsageError
from lookup.core.interfaces.logging import LoggerFactoryProtocol
from lookup.core.models import Entry
from lookup.logging.factory import DefaultLoggerFactory
from lookup.logging.helpers import get_logger
from lookup.parsing.config import ReaderConfig
from lookup.parsing.entry_reader import EntryReader
from lookup.parsing.parser import build_parser
from lookup.rendering.printer import ResultPrinter
from lookup.search.matcher import EntryMatcher, SearchOptions
from lookup.utils.paths import resolve_entry_file, split_search_list


logger = get_logger('lookup')


def _configure_logging(enable_json: bool, verbose: bool) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    level = logging.INFO if verbose else logging.WARNING
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('lookup')


def _collect(reader: EntryReader, matcher: EntryMatcher) -> List[Entry]:
    """Read every entry and keep the matching ones, logging progress."""
    found: List[Entry] = []
    for entry in reader:
        if matcher.matches(entry):
            found.append(entry)
        if reader.entries_read % PROGRESS_EVERY == 0:
            logger.info('%d matches in %d entries', len(found), reader.entries_read)
    logger.info('%d matches in %d entries (done)', len(found), reader.entries_read)
    return found


class Lookup:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Run a search with argv-like arguments and return the text to print.

        Raises:
            EntryLookupError: for every fatal condition; nothing has been
                printed when it propagates.
        """
        parser = build_parser()
        ns = parser.parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('LOOKUP_JSON_LOGS') == '1'
        _configure_logging(json_logs, ns.verbose)
        logger.info('Options settings: %s', vars(ns))

        if not ns.keywords:
            raise UsageError(f'No keywords specified\n{parser.format_usage().rstrip()}')

        # Patterns are validated before any file is touched.
        reader_cfg = ReaderConfig.build(
            entry_start_re=ns.entry_start_re,
            entry_stop_re=ns.entry_stop_re,
            comment_re=ns.comment_re,
            include_re=ns.include_re,
            two_blank_lines=ns.two_blank_lines,
        )
        options = SearchOptions.build(
            ns.keywords,
            regular_expressions=ns.regular_expressions,
            case_sensitive=ns.case_sensitive,
            word_match=ns.word_match,
            search_body=ns.search_body,
            description_re=ns.description_re,
        )
        matcher = EntryMatcher(options, logger=logger)
        printer = ResultPrinter(
            print_all=ns.print_all,
            item_num=ns.item_num,
            show_location=ns.show_location,
            description_re=options.description_re,
            line_separator=reader_cfg.line_separator,
        )

        root = resolve_entry_file(ns.entry_file)
        if root is None:
            listing = '\n'.join(f'  entry file {c}' for c in split_search_list(ns.entry_file))
            raise UsageError(f"Can't read any entry files.\n{listing}".rstrip())
        logger.info('Reading entries from %s', root)

        with EntryReader(root, reader_cfg, logger=get_logger('reader')) as reader:
            matches = _collect(reader, matcher)
        return printer.render(matches)


def main() -> NoReturn:
    """Entry point for the `lookup` console script."""
    try:
        sys.stdout.write(Lookup.run(sys.argv[1:]))
        sys.stdout.flush()
        raise SystemExit(0)
    except EntryLookupError as exc:
        logger.error('%s', exc)
        raise SystemExit(exc.exit_code)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
