"""Command-line interface for diriter.

Exit Codes:
    0: Successful completion
    1: Runtime error (invalid filter, unreadable rules file, missing directory)
    2: Command-line syntax error
    126: Permission denied (with -P fail)
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE), e.g. when piping into ``head``

Example:
    $ diriter -x py -F order-by-name src/
    $ diriter -a -i ".git/" -t .
"""

import itertools
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from diriter.cli.argparser import create_parser, validate_args
from diriter.cli.safe_writer import SafeWriter
from diriter.cli.signal_handler import setup_signal_handling, signal_handler, until_interrupted
from diriter.dir_iterator import DirIterator
from diriter.entry_tree import build_entry_tree, stream_entry_tree
from diriter.exceptions import DirIteratorError
from diriter.exclusion_rules.git_rules import GitIgnoreExclusionRules
from diriter.permission_action import PermissionAction

logger = logging.getLogger(__name__)


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr; -v shows INFO, -vv shows DEBUG."""
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def format_lines(walker: DirIterator, entries: Iterable[Path], relative: bool, tree: bool) -> Iterator[str]:
    """Turn emitted files into output lines, either one path per line or as a tree."""
    if tree:
        yield from stream_entry_tree(build_entry_tree(walker.path, entries))
        return
    for entry in entries:
        yield entry.relative_to(walker.path).as_posix() if relative else str(entry)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``diriter`` console script."""
    setup_signal_handling()

    try:
        exclusion_rules = GitIgnoreExclusionRules()
        parser = create_parser(exclusion_rules)
        args = parser.parse_args(argv)
        validate_args(args)
        configure_logging(args.verbose)

        walker = DirIterator(
            args.directory,
            exclusion_rules=exclusion_rules if exclusion_rules.has_rules() else None,
            permission_action=PermissionAction.IGNORE if args.permission_action == "ignore" else PermissionAction.RAISE,
        )
        walker.add_patterns(args.patterns)
        walker.add_extensions(args.extensions)
        if args.ignore_case:
            walker.case_insensitive()
        if args.include_hidden:
            walker.include_hidden()
        walker.add_filters(args.filters)
        logger.info("Walking %s with filters %s", walker.path, ", ".join(walker.filters) or "(none)")

        entries: Iterable[Path] = walker.iterator()
        if args.limit is not None:
            entries = itertools.islice(entries, args.limit)

        entries = until_interrupted(entries)

        # Opened outside the handler below, which only covers unreadable directories.
        safe_writer = SafeWriter(args.output if args.output else sys.stdout.fileno())
        try:
            with safe_writer:
                try:
                    for line in format_lines(walker, entries, args.relative, args.tree):
                        safe_writer.write_line(line)
                except BrokenPipeError:
                    pass
        except PermissionError as e:
            if args.permission_action == "fail":
                print(f"Error: {e}", file=sys.stderr)
                sys.exit(126)
            print(f"Warning: {e}", file=sys.stderr)

    except (DirIteratorError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if signal_handler.sigpipe_received.is_set():
        sys.exit(141)
    elif signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
