"""Command-line argument parsing for diriter."""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from diriter import __version__
from diriter.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class that feeds -e/-i options into exclusion_rules.

    Rules are added while parsing, so the relative order of rule files and individual
    rules on the command line is preserved (which matters for ``!`` negations).

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if option_string in ("-e", "--exclude-from"):
                rules_file = values if isinstance(values, (str, os.PathLike)) else Path(str(values))
                try:
                    exclusion_rules.load_rules(rules_file)
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:
                exclusion_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            recorded.append(values)
            setattr(namespace, self.dest, recorded)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create the argument parser for the ``diriter`` command.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.
    """
    description = """
    diriter: walk a directory tree lazily and print its files, one per line.

    Files are produced in depth-first order. Siblings are ordered by a chain of filters;
    the filter given last is the primary sort key and earlier ones break its ties.

    Available filters:
      files-first, directories-first, order-by-name,
      order-by-mtime-asc, order-by-mtime-desc, reverse
    """

    epilog = """
    Examples:
      # Every visible file, directories before files, each level sorted by name
      diriter -F order-by-name -F directories-first src/

      # Python and TOML files only, newest first within each directory
      diriter -x py -x toml -F order-by-mtime-desc .

      # Include dot files but prune .git, honoring a .gitignore
      diriter -a -i ".git/" -e .gitignore .

      # Show the first 20 matches as a tree, with paths relative to the root
      diriter -p "*.md" -n 20 -t docs/
    """

    parser = argparse.ArgumentParser(
        prog="diriter",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"diriter {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to walk (default: current directory).",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        dest="patterns",
        action="append",
        default=[],
        metavar="GLOB",
        help="Only print files matching GLOB (fnmatch syntax, can be repeated). Never applies to directories.",
    )
    parser.add_argument(
        "-x",
        "--extension",
        dest="extensions",
        action="append",
        default=[],
        metavar="EXT",
        help="Only print files with extension EXT, with or without the leading dot (can be repeated).",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="include_hidden",
        action="store_true",
        help="Include hidden files and directories (names starting with '.').",
    )
    parser.add_argument(
        "-I",
        "--ignore-case",
        action="store_true",
        help="Match -p/-x patterns case-insensitively.",
    )
    parser.add_argument(
        "-F",
        "--filter",
        dest="filters",
        action="append",
        default=[],
        metavar="NAME",
        help="Append a sibling-ordering filter (can be repeated; the last one is the primary key).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help="Gitignore-style pattern excluding files and directories (can be repeated).",
    )
    parser.add_argument(
        "-e",
        "--exclude-from",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Read gitignore-style exclusion patterns from FILE (can be repeated).",
    )
    parser.add_argument(
        "-r",
        "--relative",
        action="store_true",
        help="Print paths relative to the directory instead of absolute paths.",
    )
    parser.add_argument(
        "-t",
        "--tree",
        action="store_true",
        help="Draw the selected files as a tree instead of a flat list.",
    )
    parser.add_argument(
        "-n",
        "--limit",
        type=int,
        metavar="N",
        help="Stop after N files.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help=(
            "How to handle unreadable directories: skip them (ignore), stop with a warning (warn), "
            "or stop with exit status 126 (fail). Default: ignore."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v for info, -vv for every directory scan).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate arguments beyond what argparse checks.

    Raises:
        ValueError: If any argument fails validation.
    """
    if not args.directory.is_dir():
        raise ValueError(f"Not a directory: {args.directory}")
    if args.limit is not None and args.limit < 0:
        raise ValueError("-n/--limit must not be negative")
