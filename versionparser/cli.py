# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command-line interface for versionparser.

This module provides the ``verparse`` entry point for inspecting, comparing
and sorting free-form version strings.

Commands:

    parse: Show the parsed components and build number of a version
    compare: Compare two versions
    sort: Sort versions from oldest to newest

Example:
    Inspect a version:
        ```bash
        $ verparse parse "1.2 (BranchName) / Alpha2"
        ```

    Compare two versions:
        ```bash
        $ verparse compare 1.0-rc 1.0-beta11
        ```

    Sort versions, with custom tags from a configuration file:
        ```bash
        $ verparse sort 2.0-nightly3 2.0-beta 1.9 --config versions.yaml
        ```

Exit Codes:

- 0: Success
- 1: Error (missing or invalid configuration file)

Note:
    Commands are registered with argparse subparsers, one handler function
    per command (cmd_<command>). Verbose mode shows full tracebacks on
    errors; debug mode implies verbose and traces the parser strategies.

"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
import json
import sys

from versionparser.config import ParserConfig, load_config
from versionparser.exceptions import ConfigError, VersionParserError
from versionparser.logging import get_logger, set_global_logger
from versionparser.version import parse


def _setup(args: argparse.Namespace) -> ParserConfig:
    """Configure the global logger and load the optional config file."""
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    if args.config is None:
        return ParserConfig()
    return load_config(args.config)


def _report_error(args: argparse.Namespace, err: Exception) -> int:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        import traceback

        traceback.print_exc()
    return 1


def cmd_parse(args: argparse.Namespace) -> int:
    """Handler for 'verparse parse' command.

    Prints the numeric parts, tag, branch and build numbers of one version,
    or the full structure as JSON with --json.

    Args:
        args: Parsed command-line arguments containing the version string,
            rendering options, config path and flags.

    Returns:
        Exit code (0 for success, 1 for configuration errors).

    """
    try:
        config = _setup(args)
    except (ConfigError, FileNotFoundError) as err:
        return _report_error(args, err)

    v = parse(
        args.version,
        vocabulary=config.build_vocabulary(),
        separator=args.separator or config.separator,
        uppercase=args.uppercase or config.uppercase,
    )

    if args.json:
        print(json.dumps(v.to_dict(), indent=2))
        return 0

    print("=" * 70)
    print("PARSE RESULTS")
    print("=" * 70)
    print(f"Original:         {v.original_string}")
    print(f"Normalized:       {v.normalized_version()}")
    print(f"Short:            {v.short_version()}")
    print(f"Tag Version:      {v.tag_version()}")
    print(f"Tag Type:         {v.tag_type()}")
    print(f"Tag Number:       {v.tag_number()}")
    print(f"Branch:           {v.branch_name() or '(none)'}")
    print(f"Build Number:     {v.build_number():.6f}")
    print(f"Build Number Int: {v.build_number_int()}")
    print("=" * 70)

    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'verparse compare' command.

    Args:
        args: Parsed command-line arguments containing the two versions.

    Returns:
        Exit code (0 for success, 1 for configuration errors).

    """
    try:
        config = _setup(args)
    except (ConfigError, FileNotFoundError) as err:
        return _report_error(args, err)

    vocabulary = config.build_vocabulary()
    a = parse(args.first, vocabulary=vocabulary)
    b = parse(args.second, vocabulary=vocabulary)

    if a.is_higher_than(b):
        relation = "newer than"
    elif a.is_lower_than(b):
        relation = "older than"
    else:
        relation = "the same as"

    print(f"{args.first} is {relation} {args.second}")
    print(f"  {a.build_number_int()} vs {b.build_number_int()}")
    return 0


def cmd_sort(args: argparse.Namespace) -> int:
    """Handler for 'verparse sort' command.

    Prints the normalized tag versions, oldest first (newest first with
    --reverse).

    Args:
        args: Parsed command-line arguments containing the versions.

    Returns:
        Exit code (0 for success, 1 for configuration errors).

    """
    try:
        config = _setup(args)
    except (ConfigError, FileNotFoundError) as err:
        return _report_error(args, err)

    vocabulary = config.build_vocabulary()
    parsed = [
        parse(
            raw,
            vocabulary=vocabulary,
            separator=config.separator,
            uppercase=config.uppercase,
        )
        for raw in args.versions
    ]
    parsed.sort(key=lambda v: v.build_number_int(), reverse=args.reverse)

    for v in parsed:
        print(v.tag_version())
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with custom tag types and render options",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show parser strategy details (implies --verbose)",
    )


def _package_version() -> str:
    try:
        return version("versionparser")
    except PackageNotFoundError:
        return "unknown"


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the verparse CLI.

    This function is registered as the 'verparse' console script in
    pyproject.toml.
    """
    parser = argparse.ArgumentParser(
        prog="verparse",
        description="Parse, compare and sort free-form version strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"verparse {_package_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'parse' command
    parser_parse = subparsers.add_parser(
        "parse",
        help="Show the parsed components of a version",
        description="Split a version string into numbers, tag and branch.",
    )
    parser_parse.add_argument("version", help="Version string to parse")
    parser_parse.add_argument(
        "--separator",
        default=None,
        help="Separator character for the tag version (default: from config or -)",
    )
    parser_parse.add_argument(
        "--uppercase",
        action="store_true",
        help="Render the tag keyword in uppercase",
    )
    parser_parse.add_argument(
        "--json",
        action="store_true",
        help="Print the full parse result as JSON",
    )
    _add_common_arguments(parser_parse)
    parser_parse.set_defaults(func=cmd_parse)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two versions",
        description="Tell whether the first version is newer, older or the same.",
    )
    parser_compare.add_argument("first", help="First version string")
    parser_compare.add_argument("second", help="Second version string")
    _add_common_arguments(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'sort' command
    parser_sort = subparsers.add_parser(
        "sort",
        help="Sort versions from oldest to newest",
        description="Sort version strings by build number.",
    )
    parser_sort.add_argument("versions", nargs="+", help="Version strings to sort")
    parser_sort.add_argument(
        "--reverse",
        action="store_true",
        help="Newest first",
    )
    _add_common_arguments(parser_sort)
    parser_sort.set_defaults(func=cmd_sort)

    args = parser.parse_args(argv)

    try:
        exit_code = args.func(args)
    except VersionParserError as err:
        exit_code = _report_error(args, err)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
