from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

from .core import config
from .core.error_handler import ErrorHandler
from .core.errors import MissingArgumentError, UsageError
from .core.logging_config import get_logger, setup_logging
from .features import add_key, sort_all

log = get_logger(__name__)


class ToolArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def __init__(self, *args, usage_line: Optional[str] = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.usage_line = usage_line

    def parse_known_args(self, args=None, namespace=None):  # type: ignore[override]
        args = sys.argv[1:] if args is None else list(args)
        if self._subparsers is None and "--" not in args:
            args = self._end_options_at_first_positional(args)
        return super().parse_known_args(args, namespace)

    def _end_options_at_first_positional(self, args: List[str]) -> List[str]:
        # Translations such as "-x" or "-10%" are values, not options
        for i, arg in enumerate(args):
            if arg not in self._option_string_actions:
                return args[:i] + ["--"] + args[i:]
        return args

    def error(self, message: str) -> None:  # type: ignore[override]
        usage = self.usage_line or self.format_usage().strip()
        if "required" in message:
            raise MissingArgumentError(usage, message.split(":", 1)[-1].strip())
        raise UsageError(usage, message)


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def _build_parser(
    prog: str,
    description: str,
    usage_line: str,
    register: Callable[[argparse.ArgumentParser], None],
) -> ToolArgumentParser:
    parser = ToolArgumentParser(prog=prog, description=description, usage_line=usage_line)
    _add_common_options(parser)
    register(parser)
    return parser


def make_parser() -> ToolArgumentParser:
    """Parser for ``python -m i18nkeys <command> ...``."""
    parser = ToolArgumentParser(
        prog="i18nkeys",
        description="Maintain the en/fr translation dictionaries of a project",
        usage_line="Usage: i18nkeys [-v] {add,sort} ...",
    )
    _add_common_options(parser)
    sub = parser.add_subparsers(dest="command", required=True)
    add_key.register(
        sub.add_parser("add", help="Add a translation key", usage_line=add_key.USAGE)
    )
    sort_all.register(
        sub.add_parser("sort", help="Sort keys of every language file", usage_line=sort_all.USAGE)
    )
    return parser


def _execute(parser: argparse.ArgumentParser, argv: Optional[List[str]]) -> int:
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        return ErrorHandler.handle_error(e)

    settings = config.settings
    setup_logging(log_file=settings.LOG_FILE, debug=args.verbose, level=settings.LOG_LEVEL)
    log.debug("Running %s with root %s", args.handler.__module__, args.root_path)
    return ErrorHandler.run(args.handler, args)


def add_key_main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser(
        "i18n-add",
        "Add a translation key to the en and fr dictionaries",
        add_key.USAGE,
        add_key.register,
    )
    return _execute(parser, argv)


def sort_all_main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser(
        "i18n-sort",
        "Sort the keys of the en and fr dictionaries",
        sort_all.USAGE,
        sort_all.register,
    )
    return _execute(parser, argv)


def main(argv: Optional[List[str]] = None) -> int:
    return _execute(make_parser(), argv)
