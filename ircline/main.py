# ircline - IRC Message Parser
# Copyright © 2016  Lars Peter Søndergaard <lps@chireiden.net>
# Copyright © 2016  FichteFoll <fichtefoll2@googlemail.com>
#
# This file is part of ircline.
#
# ircline is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# ircline is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with ircline.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import sys
from typing import Iterable, Iterator, List, Optional

import colorama
from ruamel.yaml import YAMLError

from .config import (
    BARE_PREFIX_MODES, Configuration, ConfigurationError, FallbackConfiguration,
    IrclineConfiguration, ParserOptions,
)
from .errors import ParseError
from .logging import Logger, get_logger, set_default_logger
from .message import Message

# Don't litter the working directory with log files unless asked to.
_DEFAULTS = Configuration({'logging': {'disable': True}})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ircline',
        description="Parse IRC message lines and print their structure.",
    )
    parser.add_argument('lines', nargs='*', metavar='LINE',
                        help="lines to parse; read from stdin if none are given")
    parser.add_argument('-c', '--config', metavar='FILE',
                        help="YAML configuration file")
    parser.add_argument('-e', '--encode', action='store_true',
                        help="print the re-encoded line instead of its structure")
    parser.add_argument('--encoding', default='utf-8',
                        help="encoding of stdin lines (default: %(default)s)")
    parser.add_argument('--bare-prefix', choices=BARE_PREFIX_MODES,
                        help="how to read prefixes without '!' or '@'")
    parser.add_argument('--collapse-spaces', action='store_true', default=None,
                        help="treat runs of spaces between parameters as one")
    parser.add_argument('--uppercase', action='store_true', default=None,
                        dest='uppercase_commands', help="upper-case command verbs")
    parser.add_argument('--max-params', type=int, metavar='N',
                        help="fold everything after the Nth parameter into it")
    return parser


def load_config(args: argparse.Namespace) -> Configuration:
    overrides = {key: getattr(args, key)
                 for key in ('bare_prefix', 'collapse_spaces', 'uppercase_commands', 'max_params')
                 if getattr(args, key) is not None}
    fallbacks: List[Configuration] = []
    if args.config:
        fallbacks.append(IrclineConfiguration.from_filename(args.config))
    fallbacks.append(_DEFAULTS)
    return FallbackConfiguration({'parser': overrides}, *fallbacks)


def stdin_lines() -> Iterator[bytes]:
    for raw in sys.stdin.buffer:
        raw = raw.rstrip(b'\r\n')
        if raw:
            yield raw


def process(lines: Iterable, options: ParserOptions, logger: Logger,
            encode: bool = False, encoding: str = 'utf-8') -> int:
    """Parse and print every line, returning the number of lines that failed."""
    failures = 0
    for line in lines:
        try:
            if isinstance(line, bytes):
                message = Message.from_bytes(line, encoding, options)
            else:
                message = Message.from_line(line, options)
        except ParseError as e:
            failures += 1
            logger.warning(f"{type(e).__name__}: {e}; {e.line!r}")
            continue

        if encode:
            print(message.to_line())
        else:
            print(repr(message))
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    colorama.just_fix_windows_console()
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
        options = ParserOptions.from_config(config)
    except (ConfigurationError, OSError, YAMLError) as e:
        print(f"{colorama.Fore.RED}ircline: {e}{colorama.Style.RESET_ALL}", file=sys.stderr)
        return 2

    logger = get_logger('main', 'ircline', config)
    set_default_logger(logger)
    logger.debug(f"parser options: {options}")

    lines = args.lines or stdin_lines()
    failures = process(lines, options, logger, encode=args.encode, encoding=args.encoding)
    if failures:
        logger.info(f"{failures} line(s) could not be parsed")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
