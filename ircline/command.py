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

import string
from typing import NamedTuple, Optional, Tuple, Union

from .config import DEFAULT_OPTIONS, ParserOptions
from .errors import InvalidCommand, MissingCommand
from .logging import get_default_logger
from .server_reply import ServerReply

__all__ = (
    'Verb',
    'Numeric',
    'Command',
    'parse_command',
)

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


class Verb(NamedTuple):

    name: str

    def __str__(self) -> str:
        return self.name


class Numeric(NamedTuple):

    code: int

    @property
    def reply(self) -> Optional[ServerReply]:
        try:
            return ServerReply(self.code)
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"{self.code:03d}"


Command = Union[Verb, Numeric]


def command_from_string(token: str, uppercase: bool = False) -> Command:
    if len(token) == 3 and _DIGITS.issuperset(token):
        numeric = Numeric(int(token))
        if numeric.reply is None:
            get_default_logger().debug(f"unknown server reply code {token}")
        return numeric
    if token and _LETTERS.issuperset(token):
        return Verb(token.upper() if uppercase else token)
    raise InvalidCommand(f"invalid command {token!r}")


def parse_command(line: str, options: ParserOptions = DEFAULT_OPTIONS) -> Tuple[Command, str]:
    if not line or line.startswith(' '):
        raise MissingCommand("no command found", line)
    token, _, line = line.partition(' ')
    return command_from_string(token, options.uppercase_commands), line
