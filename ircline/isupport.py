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

import re
import string
from typing import Iterable, Iterator, NamedTuple, Optional

from .command import Numeric
from .message import Message
from .server_reply import ServerReply

__all__ = (
    'ISupportError',
    'ISupportToken',
    'tokens_from_message',
    'has_duplicate_parameters',
)

_PARAMETER_CHARS = frozenset(string.ascii_uppercase + string.digits)
_INVALID_VALUE_CHARS = frozenset('\0\r\n')
_HEX_OCTET = re.compile(r'[0-9A-Fa-f]{2}')


class ISupportError(ValueError):
    pass


def unescape_value(value: str) -> str:
    """Unescape an ISUPPORT value.

    The only form of supported escape is `\\xHH`, where HH must be a valid
    2-digit hexadecimal number.
    """
    if '\\x' not in value:
        return value

    parts = value.split('\\x')
    # The first part can never be preceded by the escape.
    out_value = parts.pop(0)
    for part in parts:
        octet, rest = part[:2], part[2:]
        if not _HEX_OCTET.fullmatch(octet):
            raise ISupportError(f"invalid hex octet: {octet!r}")
        out_value += chr(int(octet, 16)) + rest
    return out_value


class ISupportToken(NamedTuple):

    """A single feature advertised in RPL_ISUPPORT.

    `value` is None for tokens without '=' and '' for `KEY=`.
    Negated tokens (`-KEY`) have `is_set` False and never carry a value.
    """

    parameter: str
    value: Optional[str] = None
    is_set: bool = True

    @classmethod
    def from_string(cls, token: str) -> 'ISupportToken':
        if not token:
            raise ISupportError("empty token")

        is_set = not token.startswith('-')
        if not is_set:
            token = token[1:]

        parameter, eq, value = token.partition('=')
        if eq and not is_set:
            raise ISupportError(f"negated token {parameter!r} must not have a value")
        if not parameter:
            raise ISupportError("no parameter before '='" if eq else "empty parameter")
        invalid = set(parameter) - _PARAMETER_CHARS
        if invalid:
            raise ISupportError(f"invalid characters in parameter {parameter!r}: "
                                f"{''.join(sorted(invalid))!r}")
        if _INVALID_VALUE_CHARS.intersection(value):
            raise ISupportError(f"invalid characters in value of {parameter!r}")

        return cls(parameter, unescape_value(value) if eq else None, is_set)

    def __str__(self) -> str:
        ret = self.parameter if self.is_set else f"-{self.parameter}"
        if self.value is not None:
            ret += f"={self.value}"
        return ret


def tokens_from_message(message: Message) -> Iterator[ISupportToken]:
    """Yield the tokens of an RPL_ISUPPORT message.

    The first parameter is the client's nick and the last one a human readable
    text, everything in between is a token.
    """
    if message.command != Numeric(ServerReply.RPL_ISUPPORT):
        raise ValueError(f"not an RPL_ISUPPORT message: {message.command}")
    for param in message.params[1:-1]:
        yield ISupportToken.from_string(param)


def has_duplicate_parameters(tokens: Iterable[ISupportToken]) -> bool:
    seen = set()
    for token in tokens:
        if token.parameter in seen:
            return True
        seen.add(token.parameter)
    return False
