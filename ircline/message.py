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

from typing import NamedTuple, Optional, Sequence

from .command import Command, Numeric, parse_command
from .config import DEFAULT_OPTIONS, ParserOptions
from .errors import InvalidEncoding, ParseError
from .params import parse_params
from .prefix import Prefix, ServerName, User, parse_prefix
from .tags import Tag, TagSet, parse_tags

__all__ = (
    'Message',
    'parse',
    'encode',
)


class Message(NamedTuple):

    command: Command
    prefix: Optional[Prefix] = None
    params: Sequence[str] = ()
    tags: Optional[TagSet] = None

    @classmethod
    def from_line(cls, line: str, options: ParserOptions = DEFAULT_OPTIONS) -> 'Message':
        # https://tools.ietf.org/html/rfc2812#section-2.3.1
        # http://ircv3.net/specs/core/message-tags-3.2.html
        raw_line = line
        try:
            tags, line = parse_tags(line)
            prefix, line = parse_prefix(line, options)
            command, line = parse_command(line, options)
        except ParseError as e:
            e.line = raw_line
            raise

        # numerics are only ever sent by servers
        if (options.bare_prefix == 'auto' and isinstance(command, Numeric)
                and isinstance(prefix, User) and prefix.user is None and prefix.host is None):
            prefix = ServerName(prefix.nick)

        params = parse_params(line, options)

        return cls(command, prefix, params, tags or None)

    @classmethod
    def from_bytes(cls, data: bytes, encoding: str = 'utf-8',
                   options: ParserOptions = DEFAULT_OPTIONS) -> 'Message':
        try:
            line = data.decode(encoding)
        except UnicodeDecodeError as e:
            raise InvalidEncoding(f"line is not valid {encoding}: {e.reason}",
                                  data.decode(encoding, 'replace')) from e
        return cls.from_line(line, options)

    def to_line(self) -> str:
        parts = []
        if self.tags:
            parts.append('@' + ';'.join(str(Tag(*tag)) for tag in self.tags))
        if self.prefix is not None:
            parts.append(f":{self.prefix}")
        parts.append(str(self.command))

        if self.params:
            *middle, last = self.params
            parts.extend(middle)
            if not last or ' ' in last or last.startswith(':'):
                last = ':' + last
            parts.append(last)

        return ' '.join(parts)

    def strip_tags(self) -> 'Message':
        return self._replace(tags=None)

    def __str__(self) -> str:
        return self.to_line()

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}({self.command!r}, prefix={self.prefix!r},"
                f" params={self.params!r}, tags={self.tags!r})")


def parse(line: str, options: ParserOptions = DEFAULT_OPTIONS) -> Message:
    return Message.from_line(line, options)


def encode(message: Message) -> str:
    return message.to_line()
