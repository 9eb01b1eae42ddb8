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

from typing import NamedTuple, Optional, Tuple, Union

from .config import DEFAULT_OPTIONS, ParserOptions

__all__ = (
    'ServerName',
    'User',
    'Prefix',
    'prefix_from_string',
    'parse_prefix',
)


class ServerName(NamedTuple):

    name: str

    def __str__(self) -> str:
        return self.name


class User(NamedTuple):

    nick: str
    user: Optional[str] = None
    host: Optional[str] = None

    def __str__(self) -> str:
        ret = self.nick
        if self.user is not None:
            ret += f"!{self.user}"
        if self.host is not None:
            ret += f"@{self.host}"
        return ret


Prefix = Union[ServerName, User]


def prefix_from_string(prefix: str, bare_prefix: str = 'auto') -> Prefix:
    """Build a Prefix from its body (the part after the leading colon).

    `nick!user@host`, `nick!user` and `nick@host` are always users.
    For a body without either separator, `bare_prefix` decides:
    'auto' treats names containing a dot as servers and everything else as nicks,
    'server' and 'nick' force one interpretation.
    """
    if '!' in prefix:
        nick, _, user = prefix.partition('!')
        user, at, host = user.partition('@')
        return User(nick, user, host if at else None)
    if '@' in prefix:
        nick, _, host = prefix.partition('@')
        return User(nick, None, host)

    if bare_prefix == 'server' or (bare_prefix == 'auto' and '.' in prefix):
        return ServerName(prefix)
    return User(prefix)


def parse_prefix(line: str, options: ParserOptions = DEFAULT_OPTIONS) \
        -> Tuple[Optional[Prefix], str]:
    if not line.startswith(':'):
        return None, line
    prefix_str, _, line = line[1:].partition(' ')
    return prefix_from_string(prefix_str, options.bare_prefix), line
