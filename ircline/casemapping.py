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

from enum import Enum
import string


_ASCII_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_RFC1459_STRICT_TABLE = str.maketrans(string.ascii_uppercase + '[]\\',
                                      string.ascii_lowercase + '{}|')
_RFC1459_TABLE = str.maketrans(string.ascii_uppercase + '[]\\~',
                               string.ascii_lowercase + '{}|^')


class CaseMapping(Enum):

    """Casemapping approaches a server may advertise with CASEMAPPING in RPL_ISUPPORT.

    Nicks, channel names and server names are compared under the server's mapping.
    """

    ASCII = 'ascii'
    RFC1459 = 'rfc1459'
    RFC1459_STRICT = 'rfc1459-strict'

    @classmethod
    def from_isupport(cls, value: str) -> 'CaseMapping':
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"unsupported casemapping {value!r}") from None

    def lower(self, name: str) -> str:
        if self is CaseMapping.ASCII:
            return name.translate(_ASCII_TABLE)
        elif self is CaseMapping.RFC1459_STRICT:
            return name.translate(_RFC1459_STRICT_TABLE)
        else:
            return name.translate(_RFC1459_TABLE)

    def equivalent(self, first: str, second: str) -> bool:
        return self.lower(first) == self.lower(second)
