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

__all__ = (
    'ParseError',
    'MalformedTag',
    'MissingCommand',
    'InvalidCommand',
    'InvalidEncoding',
)


class ParseError(ValueError):

    """Base class for everything that can go wrong while parsing a line.

    The offending line is kept around as `line`
    so callers can log it before dropping it.
    """

    def __init__(self, message: str, line: str = None) -> None:
        super().__init__(message)
        self.line = line


class MalformedTag(ParseError):
    pass


class MissingCommand(ParseError):
    pass


class InvalidCommand(ParseError):
    pass


class InvalidEncoding(ParseError):
    pass
