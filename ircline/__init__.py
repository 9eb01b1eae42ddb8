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

from .command import Command, Numeric, Verb
from .errors import InvalidCommand, InvalidEncoding, MalformedTag, MissingCommand, ParseError
from .message import Message, encode, parse
from .prefix import Prefix, ServerName, User
from .server_reply import ServerReply
from .tags import Tag, TagSet, escape, unescape

__version__ = '0.1.0'

__all__ = (
    'Message',
    'parse',
    'encode',
    'Tag',
    'TagSet',
    'escape',
    'unescape',
    'Prefix',
    'ServerName',
    'User',
    'Command',
    'Verb',
    'Numeric',
    'ServerReply',
    'ParseError',
    'MalformedTag',
    'MissingCommand',
    'InvalidCommand',
    'InvalidEncoding',
)
