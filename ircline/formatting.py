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
import re
from typing import Iterator, NamedTuple, Optional, Tuple


class FormatCode(str, Enum):

    """Control characters used for text formatting.

    https://modern.ircdocs.horse/formatting
    """

    BOLD = '\x02'
    COLOUR = '\x03'
    HEX_COLOUR = '\x04'
    RESET = '\x0f'
    MONOSPACE = '\x11'
    REVERSE = '\x16'
    ITALICS = '\x1d'
    STRIKETHROUGH = '\x1e'
    UNDERLINE = '\x1f'


# Colour codes take a foreground and an optional background,
# a comma that is not followed by a colour belongs to the text.
_FORMAT_RE = re.compile(
    r'\x03(?:(\d{1,2})(?:,(\d{1,2}))?)?'
    r'|\x04(?:([0-9A-Fa-f]{6})(?:,([0-9A-Fa-f]{6}))?)?'
    r'|[\x02\x0f\x11\x16\x1d\x1e\x1f]'
)

Colours = Tuple[str, Optional[str]]


class Span(NamedTuple):

    """A run of text and the formatting code directly preceding it.

    The first span of a text has no code unless the text starts with one.
    """

    text: str
    code: Optional[FormatCode] = None
    colours: Optional[Colours] = None


def contains_formatting(text: str) -> bool:
    return _FORMAT_RE.search(text) is not None


def count_formatting(text: str) -> int:
    """Count formatting codes, not counting the colour digits following them."""
    return sum(1 for _ in _FORMAT_RE.finditer(text))


def strip_formatting(text: str) -> str:
    return _FORMAT_RE.sub('', text)


def _colours(match: 're.Match') -> Optional[Colours]:
    fg, bg, hex_fg, hex_bg = match.groups()
    if fg is not None:
        return fg, bg
    if hex_fg is not None:
        return hex_fg, hex_bg
    return None


def split_formatting(text: str) -> Iterator[Span]:
    pos = 0
    code: Optional[FormatCode] = None
    colours: Optional[Colours] = None
    for match in _FORMAT_RE.finditer(text):
        if match.start() or code is not None:
            yield Span(text[pos:match.start()], code, colours)
        code = FormatCode(match.group()[0])
        colours = _colours(match)
        pos = match.end()

    if pos < len(text) or code is not None or not text:
        yield Span(text[pos:], code, colours)
