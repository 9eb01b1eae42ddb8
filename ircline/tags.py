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

from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from .errors import MalformedTag

__all__ = (
    'Tag',
    'TagSet',
    'escape',
    'unescape',
    'parse_tags',
)


# http://ircv3.net/specs/core/message-tags-3.2.html#escaping-values
_ESCAPE_SEQUENCES = {
    ':': ';',
    's': ' ',
    '\\': '\\',
    'r': '\r',
    'n': '\n',
}
_ESCAPED_CHARS = {v: k for k, v in _ESCAPE_SEQUENCES.items()}


def escape(value: str) -> str:
    out_value = ''
    for char in value:
        if char in _ESCAPED_CHARS:
            out_value += '\\' + _ESCAPED_CHARS[char]
        else:
            out_value += char
    return out_value


def unescape(value: str) -> str:
    """Decode an escaped tag value.

    Unknown escape sequences decode to the escaped character itself
    and a lone backslash at the very end is dropped.
    """
    out_value = ''
    escaped = False
    for char in value:
        if escaped:
            out_value += _ESCAPE_SEQUENCES.get(char, char)
            escaped = False
        elif char == '\\':
            escaped = True
        else:
            out_value += char
    return out_value


class Tag(NamedTuple):

    key: str
    value: Optional[str] = None

    @property
    def client_only(self) -> bool:
        return self.key.startswith('+')

    @property
    def vendor(self) -> Optional[str]:
        vendor, slash, _ = self.key.lstrip('+').partition('/')
        return vendor if slash else None

    @property
    def name(self) -> str:
        return self.key.lstrip('+').rpartition('/')[2]

    @classmethod
    def from_string(cls, tag: str) -> 'Tag':
        key, eq, value = tag.partition('=')
        return cls(key, unescape(value) if eq else None)

    def __str__(self) -> str:
        if self.value is None:
            return self.key
        return f"{self.key}={escape(self.value)}"


class TagSet(tuple):

    """Ordered, immutable collection of tags.

    Duplicate keys are kept as separate entries in the order they were
    received. Lookups by key return the last occurrence.
    """

    def __new__(cls, tags: Iterable[Tag] = ()) -> 'TagSet':
        return super().__new__(cls, (Tag(*tag) for tag in tags))

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        for tag in reversed(self):
            if tag.key == key:
                return tag.value
        return default

    def get_all(self, key: str) -> List[Optional[str]]:
        return [tag.value for tag in self if tag.key == key]

    def keys(self) -> List[str]:
        return [tag.key for tag in self]

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {tag.key: tag.value for tag in self}

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return any(tag.key == item for tag in self)
        return super().__contains__(item)

    def __str__(self) -> str:
        return ';'.join(str(tag) for tag in self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"


def parse_tags(line: str) -> Tuple[TagSet, str]:
    """Split the leading tag block off a line.

    Lines without a tag block are returned unchanged along with an empty TagSet.
    """
    if not line.startswith('@'):
        return TagSet(), line

    tag_string, space, rest = line.partition(' ')
    if not space:
        raise MalformedTag("tag block is not followed by a command", line)

    entries = tag_string[1:].split(';')
    # a single trailing semicolon is accepted
    if len(entries) > 1 and not entries[-1]:
        del entries[-1]

    tags = []
    for entry in entries:
        tag = Tag.from_string(entry)
        if not tag.key:
            raise MalformedTag(f"empty tag key in {tag_string!r}", line)
        tags.append(tag)

    return TagSet(tags), rest
