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

import pytest

from ircline import (
    Message, Tag, TagSet, ServerName, User, Verb, Numeric, ServerReply,
    MalformedTag, MissingCommand, InvalidCommand, InvalidEncoding, ParseError,
    parse, encode, escape, unescape,
)
from ircline.command import parse_command
from ircline.config import ParserOptions
from ircline.params import parse_params
from ircline.prefix import parse_prefix, prefix_from_string
from ircline.tags import parse_tags


class TestEscape:

    @pytest.mark.parametrize(
        'raw, expected',
        [
            ('plain', 'plain'),
            ('a\\:b', 'a;b'),
            ('hello\\sworld', 'hello world'),
            ('back\\\\slash', 'back\\slash'),
            ('\\r\\n', '\r\n'),
            # unknown sequences keep the escaped character
            ('\\b\\x', 'bx'),
            # a lone trailing backslash is dropped
            ('trailing\\', 'trailing'),
            ('\\', ''),
            ('', ''),
        ]
    )
    def test_unescape(self, raw, expected):
        assert unescape(raw) == expected

    def test_escape(self):
        s = escape('hello world\r\nfoo\\bar;=')
        assert s == 'hello\\sworld\\r\\nfoo\\\\bar\\:='

    def test_no_double_escape(self):
        assert escape('\\s') == '\\\\s'
        assert unescape(escape('\\s')) == '\\s'

    @pytest.mark.parametrize('value', ['', 'a;b c', '\\', '\\\\:', 'x\r\ny', ';; ;', 'ünïcode\\s'])
    def test_symmetry(self, value):
        assert unescape(escape(value)) == value

    def test_unescape_without_backslashes_is_identity(self):
        s = 'no escapes; here at all'
        assert unescape(s) == s
        assert unescape(unescape(s)) == s


class TestTags:

    def test_boundary(self):
        tags, rest = parse_tags('@a=1;b=2 CMD')
        assert list(tags) == [('a', '1'), ('b', '2')]
        assert rest == 'CMD'

    def test_no_tags(self):
        tags, rest = parse_tags(':prefix CMD')
        assert tags == TagSet()
        assert len(tags) == 0
        assert rest == ':prefix CMD'

    def test_values(self):
        tags, _ = parse_tags('@tag=value;tag2=val\\nue2;tag3;tag4= CMD')
        assert list(tags) == [
            ('tag', 'value'),
            ('tag2', 'val\nue2'),
            ('tag3', None),
            ('tag4', ''),
        ]

    def test_value_with_equals(self):
        tags, _ = parse_tags('@a=b=c CMD')
        assert tags[0] == Tag('a', 'b=c')

    def test_duplicates_preserved(self):
        tags, _ = parse_tags('@a=1;b;a=2 CMD')
        assert tags.keys() == ['a', 'b', 'a']
        assert tags.get_all('a') == ['1', '2']
        assert tags.get('a') == '2'
        assert tags.get('b') is None
        assert tags.get('c', 'x') == 'x'
        assert 'b' in tags
        assert 'c' not in tags
        assert tags.as_dict() == {'a': '2', 'b': None}

    def test_tag_key_parts(self):
        tags, _ = parse_tags('@+example.com/foo=bar;time=now;+typing=active CMD')
        vendor_tag, plain_tag, client_tag = tags
        assert vendor_tag.client_only
        assert vendor_tag.vendor == 'example.com'
        assert vendor_tag.name == 'foo'
        assert not plain_tag.client_only
        assert plain_tag.vendor is None
        assert plain_tag.name == 'time'
        assert client_tag.client_only
        assert client_tag.vendor is None
        assert client_tag.name == 'typing'

    def test_trailing_semicolon(self):
        tags, rest = parse_tags('@a=1; CMD')
        assert list(tags) == [('a', '1')]
        assert rest == 'CMD'

    @pytest.mark.parametrize(
        'line',
        [
            '@tag=val',
            '@ CMD',
            '@=value CMD',
            '@a;;b CMD',
            '@;a CMD',
        ]
    )
    def test_malformed(self, line):
        with pytest.raises(MalformedTag):
            parse_tags(line)

    def test_str(self):
        tags = TagSet([('a', 'x y'), ('b', None), ('c', '')])
        assert str(tags) == 'a=x\\sy;b;c='


class TestPrefix:

    @pytest.mark.parametrize(
        'string, expected',
        [
            ('nick!user@host', User('nick', 'user', 'host')),
            ('nick@host', User('nick', None, 'host')),
            ('nick!user', User('nick', 'user', None)),
            ('nick', User('nick')),
            ('irc.example.org', ServerName('irc.example.org')),
            ('nick!user@host.example.org', User('nick', 'user', 'host.example.org')),
        ]
    )
    def test_from_string_and_str(self, string, expected):
        prefix = prefix_from_string(string)
        assert prefix == expected
        assert type(prefix) is type(expected)
        assert str(prefix) == string

    @pytest.mark.parametrize(
        'mode, body, expected',
        [
            ('auto', 'server', User('server')),
            ('auto', 'irc.server', ServerName('irc.server')),
            ('nick', 'irc.server', User('irc.server')),
            ('server', 'server', ServerName('server')),
            ('server', 'nick!user', User('nick', 'user')),
        ]
    )
    def test_bare_prefix_mode(self, mode, body, expected):
        prefix = prefix_from_string(body, mode)
        assert prefix == expected
        assert type(prefix) is type(expected)

    def test_parse(self):
        prefix, rest = parse_prefix(':nick!user@host CMD a b')
        assert prefix == User('nick', 'user', 'host')
        assert rest == 'CMD a b'

    def test_parse_none(self):
        prefix, rest = parse_prefix('CMD a b')
        assert prefix is None
        assert rest == 'CMD a b'

    def test_parse_options(self):
        prefix, _ = parse_prefix(':server CMD', ParserOptions(bare_prefix='server'))
        assert isinstance(prefix, ServerName)


class TestCommand:

    @pytest.mark.parametrize(
        'line, expected, rest',
        [
            ('PRIVMSG #chan :hi', Verb('PRIVMSG'), '#chan :hi'),
            ('privmsg', Verb('privmsg'), ''),
            ('001 nick', Numeric(1), 'nick'),
            ('999', Numeric(999), ''),
            ('CMD  a', Verb('CMD'), ' a'),
        ]
    )
    def test_parse(self, line, expected, rest):
        command, remainder = parse_command(line)
        assert command == expected
        assert type(command) is type(expected)
        assert remainder == rest

    def test_uppercase(self):
        command, _ = parse_command('privmsg #chan', ParserOptions(uppercase_commands=True))
        assert command == Verb('PRIVMSG')

    @pytest.mark.parametrize('line', ['', ' CMD', '  '])
    def test_missing(self, line):
        with pytest.raises(MissingCommand):
            parse_command(line)

    @pytest.mark.parametrize('line', ['12', '1234', 'CMD1', '1A1', 'PRIV-MSG', 'ÄÖÜ', '٠٠١'])
    def test_invalid(self, line):
        with pytest.raises(InvalidCommand):
            parse_command(line)

    def test_str(self):
        assert str(Numeric(1)) == '001'
        assert str(Numeric(433)) == '433'
        assert str(Verb('PING')) == 'PING'

    def test_reply(self):
        assert Numeric(1).reply is ServerReply.RPL_WELCOME
        assert Numeric(433).reply is ServerReply.ERR_NICKNAMEINUSE
        assert Numeric(999).reply is None


class TestParams:

    @pytest.mark.parametrize(
        'line, expected',
        [
            ('', ()),
            ('a b', ('a', 'b')),
            ('a :trailing text here', ('a', 'trailing text here')),
            (':', ('',)),
            (':a b', ('a b',)),
            ('a ::colon', ('a', ':colon')),
            ('a b:c', ('a', 'b:c')),
            ('a ', ('a',)),
            ('a :', ('a', '')),
            ('a :  spaced  ', ('a', '  spaced  ')),
        ]
    )
    def test_parse(self, line, expected):
        assert parse_params(line) == expected

    def test_consecutive_spaces(self):
        assert parse_params('a  b') == ('a', '', 'b')
        assert parse_params('a   b') == ('a', '', '', 'b')

    def test_collapse_spaces(self):
        options = ParserOptions(collapse_spaces=True)
        assert parse_params('a  b', options) == ('a', 'b')
        assert parse_params('  a   b   :c  d', options) == ('a', 'b', 'c  d')
        assert parse_params('a   ', options) == ('a',)

    def test_max_params(self):
        options = ParserOptions(max_params=3)
        assert parse_params('a b c d e', options) == ('a', 'b', 'c d e')
        assert parse_params('a b :c d', options) == ('a', 'b', 'c d')
        assert parse_params('a b', options) == ('a', 'b')


class TestMessage:

    def test_privmsg(self):
        m = Message.from_line(':nick!user@host PRIVMSG #channel :Some message')
        assert m.params == ('#channel', 'Some message')
        assert m.command == Verb('PRIVMSG')
        assert m.prefix == User('nick', 'user', 'host')
        assert m.tags is None

    def test_prefix_disambiguation(self):
        m = parse(':nick!user@host CMD a b')
        assert m.prefix == User('nick', 'user', 'host')
        assert m.command == Verb('CMD')
        assert m.params == ('a', 'b')

    def test_no_prefix(self):
        m = parse('PRIVMSG #channel :message test')
        assert m.prefix is None
        assert m.command == Verb('PRIVMSG')
        assert m.params == ('#channel', 'message test')

    def test_trailing(self):
        assert parse('CMD a :trailing text here').params == ('a', 'trailing text here')
        assert parse('CMD :').params == ('',)

    def test_numeric(self):
        m = parse(':server 001 nick :Welcome')
        assert m.prefix == ServerName('server')
        assert isinstance(m.prefix, ServerName)
        assert m.command == Numeric(1)
        assert isinstance(m.command, Numeric)
        assert m.command.reply is ServerReply.RPL_WELCOME
        assert m.params == ('nick', 'Welcome')

    def test_numeric_bare_prefix(self):
        m = parse(':server 001 nick :Welcome')
        assert m.prefix == ServerName('server')
        assert type(m.prefix) is ServerName

        # only numerics promote a bare name to a server
        m = parse(':nick PRIVMSG #chan :hi')
        assert type(m.prefix) is User
        m = parse(':nick!user@host 001 target')
        assert m.prefix == User('nick', 'user', 'host')
        m = parse(':server 001 nick', ParserOptions(bare_prefix='nick'))
        assert type(m.prefix) is User

    def test_tags(self):
        m = parse('@tag=value;tag2=val\\nue2;tag3 :prefix.net CMD p1 :p2 long')
        assert m.command == Verb('CMD')
        assert m.params == ('p1', 'p2 long')
        assert m.prefix == ServerName('prefix.net')
        assert list(m.tags) == [('tag', 'value'), ('tag2', 'val\nue2'), ('tag3', None)]

    def test_edge_cases(self):
        m = parse(':prefix COMMAND')
        assert m.params == ()
        assert m.prefix == User('prefix')

    @pytest.mark.parametrize(
        'line, error',
        [
            ('', MissingCommand),
            ('@tag=val', MalformedTag),
            (':prefix', MissingCommand),
            (':prefix ', MissingCommand),
            ('@a=b :prefix', MissingCommand),
            ('@a=b  CMD', MissingCommand),
            (' CMD', MissingCommand),
            (':prefix CMD1 a', InvalidCommand),
            ('@=x CMD', MalformedTag),
        ]
    )
    def test_errors(self, line, error):
        with pytest.raises(error) as excinfo:
            parse(line)
        assert isinstance(excinfo.value, ParseError)
        assert isinstance(excinfo.value, ValueError)
        assert excinfo.value.line == line

    def test_from_bytes(self):
        m = Message.from_bytes(b':nick!user@host PRIVMSG #chan :h\xc3\xa9')
        assert m.params == ('#chan', 'hé')

        m = Message.from_bytes(b'PRIVMSG #chan :h\xe9', encoding='latin-1')
        assert m.params == ('#chan', 'hé')

        with pytest.raises(InvalidEncoding):
            Message.from_bytes(b'PRIVMSG #chan :h\xe9')

    def test_options(self):
        options = ParserOptions(collapse_spaces=True, uppercase_commands=True)
        m = parse('privmsg  #chan   :hi', options)
        assert m.command == Verb('PRIVMSG')
        assert m.params == ('#chan', 'hi')

    def test_strip_tags(self):
        m = parse('@a=1 PING x')
        stripped = m.strip_tags()
        assert stripped.tags is None
        assert stripped.command == m.command
        assert stripped.params == m.params
        assert m.tags is not None

    def test_repr(self):
        # one cheap regex test on repr return value for coverage.
        import re
        m = parse(':nick!user@host PRIVMSG #channel :message')
        assert re.match(
            r'''(?x)
                Message\(Verb\(name=["']PRIVMSG["']\),\s*
                    prefix=User\(
                        nick=["']nick["'],\s*
                        user=["']user["'],\s*
                        host=["']host["']\),\s*
                    params=\(["']\#channel["'],\s*["']message["']\),\s*
                    tags=None\)''',
            repr(m)
        )


class TestEncode:

    @pytest.mark.parametrize(
        'message, expected',
        [
            (Message(Verb('PING')), 'PING'),
            (Message(Numeric(1), ServerName('irc.example.org'), ('nick', 'Welcome')),
             ':irc.example.org 001 nick Welcome'),
            (Message(Verb('PRIVMSG'), User('nick', 'user', 'host'), ('#chan', 'hello world')),
             ':nick!user@host PRIVMSG #chan :hello world'),
            (Message(Verb('CMD'), params=('',)), 'CMD :'),
            (Message(Verb('CMD'), params=('a', ':b')), 'CMD a ::b'),
            (Message(Verb('CMD'), params=('a', 'b:c')), 'CMD a b:c'),
            (Message(Verb('CMD'), tags=TagSet([('a', '1'), ('b', None), ('c', 'x;y z')])),
             '@a=1;b;c=x\\:y\\sz CMD'),
            (Message(Verb('CMD'), tags=TagSet()), 'CMD'),
        ]
    )
    def test_encode(self, message, expected):
        assert encode(message) == expected
        assert str(message) == expected
        assert message.to_line() == expected

    @pytest.mark.parametrize(
        'message',
        [
            Message(Verb('PING')),
            Message(Verb('PRIVMSG'), User('nick', 'user', 'host'), ('#chan', 'hello world')),
            Message(Verb('CMD'), User('nick', None, 'host'), ('a', 'b', '')),
            Message(Verb('CMD'), User('nick', 'user'), (':leading',)),
            Message(Numeric(5), ServerName('irc.example.org'), ('nick', 'A=1', 'B', 'are supported')),
            Message(Numeric(0), None, ('x',)),
            Message(Verb('TAGMSG'), User('nick'), ('#chan',),
                    TagSet([('+example.com/foo', 'a b;c\\d\r\n'), ('msgid', None), ('x', ''),
                            ('msgid', 'dup')])),
        ]
    )
    def test_roundtrip(self, message):
        assert parse(encode(message)) == message

    @pytest.mark.parametrize(
        'line',
        [
            '@time=2016-01-01T00:00:00.000Z;+draft/reply=abc :nick!user@host PRIVMSG #chan :hi there',
            ':irc.example.org 353 nick = #chan :@op +voice user',
            'PING irc.example.org',
            'CMD a  b',
        ]
    )
    def test_line_roundtrip(self, line):
        assert encode(parse(line)) == line
