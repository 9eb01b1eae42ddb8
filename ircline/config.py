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

from collections import abc as c_abc
from typing import NamedTuple, Optional

from ruamel.yaml import YAML


class ConfigurationError(ValueError):
    pass


class Configuration:

    """Interfaces a mapping in a way that allows dot-separated sub-keys.

    For example, `config['parser.max_params']` on a dict would be
    equivalent to `d['parser']['max_params']`,
    and `config.get('parser.max_params')` would be
    equivalent to `d.get('parser', {}).get('max_params')`.
    """

    def __init__(self, mapping=None):
        if mapping is None:
            mapping = {}
        if not isinstance(mapping, c_abc.Mapping):
            raise ValueError("Must be a mapping")
        self.mapping = mapping

    def get(self, item, default=None):
        """Get a value from the config mapping, with a default value.
        """
        try:
            return self[item]
        except KeyError as e:
            if e.args[0].startswith("Cannot find"):
                return default
            else:
                raise

    def __getitem__(self, key):
        node = self.mapping
        leafs = key.split(".")

        for i, leaf in enumerate(leafs):
            if not isinstance(node, c_abc.Mapping):
                raise KeyError("Element '{}' is not a mapping".format(".".join(leafs[:i])))
            if not leaf:
                raise KeyError("Empty sub-key after '{}'".format(".".join(leafs[:i])))
            if leaf not in node:
                break
            node = node[leaf]
        else:
            return node

        raise KeyError("Cannot find '{}'".format(key))

    def __contains__(self, key):
        obj = object()
        return self.get(key, obj) is not obj


class FallbackConfiguration(Configuration):

    """Like Configuration, but can fallback to other Configurations if keys are not found."""

    def __init__(self, mapping, *fallback_configs: Configuration):
        super().__init__(mapping)
        self.fallback_configs = fallback_configs

    def __getitem__(self, key):
        try:
            return super().__getitem__(key)
        except KeyError as e:
            if not e.args[0].startswith("Cannot find"):
                raise

        obj = object()
        for config in self.fallback_configs:
            value = config.get(key, obj)
            if value is not obj:
                return value

        raise KeyError("Cannot find '{}'".format(key))

    def __contains__(self, key):
        return any(config.__contains__(key) for config in (super(), *self.fallback_configs))

    def __repr__(self):
        mapping = self.mapping
        if len(mapping) > 5:
            mapping = "{...}"
        return ("{}({}, *fallback_configs={!r})"
                .format(type(self).__name__, mapping, self.fallback_configs))


BARE_PREFIX_MODES = ('auto', 'nick', 'server')


class ParserOptions(NamedTuple):

    """Knobs for the ambiguous corners of the message grammar.

    bare_prefix: how to read a prefix without '!' or '@'.
        'auto' picks a server name if it contains a dot, else a nick.
    collapse_spaces: treat runs of spaces between parameters as one separator
        instead of producing empty parameters.
    uppercase_commands: upper-case verbs while parsing.
    max_params: once this many parameters are reached,
        the remainder of the line becomes the last one. None means no limit.
    """

    bare_prefix: str = 'auto'
    collapse_spaces: bool = False
    uppercase_commands: bool = False
    max_params: Optional[int] = None

    @classmethod
    def from_config(cls, config: Configuration) -> 'ParserOptions':
        defaults = cls()
        bare_prefix = config.get('parser.bare_prefix', defaults.bare_prefix)
        if bare_prefix not in BARE_PREFIX_MODES:
            raise ConfigurationError("parser.bare_prefix must be one of {}, not {!r}"
                                     .format(", ".join(BARE_PREFIX_MODES), bare_prefix))

        max_params = config.get('parser.max_params', defaults.max_params)
        if max_params is not None:
            if isinstance(max_params, bool) or not isinstance(max_params, int) or max_params < 1:
                raise ConfigurationError("parser.max_params must be a positive integer, not {!r}"
                                         .format(max_params))

        return cls(
            bare_prefix=bare_prefix,
            collapse_spaces=bool(config.get('parser.collapse_spaces', defaults.collapse_spaces)),
            uppercase_commands=bool(config.get('parser.uppercase_commands',
                                               defaults.uppercase_commands)),
            max_params=max_params,
        )


DEFAULT_OPTIONS = ParserOptions()


class IrclineConfiguration(Configuration):

    def __init__(self, mapping):
        super().__init__(mapping)
        self.parser_options = ParserOptions.from_config(self)

    @classmethod
    def from_filename(cls, filename):
        with open(filename, 'r', encoding='utf-8') as f:
            yaml_config = YAML(typ='safe').load(f)
        if yaml_config is None:
            yaml_config = {}
        if not isinstance(yaml_config, c_abc.Mapping):
            raise ConfigurationError("{}: top level must be a mapping, not {}"
                                     .format(filename, type(yaml_config).__name__))
        return cls(yaml_config)
