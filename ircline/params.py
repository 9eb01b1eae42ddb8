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

from typing import List, Tuple

from .config import DEFAULT_OPTIONS, ParserOptions


def parse_params(line: str, options: ParserOptions = DEFAULT_OPTIONS) -> Tuple[str, ...]:
    """Tokenize everything after the command.

    Exactly one space is skipped before each parameter,
    so a run of n spaces between two parameters leaves n - 1 empty parameters
    unless `options.collapse_spaces` is set.
    """
    params: List[str] = []
    while True:
        if options.collapse_spaces:
            line = line.lstrip(' ')
        elif line.startswith(' '):
            line = line[1:]
        if not line:
            break

        if line.startswith(':'):
            params.append(line[1:])
            break
        if options.max_params is not None and len(params) == options.max_params - 1:
            params.append(line)
            break

        param, space, rest = line.partition(' ')
        params.append(param)
        line = space + rest

    return tuple(params)
