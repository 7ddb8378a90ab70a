# -*- coding: utf-8 -*-
#
# expectorate: compare text output against checked-in fixture files
#
# Copyright © 2020 Oxide Computer Company
#
# expectorate is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# expectorate is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with expectorate.  If not, see <https://www.gnu.org/licenses/>.

import logging
import collections

logger = logging.getLogger(__name__)

UNCHANGED = 'unchanged'
REMOVED = 'removed'
ADDED = 'added'

RESET = '\033[0m'
RED, GREEN = '\033[31m', '\033[32m'

PREFIXES = {
    UNCHANGED: ' ',
    REMOVED: '-',
    ADDED: '+',
}
COLORS = {
    REMOVED: RED,
    ADDED: GREEN,
}

Change = collections.namedtuple('Change', 'tag line')


class DiffReport(object):
    def __init__(self, changes=None, truncated=False):
        self._changes = list(changes or [])
        # Set when the changed block was too large for a minimal edit script
        self.truncated = truncated

    def __repr__(self):
        return "<DiffReport %d changes, distance %d>" % (
            len(self._changes),
            self.distance,
        )

    def __iter__(self):
        return iter(self._changes)

    def __len__(self):
        return len(self._changes)

    def __getitem__(self, index):
        return self._changes[index]

    def __eq__(self, other):
        return isinstance(other, DiffReport) and \
            self._changes == other._changes

    @property
    def changes(self):
        return self._changes

    @property
    def distance(self):
        """Number of lines that were removed or added."""
        return sum(1 for x in self._changes if x.tag != UNCHANGED)

    def tags(self):
        return [x.tag for x in self._changes]


def split_lines(text):
    """
    Split ``text`` into lines so that ``\\r\\n`` versus ``\\n`` and the
    presence of a final newline never show up as a change on their own.
    """
    lines = text.replace('\r\n', '\n').split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


def _lcs_table(s, t):
    # d[i][j] is the length of the longest common subsequence of s[i:] and
    # t[j:], so the edit script can be read off walking forwards.
    m, n = len(s), len(t)
    d = [[0] * (n + 1) for i in range(m + 1)]

    for i in range(m - 1, -1, -1):
        for j in range(n - 1, -1, -1):
            if s[i] == t[j]:
                d[i][j] = d[i + 1][j + 1] + 1
            else:
                d[i][j] = max(d[i + 1][j], d[i][j + 1])

    return d


def linediff(s, t):
    """
    Line based edit script between the two lists of lines.

    Within a block of changes, all removed lines are emitted before the
    added ones.
    """
    d = _lcs_table(s, t)
    result = []
    removed, added = [], []

    def flush():
        result.extend(Change(REMOVED, x) for x in removed)
        result.extend(Change(ADDED, x) for x in added)
        del removed[:]
        del added[:]

    i, j = 0, 0
    while i < len(s) and j < len(t):
        if s[i] == t[j]:
            flush()
            result.append(Change(UNCHANGED, s[i]))
            i += 1
            j += 1
        elif d[i + 1][j] >= d[i][j + 1]:
            removed.append(s[i])
            i += 1
        else:
            added.append(t[j])
            j += 1

    removed.extend(s[i:])
    added.extend(t[j:])
    flush()

    return result


def diff(expected, actual, max_lines=None):
    """
    Line diff of ``expected`` against ``actual``.

    When the differing block holds more than ``max_lines`` lines in total,
    no table is built: every line of the block is reported as removed or
    added and the report is marked as truncated.
    """
    lines1 = split_lines(expected)
    lines2 = split_lines(actual)

    # The table is quadratic, so only build it for the part that differs
    prefix = 0
    limit = min(len(lines1), len(lines2))
    while prefix < limit and lines1[prefix] == lines2[prefix]:
        prefix += 1

    suffix = 0
    limit -= prefix
    while suffix < limit and lines1[-1 - suffix] == lines2[-1 - suffix]:
        suffix += 1

    end1 = len(lines1) - suffix
    end2 = len(lines2) - suffix

    logger.debug(
        "Diffing %d expected and %d actual lines (%d common prefix, "
        "%d common suffix)",
        len(lines1),
        len(lines2),
        prefix,
        suffix,
    )

    middle1 = lines1[prefix:end1]
    middle2 = lines2[prefix:end2]
    # With one side empty the result is the same either way
    truncated = bool(
        max_lines is not None and middle1 and middle2 and
        len(middle1) + len(middle2) > max_lines
    )

    changes = [Change(UNCHANGED, x) for x in lines1[:prefix]]
    if truncated:
        logger.warning(
            "Too much input for a line diff (%d lines, limit %d)",
            len(middle1) + len(middle2),
            max_lines,
        )
        changes.extend(Change(REMOVED, x) for x in middle1)
        changes.extend(Change(ADDED, x) for x in middle2)
    else:
        changes.extend(linediff(middle1, middle2))
    changes.extend(Change(UNCHANGED, x) for x in lines1[end1:])

    return DiffReport(changes, truncated)


def render(report, color):
    out = []

    for change in report:
        line = '{}{}'.format(PREFIXES[change.tag], change.line)
        if color and change.tag in COLORS:
            line = '{}{}{}'.format(COLORS[change.tag], line, RESET)
        out.append(line)

    return '\n'.join(out)
