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

import os

from .config import ENV_VAR


class ContentMismatch(AssertionError):
    def __init__(self, path, report, rendered, missing=False):
        self.path = os.fspath(path)
        self.report = report
        self.rendered = rendered
        self.missing = missing
        super().__init__(self.format_message())

    def format_message(self):
        lines = []

        if self.missing:
            lines.append('fixture file "{}" does not exist'.format(self.path))
        else:
            lines.append(
                'string doesn\'t match the contents of file: "{}"'.format(
                    self.path,
                ),
            )

        lines.append('--- {}'.format(self.path))
        lines.append('+++ actual')
        if self.rendered:
            lines.append(self.rendered)

        if self.report.truncated:
            lines.append(
                "[ Too much input for a line diff; every differing line is "
                "shown ]",
            )

        if not self.missing and self.report.distance == 0:
            lines.append(
                "[ contents differ only in line endings or the trailing "
                "newline ]",
            )

        lines.append(
            'set {}=overwrite if these changes are intentional'.format(
                ENV_VAR,
            ),
        )

        return '\n'.join(lines)


class FixtureError(Exception):
    def __init__(self, pathname, operation, wrapped_exc):
        self.pathname = os.fspath(pathname)
        self.operation = operation
        self.wrapped_exc = wrapped_exc
        super().__init__("unable to {} {}: {}".format(
            operation,
            self.pathname,
            wrapped_exc,
        ))
