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
import sys
import logging

logger = logging.getLogger(__name__)

ENV_VAR = 'EXPECTORATE'
TEXT_COLOR_CHOICES = ('auto', 'never', 'always')


class OverwriteMode(object):
    CHECK = 'check'
    OVERWRITE = 'overwrite'

    @classmethod
    def from_env(cls, environ=None):
        if environ is None:
            environ = os.environ
        # Only the exact value counts; "Overwrite" or "1" stay in check mode
        if environ.get(ENV_VAR) == 'overwrite':
            return cls.OVERWRITE
        return cls.CHECK


class Config(object):
    text_color = 'auto'

    # Lines in the differing block (both sides together) above which no
    # minimal line diff is computed; the table is quadratic.
    max_diff_input_lines = 2 ** 12

    # Resolved lazily from the environment, see get_overwrite_mode()
    overwrite_mode = None

    _singleton = {}

    def __init__(self):
        self.__dict__ = self._singleton

    def __setattr__(self, k, v):
        super(Config, self).__setattr__(k, v)

    def reset(self):
        self._singleton.clear()

    def get_overwrite_mode(self):
        if self.overwrite_mode is None:
            self.overwrite_mode = OverwriteMode.from_env()
            logger.debug(
                "%s resolved to %s mode",
                ENV_VAR,
                self.overwrite_mode,
            )
        return self.overwrite_mode

    def check_constraints(self):
        if self.text_color not in TEXT_COLOR_CHOICES:
            raise ValueError("text_color ({0}) must be one of {1}".format(
                self.text_color,
                ', '.join(TEXT_COLOR_CHOICES),
            ))

    def use_color(self, stream=None):
        self.check_constraints()

        if stream is None:
            stream = sys.stdout

        return {
            'auto': stream.isatty(),
            'never': False,
            'always': True,
        }[self.text_color]
