# -*- coding: utf-8 -*-
#
# expectorate: compare text output against checked-in fixture files
#
# Copyright © 2025 Oxide Computer Company
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
import logging

from .exc import ContentMismatch
from .config import Config
from .compare import assert_contents_impl

logger = logging.getLogger(__name__)


class FilePredicate(object):
    def __init__(self, path, panic=False):
        self.path = os.fspath(path)
        self.panic = panic

    def __repr__(self):
        return "<FilePredicate %s panic=%s>" % (self.path, self.panic)

    def __str__(self):
        return "{} {}".format(self.path, str(self.panic).lower())

    def __call__(self, actual):
        return self.eval(actual)

    def eval(self, actual):
        __tracebackhide__ = True

        try:
            assert_contents_impl(
                self.path,
                actual,
                Config().get_overwrite_mode(),
            )
        except ContentMismatch as exc:
            if self.panic:
                raise
            print(exc)
            return False

        return True


def eq_file(path):
    """
    Predicate checking equality with the given file; a mismatch is printed
    and reported as ``False``.

    To accept changes to the file, run with ``EXPECTORATE=overwrite``.
    """
    return FilePredicate(path)


def eq_file_or_panic(path):
    """
    Like ``eq_file`` but raises ``ContentMismatch`` on a mismatch.
    """
    return FilePredicate(path, panic=True)
