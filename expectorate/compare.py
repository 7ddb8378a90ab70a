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
import logging

from . import store
from .exc import ContentMismatch
from .diff import diff, render
from .config import Config, OverwriteMode

logger = logging.getLogger(__name__)


def assert_contents(path, actual):
    """
    Check that ``actual`` matches the contents of the fixture at ``path``.

    On a mismatch this raises ``ContentMismatch`` (an ``AssertionError``)
    whose message carries a line diff. Run with ``EXPECTORATE=overwrite``
    to accept the new output: the fixture is then rewritten instead of
    compared.
    """
    __tracebackhide__ = True

    assert_contents_impl(path, actual, Config().get_overwrite_mode())


def assert_contents_impl(path, actual, mode, color=None, load=store.load,
                         write=store.store):
    __tracebackhide__ = True

    if not isinstance(actual, str):
        raise TypeError("actual contents must be a str, not {}".format(
            type(actual).__name__,
        ))

    expected = load(path)

    if mode == OverwriteMode.OVERWRITE:
        logger.info("Overwriting %s", os.fspath(path))
        write(path, actual)
        return

    if expected == actual:
        logger.debug("%s matches", os.fspath(path))
        return

    # A missing fixture is compared as if it were empty
    missing = expected is None
    report = diff(
        '' if missing else expected,
        actual,
        max_lines=Config().max_diff_input_lines,
    )

    if color is None:
        color = Config().use_color()

    logger.debug(
        "%s does not match (%s, distance %d)",
        os.fspath(path),
        "missing" if missing else "present",
        report.distance,
    )

    raise ContentMismatch(path, report, render(report, color), missing)
