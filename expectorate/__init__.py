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

VERSION = "1.2.0"

from .exc import ContentMismatch, FixtureError  # noqa: E402
from .config import Config, OverwriteMode  # noqa: E402
from .compare import assert_contents, assert_contents_impl  # noqa: E402
from .predicates import eq_file, eq_file_or_panic, FilePredicate  # noqa: E402
