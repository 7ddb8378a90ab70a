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

import pytest

from expectorate.config import Config, ENV_VAR


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    # Every test starts in check mode with colour disabled, whatever the
    # environment of the developer running the suite.
    monkeypatch.delenv(ENV_VAR, raising=False)
    Config().reset()
    Config().text_color = 'never'
    yield
    Config().reset()


@pytest.fixture
def overwrite(monkeypatch):
    monkeypatch.setenv(ENV_VAR, 'overwrite')
    Config().overwrite_mode = None
