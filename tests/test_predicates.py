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

import pytest

from expectorate import eq_file, eq_file_or_panic
from expectorate.exc import ContentMismatch, FixtureError

from .utils.data import data, get_data, copy_data


def test_predicates_good(capsys):
    assert eq_file(data('data_a.txt')).eval(get_data('data_a.txt'))
    assert capsys.readouterr().out == ''

def test_predicates_bad(capsys):
    assert not eq_file(data('data_b.txt')).eval(get_data('data_a.txt'))

    out = capsys.readouterr().out
    assert 'data_b.txt' in out
    assert '+No one hits like Gaston' in out

def test_predicates_one_line_change():
    assert not eq_file(data('data_a2.txt'))(get_data('data_a.txt'))

def test_predicates_or_panic_good():
    assert eq_file_or_panic(data('data_a.txt'))(get_data('data_a.txt'))

def test_predicates_or_panic_bad():
    with pytest.raises(ContentMismatch):
        eq_file_or_panic(data('data_a2.txt'))(get_data('data_a.txt'))

def test_predicates_io_error_propagates(tmpdir):
    with pytest.raises(FixtureError):
        eq_file(str(tmpdir))('anything')

def test_predicates_overwrite(tmpdir, overwrite):
    path = copy_data('data_b.txt', tmpdir)

    assert eq_file(path)(get_data('data_a.txt'))
    assert eq_file(path)(get_data('data_a.txt'))

    with open(path, encoding='utf-8') as f:
        assert f.read() == get_data('data_a.txt')

def test_display():
    assert str(eq_file('tests/data/data_a.txt')) == \
        'tests/data/data_a.txt false'
    assert str(eq_file_or_panic('tests/data/data_a.txt')) == \
        'tests/data/data_a.txt true'
