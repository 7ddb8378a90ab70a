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
import uuid

from .exc import FixtureError

logger = logging.getLogger(__name__)


def load(path):
    """
    Return the contents of the fixture at ``path``, or ``None`` if there is
    no such file.

    Line endings are returned untranslated so that the comparison is
    byte-for-byte.
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
    except FileNotFoundError:
        logger.debug("Fixture %s does not exist", path)
        return None
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise FixtureError(path, 'read', exc) from exc

    logger.debug("Loaded %d characters from %s", len(content), path)

    return content


def store(path, content):
    # Symlinked fixtures are written through to the file they point at
    try:
        target = os.path.realpath(os.fspath(path))
    except (OSError, ValueError) as exc:
        raise FixtureError(path, 'write', exc) from exc
    parent = os.path.dirname(target)

    try:
        os.makedirs(parent, exist_ok=True)
    except (OSError, ValueError) as exc:
        raise FixtureError(path, 'create directory', exc) from exc

    # Write next to the destination and rename over it so that a failure
    # part-way through never leaves a truncated fixture behind.
    tmp_path = os.path.join(parent, '.{}.{}.tmp'.format(
        os.path.basename(target),
        uuid.uuid4().hex,
    ))
    flags = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, 'O_BINARY', 0)
    try:
        # New fixtures get 0666 less the umask, as with a plain open()
        fd = os.open(tmp_path, flags, 0o666)
    except (OSError, ValueError) as exc:
        raise FixtureError(path, 'write', exc) from exc

    try:
        with open(fd, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        _copy_mode(target, tmp_path)
        os.replace(tmp_path, target)
    except (OSError, UnicodeEncodeError) as exc:
        try:
            os.remove(tmp_path)
        except FileNotFoundError:
            pass
        raise FixtureError(path, 'write', exc) from exc

    logger.debug("Wrote %d characters to %s", len(content), target)


def _copy_mode(target, tmp_path):
    try:
        mode = os.stat(target).st_mode & 0o777
    except FileNotFoundError:
        return
    os.chmod(tmp_path, mode)
