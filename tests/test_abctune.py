# -*- coding: utf-8 -*-
#
# This file is part of `abctune`, a library for the ABC music notation format
#
# Copyright © 2026 by the abctune developers
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Test the functions in the abctune module.
"""

### find abctune
import sys
sys.path.insert(0, '.')

import io

import abctune
from abctune.tokens import TokenType as T


TUNES = """\
%abc-2.1
X:1
T:Paddy O'Rafferty
R:Jig
M:6/8
L:1/8
K:D
dff cee|def gfe|

X:2
T:Cooley's
R:Reel
M:4/4
K:Em
|:EBBA B2 EB|
"""


def test_parse():
    tunes = abctune.parse(TUNES)
    assert [t.sequence for t in tunes] == [1, 2]
    assert tunes[0].title == "Paddy O'Rafferty"
    assert tunes[0].meter == abctune.tune.Meter([6], 8)
    assert tunes[1].rhythm == "Reel"
    assert tunes[1].key == "Em"


def test_scan():
    tokens = list(abctune.scan("X:1"))
    assert [t.type for t in tokens] == [T.FIELD_NAME, T.NUMBER, T.EOF]


def test_read():
    tunes = abctune.read(io.StringIO(TUNES))
    assert len(tunes) == 2
    tunes = abctune.read(io.BytesIO(TUNES.encode('utf-8')))
    assert len(tunes) == 2
    tunes = abctune.read(io.BytesIO("X:1\nC:Se\xe1n\n".encode('latin-1')), encoding='latin-1')
    assert tunes[0].composer == "Se\xe1n"


def test_load(tmp_path):
    filename = tmp_path / "tunes.abc"
    filename.write_text(TUNES, encoding='utf-8')
    tunes = abctune.load(str(filename))
    assert [t.title for t in tunes] == ["Paddy O'Rafferty", "Cooley's"]


def test_version():
    assert abctune.version == "{}.{}.{}".format(*abctune.pkginfo.version_info)
