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
Test abctune.tune.
"""

### find abctune
import sys
sys.path.insert(0, '.')

from fractions import Fraction

import pytest

from abctune import tune
from abctune.tune import Bar, BarLine, Key, Meter, Notation, NoteLength, Tune


def test_tune():
    t = Tune(3)
    assert t.sequence == 3
    with pytest.raises(AttributeError):
        t.sequence = 4
    assert t.title == ""
    assert t.key == ""
    assert isinstance(t.key, Key)
    assert t.meter == Meter([], 0)
    assert t.note_length == NoteLength(0, 0)
    assert t.history == [] and t.comments == [] and t.words_after_tune == []
    assert t.bars == []

    assert Tune(3) == t
    assert Tune(4) != t
    t.history.append("bla")
    assert Tune(3) != t


def test_meter():
    assert Meter([4], 4).fraction() == 1
    assert Meter([4, 2], 8).fraction() == Fraction(3, 4)
    assert Meter().fraction() is None
    assert Meter((3,), 4).numerator == [3]
    assert NoteLength(1, 8).fraction() == Fraction(1, 8)
    assert NoteLength().fraction() is None


def test_notation():
    assert Notation(tune.NOTE, "^c", 2).length() == 2
    assert Notation(tune.NOTE, "c", Fraction(1, 2)).length() == Fraction(1, 2)
    assert Notation(tune.REST, None, 3).length() == 3
    assert Notation(tune.INVISIBLE_REST, None, 1).length() == 1
    assert Notation(tune.MULTI_MEASURE_REST, 4).length() == 0
    assert Notation(tune.CHORD, "Am").length() == 0
    assert Notation(tune.ANNOTATION, "^fine").length() == 0
    assert Notation(tune.BARLINE, BarLine(2)).length() == 0
    for kind in tune.KINDS:
        assert isinstance(Notation(kind).length(), Fraction)
    with pytest.raises(ValueError):
        Notation("trill")


def test_bar():
    bar = Bar([
        Notation(tune.CHORD, "G"),
        Notation(tune.NOTE, "a", 2),
        Notation(tune.NOTE, "b", 1),
        Notation(tune.REST, None, Fraction(1, 2)),
    ], right=BarLine(1))
    assert bar.length() == Fraction(7, 2)
    assert bar.left == BarLine()
    assert bar.left.repeat == 0
    assert bar.right.repeat == 1
    assert Bar().length() == 0
    assert Bar([Notation(tune.NOTE, "a", 2)]) == Bar([Notation(tune.NOTE, "a", 2)])

