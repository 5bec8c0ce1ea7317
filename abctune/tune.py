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
The data model for tunes read from ABC.

A :class:`Tune` holds the header information of one piece of music and a list
of :class:`Bar` objects. The :class:`Meter` and :class:`NoteLength` types
describe the time signature and the default note duration.

The musical contents of a bar are :class:`Notation` objects. A Notation is a
tagged union: its ``kind`` is one of a closed set of names, and the
:meth:`Notation.length` method dispatches on the kind to compute the
duration. Durations are :class:`~fractions.Fraction` values, in units of the
tune's unit note length (so ``a2`` has a length of 2 and ``a/2`` of 1/2,
whatever the L: field says).

"""

import collections
import fractions

from parce.util import Dispatcher


# notation kinds
NOTE = "note"
REST = "rest"
INVISIBLE_REST = "invisible_rest"
MULTI_MEASURE_REST = "multi_measure_rest"
CHORD = "chord"
ANNOTATION = "annotation"
BARLINE = "barline"

KINDS = (NOTE, REST, INVISIBLE_REST, MULTI_MEASURE_REST, CHORD, ANNOTATION, BARLINE)


class Meter(collections.namedtuple("Meter", "numerator denominator")):
    """The time signature.

    ``numerator`` is a list of integers, so that additive meters like
    ``M:3+2/8`` can be expressed (``Meter([3, 2], 8)``). An empty Meter,
    ``Meter([], 0)``, is used for a free meter or when no M: field was given.

    """
    __slots__ = ()

    def __new__(cls, numerator=None, denominator=0):
        return super().__new__(cls, list(numerator or ()), denominator)

    def fraction(self):
        """Return the total length of a measure as a Fraction, e.g.
        ``Fraction(6, 8)`` for ``M:4+2/8``.

        Returns None for an empty or free meter.

        """
        if self.numerator and self.denominator:
            return fractions.Fraction(sum(self.numerator), self.denominator)


class NoteLength(collections.namedtuple("NoteLength", "numerator denominator")):
    """The unit note length, e.g. ``NoteLength(1, 8)`` for ``L:1/8``."""
    __slots__ = ()

    def __new__(cls, numerator=0, denominator=0):
        return super().__new__(cls, numerator, denominator)

    def fraction(self):
        """Return the note length as a Fraction, or None if not set."""
        if self.denominator:
            return fractions.Fraction(self.numerator, self.denominator)


class Key(str):
    """The key, as the raw text of the K: field."""
    __slots__ = ()

    def __repr__(self):
        return "<Key {}>".format(str.__repr__(self))


class BarLine:
    """A boundary between bars.

    A ``repeat`` of 0 denotes a plain barline; a positive value is a repeat
    marker with that many repetitions.

    """
    __slots__ = ('repeat',)

    def __init__(self, repeat=0):
        self.repeat = repeat

    def __eq__(self, other):
        if isinstance(other, BarLine):
            return self.repeat == other.repeat
        return NotImplemented

    def __repr__(self):
        return "<BarLine repeat={}>".format(self.repeat)


class Notation:
    """A single element of musical content.

    ``kind`` must be one of the names in :data:`KINDS`. ``value`` holds the
    kind-specific contents: the pitch text of a note, the name of a chord,
    the text of an annotation, the measure count of a multi-measure rest or
    the :class:`BarLine` of a barline. ``duration`` is the length of notes
    and rests, in units of the unit note length.

    """
    __slots__ = ('kind', 'value', 'duration')

    def __init__(self, kind, value=None, duration=0):
        if kind not in KINDS:
            raise ValueError("unknown notation kind: {}".format(repr(kind)))
        self.kind = kind
        self.value = value
        self.duration = fractions.Fraction(duration)

    def __eq__(self, other):
        if isinstance(other, Notation):
            return (self.kind, self.value, self.duration) == \
                (other.kind, other.value, other.duration)
        return NotImplemented

    def __repr__(self):
        return "<Notation {} {} {}>".format(self.kind, repr(self.value), self.duration)

    @Dispatcher
    def _length(self, kind):
        raise ValueError("can't compute the length of {}".format(repr(kind)))

    @_length(NOTE, REST, INVISIBLE_REST)
    def _timed_length(self):
        return self.duration

    @_length(MULTI_MEASURE_REST, CHORD, ANNOTATION, BARLINE)
    def _untimed_length(self):
        # a multi-measure rest depends on the meter, the others take no time
        return fractions.Fraction(0)

    def length(self):
        """Return the duration of this element as a Fraction."""
        return self._length(self.kind)


class Bar:
    """An ordered list of :class:`Notation` elements between two barlines."""
    def __init__(self, notation=(), left=None, right=None):
        self.left = left if left is not None else BarLine()
        self.notation = list(notation)
        self.right = right if right is not None else BarLine()

    def __eq__(self, other):
        if isinstance(other, Bar):
            return (self.left, self.notation, self.right) == \
                (other.left, other.notation, other.right)
        return NotImplemented

    def __repr__(self):
        return "<Bar {} elements>".format(len(self.notation))

    def length(self):
        """Return the total duration of the bar's contents."""
        return sum((n.length() for n in self.notation), fractions.Fraction(0))


class Tune:
    """One tune read from an ABC file.

    The ``sequence`` number (the X: field) is set on construction and can't
    be changed afterwards. All other fields start empty and are filled in
    while the header is parsed. Scalar fields hold the last value given, the
    list fields (``history``, ``comments`` and ``words_after_tune``) collect
    every occurrence in input order.

    """
    def __init__(self, sequence):
        self._sequence = sequence
        self.title = ""
        self.composer = ""
        self.rhythm = ""
        self.origin = ""
        self.key = Key()
        self.meter = Meter()
        self.note_length = NoteLength()
        self.area = ""      # deprecated in ABC 2.1
        self.book = ""
        self.discography = ""
        self.file_url = ""
        self.group = ""
        self.history = []
        self.comments = []
        self.source = ""
        self.transcription = ""
        self.words_after_tune = []
        self.bars = []

    @property
    def sequence(self):
        """The reference number of this tune, read-only."""
        return self._sequence

    def __eq__(self, other):
        if isinstance(other, Tune):
            return vars(self) == vars(other)
        return NotImplemented

    def __repr__(self):
        def fields():
            yield type(self).__name__
            yield "sequence={}".format(self._sequence)
            if self.title:
                yield "title={}".format(repr(self.title))
        return "<{}>".format(" ".join(fields()))
