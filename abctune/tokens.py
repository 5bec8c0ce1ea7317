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
The tokens produced by the :class:`~.scanner.Scanner`.

A :class:`Token` is an immutable named tuple with the type, the text, the
position and the line number. The type is one of the :class:`TokenType`
members. Some types are reserved for future extensions of the grammar and are
never produced by the scanner yet.

"""

import collections
import enum
import reprlib


class TokenType(enum.Enum):
    """The closed set of token types the scanner may emit."""
    ERROR = enum.auto()             # the text is the error message
    FIELD_NAME = enum.auto()
    COLON = enum.auto()
    STRING = enum.auto()
    URL = enum.auto()
    UNIT = enum.auto()
    KEY = enum.auto()
    METER = enum.auto()
    MACRO = enum.auto()

    VOICE = enum.auto()
    OPEN_PAREN = enum.auto()
    CLOSE_PAREN = enum.auto()
    LETTER = enum.auto()
    NUMBER = enum.auto()
    DIVIDE = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    EQUALS = enum.auto()

    SHARP = enum.auto()
    NATURAL = enum.auto()
    FLAT = enum.auto()

    MINOR = enum.auto()
    EXCLAMATION = enum.auto()
    STAR = enum.auto()

    PERCENT = enum.auto()

    DOTTED_BARLINE = enum.auto()
    BARLINE = enum.auto()
    THIN_THICK_DOUBLE_BARLINE = enum.auto()
    THIN_THIN_DOUBLE_BARLINE = enum.auto()
    THICK_THIN_DOUBLE_BARLINE = enum.auto()

    START_REPEAT = enum.auto()
    END_REPEAT = enum.auto()
    START_END_REPEATS = enum.auto()

    QUOTE = enum.auto()

    NEWLINE = enum.auto()
    SPACE = enum.auto()
    BACKSLASH = enum.auto()
    GREATER_THAN = enum.auto()
    LESS_THAN = enum.auto()

    COMMENT = enum.auto()

    INVISIBLE_REST = enum.auto()
    REST = enum.auto()
    MULTI_MEASURE_REST = enum.auto()

    CHORD = enum.auto()

    ANNOTATION_POSITION = enum.auto()
    ANNOTATION = enum.auto()

    VARIANT_NUMBER = enum.auto()
    VARIANT_COMMA = enum.auto()
    VARIANT_RANGE = enum.auto()

    EOF = enum.auto()

    def __repr__(self):
        return "TokenType.{}".format(self.name)


class Token(collections.namedtuple("Token", "type text pos line")):
    """A typed, positioned fragment of the input text.

    ``type`` is a :class:`TokenType`, ``text`` the literal text (or the
    message for an error token), ``pos`` the offset of the token in the input
    string and ``line`` the 1-based line number the token starts on.

    """
    __slots__ = ()

    def __str__(self):
        if self.type is TokenType.EOF:
            return "EOF"
        elif self.type is TokenType.ERROR:
            return self.text
        return reprlib.repr(self.text)
