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
The exceptions raised while reading ABC.

Scanning and parsing never recover from an error: the first problem aborts
the whole read. All exceptions inherit from :class:`AbcError`, so catching
that one is enough to handle any problem with the input text.

"""


class AbcError(Exception):
    """Base class for all errors raised by abctune."""


class ScanError(AbcError):
    """Raised when the scanner encounters text it can't tokenize.

    The ``pos`` and ``line`` attributes point to the place in the input text
    where the problem was found.

    """
    def __init__(self, message, pos=None, line=None):
        super().__init__(message)
        self.message = message
        self.pos = pos
        self.line = line

    def __str__(self):
        if self.line is not None:
            return "line {}: {}".format(self.line, self.message)
        return self.message


class ParseError(AbcError):
    """Raised when the token stream does not form valid ABC.

    The ``token`` attribute holds the offending token, or None if the token
    stream ended prematurely.

    """
    def __init__(self, message, token=None):
        super().__init__(message)
        self.message = message
        self.token = token

    def __str__(self):
        if self.token is not None:
            return "line {}: {}".format(self.token.line, self.message)
        return self.message


class ExpectationError(ParseError):
    """Raised when the next token is absent or of an unexpected type.

    The ``expected`` attribute is a tuple of the :class:`~.tokens.TokenType`
    values that would have been accepted.

    """
    def __init__(self, message, token=None, expected=()):
        super().__init__(message, token)
        self.expected = tuple(expected)


class UnhandledFieldError(ParseError):
    """Raised for a header field letter the parser does not know."""


class ConversionError(ParseError):
    """Raised when a numeric literal can't be converted to an integer."""
