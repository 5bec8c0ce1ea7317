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
The parser, building :class:`~.tune.Tune` objects from a token stream.

The :class:`Parser` reads tokens one by one and acts on the field names of
header lines. An X: field starts a new tune, the other fields modify the tune
that is being built. When a new X: field is seen or the tokens run out, the
tune is complete and added to the list of tunes.

Example::

    >>> from abctune.scanner import Scanner
    >>> from abctune.parser import Parser
    >>> tunes = Parser(Scanner("X:1\\nT:Paddy\\nM:6/8\\n")).parse()
    >>> tunes[0].title, tunes[0].meter
    ('Paddy', Meter(numerator=[6], denominator=8))

The field letters are dispatched to methods using a
:class:`parce.util.Dispatcher`. To handle more fields, inherit from Parser,
create a new Dispatcher named ``_field`` and decorate the new methods with it.

"""

import logging

from parce.util import Dispatcher

from .error import ConversionError, ExpectationError, ParseError, ScanError, UnhandledFieldError
from .tokens import TokenType as T
from .tune import Key, Meter, NoteLength, Tune


logger = logging.getLogger(__name__)


class Parser:
    """Parses the tokens from ``tokens`` into a list of tunes.

    ``tokens`` can be a :class:`~.scanner.Scanner` or any other iterable
    yielding :class:`~.tokens.Token` objects.

    """

    #: fields that are known but not stored, their value is skipped
    ignored_fields = frozenset("ImPQrsUVw+")

    #: fields that set a string attribute of the tune
    string_fields = {
        'A': 'area',
        'B': 'book',
        'C': 'composer',
        'D': 'discography',
        'F': 'file_url',
        'G': 'group',
        'O': 'origin',
        'R': 'rhythm',
        'S': 'source',
        'T': 'title',
        'Z': 'transcription',
    }

    #: fields that append to a list attribute of the tune
    list_fields = {
        'H': 'history',
        'N': 'comments',
        'W': 'words_after_tune',
    }

    #: meters that are written as text
    named_meters = {
        'C': Meter([4], 4),
        'C|': Meter([2], 2),
        'none': Meter(),
    }

    def __init__(self, tokens):
        self._tokens = iter(tokens)
        self._finished = False
        self.tunes = []
        self.current_tune = None

    def parse(self):
        """Parse all tokens and return the list of tunes.

        Raises a :class:`~.error.ScanError` or :class:`~.error.ParseError`
        (or a subclass) when the input is invalid. In that case no tunes are
        returned at all.

        """
        try:
            for token in iter(self.next_token, None):
                self.handle_token(token)
        finally:
            self.drain()
        self.flush()
        return self.tunes

    def next_token(self):
        """Return the next token, or None at the end of the token stream.

        Raises ScanError if the scanner returned an error token.

        """
        if self._finished:
            return None
        token = next(self._tokens, None)
        if token is None or token.type is T.EOF:
            self._finished = True
            return None
        elif token.type is T.ERROR:
            self._finished = True
            raise ScanError(token.text, token.pos, token.line)
        return token

    def drain(self):
        """Stop reading tokens, closing the token source if possible."""
        self._finished = True
        close = getattr(self._tokens, 'close', None)
        if close:
            close()

    def flush(self):
        """Add the tune that's being built to the list of tunes."""
        if self.current_tune is not None:
            logger.debug("tune %d complete", self.current_tune.sequence)
            self.tunes.append(self.current_tune)
            self.current_tune = None

    def handle_token(self, token):
        """Handle a token at the top level.

        Only field names are handled, other tokens are currently ignored.

        """
        if token.type is T.FIELD_NAME:
            self._field(token.text, token)

    ## helpers
    def expect(self, *types):
        """Return the next token, which must have one of the specified types.

        Raises ExpectationError if the token has another type or if there
        are no more tokens.

        """
        token = self.next_token()
        names = ", ".join(t.name for t in types)
        if token is None:
            raise ExpectationError(
                "expected one of {}, got end of input".format(names), None, types)
        elif token.type not in types:
            raise ExpectationError(
                "expected one of {}, got {} {}".format(names, token.type.name, token), token, types)
        return token

    def expect_end_of_field(self):
        """Read the newline ending a header field; the end of the input is
        also fine."""
        token = self.next_token()
        if token is not None and token.type is not T.NEWLINE:
            raise ExpectationError(
                "expected NEWLINE, got {} {}".format(token.type.name, token), token, (T.NEWLINE,))

    def skip_line(self):
        """Discard all tokens up to and including the next newline."""
        for token in iter(self.next_token, None):
            if token.type is T.NEWLINE:
                break

    def to_int(self, token):
        """Return the integer value of a NUMBER token.

        Raises ConversionError if the text is not a valid number.

        """
        try:
            return int(token.text)
        except ValueError:
            raise ConversionError("invalid number: {}".format(repr(token.text)), token) from None

    def set_value(self, name, value):
        """Set attribute ``name`` of the current tune.

        Fields in the file header, before the first X: field, are not stored.

        """
        if self.current_tune is None:
            logger.debug("ignoring %s outside of a tune", name)
        else:
            setattr(self.current_tune, name, value)

    def append_value(self, name, value):
        """Append a value to list attribute ``name`` of the current tune."""
        if self.current_tune is None:
            logger.debug("ignoring %s outside of a tune", name)
        else:
            getattr(self.current_tune, name).append(value)

    ## field handlers
    @Dispatcher
    def _field(self, name, token):
        """Called for fields without a handler method."""
        if name not in self.ignored_fields:
            raise UnhandledFieldError("unhandled field: {}".format(name), token)
        self.skip_line()

    @_field('X')
    def sequence_field(self, token):
        """Start a new tune."""
        sequence = self.to_int(self.expect(T.NUMBER))
        self.flush()
        self.current_tune = Tune(sequence)
        self.expect_end_of_field()

    @_field(*string_fields)
    def string_field(self, token):
        """A field setting a string value."""
        value = self.expect(T.STRING).text
        self.set_value(self.string_fields[token.text], value)
        self.expect_end_of_field()

    @_field(*list_fields)
    def list_field(self, token):
        """A field adding a string to a list."""
        value = self.expect(T.STRING).text
        self.append_value(self.list_fields[token.text], value)
        self.expect_end_of_field()

    @_field('K')
    def key_field(self, token):
        """The K: field, stored as text."""
        self.set_value('key', Key(self.expect(T.STRING).text))
        self.expect_end_of_field()

    @_field('M')
    def meter_field(self, token):
        """The M: field.

        All numbers before the slash are collected in the numerator, the
        number after it is the denominator.

        """
        t = self.expect(T.NUMBER, T.PLUS, T.OPEN_PAREN, T.DIVIDE, T.STRING)
        if t.type is T.STRING:
            meter = self.named_meter(t)
        else:
            numerator = []
            while t.type is not T.DIVIDE:
                if t.type is T.NUMBER:
                    numerator.append(self.to_int(t))
                t = self.expect(T.NUMBER, T.PLUS, T.OPEN_PAREN, T.CLOSE_PAREN, T.DIVIDE)
            denominator = self.to_int(self.expect(T.NUMBER))
            meter = Meter(numerator, denominator)
        self.set_value('meter', meter)
        self.skip_line()

    def named_meter(self, token):
        """Return the Meter for a meter given as text, like ``C``."""
        text = token.text.split("%", 1)[0].strip()
        if text.lower() == 'none':
            text = 'none'
        try:
            meter = self.named_meters[text]
        except KeyError:
            raise ParseError("unknown meter: {}".format(repr(text)), token) from None
        return Meter(meter.numerator, meter.denominator)

    @_field('L')
    def note_length_field(self, token):
        """The L: field."""
        numerator = self.to_int(self.expect(T.NUMBER))
        self.expect(T.DIVIDE)
        denominator = self.to_int(self.expect(T.NUMBER))
        self.set_value('note_length', NoteLength(numerator, denominator))
        self.skip_line()
