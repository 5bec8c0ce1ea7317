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


r"""
The scanner, turning ABC text into a stream of tokens.

The :class:`Scanner` is a state machine working on the characters of the
input text. Every state is a generator method that yields zero or more
:class:`~.tokens.Token` objects and returns the next state (or None to stop).
Tokens are produced on demand, so a caller that stops reading never causes
the rest of the text to be scanned.

Each line is either a header line (a field letter followed by a colon) or a
body line with music. Header lines are scanned depending on the field: the
X: field contains a number, the M: and L: fields contain numbers and
operators, all other fields are free text. Body lines are scanned character
by character.

For example::

    >>> from abctune.scanner import Scanner
    >>> for t in Scanner('X:1\nT:Paddy\n|:ab "Am"c2:|'):
    ...     print(t.type.name, repr(t.text))
    ...
    FIELD_NAME 'X'
    NUMBER '1'
    NEWLINE '\n'
    FIELD_NAME 'T'
    STRING 'Paddy'
    NEWLINE '\n'
    START_REPEAT '|:'
    LETTER 'a'
    LETTER 'b'
    SPACE ' '
    CHORD 'Am'
    LETTER 'c'
    NUMBER '2'
    END_REPEAT ':|'
    EOF ''

The scan stops at the first error, the last token then is an ERROR token
with a message, instead of the EOF token.

"""

from parce.util import Dispatcher

from .tokens import Token, TokenType as T


EOF = None      # returned by Scanner.next() past the end of the text

DIGITS = "0123456789"
WHITESPACE = " \t"
LINE_ENDINGS = "\r\n"
ANNOTATION_POSITIONS = "^_<>@"

# compound barlines, checked longest first
COMPOUND_BARLINES = (
    (":||:", T.START_END_REPEATS),
    (":|:", T.START_END_REPEATS),
    ("|]", T.THIN_THICK_DOUBLE_BARLINE),
    ("||", T.THIN_THIN_DOUBLE_BARLINE),
    ("[|", T.THICK_THIN_DOUBLE_BARLINE),
    ("|:", T.START_REPEAT),
    (":|", T.END_REPEAT),
    ("::", T.START_END_REPEATS),
    (".|", T.DOTTED_BARLINE),
)

# single characters in body lines that map directly to a token
BODY_CHARACTERS = {
    'x': T.INVISIBLE_REST,
    'z': T.REST,
    'Z': T.MULTI_MEASURE_REST,
    '^': T.SHARP,
    '=': T.NATURAL,
    '_': T.FLAT,
    '/': T.DIVIDE,
    '|': T.BARLINE,
    '+': T.PLUS,
    '<': T.LESS_THAN,
    '>': T.GREATER_THAN,
    '-': T.MINUS,
    ':': T.COLON,
}

# operators in the M: field
METER_CHARACTERS = {
    '+': T.PLUS,
    '(': T.OPEN_PAREN,
    ')': T.CLOSE_PAREN,
    '/': T.DIVIDE,
}


class Scanner:
    """Scans ``text`` and yields :class:`~.tokens.Token` objects.

    Iterate over the Scanner to get the tokens, or call :meth:`next_token`
    repeatedly. The last token is always of type EOF or ERROR. Call
    :meth:`drain` to stop scanning before the end was reached.

    """
    def __init__(self, text):
        self.text = text
        self.pos = 0            # current position in the text
        self.start = 0          # start position of the pending token
        self.width = 0          # width of the last character read
        self.line = 1           # line number at the current position
        self.start_line = 1     # line number at the start position
        self._tokens = self._run()

    def __iter__(self):
        return self._tokens

    def next_token(self):
        """Return the next token, or None if the scan has ended."""
        return next(self._tokens, None)

    def drain(self):
        """Stop scanning; no tokens will be produced anymore."""
        self._tokens.close()

    def _run(self):
        """Run the state machine, yielding the tokens."""
        state = self.lex_line
        while state:
            state = yield from state()

    ## primitives
    def next(self):
        """Consume and return the next character, or EOF at the end."""
        if self.pos >= len(self.text):
            self.width = 0
            return EOF
        c = self.text[self.pos]
        self.width = 1
        self.pos += 1
        if c == '\n':
            self.line += 1
        return c

    def peek(self):
        """Return the next character, without consuming it."""
        c = self.next()
        self.backup()
        return c

    def backup(self):
        """Step back one character. Can only be called once per next()."""
        self.pos -= self.width
        if self.width and self.text[self.pos] == '\n':
            self.line -= 1
        self.width = 0

    def accept(self, valid):
        """Consume the next character if it is in ``valid``."""
        c = self.next()
        if c is not EOF and c in valid:
            return True
        self.backup()
        return False

    def accept_run(self, valid):
        """Consume a run of characters from ``valid``."""
        while self.accept(valid):
            pass

    def emit(self, token_type):
        """Return a token of the pending text."""
        token = Token(token_type, self.text[self.start:self.pos], self.start, self.start_line)
        self.ignore()
        return token

    def ignore(self):
        """Skip the pending text."""
        self.start = self.pos
        self.start_line = self.line

    def error(self, message, *args):
        """Return an ERROR token with the formatted message."""
        return Token(T.ERROR, message.format(*args), self.start, self.start_line)

    ## helpers
    def ignore_whitespace(self):
        """Skip spaces and tabs."""
        self.accept_run(WHITESPACE)
        self.ignore()

    def consume_to_end_of_line(self):
        """Consume everything up to the next line ending or the end of the text."""
        while True:
            c = self.next()
            if c is EOF or c in LINE_ENDINGS:
                self.backup()
                return

    def consume_to(self, delimiter):
        """Consume up to ``delimiter`` on the same line; return False if not found."""
        while True:
            c = self.next()
            if c == delimiter:
                self.backup()
                return True
            elif c is EOF or c in LINE_ENDINGS:
                self.backup()
                return False

    def accept_line_ending(self):
        """Consume a newline, a carriage return or both; return True if consumed."""
        if self.accept('\r'):
            self.accept('\n')
            return True
        return self.accept('\n')

    def accept_newline(self):
        """Return a NEWLINE token.

        At the end of the text None is returned. If something else than a line
        ending follows, an ERROR token is returned.

        """
        c = self.peek()
        if c is EOF:
            return None
        elif self.accept_line_ending():
            return self.emit(T.NEWLINE)
        return self.error("expected newline, got {!r} at position {}", c, self.pos)

    ## states
    def lex_line(self):
        """Decide whether a header or a body line follows."""
        c = self.peek()
        if c is EOF:
            yield self.emit(T.EOF)
            return None
        elif (c.isalpha() or c == '+') and self.text.startswith(':', self.pos + 1):
            return self.lex_header_line
        return self.lex_body_line

    def lex_next_line(self):
        """Finish a header line."""
        self.ignore_whitespace()
        token = self.accept_newline()
        if token:
            yield token
            if token.type is T.ERROR:
                return None
        return self.lex_line

    def lex_header_line(self):
        """Scan the field name and dispatch on it to scan the value."""
        name = self.next()
        yield self.emit(T.FIELD_NAME)
        self.next()     # the colon
        self.ignore()
        self.ignore_whitespace()
        return (yield from self._header_field(name))

    @Dispatcher
    def _header_field(self, name):
        """Fields not handled specially contain free text."""
        return self.lex_header_string()

    @_header_field('X')
    def lex_header_int(self):
        """The number of the X: field."""
        self.ignore_whitespace()
        self.accept_run(DIGITS)
        yield self.emit(T.NUMBER)
        return self.lex_next_line

    def lex_header_string(self):
        """Free text up to the end of the line."""
        self.consume_to_end_of_line()
        yield self.emit(T.STRING)
        return self.lex_next_line

    @_header_field('M')
    def lex_header_meter(self):
        """The M: field, e.g. ``3/4``, ``2+3/8`` or ``C|``."""
        while True:
            c = self.next()
            if c is EOF or c in LINE_ENDINGS:
                self.backup()
                return self.lex_next_line
            elif c in DIGITS:
                self.accept_run(DIGITS)
                yield self.emit(T.NUMBER)
            elif c in METER_CHARACTERS:
                yield self.emit(METER_CHARACTERS[c])
            elif c in WHITESPACE:
                self.ignore()
            elif c.isalpha():
                self.backup()
                return self.lex_header_string
            elif c == '%':
                # trailing comment
                self.consume_to_end_of_line()
                self.ignore()
            else:
                # other characters carry no meaning in a meter
                self.ignore()

    @_header_field('L')
    def lex_header_note_length(self):
        """The L: field, a fraction, or in old files, a word."""
        while True:
            c = self.next()
            if c is EOF or c in LINE_ENDINGS:
                self.backup()
                return self.lex_next_line
            elif c in DIGITS:
                self.accept_run(DIGITS)
                yield self.emit(T.NUMBER)
            elif c == '/':
                yield self.emit(T.DIVIDE)
            elif c in WHITESPACE:
                self.ignore()
            elif c == '%':
                self.consume_to_end_of_line()
                self.ignore()
            elif c.isalpha():
                self.backup()
                return self.lex_header_string
            else:
                yield self.error("unknown character in note length: {!r} at position {}", c, self.start)
                return None

    def lex_body_line(self):
        """A line of music."""
        while True:
            c = self.peek()
            if c is EOF:
                yield self.emit(T.EOF)
                return None
            elif c in LINE_ENDINGS:
                yield self.accept_newline()
                return self.lex_line
            elif c in DIGITS:
                self.accept_run(DIGITS)
                yield self.emit(T.NUMBER)
                continue
            for text, token_type in COMPOUND_BARLINES:
                if self.text.startswith(text, self.pos):
                    for _ in text:
                        self.next()
                    yield self.emit(token_type)
                    break
            else:
                c = self.next()
                if c == '%':
                    yield self.emit(T.PERCENT)
                    return self.lex_comment
                elif c in WHITESPACE:
                    yield self.emit(T.SPACE)
                elif c in BODY_CHARACTERS:
                    yield self.emit(BODY_CHARACTERS[c])
                elif c.isalpha():
                    yield self.emit(T.LETTER)
                elif c == '\\':
                    # line continuation: skip backslash and line ending
                    self.ignore()
                    if self.peek() is not EOF and not self.accept_line_ending():
                        yield self.error("expected newline after backslash at position {}", self.start)
                        return None
                    self.ignore()
                elif c == '"':
                    self.ignore()
                    return self.lex_chord
                elif c == '[':
                    if not self.accept(DIGITS):
                        yield self.error("unexpected character after '[' at position {}", self.start)
                        return None
                    self.backup()
                    self.ignore()
                    return self.lex_variant
                else:
                    yield self.error("unknown character: {!r} at position {}", c, self.start)
                    return None

    def lex_chord(self):
        """A chord symbol or an annotation, after the opening quote."""
        if self.accept(ANNOTATION_POSITIONS):
            yield self.emit(T.ANNOTATION_POSITION)
            token_type = T.ANNOTATION
        else:
            token_type = T.CHORD
        if not self.consume_to('"'):
            yield self.error("unterminated chord or annotation at position {}", self.start)
            return None
        yield self.emit(token_type)
        self.next()     # the closing quote
        self.ignore()
        return self.lex_body_line

    def lex_variant(self):
        """A variant ending, like ``[1``, ``[1,3`` or ``[1-3``."""
        while True:
            self.accept_run(DIGITS)
            yield self.emit(T.VARIANT_NUMBER)
            if self.accept(','):
                yield self.emit(T.VARIANT_COMMA)
            elif self.accept('-'):
                yield self.emit(T.VARIANT_RANGE)
            else:
                return self.lex_body_line
            if self.peek() is EOF or self.peek() not in DIGITS:
                return self.lex_body_line

    def lex_comment(self):
        """The text after a percent sign."""
        self.consume_to_end_of_line()
        yield self.emit(T.COMMENT)
        token = self.accept_newline()
        if token:
            yield token
        return self.lex_line
