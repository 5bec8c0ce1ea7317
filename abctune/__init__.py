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
The abctune module.

Reads text in the ABC music notation format and returns a list of
:class:`~.tune.Tune` objects. The work is done in two steps: the
:class:`~.scanner.Scanner` turns the text into tokens, and the
:class:`~.parser.Parser` builds the tunes from the tokens.

For example::

    >>> import abctune
    >>> tunes = abctune.parse("X:1\\nT:The Kesh\\nR:Jig\\nM:6/8\\nK:G\\n")
    >>> tunes[0].title, tunes[0].rhythm
    ('The Kesh', 'Jig')

"""

import logging

from .pkginfo import version, version_string
from .parser import Parser
from .scanner import Scanner


__all__ = ('load', 'parse', 'read', 'scan', 'version', 'version_string')


logger = logging.getLogger(__name__)


def scan(text):
    """Return a :class:`~.scanner.Scanner` yielding the tokens of ``text``."""
    return Scanner(text)


def parse(text):
    """Parse ``text`` and return a list of :class:`~.tune.Tune` objects.

    Raises :class:`~.error.ScanError` or :class:`~.error.ParseError` if the
    text is not valid.

    """
    return Parser(Scanner(text)).parse()


def read(stream, encoding='utf-8', errors='strict'):
    """Read all text from ``stream`` and return a list of tunes.

    The stream may be opened in binary or text mode. Bytes are decoded using
    ``encoding`` and ``errors``, which are passed to :meth:`bytes.decode`.

    """
    text = stream.read()
    if isinstance(text, bytes):
        text = text.decode(encoding, errors)
    return parse(text)


def load(filename, encoding='utf-8', errors='strict'):
    """Convenience function to read the tunes from ``filename``.

    The ``encoding`` and ``errors`` arguments are used to decode the file
    contents. Raises :class:`OSError` if the file can't be read.

    """
    logger.debug("loading %s", filename)
    with open(filename, 'rb') as f:
        return read(f, encoding, errors)
