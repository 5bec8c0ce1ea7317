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
Meta-information about the abctune package.

This information is used by the abctune module itself and by the packaging
configuration.

"""

name = "abctune"
description = "Read tunes written in the ABC music notation format"
maintainer = "The abctune developers"
version_info = (0, 1, 0)
version = version_string = "{}.{}.{}".format(*version_info)
