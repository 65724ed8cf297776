"""The four wink colours and their turn order."""

# Winks Timer
# Copyright (C) 2025  Winks Timer developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from enum import Enum
from typing import Any, Dict

from winkstimer.constants import COLOUR_BLUE, COLOUR_GREEN, COLOUR_RED, COLOUR_YELLOW
from winkstimer.exceptions import UnknownColourError


class WinkColour(Enum):
    """One of the four colours in a game of winks.

    Members are singletons, so a colour that has been round-tripped through
    its name compares equal to (and is identical to) the original.

    Turn order is Yellow, Blue, Green, Red, then back to Yellow.
    """

    YELLOW = COLOUR_YELLOW
    BLUE = COLOUR_BLUE
    GREEN = COLOUR_GREEN
    RED = COLOUR_RED

    def __str__(self) -> str:
        return self.value

    def next(self) -> "WinkColour":
        """Return the colour that plays after this one."""
        return _NEXT_COLOUR[self]

    def to_name(self) -> str:
        """Return the canonical lowercase name of this colour."""
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "WinkColour":
        """Look up a colour by its canonical name.

        Args:
            name: One of "yellow", "blue", "green" or "red". Matching is exact.

        Returns:
            The matching colour.

        Raises:
            UnknownColourError: If name is not a canonical colour name.
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownColourError(name) from None

    @classmethod
    def canonicalize(cls, colour: Any) -> "WinkColour":
        """Return the canonical colour for anything that represents one.

        Accepts a WinkColour or any value whose string form is a canonical
        colour name (for example a name read back from storage).
        """
        if isinstance(colour, cls):
            return colour
        return cls.from_name(str(colour))


_NEXT_COLOUR: Dict[WinkColour, WinkColour] = {
    WinkColour.YELLOW: WinkColour.BLUE,
    WinkColour.BLUE: WinkColour.GREEN,
    WinkColour.GREEN: WinkColour.RED,
    WinkColour.RED: WinkColour.YELLOW,
}
