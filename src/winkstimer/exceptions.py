"""Exceptions for use in Winks Timer"""

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

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from winkstimer.models.match_state import Phase


# ========== Base Application Exception ==========


class WinksTimerException(Exception):
    """Base exception for all Winks Timer errors.

    All custom exceptions in the package inherit from this class, so every
    package-specific error can be caught with a single except clause.
    """

    pass


# ========== Match Exceptions ==========


class MatchException(WinksTimerException):
    """Base exception for match-state errors."""

    pass


class IllegalStateError(MatchException):
    """Raised when a match operation is invoked in the wrong phase.

    Attributes
    ----------
    expected : Phase
        The phase the operation requires.
    actual : Phase
        The phase the match was in when the operation was attempted.
    """

    def __init__(self, expected: "Phase", actual: "Phase"):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Illegal game state. Expected {expected} but currently {actual}"
        )


# ========== Colour Exceptions ==========


class ColourException(WinksTimerException):
    """Base exception for wink colour errors."""

    pass


class UnknownColourError(ColourException, ValueError):
    """Raised when text does not name one of the four wink colours."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Unknown wink colour {name}")


# ========== Configuration Exceptions ==========


class ConfigurationException(WinksTimerException):
    """Base exception for configuration errors."""

    pass


class InvalidSetupException(ConfigurationException, ValueError):
    """Raised when match setup data is invalid."""

    pass
