"""MatchSetup data class."""

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

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict

from winkstimer.constants import DEFAULT_TIME_LIMIT_MINUTES
from winkstimer.exceptions import InvalidSetupException


@dataclass(frozen=True)
class MatchSetup:
    """Match setup settings read by the match clock.

    Attributes
    ----------
    time_limit : timedelta
        Length of main time, before the closing rounds start.
    """

    time_limit: timedelta = field(
        default_factory=lambda: timedelta(minutes=DEFAULT_TIME_LIMIT_MINUTES)
    )

    def __post_init__(self):
        if not isinstance(self.time_limit, timedelta):
            raise InvalidSetupException(
                f"Time limit must be a timedelta, got {self.time_limit!r}"
            )
        if self.time_limit <= timedelta(0):
            raise InvalidSetupException(
                f"Time limit must be positive, got {self.time_limit}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize setup to dictionary."""
        return {"time_limit": self.time_limit.total_seconds()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchSetup":
        """Deserialize setup from dictionary."""
        if "time_limit" not in data:
            return cls()
        seconds = data["time_limit"]
        # bool is an int subclass, but True is not a time limit
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            raise InvalidSetupException(f"Invalid time limit: {seconds!r}")
        return cls(time_limit=timedelta(seconds=seconds))
