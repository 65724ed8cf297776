"""Data model for the phases of a match.

A match is always in exactly one phase, and each phase carries only the data
that means something in that phase. The phase records below form a closed
union; the match clock holds one of them at a time.
"""

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

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Union

from winkstimer.constants import (
    PHASE_FINISHED,
    PHASE_MAIN_TIME,
    PHASE_PAUSED,
    PHASE_ROUNDS,
)
from winkstimer.models.colour import WinkColour


class Phase(Enum):
    """The phases of a match. The value is the display label."""

    PAUSED = PHASE_PAUSED
    MAIN_TIME = PHASE_MAIN_TIME
    ROUNDS = PHASE_ROUNDS
    FINISHED = PHASE_FINISHED

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Paused:
    """The timer is held.

    Attributes:
        time_remaining: Main time still to be played
    """

    time_remaining: timedelta
    phase = Phase.PAUSED


@dataclass(frozen=True)
class MainTime:
    """The timer is running.

    Attributes:
        end_time: The instant at which main time expires
    """

    end_time: datetime
    phase = Phase.MAIN_TIME


@dataclass(frozen=True)
class Rounds:
    """Main time is over and the closing rounds are being played.

    Attributes:
        current_round: Number of completed rounds, 0 to ROUNDS_LIMIT
        colour_playing: The colour whose turn it is
    """

    current_round: int
    colour_playing: WinkColour
    phase = Phase.ROUNDS


@dataclass(frozen=True)
class Finished:
    """The match is over."""

    phase = Phase.FINISHED


MatchState = Union[Paused, MainTime, Rounds, Finished]
