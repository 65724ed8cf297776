"""Match clock for a game of winks.

This module tracks the live state of one match: main time (running or
paused), the closing rounds that follow it, and the end of the match.
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

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional, Union

from winkstimer.constants import ROUNDS_LIMIT
from winkstimer.exceptions import IllegalStateError
from winkstimer.models.colour import WinkColour
from winkstimer.models.match_setup import MatchSetup
from winkstimer.models.match_state import (
    Finished,
    MainTime,
    MatchState,
    Paused,
    Phase,
    Rounds,
)
from winkstimer.utils import setup_logger

logger = setup_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: the current time in UTC."""
    return datetime.now(timezone.utc)


class MatchClock:
    """Represents the current state during play of a game of winks.

    The match starts paused with the setup's full time limit banked. The
    driver (UI or timer) starts and pauses main time, reports when it has
    run out, reports each shot played during the closing rounds, and reports
    any other end of the match (pot-out, Thorpe's ring, interference).

    Every operation checks the phase first and raises IllegalStateError
    without changing anything if the match is in the wrong phase.

    Attributes:
        setup: The setup of the match
        squidge_off_winner: The colour that won the squidge-off
        state: The current phase record (Paused, MainTime, Rounds or Finished)
    """

    def __init__(
        self,
        setup: MatchSetup,
        squidge_off_winner: Union[WinkColour, str],
        clock: Optional[Clock] = None,
    ):
        """Create a paused match clock.

        Args:
            setup: Match setup, read once for its time limit
            squidge_off_winner: Colour that won the squidge-off
            clock: Zero-argument callable returning the current time
                (defaults to utc_now)
        """
        self.setup = setup
        self.squidge_off_winner = WinkColour.canonicalize(squidge_off_winner)
        self._clock = clock or utc_now
        self.state: MatchState = Paused(time_remaining=setup.time_limit)
        logger.info(
            "New match: %s to play, squidge-off won by %s",
            setup.time_limit,
            self.squidge_off_winner,
        )

    # ========== Phase fields ==========

    @property
    def phase(self) -> Phase:
        """The current phase of the match."""
        return self.state.phase

    @property
    def time_remaining(self) -> Optional[timedelta]:
        """Main time left to play, if paused."""
        if isinstance(self.state, Paused):
            return self.state.time_remaining
        return None

    @property
    def end_time(self) -> Optional[datetime]:
        """When main time will expire, if it is running."""
        if isinstance(self.state, MainTime):
            return self.state.end_time
        return None

    @property
    def current_round(self) -> Optional[int]:
        """Completed closing rounds, if in rounds."""
        if isinstance(self.state, Rounds):
            return self.state.current_round
        return None

    @property
    def colour_playing(self) -> Optional[WinkColour]:
        """The colour whose turn it is, if in rounds."""
        if isinstance(self.state, Rounds):
            return self.state.colour_playing
        return None

    @property
    def is_finished(self) -> bool:
        """Whether the match is over."""
        return self.phase is Phase.FINISHED

    # ========== Operations ==========

    def _verify_phase(self, expected: Phase) -> None:
        if self.phase is not expected:
            logger.warning(
                "Illegal game state. Expected %s but currently %s",
                expected,
                self.phase,
            )
            raise IllegalStateError(expected, self.phase)

    def start(self) -> None:
        """Start the timer.

        Raises:
            IllegalStateError: If the match is not paused
        """
        self._verify_phase(Phase.PAUSED)
        end_time = self._clock() + self.state.time_remaining
        self.state = MainTime(end_time=end_time)
        logger.info("Main time started, expires at %s", end_time.isoformat())

    def pause(self) -> None:
        """Pause the timer.

        Raises:
            IllegalStateError: If main time is not running
        """
        self._verify_phase(Phase.MAIN_TIME)
        time_remaining = self.state.end_time - self._clock()
        self.state = Paused(time_remaining=time_remaining)
        logger.info("Main time paused with %s remaining", time_remaining)

    def time_expired(self, colour_playing: Union[WinkColour, str]) -> None:
        """Handle main time running out.

        Round counting starts at 0 with the given colour, then one shot is
        recorded straight away for that colour.

        Args:
            colour_playing: The colour who is playing, or who just completed
                a turn, when time expired

        Raises:
            IllegalStateError: If main time is not running
            UnknownColourError: If colour_playing does not name a colour
        """
        self._verify_phase(Phase.MAIN_TIME)
        colour = WinkColour.canonicalize(colour_playing)
        self.state = Rounds(current_round=0, colour_playing=colour)
        logger.info("Time expired with %s playing, starting rounds", colour)
        self._advance_round()

    def shot_played(self) -> None:
        """Record a shot being played during the closing rounds.

        Raises:
            IllegalStateError: If the match is not in rounds
        """
        self._verify_phase(Phase.ROUNDS)
        self._advance_round()

    def game_finished(self) -> None:
        """The game finished.

        This could be the end of rounds, a pot-out, Thorpe's ring, or a
        deliberate interference with the winks. Allowed in any phase.
        """
        previous = self.phase
        self.state = Finished()
        logger.info("Match finished (was %s)", previous)

    def _advance_round(self) -> None:
        current_round = self.state.current_round
        colour = self.state.colour_playing

        # The squidge-off winner coming round again completes a round
        if colour == self.squidge_off_winner:
            if current_round == ROUNDS_LIMIT:
                self.game_finished()
                return
            current_round += 1

        self.state = Rounds(current_round=current_round, colour_playing=colour.next())
        logger.debug(
            "Round %d, %s to play", current_round, self.state.colour_playing
        )

    # ========== Reading the clock ==========

    def time_left(self, now: Optional[datetime] = None) -> Optional[timedelta]:
        """Main time still to play, never less than zero.

        This only reads the clock: reaching zero does not change phase.

        Args:
            now: Time to measure against (defaults to the match clock)

        Returns:
            The remaining time while paused or running, otherwise None
        """
        if isinstance(self.state, Paused):
            return max(self.state.time_remaining, timedelta(0))
        if isinstance(self.state, MainTime):
            if now is None:
                now = self._clock()
            return max(self.state.end_time - now, timedelta(0))
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the match for display or transport.

        Colours are written as their names; fields that do not belong to the
        current phase are None.
        """
        time_remaining = self.time_remaining
        end_time = self.end_time
        colour_playing = self.colour_playing
        return {
            "phase": self.phase.value,
            "squidge_off_winner": self.squidge_off_winner.to_name(),
            "time_remaining": (
                time_remaining.total_seconds() if time_remaining is not None else None
            ),
            "end_time": end_time.isoformat() if end_time is not None else None,
            "current_round": self.current_round,
            "colour_playing": (
                colour_playing.to_name() if colour_playing is not None else None
            ),
        }

    def __repr__(self) -> str:
        return (
            f"MatchClock({self.state!r}, "
            f"squidge_off_winner={self.squidge_off_winner})"
        )
