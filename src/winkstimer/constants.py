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

# --- Constants ---

# Closing rounds: the match ends when the squidge-off winner is due to play
# again after this many completed rounds.
ROUNDS_LIMIT = 5

# Time limit used when a setup does not give one (singles)
DEFAULT_TIME_LIMIT_MINUTES = 25

# Wink colour names (for display and serialization)
COLOUR_YELLOW = "yellow"
COLOUR_BLUE = "blue"
COLOUR_GREEN = "green"
COLOUR_RED = "red"

# Match phase labels (for display)
PHASE_PAUSED = "Paused"
PHASE_MAIN_TIME = "Main time"
PHASE_ROUNDS = "In rounds"
PHASE_FINISHED = "Finished"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
