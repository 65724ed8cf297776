"""Shared helpers for Winks Timer."""

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

import logging
import math
from datetime import timedelta

from dateutil.relativedelta import relativedelta

from winkstimer.constants import LOG_FORMAT

PACKAGE_LOGGER_NAME = "winkstimer"


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for a module of this package.

    The package logger gets a single stream handler the first time this is
    called; module loggers propagate to it. The level is left to the
    embedding application.

    Args:
        name: Logger name, normally the module's __name__

    Returns:
        The configured logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return logging.getLogger(name)


def format_clock(duration: timedelta) -> str:
    """Format a countdown duration for display.

    Partial seconds round up, so "0:00" is only shown once time has run out.
    Negative durations show as "0:00".

    Example:
        >>> format_clock(timedelta(minutes=4, seconds=5))
        '4:05'
        >>> format_clock(timedelta(hours=1, minutes=2, seconds=3))
        '1:02:03'
    """
    seconds = max(0, math.ceil(duration.total_seconds()))
    parts = relativedelta(seconds=seconds)
    hours = parts.days * 24 + parts.hours
    if hours:
        return f"{hours}:{parts.minutes:02d}:{parts.seconds:02d}"
    return f"{parts.minutes}:{parts.seconds:02d}"
