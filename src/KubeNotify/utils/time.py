# ============================================================================
# KubeNotify - Time Utilities
#
# Purpose: Clock source and date formatting for partitioned index names
# Inputs: datetime values
# Outputs: Timestamps, index suffixes
# Dependencies: datetime
# Usage: suffix = format_index_suffix(local_now())
#
# Changelog:
#   2026-10-05: Initial time utilities
#   2026-10-08: Added Clock alias and FixedClock for deterministic tests
# ============================================================================

from datetime import datetime
from typing import Callable

# Day-month-year, e.g. "07-03-2024"
INDEX_SUFFIX_FORMAT = "%d-%m-%Y"

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Current time on the local/server clock (no timezone conversion)."""
    return datetime.now()


def format_index_suffix(moment: datetime) -> str:
    """Format a datetime as the date suffix appended to index names."""
    return moment.strftime(INDEX_SUFFIX_FORMAT)


class FixedClock:
    """Clock that always returns the same instant."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment
