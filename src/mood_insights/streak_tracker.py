"""
Check-in Streak Tracking.

Computes the next consecutive-day streak from the stored state and
today's date. The caller owns persistence and must serialize updates
to the same stored state.
"""

import logging
from datetime import date, datetime
from typing import Optional, Union

from .models import StreakState, as_calendar_date

logger = logging.getLogger(__name__)


class StreakTracker:
    """
    Consecutive-day streak rules.

    Gaps are counted in calendar days, so two check-ins late on one day
    and early on the next count as consecutive.
    """

    def days_between(self, last: Union[date, datetime], today: Union[date, datetime]) -> int:
        """Calendar-day difference from last to today."""
        return (as_calendar_date(today) - as_calendar_date(last)).days

    def record_check_in(
        self,
        state: Optional[StreakState],
        today: Union[date, datetime],
    ) -> StreakState:
        """
        Apply one check-in to the streak counters.

        Args:
            state: Previously stored state (None for a new user)
            today: Date of this check-in

        Returns:
            New StreakState; the input is not modified
        """
        state = state or StreakState()
        today = as_calendar_date(today)
        current = state.current_streak
        longest = state.longest_streak

        if state.last_check_in_date is None:
            current = 1
            longest = max(longest, 1)
        else:
            gap = self.days_between(state.last_check_in_date, today)

            if gap == 0:
                pass
            elif gap == 1:
                current += 1
                longest = max(longest, current)
            else:
                if gap < 0:
                    logger.warning(
                        f"[STREAK] Check-in date {today} is {-gap} day(s) before "
                        f"last check-in {state.last_check_in_date}; resetting streak"
                    )
                current = 1

        # Stored state may predate the longest >= current invariant
        longest = max(longest, current)

        updated = state.copy_with(
            current_streak=current,
            longest_streak=longest,
            last_check_in_date=today,
        )

        logger.info(
            f"[STREAK] Streak updated: current={updated.current_streak}, "
            f"longest={updated.longest_streak}"
        )
        return updated
