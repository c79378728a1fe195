"""
Day index construction for the attendance export
"""

import logging

logger = logging.getLogger(__name__)

DEFAULT_DAY_INDEX = (1,)


class DayIndexBuilder:
    """Derives the ordered list of day numbers covered by an export"""

    @staticmethod
    def build(events, scope=None):
        """Distinct day numbers in ascending order, or [1] when there are none"""
        days = sorted({event.day_number for event in events})
        if not days:
            scope_text = scope.describe() if scope is not None else 'unknown scope'
            logger.warning(f"No attendance days found for {scope_text}, defaulting to Day 1")
            return list(DEFAULT_DAY_INDEX)
        return days
