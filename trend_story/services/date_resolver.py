from typing import List, Optional

from ..repositories.base import TrendStore
from ..utils.date_utils import compact_day, is_valid_day, truncate_to_day


class DateResolver:
    """Derives day keys from the raw `date` column"""

    def __init__(self, store: TrendStore):
        self.store = store

    def resolve_latest_day(self) -> Optional[str]:
        # Greatest full date string first, then truncated; a malformed date that
        # sorts highest wins here as well
        return truncate_to_day(self.store.get_latest_date())

    def list_distinct_days(self) -> List[str]:
        """
        Compact yyyymmdd days in order of first appearance by row id.

        The listing follows insertion order, not date order.
        """
        days = []
        seen = set()
        for raw_date in self.store.list_dates():
            day = truncate_to_day(raw_date)
            if not is_valid_day(day):
                continue
            compact = compact_day(day)
            if compact in seen:
                continue
            seen.add(compact)
            days.append(compact)
        return days
