"""
Read-only Trend Query Service for API endpoints
Resolves which day a request targets and assembles its records
"""

from typing import List

import structlog

from ..exceptions import NoDataFoundError
from ..repositories.base import TrendStore
from ..schemas.responses import DayRecordsResponse, DateEntry
from ..utils.date_utils import parse_compact_date
from ..utils.url_utils import build_date_url
from .date_resolver import DateResolver
from .record_assembler import RecordAssembler

logger = structlog.get_logger(__name__)


class TrendQueryService:

    def __init__(self, store: TrendStore, domain: str, tags_enabled: bool = True):
        self.store = store
        self.domain = domain
        self.date_resolver = DateResolver(store)
        self.assembler = RecordAssembler(store, domain, tags_enabled=tags_enabled)

    def get_latest(self) -> DayRecordsResponse:
        """
        Get every record of the most recent day.

        An empty dataset is a valid answer: no date and no records.
        """
        latest_day = self.date_resolver.resolve_latest_day()
        if latest_day is None:
            logger.info("No latest day found, dataset is empty")
            return DayRecordsResponse(date=None, records=[])

        rows = self.store.get_news_for_day(latest_day)
        return DayRecordsResponse(date=latest_day, records=self.assembler.assemble(rows))

    def get_by_date(self, value: str) -> DayRecordsResponse:
        """
        Get every record of a yyyymmdd day.

        Raises:
            InvalidDateFormatError: value is not exactly eight digits
            NoDataFoundError: no row falls on that day
        """
        day = parse_compact_date(value)
        rows = self.store.get_news_for_day(day)
        if not rows:
            raise NoDataFoundError(day)

        return DayRecordsResponse(date=day, records=self.assembler.assemble(rows))

    def get_all_dates(self) -> List[DateEntry]:
        return [
            DateEntry(date=day, date_with_url=build_date_url(self.domain, day))
            for day in self.date_resolver.list_distinct_days()
        ]
