from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import NewsRecord, KeywordRecord, ImageRecord


class TrendStore(ABC):
    """Read-only access to the trend dataset."""

    @abstractmethod
    def get_latest_date(self) -> Optional[str]:
        """
        Get the greatest full `date` value by string ordering.

        Returns:
            The raw date string, or None when no row carries a date
        """
        pass

    @abstractmethod
    def list_dates(self) -> List[str]:
        """
        Get every non-null `date` value ordered by ascending row id.

        Returns:
            Raw date strings, duplicates included
        """
        pass

    @abstractmethod
    def get_news_for_day(self, day: str) -> List[NewsRecord]:
        """
        Get the news rows whose date starts with the given day.

        Args:
            day: Day string in yyyy-mm-dd form

        Returns:
            News rows ordered by ascending id
        """
        pass

    @abstractmethod
    def get_keyword(self, keyword_id: int) -> Optional[KeywordRecord]:
        pass

    @abstractmethod
    def get_image(self, image_id: int) -> Optional[ImageRecord]:
        pass
