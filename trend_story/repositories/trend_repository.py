from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import StoreUnavailableError
from ..models import NewsRecord, KeywordRecord, ImageRecord
from ..utils.date_utils import DAY_LENGTH
from .base import TrendStore


class TrendRepository(TrendStore):
    def __init__(self, session: Session):
        self.session = session

    def get_latest_date(self) -> Optional[str]:
        try:
            return self.session.query(NewsRecord.date).filter(
                NewsRecord.date.isnot(None)
            ).order_by(NewsRecord.date.desc()).limit(1).scalar()
        except SQLAlchemyError as e:
            raise self._store_error("get_latest_date", e)

    def list_dates(self) -> List[str]:
        try:
            rows = self.session.query(NewsRecord.date).filter(
                NewsRecord.date.isnot(None)
            ).order_by(NewsRecord.id.asc()).all()
        except SQLAlchemyError as e:
            raise self._store_error("list_dates", e)
        return [row.date for row in rows]

    def get_news_for_day(self, day: str) -> List[NewsRecord]:
        try:
            return self.session.query(NewsRecord).filter(
                func.substr(NewsRecord.date, 1, DAY_LENGTH) == day
            ).order_by(NewsRecord.id.asc()).all()
        except SQLAlchemyError as e:
            raise self._store_error("get_news_for_day", e)

    def get_keyword(self, keyword_id: int) -> Optional[KeywordRecord]:
        try:
            return self.session.query(KeywordRecord).filter(KeywordRecord.id == keyword_id).first()
        except SQLAlchemyError as e:
            raise self._store_error("get_keyword", e)

    def get_image(self, image_id: int) -> Optional[ImageRecord]:
        try:
            return self.session.query(ImageRecord).filter(ImageRecord.id == image_id).first()
        except SQLAlchemyError as e:
            raise self._store_error("get_image", e)

    @staticmethod
    def _store_error(operation: str, error: SQLAlchemyError) -> StoreUnavailableError:
        return StoreUnavailableError(
            f"Failed to run {operation}: {error}",
            error_code="STORE_UNAVAILABLE",
            details={"operation": operation}
        )
