from fastapi import Depends
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..core.database import get_db
from ..repositories.trend_repository import TrendRepository
from ..services.trend_query_service import TrendQueryService


def get_trend_repository(db: Session = Depends(get_db)) -> TrendRepository:
    return TrendRepository(db)


def get_trend_query_service(
    repo: TrendRepository = Depends(get_trend_repository),
    settings: Settings = Depends(get_settings)
) -> TrendQueryService:
    return TrendQueryService(repo, domain=settings.domain, tags_enabled=settings.tags_enabled)
