import pytest
from typing import List, Optional

from trend_story.models import NewsRecord, KeywordRecord, ImageRecord
from trend_story.repositories.base import TrendStore

DOMAIN = "https://trend-story-api.oopus.info"


class InMemoryTrendStore(TrendStore):
    """TrendStore over plain lists; rows are handed back in insertion order."""

    def __init__(self, news=None, keywords=None, images=None):
        self.news: List[NewsRecord] = list(news or [])
        self.keywords = {k.id: k for k in (keywords or [])}
        self.images = {i.id: i for i in (images or [])}
        self.keyword_lookups: List[int] = []
        self.image_lookups: List[int] = []

    def get_latest_date(self) -> Optional[str]:
        dates = [row.date for row in self.news if row.date is not None]
        return max(dates) if dates else None

    def list_dates(self) -> List[str]:
        ordered = sorted(self.news, key=lambda row: row.id)
        return [row.date for row in ordered if row.date is not None]

    def get_news_for_day(self, day: str) -> List[NewsRecord]:
        rows = [row for row in self.news if row.date is not None and row.date[:10] == day]
        return sorted(rows, key=lambda row: row.id)

    def get_keyword(self, keyword_id: int) -> Optional[KeywordRecord]:
        self.keyword_lookups.append(keyword_id)
        return self.keywords.get(keyword_id)

    def get_image(self, image_id: int) -> Optional[ImageRecord]:
        self.image_lookups.append(image_id)
        return self.images.get(image_id)


def sample_keywords():
    return [
        KeywordRecord(id=1, query="nyc marathon", categories="sport-Running|city-NYC|event-Running"),
        KeywordRecord(id=2, query="solar eclipse", categories=None),
    ]


def sample_images():
    return [
        ImageRecord(id=1, file_name="photo_nyc_001.jpg"),
        ImageRecord(id=2, file_name="banner.png"),
    ]


def sample_news():
    return [
        NewsRecord(id=1, news="Old story", date="2024-01-14 08:00:00", serpapi_id=2, image_id=None),
        NewsRecord(id=2, news="Marathon", date="2024-01-15 09:00:00", serpapi_id=1, image_id=1),
        NewsRecord(id=3, news="Eclipse", date="2024-01-15 10:30:00", serpapi_id=99, image_id=2),
        NewsRecord(id=4, news="Plain", date="2024-01-15", serpapi_id=None, image_id=None),
        NewsRecord(id=5, news="Backfilled", date="2024-01-13 12:00:00", serpapi_id=None, image_id=42),
        NewsRecord(id=6, news=None, date=None, serpapi_id=None, image_id=None),
    ]


@pytest.fixture
def domain():
    return DOMAIN


@pytest.fixture
def fake_store():
    return InMemoryTrendStore(news=sample_news(), keywords=sample_keywords(), images=sample_images())


@pytest.fixture
def empty_store():
    return InMemoryTrendStore()


@pytest.fixture
def test_engine():
    from sqlalchemy import create_engine
    from sqlalchemy.pool import StaticPool
    import trend_story.models  # noqa: F401  registers tables on Base
    from trend_story.core.database import Base

    # Use in-memory SQLite for tests
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def test_db(test_engine):
    from sqlalchemy.orm import sessionmaker

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def seeded_db(test_db):
    test_db.add_all(sample_keywords() + sample_images() + sample_news())
    test_db.commit()
    return test_db


def _client_for(db):
    from httpx import AsyncClient, ASGITransport
    from trend_story.main import app
    from trend_story.core.database import get_db

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    return app, AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
async def async_client(seeded_db):
    app, client = _client_for(seeded_db)
    async with client as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def empty_client(test_db):
    app, client = _client_for(test_db)
    async with client as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def store_factory():
    return InMemoryTrendStore
