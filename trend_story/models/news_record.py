from sqlalchemy import Column, Integer, Text

from ..core.database import Base


class NewsRecord(Base):
    """A daily news item written by the ingestion pipeline."""
    __tablename__ = "main_news_data"

    id = Column(Integer, primary_key=True, autoincrement=True)
    news = Column(Text)
    date = Column(Text)  # yyyy-mm-dd[...], compared as a string

    serpapi_id = Column(Integer)  # serpapi_data.id, not enforced
    image_id = Column(Integer)  # image_data.id, not enforced
