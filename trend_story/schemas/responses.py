"""Trend Story API response schemas"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ImageInfo(BaseModel):
    file_name: Optional[str] = None
    url: Optional[str] = None


class NewsRecordResponse(BaseModel):
    """A news row with its keyword, image and tags resolved"""
    id: int
    news: Optional[str] = None
    date: Optional[str] = None
    serpapi_id: Optional[int] = None
    image_id: Optional[int] = None

    keywords: Optional[str] = None  # serpapi_data.query
    image: Optional[ImageInfo] = None
    tags: List[str] = Field(default_factory=list)


class DayRecordsResponse(BaseModel):
    """Records for one day; date is omitted when the dataset is empty"""
    date: Optional[str] = None  # yyyy-mm-dd
    records: List[NewsRecordResponse] = Field(default_factory=list)


class DateEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str  # yyyymmdd
    date_with_url: str = Field(alias="dateWithUrl")


class ErrorResponse(BaseModel):
    error: str
    code: int
