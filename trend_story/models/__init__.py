from .news_record import NewsRecord
from .keyword_record import KeywordRecord
from .image_record import ImageRecord

__all__ = ["NewsRecord", "KeywordRecord", "ImageRecord"]
