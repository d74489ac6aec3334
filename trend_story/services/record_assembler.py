"""
Record Assembler
Turns normalized news rows into nested API records:
- resolves the optional serpapi keyword row
- resolves the optional image row and builds its public URL
- expands serpapi categories into deduplicated tags
"""

from typing import List, Optional

from ..models import NewsRecord, KeywordRecord
from ..repositories.base import TrendStore
from ..schemas.responses import ImageInfo, NewsRecordResponse
from ..utils.tag_utils import expand_tags
from ..utils.url_utils import build_image_url


class RecordAssembler:

    def __init__(self, store: TrendStore, domain: str, tags_enabled: bool = True):
        self.store = store
        self.domain = domain
        self.tags_enabled = tags_enabled

    def assemble(self, rows: List[NewsRecord]) -> List[NewsRecordResponse]:
        ordered = sorted(rows, key=lambda row: row.id)
        return [self.assemble_one(row) for row in ordered]

    def assemble_one(self, row: NewsRecord) -> NewsRecordResponse:
        keyword = self._lookup_keyword(row.serpapi_id)

        return NewsRecordResponse(
            id=row.id,
            news=row.news,
            date=row.date,
            serpapi_id=row.serpapi_id,
            image_id=row.image_id,
            keywords=keyword.query if keyword else None,
            image=self._build_image(row.image_id),
            tags=self._build_tags(keyword)
        )

    def _lookup_keyword(self, serpapi_id: Optional[int]) -> Optional[KeywordRecord]:
        if serpapi_id is None:
            return None
        return self.store.get_keyword(serpapi_id)

    def _build_image(self, image_id: Optional[int]) -> Optional[ImageInfo]:
        if image_id is None:
            return None

        image = self.store.get_image(image_id)
        if not image or image.file_name is None:
            return None

        return ImageInfo(
            file_name=image.file_name,
            url=build_image_url(self.domain, image.file_name)
        )

    def _build_tags(self, keyword: Optional[KeywordRecord]) -> List[str]:
        if not self.tags_enabled or keyword is None:
            return []
        return expand_tags(keyword.categories)
