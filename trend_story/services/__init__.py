from .date_resolver import DateResolver
from .record_assembler import RecordAssembler
from .trend_query_service import TrendQueryService
from .repository_sync_service import RepositorySyncService

__all__ = ["DateResolver", "RecordAssembler", "TrendQueryService", "RepositorySyncService"]
