from .responses import ImageInfo, NewsRecordResponse, DayRecordsResponse, DateEntry, ErrorResponse

__all__ = ["ImageInfo", "NewsRecordResponse", "DayRecordsResponse", "DateEntry", "ErrorResponse"]
