from typing import Optional, Dict, Any


class TrendStoryError(Exception):
    status_code = 500

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class StoreUnavailableError(TrendStoryError):
    status_code = 500
    public_message = "Database Error"


class ValidationError(TrendStoryError):
    status_code = 400


class InvalidDateFormatError(ValidationError):
    def __init__(self, value: str):
        super().__init__(
            message=f"Invalid date format '{value}', expected yyyymmdd",
            error_code="INVALID_DATE_FORMAT",
            details={"date": value}
        )


class NoDataFoundError(TrendStoryError):
    status_code = 404

    def __init__(self, day: str):
        super().__init__(
            message=f"No data found for date {day}",
            error_code="NO_DATA_FOUND",
            details={"date": day}
        )
