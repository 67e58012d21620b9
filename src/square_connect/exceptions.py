"""Exception classes for the Square Connect client"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class SquareErrorCategory(str, Enum):
    """Square Connect error category codes"""
    API = "API"
    RESPONSE = "RESPONSE"
    CONFIG = "CONFIG"
    UNKNOWN = "UNKNOWN"


class SquareConnectError(Exception):
    """
    Base exception for Square Connect errors

    All errors raised by the client itself extend from this class.
    Transport failures are not wrapped and surface as
    ``requests.RequestException``.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.details = details
        self.timestamp = datetime.now(timezone.utc)
        self.category = self._determine_category(code)

    def _determine_category(self, code: Optional[str]) -> SquareErrorCategory:
        """Determine error category from code"""
        if not code:
            return SquareErrorCategory.UNKNOWN

        if code.startswith("API"):
            return SquareErrorCategory.API
        if code.startswith("RESPONSE"):
            return SquareErrorCategory.RESPONSE
        if code.startswith("CONFIG"):
            return SquareErrorCategory.CONFIG

        return SquareErrorCategory.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "code": self.code,
            "status_code": self.status_code,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def is_category(self, category: SquareErrorCategory) -> bool:
        """Check if error belongs to a category"""
        return self.category == category


class ApiError(SquareConnectError):
    """
    Error for any response whose status code is not 200

    The string form is the JSON-encoded error info, e.g.
    ``{"statusCode": 404, "message": "Not Found"}``. The raw response
    body is only attached when the client runs with extended debug info,
    since Square does not always return a descriptive error body.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        body: Optional[str] = None,
    ) -> None:
        self.message = message
        self.body = body
        super().__init__(
            json.dumps(self.error_info(status_code, message, body)),
            code="API_ERROR",
            status_code=status_code,
        )

    @staticmethod
    def error_info(
        status_code: int, message: str, body: Optional[str]
    ) -> Dict[str, Any]:
        info: Dict[str, Any] = {"statusCode": status_code, "message": message}
        if body is not None:
            info["body"] = body
        return info

    @property
    def has_body(self) -> bool:
        """Whether the raw response body was attached"""
        return self.body is not None


class MalformedResponseError(SquareConnectError):
    """A 200 response whose body could not be parsed as JSON"""

    def __init__(self, message: str, status_code: int, body: str) -> None:
        super().__init__(
            message,
            code="RESPONSE_MALFORMED",
            status_code=status_code,
            details={"body": body[:500]},
        )
        self.body = body


class ConfigError(SquareConnectError):
    """Configuration error"""

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
