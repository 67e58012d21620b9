"""
Square Connect Configuration Types and Schema
Type-safe configuration object for the client
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


# Fixed host every endpoint path is resolved against
SQUARE_API_HOST = "https://connect.squareup.com"


class ConfigDefaults:
    """Default configuration values"""
    BASE_URL = SQUARE_API_HOST
    EXTENDED_DEBUG_INFO = False
    TIMEOUT = None


# Environment variable mapping
ENV_VAR_MAPPING = {
    "SQUARE_LOCATION_ID": "location_id",
    "SQUARE_ACCESS_TOKEN": "access_token",
    "SQUARE_EXTENDED_DEBUG_INFO": "extended_debug_info",
    "SQUARE_BASE_URL": "base_url",
    "SQUARE_TIMEOUT": "timeout",
}


class ClientConfig(BaseModel):
    """
    Square Connect client configuration

    Immutable once built; one instance belongs to one client.
    """

    location_id: str = Field(
        ...,
        description="Square location ID used to scope most endpoint paths",
        min_length=1
    )
    access_token: str = Field(
        ...,
        description="Access token sent as the bearer credential",
        min_length=1
    )
    extended_debug_info: bool = Field(
        default=ConfigDefaults.EXTENDED_DEBUG_INFO,
        description="Attach raw response bodies to API errors"
    )
    base_url: str = Field(
        default=ConfigDefaults.BASE_URL,
        description="API host"
    )
    timeout: Optional[float] = Field(
        default=ConfigDefaults.TIMEOUT,
        description="Request timeout in seconds, None waits indefinitely",
        gt=0
    )

    model_config = {
        "str_strip_whitespace": True,
        "frozen": True,
    }

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base_url is a valid URL"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be a valid HTTP/HTTPS URL")
        return v.rstrip("/")
