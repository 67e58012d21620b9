"""
Square Connect client for Python

Main entry point for the package
"""

from square_connect.client import SquareClient
from square_connect.exceptions import (
    SquareConnectError,
    SquareErrorCategory,
    ApiError,
    MalformedResponseError,
    ConfigError,
)

# HTTP Client
from square_connect.client import (
    HttpClient,
    HttpMethod,
    FormBody,
    RequestDescriptor,
    construct_query_string,
)

# Configuration
from square_connect.config import (
    ClientConfig,
    ConfigLoader,
    ConfigDefaults,
    ENV_VAR_MAPPING,
    SQUARE_API_HOST,
)

# Models
from square_connect.models import ReceiptInfo

__version__ = "0.1.0"

__all__ = [
    # Client
    "SquareClient",
    # HTTP Client
    "HttpClient",
    "HttpMethod",
    "FormBody",
    "RequestDescriptor",
    "construct_query_string",
    # Exceptions
    "SquareConnectError",
    "SquareErrorCategory",
    "ApiError",
    "MalformedResponseError",
    "ConfigError",
    # Configuration
    "ClientConfig",
    "ConfigLoader",
    "ConfigDefaults",
    "ENV_VAR_MAPPING",
    "SQUARE_API_HOST",
    # Models
    "ReceiptInfo",
]
