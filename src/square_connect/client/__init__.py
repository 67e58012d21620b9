"""
HTTP Client module for the Square Connect client
"""

from square_connect.client.square_client import SquareClient, ResultCallback
from square_connect.client.http_client import (
    HttpClient,
    HttpMethod,
    FormBody,
    RequestDescriptor,
    construct_query_string,
    encode_form_body,
    normalize_error,
    parse_body,
)

__all__ = [
    "SquareClient",
    "ResultCallback",
    "HttpClient",
    "HttpMethod",
    "FormBody",
    "RequestDescriptor",
    "construct_query_string",
    "encode_form_body",
    "normalize_error",
    "parse_body",
]
