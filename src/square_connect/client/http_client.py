"""
HTTP transport layer for the Square Connect API
Builds requests, executes them over a pooled session and normalizes
responses and errors. No retries: every failure goes straight back
to the caller.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.filepost import encode_multipart_formdata

from square_connect.config.client_config import ClientConfig
from square_connect.exceptions import ApiError, MalformedResponseError


# Logger for this module
logger = logging.getLogger(__name__)

MULTIPART_BOUNDARY = "BOUNDARY"

# Headers that should be redacted in logs
SENSITIVE_HEADERS = ["authorization", "cookie"]


class HttpMethod(str, Enum):
    """HTTP method types supported"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass
class FormBody:
    """Pre-encoded multipart payload"""
    content: bytes
    content_type: str
    filename: str


@dataclass
class RequestDescriptor:
    """Everything needed to issue one request"""
    method: HttpMethod
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    json_body: Optional[Any] = None
    form_body: Optional[FormBody] = None


def construct_query_string(params: Optional[Mapping[str, Any]]) -> str:
    """
    Build a query string from params in iteration order

    Values are not URL-encoded, so callers must not pass reserved
    characters.

    Example:
        >>> construct_query_string({"begin_time": "2017-01-01", "limit": 5})
        '?begin_time=2017-01-01&limit=5'
    """
    if not params:
        return ""
    return "?" + "&".join(f"{key}={value}" for key, value in params.items())


def encode_form_body(
    field_name: str,
    filename: str,
    content: bytes,
    content_type: str,
    boundary: str = MULTIPART_BOUNDARY,
) -> FormBody:
    """Encode a single file field as multipart/form-data with an explicit boundary"""
    body, multipart_type = encode_multipart_formdata(
        {field_name: (filename, content, content_type)},
        boundary=boundary,
    )
    return FormBody(content=body, content_type=multipart_type, filename=filename)


def normalize_error(
    status_code: int,
    status_message: str,
    body: Optional[str],
    extended_debug_info: bool,
) -> ApiError:
    """
    Turn a non-200 response into an ApiError

    The raw body is only kept when extended_debug_info is enabled.
    """
    return ApiError(
        status_code,
        status_message,
        body if extended_debug_info else None,
    )


def parse_body(body: Any, status_code: int = 200) -> Any:
    """
    Parse a successful response body

    Text is decoded as JSON, anything already structured is returned
    unchanged and an empty body becomes None.

    Raises:
        MalformedResponseError: If the text is not valid JSON
    """
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")

    if not isinstance(body, str):
        return body

    if body.strip() == "":
        return None

    try:
        return json.loads(body)
    except ValueError as e:
        raise MalformedResponseError(
            f"Response with status {status_code} is not valid JSON: {e}",
            status_code=status_code,
            body=body,
        ) from e


def redact_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Copy of headers with credentials masked for logging"""
    return {
        key: "[REDACTED]" if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


class HttpClient:
    """
    HTTP Client for the Square Connect API

    Example:
        >>> config = ClientConfig(location_id="L1", access_token="token")
        >>> client = HttpClient(config)
        >>> descriptor = client.build_request("/v1/me")
        >>> profile = client.execute(descriptor)
    """

    def __init__(self, config: ClientConfig) -> None:
        self.config = config
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with connection pooling"""
        session = requests.Session()

        adapter = HTTPAdapter(
            pool_connections=10,
            pool_maxsize=10,
            max_retries=0,
        )

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def auth_headers(self, accept: str = "application/json") -> Dict[str, str]:
        """Bearer credential plus the accepted response type"""
        return {
            "Authorization": f"Bearer {self.config.access_token}",
            "Accept": accept,
        }

    def build_request(
        self,
        path: str,
        method: HttpMethod = HttpMethod.GET,
        json_body: Optional[Any] = None,
        form_body: Optional[FormBody] = None,
    ) -> RequestDescriptor:
        """
        Build a request descriptor for an API path

        A single leading separator is dropped, so "/v1/me" and "v1/me"
        resolve to the same URL.

        Args:
            path: Endpoint path, optionally with a query string
            method: HTTP method, GET when omitted
            json_body: JSON-serializable payload
            form_body: Multipart payload

        Returns:
            RequestDescriptor with absolute URL and auth headers
        """
        if path.startswith("/"):
            path = path[1:]

        return RequestDescriptor(
            method=HttpMethod(method),
            url=f"{self.config.base_url}/{path}",
            headers=self.auth_headers(),
            json_body=json_body,
            form_body=form_body,
        )

    def send(self, descriptor: RequestDescriptor) -> requests.Response:
        """
        Issue the request and return the raw response

        Transport failures (connection, DNS, timeout) propagate as the
        underlying requests exception.
        """
        headers = dict(descriptor.headers)
        data = None

        if descriptor.form_body is not None:
            data = descriptor.form_body.content
            headers.setdefault("Content-Type", descriptor.form_body.content_type)

        logger.debug(
            f"{descriptor.method.value} {descriptor.url} "
            f"headers={redact_headers(headers)}"
        )

        return self._session.request(
            descriptor.method.value,
            descriptor.url,
            headers=headers,
            json=descriptor.json_body,
            data=data,
            timeout=self.config.timeout,
        )

    def execute(self, descriptor: RequestDescriptor) -> Any:
        """
        Execute a request and normalize the response

        Returns:
            Parsed JSON body of a 200 response

        Raises:
            ApiError: If the status code is anything but 200
            MalformedResponseError: If a 200 body is not valid JSON
            requests.RequestException: On transport failure
        """
        response = self.send(descriptor)

        if response.status_code != 200:
            raise self.normalize_error(response)

        return parse_body(response.text, response.status_code)

    def normalize_error(self, response: requests.Response) -> ApiError:
        """Build the ApiError for a failed response using this client's debug setting"""
        logger.warning(
            f"Square API responded {response.status_code} {response.reason} "
            f"for {response.url}"
        )
        return normalize_error(
            response.status_code,
            response.reason,
            response.text,
            self.config.extended_debug_info,
        )

    def fetch(self, url: str, accept: str = "text/html") -> requests.Response:
        """Authenticated GET against an absolute URL outside the API paths"""
        return self.send(
            RequestDescriptor(
                method=HttpMethod.GET,
                url=url,
                headers=self.auth_headers(accept),
            )
        )

    def fetch_raw(self, url: str) -> bytes:
        """
        Download a resource as raw bytes without credentials

        Raises:
            ApiError: If the download does not return 200
        """
        response = self.send(RequestDescriptor(method=HttpMethod.GET, url=url))

        if response.status_code != 200:
            raise self.normalize_error(response)

        return response.content

    @property
    def base_url(self) -> str:
        """Get base URL"""
        return self.config.base_url

    def close(self) -> None:
        """Close the HTTP session"""
        self._session.close()

    def __enter__(self) -> "HttpClient":
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit"""
        self.close()
