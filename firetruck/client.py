"""
FireTruck API v1 client

Handles all interactions with the FireTruck API:
- API key and header configuration
- Request building and sending
- Response normalization and error handling
"""

from collections.abc import Mapping
from typing import Any

import requests

from .config import ClientConfig, Config
from .exceptions import InvalidArgument, ResponseException, TransportError
from .http_client import HttpClient, default_http_client
from .logging_config import get_module_logger
from .request_builder import HttpMethod, build_request
from .response import ApiResponse, normalize_response
from .result import Err, Ok, Result

logger = get_module_logger("client")


def _expect(value: Any, expected: type, setter: str) -> None:
    """Raise InvalidArgument unless value is an instance of expected"""
    if not isinstance(value, expected):
        raise InvalidArgument(
            f"{setter}: expects a {expected.__name__} argument; "
            f'received "{type(value).__name__}"'
        )


class Client:
    """
    Client for the FireTruck REST API

    Every request carries the API key as the ``apikey`` query parameter and
    the configured headers. Responses other than HTTP 200 raise
    ResponseException with the decoded response attached.

    Example:
        >>> client = Client("my-api-key")
        >>> client.get("domains/5791c9ef0f9d1f0001bdb56a").body
    """

    def __init__(
        self,
        api_key: str,
        client_config: ClientConfig | None = None,
        http_client: HttpClient | None = None,
        config_obj: Config | None = None,
    ):
        """
        Initialize FireTruck client

        Args:
            api_key: FireTruck API key
            client_config: Complete client settings (built from config_obj if None)
            http_client: HTTP client for making requests (uses default if None)
            config_obj: Config object used for defaults (uses global config if None)

        Raises:
            InvalidArgument: If api_key is not a string
        """
        _expect(api_key, str, "Client")
        if client_config is None:
            client_config = ClientConfig.from_config(api_key, config_obj)
        self._config = client_config.with_changes(api_key=api_key)
        self.http_client = http_client or default_http_client

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_key(self) -> str:
        return self._config.api_key

    def set_api_key(self, api_key: str) -> None:
        _expect(api_key, str, "set_api_key")
        self._config = self._config.with_changes(api_key=api_key)

    @property
    def api_version(self) -> str:
        return self._config.api_version

    def set_api_version(self, api_version: str) -> None:
        _expect(api_version, str, "set_api_version")
        self._config = self._config.with_changes(api_version=api_version)

    @property
    def api_url(self) -> str:
        """API URL including the version, e.g. https://api.firetruck.io/v1"""
        return self._config.api_url

    def get_headers(self, key: str | None = None) -> Any:
        """
        Return all configured headers, or a single header value

        Args:
            key: Optional header name

        Returns:
            Copy of the header mapping, or the value for key (None when unset)
        """
        if key is None:
            return dict(self._config.headers)
        _expect(key, str, "get_headers")
        return self._config.headers.get(key)

    def set_headers(self, headers: Mapping[str, str]) -> None:
        """Set several headers, keeping the ones not mentioned"""
        if not isinstance(headers, Mapping):
            raise InvalidArgument(
                f'set_headers: expects a mapping argument; received "{type(headers).__name__}"'
            )
        for key in headers:
            _expect(key, str, "set_headers")
        self._config = self._config.with_headers(headers)

    def set_header(self, key: str, value: str) -> None:
        _expect(key, str, "set_header")
        self._config = self._config.with_headers({key: value})

    @property
    def verify(self) -> bool:
        """Whether the TLS peer certificate is verified"""
        return self._config.verify

    def set_verify(self, verify: bool) -> None:
        _expect(verify, bool, "set_verify")
        self._config = self._config.with_changes(verify=verify)

    def get(self, path: str, **options) -> ApiResponse:
        """
        Perform a GET request

        Args:
            path: Path relative to the API URL (e.g. "domains/123")
            **options: query, headers and extra requests keyword arguments

        Returns:
            ApiResponse for the HTTP 200 response

        Raises:
            ResponseException: If the response status code is not 200
        """
        return self.request(HttpMethod.GET, path, **options)

    def post(self, path: str, **options) -> ApiResponse:
        """Perform a POST request; ``body`` is sent as JSON"""
        return self.request(HttpMethod.POST, path, **options)

    def put(self, path: str, **options) -> ApiResponse:
        """Perform a PUT request; ``body`` is sent as JSON"""
        return self.request(HttpMethod.PUT, path, **options)

    def patch(self, path: str, **options) -> ApiResponse:
        """Perform a PATCH request; ``body`` is sent as JSON"""
        return self.request(HttpMethod.PATCH, path, **options)

    def delete(self, path: str, **options) -> ApiResponse:
        """Perform a DELETE request"""
        return self.request(HttpMethod.DELETE, path, **options)

    def request(self, method: str | HttpMethod, path: str, **options) -> ApiResponse:
        """
        Perform an HTTP request against the FireTruck API

        Args:
            method: One of GET, POST, PUT, PATCH, DELETE
            path: Path relative to the API URL
            **options: query, headers, body and extra requests keyword arguments

        Returns:
            ApiResponse for the HTTP 200 response

        Raises:
            InvalidArgument: If the method is not supported
            ResponseException: If the response status code is not 200
            requests.RequestException: For network and decoding failures
        """
        spec = build_request(self._config, method, path, options)

        logger.debug(f"{spec.method.value} {spec.url}")

        try:
            response = self.http_client.request(spec.method.value, spec.url, **spec.options)
        except requests.HTTPError as e:
            if e.response is None:
                raise
            response = e.response

        if response.status_code != 200:
            logger.warning(
                f"FireTruck API error: {spec.method.value} {spec.url} -> HTTP {response.status_code}"
            )

        return normalize_response(response)

    def try_request(self, method: str | HttpMethod, path: str, **options) -> Result:
        """
        Perform a request, returning a tagged result instead of raising

        Returns:
            Ok(ApiResponse) on HTTP 200, otherwise Err carrying an
            InvalidArgument, ResponseException or TransportError
        """
        try:
            return Ok(self.request(method, path, **options))
        except (InvalidArgument, ResponseException) as e:
            return Err(e)
        except requests.RequestException as e:
            error = TransportError(f"FireTruck request failed: {e}", cause=e)
            error.__cause__ = e
            return Err(error)
