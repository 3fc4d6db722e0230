"""HTTP client abstraction for dependency injection and testability."""

from typing import Any

import requests


class HttpClient:
    """
    HTTP client wrapper for making requests.

    This abstraction enables:
    - Dependency injection for testing
    - Easy mocking in unit tests
    - A single place where error statuses become exceptions
    """

    def __init__(self, raise_for_status: bool = True):
        """
        Args:
            raise_for_status: Raise requests.HTTPError for 4xx/5xx responses
        """
        self.raise_for_status = raise_for_status

    def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: Any | None = None,
        json: Any | None = None,
        timeout: float | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Send a request.

        Args:
            method: HTTP method (e.g. "GET")
            url: URL to request
            headers: Optional HTTP headers
            params: Optional query parameters
            json: Optional JSON-serializable body
            timeout: Optional request timeout in seconds
            **kwargs: Additional arguments to pass to requests.request()

        Returns:
            requests.Response object

        Raises:
            requests.HTTPError: For 4xx/5xx responses when raise_for_status is set
            requests.RequestException: For network failures
        """
        # Only forward json when present, so an explicit "" body is still sent
        if json is not None:
            kwargs["json"] = json

        response = requests.request(
            method, url, headers=headers, params=params, timeout=timeout, **kwargs
        )

        if self.raise_for_status:
            response.raise_for_status()

        return response


# Create a default instance shared by clients that don't inject their own
default_http_client = HttpClient()
