"""
FireTruck API responses

Wraps raw requests.Response objects into ApiResponse values and turns every
status other than 200 into a ResponseException.
"""

from dataclasses import dataclass, field
from typing import Any

import requests

from .exceptions import ResponseException


@dataclass(frozen=True)
class ApiResponse:
    """Normalized FireTruck API response"""

    status_code: int
    body: Any
    response: requests.Response | None = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    @classmethod
    def from_response(cls, response: requests.Response) -> "ApiResponse":
        """
        Decode a raw response

        The API only speaks JSON; a payload that fails to decode raises
        whatever response.json() raises.
        """
        return cls(status_code=response.status_code, body=response.json(), response=response)


def normalize_response(response: requests.Response) -> ApiResponse:
    """
    Turn a raw transport response into an ApiResponse

    Args:
        response: Response returned by (or attached to an error from) the transport

    Returns:
        ApiResponse for a 200 response

    Raises:
        ResponseException: If the status code is not 200
    """
    api_response = ApiResponse.from_response(response)

    if not api_response.ok:
        raise ResponseException(api_response)

    return api_response
