"""
Request construction for the FireTruck API

Turns a method, a relative path and per-call options into the URL and the
keyword arguments handed to the HTTP transport.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from requests.structures import CaseInsensitiveDict

from .config import ClientConfig
from .exceptions import InvalidArgument


class HttpMethod(str, Enum):
    """HTTP methods supported by the FireTruck API"""

    DELETE = "DELETE"
    GET = "GET"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"

    @property
    def allows_body(self) -> bool:
        return self in BODY_METHODS

    @classmethod
    def parse(cls, method: Any) -> "HttpMethod":
        """
        Resolve an upper-case method name or HttpMethod member

        Raises:
            InvalidArgument: If the method is not supported
        """
        if isinstance(method, cls):
            return method
        if not isinstance(method, str):
            raise InvalidArgument(
                f"HTTP method must be a string; received {type(method).__name__}"
            )
        try:
            return cls(method)
        except ValueError:
            raise InvalidArgument(
                f'"{method}" is not a valid HTTP method: available methods are '
                f"{', '.join(m.value for m in cls)}."
            ) from None


BODY_METHODS = frozenset({HttpMethod.PATCH, HttpMethod.POST, HttpMethod.PUT})

# Option keys that carry a request payload
_BODY_KEYS = ("body", "json", "data")


@dataclass(frozen=True)
class RequestSpec:
    """A fully built request, ready for the transport"""

    method: HttpMethod
    url: str
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def has_body(self) -> bool:
        return "json" in self.options


def merge_options(defaults: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge caller options over defaults.

    Nested mappings merge key by key with the override winning on collision.
    Any other value (lists included) replaces the default wholesale.
    """
    merged = dict(defaults)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_options(current, value)
        else:
            merged[key] = value
    return merged


def merge_headers(defaults: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
    """Merge headers with case-insensitive names; the override keeps its own spelling"""
    merged = CaseInsensitiveDict(defaults)
    merged.update(overrides)
    return dict(merged.items())


def build_url(client_config: ClientConfig, path: str) -> str:
    """``{base_url}/{version}/{path}``"""
    return f"{client_config.api_url}/{path.lstrip('/')}"


def default_options(client_config: ClientConfig) -> dict[str, Any]:
    """Options every request starts from"""
    return {
        "query": {"apikey": client_config.api_key},
        "headers": dict(client_config.headers),
        "timeout": client_config.timeout,
        "verify": client_config.verify,
    }


def build_request(
    client_config: ClientConfig,
    method: Any,
    path: str,
    options: Mapping[str, Any] | None = None,
) -> RequestSpec:
    """
    Build the request for a FireTruck API call

    Args:
        client_config: Settings of the calling client
        method: HTTP method name or HttpMethod
        path: Path relative to the versioned API URL (e.g. "domains/123")
        options: Per-call overrides: ``query``, ``headers``, ``body`` and any
                 extra keyword accepted by requests (e.g. ``allow_redirects``)

    Returns:
        RequestSpec whose options map straight onto HttpClient.request()

    Raises:
        InvalidArgument: If the method is not supported, or form data is
                         given for a method that sends a JSON body
    """
    http_method = HttpMethod.parse(method)

    # None means "not given", so it never wipes a default
    overrides = {key: value for key, value in (options or {}).items() if value is not None}

    if http_method.allows_body and "data" in overrides:
        raise InvalidArgument(
            f"{http_method.value} bodies are sent as JSON; "
            "pass the payload as body= instead of data="
        )

    # requests-style params= and json= are accepted next to query= and body=
    params = overrides.pop("params", None)
    query = overrides.get("query", {})
    if isinstance(params, Mapping) and isinstance(query, Mapping):
        overrides["query"] = merge_options(params, query)
    elif params is not None:
        raise InvalidArgument("params and query must both be mappings")
    if "json" in overrides:
        overrides.setdefault("body", overrides.pop("json"))

    defaults = default_options(client_config)
    headers = merge_headers(defaults.pop("headers"), overrides.pop("headers", None) or {})
    args = merge_options(defaults, overrides)
    args["headers"] = headers

    body = args.get("body")
    for key in _BODY_KEYS:
        args.pop(key, None)

    if http_method.allows_body:
        # Always JSON encoded; an absent body goes out as an empty JSON string
        args["json"] = "" if body is None else body

    args["params"] = args.pop("query")

    return RequestSpec(method=http_method, url=build_url(client_config, path), options=args)
