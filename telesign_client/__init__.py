"""
Telesign REST Client Library

A Python client library that signs requests to the Telesign REST API
and dispatches them with requests.

Example usage:
    from telesign_client import TelesignClient

    client = TelesignClient("your-customer-id", "your-base64-api-key")
    response = client.get("/v1/status", {"a": "1"})
"""

from .client import TelesignClient
from .response import Response
from .signer import (
    Signature,
    build_string_to_sign,
    compute_signature,
    generate_headers,
    sign
)
from .exceptions import (
    TelesignClientError,
    ConfigurationError,
    EncodingError,
    UnsupportedMethodError,
    TransportError
)
from .constants import (
    AUTH_METHOD,
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    DEFAULT_CONFIG,
    DEFAULT_REST_ENDPOINT,
    SDK_VERSION
)

__version__ = SDK_VERSION
__all__ = [
    "TelesignClient",
    "Response",
    "Signature",
    "build_string_to_sign",
    "compute_signature",
    "generate_headers",
    "sign",
    "TelesignClientError",
    "ConfigurationError",
    "EncodingError",
    "UnsupportedMethodError",
    "TransportError",
    "AUTH_METHOD",
    "CONTENT_TYPE_FORM",
    "CONTENT_TYPE_JSON",
    "DEFAULT_CONFIG",
    "DEFAULT_REST_ENDPOINT",
    "SDK_VERSION"
]
