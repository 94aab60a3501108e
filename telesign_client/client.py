"""
Telesign REST API client.

This module provides a generic HTTP REST client that signs each request
and dispatches it to any Telesign REST API endpoint.
"""

import json
import logging
import platform
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode, urljoin

import requests

from . import signer
from .constants import (
    BODY_METHODS,
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    DEFAULT_CONFIG,
    HTTP_METHODS,
    QUERY_METHODS,
    SDK_VERSION
)
from .exceptions import (
    ConfigurationError,
    TransportError,
    UnsupportedMethodError
)
from .response import Response

logger = logging.getLogger(__name__)


def _form_value(value: Any) -> Any:
    if isinstance(value, bool):
        return '1' if value else '0'
    return value


def _form_fields(fields: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    """Form pairs: None values dropped, booleans as 1/0, sequences as repeated keys."""
    pairs = []
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = [_form_value(item) for item in value if item is not None]
        elif isinstance(value, Mapping):
            raise TypeError(f"Form field {key!r} cannot be a mapping")
        else:
            value = _form_value(value)
        pairs.append((key, value))
    return pairs


class TelesignClient:
    """
    Client for making authenticated requests to the Telesign REST API.

    Holds the account credentials and transport configuration; every request
    is signed with signer.generate_headers() and sent through a requests
    session. Non-2xx responses are returned, never raised.
    """

    def __init__(self, customer_id: str, api_key: str,
                 rest_endpoint: str = DEFAULT_CONFIG['rest_endpoint'],
                 timeout: Union[float, Tuple[float, float]] = DEFAULT_CONFIG['timeout'],
                 proxy: Optional[str] = DEFAULT_CONFIG['proxy'],
                 session: Optional[requests.Session] = None,
                 clock: Callable[[], str] = signer.http_date,
                 nonce_factory: Callable[[], str] = signer.new_nonce):
        """
        Initialize Telesign client.

        Args:
            customer_id: Customer id associated with the account
            api_key: Base64-encoded api key associated with the account
            rest_endpoint: Base URL of the REST API
            timeout: Seconds to wait for the server, or a (connect, read) tuple
            proxy: Proxy URL for http and https requests
            session: HTTP transport override, defaults to a new requests.Session;
                an injected session is neither modified nor closed by the client
            clock: Provider of the current HTTP-date used for signing
            nonce_factory: Provider of request nonces used for signing
        """
        self.customer_id = customer_id
        self.api_key = api_key

        self.config = MappingProxyType({
            **DEFAULT_CONFIG,
            'rest_endpoint': rest_endpoint,
            'timeout': timeout,
            'proxy': proxy,
        })
        self._validate_config()

        self.clock = clock
        self.nonce_factory = nonce_factory

        self.user_agent = (
            f"TelesignSDK/python-{SDK_VERSION} "
            f"Python/{platform.python_version()} "
            f"Requests/{requests.__version__}"
        )

        # Per-request proxies take priority over HTTP_PROXY/HTTPS_PROXY
        self.proxies = {'http': proxy, 'https': proxy} if proxy else None

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def _validate_config(self):
        """Validate client configuration."""
        if not self.customer_id:
            raise ConfigurationError("customer_id cannot be empty")

        if not self.api_key:
            raise ConfigurationError("api_key cannot be empty")

        if not self.config['rest_endpoint']:
            raise ConfigurationError("rest_endpoint cannot be empty")

        timeout = self.config['timeout']
        parts = timeout if isinstance(timeout, tuple) else (timeout,)
        if len(parts) not in (1, 2) or not all(
                isinstance(part, (int, float)) and not isinstance(part, bool) and part > 0
                for part in parts):
            raise ConfigurationError("timeout must be a positive number or a (connect, read) tuple")

    @property
    def rest_endpoint(self) -> str:
        """Base URL requests are sent to."""
        return self.config['rest_endpoint']

    @staticmethod
    def _encode_body(fields: Optional[Mapping[str, Any]], content_type: str) -> Optional[str]:
        """Encode fields for the given content type; None when there is nothing to send."""
        if not fields:
            return None
        if content_type == CONTENT_TYPE_JSON:
            return json.dumps(fields, separators=(',', ':'))
        if content_type == CONTENT_TYPE_FORM:
            return urlencode(_form_fields(fields), doseq=True) or None
        return None

    def execute(self, method: str, resource: str, fields: Optional[Mapping[str, Any]] = None,
                content_type: Optional[str] = None, date: Optional[str] = None,
                nonce: Optional[str] = None) -> Response:
        """
        Sign and send a request to the Telesign REST API.

        Args:
            method: HTTP method, one of GET, POST, PUT, PATCH or DELETE
            resource: Partial resource URI to perform the request against
            fields: Body params (POST/PUT/PATCH) or query params (GET/DELETE)
            content_type: Content-Type, defaults to application/x-www-form-urlencoded
            date: Date and time of the request, generated when omitted
            nonce: Unique nonce for the request, generated when omitted

        Returns:
            Response wrapping the HTTP response, whatever its status code

        Raises:
            UnsupportedMethodError: If method is not supported
            ConfigurationError: If api_key is not valid base64
            TransportError: If the request fails at the network level
        """
        method = method.upper()
        if method not in HTTP_METHODS:
            raise UnsupportedMethodError(f"Unsupported HTTP method: {method}")

        if content_type is None:
            content_type = CONTENT_TYPE_FORM

        body = self._encode_body(fields, content_type)

        headers = signer.generate_headers(
            self.customer_id,
            self.api_key,
            method,
            content_type,
            resource,
            body,
            nonce,
            date,
            self.user_agent,
            clock=self.clock,
            nonce_factory=self.nonce_factory
        )

        kwargs = {
            'headers': headers,
            'timeout': self.config['timeout'],
        }
        if self.proxies:
            kwargs['proxies'] = dict(self.proxies)
        if body is not None:
            if method in BODY_METHODS:
                kwargs['data'] = body
            elif method in QUERY_METHODS:
                kwargs['params'] = body

        url = urljoin(self.rest_endpoint.rstrip('/') + '/', resource.lstrip('/'))
        logger.debug("%s %s (data=%s, params=%s)", method, url, 'data' in kwargs, 'params' in kwargs)

        try:
            raw = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"HTTP request failed: {e}") from e

        logger.debug("%s %s -> %s", method, url, raw.status_code)
        return Response(raw)

    def get(self, resource: str, fields: Optional[Mapping[str, Any]] = None,
            content_type: Optional[str] = None, date: Optional[str] = None,
            nonce: Optional[str] = None) -> Response:
        """Generic Telesign REST API GET handler; fields are sent as the query string."""
        return self.execute('GET', resource, fields, content_type, date, nonce)

    def post(self, resource: str, fields: Optional[Mapping[str, Any]] = None,
             content_type: Optional[str] = None, date: Optional[str] = None,
             nonce: Optional[str] = None) -> Response:
        """Generic Telesign REST API POST handler; fields are sent as the body."""
        return self.execute('POST', resource, fields, content_type, date, nonce)

    def put(self, resource: str, fields: Optional[Mapping[str, Any]] = None,
            content_type: Optional[str] = None, date: Optional[str] = None,
            nonce: Optional[str] = None) -> Response:
        """Generic Telesign REST API PUT handler; fields are sent as the body."""
        return self.execute('PUT', resource, fields, content_type, date, nonce)

    def patch(self, resource: str, fields: Optional[Mapping[str, Any]] = None,
              content_type: Optional[str] = None, date: Optional[str] = None,
              nonce: Optional[str] = None) -> Response:
        """Generic Telesign REST API PATCH handler; fields are sent as the body."""
        return self.execute('PATCH', resource, fields, content_type, date, nonce)

    def delete(self, resource: str, fields: Optional[Mapping[str, Any]] = None,
               content_type: Optional[str] = None, date: Optional[str] = None,
               nonce: Optional[str] = None) -> Response:
        """Generic Telesign REST API DELETE handler; fields are sent as the query string."""
        return self.execute('DELETE', resource, fields, content_type, date, nonce)

    def close(self):
        """Close the HTTP session if the client created it."""
        if self._owns_session and self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
