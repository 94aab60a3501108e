"""
Request signing for the Telesign REST API.

Builds the canonical string-to-sign, computes its HMAC-SHA256 signature and
assembles the authentication headers. Everything here is a pure function of
its inputs; the current date and the nonce come from injectable providers.
"""

import base64
import binascii
import hashlib
import hmac
import logging
import uuid
from email.utils import formatdate
from typing import Callable, Dict, NamedTuple, Optional

from .constants import (
    AUTH_METHOD,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    HEADER_TS_AUTH_METHOD,
    HEADER_TS_DATE,
    HEADER_TS_NONCE
)
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Signature(NamedTuple):
    """Result of signing a request."""
    string_to_sign: str
    signature: str
    date: str
    nonce: str


def http_date() -> str:
    """Current time in GMT as an HTTP-date, e.g. 'Tue, 01 Jan 2019 00:00:00 GMT'."""
    return formatdate(usegmt=True)


def new_nonce() -> str:
    """Fresh UUID4 nonce."""
    return str(uuid.uuid4())


def build_string_to_sign(http_method: str, content_type: str, path: str,
                         body: Optional[str] = None, *, date: str, nonce: str) -> str:
    """
    Build the canonical string-to-sign.

    The segments and their order must match the server-side verifier:
    method, content type, an empty Date line, the three x-ts-* lines,
    the body and the path.

    Args:
        http_method: HTTP method name
        content_type: Content-Type of the request
        path: Resource path
        body: Encoded request body, if any
        date: HTTP-date of the request
        nonce: Unique request nonce

    Returns:
        Newline-joined string-to-sign, without a trailing newline
    """
    return "\n".join([
        http_method.upper(),
        content_type.lower(),
        "",
        f"{HEADER_TS_AUTH_METHOD}: {AUTH_METHOD}",
        f"{HEADER_TS_DATE}: {date}",
        f"{HEADER_TS_NONCE}: {nonce}",
        body if body is not None else "",
        path,
    ])


def decode_api_key(api_key: str) -> bytes:
    """
    Decode the base64 api_key into the raw HMAC key.

    Raises:
        ConfigurationError: If api_key is not valid base64
    """
    try:
        return base64.b64decode(api_key, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ConfigurationError(f"api_key is not valid base64: {e}") from e


def compute_signature(api_key: str, string_to_sign: str) -> str:
    """Base64-encoded HMAC-SHA256 of string_to_sign keyed with the decoded api_key."""
    mac = hmac.new(
        decode_api_key(api_key),
        string_to_sign.encode('utf-8'),
        hashlib.sha256
    )
    return base64.b64encode(mac.digest()).decode('ascii')


def sign(api_key: str, http_method: str, content_type: str, path: str,
         body: Optional[str] = None, nonce: Optional[str] = None, date: Optional[str] = None,
         *, clock: Callable[[], str] = http_date,
         nonce_factory: Callable[[], str] = new_nonce) -> Signature:
    """
    Sign a request.

    Args:
        api_key: Base64-encoded api key
        http_method: HTTP method name
        content_type: Content-Type of the request
        path: Resource path
        body: Encoded request body, if any
        nonce: Request nonce; generated with nonce_factory when omitted
        date: Request date; generated with clock when omitted
        clock: Provider of the current HTTP-date
        nonce_factory: Provider of fresh nonces

    Returns:
        Signature with the string-to-sign, the signature, and the resolved date and nonce

    Raises:
        ConfigurationError: If api_key is not valid base64
    """
    if date is None:
        date = clock()
    if nonce is None:
        nonce = nonce_factory()

    logger.debug("Signing %s %s (date=%s, nonce=%s)", http_method.upper(), path, date, nonce)

    string_to_sign = build_string_to_sign(
        http_method, content_type, path, body, date=date, nonce=nonce
    )
    return Signature(string_to_sign, compute_signature(api_key, string_to_sign), date, nonce)


def basic_authorization(customer_id: str, api_key: str) -> str:
    """HTTP Basic Authorization value for the raw credentials."""
    credentials = f"{customer_id}:{api_key}".encode('utf-8')
    return "Basic " + base64.b64encode(credentials).decode('ascii')


def generate_headers(customer_id: str, api_key: str, http_method: str, content_type: str,
                     path: str, body: Optional[str] = None, nonce: Optional[str] = None,
                     date: Optional[str] = None, user_agent: Optional[str] = None,
                     *, clock: Callable[[], str] = http_date,
                     nonce_factory: Callable[[], str] = new_nonce) -> Dict[str, str]:
    """
    Generate the authentication headers for a Telesign REST API request.

    The HMAC signature over the string-to-sign is always computed, but the
    Authorization header currently carries HTTP Basic credentials rather than
    'TSA <customer_id>:<signature>'. The x-ts-* values are part of the
    string-to-sign only and are not sent as headers. Use sign() to obtain
    the signature itself.

    Args:
        customer_id: Account customer id
        api_key: Base64-encoded account api key
        http_method: HTTP method name
        content_type: Content-Type of the request
        path: Resource path
        body: Encoded request body, if any
        nonce: Request nonce; generated when omitted
        date: Request date; generated when omitted
        user_agent: User-Agent header value, if any
        clock: Provider of the current HTTP-date
        nonce_factory: Provider of fresh nonces

    Returns:
        Headers with keys in ascending alphabetical order

    Raises:
        ConfigurationError: If api_key is not valid base64
    """
    sign(
        api_key, http_method, content_type, path, body, nonce, date,
        clock=clock, nonce_factory=nonce_factory
    )

    headers = {
        HEADER_CONTENT_TYPE: content_type,
        HEADER_AUTHORIZATION: basic_authorization(customer_id, api_key),
    }
    if user_agent is not None:
        headers[HEADER_USER_AGENT] = user_agent

    return dict(sorted(headers.items()))
