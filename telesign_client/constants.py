"""
Constants for the Telesign REST client library.
"""

SDK_VERSION = "1.0.0"

DEFAULT_REST_ENDPOINT = "https://rest-api.telesign.com"

# Default configuration values
DEFAULT_CONFIG = {
    'rest_endpoint': DEFAULT_REST_ENDPOINT,
    'timeout': 10,      # HTTP timeout in seconds
    'proxy': None,      # proxy URL applied to http and https
}

# Signing
AUTH_METHOD = "HMAC-SHA256"

HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Canonical header names inside the string-to-sign
HEADER_TS_AUTH_METHOD = "x-ts-auth-method"
HEADER_TS_DATE = "x-ts-date"
HEADER_TS_NONCE = "x-ts-nonce"

# Content types
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_JSON = "application/json"

# HTTP methods
BODY_METHODS = ("POST", "PUT", "PATCH")
QUERY_METHODS = ("GET", "DELETE")
HTTP_METHODS = BODY_METHODS + QUERY_METHODS
