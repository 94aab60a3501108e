"""
Custom exceptions for the Telesign REST client library.
"""


class TelesignClientError(Exception):
    """Base exception for Telesign client errors."""
    pass


class ConfigurationError(TelesignClientError):
    """Raised when client configuration or credentials are invalid."""
    pass


# The api_key failing base64 decoding is reported as a configuration problem
EncodingError = ConfigurationError


class UnsupportedMethodError(TelesignClientError, ValueError):
    """Raised when an HTTP method other than GET, POST, PUT, PATCH or DELETE is used."""
    pass


class TransportError(TelesignClientError):
    """Raised when the HTTP request fails at the network level."""
    pass
