"""
Response wrapper returned by TelesignClient requests.
"""

import requests


class Response:
    """
    Normalized view of a Telesign REST API response.

    Non-2xx responses are returned as-is; check ``ok`` or ``status_code``.
    """

    def __init__(self, raw: requests.Response):
        self.raw = raw
        self.status_code = raw.status_code
        self.headers = raw.headers
        self.body = raw.text
        self.ok = 200 <= self.status_code < 300

        try:
            self.json = raw.json()
        except ValueError:
            self.json = None

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"
