"""
Request signing for the Lalamove v3 API.

The signature is HMAC-SHA256 over a CRLF-separated canonical string:

    {timestamp}\\r\\n{METHOD}\\r\\n{path}\\r\\n\\r\\n{body}

The empty line is the unused content-hash slot and must stay in place.
"""

import hashlib
import hmac
from dataclasses import dataclass
from typing import Optional


def build_signing_string(method: str, path: str, body: Optional[str], timestamp: int) -> str:
    """
    Build the canonical string that gets signed.

    Args:
        method: HTTP method (upper-cased here)
        path: Request path including query string, without scheme/host
        body: Raw request body exactly as sent, or None
        timestamp: Unix timestamp in milliseconds

    Returns:
        Canonical signing string
    """
    return f"{timestamp}\r\n{method.upper()}\r\n{path}\r\n\r\n{body or ''}"


def sign(secret: str, method: str, path: str, body: Optional[str], timestamp: int) -> str:
    """
    Generate the hex-encoded HMAC-SHA256 signature for a request.

    Args:
        secret: API secret shared with Lalamove
        method: HTTP method
        path: Request path
        body: Raw request body or None
        timestamp: Unix timestamp in milliseconds

    Returns:
        Lowercase hex digest
    """
    message = build_signing_string(method, path, body, timestamp)
    mac = hmac.new(
        secret.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha256
    )
    return mac.hexdigest()


@dataclass(frozen=True)
class SignedRequest:
    """The fields that take part in a request signature."""

    method: str
    path: str
    body: Optional[str]
    timestamp: int

    def signing_string(self) -> str:
        return build_signing_string(self.method, self.path, self.body, self.timestamp)

    def signature(self, secret: str) -> str:
        return sign(secret, self.method, self.path, self.body, self.timestamp)
