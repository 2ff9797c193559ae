"""
Lalamove Client Library

A Python client for the Lalamove v3 delivery API. Requests are signed
with HMAC-SHA256 using the account's API key and secret.

Example usage:
    from lalamove_client import LalamoveClient, Environment

    client = LalamoveClient("your-api-key", "your-api-secret", "SG", Environment.SANDBOX)
    order = client.get_order("107900701184")
"""

from .client import LalamoveClient
from .exceptions import (
    LalamoveClientError,
    ConfigurationError,
    APIError,
    ClassifiedResponse,
    Outcome,
    classify_status
)
from .constants import (
    Environment,
    BASE_URLS,
    DEFAULT_CONFIG,
    DEFAULT_MARKET,
    DRIVER_CHANGE_REASONS
)
from .signer import SignedRequest, build_signing_string, sign

__version__ = "1.0.0"
__all__ = [
    "LalamoveClient",
    "LalamoveClientError",
    "ConfigurationError",
    "APIError",
    "ClassifiedResponse",
    "Outcome",
    "classify_status",
    "Environment",
    "BASE_URLS",
    "DEFAULT_CONFIG",
    "DEFAULT_MARKET",
    "DRIVER_CHANGE_REASONS",
    "SignedRequest",
    "build_signing_string",
    "sign"
]
