"""
Constants for Lalamove client library.
Values follow the Lalamove v3 REST API.
"""

from enum import Enum


class Environment(Enum):
    """Named Lalamove environments."""
    SANDBOX = "sandbox"
    PRODUCTION = "production"


BASE_URLS = {
    Environment.SANDBOX: "https://rest.sandbox.lalamove.com",
    Environment.PRODUCTION: "https://rest.lalamove.com",
}

# HTTP Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_REQUEST_ID = "Request-ID"
HEADER_MARKET = "Market"

CONTENT_TYPE_JSON = "application/json"

# Default configuration values
DEFAULT_MARKET = "MY"
DEFAULT_CONFIG = {
    'timeout': 30,      # HTTP timeout in seconds
    'debug': False,     # log headers and bodies
}

# Endpoints
CITIES_PATH = "/v3/cities"
QUOTATIONS_PATH = "/v3/quotations"
ORDERS_PATH = "/v3/orders"

DRIVER_CHANGE_REASONS = frozenset([
    "DRIVER_LATE",
    "DRIVER_ASKED_CHANGE",
    "DRIVER_UNRESPONSIVE",
    "DRIVER_RUDE",
])
