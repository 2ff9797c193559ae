"""
Lalamove v3 API client.

This module provides request signing, header composition and response
classification for the Lalamove delivery API, plus one method per
supported endpoint.
"""

import json
import logging
import os
import time
import uuid
from typing import Any, Dict, Optional, Union

import requests

from .constants import (
    BASE_URLS,
    CITIES_PATH,
    CONTENT_TYPE_JSON,
    DEFAULT_CONFIG,
    DEFAULT_MARKET,
    DRIVER_CHANGE_REASONS,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_MARKET,
    HEADER_REQUEST_ID,
    ORDERS_PATH,
    QUOTATIONS_PATH,
    Environment,
)
from .exceptions import APIError, ClassifiedResponse, ConfigurationError
from .signer import SignedRequest

logger = logging.getLogger(__name__)


class LalamoveClient:
    """
    Client for the Lalamove v3 REST API.

    Every request is signed with HMAC-SHA256 and carries the configured
    market. Non-2xx responses raise APIError.
    """

    def __init__(self, api_key: str, api_secret: str, market: str = DEFAULT_MARKET,
                 environment: Union[Environment, str] = Environment.PRODUCTION, **config):
        """
        Initialize Lalamove client.

        Args:
            api_key: Lalamove API key
            api_secret: Lalamove API secret
            market: Market code, e.g. "MY" or "SG"
            environment: Environment.SANDBOX or Environment.PRODUCTION (or its name)
            **config: Configuration options (timeout, debug)
        """
        unknown = set(config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"unknown config options: {', '.join(sorted(unknown))}")

        self._api_key = api_key
        self._api_secret = api_secret
        self._market = market
        self._environment = self._resolve_environment(environment)
        self._config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self._base_url = BASE_URLS[self._environment]
        self.session = requests.Session()

    @classmethod
    def from_env(cls, **config) -> "LalamoveClient":
        """Create a client from LALAMOVE_* environment variables."""
        return cls(
            os.getenv("LALAMOVE_API_KEY", ""),
            os.getenv("LALAMOVE_API_SECRET", ""),
            os.getenv("LALAMOVE_MARKET", DEFAULT_MARKET),
            os.getenv("LALAMOVE_ENVIRONMENT", Environment.PRODUCTION.value),
            **config
        )

    @staticmethod
    def _resolve_environment(environment: Union[Environment, str]) -> Environment:
        if isinstance(environment, Environment):
            return environment
        try:
            return Environment(str(environment).lower())
        except ValueError:
            raise ConfigurationError(f"unknown environment: {environment!r}")

    def _validate_config(self):
        """Validate client configuration."""
        if not self._api_key:
            raise ConfigurationError("api_key cannot be empty")

        if not self._api_secret:
            raise ConfigurationError("api_secret cannot be empty")

        if not self._market:
            raise ConfigurationError("market cannot be empty")

        if not self._valid_timeout(self._config['timeout']):
            raise ConfigurationError(
                "timeout must be None, a positive number or a (connect, read) tuple of positive numbers"
            )

    @staticmethod
    def _valid_timeout(timeout: Any) -> bool:
        """Check timeout is in a form requests accepts."""
        if timeout is None:
            return True
        if isinstance(timeout, tuple):
            return len(timeout) == 2 and all(t is not None and LalamoveClient._valid_timeout(t) for t in timeout)
        return isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def market(self) -> str:
        return self._market.upper()

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def config(self) -> Dict[str, Any]:
        return dict(self._config)

    def _current_timestamp(self) -> int:
        """Current Unix time in milliseconds."""
        return int(time.time() * 1000)

    def _build_headers(self, request: SignedRequest) -> Dict[str, str]:
        """Build the authenticated header set for a signed request."""
        signature = request.signature(self._api_secret)
        return {
            HEADER_AUTHORIZATION: f"hmac {self._api_key}:{request.timestamp}:{signature}",
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
            HEADER_REQUEST_ID: str(uuid.uuid4()),
            HEADER_MARKET: self.market,
        }

    @staticmethod
    def _encode_body(payload: Any) -> str:
        """Wrap payload under "data" and serialize it compactly."""
        return json.dumps({"data": payload}, separators=(',', ':'))

    def _handle_response(self, response: requests.Response) -> requests.Response:
        """Return 2xx responses, raise APIError for everything else."""
        classified = ClassifiedResponse.from_status(response.status_code, response.text)
        if not classified.ok:
            logger.debug("Request failed with %s (%s)", classified.status_code, classified.outcome.value)
            raise APIError(classified)

        if self._config['debug']:
            logger.debug("Response body: %s", response.text)
        return response

    def _make_request(self, method: str, path: str, body: Optional[str] = None) -> requests.Response:
        """
        Make a signed HTTP request.

        Args:
            method: HTTP method
            path: Endpoint path, e.g. "/v3/orders"
            body: Serialized JSON body, signed and sent as-is

        Returns:
            requests.Response for 2xx statuses

        Raises:
            APIError: If the response status is not 2xx
        """
        method = method.upper()
        request = SignedRequest(method, path, body, self._current_timestamp())
        headers = self._build_headers(request)

        logger.debug("Sending %s request to %s", method, path)
        if self._config['debug']:
            logger.debug("Request headers: %s", headers)
            if body is not None:
                logger.debug("Request body: %s", body)

        kwargs = {'headers': headers, 'timeout': self._config['timeout']}
        if body is not None:
            kwargs['data'] = body.encode('utf-8')

        response = self.session.request(method, f"{self._base_url}{path}", **kwargs)
        return self._handle_response(response)

    def _request_data(self, method: str, path: str, payload: Any = None) -> Any:
        """Send a request and return the "data" field of the JSON response."""
        body = self._encode_body(payload) if payload is not None else None
        response = self._make_request(method, path, body)
        return response.json()["data"]

    def cities(self) -> Any:
        """List the cities served in the configured market."""
        return self._request_data('GET', CITIES_PATH)

    def get_quotation(self, quotation_details: Dict[str, Any]) -> Dict[str, Any]:
        """Request a priced quotation for the given stops and service type."""
        return self._request_data('POST', QUOTATIONS_PATH, quotation_details)

    def create_order(self, order_details: Dict[str, Any]) -> Dict[str, Any]:
        """Place an order against a quotation."""
        return self._request_data('POST', ORDERS_PATH, order_details)

    def get_order(self, order_id: str) -> Dict[str, Any]:
        return self._request_data('GET', f"{ORDERS_PATH}/{order_id}")

    def get_driver_details(self, order_id: str, driver_id: str) -> Dict[str, Any]:
        return self._request_data('GET', f"{ORDERS_PATH}/{order_id}/drivers/{driver_id}")

    def add_priority_fee(self, order_id: str, priority_fee: Union[int, float, str]) -> Dict[str, Any]:
        """Add a priority fee to an order. The fee is sent as a string."""
        return self._request_data(
            'POST',
            f"{ORDERS_PATH}/{order_id}/priority-fee",
            {"priorityFee": str(priority_fee)}
        )

    def cancel_order(self, order_id: str) -> requests.Response:
        """
        Cancel an order.

        Returns the raw response; a successful cancellation answers 204
        with no body.
        """
        return self._make_request('DELETE', f"{ORDERS_PATH}/{order_id}")

    def change_driver(self, order_id: str, driver_id: str, reason: str) -> requests.Response:
        """
        Ask for a different driver on an order.

        Args:
            order_id: Order ID
            driver_id: Currently assigned driver ID
            reason: One of DRIVER_CHANGE_REASONS

        Returns:
            Raw response (204 on success)
        """
        if reason not in DRIVER_CHANGE_REASONS:
            raise ValueError(f"invalid driver change reason: {reason!r}")

        body = self._encode_body({"reason": reason})
        return self._make_request('DELETE', f"{ORDERS_PATH}/{order_id}/drivers/{driver_id}", body)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
