"""
Custom exceptions for Lalamove client library.
"""

from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    """Classification of an HTTP status code."""
    SUCCESS = "success"
    CLIENT_FAULT = "client_fault"
    SERVER_FAULT = "server_fault"
    UNEXPECTED_FAULT = "unexpected_fault"


_OUTCOME_LABELS = {
    Outcome.CLIENT_FAULT: "Client Error",
    Outcome.SERVER_FAULT: "Server Error",
    Outcome.UNEXPECTED_FAULT: "Unexpected Error",
}


def classify_status(status_code: int) -> Outcome:
    """Map a status code to its outcome by numeric range."""
    if 200 <= status_code <= 299:
        return Outcome.SUCCESS
    if 400 <= status_code <= 499:
        return Outcome.CLIENT_FAULT
    if 500 <= status_code <= 599:
        return Outcome.SERVER_FAULT
    return Outcome.UNEXPECTED_FAULT


@dataclass(frozen=True)
class ClassifiedResponse:
    """Status code and raw body of a response, with its outcome."""

    status_code: int
    body: str
    outcome: Outcome

    @classmethod
    def from_status(cls, status_code: int, body: str) -> "ClassifiedResponse":
        return cls(status_code, body, classify_status(status_code))

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS


class LalamoveClientError(Exception):
    """Base exception for Lalamove client errors."""
    pass


class ConfigurationError(LalamoveClientError):
    """Raised when client configuration is invalid."""
    pass


class APIError(LalamoveClientError):
    """
    Raised when the API answers with a non-2xx status.

    ``outcome`` tells client faults (4xx), server faults (5xx) and
    anything else apart.
    """

    def __init__(self, response: ClassifiedResponse):
        label = _OUTCOME_LABELS.get(response.outcome, "Unexpected Error")
        super().__init__(f"{label}: {response.status_code} - {response.body}")
        self.response = response

    @property
    def outcome(self) -> Outcome:
        return self.response.outcome

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def body(self) -> str:
        return self.response.body
