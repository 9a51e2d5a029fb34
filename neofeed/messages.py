"""
User-facing messages for fetch outcomes.
"""

from .outcome import (
    FetchOutcome,
    NetworkError,
    ServerError,
    Success,
    Timeout,
)

TIMEOUT_MESSAGE = "The NEO service took too long to respond. Please try again."
SERVER_ERROR_MESSAGE = "The NEO service is unavailable right now (HTTP {status}). Please try again later."
NETWORK_ERROR_MESSAGE = "Could not reach the NEO service. Check your connection and the configured API address."
UNKNOWN_ERROR_MESSAGE = "Something went wrong while loading NEO data."
SUCCESS_MESSAGE = "NEO data loaded."


def message_for(outcome: FetchOutcome) -> str:
    if isinstance(outcome, Success):
        return SUCCESS_MESSAGE
    if isinstance(outcome, Timeout):
        return TIMEOUT_MESSAGE
    if isinstance(outcome, ServerError):
        return SERVER_ERROR_MESSAGE.format(status=outcome.status)
    if isinstance(outcome, NetworkError):
        return NETWORK_ERROR_MESSAGE
    return UNKNOWN_ERROR_MESSAGE
