"""
Outcome types for a single guarded request attempt.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    """The request completed with a success status and a decoded payload."""
    payload: Any
    status: int = 200

    kind = "success"

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class FetchFailure:
    """Base class for the closed set of failure categories."""

    kind = "failure"

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class Timeout(FetchFailure):
    """No response arrived before the time bound elapsed."""
    kind = "timeout"


@dataclass(frozen=True)
class ServerError(FetchFailure):
    """A response arrived, but its status indicates failure."""
    status: int

    kind = "server_error"


@dataclass(frozen=True)
class NetworkError(FetchFailure):
    """No connection could be established and no response was received."""
    kind = "network_error"


@dataclass(frozen=True)
class UnknownError(FetchFailure):
    kind = "unknown_error"


FetchOutcome = Union[Success, Timeout, ServerError, NetworkError, UnknownError]
