"""Outcome of a single HTTP attempt against the verification API."""

from dataclasses import dataclass
from typing import Any

NETWORK_ERROR_MESSAGE = "Connection timeout or network issue."


@dataclass
class RequestSuccess:
    data: Any              # Decoded JSON body (None if undecodable)
    status_code: int = 200


@dataclass
class RequestFailure:
    error: str
    status_code: int = 0   # 0 when no HTTP response was received
    kind: str = "unknown"  # "network" | "http" | "unknown"


RequestResult = RequestSuccess | RequestFailure
