"""Core exceptions for the Seaport API adapter."""

from typing import Any


class SeaportApiError(Exception):
    """Base exception for all adapter errors."""

    pass


class ConfigurationError(SeaportApiError):
    """Raised when client configuration is invalid (e.g. unsupported chain)."""

    pass


class ApiRequestError(SeaportApiError):
    """Raised when the marketplace API answers with an error status."""

    def __init__(self, message: str, status_code: int | None = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class OrderNotFoundError(SeaportApiError):
    """Raised when a response does not contain the expected order list."""

    pass


class InvalidOrderError(SeaportApiError):
    """Raised when an order payload fails schema validation."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []
