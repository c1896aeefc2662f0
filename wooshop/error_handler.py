"""Error types raised by the store integration."""
from typing import Any, Dict, Optional


class StoreConfigurationError(RuntimeError):
    """Store credentials or client settings are missing or invalid."""


class StoreResponseError(ValueError):
    """The store answered with a body that could not be parsed."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}
