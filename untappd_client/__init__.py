"""Async client for the Untappd v4 API."""

from .client import UntappdClient, sanitize_params
from .config import Settings, get_settings
from .endpoints import ENDPOINTS, Endpoint
from .errors import MissingFieldError, UntappdError

__all__ = [
    "ENDPOINTS",
    "Endpoint",
    "MissingFieldError",
    "Settings",
    "UntappdClient",
    "UntappdError",
    "get_settings",
    "sanitize_params",
]
