"""Client for the Fixer exchange-rate API."""
from .client import ENDPOINT, ClientConfig, ExchangeRateClient, hack_convert
from .errors import ConfigurationError, FixerClientError, ValidationError

__all__ = [
    "ENDPOINT",
    "ClientConfig",
    "ExchangeRateClient",
    "hack_convert",
    "ConfigurationError",
    "FixerClientError",
    "ValidationError",
]
