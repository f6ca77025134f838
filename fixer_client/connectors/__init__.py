from .http import HTTPTransport

__all__ = ["HTTPTransport"]
