"""Task management service core: storage, owner checks and request handling."""

__version__ = "0.1.0"
__all__ = ["database", "handler", "models", "repository", "service"]