"""Custom exceptions for the store-locator package."""


class StoreLocatorError(Exception):
    """Base exception for all store-locator errors."""
    pass


class ConfigurationError(StoreLocatorError):
    """Raised when a required API credential or setting is missing."""
    pass


class PlacesAPIError(StoreLocatorError):
    """Raised when the Places API answers with a non-OK status."""

    def __init__(self, status: str, error_message: str = None):
        self.status = status
        self.error_message = error_message
        message = f"Places API returned {status}"
        if error_message:
            message += f": {error_message}"
        super().__init__(message)


class StoreNotFoundError(StoreLocatorError):
    """Raised when a store id or slug is not in the collection."""
    pass


class DuplicateStoreError(StoreLocatorError):
    """Raised when a collection would contain the same store id twice."""
    pass


class StoreTextError(StoreLocatorError):
    """Raised when the stores array cannot be located in a source file."""
    pass
