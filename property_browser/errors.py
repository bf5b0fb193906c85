"""Error types raised along the listing pipeline."""


class PropertyBrowserError(Exception):
    """Base exception for the property browser."""
    pass


class ConfigurationError(PropertyBrowserError):
    """Required configuration is missing."""
    pass


class DatabaseConnectionError(PropertyBrowserError):
    """Could not create or connect the MongoDB client."""
    pass


class QueryError(PropertyBrowserError):
    """Reading listing documents from MongoDB failed."""
    pass


class FetchError(PropertyBrowserError):
    """The listing view could not load documents from the API."""
    pass
