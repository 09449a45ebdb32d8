class DocsError(Exception):
    """Base class for documentation lookup exceptions."""

class ReadError(DocsError):
    """Raised when a local corpus file is missing or unreadable."""

class FetchError(DocsError):
    """Raised when a remote documentation page cannot be fetched."""
    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
