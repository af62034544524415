"""Exceptions raised by the catalog client."""


class BookFinderError(Exception):
    """Base exception for Book Finder."""

    pass


class CatalogUnavailableError(BookFinderError):
    """The catalog could not be reached or answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        if status_code is not None:
            super().__init__(f"Open Library error {status_code}: {message}")
        else:
            super().__init__(f"Open Library unavailable: {message}")
