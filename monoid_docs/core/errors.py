"""Exceptions raised by the document store layer."""


class DocumentStoreError(Exception):
    """Raised when a database or blob storage operation fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)
