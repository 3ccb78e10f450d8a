"""Domain errors surfaced to API callers as JSON ``{"error": ...}`` bodies."""

from fastapi import status


class ClothingStoreError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CustomerValidationError(ClothingStoreError):
    """Required customer fields are missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class CustomerNotFoundError(ClothingStoreError):
    """No customer row matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Customer not found"):
        super().__init__(message)


class StorageError(ClothingStoreError):
    """The underlying store failed (I/O, constraint violation, ...)."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
