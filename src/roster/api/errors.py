from __future__ import annotations


class ApiError(Exception):
    """An error that is answered to the caller with a status code and a plain-text message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(ApiError):
    """Malformed body or a path identifier that is not a non-negative integer."""

    status_code = 400


class ValidationError(ApiError):
    """Well-formed input that fails a semantic check (e.g. an empty name)."""

    status_code = 400


class NotFound(ApiError):
    status_code = 404


class EncodingFailure(ApiError):
    """A response could not be serialized. Indicates a server defect, not bad input."""

    status_code = 500


__all__ = [
    "ApiError",
    "InvalidInput",
    "ValidationError",
    "NotFound",
    "EncodingFailure",
]
