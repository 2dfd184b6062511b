# services/errors.py

from __future__ import annotations

from typing import Optional


class AnalysisError(Exception):
    """Base class for every error the analyzer reports back to the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AnalysisError):
    """The request is missing something it needs (currently: the URL)."""


class FetchError(AnalysisError):
    """
    The target URL could not be retrieved.
    status_code is None when the transport itself failed.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        status_text: str = "",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text


class UnexpectedError(AnalysisError):
    """Wraps any other failure raised while processing a request."""

    def __init__(self, cause: Exception):
        super().__init__(str(cause) or cause.__class__.__name__)
        self.cause = cause
