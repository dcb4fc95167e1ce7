"""
Error taxonomy shared by the service layer and the HTTP handlers.

Services raise these; ``fittrack.main`` maps them to status codes. Anything
that is not a ``FitTrackError`` is treated as unhandled and becomes a 500.
"""
from __future__ import annotations

from fastapi import status


class FitTrackError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(FitTrackError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class InvalidCredentials(FitTrackError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class NotFound(FitTrackError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class DuplicateError(FitTrackError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Already exists"


class ExternalServiceError(FitTrackError):
    """LLM enrichment failed. Always recovered locally, never sent to clients."""
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "External service unavailable"
