from __future__ import annotations

from fastapi import status


class StudentServiceError(Exception):
    """Terminal request error, rendered as a plain-text response."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidId(StudentServiceError):
    message = "Invalid student ID"


class MalformedBody(StudentServiceError):
    message = "Invalid request body"


class InvalidFields(StudentServiceError):
    message = "Invalid student data"


class NotFound(StudentServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Student not found"
