"""
Error handling infrastructure for the Diawi client.

Every failure is a DiawiError tagged with an ErrorKind, so callers can branch
on ``err.kind`` instead of comparing exception instances. Each class also
carries an ErrorType telling the caller whether retrying makes sense.
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

from config.constants import ERROR_MESSAGES, ErrorKind

if TYPE_CHECKING:
    from diawi.models import StatusResponse


class ErrorType(Enum):
    """Error classification for caller-side retry decisions."""
    TRANSIENT = "TRANSIENT"      # Immediate retry may succeed
    RETRIABLE = "RETRIABLE"      # Retry later
    PERMANENT = "PERMANENT"      # Fix the input or alert, do not retry


class DiawiError(Exception):
    """Base exception for all Diawi client errors."""

    kind: ErrorKind = ErrorKind.DIAWI_ERROR
    error_type: ErrorType = ErrorType.PERMANENT

    def __init__(self, message: Optional[str] = None, error_code: Optional[str] = None):
        message = message or ERROR_MESSAGES[self.kind]
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.kind.value

    def to_dict(self) -> dict:
        """Serializable view, handy for reporting upstream."""
        return {
            "kind": self.kind.value,
            "error_type": self.error_type.value,
            "error_code": self.error_code,
            "message": self.message,
        }


# Validation errors, raised before any network activity

class ValidationError(DiawiError):
    """The upload request is missing a required value."""
    error_type = ErrorType.PERMANENT


class EmptyFileFieldError(ValidationError):
    """File value left blank."""
    kind = ErrorKind.EMPTY_FILE_FIELD


class EmptyTokenFieldError(ValidationError):
    """Token value left blank."""
    kind = ErrorKind.EMPTY_TOKEN_FIELD


class FileAccessError(DiawiError):
    """The file to upload could not be opened."""
    kind = ErrorKind.FILE_ACCESS
    error_type = ErrorType.PERMANENT


# Transport / protocol errors for a single request

class TransportError(DiawiError):
    """
    Connection failure or timeout talking to Diawi.

    Examples:
    - DNS / connect errors
    - Read timeouts
    """
    kind = ErrorKind.TRANSPORT
    error_type = ErrorType.TRANSIENT


class BadStatusError(DiawiError):
    """Diawi answered with a non-2xx HTTP status."""
    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, body: str = "", message: Optional[str] = None):
        super().__init__(message or f"bad status {status_code}. Response body: {body}")
        self.status_code = status_code
        self.body = body
        # 5xx es problema del servicio, puede reintentarse mas tarde
        self.error_type = ErrorType.RETRIABLE if status_code >= 500 else ErrorType.PERMANENT


class DecodeError(DiawiError):
    """The response body was not the JSON document expected."""
    kind = ErrorKind.DECODE


# Job outcome errors

class JobFailedError(DiawiError):
    """Diawi reported status 4000 for the job."""
    kind = ErrorKind.JOB_FAILED

    def __init__(self, response: "StatusResponse"):
        super().__init__(f"Response included error status = {response.status}. sr: {response}")
        self.response = response


class UnknownStatusError(DiawiError):
    """Status code outside the known set; not polled again."""
    kind = ErrorKind.UNKNOWN_STATUS

    def __init__(self, response: "StatusResponse"):
        super().__init__(f"Unknown status error: {response.status}")
        self.response = response


class MaxPollsReachedError(DiawiError):
    """The job was still processing after the configured number of polls."""
    kind = ErrorKind.MAX_POLLS_REACHED
    error_type = ErrorType.RETRIABLE

    def __init__(self, polls: int, job_identifier: str = ""):
        super().__init__(
            f"Exceeded max number of polls to get upload status "
            f"(polls={polls}, job={job_identifier})"
        )
        self.polls = polls
        self.job_identifier = job_identifier
