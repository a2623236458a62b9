"""
Data models for Diawi requests and responses.

Requests are frozen dataclasses built by the caller; responses are Pydantic
models decoded from the service JSON.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from config.constants import DiawiStatus


@dataclass(frozen=True)
class UploadRequest:
    """
    Upload of an .ipa/.apk to Diawi.

    Only ``token`` and ``file`` are required; they are checked when the request
    is submitted, not here.
    """

    token: str
    file: str

    wall_of_apps: bool = False
    find_by_udid: bool = False
    installation_notifications: bool = False
    password: str = ""
    comment: str = ""
    callback_url: str = ""
    callback_emails: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # None equivale a sin emails; un str suelto es un solo email
        emails = self.callback_emails
        if emails is None:
            emails = ()
        elif isinstance(emails, str):
            emails = (emails,)
        object.__setattr__(self, "callback_emails", tuple(emails))


class UploadResponse(BaseModel):
    """Response of the upload endpoint: ``{"job": "<identifier>"}``."""

    job_identifier: str = Field(..., alias="job", min_length=1)

    model_config = {"populate_by_name": True}


@dataclass(frozen=True)
class StatusRequest:
    """Token + job identifier; reusable across polls."""

    token: str
    job_identifier: str


class StatusResponse(BaseModel):
    """Response of the status endpoint."""

    status: int
    message: Optional[str] = ""

    # Only provided when the upload succeeded
    hash: Optional[str] = ""
    link: Optional[str] = ""

    @field_validator("message", "hash", "link", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v

    @model_validator(mode="after")
    def check_success_payload(self):
        if self.state is DiawiStatus.OK and not (self.hash and self.link):
            raise ValueError("status 2000 requires non-empty hash and link")
        return self

    @property
    def state(self) -> DiawiStatus:
        return DiawiStatus.from_code(self.status)

    def __str__(self) -> str:
        return f"status: {self.status} message: {self.message} hash: {self.hash} link: {self.link}"
