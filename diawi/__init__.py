"""
Diawi - Cliente para subir apps móviles a Diawi y obtener el link de instalación.

Componentes:
- upload: UploadSubmitter (POST multipart, devuelve job id)
- status: StatusPoller (consulta el job hasta un estado terminal)
- client: DiawiClient (upload + espera)
- errors: jerarquía DiawiError etiquetada por ErrorKind
"""

from diawi.client import DiawiClient
from diawi.errors import (
    BadStatusError,
    DecodeError,
    DiawiError,
    EmptyFileFieldError,
    EmptyTokenFieldError,
    ErrorKind,
    ErrorType,
    FileAccessError,
    JobFailedError,
    MaxPollsReachedError,
    TransportError,
    UnknownStatusError,
)
from diawi.models import StatusRequest, StatusResponse, UploadRequest, UploadResponse
from diawi.status import StatusPoller
from diawi.upload import UploadSubmitter

__all__ = [
    # Components
    "DiawiClient",
    "StatusPoller",
    "UploadSubmitter",
    # Models
    "StatusRequest",
    "StatusResponse",
    "UploadRequest",
    "UploadResponse",
    # Errors
    "BadStatusError",
    "DecodeError",
    "DiawiError",
    "EmptyFileFieldError",
    "EmptyTokenFieldError",
    "ErrorKind",
    "ErrorType",
    "FileAccessError",
    "JobFailedError",
    "MaxPollsReachedError",
    "TransportError",
    "UnknownStatusError",
]
