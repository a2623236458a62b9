"""
Upload Submitter - Sube un binario (.ipa/.apk) a Diawi.

Endpoint: POST {DIAWI_UPLOAD_URL}
Content-Type: multipart/form-data
Respuesta: {"job": "<identificador>"}
"""

import logging

from diawi.errors import EmptyFileFieldError, EmptyTokenFieldError, FileAccessError
from diawi.form import build_upload_fields, encode_fields
from diawi.http import BaseDiawiClient
from diawi.models import UploadRequest, UploadResponse

logger = logging.getLogger(__name__)


def validate_upload_request(req: UploadRequest) -> None:
    """Archivo primero, luego token; solo se reporta el primer fallo."""
    if not req.file:
        raise EmptyFileFieldError()
    if not req.token:
        raise EmptyTokenFieldError()


class UploadSubmitter(BaseDiawiClient):
    """Envía un UploadRequest y devuelve el identificador del job."""

    def submit(self, req: UploadRequest) -> UploadResponse:
        """
        Subir la app a Diawi.

        Un único POST, sin reintentos: repetir el upload crearía otro job.

        Args:
            req: Request con token, archivo y campos opcionales

        Returns:
            UploadResponse con job_identifier

        Raises:
            EmptyFileFieldError / EmptyTokenFieldError: antes de cualquier I/O
            FileAccessError: el archivo no se pudo abrir
            TransportError, BadStatusError, DecodeError: fallo del request
        """
        validate_upload_request(req)

        fields = build_upload_fields(req)

        try:
            fileobj = open(req.file, "rb")
        except OSError as e:
            raise FileAccessError(f"Could not open {req.file}: {e}") from e

        logger.info(f"Subiendo archivo: {fileobj.name} a {self.settings.DIAWI_UPLOAD_URL}")

        with fileobj:
            result = self._send(
                "POST",
                self.settings.DIAWI_UPLOAD_URL,
                timeout=self.settings.DIAWI_UPLOAD_TIMEOUT,
                response_model=UploadResponse,
                files=encode_fields(fields, fileobj),
            )

        logger.info(f"Upload aceptado, job={result.job_identifier}")
        return result
