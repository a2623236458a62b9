"""
Status Poller - Consulta el estado de un job de Diawi hasta que termina.

Endpoint: GET {DIAWI_STATUS_URL}?token=...&job=...

Estados:
- 2001 Processing: se vuelve a consultar (hasta DIAWI_STATUS_POLLING_MAX veces)
- 2000 Ok: terminal, trae hash y link
- 4000 ErrorOccurred: terminal, JobFailedError
- cualquier otro: terminal, UnknownStatusError
"""

import logging
import time
from typing import Callable, Optional

import httpx

from config.constants import DiawiStatus
from config.settings import DiawiSettings
from diawi.errors import JobFailedError, MaxPollsReachedError, UnknownStatusError
from diawi.http import BaseDiawiClient
from diawi.models import StatusRequest, StatusResponse

logger = logging.getLogger(__name__)


class StatusPoller(BaseDiawiClient):
    """Convierte el job asíncrono de Diawi en un resultado síncrono."""

    def __init__(
        self,
        settings: Optional[DiawiSettings] = None,
        transport: Optional[httpx.BaseTransport] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        super().__init__(settings=settings, transport=transport)
        self.sleep = sleep

    def get_job_status(self, req: StatusRequest) -> StatusResponse:
        """Una sola consulta de estado, sin reintentos."""
        return self._send(
            "GET",
            self.settings.DIAWI_STATUS_URL,
            timeout=self.settings.DIAWI_STATUS_TIMEOUT,
            response_model=StatusResponse,
            params={"token": req.token, "job": req.job_identifier},
        )

    def wait_for_finished_status(self, req: StatusRequest) -> StatusResponse:
        """
        Consultar hasta obtener un estado terminal.

        La primera consulta es inmediata; entre consultas en Processing se
        espera DIAWI_STATUS_POLL_INTERVAL (bloqueante).

        Returns:
            StatusResponse con status 2000

        Raises:
            JobFailedError: Diawi reportó 4000
            UnknownStatusError: código fuera del conjunto conocido
            MaxPollsReachedError: sigue en Processing tras el máximo de reintentos
            TransportError, BadStatusError, DecodeError: fallo de una consulta
        """
        max_polls = self.settings.DIAWI_STATUS_POLLING_MAX
        retries = 0

        response = self.get_job_status(req)
        while True:
            state = response.state
            logger.debug(f"[{req.job_identifier}] status={response.status} (retry {retries}/{max_polls})")

            if state is DiawiStatus.PROCESSING:
                if retries >= max_polls:
                    raise MaxPollsReachedError(polls=retries + 1, job_identifier=req.job_identifier)
                self.sleep(self.settings.DIAWI_STATUS_POLL_INTERVAL)
                retries += 1
                response = self.get_job_status(req)
            elif state is DiawiStatus.OK:
                logger.info(f"[{req.job_identifier}] Job terminado: {response.link}")
                return response
            elif state is DiawiStatus.ERROR_OCCURRED:
                raise JobFailedError(response)
            else:
                raise UnknownStatusError(response)
