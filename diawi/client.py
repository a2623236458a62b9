"""
DiawiClient - upload + espera del job en una sola llamada.

Uso:
    from diawi import DiawiClient, UploadRequest

    client = DiawiClient()
    result = client.upload_and_wait(UploadRequest(token="...", file="app.ipa"))
    print(result.link)
"""

import logging
import time
from typing import Callable, Optional

import httpx

from config.settings import DiawiSettings, get_settings
from diawi.models import StatusRequest, StatusResponse, UploadRequest
from diawi.status import StatusPoller
from diawi.upload import UploadSubmitter

logger = logging.getLogger(__name__)


class DiawiClient:
    """Compone UploadSubmitter y StatusPoller; solo comparten el job id."""

    def __init__(
        self,
        settings: Optional[DiawiSettings] = None,
        transport: Optional[httpx.BaseTransport] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.settings = settings or get_settings().diawi
        self.submitter = UploadSubmitter(settings=self.settings, transport=transport)
        self.poller = StatusPoller(settings=self.settings, transport=transport, sleep=sleep)

    def upload_and_wait(self, req: UploadRequest) -> StatusResponse:
        upload = self.submitter.submit(req)
        logger.info(f"[{upload.job_identifier}] Esperando fin del procesamiento en Diawi")
        return self.poller.wait_for_finished_status(
            StatusRequest(token=req.token, job_identifier=upload.job_identifier)
        )
