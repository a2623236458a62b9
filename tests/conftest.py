import json

import httpx
import pytest

from config.settings import DiawiSettings


UPLOAD_URL = "https://upload.diawi.test/"
STATUS_URL = "https://upload.diawi.test/status"


class FakeDiawi:
    """
    Servidor Diawi simulado para httpx.MockTransport.

    Las respuestas se encolan por ruta; cada request recibido queda en
    ``requests`` (ya leído) para inspeccionar cuerpo y query.
    """

    def __init__(self):
        self.requests = []
        self._queues = {"upload": [], "status": []}

    def queue_upload(self, status_code=200, payload=None, content=None):
        self._queues["upload"].append((status_code, payload, content))

    def queue_status(self, *codes, **fields):
        """Encolar respuestas de status por código (2000 incluye hash/link)."""
        for code in codes:
            payload = {"status": code, "message": fields.get("message", f"code {code}")}
            if code == 2000:
                payload["hash"] = fields.get("hash", "abc")
                payload["link"] = fields.get("link", "https://i.diawi.com/abc")
            self._queues["status"].append((200, payload, None))

    def queue_status_raw(self, status_code=200, payload=None, content=None):
        self._queues["status"].append((status_code, payload, content))

    def status_requests(self):
        return [r for r in self.requests if r.url.path.endswith("/status")]

    def upload_requests(self):
        return [r for r in self.requests if r.method == "POST"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        key = "status" if request.url.path.endswith("/status") else "upload"
        if not self._queues[key]:
            raise AssertionError(f"Request inesperado: {request.method} {request.url}")
        status_code, payload, content = self._queues[key].pop(0)
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, content=json.dumps(payload or {}).encode())

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class SleepRecorder:
    """Reemplazo de time.sleep que solo registra las esperas."""

    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def diawi_settings():
    """Settings de prueba con endpoints falsos."""
    return DiawiSettings(
        DIAWI_UPLOAD_URL=UPLOAD_URL,
        DIAWI_STATUS_URL=STATUS_URL,
        DIAWI_UPLOAD_TIMEOUT=10,
        DIAWI_STATUS_TIMEOUT=5,
        DIAWI_STATUS_POLLING_MAX=5,
        DIAWI_STATUS_POLL_INTERVAL=1.0,
    )


@pytest.fixture
def fake_diawi():
    return FakeDiawi()


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def app_file(tmp_path):
    """Binario de app temporal."""
    path = tmp_path / "MyApp.ipa"
    path.write_bytes(b"IPA binary content")
    return path
