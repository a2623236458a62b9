"""
Tests de DiawiClient (upload + espera).

python -m pytest tests/test_diawi/test_client.py
"""

from unittest.mock import patch

import pytest

from diawi import DiawiClient, EmptyTokenFieldError, JobFailedError, UploadRequest
from diawi.status import StatusPoller


class TestUploadAndWait:
    """Tests del flujo completo."""

    def test_upload_then_poll(self, diawi_settings, fake_diawi, sleep_recorder, app_file):
        """El job id del upload se usa para consultar el estado."""
        fake_diawi.queue_upload(payload={"job": "job-xyz"})
        fake_diawi.queue_status(2001, 2000, hash="h4sh", link="https://i.diawi.com/h4sh")
        client = DiawiClient(settings=diawi_settings, transport=fake_diawi.transport, sleep=sleep_recorder)

        result = client.upload_and_wait(UploadRequest(token="tok", file=str(app_file)))

        assert result.link == "https://i.diawi.com/h4sh"
        status_request = fake_diawi.status_requests()[0]
        assert status_request.url.params["job"] == "job-xyz"
        assert status_request.url.params["token"] == "tok"
        assert sleep_recorder.calls == [diawi_settings.DIAWI_STATUS_POLL_INTERVAL]

    def test_validation_error_skips_polling(self, diawi_settings, fake_diawi, app_file):
        """Si el upload falla no se consulta el estado."""
        client = DiawiClient(settings=diawi_settings, transport=fake_diawi.transport)

        with patch.object(StatusPoller, "wait_for_finished_status") as mock_wait:
            with pytest.raises(EmptyTokenFieldError):
                client.upload_and_wait(UploadRequest(token="", file=str(app_file)))

        mock_wait.assert_not_called()
        assert fake_diawi.requests == []

    def test_remote_failure_propagates(self, diawi_settings, fake_diawi, sleep_recorder, app_file):
        fake_diawi.queue_upload(payload={"job": "job-xyz"})
        fake_diawi.queue_status(4000, message="Bad binary")
        client = DiawiClient(settings=diawi_settings, transport=fake_diawi.transport, sleep=sleep_recorder)

        with pytest.raises(JobFailedError) as exc_info:
            client.upload_and_wait(UploadRequest(token="tok", file=str(app_file)))

        assert exc_info.value.response.message == "Bad binary"

    def test_components_share_settings(self, diawi_settings):
        client = DiawiClient(settings=diawi_settings)

        assert client.submitter.settings is diawi_settings
        assert client.poller.settings is diawi_settings
