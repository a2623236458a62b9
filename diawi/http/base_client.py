"""
Base Client - Envío HTTP síncrono contra Diawi.

Cada llamada abre su propio httpx.Client con su timeout; no hay reintentos
a este nivel. Los fallos se traducen a:
- TransportError: timeout / conexión
- BadStatusError: respuesta no 2xx
- DecodeError: cuerpo que no es el JSON esperado
"""

import logging
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError as PydanticValidationError

from config.settings import DiawiSettings, get_settings
from diawi.errors import BadStatusError, DecodeError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseDiawiClient:
    """Configuración y envío compartidos por los componentes de Diawi."""

    def __init__(
        self,
        settings: Optional[DiawiSettings] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Args:
            settings: Endpoints, timeouts y límites; por defecto los globales
            transport: Transporte httpx alternativo (tests: httpx.MockTransport)
        """
        self.settings = settings or get_settings().diawi
        self.transport = transport

    def _send(
        self,
        method: str,
        url: str,
        timeout: float,
        response_model: Type[ModelT],
        **kwargs
    ) -> ModelT:
        """
        Enviar un request y decodificar la respuesta JSON.

        Args:
            method: "GET" o "POST"
            url: URL destino
            timeout: Timeout en segundos de esta llamada
            response_model: Modelo Pydantic de la respuesta
            **kwargs: params, files, etc. para httpx

        Returns:
            Instancia de response_model

        Raises:
            TransportError, BadStatusError, DecodeError
        """
        try:
            with httpx.Client(timeout=timeout, transport=self.transport) as client:
                response = client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug(f"{method} {url} → {response.status_code}")

        if not response.is_success:
            raise BadStatusError(response.status_code, response.text)

        try:
            return response_model.model_validate_json(response.content)
        except PydanticValidationError as e:
            raise DecodeError(f"Could not decode {response_model.__name__}: {e}") from e
