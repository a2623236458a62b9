"""
Subpaquete HTTP - Envío de requests a Diawi.

Centraliza el envío con httpx y el mapeo de fallos HTTP/JSON a DiawiError,
compartido por UploadSubmitter y StatusPoller.

Uso:
    from diawi.http import BaseDiawiClient

    class MiCliente(BaseDiawiClient):
        ...
"""

from diawi.http.base_client import BaseDiawiClient

__all__ = [
    "BaseDiawiClient",
]
