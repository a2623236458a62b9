"""
Configuración centralizada de logging con rotación diaria.

Cada proceso escribe a su propio archivo en logs/:
- logs/diawi.log   → uploads y polling contra Diawi

Los archivos rotan a medianoche y se eliminan después de N días.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler
from typing import Optional

from config.settings import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logs_directory() -> Path:
    """Retorna el directorio de logs (relativo a la raíz del proyecto si no es absoluto)."""
    log_dir = Path(settings.logging.LOG_DIR)
    if not log_dir.is_absolute():
        log_dir = Path(__file__).resolve().parent.parent / log_dir
    return log_dir


def setup_logging(
    service_name: str = "diawi",
    log_dir: Optional[Path] = None
) -> logging.Logger:
    """
    Configura logging con rotación diaria para un servicio específico.

    Args:
        service_name: Nombre del servicio. Define el archivo de log:
                     - "diawi" → logs/diawi.log
        log_dir: Directorio alternativo (tests)

    Returns:
        Logger raíz configurado
    """
    log_level = getattr(logging, settings.general.LOG_LEVEL, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Limpiar handlers existentes (evita duplicados)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Handler 1: Consola (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if not settings.logging.LOG_TO_FILE:
        return root_logger

    # Handler 2: Archivo con rotación diaria
    logs_dir = log_dir or get_logs_directory()
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"{service_name}.log"
    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=settings.logging.LOG_RETENTION_DAYS,
        encoding="utf-8",
        utc=False
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    # Sufijo para archivos rotados: diawi.log.2026-01-23
    file_handler.suffix = "%Y-%m-%d"

    root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging iniciado [{service_name}] → {log_file}")

    return root_logger
