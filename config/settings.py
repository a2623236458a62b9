from pydantic import Field, validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class GeneralSettings(BaseSettings):
    """Configuracion general"""

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Nivel de logging: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    class Config:
        env_file = ".env"
        case_sensitive = True


class DiawiSettings(BaseSettings):
    """Configuracion del servicio Diawi (endpoints, timeouts, polling)"""

    DIAWI_UPLOAD_URL: str = Field(
        default="https://upload.diawi.com/",
        description="Endpoint POST multipart para subir la app"
    )
    DIAWI_STATUS_URL: str = Field(
        default="https://upload.diawi.com/status",
        description="Endpoint GET para consultar el estado del job"
    )
    DIAWI_UPLOAD_TIMEOUT: float = Field(
        default=300,
        description="Timeout en segundos para el upload del binario"
    )
    DIAWI_STATUS_TIMEOUT: float = Field(
        default=30,
        description="Timeout en segundos para cada consulta de estado"
    )
    DIAWI_STATUS_POLLING_MAX: int = Field(
        default=30,
        description="Maximo de reintentos mientras el job esta en Processing"
    )
    DIAWI_STATUS_POLL_INTERVAL: float = Field(
        default=1.0,
        description="Segundos entre consultas (Diawi recomienda minimo 1s)"
    )

    @validator("DIAWI_UPLOAD_TIMEOUT", "DIAWI_STATUS_TIMEOUT")
    def validate_timeout(cls, v):
        """Los timeouts deben ser positivos"""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @validator("DIAWI_STATUS_POLLING_MAX")
    def validate_polling_max(cls, v):
        """0 significa una sola consulta, sin reintentos"""
        if v < 0:
            raise ValueError("polling max cannot be negative")
        return v

    @validator("DIAWI_STATUS_POLL_INTERVAL")
    def validate_interval(cls, v):
        if v < 0:
            raise ValueError("poll interval cannot be negative")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


class LoggingSettings(BaseSettings):
    """Configuracion de logging"""

    LOG_DIR: str = Field(
        default="logs",
        description="Directorio para archivos de log"
    )
    LOG_RETENTION_DAYS: int = Field(
        default=1,
        description="Dias de logs rotados a mantener"
    )
    LOG_TO_FILE: bool = Field(
        default=True,
        description="Escribir logs a archivo ademas de stdout"
    )

    class Config:
        env_file = ".env"
        case_sensitive = True


class Settings(BaseSettings):
    """
    Clase principal que agrupa todas las configuraciones
    Uso: from config.settings import settings
         settings.diawi.DIAWI_UPLOAD_URL, settings.LOG_LEVEL, etc
    """

    # Subconfigurations
    general: GeneralSettings = GeneralSettings()
    diawi: DiawiSettings = DiawiSettings()
    logging: LoggingSettings = LoggingSettings()

    # Shortcuts para acceso directo
    @property
    def LOG_LEVEL(self) -> str:
        return self.general.LOG_LEVEL

    class Config:
        env_file = ".env"
        case_sensitive = True


# Singleton instance
@lru_cache()
def get_settings() -> Settings:
    """
    Obtener instancia singleton de Settings
    Uso: from config.settings import get_settings
         settings = get_settings()
    """
    return Settings()


# Instancia global (para imports directos)
settings = get_settings()
