from enum import Enum, IntEnum


class DiawiStatus(IntEnum):
    """Codigos de estado del endpoint /status de Diawi"""

    OK = 2000              # Terminado, hash y link disponibles
    PROCESSING = 2001      # El job sigue en cola o procesando
    ERROR_OCCURRED = 4000  # Diawi reporto un error para el job
    UNKNOWN = -1           # Cualquier otro codigo (solo lado cliente)

    @classmethod
    def from_code(cls, code: int) -> "DiawiStatus":
        """Mapear un codigo de la API; lo desconocido es UNKNOWN"""
        try:
            status = cls(code)
        except ValueError:
            return cls.UNKNOWN
        # -1 no es un valor que envie el servicio
        return cls.UNKNOWN if status is cls.UNKNOWN else status


class FormField(str, Enum):
    """Nombres de campos multipart del endpoint de upload"""

    FILE = "file"
    TOKEN = "token"
    PASSWORD = "password"
    COMMENT = "comment"
    CALLBACK_URL = "callback_url"
    CALLBACK_EMAILS = "callback_emails"
    FIND_BY_UDID = "find_by_udid"
    WALL_OF_APPS = "wall_of_apps"
    INSTALLATION_NOTIFICATIONS = "installation_notifications"


# Content-Type del archivo segun extension

CONTENT_TYPE_MAP = {
    ".ipa": "application/octet-stream",
    ".apk": "application/vnd.android.package-archive",
    ".zip": "application/zip",
}

DEFAULT_CONTENT_TYPE = "application/octet-stream"


# Codigos de error

class ErrorKind(str, Enum):
    """Etiqueta de categoria de cada DiawiError"""

    DIAWI_ERROR = "DIAWI_ERROR"        # Base, sin categoria concreta
    EMPTY_FILE_FIELD = "EMPTY_FILE_FIELD"
    EMPTY_TOKEN_FIELD = "EMPTY_TOKEN_FIELD"
    FILE_ACCESS = "FILE_ACCESS"
    TRANSPORT = "TRANSPORT"
    HTTP_STATUS = "HTTP_STATUS"
    DECODE = "DECODE"
    JOB_FAILED = "JOB_FAILED"
    UNKNOWN_STATUS = "UNKNOWN_STATUS"
    MAX_POLLS_REACHED = "MAX_POLLS_REACHED"


# Mensajes de error

ERROR_MESSAGES = {
    ErrorKind.DIAWI_ERROR: "Diawi client error",
    ErrorKind.EMPTY_FILE_FIELD: "File value left blank",
    ErrorKind.EMPTY_TOKEN_FIELD: "Token value left blank",
    ErrorKind.FILE_ACCESS: "Could not open the file to upload",
    ErrorKind.TRANSPORT: "Could not reach Diawi",
    ErrorKind.HTTP_STATUS: "Diawi answered with a non-2xx status",
    ErrorKind.DECODE: "Could not decode the Diawi response",
    ErrorKind.JOB_FAILED: "Diawi reported an error for the job",
    ErrorKind.UNKNOWN_STATUS: "Unknown status error",
    ErrorKind.MAX_POLLS_REACHED: "Exceeded max number of polls to get upload status",
}
