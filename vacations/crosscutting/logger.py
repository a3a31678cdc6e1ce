"""
===============================================================================
TARJETA CRC — crosscutting/logger.py
===============================================================================

Módulo:
    Logging estructurado (JSON) del servicio de vacaciones

Responsabilidades:
    - Emitir una línea JSON por evento, correlacionada con el request
      (request_id, method, path, user_id).
    - No filtrar credenciales: claves sensibles, headers Bearer y JWTs
      se reemplazan antes de serializar.
    - Exponer error_code / error_id de las excepciones de dominio para
      poder cruzar un log con la respuesta RFC 7807.

Colaboradores:
    - vacations/context.py: ContextVars del request.
    - crosscutting/config.py: log_level / log_json.
    - identity.session, infrastructure.identity: loguean logins sin secretos.

Notas:
    - Los loggers de módulo (logging.getLogger(__name__)) cuelgan de
      "vacations" y heredan este handler.
===============================================================================
"""

from __future__ import annotations

import json
import logging
import re
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

REDACTED = "***REDACTADO***"

# Atributos propios de LogRecord; el resto llegó por extra={...}.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
    "taskName",
}

# Una clave es sensible si contiene alguno de estos fragmentos
# (password_hash, jwt_secret, access_token, ...).
_SENSITIVE_FRAGMENTS = (
    "password",
    "passwd",
    "secret",
    "token",
    "authorization",
    "credential",
)

_BEARER_VALUE = re.compile(r"(?i)\bbearer\s+\S+")
_JWT_VALUE = re.compile(r"\beyJ[\w-]*\.[\w-]+\.[\w-]+")


def is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(fragment in lowered for fragment in _SENSITIVE_FRAGMENTS)


class LogScrubber:
    """
    Limpia valores antes de volcarlos al log.

    - Claves sensibles -> REDACTED (en cualquier nivel de anidamiento).
    - Texto libre: Bearer/JWT embebidos -> REDACTED, y recorte a max_chars
      (observaciones y motivos de rechazo pueden ser largos).
    - Estructuras más profundas que max_depth se cortan.
    """

    def __init__(self, max_chars: int = 2_000, max_depth: int = 4):
        self._max_chars = max_chars
        self._max_depth = max_depth

    def scrub_text(self, text: str) -> str:
        text = _BEARER_VALUE.sub(f"Bearer {REDACTED}", text)
        text = _JWT_VALUE.sub(REDACTED, text)
        if len(text) > self._max_chars:
            return text[: self._max_chars] + "…(truncado)"
        return text

    def scrub(self, value: Any, *, key: str | None = None, depth: int = 0) -> Any:
        if key is not None and is_sensitive_key(key):
            return REDACTED
        if depth > self._max_depth:
            return "***TRUNCADO***"

        if isinstance(value, str):
            return self.scrub_text(value)
        if isinstance(value, (bytes, bytearray)):
            return f"<bytes {len(value)}B>"
        if isinstance(value, dict):
            return {
                str(k): self.scrub(v, key=str(k), depth=depth + 1)
                for k, v in value.items()
            }
        if isinstance(value, (list, tuple, set, frozenset)):
            return [self.scrub(v, key=key, depth=depth + 1) for v in value]
        if isinstance(value, (bool, int, float)) or value is None:
            return value
        # UUID, date, Enum, ...
        return self.scrub_text(str(value))


class JSONFormatter(logging.Formatter):
    """LogRecord -> JSON con contexto de request, extras limpios y excepción."""

    def __init__(self, scrubber: LogScrubber | None = None):
        super().__init__()
        self._scrubber = scrubber or LogScrubber()

    def format(self, record: logging.LogRecord) -> str:
        from ..context import get_context_dict

        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._scrubber.scrub_text(record.getMessage()),
            "source": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        payload.update(get_context_dict())

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                payload[key] = self._scrubber.scrub(value, key=key)

        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = self._exception_payload(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))

    def _exception_payload(self, exc_info) -> dict[str, Any]:
        exc_type, exc, tb = exc_info
        info: dict[str, Any] = {
            "type": exc_type.__name__,
            "message": self._scrubber.scrub_text(str(exc)),
            "stacktrace": traceback.format_exception(exc_type, exc, tb),
        }
        # VacationDomainError y derivados
        error_code = getattr(exc, "error_code", None)
        if error_code:
            info["error_code"] = error_code
            info["error_id"] = getattr(exc, "error_id", None)
        return info


def setup_logger(name: str = "vacations", settings=None) -> logging.Logger:
    """
    Configura el logger raíz del paquete (idempotente: un solo handler).

    settings: Settings opcional; por defecto get_settings().
    """
    if settings is None:
        from .config import get_settings

        settings = get_settings()

    log = logging.getLogger(name)
    log.setLevel(settings.log_level)

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            JSONFormatter()
            if settings.log_json
            else logging.Formatter("%(levelname)s %(name)s %(message)s")
        )
        log.addHandler(handler)

    return log


logger = setup_logger()
