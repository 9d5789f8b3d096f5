import os
from typing import List, Optional

DEFAULT_ECB_URL = "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-hist.xml"


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name, default)
    return value.strip() if value else value


def get_ecb_url() -> str:
    return _get_env("ECB_URL") or DEFAULT_ECB_URL


def get_http_timeout() -> float:
    raw = _get_env("ECB_HTTP_TIMEOUT_SECONDS", "20")
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ValueError(f"ECB_HTTP_TIMEOUT_SECONDS must be a number, got {raw!r}") from exc
    if timeout <= 0:
        raise ValueError(f"ECB_HTTP_TIMEOUT_SECONDS must be positive, got {raw!r}")
    return timeout


def get_log_level() -> str:
    return (_get_env("LOG_LEVEL") or "INFO").upper()


def get_cors_origins() -> List[str]:
    raw = _get_env("CORS_ALLOW_ORIGINS") or "*"
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
