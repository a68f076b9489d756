# config.py
import os
from dotenv import load_dotenv

load_dotenv()

# =========================
# Конфигурация MWS-клиента:
# - MWS_ACCESS_KEY / MWS_SECRET_KEY / MWS_ACCOUNT_ID — учётные данные по умолчанию
# - MWS_REGION = "us" (по умолчанию) — выбирает домен из таблицы регионов
# - MWS_DOMAIN — явное переопределение домена (scheme+host)
# - MWS_API = "mws" — код под-API для runner.py (см. core/endpoints.py)
# - Ничего не валидируем здесь: ошибки конфигурации ловит клиент при создании.
# =========================

# ---------- Утилиты ----------
def _as_bool(v: str, default: bool = False) -> bool:
    if v is None:
        return default
    return str(v).strip().lower() in ("1", "true", "yes", "y", "on")

# ---------- Регионы MWS ----------
REGION_DOMAINS = {
    "us": "https://mws.amazonservices.com",
    "ca": "https://mws.amazonservices.ca",
    "mx": "https://mws.amazonservices.com.mx",
    "br": "https://mws.amazonservices.com",
    "eu": "https://mws-eu.amazonservices.com",
    "uk": "https://mws-eu.amazonservices.com",
    "in": "https://mws.amazonservices.in",
    "jp": "https://mws.amazonservices.jp",
    "au": "https://mws.amazonservices.com.au",
    "cn": "https://mws.amazonservices.com.cn",
}
DEFAULT_REGION = "us"

def _default_domain(region: str) -> str:
    # Для неизвестного региона — домен США, как у базового API
    return REGION_DOMAINS.get(region, REGION_DOMAINS[DEFAULT_REGION])

MWS_REGION = os.getenv("MWS_REGION", DEFAULT_REGION).strip().lower() or DEFAULT_REGION
MWS_DOMAIN = os.getenv("MWS_DOMAIN", "").strip().rstrip("/") or _default_domain(MWS_REGION)

# ---------- Учётные данные ----------
MWS_ACCESS_KEY = os.getenv("MWS_ACCESS_KEY", "").strip()
MWS_SECRET_KEY = os.getenv("MWS_SECRET_KEY", "").strip()
MWS_ACCOUNT_ID = os.getenv("MWS_ACCOUNT_ID", "").strip()
MWS_API        = os.getenv("MWS_API", "mws").strip().lower() or "mws"

# ---------- Сеть ----------
REQ_TIMEOUT = int(os.getenv("REQ_TIMEOUT", "12"))
USER_AGENT  = os.getenv("USER_AGENT", "").strip() or "python-mws-signed/0.1.0 (Language=Python)"

# ---------- Логи ----------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
LOG_HTTP_BODIES = _as_bool(os.getenv("LOG_HTTP_BODIES", "false"), False)
