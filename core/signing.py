# core/signing.py
from __future__ import annotations

import base64
import hashlib
import hmac
import re
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

# MWS Signature Version 2: HmacSHA256 по канонической строке
SIGNATURE_VERSION = "2"
SIGNATURE_METHOD = "HmacSHA256"

# RFC 3986 unreserved: буквы, цифры и "-_.~"
_SAFE = "-_.~"

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def percent_encode(value: Any) -> str:
    """Percent-encode по RFC 3986 (пробел -> %20, не '+')."""
    return quote(str(value), safe=_SAFE)


def canonical_query(params: Mapping[str, str]) -> str:
    """
    Каноническая строка запроса: ключи по возрастанию, значения в percent-encode, склейка через '&'.
    Одна и та же строка и подписывается, и уходит в URL.
    """
    sorted_items = sorted(params.items(), key=lambda kv: kv[0])
    return "&".join([f"{k}={percent_encode(v)}" for k, v in sorted_items])


def _host(domain: str) -> str:
    # "https://MWS.AmazonServices.com" -> "mws.amazonservices.com"
    return _SCHEME.sub("", domain).lower()


def string_to_sign(method: str, domain: str, path: str, query: str) -> str:
    return "\n".join([method.upper(), _host(domain), path, query])


def calc_signature(method: str, domain: str, path: str, query: str, secret_key: str) -> str:
    """
    HMAC-SHA256 -> base64.
    Ключ HMAC — байты secret_key, payload — строка из string_to_sign().
    """
    payload = string_to_sign(method, domain, path, query).encode("utf-8")
    digest = hmac.new(secret_key.encode("utf-8"), payload, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def iso_utc_timestamp(now: Optional[datetime] = None) -> str:
    # 2020-01-01T00:00:00Z
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%SZ")


def calc_md5(data: Union[str, bytes]) -> str:
    """Base64 от MD5 (для ContentMD5Value тела запроса)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(hashlib.md5(data).digest()).decode("ascii")
