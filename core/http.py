# core/http.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

from config import REQ_TIMEOUT, USER_AGENT, LOG_HTTP_BODIES

log = logging.getLogger(__name__)

# Глобальный клиент (keep-alive). httpx.Client потокобезопасен.
CLIENT = httpx.Client(timeout=REQ_TIMEOUT)


@dataclass(frozen=True)
class SignedRequest:
    url: str
    method: str
    body: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)


class MWSHTTPError(RuntimeError):
    def __init__(self, status_code: int, method: str, url: str, text: str):
        self.status_code = status_code
        self.method = method
        self.url = url
        self.text = text
        super().__init__(f"HTTP {status_code} {method} {url.split('?', 1)[0]}: {text}")


def send(request: SignedRequest,
         timeout: Optional[float] = None,
         client: Optional[httpx.Client] = None) -> httpx.Response:
    """
    Выполняет подписанный запрос как есть.
    - URL уже содержит каноническую строку и Signature — ничего не перекодируем
    - тело (если есть) отправляется без изменений в UTF-8 и в подпись не входит
    - без ретраев: не-2xx -> MWSHTTPError
    """
    http = client or CLIENT
    headers = {"User-Agent": USER_AGENT, **request.headers}
    content = request.body.encode("utf-8") if request.body else None

    resp = http.request(request.method, request.url,
                        headers=headers,
                        content=content,
                        timeout=timeout if timeout is not None else REQ_TIMEOUT)
    log.info("MWS %s %s -> %s", request.method, request.url.split("?", 1)[0], resp.status_code)
    if LOG_HTTP_BODIES:
        log.debug("MWS response body: %s", resp.text)

    if 200 <= resp.status_code < 300:
        return resp
    raise MWSHTTPError(resp.status_code, request.method, request.url, resp.text)
