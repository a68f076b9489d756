# core/client.py
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, Iterable, Mapping, Optional

import httpx

from config import MWS_ACCESS_KEY, MWS_SECRET_KEY, MWS_ACCOUNT_ID, MWS_DOMAIN, MWS_API
from core import http
from core.endpoints import DEFAULT_DOMAIN, EndpointConfig, get_endpoint
from core.http import SignedRequest
from core.params import Credentials, build_params, enumerate_param
from core.signing import (
    calc_md5,
    calc_signature,
    canonical_query,
    iso_utc_timestamp,
    percent_encode,
)

log = logging.getLogger(__name__)


class MWSClient:
    """
    Клиент MWS с подписью запросов (Signature V2).

    Учётные данные и конфигурация под-API неизменны после создания, поэтому один
    инстанс можно использовать из нескольких потоков: всё, что относится к запросу
    (параметры, каноническая строка, подпись), живёт только внутри вызова.
    """

    def __init__(self, access_key: str, secret_key: str, account_id: str,
                 api: Optional[str] = None,
                 domain: Optional[str] = None,
                 path: Optional[str] = None,
                 version: Optional[str] = None,
                 account_type: Optional[str] = None,
                 http_client: Optional[httpx.Client] = None):
        base = get_endpoint(api)
        self.endpoint: EndpointConfig = replace(
            base,
            domain=(domain or self._default_domain(base)).rstrip("/"),
            path=path or base.path,
            api_version=version or base.api_version,
            account_type=account_type or base.account_type,
        )
        # ConfigurationError здесь, а не при первом запросе
        self.credentials = Credentials(
            access_key_id=(access_key or "").strip(),
            secret_key=secret_key or "",
            account_id=(account_id or "").strip(),
            account_type=self.endpoint.account_type,
        )
        self._http = http_client

    @staticmethod
    def _default_domain(base: EndpointConfig) -> str:
        # MWS_DOMAIN/MWS_REGION только для под-API с доменом по умолчанию
        if base.domain == DEFAULT_DOMAIN:
            return MWS_DOMAIN or base.domain
        return base.domain

    # ---- совместимые с базовым API свойства ----

    @property
    def domain(self) -> str:
        return self.endpoint.domain

    @property
    def uri(self) -> str:
        return self.endpoint.path

    @property
    def version(self) -> str:
        return self.endpoint.api_version

    @property
    def namespace(self) -> str:
        return self.endpoint.response_namespace

    # ---- подпись ----

    def calc_signature(self, method: str, request_description: str) -> str:
        return calc_signature(method, self.endpoint.domain, self.endpoint.path,
                              request_description, self.credentials.secret_key)

    def assemble_request(self, extra_data: Optional[Mapping[str, Any]] = None,
                         method: str = "GET",
                         now: Optional[datetime] = None,
                         body: Optional[str] = None,
                         extra_headers: Optional[Mapping[str, str]] = None) -> SignedRequest:
        """
        timestamp -> параметры -> каноническая строка -> подпись -> URL.
        Signature добавляется в конец URL и сама в подпись не входит.
        """
        method = method.upper()
        params = build_params(extra_data, self.credentials, self.endpoint, iso_utc_timestamp(now))
        query = canonical_query(params)
        signature = self.calc_signature(method, query)

        log.debug("MWS sign %s %s action=%s", method, self.endpoint.path, params.get("Action"))

        url = f"{self.endpoint.domain}{self.endpoint.path}?{query}&Signature={percent_encode(signature)}"
        return SignedRequest(url=url, method=method, body=body, headers=dict(extra_headers or {}))

    # ---- запросы ----

    def make_request(self, extra_data: Optional[Mapping[str, Any]] = None,
                     method: str = "GET",
                     extra_headers: Optional[Mapping[str, str]] = None,
                     body: Optional[str] = None) -> httpx.Response:
        req = self.assemble_request(extra_data, method=method, body=body, extra_headers=extra_headers)
        return http.send(req, client=self._http)

    def get_service_status(self) -> httpx.Response:
        """
        GREEN, GREEN_I, YELLOW или RED — в зависимости от доступности API.
        """
        return self.make_request({"Action": "GetServiceStatus"})

    # ---- хелперы ----

    @staticmethod
    def enumerate_param(param: str, values: Iterable[Any]) -> Dict[str, Optional[str]]:
        return enumerate_param(param, values)

    @staticmethod
    def calc_md5(data: str | bytes) -> str:
        return calc_md5(data)

    def __repr__(self) -> str:
        return f"MWSClient(domain={self.domain!r}, uri={self.uri!r}, version={self.version!r})"


def client_from_env(api: Optional[str] = None, **kwargs: Any) -> MWSClient:
    """Клиент из переменных окружения (.env): MWS_ACCESS_KEY / MWS_SECRET_KEY / MWS_ACCOUNT_ID."""
    return MWSClient(MWS_ACCESS_KEY, MWS_SECRET_KEY, MWS_ACCOUNT_ID, api=api or MWS_API, **kwargs)
