# core/params.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional

from core.endpoints import EndpointConfig
from core.signing import SIGNATURE_METHOD, SIGNATURE_VERSION

log = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    pass


@dataclass(frozen=True)
class Credentials:
    access_key_id: str
    secret_key: str
    account_id: str
    account_type: str = "SellerId"

    def __post_init__(self):
        missing = [name for name in ("access_key_id", "secret_key", "account_id")
                   if not (getattr(self, name) or "").strip()]
        if not (self.account_type or "").strip():
            missing.append("account_type")
        if missing:
            log.error("MWS credentials are incomplete: missing %s", ", ".join(missing))
            raise ConfigurationError(f"MWS: credentials not configured ({', '.join(missing)})")

    def __repr__(self) -> str:
        # секрет в логи не пишем
        return (f"Credentials(access_key_id={self.access_key_id!r}, secret_key='***', "
                f"account_id={self.account_id!r}, account_type={self.account_type!r})")


def _non_empty(params: Mapping[str, Any]) -> Dict[str, str]:
    # None и "" в набор не попадают ни с какой стороны
    out: Dict[str, str] = {}
    for k, v in params.items():
        if v is None:
            continue
        s = str(v)
        if s == "":
            continue
        out[str(k)] = s
    return out


def build_params(caller_params: Optional[Mapping[str, Any]],
                 credentials: Credentials,
                 endpoint: EndpointConfig,
                 timestamp: str) -> Dict[str, str]:
    """
    Собирает набор параметров запроса:
      - базовый блок авторизации (AWSAccessKeyId, <account_type>, SignatureVersion, Timestamp, Version, SignatureMethod)
      - поверх него параметры вызывающего (при совпадении ключа побеждают они)
    Пустые значения отбрасываются до слияния, поэтому пустой параметр вызывающего
    не затирает параметр авторизации. Экранирования здесь нет.
    """
    auth_params = {
        "AWSAccessKeyId": credentials.access_key_id,
        credentials.account_type: credentials.account_id,
        "SignatureVersion": SIGNATURE_VERSION,
        "Timestamp": timestamp,
        "Version": endpoint.api_version,
        "SignatureMethod": SIGNATURE_METHOD,
    }
    return {**_non_empty(auth_params), **_non_empty(caller_params or {})}


def enumerate_param(param: str, values: Iterable[Any]) -> Dict[str, Optional[str]]:
    """
    Разворачивает список в индексированные параметры (нумерация с 1):

        enumerate_param("MarketplaceIdList.Id", ["123", "345", "4343"])
        -> {"MarketplaceIdList.Id.1": "123",
            "MarketplaceIdList.Id.2": "345",
            "MarketplaceIdList.Id.3": "4343"}
    """
    if not param.endswith("."):
        param = param + "."
    # None остаётся None: его отбросит build_params
    return {f"{param}{i}": (v if v is None else str(v)) for i, v in enumerate(values, start=1)}
