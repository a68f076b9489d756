# core/endpoints.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

# === Под-API MWS: реестр конфигураций ===
# Каждое под-API отличается только путём, версией, XML-namespace ответа
# и именем параметра, в котором передаётся account id.

DEFAULT_DOMAIN = "https://mws.amazonservices.com"
DEFAULT_API = "mws"


@dataclass(frozen=True)
class EndpointConfig:
    domain: str = DEFAULT_DOMAIN
    path: str = "/"
    api_version: str = "2009-01-01"
    response_namespace: str = ""
    # "SellerId" | "Merchant" — имя параметра, а не значение
    account_type: str = "SellerId"


DEFAULT_ENDPOINT = EndpointConfig()

_registry: Dict[str, EndpointConfig] = {}
_defaults_registered: bool = False


class ApiNotRegistered(RuntimeError):
    pass


def register_endpoint(code: str, endpoint: EndpointConfig) -> None:
    """
    Регистрирует конфигурацию под-API. Повторная регистрация перезапишет запись.
    """
    _registry[code.strip().lower()] = endpoint


def _register_defaults_once() -> None:
    global _defaults_registered
    if _defaults_registered:
        return

    register_endpoint(DEFAULT_API, DEFAULT_ENDPOINT)
    register_endpoint("feeds", EndpointConfig(
        account_type="Merchant",
        response_namespace="{http://mws.amazonaws.com/doc/2009-01-01/}",
    ))
    register_endpoint("reports", EndpointConfig(account_type="Merchant"))
    register_endpoint("orders", EndpointConfig(
        path="/Orders/2013-09-01",
        api_version="2013-09-01",
        response_namespace="{https://mws.amazonservices.com/Orders/2013-09-01}",
    ))
    register_endpoint("products", EndpointConfig(
        path="/Products/2011-10-01",
        api_version="2011-10-01",
        response_namespace="{http://mws.amazonservices.com/schema/Products/2011-10-01}",
    ))
    register_endpoint("sellers", EndpointConfig(
        path="/Sellers/2011-07-01",
        api_version="2011-07-01",
        response_namespace="{http://mws.amazonservices.com/schema/Sellers/2011-07-01}",
    ))
    register_endpoint("inventory", EndpointConfig(
        path="/FulfillmentInventory/2010-10-01",
        api_version="2010-10-01",
        response_namespace="{http://mws.amazonaws.com/FulfillmentInventory/2010-10-01}",
    ))

    _defaults_registered = True


def get_endpoint(code: str | None = None) -> EndpointConfig:
    """
    Возвращает конфигурацию под-API по коду. Если code не задан — базовое API ("mws").
    """
    _register_defaults_once()
    key = (code or DEFAULT_API).strip().lower()
    endpoint = _registry.get(key)
    if endpoint is None:
        raise ApiNotRegistered(f"MWS API is not registered: '{key}'")
    return endpoint


def available_apis() -> List[str]:
    """Список зарегистрированных кодов под-API (напр. ["feeds", "mws", "orders", ...])."""
    _register_defaults_once()
    return sorted(_registry.keys())
