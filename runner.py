# runner.py
import logging
import sys

import httpx

from config import LOG_LEVEL, MWS_API
from core.client import client_from_env
from core.endpoints import ApiNotRegistered, available_apis
from core.http import MWSHTTPError
from core.params import ConfigurationError


def main(argv=None) -> int:
    """
    Проверка доступности MWS: GetServiceStatus для под-API из аргумента или MWS_API.
    Ответ печатается как есть (разбор XML — забота вызывающего).
    """
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = list(sys.argv[1:] if argv is None else argv)
    api = (args[0] if args else MWS_API).strip().lower()

    try:
        client = client_from_env(api)
    except ApiNotRegistered as e:
        print(f"[STATUS] {e}. Доступные: {', '.join(available_apis())}")
        return 1
    except ConfigurationError as e:
        print(f"[STATUS] {e}")
        return 1

    try:
        resp = client.get_service_status()
    except (MWSHTTPError, httpx.HTTPError) as e:
        print(f"[STATUS] {api}: {e}")
        return 1

    print(resp.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
