import httpx

import runner
from core.client import MWSClient


def _patch_client(monkeypatch, status, text):
    def handler(request):
        return httpx.Response(status, text=text)

    def factory(api):
        return MWSClient("AK", "SK", "ACCT", api=api,
                         http_client=httpx.Client(transport=httpx.MockTransport(handler)))

    monkeypatch.setattr(runner, "client_from_env", factory)


def test_runner_prints_status(monkeypatch, capsys):
    _patch_client(monkeypatch, 200, "<Status>GREEN</Status>")
    assert runner.main(["mws"]) == 0
    assert "GREEN" in capsys.readouterr().out


def test_runner_http_error(monkeypatch, capsys):
    _patch_client(monkeypatch, 500, "boom")
    assert runner.main(["orders"]) == 1
    assert "500" in capsys.readouterr().out


def test_runner_unknown_api(capsys):
    assert runner.main(["nope"]) == 1
    assert "orders" in capsys.readouterr().out


def test_runner_missing_credentials(monkeypatch, capsys):
    monkeypatch.setattr("core.client.MWS_ACCESS_KEY", "")
    assert runner.main(["mws"]) == 1
    assert "credentials" in capsys.readouterr().out
