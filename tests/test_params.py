import pytest

from core.endpoints import EndpointConfig
from core.params import ConfigurationError, Credentials, build_params, enumerate_param

TS = "2020-01-01T00:00:00Z"
AUTH_KEYS = {"AWSAccessKeyId", "SellerId", "SignatureVersion", "Timestamp", "Version", "SignatureMethod"}


@pytest.fixture
def creds():
    return Credentials("AK", "SK", "ACCT")


def test_auth_block(creds):
    params = build_params(None, creds, EndpointConfig(), TS)
    assert params == {
        "AWSAccessKeyId": "AK",
        "SellerId": "ACCT",
        "SignatureVersion": "2",
        "Timestamp": TS,
        "Version": "2009-01-01",
        "SignatureMethod": "HmacSHA256",
    }


def test_caller_params_merged(creds):
    params = build_params({"Action": "GetServiceStatus"}, creds, EndpointConfig(), TS)
    assert set(params) == AUTH_KEYS | {"Action"}
    assert params["Action"] == "GetServiceStatus"


def test_caller_overrides_colliding_key(creds):
    params = build_params({"Version": "2013-09-01"}, creds, EndpointConfig(), TS)
    assert params["Version"] == "2013-09-01"


def test_empty_values_dropped(creds):
    caller = {"Action": "ListOrders", "NextToken": "", "CreatedAfter": None, "Zero": 0}
    params = build_params(caller, creds, EndpointConfig(), TS)
    assert "NextToken" not in params
    assert "CreatedAfter" not in params
    assert params["Zero"] == "0"
    assert set(params) <= AUTH_KEYS | set(caller)
    assert all(v for v in params.values())


def test_empty_caller_value_does_not_erase_auth_value(creds):
    params = build_params({"Version": "", "Timestamp": None}, creds, EndpointConfig(), TS)
    assert params["Version"] == "2009-01-01"
    assert params["Timestamp"] == TS


def test_empty_endpoint_version_dropped(creds):
    params = build_params({}, creds, EndpointConfig(api_version=""), TS)
    assert "Version" not in params


def test_account_type_names_the_parameter():
    creds = Credentials("AK", "SK", "ACCT", account_type="Merchant")
    params = build_params({}, creds, EndpointConfig(), TS)
    assert params["Merchant"] == "ACCT"
    assert "SellerId" not in params


@pytest.mark.parametrize("field", ["access_key_id", "secret_key", "account_id"])
def test_credentials_require_values(field):
    values = {"access_key_id": "AK", "secret_key": "SK", "account_id": "ACCT"}
    values[field] = ""
    with pytest.raises(ConfigurationError):
        Credentials(**values)


def test_credentials_repr_hides_secret():
    assert "SK-secret" not in repr(Credentials("AK", "SK-secret", "ACCT"))


def test_enumerate_param():
    assert enumerate_param("MarketplaceIdList.Id", ["123", "345", "4343"]) == {
        "MarketplaceIdList.Id.1": "123",
        "MarketplaceIdList.Id.2": "345",
        "MarketplaceIdList.Id.3": "4343",
    }


def test_enumerate_param_trailing_dot():
    values = ["123", "345", "4343"]
    assert enumerate_param("MarketplaceIdList.Id.", values) == enumerate_param("MarketplaceIdList.Id", values)


def test_enumerate_param_empty_and_iterables():
    assert enumerate_param("ReportTypeList.Type", []) == {}
    assert enumerate_param("FeedIdList.Id", (n for n in (7, 8))) == {"FeedIdList.Id.1": "7", "FeedIdList.Id.2": "8"}


def test_enumerate_param_none_dropped_by_build(creds):
    listed = enumerate_param("MarketplaceIdList.Id", ["ATVPDKIKX0DER", None, ""])
    assert listed["MarketplaceIdList.Id.2"] is None
    params = build_params(listed, creds, EndpointConfig(), TS)
    assert params["MarketplaceIdList.Id.1"] == "ATVPDKIKX0DER"
    assert "MarketplaceIdList.Id.2" not in params
    assert "MarketplaceIdList.Id.3" not in params
    assert "None" not in params.values()
