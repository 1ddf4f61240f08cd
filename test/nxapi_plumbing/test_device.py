import pytest

from cisco_nxapi.nxapi_plumbing import Device, NXAPIError
from cisco_nxapi.nxapi_plumbing import RPCClient, XMLClient, JSONClient


@pytest.mark.parametrize(
    "api_format,client_class",
    [("jsonrpc", RPCClient), ("xml", XMLClient), ("json", JSONClient)],
)
def test_device_api_format(api_format, client_class):
    device = Device("nxos1", "admin", "foo", api_format=api_format)
    assert isinstance(device.api, client_class)
    assert device.api.url == "http://nxos1:80/ins"


def test_device_invalid_api_format():
    with pytest.raises(NXAPIError, match="invalid api_format"):
        Device("nxos1", "admin", "foo", api_format="yaml")


def test_device_invalid_transport():
    with pytest.raises(NXAPIError, match="invalid transport"):
        Device("nxos1", "admin", "foo", transport="ssh")


def test_device_https_default_port():
    device = Device("nxos1", "admin", "foo", transport="https")
    assert device.api.url == "https://nxos1:443/ins"


def test_save(mock_jsonrpc_device):
    assert mock_jsonrpc_device.save() is True


def test_save_no_overwrite(mock_jsonrpc_device):
    assert mock_jsonrpc_device.save(filename="existing.cfg") is False


def test_rollback(mock_jsonrpc_device):
    assert mock_jsonrpc_device.rollback("chk1") is None


def test_checkpoint(mock_jsonrpc_device):
    assert mock_jsonrpc_device.checkpoint("chk1") is None


def test_transport_errors_are_client_exceptions():
    from cisco_nxapi.base.exceptions import NXAPIClientException
    from cisco_nxapi.nxapi_plumbing import NXAPICommandError, NXAPIPostError

    for error in (NXAPIError, NXAPICommandError, NXAPIPostError):
        assert issubclass(error, NXAPIClientException)
    assert str(NXAPICommandError("show x", "boom")) == (
        'The command "show x" gave the error "boom".'
    )
