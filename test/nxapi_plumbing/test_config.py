import pytest

from cisco_nxapi.nxapi_plumbing import NXAPICommandError

CONFIG = [
    "logging history size 200",
    "logging history size 300",
    "logging history size 400",
]


def test_config(mock_device):
    output = mock_device.config("logging history size 200")
    assert output["code"] == "200"
    assert output["msg"] == "Success"
    # the device does not echo configuration commands
    assert output["input"] == "logging history size 200"
    assert not output["body"]


def test_config_list(mock_device):
    outputs = mock_device.config_list(CONFIG)
    assert [o["input"] for o in outputs] == CONFIG
    assert [o["code"] for o in outputs] == ["200"] * 3


@pytest.mark.parametrize("mock_jsonrpc_device", [500], indirect=True)
def test_config_invalid_command_jsonrpc(mock_jsonrpc_device):
    with pytest.raises(
        NXAPICommandError, match='The command "bogus command" gave the error'
    ):
        mock_jsonrpc_device.config("bogus command")


def test_config_invalid_command_xml(mock_xml_device):
    with pytest.raises(NXAPICommandError) as e:
        mock_xml_device.config("bogus command")
    assert e.value.command == "bogus command"
