import pytest

from cisco_nxapi import nxos
from cisco_nxapi.base.exceptions import UnsupportedCommand
from cisco_nxapi.nxos import SUPPORTED_COMMANDS, decode, get_decoder


@pytest.mark.parametrize("command", SUPPORTED_COMMANDS)
def test_every_command_has_a_decoder(command):
    decoder = get_decoder(command)
    assert decoder.COMMAND == command
    for name in ("BODY", "parse_response", "parse_result", "parse_body"):
        assert hasattr(decoder, name)


@pytest.mark.parametrize(
    "command, module",
    [
        ("show version", "show_version"),
        ("SHOW   Version", "show_version"),
        ("  show ip arp detail vrf all ", "show_ip_arp_detail_vrf_all"),
        ("show ntp peer-status | json", "show_ntp_peer_status"),
        ("show port-security address|xml", "show_port_security_address"),
    ],
)
def test_get_decoder_normalizes(command, module):
    assert get_decoder(command).__name__ == "cisco_nxapi.nxos." + module


@pytest.mark.parametrize("command", ["show running-config", "show ip", "", "   ", None])
def test_get_decoder_unsupported(command):
    with pytest.raises(UnsupportedCommand):
        get_decoder(command)


def test_decode(mocked_data):
    body = decode("show version", mocked_data("show_version"))
    assert body["host_name"] == "macsec2"


def test_package_exports():
    import cisco_nxapi

    assert cisco_nxapi.decode is decode
    assert cisco_nxapi.SUPPORTED_COMMANDS is nxos.SUPPORTED_COMMANDS
    assert cisco_nxapi.Duration.parse("1w").format() == "P7D"
