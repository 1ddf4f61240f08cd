#!/usr/bin/env python
"""py.test fixtures to be used in the nxapi_plumbing test suite."""
from os import path
import sys
import pytest
import yaml

from cisco_nxapi.nxapi_plumbing import Device
from mock_device import MockDevice


PWD = path.dirname(path.realpath(__file__))

API_FORMATS = ("jsonrpc", "xml", "json")


def parse_yaml(yaml_file):
    """Parses a yaml file, returning its contents as a dict."""
    try:
        with open(yaml_file) as f:
            return yaml.safe_load(f)
    except IOError:
        sys.exit("Unable to open YAML file: {}".format(yaml_file))


def pytest_addoption(parser):
    """Add test_device option to py.test invocations."""
    parser.addoption(
        "--test_device",
        action="store",
        dest="test_device",
        type=str,
        help="Specify the device (from etc/test_devices.yml) to test on",
    )


def build_mock_device(api_format, status_code=200):
    return MockDevice(
        "nxos1.fake.com",
        "admin",
        "foo",
        transport="https",
        api_format=api_format,
        port=8443,
        timeout=60,
        verify=False,
        status_code=status_code,
    )


@pytest.fixture(params=API_FORMATS)
def mock_device(request):
    """The same mocked device behind each API format."""
    return build_mock_device(request.param)


@pytest.fixture
def mock_jsonrpc_device(request):
    """Mocked JSON-RPC device; parametrize indirectly to change the HTTP status."""
    return build_mock_device("jsonrpc", getattr(request, "param", 200))


@pytest.fixture
def mock_xml_device(request):
    return build_mock_device("xml", getattr(request, "param", 200))


@pytest.fixture
def mock_json_device(request):
    return build_mock_device("json", getattr(request, "param", 200))


@pytest.fixture(scope="module")
def live_device(request):
    """Create a real test device."""
    device_under_test = request.config.getoption("test_device")
    if not device_under_test:
        pytest.skip("--test_device not given")
    test_devices = parse_yaml(PWD + "/etc/test_devices.yml")
    return Device(**test_devices[device_under_test])
