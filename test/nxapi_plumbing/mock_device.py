from os import path
import json
from lxml import etree

from cisco_nxapi.nxapi_plumbing import Device
from cisco_nxapi.nxapi_plumbing import RPCClient, XMLClient, JSONClient

BASE_DIR = path.join(path.dirname(path.realpath(__file__)), "mocked_data")


class FakeResponse(object):
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code


def mocked_commands(payload, api_format):
    """The commands carried by a request payload."""
    if api_format == "jsonrpc":
        return [cmd_dict["params"]["cmd"] for cmd_dict in json.loads(payload)]
    if api_format == "json":
        return json.loads(payload)["ins_api"]["input"].split(" ;")
    return etree.fromstring(payload.encode()).find("./input").text.split(" ;")


def mocked_response(payload, api_format="jsonrpc", raw_text=False):
    """
    Read the saved answer to a payload, e.g.
    ./mocked_data/xml_show_hostname__show_version/response.xml
    """
    commands = mocked_commands(payload, api_format)
    name = "__".join(c.replace(" ", "_") for c in commands)
    suffix = "_raw" if raw_text else ""
    file_ext = "xml" if api_format == "xml" else "json"
    file_path = path.join(
        BASE_DIR,
        "{}_{}{}".format(api_format, name, suffix),
        "response.{}".format(file_ext),
    )
    with open(file_path) as f:
        return f.read()


class MockClientMixin(object):
    status_code = 200

    def _send_request(self, commands, method):
        payload = self._build_payload(commands, method)
        raw_text = method in ("cli_ascii", "cli_show_ascii")
        text = mocked_response(payload, api_format=self.api, raw_text=raw_text)
        return FakeResponse(text, self.status_code)


class MockRPCClient(MockClientMixin, RPCClient):
    pass


class MockXMLClient(MockClientMixin, XMLClient):
    pass


class MockJSONClient(MockClientMixin, JSONClient):
    pass


MOCK_CLIENTS = {"jsonrpc": MockRPCClient, "xml": MockXMLClient, "json": MockJSONClient}


class MockDevice(Device):
    def __init__(self, host, username, password, status_code=200, **kwargs):
        super().__init__(host, username, password, **kwargs)
        api_format = kwargs.get("api_format", "jsonrpc")
        self.api = MOCK_CLIENTS[api_format](
            host,
            username,
            password,
            transport=kwargs.get("transport", "http"),
            port=kwargs.get("port"),
            timeout=kwargs.get("timeout", 30),
            verify=kwargs.get("verify", True),
        )
        self.api.status_code = status_code
