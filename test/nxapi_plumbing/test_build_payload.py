import json
from lxml import etree


def test_build_payload(mock_jsonrpc_device):
    """
    Payload format should be as follows:
    [
        {
            'id': 1,
            'jsonrpc': '2.0',
            'method': 'cli',
            'params': {'cmd': 'show hostname', 'version': 1.0}
        }
    ]
    """
    mock_device = mock_jsonrpc_device
    payload = mock_device.api._build_payload(["show hostname"], method="cli")
    payload = json.loads(payload)
    assert isinstance(payload, list)
    payload_dict = payload[0]
    assert payload_dict["id"] == 1
    assert payload_dict["jsonrpc"] == "2.0"
    assert payload_dict["method"] == "cli"
    assert payload_dict["params"]["cmd"] == "show hostname"
    assert payload_dict["params"]["version"] == 1.0


def test_build_payload_list(mock_jsonrpc_device):
    """Payload with list of commands (jsonrpc)"""
    mock_device = mock_jsonrpc_device
    payload = mock_device.api._build_payload(
        ["show hostname", "show version"], method="cli"
    )
    payload = json.loads(payload)
    assert len(payload) == 2
    assert [p["id"] for p in payload] == [1, 2]
    assert [p["params"]["cmd"] for p in payload] == ["show hostname", "show version"]


def test_build_payload_xml(mock_xml_device):
    """
    Payload format should be as follows:
    <?xml version="1.0"?>
    <ins_api>
      <version>1.0</version>
      <type>cli_show</type>
      <chunk>0</chunk>
      <sid>sid</sid>
      <input>show hostname</input>
      <output_format>xml</output_format>
    </ins_api>
    """
    mock_device = mock_xml_device
    payload = mock_device.api._build_payload(["show hostname"], method="cli_show")
    xml_root = etree.fromstring(payload.encode())
    assert xml_root.tag == "ins_api"
    assert xml_root.find("./version").text == "1.0"
    assert xml_root.find("./type").text == "cli_show"
    assert xml_root.find("./chunk").text == "0"
    assert xml_root.find("./sid").text == "sid"
    assert xml_root.find("./input").text == "show hostname"
    assert xml_root.find("./output_format").text == "xml"


def test_build_payload_xml_list(mock_xml_device):
    """Build payload with list of commands (XML)."""
    mock_device = mock_xml_device
    payload = mock_device.api._build_payload(
        ["show hostname", "show version"], method="cli_show"
    )
    xml_root = etree.fromstring(payload.encode())
    assert xml_root.find("./input").text == "show hostname ;show version"


def test_build_payload_json(mock_json_device):
    """
    Payload format should be as follows:
    {
        "ins_api": {
            "version": "1.0",
            "type": "cli_show",
            "chunk": "0",
            "sid": "1",
            "input": "show hostname",
            "output_format": "json"
        }
    }
    """
    mock_device = mock_json_device
    payload = mock_device.api._build_payload(["show hostname"], method="cli_show")
    ins_api = json.loads(payload)["ins_api"]
    assert ins_api == {
        "version": "1.0",
        "type": "cli_show",
        "chunk": "0",
        "sid": "1",
        "input": "show hostname",
        "output_format": "json",
    }


def test_build_payload_json_list(mock_json_device):
    mock_device = mock_json_device
    payload = mock_device.api._build_payload(
        ["logging history size 200", "logging history size 300"], method="cli_conf"
    )
    ins_api = json.loads(payload)["ins_api"]
    assert ins_api["type"] == "cli_conf"
    assert ins_api["input"] == "logging history size 200 ;logging history size 300"
