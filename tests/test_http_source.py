import httpx
import pytest

from paramprobe.config import ConnectionConfig
from paramprobe.connection import HttpParameterSource
from paramprobe.errors import AuthenticationError, DeviceConnectionError, DeviceProtocolError
from paramprobe.parameters import ListParametersCommand

LISTING = [
    {"name": "driverName", "label": "Driver Name"},
    {"name": "serverVersion", "label": "Server Version", "hidable": True},
    {"name": "cursorDots"},
    {"name": "computerBrailleTable", "label": "Computer Braille Table"},
]

VALUES = {
    ("driverName", None): "HandyTech",
    ("serverVersion", None): 8,
    ("computerBrailleTable", None): ["en-us", "de"],
    ("computerBrailleTable", "1"): "de",
}


class FakeDevice:
    """Serves the parameter API and records every request it sees."""

    def __init__(self, listing=LISTING, values=VALUES):
        self.listing = listing
        self.values = values
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == "/api/parameters":
            return httpx.Response(200, json=self.listing)
        prefix = "/api/parameters/"
        if path.startswith(prefix):
            key = (path[len(prefix):], request.url.params.get("subparam"))
            if key not in self.values:
                return httpx.Response(404, json={"error": "no value"})
            return httpx.Response(200, json={"value": self.values[key]})
        return httpx.Response(404)


def make_source(handler, **config):
    return HttpParameterSource(ConnectionConfig(**config), transport=httpx.MockTransport(handler))


def test_listing_over_http():
    device = FakeDevice()
    with make_source(device) as source:
        lines = list(ListParametersCommand(source).run([]))

    assert lines == ["Computer Braille Table: en-us, de", "Driver Name: HandyTech"]
    listing_calls = [r for r in device.requests if r.url.path == "/api/parameters"]
    assert len(listing_calls) == 1
    # hidable parameters are never read during a listing
    assert not any(r.url.path.endswith("/serverVersion") for r in device.requests)


def test_direct_query_over_http():
    with make_source(FakeDevice()) as source:
        assert list(ListParametersCommand(source).run(["serverVersion"])) == ["8"]
        assert list(ListParametersCommand(source).run(["computerBrailleTable", "1"])) == ["de"]


def test_subparam_sent_as_query_parameter():
    device = FakeDevice()
    with make_source(device) as source:
        assert source.fetch_value("computerBrailleTable", 1) == "de"
    assert device.requests[-1].url.params["subparam"] == "1"


def test_missing_value_is_none():
    with make_source(FakeDevice()) as source:
        assert source.get_parameter("cursorDots").value() is None
        assert source.get_parameter("computerBrailleTable").value_at(5) is None


def test_unknown_parameter_returns_none():
    with make_source(FakeDevice()) as source:
        assert source.get_parameter("nope") is None


def test_label_defaults_to_name():
    with make_source(FakeDevice()) as source:
        assert source.get_parameter("cursorDots").label == "cursorDots"


def test_headers_and_base_url():
    device = FakeDevice()
    with make_source(device, host="braille.local", port=8080, auth_token="s3cret") as source:
        source.get_parameters()

    request = device.requests[0]
    assert str(request.url) == "http://braille.local:8080/api/parameters"
    assert request.headers["Authorization"] == "Bearer s3cret"
    assert request.headers["Accept"] == "application/json"


def test_no_authorization_header_without_token():
    device = FakeDevice()
    with make_source(device) as source:
        source.get_parameters()
    assert "Authorization" not in device.requests[0].headers


def test_parameter_names_are_quoted():
    device = FakeDevice(listing=[{"name": "a/b c"}], values={("a/b c", None): "x"})
    with make_source(device) as source:
        source.fetch_value("a/b c")
    assert device.requests[-1].url.raw_path.startswith(b"/api/parameters/a%2Fb%20c")


@pytest.mark.parametrize("status", [401, 403])
def test_authentication_failure(status):
    with make_source(lambda request: httpx.Response(status)) as source:
        with pytest.raises(AuthenticationError):
            source.get_parameters()


@pytest.mark.parametrize("status", [404, 500, 503])
def test_listing_http_errors(status):
    with make_source(lambda request: httpx.Response(status)) as source:
        with pytest.raises(DeviceConnectionError, match=f"HTTP {status}"):
            source.get_parameters()


def test_value_server_error_is_not_absence():
    def handler(request):
        if request.url.path == "/api/parameters":
            return httpx.Response(200, json=LISTING)
        return httpx.Response(500)

    with make_source(handler) as source:
        with pytest.raises(DeviceConnectionError):
            list(ListParametersCommand(source).run([]))


def test_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with make_source(handler) as source:
        with pytest.raises(DeviceConnectionError, match="cannot reach"):
            source.get_parameters()


def test_timeout():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    with make_source(handler, timeout=2.5) as source:
        with pytest.raises(DeviceConnectionError, match="timed out after 2.5s"):
            source.get_parameters()


@pytest.mark.parametrize("listing", [
    {"parameters": []},
    [{"label": "no name"}],
    ["driverName"],
    [{"name": "a"}, {"name": "a"}],
    [{"name": "a", "hidable": "false"}],
    [{"name": "a", "hidable": 1}],
    [{"name": "a", "hidable": None}],
])
def test_malformed_listing(listing):
    with make_source(lambda request: httpx.Response(200, json=listing)) as source:
        with pytest.raises(DeviceProtocolError):
            source.get_parameters()


def test_non_json_reply():
    with make_source(lambda request: httpx.Response(200, text="<html>")) as source:
        with pytest.raises(DeviceProtocolError, match="not JSON"):
            source.get_parameters()


def test_value_reply_without_value_field():
    def handler(request):
        if request.url.path == "/api/parameters":
            return httpx.Response(200, json=[{"name": "a"}])
        return httpx.Response(200, json={"data": 1})

    with make_source(handler) as source:
        with pytest.raises(DeviceProtocolError, match="no 'value' field"):
            source.get_parameter("a").value()


def test_null_value_is_absent():
    device = FakeDevice(listing=[{"name": "a"}], values={("a", None): None})
    with make_source(device) as source:
        assert source.get_parameter("a").value() is None


def test_string_hidable_flag_is_rejected():
    listing = [{"name": "a", "hidable": "false"}, {"name": "b", "hidable": False}]
    with make_source(lambda request: httpx.Response(200, json=listing)) as source:
        with pytest.raises(DeviceProtocolError, match="non-boolean hidable flag: 'false'"):
            source.get_parameters()
