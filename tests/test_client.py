import requests

import insureconnect_client
from insureconnect_client import (
    InsureConnectAPI,
    render_listing,
    render_provider_card,
    validate_price_filter,
)


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload
        self.content = b"" if payload is None else b"{}"
        self.text = "" if payload is None else str(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("no body")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


ISO = {"provider_id": "iso_001", "name": "ISO Insurance", "price": 450, "website_link": "https://www.isoa.org"}


def test_validate_price_filter_messages():
    assert validate_price_filter(None, None) is None
    assert validate_price_filter("", "600") is None
    assert validate_price_filter("abc", "600") == "Please enter a valid minimum price"
    assert validate_price_filter("100", "abc") == "Please enter a valid maximum price"
    assert validate_price_filter("600", "400") == "Minimum price cannot be greater than maximum price"


def test_validate_price_filter_needs_plain_decimals():
    assert validate_price_filter("1_000", None) == "Please enter a valid minimum price"
    assert validate_price_filter(None, "200usd") == "Please enter a valid maximum price"
    assert validate_price_filter("0x10", None) == "Please enter a valid minimum price"
    assert validate_price_filter(".5", "1e3") is None


def test_list_providers_sends_bounds():
    session = FakeSession(FakeResponse(payload=[ISO]))
    api = InsureConnectAPI(base_url="http://api.test/api/", session=session)
    providers, error = api.list_providers("400", "600")
    assert error is None
    assert providers == [ISO]
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://api.test/api/providers"
    assert call["params"] == {"minPrice": "400", "maxPrice": "600"}


def test_list_providers_rejects_bad_bounds_locally():
    session = FakeSession()
    api = InsureConnectAPI(session=session)
    providers, error = api.list_providers("600", "400")
    assert providers == []
    assert error == {"status_code": None, "message": "Minimum price cannot be greater than maximum price"}
    assert session.calls == []


def test_api_error_message_is_surfaced():
    session = FakeSession(FakeResponse(404, {"error": "Provider not found"}))
    api = InsureConnectAPI(session=session)
    provider, error = api.get_provider("missing")
    assert provider is None
    assert error == {"status_code": 404, "message": "Provider not found"}


def test_network_error():
    session = FakeSession(requests.ConnectionError("refused"))
    api = InsureConnectAPI(session=session)
    ok, error = api.delete_provider("x1")
    assert ok is False
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_provider_id_is_quoted_in_path():
    session = FakeSession(FakeResponse(payload=ISO), FakeResponse(payload={"message": "Provider deleted successfully"}))
    api = InsureConnectAPI(session=session)
    api.get_provider("a/b?c")
    api.delete_provider("x y#1")
    assert session.calls[0]["url"] == "http://localhost:5000/api/providers/a%2Fb%3Fc"
    assert session.calls[1]["url"] == "http://localhost:5000/api/providers/x%20y%231"
    assert session.calls[1]["method"] == "DELETE"


def test_render_card_and_listing():
    card = render_provider_card(dict(ISO, price=450.0))
    assert "ISO Insurance" in card
    assert "$450" in card and "$450.0" not in card

    listing = render_listing([ISO], "400", "")
    assert listing.startswith("Showing 1 provider in your price range ($400 - Any)")

    listing = render_listing([ISO, ISO])
    assert listing.startswith("Showing 2 providers\n")

    assert render_listing([]).startswith("No providers found")


def test_main_list_command(capsys):
    session = FakeSession(FakeResponse(payload=[ISO]))
    api = InsureConnectAPI(session=session)
    code = insureconnect_client.main(["list", "--min", "400"], api=api)
    assert code == 0
    out = capsys.readouterr().out
    assert "Showing 1 provider in your price range ($400 - Any)" in out


def test_main_reports_errors(capsys):
    session = FakeSession(FakeResponse(500, {"error": "Error seeding database"}))
    api = InsureConnectAPI(session=session)
    assert insureconnect_client.main(["seed"], api=api) == 1
    assert "Error seeding database" in capsys.readouterr().err
