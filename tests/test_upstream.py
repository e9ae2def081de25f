import httpx
import pytest

from aggregator.errors import UpstreamError
from aggregator.config import UPSTREAM_TIMEOUT
from aggregator.upstream import fetch_json, get_client


def make_client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_json_body_is_decoded():
    with make_client(lambda r: httpx.Response(200, json={"a": 1})) as c:
        assert fetch_json(c, "https://example.test/x") == {"a": 1}


def test_non_json_body_is_returned_as_text():
    with make_client(lambda r: httpx.Response(200, text="plain")) as c:
        assert fetch_json(c, "https://example.test/x") == "plain"


def test_query_params_are_sent():
    seen = []

    def handler(request):
        seen.append(request.url)
        return httpx.Response(200, json={})

    with make_client(handler) as c:
        fetch_json(c, "https://example.test/x", params={"q": "Kazakhstan"})
    assert seen[0].params["q"] == "Kazakhstan"


@pytest.mark.parametrize(
    "response, message",
    [
        (httpx.Response(500, text="server exploded"), "server exploded"),
        (httpx.Response(404, json={"message": "Not Found"}), "Not Found"),
        (httpx.Response(400, json={"error": "bad base"}), "bad base"),
        (httpx.Response(503, json={"status": 503}), "Upstream request failed"),
        (httpx.Response(503, json=[1, 2]), "Upstream request failed"),
        (httpx.Response(500, json={"error": {"code": 500, "detail": "boom"}}), "{'code': 500, 'detail': 'boom'}"),
        (httpx.Response(500, json={"error": True}), "True"),
        (httpx.Response(500, json={"message": 42}), "42"),
    ],
)
def test_non_success_status_raises_with_best_message(response, message):
    with make_client(lambda r: response) as c:
        with pytest.raises(UpstreamError) as exc:
            fetch_json(c, "https://example.test/x")
    assert exc.value.message == message
    assert exc.value.status == response.status_code


def test_transport_error_raises_upstream_error():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    with make_client(handler) as c:
        with pytest.raises(UpstreamError) as exc:
            fetch_json(c, "https://example.test/x")
    assert "timed out" in exc.value.message
    assert exc.value.status is None


def test_malformed_json_raises_upstream_error():
    response = httpx.Response(200, content=b"{not json", headers={"content-type": "application/json"})
    with make_client(lambda r: response) as c:
        with pytest.raises(UpstreamError):
            fetch_json(c, "https://example.test/x")


def test_client_uses_configured_timeout():
    gen = get_client()
    client = next(gen)
    try:
        timeout = client.timeout
        assert timeout.connect == UPSTREAM_TIMEOUT
        assert timeout.read == UPSTREAM_TIMEOUT
        assert timeout.write == UPSTREAM_TIMEOUT
        assert timeout.pool == UPSTREAM_TIMEOUT
    finally:
        gen.close()
    assert client.is_closed
