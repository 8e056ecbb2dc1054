import asyncio
from urllib.parse import parse_qs

import httpx
import pytest

from visual_matcher import MatchingServiceClient, MatchingServiceConfig, NetworkError, ServiceError


def _run_client(handler, call, **config_fields):
    config = MatchingServiceConfig(base_url="http://matcher.test/", **config_fields)

    async def scenario():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            return await call(MatchingServiceClient(config, client=http))

    return asyncio.run(scenario())


def _search_by_url(client):
    return client.search_by_url(image_url="https://example.com/a.jpg", category="Women")


def test_search_by_url_posts_form_and_parses_results() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "results": [
                    {
                        "product_id": 101,
                        "product_name": "Red Shirt",
                        "image_url": "https://cdn.example.com/red.jpg",
                        "category": "Women",
                        "similarity_score": 0.72,
                    },
                    {
                        "product_id": "p-2",
                        "product_name": "Blue Jeans",
                        "image_url": None,
                        "category": "Women",
                        "similarity_score": 0.45,
                    },
                ]
            },
        )

    products = _run_client(handler, _search_by_url)

    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "http://matcher.test/api/search-by-url"
    assert parse_qs(request.content.decode()) == {
        "image_url": ["https://example.com/a.jpg"],
        "category": ["Women"],
    }
    assert [p.product_id for p in products] == ["101", "p-2"]
    assert products[1].image_url == ""


def test_search_by_file_sends_multipart_upload() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"results": []})

    products = _run_client(
        handler,
        lambda client: client.search_by_file(
            filename="look.png",
            content=b"\x89PNG-bytes",
            content_type="image/png",
            category="Men",
        ),
        auth_token="secret",
    )

    request = seen[0]
    body = request.content
    assert products == []
    assert str(request.url) == "http://matcher.test/api/search-by-file"
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert request.headers["authorization"] == "Bearer secret"
    assert b'name="file"; filename="look.png"' in body
    assert b"\x89PNG-bytes" in body
    assert b'name="category"' in body


def test_category_is_omitted_when_not_set() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"results": []})

    _run_client(handler, lambda client: client.search_by_url(image_url="https://example.com/a.jpg"))

    assert parse_qs(seen[0].content.decode()) == {"image_url": ["https://example.com/a.jpg"]}


def test_missing_results_key_means_no_matches() -> None:
    products = _run_client(lambda request: httpx.Response(200, json={}), _search_by_url)
    assert products == []


def test_error_status_maps_to_service_error() -> None:
    with pytest.raises(ServiceError, match="status=502"):
        _run_client(lambda request: httpx.Response(502, text="bad gateway"), _search_by_url)


@pytest.mark.parametrize(
    ("response", "message"),
    [
        (httpx.Response(200, text="<html>oops</html>"), "JSON 파싱 실패"),
        (httpx.Response(200, json=[1, 2]), "JSON 객체"),
        (httpx.Response(200, json={"results": {"a": 1}}), "배열이 아닙니다"),
        (
            httpx.Response(200, json={"results": [{"product_id": "x", "similarity_score": 1.7}]}),
            "결과 항목 검증 실패",
        ),
    ],
)
def test_malformed_body_maps_to_service_error(response, message) -> None:
    with pytest.raises(ServiceError, match=message):
        _run_client(lambda request: response, _search_by_url)


def test_transport_failure_maps_to_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkError, match="connection refused"):
        _run_client(handler, _search_by_url)


def test_aclose_leaves_injected_client_open() -> None:
    config = MatchingServiceConfig(base_url="http://matcher.test")

    async def scenario() -> None:
        injected = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
        client = MatchingServiceClient(config, client=injected)
        await client.aclose()
        assert not injected.is_closed
        await injected.aclose()

    asyncio.run(scenario())
