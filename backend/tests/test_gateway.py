"""Client gateway: headers, token fallback and error surfacing."""

import json

import httpx
import pytest

from vetclinic.client.config import ClientSettings
from vetclinic.client.gateway import ApiGateway, ApiRequestError
from vetclinic.client.resources import ApiClient
from vetclinic.client.token_store import TokenStore


class Recorder:
    """MockTransport handler that remembers every request it answers."""

    def __init__(self, status_code: int = 200, **response_kwargs):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.response_kwargs = response_kwargs or {"json": {"ok": True}}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, **self.response_kwargs)


@pytest.fixture
def token_store(tmp_path):
    return TokenStore(tmp_path / "auth.json")


def make_gateway(token_store, handler) -> ApiGateway:
    settings = ClientSettings(api_base_url="http://clinic.test/api", token_file=token_store.path)
    return ApiGateway(settings=settings, token_store=token_store, transport=httpx.MockTransport(handler))


class TestRequestHeaders:
    @pytest.mark.asyncio
    async def test_explicit_token_and_json_content_type(self, token_store):
        recorder = Recorder()
        gateway = make_gateway(token_store, recorder)

        assert await gateway.request("/owners", token="abc") == {"ok": True}

        sent = recorder.requests[0]
        assert str(sent.url) == "http://clinic.test/api/owners"
        assert sent.headers["Content-Type"] == "application/json"
        assert sent.headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_falls_back_to_stored_token(self, token_store):
        token_store.set("from-disk")
        recorder = Recorder()

        await make_gateway(token_store, recorder).request("/pets")

        assert recorder.requests[0].headers["Authorization"] == "Bearer from-disk"

    @pytest.mark.asyncio
    async def test_no_token_means_no_authorization_header(self, token_store):
        recorder = Recorder()
        await make_gateway(token_store, recorder).request("/pets")
        assert "Authorization" not in recorder.requests[0].headers

    @pytest.mark.asyncio
    async def test_body_sent_only_for_non_get(self, token_store):
        recorder = Recorder(201, json={"id": "7"})
        gateway = make_gateway(token_store, recorder)

        await gateway.request("/owners", method="POST", body={"first_name": "Ada"})
        await gateway.request("/owners", method="GET", body={"ignored": True})

        assert json.loads(recorder.requests[0].content) == {"first_name": "Ada"}
        assert recorder.requests[0].method == "POST"
        assert recorder.requests[1].content == b""


class TestErrorSurfacing:
    @pytest.mark.asyncio
    async def test_uses_message_from_error_body(self, token_store):
        recorder = Recorder(404, json={"error": "not_found", "message": "Owner not found"})

        with pytest.raises(ApiRequestError) as excinfo:
            await make_gateway(token_store, recorder).request("/owners/9")

        assert excinfo.value.message == "Owner not found"
        assert excinfo.value.status_code == 404

    @pytest.mark.asyncio
    async def test_falls_back_to_error_key(self, token_store):
        recorder = Recorder(400, json={"error": "Required fields: name"})
        with pytest.raises(ApiRequestError, match="Required fields: name"):
            await make_gateway(token_store, recorder).request("/pets", method="POST", body={})

    @pytest.mark.asyncio
    async def test_non_json_error_uses_status_text(self, token_store):
        recorder = Recorder(502, text="<html>bad gateway</html>")
        with pytest.raises(ApiRequestError) as excinfo:
            await make_gateway(token_store, recorder).request("/pets")
        assert excinfo.value.message == "HTTP error 502: Bad Gateway"

    @pytest.mark.asyncio
    async def test_transport_failure_is_wrapped(self, token_store):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ApiRequestError) as excinfo:
            await make_gateway(token_store, refuse).request("/pets")
        assert excinfo.value.status_code is None
        assert "connection refused" in excinfo.value.message


class TestResourceStubs:
    @pytest.mark.asyncio
    async def test_stub_paths_and_verbs(self, token_store):
        recorder = Recorder()
        api = ApiClient(make_gateway(token_store, recorder))

        await api.owners.get_owner_pets(3)
        await api.pets.get_pet_types()
        await api.vaccinations.update(5, {"temp": "38.1"})
        await api.surgery.delete(2)
        await api.shop.remove_cart_item(11)

        calls = [(r.method, r.url.path) for r in recorder.requests]
        assert calls == [
            ("GET", "/api/owners/3/pets"),
            ("GET", "/api/pets/pet-types"),
            ("PUT", "/api/vaccinations/5"),
            ("DELETE", "/api/surgery/2"),
            ("DELETE", "/api/shop/cart/remove"),
        ]
        assert json.loads(recorder.requests[-1].content) == {"itemId": 11}


class TestTokenStore:
    def test_round_trip_and_clear(self, token_store):
        assert token_store.get() is None
        token_store.set("t0k3n")
        assert token_store.get() == "t0k3n"
        token_store.clear()
        assert token_store.get() is None

    def test_corrupt_file_reads_as_no_token(self, token_store):
        token_store.path.write_text("{not json", encoding="utf-8")
        assert token_store.get() is None
