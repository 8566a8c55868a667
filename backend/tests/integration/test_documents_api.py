"""Integration tests for the documents endpoints (upload, list, clear)."""

import warnings

import pytest
from httpx import ASGITransport, AsyncClient

from laura.application.interfaces import EmbeddingProvider
from laura.domain.exceptions import UpstreamError
from laura.infrastructure.dependencies import get_embedding_provider
from laura.infrastructure.mistral import MistralEmbeddingProvider
from laura.main import create_app

URL = "/api/v1/documents"


class FakeEmbeddingProvider(EmbeddingProvider):
    """Returns a two-dimensional vector per text, or raises ``error``."""

    def __init__(self, error: Exception | None = None):
        self._error = error
        self.calls = 0

    @property
    def provider_name(self) -> str:
        return "fake"

    @property
    def model(self) -> str:
        return "fake-embed"

    async def generate_embeddings(self, texts: list[str]) -> list[list[float]]:
        self.calls += 1
        if self._error:
            raise self._error
        return [[float(len(t)), 1.0] for t in texts]


def _app(provider: EmbeddingProvider):
    app = create_app()
    app.dependency_overrides[get_embedding_provider] = lambda: provider
    return app


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


def _text_file(name: str, content: bytes, mime: str = "text/plain"):
    return ("files", (name, content, mime))


@pytest.mark.asyncio
async def test_upload_list_and_clear():
    provider = FakeEmbeddingProvider()
    app = _app(provider)

    async with _client(app) as client:
        upload = await client.post(
            URL,
            files=[
                _text_file("notes.txt", b"hello world"),
                _text_file("readme.md", b"# Title\n\n" + b"x" * 1000, "text/markdown"),
            ],
        )
        listed = await client.get(URL)
        cleared = await client.delete(URL)
        after = await client.get(URL)

    assert upload.status_code == 200
    documents = upload.json()["documents"]
    assert [(d["name"], d["chunks"]) for d in documents] == [
        ("notes.txt", 1),
        ("readme.md", 2),
    ]
    assert all(d["id"] for d in documents)
    assert listed.json() == upload.json()
    assert cleared.status_code == 200
    assert cleared.json() == {"status": "cleared"}
    assert after.json() == {"documents": []}
    assert provider.calls == 2


@pytest.mark.asyncio
async def test_upload_without_files_is_rejected():
    async with _client(_app(FakeEmbeddingProvider())) as client:
        response = await client.post(URL)

    assert response.status_code == 400
    assert response.json()["detail"] == "No files uploaded."


@pytest.mark.asyncio
async def test_oversized_file_is_rejected():
    provider = FakeEmbeddingProvider()
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        async with _client(_app(provider)) as client:
            response = await client.post(
                URL, files=[_text_file("big.txt", b"a" * (2 * 1024 * 1024 + 1))]
            )

    assert response.status_code == 413
    assert not [w for w in caught if "HTTP_413" in str(w.message)]
    assert provider.calls == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name, mime",
    [
        ("image.png", "image/png"),
        ("data.json", "application/json"),
        ("script.sh", "text/plain"),
        ("tool.EXE", "text/plain"),
    ],
)
async def test_disallowed_files_are_rejected(name, mime):
    provider = FakeEmbeddingProvider()
    async with _client(_app(provider)) as client:
        response = await client.post(URL, files=[_text_file(name, b"content", mime)])

    assert response.status_code == 415
    assert provider.calls == 0


@pytest.mark.asyncio
async def test_undecodable_file_is_rejected():
    async with _client(_app(FakeEmbeddingProvider())) as client:
        response = await client.post(URL, files=[_text_file("bin.txt", b"\xff\xfe\xfa")])

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_blank_file_rejects_whole_upload():
    provider = FakeEmbeddingProvider()
    app = _app(provider)
    async with _client(app) as client:
        response = await client.post(
            URL,
            files=[_text_file("ok.txt", b"fine"), _text_file("blank.txt", b"  \n\t ")],
        )
        listed = await client.get(URL)

    assert response.status_code == 400
    assert "blank.txt" in response.json()["detail"]
    assert provider.calls == 0
    assert listed.json() == {"documents": []}


@pytest.mark.asyncio
async def test_embedding_failure_is_reported_and_store_unchanged():
    error = UpstreamError(provider="mistral", status_code=500, message="Internal error")
    app = _app(FakeEmbeddingProvider(error=error))
    async with _client(app) as client:
        response = await client.post(URL, files=[_text_file("a.txt", b"alpha")])
        listed = await client.get(URL)

    assert response.status_code == 500
    assert "Internal error" in response.json()["detail"]
    assert listed.json() == {"documents": []}


@pytest.mark.asyncio
async def test_missing_api_key_is_a_server_configuration_error():
    app = _app(MistralEmbeddingProvider(api_key=""))
    async with _client(app) as client:
        response = await client.post(URL, files=[_text_file("a.txt", b"alpha")])

    assert response.status_code == 500
    assert response.json()["detail"].startswith("Server configuration error")


@pytest.mark.asyncio
async def test_each_app_owns_its_document_store():
    provider = FakeEmbeddingProvider()
    first, second = _app(provider), _app(provider)

    async with _client(first) as client:
        await client.post(URL, files=[_text_file("a.txt", b"alpha")])
    async with _client(second) as client:
        response = await client.get(URL)

    assert response.json() == {"documents": []}


@pytest.mark.asyncio
async def test_unversioned_paths_share_the_store():
    app = _app(FakeEmbeddingProvider())
    async with _client(app) as client:
        upload = await client.post("/api/documents", files=[_text_file("a.txt", b"alpha")])
        versioned = await client.get(URL)
        cleared = await client.delete("/api/documents")
        unversioned = await client.get("/api/documents")

    assert upload.status_code == 200
    assert [d["name"] for d in versioned.json()["documents"]] == ["a.txt"]
    assert cleared.json() == {"status": "cleared"}
    assert unversioned.json() == {"documents": []}
