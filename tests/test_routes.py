from aiohttp.test_utils import TestClient, TestServer

from wordwave import create_app, create_store
from wordwave.config import Env
from wordwave.services import MemoryStore, MongoStore, WordCounter


async def test_submit_word(client, store):
    response = await client.post("/api/words", json={"word": "Cat"})
    assert response.status == 201
    assert await response.json() == {"status": "success", "id": "cat"}
    assert store.documents == {"cat": {"count": 1}}


async def test_submit_rejects_missing_word(client, store):
    response = await client.post("/api/words", json={"text": "cat"})
    assert response.status == 400
    assert (await response.json())["status"] == "error"
    assert store.documents == {}


async def test_submit_rejects_invalid_json(client):
    response = await client.post(
        "/api/words", data="not json", headers={"Content-Type": "application/json"}
    )
    assert response.status == 400


async def test_list_words(client, store):
    store.documents.update({"a": {"count": 2}, "b": {"count": 1}})
    response = await client.get("/api/words")
    assert response.status == 200
    body = await response.json()
    assert sorted(body, key=lambda x: x["id"]) == [
        {"id": "a", "count": 2},
        {"id": "b", "count": 1},
    ]


async def test_trending_default_and_limit(client, store):
    store.documents.update({f"w{i}": {"count": i + 1} for i in range(7)})
    response = await client.get("/api/words/trending")
    assert len(await response.json()) == 5
    response = await client.get("/api/words/trending", params={"n": "2"})
    assert [w["count"] for w in await response.json()] == [7, 6]


async def test_trending_rejects_bad_n(client):
    response = await client.get("/api/words/trending", params={"n": "many"})
    assert response.status == 400
    response = await client.get("/api/words/trending", params={"n": "-3"})
    assert response.status == 400


async def test_cloud(client, store):
    store.documents.update({"a": {"count": 1}, "b": {"count": 3}})
    response = await client.get("/api/words/cloud", params={"min_size": "10", "max_size": "20"})
    assert await response.json() == [
        {"word": "b", "count": 3, "size": 20.0},
        {"word": "a", "count": 1, "size": 10.0},
    ]


async def test_store_outage_is_503(client, store):
    store.available = False
    for method, path in [
        ("POST", "/api/words"),
        ("GET", "/api/words"),
        ("GET", "/api/words/trending"),
    ]:
        response = await client.request(method, path, json={"word": "cat"})
        assert response.status == 503
        assert (await response.json())["status"] == "error"


async def test_health(client):
    response = await client.get("/api/health")
    assert await response.json() == {"status": "ok"}


def test_create_store_memory():
    assert isinstance(create_store(Env(STORE_BACKEND="memory")), MemoryStore)


async def test_create_store_mongo():
    store = create_store(Env(STORE_BACKEND="mongo", WORDS_COLLECTION="terms"))
    assert isinstance(store, MongoStore)
    assert store.collection.name == "terms"
    await store.close()


async def test_create_app_reads_settings():
    app = create_app(settings=Env(STORE_BACKEND="memory", TRENDING_LIMIT=2))
    paths = {route.resource.canonical for route in app.router.routes()}
    assert "/api/words/trending" in paths


async def test_cloud_rejects_non_finite_sizes(client, store):
    store.documents.update({"a": {"count": 1}, "b": {"count": 3}})
    for params in ({"min_size": "nan", "max_size": "20"}, {"max_size": "inf"}):
        response = await client.get("/api/words/cloud", params=params)
        assert response.status == 400
        assert (await response.json())["status"] == "error"


async def test_trending_rejects_n_beyond_int64(client):
    response = await client.get("/api/words/trending", params={"n": "99999999999999999999"})
    assert response.status == 400


class BrokenStore(MemoryStore):
    async def list_all(self):
        raise ValueError("unexpected failure")


async def test_unexpected_value_error_is_a_server_error():
    app = create_app(counter=WordCounter(store=BrokenStore()))
    async with TestClient(TestServer(app)) as client:
        response = await client.get("/api/words")
        assert response.status == 500
