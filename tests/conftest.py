import pytest
from aiohttp.test_utils import TestClient, TestServer

from wordwave import create_app
from wordwave.services import MemoryStore, WordCounter


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def counter(store):
    return WordCounter(store=store)


@pytest.fixture
async def client(counter):
    async with TestClient(TestServer(create_app(counter=counter))) as client:
        yield client
