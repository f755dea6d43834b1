import logging
from typing import Optional

from aiohttp import web

from .config import Env, env
from .data import *
from .helpers import *
from .routes import *
from .services import *
from .utils import *

logger = setup_logging(__name__)


def create_store(settings: Env) -> DocumentStore:
    """Builds the document store selected by STORE_BACKEND."""
    if settings.STORE_BACKEND == "memory":
        logger.warning("Using the in-memory store, counts are lost on restart")
        return MemoryStore()
    return MongoStore.from_url(
        settings.MONGO_URL,
        database=settings.MONGO_DATABASE,
        collection=settings.WORDS_COLLECTION,
        timeout_ms=settings.MONGO_TIMEOUT_MS,
    )


def create_app(
    counter: Optional[WordCounter] = None, settings: Optional[Env] = None
) -> web.Application:
    settings = settings or env
    logging.getLogger(__name__).setLevel(settings.LOG_LEVEL.upper())

    if counter is None:
        counter = WordCounter(
            store=create_store(settings),
            atomic=settings.ATOMIC_INCREMENTS,
            trending_limit=settings.TRENDING_LIMIT,
        )

    app = web.Application(middlewares=[error_middleware])
    app.add_routes(WordsRouter(counter))

    async def close_store(app: web.Application):
        await counter.store.close()

    app.on_cleanup.append(close_store)
    return app
