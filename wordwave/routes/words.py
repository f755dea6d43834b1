from typing import Optional

from aiohttp import web

from ..data import WordSubmission
from ..helpers import weigh
from ..services import WordCounter, normalize
from ..utils import BadParameter, setup_logging

logger = setup_logging(__name__)


def _query_number(request: web.Request, name: str, cast=int) -> Optional[float]:
    value = request.query.get(name)
    if value is None:
        return None
    try:
        return cast(value)
    except ValueError as exc:
        raise BadParameter(f"{name} must be a number, got {value!r}") from exc


class WordsRouter(web.RouteTableDef):
    def __init__(self, counter: WordCounter, prefix: str = "/api"):
        super().__init__()
        self.counter = counter

        @self.post(f"{prefix}/words")
        async def submit_word(request: web.Request):
            """Records one submission of a word"""
            submission = WordSubmission.model_validate(await request.json())
            await self.counter.record_occurrence(submission.word)
            return web.json_response(
                {"status": "success", "id": normalize(submission.word)}, status=201
            )

        @self.get(f"{prefix}/words")
        async def list_words(request: web.Request):
            """Lists every word with its count"""
            records = await self.counter.fetch_all()
            return web.json_response([record.model_dump() for record in records])

        @self.get(f"{prefix}/words/trending")
        async def trending_words(request: web.Request):
            """Lists the most submitted words"""
            n = _query_number(request, "n")
            records = await self.counter.fetch_top(n)
            return web.json_response([record.model_dump() for record in records])

        @self.get(f"{prefix}/words/cloud")
        async def word_cloud(request: web.Request):
            """Lists every word with the font size to draw it at"""
            sizes = {}
            for name in ("min_size", "max_size"):
                value = _query_number(request, name, cast=float)
                if value is not None:
                    sizes[name] = value
            cloud = weigh(await self.counter.fetch_all(), **sizes)
            logger.info("Weighed %s words for the cloud", len(cloud))
            return web.json_response([word.model_dump() for word in cloud])

        @self.get(f"{prefix}/health")
        async def health(request: web.Request):
            return web.json_response({"status": "ok"})
