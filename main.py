from aiohttp import web

from wordwave import create_app
from wordwave.config import env


async def init_app() -> web.Application:
    """Builds the app inside the running loop so the database client binds to it."""
    return create_app()


if __name__ == "__main__":
    web.run_app(init_app(), host=env.HOST, port=env.PORT)
