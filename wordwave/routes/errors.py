import json

from aiohttp import web
from pydantic import ValidationError

from ..services import StoreUnavailable
from ..utils import BadParameter, setup_logging

logger = setup_logging(__name__)


def error_response(message: str, status: int) -> web.Response:
    return web.json_response({"status": "error", "message": message}, status=status)


@web.middleware
async def error_middleware(request: web.Request, handler):
    """Turns store outages and malformed input into JSON errors."""
    try:
        return await handler(request)
    except StoreUnavailable as exc:
        logger.warning("%s %s: store unavailable: %s", request.method, request.path, exc)
        return error_response(str(exc), 503)
    except (BadParameter, ValidationError, json.JSONDecodeError) as exc:
        logger.info("%s %s: bad request: %s", request.method, request.path, exc)
        return error_response(str(exc), 400)
