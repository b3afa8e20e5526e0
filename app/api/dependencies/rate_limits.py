"""Rate limiting for the public phrasebook endpoints.

Requests are keyed on the client address. The phrase endpoints share the
``LANG_RATE_LIMIT`` setting, and violations are answered with the
``RATE_LIMIT_EXCEEDED`` error translated into the request's language.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from api.dependencies.lang import resolve_lang_service
from core.config import get_settings
from core.logging import get_module_logger
from phrasebook.errors import RATE_LIMIT_EXCEEDED

logger = get_module_logger()

limiter = Limiter(key_func=get_remote_address)


def lang_rate_limit() -> str:
    """Limit applied to the phrase endpoints, read from settings per request."""
    return get_settings().lang.LANG_RATE_LIMIT


async def rate_limit_handler(request: Request, exc: Exception):
    """Return a 429 carrying the translated RATE_LIMIT_EXCEEDED error."""
    if not isinstance(exc, RateLimitExceeded):
        raise exc
    translate = resolve_lang_service(request).request_translator(
        request.headers.get("accept-language")
    )
    logger.warning(
        "rate_limit_exceeded",
        path=request.url.path,
        client=get_remote_address(request),
        limit=str(exc.detail),
    )
    return JSONResponse(
        status_code=RATE_LIMIT_EXCEEDED.status_code,
        content={
            "code": RATE_LIMIT_EXCEEDED.code,
            "message": translate(RATE_LIMIT_EXCEEDED),
        },
    )


def setup_rate_limiter(app: FastAPI):
    """Attach the limiter and its 429 handler to the application."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter() -> Limiter:
    """Return the application limiter."""
    return limiter
