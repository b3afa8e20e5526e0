from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies.lang import get_lang_service, resolve_lang_service
from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from core.config import settings
from core.logging import get_module_logger
from phrasebook.errors import LangError

logger = get_module_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - load phrases before serving requests."""
    lang_service = get_lang_service()
    logger.info(
        "application_startup",
        languages=lang_service.supported_languages,
        default_lang=lang_service.default_lang,
    )
    yield


async def lang_error_handler(request: Request, exc: Exception):
    """Render a LangError as JSON, translated into the request's language."""
    if not isinstance(exc, LangError):
        raise exc
    translate = resolve_lang_service(request).request_translator(
        request.headers.get("accept-language")
    )
    logger.info(
        "lang_error_response",
        code=exc.code,
        status_code=exc.status_code,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": exc.code, "message": translate(exc)},
    )


handler = FastAPI(title="Phrasebook", lifespan=lifespan)
setup_rate_limiter(handler)
handler.add_exception_handler(LangError, lang_error_handler)

allow_origins = (
    ["*"]
    if settings.is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


handler.include_router(api_router)
