"""System routes - version and health checks."""

from fastapi import APIRouter, Request

from api.dependencies.lang import LangServiceDep
from api.dependencies.rate_limits import get_limiter
from core.config import settings

router = APIRouter(tags=["System"])
limiter = get_limiter()


@router.get("/version")
@limiter.limit("50/minute")
def get_version(request: Request):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit("50/minute")
def get_health(
    request: Request, lang_service: LangServiceDep
):  # pylint: disable=unused-argument
    """Healthcheck endpoint.

    Reports degraded when no phrases were loaded at all.
    """
    languages = lang_service.supported_languages
    return {
        "status": "ok" if languages else "degraded",
        "languages": languages,
    }
