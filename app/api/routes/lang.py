"""Language routes - serve merged phrases per language.

These routes are public so that clients can fetch their phrases before
authenticating.
"""

from fastapi import APIRouter, Request

from api.dependencies.lang import LangServiceDep
from api.dependencies.rate_limits import get_limiter, lang_rate_limit

router = APIRouter(prefix="/lang", tags=["Lang"])
limiter = get_limiter()


@router.get("/languages")
@limiter.limit(lang_rate_limit)
def get_languages(
    request: Request, lang_service: LangServiceDep
):  # pylint: disable=unused-argument
    """List supported languages."""
    return {
        "languages": lang_service.supported_languages,
        "default": lang_service.default_lang,
    }


@router.get("")
@limiter.limit(lang_rate_limit)
def get_phrases_for_request(request: Request, lang_service: LangServiceDep):
    """Retrieve lang strings for the request's (browser) language."""
    return lang_service.phrases_response(
        accept_language=request.headers.get("accept-language")
    )


@router.get("/{lang}")
@limiter.limit(lang_rate_limit)
def get_phrases(
    request: Request, lang: str, lang_service: LangServiceDep
):  # pylint: disable=unused-argument
    """Retrieve lang strings for a single locale."""
    return lang_service.phrases_response(lang=lang)
