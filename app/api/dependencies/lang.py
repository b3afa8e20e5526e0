"""
Dependency providers for the localisation service.

Provides the application-scoped LangService and a per-request translate
function bound to the request's Accept-Language header.
"""

from functools import lru_cache
from typing import Annotated, Any, Callable

from fastapi import Depends, Request

from core.config import get_settings
from phrasebook.factory import create_lang_service
from phrasebook.service import LangService


@lru_cache
def get_lang_service() -> LangService:
    """
    Get application-scoped LangService singleton.

    Phrases are loaded once, on first use, from the configured phrase files.

    Returns:
        LangService: Cached service owning the merged phrase store.
    """
    return create_lang_service(get_settings())


def resolve_lang_service(request: Request) -> LangService:
    """Resolve the LangService honouring the app's dependency overrides.

    Exception handlers are not part of the dependency graph, so they use
    this to pick up the same service as the routes.
    """
    provider = request.app.dependency_overrides.get(get_lang_service, get_lang_service)
    return provider()


LangServiceDep = Annotated[LangService, Depends(get_lang_service)]


def get_request_translator(
    request: Request, lang_service: LangServiceDep
) -> Callable[..., Any]:
    """Build a translate(key, data=None) callable for the current request."""
    return lang_service.request_translator(request.headers.get("accept-language"))


RequestTranslatorDep = Annotated[Callable[..., Any], Depends(get_request_translator)]
