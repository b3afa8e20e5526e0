import pytest
from fastapi.testclient import TestClient

from api.dependencies.lang import get_lang_service
from api.dependencies.rate_limits import get_limiter
from server.server import handler
from tests.factories.phrasebook import make_lang_service


@pytest.fixture
def lang_service():
    """LangService with the sample phrases plus error phrases per language."""
    return make_lang_service(
        extra={
            "en": {
                "error.UNKNOWN_LANG": "Unknown language '${lang}'",
                "error.RATE_LIMIT_EXCEEDED": "Rate limit exceeded",
            },
            "fr": {
                "error.UNKNOWN_LANG": "Langue inconnue '${lang}'",
                "error.RATE_LIMIT_EXCEEDED": "Trop de requ\u00eates",
            },
        }
    )


@pytest.fixture
def client(lang_service):
    """Test client for the application with the sample LangService."""
    get_limiter().reset()
    handler.dependency_overrides[get_lang_service] = lambda: lang_service
    yield TestClient(handler)
    handler.dependency_overrides.clear()
