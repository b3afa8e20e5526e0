"""Factory functions for creating phrasebook components.

Provides convenience functions for initializing the localisation service
from application configuration.
"""

from pathlib import Path
from typing import Iterable, Optional

import structlog

from core.config import Settings
from phrasebook.loader import PhraseFileLoader, PhraseLoader
from phrasebook.service import LangService
from phrasebook.store import PhraseStore

logger = structlog.get_logger()

BUNDLED_LANG_DIR = Path(__file__).resolve().parent / "lang"
BUNDLED_PHRASE_FILES = (
    BUNDLED_LANG_DIR / "en.json",
    BUNDLED_LANG_DIR / "fr.json",
)


def create_lang_service(
    settings: Settings,
    phrase_files: Optional[Iterable[Path]] = None,
    loader: Optional[PhraseLoader] = None,
) -> LangService:
    """Create and populate a LangService.

    Args:
        settings: Application settings. ``settings.lang.DEFAULT_LANG`` is read
            on every translation.
        phrase_files: Phrase files to ingest after the bundled ones
            (default: settings.lang.PHRASE_FILES)
        loader: Loader used to ingest the files (default: PhraseFileLoader)

    Returns:
        LangService: Service owning the populated phrase store

    Usage:
        service = create_lang_service(settings)

        service = create_lang_service(
            settings, phrase_files=[Path("lang/en.json"), Path("lang/fr.json")]
        )
    """
    if phrase_files is None:
        phrase_files = [Path(p) for p in settings.lang.PHRASE_FILES]

    # Bundled phrases go first so application files can override them
    store = PhraseStore()
    phrase_count = (loader or PhraseFileLoader()).load_into(
        store, [*BUNDLED_PHRASE_FILES, *phrase_files]
    )

    logger.info(
        "lang_service_created",
        phrase_count=phrase_count,
        languages=store.supported_languages,
        default_lang=settings.lang.DEFAULT_LANG,
    )

    return LangService(store, default_lang=lambda: settings.lang.DEFAULT_LANG)
