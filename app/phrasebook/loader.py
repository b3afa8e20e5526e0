"""Phrase file loading interface and implementations.

Defines the contract for ingesting phrase files into a PhraseStore and
provides a loader for JSON and YAML phrase files.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

import structlog
import yaml

from phrasebook.errors import MalformedPhraseKeyError
from phrasebook.store import PhraseStore

logger = structlog.get_logger()

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yml", ".yaml")


class PhraseLoader(ABC):
    """Abstract base for phrase loaders.

    Implementations define how phrase sources are parsed and ingested into
    a PhraseStore.
    """

    @abstractmethod
    def load_into(self, store: PhraseStore, paths: Iterable[Path]) -> int:
        """Ingest phrases from the given sources.

        Args:
            store: PhraseStore to populate.
            paths: Phrase sources, ingested in order.

        Returns:
            Number of phrases stored.
        """
        pass


class PhraseFileLoader(PhraseLoader):
    """Loader for per-language phrase files.

    Each file is named after its language (``en.json``, ``fr.yml``) and
    holds a mapping of qualified keys to templates, either flat
    (``"app.hello": "Hello"``) or nested by namespace. Files that cannot be
    read or parsed are logged and skipped; later files overwrite phrases of
    earlier ones.
    """

    def load_into(self, store: PhraseStore, paths: Iterable[Path]) -> int:
        """Ingest every phrase file into the store.

        Args:
            store: PhraseStore to populate.
            paths: Phrase file paths, ingested in order.

        Returns:
            Number of phrases stored.
        """
        total = 0
        for path in paths:
            path = Path(path)
            contents = self.read_file(path)
            if contents is None:
                continue
            lang = self.language_for(path)
            try:
                count = store.ingest(lang, contents)
            except MalformedPhraseKeyError as e:
                logger.error(
                    "phrase_file_ingest_failed", file=str(path), error=str(e)
                )
                continue
            total += count
            logger.info(
                "phrase_file_loaded",
                file=str(path),
                language=lang,
                phrase_count=count,
            )
        return total

    @staticmethod
    def language_for(path: Path) -> str:
        """Language tag of a phrase file (its name without suffix)."""
        return path.name[: -len(path.suffix)] if path.suffix else path.name

    def read_file(self, path: Path) -> Optional[Mapping[str, Any]]:
        """Read and parse a phrase file.

        Args:
            path: Phrase file path.

        Returns:
            Parsed mapping, or None if the file was skipped.
        """
        suffix = path.suffix.lower()
        if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
            logger.warning("unsupported_phrase_file", file=str(path), suffix=suffix)
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                if suffix in JSON_SUFFIXES:
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (
            OSError,
            UnicodeDecodeError,
            json.JSONDecodeError,
            yaml.YAMLError,
        ) as e:
            logger.error("phrase_file_load_failed", file=str(path), error=str(e))
            return None

        if not isinstance(data, Mapping):
            logger.warning("invalid_phrase_file_format", file=str(path), expected="dict")
            return None
        return data
