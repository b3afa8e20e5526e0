import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `core.config`) works during pytest collection regardless of
# the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from tests.factories.phrasebook import make_phrases, make_phrase_store  # noqa: E402


@pytest.fixture
def phrases():
    """Plain nested phrases mapping used by the pure translate functions."""
    return make_phrases()


@pytest.fixture
def phrase_store():
    """PhraseStore populated with the default sample phrases."""
    return make_phrase_store()
