"""Feature-level fixtures for phrasebook tests.

Provides phrase files on disk for loader and factory scenarios.
"""

import json

import pytest
import yaml


@pytest.fixture
def phrase_files(tmp_path):
    """Create phrase files contributed by two packages.

    Returns paths in load order:
    - core/en.json (flat keys)
    - core/fr.json (flat keys)
    - plugin/en.yml (nested namespaces, overrides app.hello)
    """
    core_dir = tmp_path / "core"
    plugin_dir = tmp_path / "plugin"
    core_dir.mkdir()
    plugin_dir.mkdir()

    en_json = core_dir / "en.json"
    en_json.write_text(
        json.dumps(
            {
                "app.hello": "Hello ${name}",
                "app.bye": "Goodbye",
                "error.NOT_FOUND": "${id} not found",
            }
        ),
        encoding="utf-8",
    )

    fr_json = core_dir / "fr.json"
    fr_json.write_text(
        json.dumps({"app.hello": "Bonjour ${name}", "app.bye": "Au revoir"}),
        encoding="utf-8",
    )

    en_yml = plugin_dir / "en.yml"
    with open(en_yml, "w", encoding="utf-8") as f:
        yaml.dump(
            {
                "app": {"hello": "Hi ${name}"},
                "plugin": {"title": "Plugin", "items": "$map{items:label:, }"},
            },
            f,
        )

    return [en_json, fr_json, en_yml]
