"""
Pytest configuration and fixtures
"""

import json
import pytest
from pathlib import Path
from typing import Callable, Dict, Optional

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config.settings import Settings, LokaliseSettings, GeneratorSettings
from models.key import Key, KeyName, Translation
from services.lokalise_service import LokaliseService


@pytest.fixture
def make_key() -> Callable[..., Key]:
    """Factory building a key named identically on every platform."""
    def factory(
        name: str,
        translations: Dict[str, str],
        is_plural: bool = False,
        key_id: int = 1,
        key_name: Optional[KeyName] = None
    ) -> Key:
        return Key(
            key_id=key_id,
            key_name=key_name or KeyName(ios=name, android=name, web=name, other=name),
            is_plural=is_plural,
            translations=[Translation(language_iso=locale, translation=text)
                          for locale, text in translations.items()]
        )
    return factory


@pytest.fixture
def plural_payload() -> Callable[[str, str], str]:
    """Build the JSON payload Lokalise stores for plural translations."""
    def factory(one: str, other: str) -> str:
        return json.dumps({"one": one, "other": other}, ensure_ascii=False)
    return factory


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        generator=GeneratorSettings(
            package="dk.undo.i18n",
            container="I18n"
        ),
        lokalise=LokaliseSettings(
            api_token="test_token",
            project_names=["Undo"],
            base_url="https://lokalise.test/api2",
            page_size=2
        )
    )


@pytest.fixture
def lokalise_service(test_settings: Settings) -> LokaliseService:
    """Create Lokalise service for testing."""
    return LokaliseService(test_settings.lokalise)


@pytest.fixture
def lokalise_keys_payload() -> list:
    """Keys as returned by the Lokalise keys endpoint."""
    return [
        {
            "key_id": 11,
            "key_name": {"ios": "greeting", "android": "greeting", "web": "greeting", "other": "greeting"},
            "is_plural": False,
            "translations": [
                {"language_iso": "en", "translation": "Hello [%s:name]"},
                {"language_iso": "da", "translation": "Hej [%s:name]"}
            ]
        },
        {
            "key_id": 12,
            "key_name": {"ios": "apples", "android": "apples", "web": "apples", "other": "apples"},
            "is_plural": True,
            "translations": [
                {"language_iso": "en", "translation": "{\"one\": \"One apple\", \"other\": \"[%i:count] apples\"}"},
                {"language_iso": "da", "translation": "{\"one\": \"Et æble\", \"other\": \"[%i:count] æbler\"}"}
            ]
        }
    ]
