"""
Pytest configuration and fixtures for all tests.

This file is automatically loaded by pytest and provides common fixtures
and configuration for all test modules.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from compendium_translator.config import BatchSettings, ProviderConfiguration, DEFAULT_PROMPT
from compendium_translator.core.exceptions import ProviderError
from compendium_translator.core.llm.base import TranslationClient
from compendium_translator.host.memory_store import InMemoryDocumentStore
from compendium_translator.utils.unified_logger import MemoryNotifier


class MockTranslationClient(TranslationClient):
    """Translation client prefixing its input, failing on selected texts."""

    provider_name = "mock"
    default_model = "mock-model"

    def __init__(self, config=None, fail_on=(), prefix="[translated] "):
        super().__init__(config or ProviderConfiguration(api_key="test-key"))
        self.fail_on = tuple(fail_on)
        self.prefix = prefix
        self.calls = []

    def build_request(self, prompt):
        return {}

    def extract_content(self, response_json):
        return ""

    async def translate(self, raw_text: str) -> str:
        self.calls.append(raw_text)
        if any(marker in raw_text for marker in self.fail_on):
            raise ProviderError("openai error: HTTP 500 Internal Server Error",
                                provider="mock", status_code=500)
        return f"{self.prefix}{raw_text}"


def make_item(name, description="<p>A sharp blade.</p>", chat=None, _id=None):
    data = {
        "_id": _id or f"item{name.replace(' ', '')}",
        "name": name,
        "type": "weapon",
        "img": "icons/weapons/sword.webp",
        "folder": "folder123",
        "sort": 100,
        "system": {
            "description": {"value": description, "chat": chat or ""},
            "weight": 3,
            "price": {"value": 15, "denomination": "gp"}
        },
        "flags": {"ddbimporter": {"id": 42}}
    }
    return data


@pytest.fixture
def provider_config():
    """Provider configuration with a credential."""
    return ProviderConfiguration(provider="openai", api_key="sk-test-1234", model="gpt-4o-mini",
                                 prompt_template=DEFAULT_PROMPT)


@pytest.fixture
def batch_settings():
    return BatchSettings(batch_size=5, cooldown_ms=0, label_prefix="[FR] ")


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def notifier():
    return MemoryNotifier()


@pytest.fixture
def mock_client():
    return MockTranslationClient()


@pytest.fixture
def item_data():
    """Item with description and chat flavor."""
    return make_item("Longsword", chat="<p>You swing the blade.</p>", _id="aaaaaaaaaaaaaaaa")


@pytest.fixture
def journal_data():
    """Journal entry with a text page and an image page."""
    return {
        "_id": "jjjjjjjjjjjjjjjj",
        "name": "Chapter 1",
        "folder": "f1",
        "sort": 0,
        "ownership": {"default": 0},
        "pages": [
            {
                "_id": "page0000000000001",
                "name": "Introduction",
                "type": "text",
                "text": {"content": "<p>Welcome, adventurers.</p>", "format": 1},
                "sort": 100000
            },
            {
                "_id": "page0000000000002",
                "name": "Map",
                "type": "image",
                "src": "maps/cave.webp",
                "image": {"caption": "The goblin cave"},
                "sort": 200000
            },
            {
                "_id": "page0000000000003",
                "name": "Blank",
                "type": "text",
                "text": {"content": "   ", "format": 1},
                "sort": 300000
            }
        ]
    }


@pytest.fixture
def actor_data():
    """NPC with a biography."""
    return {
        "_id": "actoractoractor1",
        "name": "Goblin",
        "type": "npc",
        "folder": None,
        "system": {
            "details": {"biography": {"value": "<p>Small and mean.</p>", "public": ""}},
            "attributes": {"hp": {"value": 7, "max": 7}}
        },
        "items": [{"_id": "scimitar00000001", "name": "Scimitar"}]
    }


@pytest.fixture
def item_factory():
    """Build Item document data by name."""
    return make_item


@pytest.fixture
def client_factory():
    """Build mock translation clients (fail_on=..., prefix=...)."""
    return MockTranslationClient


@pytest.fixture
def fake_sleep():
    """Cooldown replacement recording the requested delays."""
    delays = []

    async def sleep(seconds):
        delays.append(seconds)

    sleep.delays = delays
    return sleep
