"""Unit tests for text field extraction."""

import pytest
from compendium_translator.core.documents.extractor import (
    extract_text_fields,
    get_path_value,
    is_translatable,
    register_extractor,
    get_extractor
)
from compendium_translator.core.models import Document, TextField


class TestItemExtraction:
    """Test Item field extraction."""

    def test_description_and_chat(self, item_data):
        """Both description and chat flavor are extracted, in order."""
        fields = extract_text_fields(Document(kind="Item", data=item_data))

        assert [f.path for f in fields] == [
            ("system", "description", "value"),
            ("system", "description", "chat"),
        ]
        assert fields[0].text == "<p>A sharp blade.</p>"
        assert fields[1].text == "<p>You swing the blade.</p>"

    def test_empty_chat_skipped(self, item_factory):
        """Empty chat flavor is not sent to translation."""
        fields = extract_text_fields(Document(kind="Item", data=item_factory("Dagger")))

        assert [f.path for f in fields] == [("system", "description", "value")]

    def test_missing_system(self):
        """Items without system data yield nothing."""
        fields = extract_text_fields(Document(kind="Item", data={"name": "Bare"}))
        assert fields == []

    def test_non_string_description_skipped(self, item_factory):
        """Non-string values pass through."""
        data = item_factory("Odd", description=None)
        data["system"]["description"]["value"] = 12

        assert extract_text_fields(Document(kind="Item", data=data)) == []


class TestJournalExtraction:
    """Test JournalEntry page extraction."""

    def test_text_pages_and_captions(self, journal_data):
        """Text page bodies and image captions are extracted; blank bodies skipped."""
        fields = extract_text_fields(Document(kind="JournalEntry", data=journal_data))

        assert [f.path for f in fields] == [
            ("pages", 0, "text", "content"),
            ("pages", 1, "image", "caption"),
        ]
        assert fields[1].text == "The goblin cave"

    def test_caption_on_text_page(self):
        """A caption is extracted independently of the page type."""
        data = {"name": "J", "pages": [{
            "type": "text",
            "text": {"content": "Body"},
            "image": {"caption": "Caption"}
        }]}
        fields = extract_text_fields(Document(kind="JournalEntry", data=data))

        assert [f.text for f in fields] == ["Body", "Caption"]

    def test_non_text_page_body_skipped(self):
        """Only pages of type text have their body translated."""
        data = {"name": "J", "pages": [{"type": "pdf", "text": {"content": "Body"}}]}

        assert extract_text_fields(Document(kind="JournalEntry", data=data)) == []

    def test_no_pages(self):
        assert extract_text_fields(Document(kind="JournalEntry", data={"name": "J"})) == []


class TestActorExtraction:
    """Test Actor biography extraction."""

    def test_biography(self, actor_data):
        fields = extract_text_fields(Document(kind="Actor", data=actor_data))

        assert fields == [TextField(
            path=("system", "details", "biography", "value"),
            text="<p>Small and mean.</p>"
        )]

    def test_whitespace_biography_skipped(self, actor_data):
        actor_data["system"]["details"]["biography"]["value"] = "  \n "

        assert extract_text_fields(Document(kind="Actor", data=actor_data)) == []


class TestExtractorRegistry:
    """Test kind dispatch."""

    def test_unknown_kind_yields_nothing(self, item_data):
        """Unknown kinds have no translatable field."""
        assert extract_text_fields(Document(kind="Playlist", data=item_data)) == []

    def test_register_extractor(self):
        """Hosts can add a kind."""
        def extract_scene(document):
            return [TextField(path=("navName",), text=document.data["navName"])]

        register_extractor("Scene", extract_scene)
        try:
            fields = extract_text_fields(Document(kind="Scene", data={"navName": "Cave"}))
            assert fields == [TextField(path=("navName",), text="Cave")]
        finally:
            from compendium_translator.core.documents import extractor
            extractor._EXTRACTORS.pop("Scene", None)

    def test_enum_kind_lookup(self):
        from compendium_translator.core.models import DocumentKind
        assert get_extractor(DocumentKind.ACTOR) is get_extractor("Actor")


class TestPathHelpers:
    """Test path reading helpers."""

    def test_get_path_value(self, journal_data):
        assert get_path_value(journal_data, ("pages", 1, "image", "caption")) == "The goblin cave"

    def test_get_path_value_missing(self, journal_data):
        assert get_path_value(journal_data, ("pages", 9, "text")) is None
        assert get_path_value(journal_data, ("name", "x")) is None

    @pytest.mark.parametrize("value,expected", [
        ("text", True),
        ("", False),
        ("   ", False),
        (None, False),
        (42, False),
    ])
    def test_is_translatable(self, value, expected):
        assert is_translatable(value) is expected
