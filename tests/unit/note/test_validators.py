"""Tests for note, bulk operation and import validators."""

import pytest

from quicknotes.core.modules.note.models import BulkAction
from quicknotes.core.modules.note.validators import (
    format_location,
    validate_bulk_operation,
    validate_import,
    validate_note,
)
from quicknotes.errors import ValidationError


class TestFormatLocation:
    """Tests for error location rendering."""

    def test_empty_location_is_value(self):
        """Test that a top-level error is reported against "value"."""
        assert format_location(()) == "value"

    def test_nested_location(self):
        """Test that nested fields are joined with dots and indexes."""
        assert format_location(("notes", 0, "title")) == "notes[0].title"

    def test_list_item_location(self):
        """Test that list indexes are rendered in brackets."""
        assert format_location(("tags", 2)) == "tags[2]"


class TestValidateNote:
    """Tests for note payload validation."""

    def test_defaults_applied(self):
        """Test that omitted optional fields get their defaults."""
        result = validate_note({"title": "Hi", "content": "There"})
        assert result.model_dump(by_alias=True) == {
            "title": "Hi",
            "content": "There",
            "category": "General",
            "tags": [],
            "isPinned": False,
            "isArchived": False,
        }

    def test_full_payload_accepted(self):
        """Test that every field is carried through when provided."""
        result = validate_note(
            {
                "title": "Trip",
                "content": "Pack bags",
                "category": "Travel",
                "tags": ["summer", "family"],
                "isPinned": True,
                "isArchived": False,
            }
        )
        assert result.category == "Travel"
        assert result.tags == ["summer", "family"]
        assert result.is_pinned is True
        assert result.is_archived is False

    def test_title_length_bounds_accepted(self):
        """Test that 1 and 200 character titles are accepted."""
        assert validate_note({"title": "a", "content": "x"}).title == "a"
        assert validate_note({"title": "a" * 200, "content": "x"}).title == "a" * 200

    def test_missing_title_raises_error(self):
        """Test that a missing title raises ValidationError."""
        with pytest.raises(ValidationError, match='"title" is required'):
            validate_note({"content": "There"})

    def test_missing_content_raises_error(self):
        """Test that a missing content raises ValidationError."""
        with pytest.raises(ValidationError, match='"content" is required'):
            validate_note({"title": "Hi"})

    def test_empty_title_raises_error(self):
        """Test that an empty title raises ValidationError."""
        with pytest.raises(ValidationError, match='"title" is not allowed to be empty'):
            validate_note({"title": "", "content": "There"})

    def test_long_title_raises_error(self):
        """Test that a title over 200 characters raises ValidationError."""
        with pytest.raises(ValidationError, match='"title" length must be less than or equal to 200 characters long'):
            validate_note({"title": "a" * 201, "content": "There"})

    def test_empty_content_raises_error(self):
        """Test that an empty content raises ValidationError."""
        with pytest.raises(ValidationError, match='"content" is not allowed to be empty'):
            validate_note({"title": "Hi", "content": ""})

    def test_non_string_title_raises_error(self):
        """Test that a non-string title raises ValidationError."""
        with pytest.raises(ValidationError, match='"title" must be a string'):
            validate_note({"title": 42, "content": "There"})

    def test_long_category_raises_error(self):
        """Test that a category over 50 characters raises ValidationError."""
        with pytest.raises(ValidationError, match='"category" length must be less than or equal to 50 characters long'):
            validate_note({"title": "Hi", "content": "There", "category": "c" * 51})

    def test_long_tag_raises_error(self):
        """Test that the offending tag index is reported."""
        with pytest.raises(ValidationError, match=r'"tags\[1\]" length must be less than or equal to 50'):
            validate_note({"title": "Hi", "content": "There", "tags": ["ok", "t" * 51]})

    def test_tags_not_a_list_raises_error(self):
        """Test that tags given as a string raise ValidationError."""
        with pytest.raises(ValidationError, match='"tags" must be an array'):
            validate_note({"title": "Hi", "content": "There", "tags": "work"})

    def test_non_boolean_pinned_raises_error(self):
        """Test that an arbitrary string for isPinned raises ValidationError."""
        with pytest.raises(ValidationError, match='"isPinned" must be a boolean'):
            validate_note({"title": "Hi", "content": "There", "isPinned": "maybe"})

    @pytest.mark.parametrize("value", [1, 0, 1.0, "yes", "on", "1", "t"])
    def test_boolean_like_values_raise_error(self, value):
        """Test that numbers and loose truthy strings are not accepted as booleans."""
        with pytest.raises(ValidationError, match='"isPinned" must be a boolean'):
            validate_note({"title": "Hi", "content": "There", "isPinned": value})

    @pytest.mark.parametrize(("value", "expected"), [("true", True), ("false", False), ("TRUE", True)])
    def test_boolean_strings_converted(self, value, expected):
        """Test that the strings "true" and "false" are converted to booleans."""
        result = validate_note({"title": "Hi", "content": "There", "isArchived": value})
        assert result.is_archived is expected

    def test_unknown_key_raises_error(self):
        """Test that keys outside the schema raise ValidationError."""
        with pytest.raises(ValidationError, match='"color" is not allowed'):
            validate_note({"title": "Hi", "content": "There", "color": "red"})

    def test_non_object_payload_raises_error(self):
        """Test that a non-object payload raises ValidationError."""
        with pytest.raises(ValidationError, match='"value" must be of type object'):
            validate_note(["Hi", "There"])

    def test_first_violation_reported(self):
        """Test that only the first violation in field order is reported."""
        with pytest.raises(ValidationError) as exc_info:
            validate_note({})
        assert str(exc_info.value) == '"title" is required'


class TestValidateBulkOperation:
    """Tests for bulk operation payload validation."""

    @pytest.mark.parametrize("action", ["archive", "unarchive", "delete"])
    def test_valid_actions_accepted(self, action):
        """Test that every supported action is accepted."""
        result = validate_bulk_operation({"action": action, "noteIds": ["1", "2"]})
        assert result.action == BulkAction(action)
        assert result.note_ids == ["1", "2"]

    def test_unknown_action_raises_error(self):
        """Test that an unsupported action raises ValidationError."""
        with pytest.raises(ValidationError, match=r'"action" must be one of \[archive, unarchive, delete\]'):
            validate_bulk_operation({"action": "purge", "noteIds": ["1"]})

    def test_missing_action_raises_error(self):
        """Test that a missing action raises ValidationError."""
        with pytest.raises(ValidationError, match='"action" is required'):
            validate_bulk_operation({"noteIds": ["1"]})

    def test_empty_note_ids_raises_error(self):
        """Test that an empty noteIds list raises ValidationError."""
        with pytest.raises(ValidationError, match='"noteIds" must contain at least 1 items'):
            validate_bulk_operation({"action": "archive", "noteIds": []})

    def test_non_string_note_id_raises_error(self):
        """Test that a non-string note id raises ValidationError."""
        with pytest.raises(ValidationError, match=r'"noteIds\[0\]" must be a string'):
            validate_bulk_operation({"action": "archive", "noteIds": [5]})


class TestValidateImport:
    """Tests for import payload validation."""

    def test_notes_normalized(self):
        """Test that every imported note gets note defaults."""
        result = validate_import({"notes": [{"title": "A", "content": "B"}, {"title": "C", "content": "D", "tags": ["x"]}]})
        assert [n.title for n in result.notes] == ["A", "C"]
        assert result.notes[0].category == "General"
        assert result.notes[1].tags == ["x"]

    def test_missing_notes_raises_error(self):
        """Test that a missing notes list raises ValidationError."""
        with pytest.raises(ValidationError, match='"notes" is required'):
            validate_import({})

    def test_empty_notes_raises_error(self):
        """Test that an empty notes list raises ValidationError."""
        with pytest.raises(ValidationError, match='"notes" must contain at least 1 items'):
            validate_import({"notes": []})

    def test_invalid_nested_note_raises_error(self):
        """Test that the path of the first bad note is reported."""
        with pytest.raises(ValidationError, match=r'"notes\[1\]\.content" is required'):
            validate_import({"notes": [{"title": "A", "content": "B"}, {"title": "C"}]})
