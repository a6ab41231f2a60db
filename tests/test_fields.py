import pytest

from bibsmith.core.entry import (
    FIELD_ALIASES,
    EntryType,
    InternalField,
    OrFields,
    StandardEntryType,
    StandardField,
    alias_for,
    normalize_field,
)
from bibsmith.core.exceptions import MissingValueError


def test_normalize_field_accepts_members_and_strings() -> None:
    assert normalize_field(StandardField.TITLE) == "title"
    assert normalize_field(InternalField.KEY_FIELD) == "citationkey"
    assert normalize_field("  JournalTitle ") == "journaltitle"


@pytest.mark.parametrize("name", [None, "", "   "])
def test_normalize_field_rejects_missing_names(name: str | None) -> None:
    with pytest.raises(MissingValueError):
        normalize_field(name)


def test_missing_value_error_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        normalize_field(None)


def test_aliases_are_symmetric() -> None:
    for name, alias in FIELD_ALIASES.items():
        assert FIELD_ALIASES[alias] == name

    assert alias_for("journal") == "journaltitle"
    assert alias_for(StandardField.LOCATION) == "address"
    assert alias_for("title") is None


def test_or_fields_parse_keeps_order() -> None:
    fields = OrFields.parse("Author/editor")

    assert fields == ("author", "editor")
    assert fields.display_name == "author/editor"
    assert OrFields.of(StandardField.TITLE, "booktitle") == ("title", "booktitle")


def test_or_fields_requires_an_alternative() -> None:
    with pytest.raises(ValueError):
        OrFields.parse("/")


def test_entry_type_names_are_normalised() -> None:
    entry_type = EntryType.parse("InProceedings")

    assert entry_type == StandardEntryType.INPROCEEDINGS
    assert entry_type.display_name == "InProceedings"
    assert entry_type.is_standard
    assert str(StandardEntryType.PHDTHESIS) == "PhdThesis"


def test_unknown_entry_types_are_accepted() -> None:
    entry_type = EntryType("dataset")

    assert entry_type.display_name == "Dataset"
    assert not entry_type.is_standard


def test_entry_type_rejects_empty_name() -> None:
    with pytest.raises(ValueError):
        EntryType(" ")
