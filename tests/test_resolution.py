import logging

import pytest

from bibsmith.core.entry import BibEntry, StandardEntryType
from bibsmith.core.entry import entry as entry_module
from bibsmith.core.latex import latex_to_unicode, string_as_words


@pytest.mark.parametrize(
    ("stored", "requested"),
    [
        ("address", "location"),
        ("location", "address"),
        ("journal", "journaltitle"),
        ("journaltitle", "journal"),
        ("school", "institution"),
    ],
)
def test_aliases_resolve_in_both_directions(stored: str, requested: str) -> None:
    entry = BibEntry().with_field(stored, "value")

    assert entry.get_field_or_alias(requested) == "value"
    assert entry.get_field(requested) is None


def test_own_value_wins_over_alias() -> None:
    entry = BibEntry().with_field("address", "Paris").with_field("location", "Berlin")

    assert entry.get_field_or_alias("address") == "Paris"
    assert entry.get_field_or_alias("location") == "Berlin"


def test_unknown_field_resolves_to_none() -> None:
    entry = BibEntry().with_field("title", "T")

    assert entry.get_field_or_alias("journal") is None
    assert entry.get_field_or_alias("publisher") is None


def test_date_is_composed_from_components() -> None:
    entry = BibEntry().with_field("year", "2020").with_field("month", "mar")

    assert entry.get_field_or_alias("date") == "2020-03"

    entry.set_field("day", "7")
    assert entry.get_field_or_alias("date") == "2020-03-07"


def test_date_without_year_is_unresolved() -> None:
    entry = BibEntry().with_field("month", "#mar#")

    assert entry.get_field_or_alias("date") is None


def test_components_are_read_from_date() -> None:
    entry = BibEntry().with_field("date", "2020-03-15")

    assert entry.get_field_or_alias("year") == "2020"
    assert entry.get_field_or_alias("month") == "#mar#"
    assert entry.get_field_or_alias("day") == "15"


def test_missing_date_component_is_none() -> None:
    entry = BibEntry().with_field("date", "2020")

    assert entry.get_field_or_alias("year") == "2020"
    assert entry.get_field_or_alias("month") is None
    assert entry.get_field_or_alias("day") is None


def test_unparsable_date_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    entry = BibEntry().with_field("date", "sometime soon")

    with caplog.at_level(logging.DEBUG, logger="bibsmith"):
        assert entry.get_field_or_alias("year") is None

    assert any("Could not parse date" in record.getMessage() for record in caplog.records)


def test_latex_free_value_is_converted_and_cached() -> None:
    entry = BibEntry().with_field("title", "Caf{\\'e} Society")

    assert entry.get_latex_free_field("title") == "Café Society"
    assert entry._cache.is_cached("title")


def test_latex_free_cache_is_invalidated_on_write() -> None:
    entry = BibEntry().with_field("title", "Caf{\\'e}")
    assert entry.get_latex_free_field("title") == "Café"

    entry.set_field("title", "Na{\\\"i}ve")

    assert not entry._cache.is_cached("title")
    assert entry.get_latex_free_field("title") == "Naïve"

    entry.clear_field("title")
    assert entry.get_latex_free_field("title") is None


def test_latex_free_keeps_citation_key_literal() -> None:
    entry = BibEntry().with_cite_key("M{\\\"u}ller2020")

    assert entry.get_latex_free_field("citationkey") == "M{\\\"u}ller2020"


def test_latex_free_type_header_follows_type_changes() -> None:
    entry = BibEntry()
    assert entry.get_latex_free_field("entrytype") == "Misc"

    entry.set_type(StandardEntryType.INPROCEEDINGS)

    assert entry.get_latex_free_field("entrytype") == "InProceedings"
    assert entry.get_latex_free_field("bibtextype") == "InProceedings"


def test_latex_free_alias_and_date_resolution() -> None:
    entry = BibEntry().with_field("journaltitle", "{\\'E}tudes").with_field("year", "2001")
    entry.set_field("month", "mar")

    assert entry.get_field_or_alias_latex_free("journal") == "Études"
    assert entry.get_field_or_alias_latex_free("date") == "2001-03"


def test_field_as_words() -> None:
    entry = BibEntry().with_field("keywords", "graph, theory;Graph  networks")

    assert entry.get_field_as_words("keywords") == frozenset(
        {"graph", "theory", "Graph", "networks"}
    )
    assert entry.get_field_as_words("abstract") == frozenset()
    assert not entry._cache.is_cached("abstract")


def test_word_cache_is_invalidated_on_write() -> None:
    entry = BibEntry().with_field("title", "one two")
    assert entry.get_field_as_words("title") == frozenset({"one", "two"})

    entry.set_field("title", "three")

    assert entry.get_field_as_words("title") == frozenset({"three"})


def test_latex_free_value_keeps_text_after_percent_sign() -> None:
    entry = BibEntry().with_field("title", "Growth of 50% in {NASA} budgets")

    assert entry.get_latex_free_field("title") == "Growth of 50% in NASA budgets"


def test_latex_free_value_computed_before_a_write_is_not_cached(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    entry = BibEntry().with_field("title", "Caf{\\'e}")
    calls: list[str] = []

    def convert_while_title_changes(text: str) -> str:
        calls.append(text)
        if len(calls) == 1:
            entry.set_field("title", "Na{\\\"i}ve")
        return latex_to_unicode(text)

    monkeypatch.setattr(entry_module, "latex_to_unicode", convert_while_title_changes)

    assert entry.get_latex_free_field("title") == "Café"
    assert not entry._cache.is_cached("title")
    assert entry.get_latex_free_field("title") == "Naïve"
    assert entry._cache.is_cached("title")


def test_word_set_computed_before_a_write_is_not_cached(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    entry = BibEntry().with_field("title", "one two")
    calls: list[str] = []

    def split_while_title_changes(text: str) -> list[str]:
        calls.append(text)
        if len(calls) == 1:
            entry.set_field("title", "three")
        return string_as_words(text)

    monkeypatch.setattr(entry_module, "string_as_words", split_while_title_changes)

    assert entry.get_field_as_words("title") == frozenset({"one", "two"})
    assert not entry._cache.is_cached("title")
    assert entry.get_field_as_words("title") == frozenset({"three"})
