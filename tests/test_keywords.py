import pytest

from bibsmith.core.entry import BibEntry, Keyword, KeywordList
from bibsmith.core.exceptions import MissingValueError


def test_keyword_list_parse_and_serialize() -> None:
    keywords = KeywordList.parse(" alpha, beta ,, gamma ", ",")

    assert [str(keyword) for keyword in keywords] == ["alpha", "beta", "gamma"]
    assert keywords.as_string(",") == "alpha, beta, gamma"
    assert KeywordList.parse(None, ",") == KeywordList()


def test_keyword_list_parse_requires_delimiter() -> None:
    with pytest.raises(MissingValueError):
        KeywordList.parse("a", None)  # type: ignore[arg-type]


def test_keywords_compare_case_insensitively() -> None:
    assert Keyword("Machine Learning") == Keyword("machine learning")
    assert hash(Keyword("SQL")) == hash(Keyword("sql"))
    assert Keyword("SQL") == "sql"
    assert str(Keyword("SQL")) == "SQL"


def test_hierarchical_keywords() -> None:
    keyword = Keyword("Computing>Databases >  SQL")

    assert keyword.is_hierarchical
    assert keyword.path == ("Computing", "Databases", "SQL")
    assert str(keyword) == "Computing > Databases > SQL"
    assert keyword == "computing > databases > sql"


def test_keyword_list_rejects_duplicates_and_empty_tokens() -> None:
    keywords = KeywordList(["x"])

    assert not keywords.add("X")
    assert not keywords.add("  ")
    assert keywords.add("y")
    assert len(keywords) == 2
    assert "Y" in keywords


def test_replace_all_adds_replacement_only_after_a_removal() -> None:
    keywords = KeywordList(["a", "b", "c"])

    keywords.replace_all(["missing"], "z")
    assert "z" not in keywords

    keywords.replace_all(["a", "b"], "z")
    assert [str(keyword) for keyword in keywords] == ["z", "c"]

    with pytest.raises(MissingValueError):
        keywords.replace_all(["c"], None)  # type: ignore[arg-type]


def test_put_empty_keywords_without_field_returns_none() -> None:
    entry = BibEntry()

    assert entry.put_keywords([], ",") is None
    assert not entry.has_field("keywords")


def test_put_empty_keywords_clears_field() -> None:
    entry = BibEntry().with_field("keywords", "a, b")

    change = entry.put_keywords(KeywordList(), ",")

    assert change is not None and change.is_removal
    assert not entry.has_field("keywords")


def test_add_keyword_twice_keeps_one() -> None:
    entry = BibEntry()

    assert entry.add_keyword("x", ",") is not None
    assert entry.add_keyword("X", ",") is None
    assert entry.get_field("keywords") == "x"


def test_add_keyword_ignores_empty_and_rejects_none() -> None:
    entry = BibEntry()

    assert entry.add_keyword("", ",") is None
    assert not entry.has_field("keywords")
    with pytest.raises(MissingValueError):
        entry.add_keyword(None, ",")  # type: ignore[arg-type]


def test_add_remove_and_replace_keywords_on_entry() -> None:
    entry = BibEntry().with_field("keywords", "graphs; trees")

    entry.add_keywords(["Networks", "graphs"], ";")
    assert entry.get_field("keywords") == "graphs; trees; Networks"

    entry.remove_keywords(["TREES"], ";")
    assert entry.get_field("keywords") == "graphs; Networks"

    entry.replace_keywords(["graphs", "networks"], "Graph Theory", ";")
    assert entry.get_field("keywords") == "Graph Theory"
    assert entry.get_keywords(";") == KeywordList(["graph theory"])


def test_replace_all_keeps_the_position_of_the_replaced_keyword() -> None:
    keywords = KeywordList(["a", "b", "c", "d"])

    keywords.replace_all(["c", "b"], "x")

    assert [str(keyword) for keyword in keywords] == ["a", "x", "d"]


def test_replace_all_does_not_duplicate_an_existing_replacement() -> None:
    keywords = KeywordList(["a", "b", "c"])

    keywords.replace_all(["b"], "C")

    assert [str(keyword) for keyword in keywords] == ["a", "c"]


def test_replace_keywords_on_entry_keeps_order() -> None:
    entry = BibEntry().with_field("keywords", "a, b, c")

    entry.replace_keywords(["b"], "x", ",")

    assert entry.get_field("keywords") == "a, x, c"
