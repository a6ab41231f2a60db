from bibsmith.core.latex import latex_to_unicode, string_as_words, strip_trailing_whitespace


def test_latex_to_unicode_converts_accents_and_braces() -> None:
    assert latex_to_unicode("Caf{\\'e}") == "Café"
    assert latex_to_unicode("{The} Art") == "The Art"


def test_latex_to_unicode_leaves_plain_text_untouched() -> None:
    assert latex_to_unicode("Plain title") == "Plain title"
    assert latex_to_unicode("") == ""


def test_string_as_words_splits_on_separators() -> None:
    assert string_as_words("alpha beta,gamma; delta\n") == ["alpha", "beta", "gamma", "delta"]
    assert string_as_words("") == []


def test_strip_trailing_whitespace() -> None:
    assert strip_trailing_whitespace("% comment \n\t") == "% comment"


def test_latex_to_unicode_keeps_percent_signs() -> None:
    assert latex_to_unicode("Growth of 50% in {NASA} budgets") == "Growth of 50% in NASA budgets"
    assert latex_to_unicode("Only 5\\% left") == "Only 5% left"
    assert latex_to_unicode("100%") == "100%"


def test_latex_to_unicode_converts_ligatures_without_other_markup() -> None:
    assert latex_to_unicode("1--10") == "1–10"
    assert latex_to_unicode("{1--10}") == latex_to_unicode("1--10")
