import pytest

from bibsmith.core.entry import Date, Month


@pytest.mark.parametrize("text", ["mar", "#mar#", "March", "Mar.", "3", "03"])
def test_month_parse_accepts_common_spellings(text: str) -> None:
    assert Month.parse(text) is Month.MARCH


@pytest.mark.parametrize("text", [None, "", "13", "spring"])
def test_month_parse_rejects_unknown_values(text: str | None) -> None:
    assert Month.parse(text) is None


def test_month_renderings() -> None:
    month = Month.SEPTEMBER

    assert month.macro_format == "#sep#"
    assert month.two_digit_number == "09"
    assert month.full_name == "September"
    assert Month.from_number(12) is Month.DECEMBER


def test_date_from_parts_composes_available_components() -> None:
    assert Date.from_parts("2020").normalized == "2020"
    assert Date.from_parts("2020", "mar").normalized == "2020-03"
    assert Date.from_parts("2020", "#mar#", "5").normalized == "2020-03-05"


def test_date_from_parts_degrades_gracefully() -> None:
    assert Date.from_parts(None, "mar") is None
    assert Date.from_parts("circa 1900") is None
    assert Date.from_parts("2020", "spring").normalized == "2020"
    assert Date.from_parts("2021", "feb", "30").normalized == "2021-02"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2020", "2020"),
        ("2020-03", "2020-03"),
        ("2020-03-05", "2020-03-05"),
        ("2020-03-05T10:15:00Z", "2020-03-05"),
        ("5.3.2020", "2020-03-05"),
        ("05-03-2020", "2020-03-05"),
        ("2020.03.05", "2020-03-05"),
        ("3/2020", "2020-03"),
        ("March 5, 2020", "2020-03-05"),
        ("5 March 2020", "2020-03-05"),
        ("March 2020", "2020-03"),
        ("2015/2016", "2015/2016"),
    ],
)
def test_date_parse_formats(text: str, expected: str) -> None:
    parsed = Date.parse(text)

    assert parsed is not None
    assert parsed.normalized == expected


@pytest.mark.parametrize("text", [None, "", "sometime", "2021-02-30", "2020-13"])
def test_date_parse_rejects_invalid_input(text: str | None) -> None:
    assert Date.parse(text) is None


def test_date_components() -> None:
    parsed = Date.parse("2019-11-02")

    assert parsed == Date(2019, Month.NOVEMBER, 2)
    assert str(parsed) == "2019-11-02"
