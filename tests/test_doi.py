import pytest

from bibsmith.core.entry.doi import normalize_doi
from bibsmith.core.entry.identifiers import next_id


@pytest.mark.parametrize(
    "value",
    [
        "10.1000/xyz123",
        "doi:10.1000/xyz123",
        "https://doi.org/10.1000/xyz123",
        "http://dx.doi.org/10.1000/xyz123/",
        "  DOI: 10.1000/xyz123 ",
    ],
)
def test_normalize_doi_strips_prefixes(value: str) -> None:
    assert normalize_doi(value) == "10.1000/xyz123"


@pytest.mark.parametrize("value", [None, "", "10.12/short", "https://example.org/10.1000/x"])
def test_normalize_doi_rejects_invalid_values(value: str | None) -> None:
    assert normalize_doi(value) is None


def test_next_id_is_unique() -> None:
    identifiers = {next_id() for _ in range(100)}

    assert len(identifiers) == 100
    assert all(identifier.startswith("id") for identifier in identifiers)
