from datetime import datetime
from pathlib import Path
import textwrap

from pydantic import ValidationError
import pytest

from bibsmith.core.config import EntryPreferences, TimestampPreferences, load_preferences


def test_defaults() -> None:
    preferences = load_preferences()

    assert preferences == EntryPreferences()
    assert preferences.keyword_separator == ","
    assert preferences.timestamps.timestamp_field == "timestamp"
    assert not preferences.timestamps.include_created_timestamp


def test_load_preferences_reads_bibsmith_table(tmp_path: Path) -> None:
    config = tmp_path / "pyproject.toml"
    config.write_text(
        textwrap.dedent(
            """
            [project]
            name = "demo"

            [bibsmith]
            keyword_separator = ";"

            [bibsmith.timestamps]
            use_modified_timestamp = true
            timestamp_field = "Modified"
            """
        ),
        encoding="utf-8",
    )

    preferences = load_preferences(config)

    assert preferences.keyword_separator == ";"
    assert preferences.timestamps.include_modified_timestamp
    assert preferences.timestamps.timestamp_field == "modified"


def test_load_preferences_accepts_top_level_keys(tmp_path: Path) -> None:
    config = tmp_path / "bibsmith.toml"
    config.write_text('keyword_separator = "|"\n', encoding="utf-8")

    assert load_preferences(config).keyword_separator == "|"


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ValidationError):
        EntryPreferences.model_validate({"keyword_delimiter": ";"})


def test_keyword_separator_must_be_one_character() -> None:
    with pytest.raises(ValidationError):
        EntryPreferences(keyword_separator=";;")


def test_timestamp_flags_and_format() -> None:
    preferences = TimestampPreferences(
        use_timestamps=True,
        use_modified_timestamp=True,
        timestamp_format="%d.%m.%Y",
    )

    assert preferences.include_timestamps
    assert preferences.now(clock=datetime(2024, 5, 1, 12, 30)) == "01.05.2024"
    assert not TimestampPreferences(use_timestamps=True).include_timestamps
