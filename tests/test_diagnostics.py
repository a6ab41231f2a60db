import logging

import pytest

from bibsmith.core.diagnostics import LoggingObserver, format_change_message
from bibsmith.core.entry import BibEntry, EntryEvent, EntryEventSource
from bibsmith.core.exceptions import exception_messages


def _events(entry: BibEntry) -> list[EntryEvent]:
    events: list[EntryEvent] = []
    entry.register_observer(events.append)
    return events


def test_format_change_message_covers_every_kind() -> None:
    entry = BibEntry().with_cite_key("doe")
    events = _events(entry)

    entry.set_field("title", "First")
    entry.set_field("title", "Second", EntryEventSource.IMPORT)
    entry.clear_field("title")
    entry.set_type("article")

    assert [format_change_message(event) for event in events] == [
        "doe: added title = 'First'",
        "doe: changed title: 'First' -> 'Second' [import]",
        "doe: removed title (was 'Second')",
        "doe: type misc -> article",
    ]


def test_format_change_message_shortens_long_values() -> None:
    entry = BibEntry()
    events = _events(entry)

    entry.set_field("abstract", "x" * 200)

    message = format_change_message(events[0])
    assert message.startswith(f"{entry.id}: added abstract = 'xxx")
    assert message.endswith("...'")
    assert len(message) < 100


def test_logging_observer_levels(caplog: pytest.LogCaptureFixture) -> None:
    entry = BibEntry().with_cite_key("doe")
    entry.register_observer(LoggingObserver())

    with caplog.at_level(logging.DEBUG, logger="bibsmith"):
        entry.set_field("title", "T")
        entry.set_field("year", "2020", EntryEventSource.SHARED)

    levels = {record.getMessage(): record.levelno for record in caplog.records}
    assert levels["doe: added title = 'T'"] == logging.INFO
    assert levels["doe: added year = '2020' [shared]"] == logging.DEBUG


def test_logging_observer_uses_given_logger(caplog: pytest.LogCaptureFixture) -> None:
    custom = logging.getLogger("bibsmith.tests.audit")
    entry = BibEntry().with_cite_key("k")
    entry.register_observer(LoggingObserver(logger_obj=custom))

    with caplog.at_level(logging.INFO, logger="bibsmith.tests.audit"):
        entry.set_field("note", "n")

    assert [record.name for record in caplog.records] == ["bibsmith.tests.audit"]


def test_exception_messages_follow_causes() -> None:
    try:
        try:
            raise ValueError("inner problem")
        except ValueError as exc:
            raise RuntimeError("outer problem") from exc
    except RuntimeError as exc:
        assert exception_messages(exc) == ["outer problem", "inner problem"]
