"""Field lookup with biblatex aliases and date composition.

The same algorithm serves raw and latex-free reads; callers pass the value
accessor to use:

1. the field itself, when present and non-empty;
2. otherwise its alias (``journal`` <-> ``journaltitle``, ...), one hop only;
3. for ``date``, the ``year``/``month``/``day`` triple composed into
   ``YYYY[-MM[-DD]]``;
4. for ``year``/``month``/``day``, the matching component of ``date``.
"""

from __future__ import annotations

from collections.abc import Callable
import logging

from .dates import Date
from .fields import DATE_COMPONENTS, FIELD_ALIASES, StandardField


logger = logging.getLogger(__name__)

FieldAccessor = Callable[[str], "str | None"]

_DATE = StandardField.DATE.value
_YEAR = StandardField.YEAR.value
_MONTH = StandardField.MONTH.value
_DAY = StandardField.DAY.value


def resolve_field_or_alias(name: str, accessor: FieldAccessor) -> str | None:
    """Return the effective value of ``name`` using ``accessor`` for every read."""
    value = accessor(name)
    if value:
        return value

    alias = FIELD_ALIASES.get(name)
    if alias is not None:
        return accessor(alias)

    if name == _DATE:
        date = Date.from_parts(accessor(_YEAR), accessor(_MONTH), accessor(_DAY))
        return date.normalized if date is not None else None

    if name in DATE_COMPONENTS:
        return _date_component(name, accessor)

    return None


def _date_component(name: str, accessor: FieldAccessor) -> str | None:
    raw_date = accessor(_DATE)
    if raw_date is None:
        return None

    parsed = Date.parse(raw_date)
    if parsed is None:
        logger.debug("Could not parse date %r", raw_date)
        return None

    if name == _YEAR:
        return str(parsed.year)
    if name == _MONTH:
        return parsed.month.macro_format if parsed.month is not None else None
    return str(parsed.day) if parsed.day is not None else None


__all__ = ["FieldAccessor", "resolve_field_or_alias"]
