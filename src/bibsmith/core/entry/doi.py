"""DOI normalisation for the ``doi`` field."""

from __future__ import annotations

import re


_DOI_RE = re.compile(r"^10\.\d{4,9}/\S+$")
_RESOLVER_PREFIXES = (
    "https://doi.org/",
    "http://doi.org/",
    "https://dx.doi.org/",
    "http://dx.doi.org/",
)


def normalize_doi(value: str | None) -> str | None:
    """Return the bare ``10.xxxx/...`` form of a DOI, or ``None`` if invalid."""
    if value is None:
        return None
    candidate = value.strip()
    if not candidate:
        return None

    lowered = candidate.lower()
    for prefix in _RESOLVER_PREFIXES:
        if lowered.startswith(prefix):
            candidate = candidate[len(prefix) :]
            break

    candidate = candidate.strip()
    if candidate.lower().startswith("doi:"):
        candidate = candidate.split(":", 1)[1]

    candidate = candidate.strip().strip("/")
    if not _DOI_RE.match(candidate):
        return None
    return candidate


__all__ = ["normalize_doi"]
