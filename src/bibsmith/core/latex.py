"""Text helpers turning LaTeX field values into plain readable text."""

from __future__ import annotations

from functools import lru_cache
import logging
import re

from pylatexenc.latex2text import LatexNodes2Text


logger = logging.getLogger(__name__)

_WORD_SEPARATOR_RE = re.compile(r"[\s,;]+")
_TRAILING_WHITESPACE_RE = re.compile(r"\s+$")
_UNESCAPED_PERCENT_RE = re.compile(r"(?<!\\)%")


@lru_cache(maxsize=1)
def _converter() -> LatexNodes2Text:
    return LatexNodes2Text(math_mode="verbatim", strict_latex_spaces=True)


def latex_to_unicode(text: str) -> str:
    """Convert LaTeX markup (accents, braces, ligatures, simple macros) to Unicode text.

    A bare ``%`` stays a literal percent sign rather than opening a comment.
    """
    if not text:
        return text
    try:
        converted = _converter().latex_to_text(_UNESCAPED_PERCENT_RE.sub(r"\\%", text))
    except Exception as exc:  # pylatexenc raises bare exceptions on malformed input
        logger.debug("Could not convert LaTeX value %r: %s", text, exc)
        return text
    return converted.strip()


def string_as_words(text: str) -> list[str]:
    """Split a field value into words on whitespace, commas, and semicolons."""
    return [word for word in _WORD_SEPARATOR_RE.split(text) if word]


def strip_trailing_whitespace(text: str) -> str:
    return _TRAILING_WHITESPACE_RE.sub("", text)


__all__ = ["latex_to_unicode", "string_as_words", "strip_trailing_whitespace"]
