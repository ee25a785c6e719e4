"""Qualifier markup for decoded dates."""

from __future__ import annotations

from enum import Enum


class Qualifier(Enum):
    APPROXIMATE = "approximate"
    QUESTIONABLE = "questionable"
    INFERRED = "inferred"

    @classmethod
    def from_code(cls, code: str | None) -> Qualifier | None:
        if not code:
            return None
        try:
            return cls(code)
        except ValueError:
            return None


QUALIFIER_FORMATS = {
    Qualifier.APPROXIMATE: "[ca. %s]",
    Qualifier.QUESTIONABLE: "[%s?]",
    Qualifier.INFERRED: "[%s]",
}


def qualify(text: str | None, qualifier: str | None) -> str:
    """Wrap ``text`` in the markup for ``qualifier``.

    Unknown or missing qualifiers leave the text unchanged.

    Example:
        qualify("1920", "approximate") → "[ca. 1920]"
    """
    text = text or ""
    known = Qualifier.from_code(qualifier)
    if known is None:
        return text
    return QUALIFIER_FORMATS[known] % text
