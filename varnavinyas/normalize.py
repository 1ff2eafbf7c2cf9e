"""Canonical normalisation of Devanagari text."""

from __future__ import annotations

import unicodedata


def normalize(text: str) -> str:
    """Return the NFC form of the text.

    Idempotent: ``normalize(normalize(s)) == normalize(s)``.
    """
    return unicodedata.normalize("NFC", text)