"""Word origin taken from the abbreviation tags of dictionary entries.

The bracketed tags of the Nepali Brihat Shabdakosha (such as ``[सं.]``,
``[फा.]`` or ``[अङ्.]``) are mapped to the four origin classes used by the
orthography rules, together with the name of the source language.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Origin(Enum):
    """Origin class of a word."""

    TATSAM = "tatsam"
    """Borrowed from Sanskrit unchanged."""
    TADBHAV = "tadbhav"
    """Derived from Sanskrit or a related language."""
    DESHAJ = "deshaj"
    """Native to the languages of Nepal."""
    AAGANTUK = "aagantuk"
    """Borrowed from a foreign language."""


@dataclass(frozen=True)
class _TagEntry:
    prefixes: tuple[str, ...]
    origin: Origin
    source_language: str


# Longer and more specific prefixes come first so that, for example,
# "भो. ब" wins over "भो" and "अङ्" over "अ".
_TAG_TABLE: tuple[_TagEntry, ...] = (
    _TagEntry(("भो. ब", "भो.ब"), Origin.TADBHAV, "भोट-बर्मेली"),
    _TagEntry(("अङ्", "अङ.", "अङ", "अड्"), Origin.AAGANTUK, "अङ्ग्रेजी"),
    _TagEntry(("भा. इ", "भा.इ"), Origin.AAGANTUK, "भारत-इरानेली"),
    _TagEntry(("फ्रा", "फ्रे"), Origin.AAGANTUK, "फ्रान्सेली"),
    _TagEntry(("पोर्त",), Origin.AAGANTUK, "पोर्तगाली"),
    _TagEntry(("जापा",), Origin.AAGANTUK, "जापानी"),
    _TagEntry(("चिनि",), Origin.AAGANTUK, "चिनियाँ"),
    _TagEntry(("स्पे",), Origin.AAGANTUK, "स्पेनिस"),
    _TagEntry(("ग्री",), Origin.AAGANTUK, "ग्रीक"),
    _TagEntry(("तामा",), Origin.DESHAJ, "तामाङ्गी"),
    _TagEntry(("धिमा",), Origin.DESHAJ, "धिमाल"),
    _TagEntry(("नेवा",), Origin.DESHAJ, "नेवारी"),
    _TagEntry(("मरा",), Origin.TADBHAV, "मराठी"),
    _TagEntry(("उडि",), Origin.TADBHAV, "उडिया"),
    _TagEntry(("प्रा",), Origin.TADBHAV, "प्राकृत"),
    _TagEntry(("मै",), Origin.TADBHAV, "मैथिली"),
    _TagEntry(("फा",), Origin.AAGANTUK, "फारसी"),
    _TagEntry(("तु",), Origin.AAGANTUK, "तुर्की"),
    _TagEntry(("था",), Origin.AAGANTUK, "थारू"),
    _TagEntry(("भो",), Origin.TADBHAV, "भोजपुरी"),
    _TagEntry(("हि",), Origin.TADBHAV, "हिन्दी"),
    _TagEntry(("मग",), Origin.DESHAJ, "मगराँती"),
    _TagEntry(("डो",), Origin.DESHAJ, "डोटेली"),
    _TagEntry(("दङ",), Origin.DESHAJ, "दङाली"),
    _TagEntry(("लि",), Origin.DESHAJ, "लिम्बू"),
    _TagEntry(("मो",), Origin.DESHAJ, "भोट-बर्मेली"),
    _TagEntry(("बा",), Origin.DESHAJ, "बालबोली"),
    _TagEntry(("अ.", "अ ", "अ"), Origin.AAGANTUK, "अरबी"),
)

# Etymological derivation markers ("X ८ सं. Y" means derived from Sanskrit Y).
_DERIVATIONS: tuple[tuple[tuple[str, ...], Origin, str], ...] = (
    (("८ सं", "८सं"), Origin.TADBHAV, "संस्कृत"),
    (("८ अ",), Origin.AAGANTUK, "अरबी"),
    (("८ फा",), Origin.AAGANTUK, "फारसी"),
    (("८ पोर्त",), Origin.AAGANTUK, "पोर्तुगाली"),
)

_SANSKRIT = "संस्कृत"


def _first_bracket(pos_field: str) -> str | None:
    start = pos_field.find("[")
    if start < 0:
        return None
    end = pos_field.find("]", start)
    if end < 0:
        return None
    return pos_field[start + 1 : end].strip()


def _tag_metadata(tag: str) -> tuple[Origin, str] | None:
    normalized = tag.strip().rstrip(".")

    # "सं" alone is direct Sanskrit; "सं. X" names a Sanskrit root.
    if normalized == "सं":
        return Origin.TATSAM, _SANSKRIT
    for marker in ("सं.", "सं "):
        if normalized.startswith(marker):
            rest = normalized[len(marker) :].strip()
            return (Origin.TADBHAV if rest else Origin.TATSAM), _SANSKRIT

    for entry in _TAG_TABLE:
        if any(normalized.startswith(prefix) for prefix in entry.prefixes):
            return entry.origin, entry.source_language

    for markers, origin, language in _DERIVATIONS:
        if any(marker in tag for marker in markers):
            return origin, language
    return None


def parse_origin_tag(pos_field: str) -> Origin | None:
    """Origin named by the first bracketed tag of a POS field, if recognised."""
    tag = _first_bracket(pos_field)
    if tag is None:
        return None
    metadata = _tag_metadata(tag)
    return metadata[0] if metadata else None


def parse_source_language(pos_field: str) -> str | None:
    """Source language named by the first bracketed tag of a POS field."""
    tag = _first_bracket(pos_field)
    if tag is None:
        return None
    metadata = _tag_metadata(tag)
    return metadata[1] if metadata else None