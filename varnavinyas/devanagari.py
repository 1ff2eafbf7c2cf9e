"""Classification of characters in the Devanagari Unicode block."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from varnavinyas.consonant import Varga


class CharType(Enum):
    """Kind of a Devanagari character."""

    SVAR = "svar"
    VYANJAN = "vyanjan"
    MATRA = "matra"
    HALANTA = "halanta"
    CHANDRABINDU = "chandrabindu"
    SHIRBINDU = "shirbindu"
    VISARGA = "visarga"
    NUKTA = "nukta"
    AVAGRAHA = "avagraha"
    NUMERAL = "numeral"
    DANDA = "danda"
    OTHER_MARK = "other_mark"


@dataclass(frozen=True)
class DevanagariChar:
    """Detailed classification of a Devanagari character."""

    char_type: CharType
    varga: Varga | None = None
    is_panchham: bool = False


def _build_table() -> dict[str, DevanagariChar]:
    table: dict[str, DevanagariChar] = {}

    def mark(first: int, last: int, char_type: CharType) -> None:
        entry = DevanagariChar(char_type)
        for cp in range(first, last + 1):
            table[chr(cp)] = entry

    def consonants(first: int, last: int, group: Varga, panchham: int | None = None) -> None:
        for cp in range(first, last + 1):
            table[chr(cp)] = DevanagariChar(CharType.VYANJAN, group, cp == panchham)

    mark(0x0900, 0x0901, CharType.CHANDRABINDU)
    mark(0x0902, 0x0902, CharType.SHIRBINDU)
    mark(0x0903, 0x0903, CharType.VISARGA)
    mark(0x0904, 0x0914, CharType.SVAR)

    consonants(0x0915, 0x0919, Varga.KA_VARGA, panchham=0x0919)
    consonants(0x091A, 0x091E, Varga.CHA_VARGA, panchham=0x091E)
    consonants(0x091F, 0x0923, Varga.TA_VARGA, panchham=0x0923)
    consonants(0x0924, 0x0928, Varga.TA_VARGA2, panchham=0x0928)
    consonants(0x0929, 0x0929, Varga.TA_VARGA2)
    consonants(0x092A, 0x092E, Varga.PA_VARGA, panchham=0x092E)
    consonants(0x092F, 0x0935, Varga.ANTASTHA)
    consonants(0x0936, 0x0938, Varga.USHMA)
    consonants(0x0939, 0x0939, Varga.OTHER)

    mark(0x093A, 0x093B, CharType.MATRA)
    mark(0x093C, 0x093C, CharType.NUKTA)
    mark(0x093D, 0x093D, CharType.AVAGRAHA)
    mark(0x093E, 0x094C, CharType.MATRA)
    mark(0x094D, 0x094D, CharType.HALANTA)
    mark(0x094E, 0x094F, CharType.MATRA)
    mark(0x0950, 0x0950, CharType.SVAR)
    mark(0x0951, 0x0957, CharType.MATRA)

    consonants(0x0958, 0x095A, Varga.KA_VARGA)
    consonants(0x095B, 0x095B, Varga.CHA_VARGA)
    consonants(0x095C, 0x095D, Varga.TA_VARGA)
    consonants(0x095E, 0x095E, Varga.PA_VARGA)
    consonants(0x095F, 0x095F, Varga.ANTASTHA)

    mark(0x0960, 0x0961, CharType.SVAR)
    mark(0x0962, 0x0963, CharType.MATRA)
    mark(0x0964, 0x0965, CharType.DANDA)
    mark(0x0966, 0x096F, CharType.NUMERAL)
    mark(0x0970, 0x0971, CharType.OTHER_MARK)
    mark(0x0972, 0x0977, CharType.SVAR)
    consonants(0x0978, 0x097F, Varga.OTHER)
    return table


_TABLE = _build_table()


def classify(c: str) -> DevanagariChar | None:
    """Classify a character; None for anything outside the Devanagari block."""
    return _TABLE.get(c)


def _has_type(c: str, char_type: CharType) -> bool:
    info = classify(c)
    return info is not None and info.char_type is char_type


def is_svar(c: str) -> bool:
    """True for a vowel (स्वर)."""
    return _has_type(c, CharType.SVAR)


def is_vyanjan(c: str) -> bool:
    """True for a consonant (व्यञ्जन)."""
    return _has_type(c, CharType.VYANJAN)


def is_matra(c: str) -> bool:
    """True for a vowel sign (मात्रा)."""
    return _has_type(c, CharType.MATRA)


def is_halanta(c: str) -> bool:
    """True for the virama (हलन्त)."""
    return _has_type(c, CharType.HALANTA)