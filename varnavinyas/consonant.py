"""Consonant classification: varga groups, positions and voicing."""

from __future__ import annotations

from enum import Enum


class Varga(Enum):
    """Consonant group (varga)."""

    KA_VARGA = "ka"
    """क ख ग घ ङ"""
    CHA_VARGA = "cha"
    """च छ ज झ ञ"""
    TA_VARGA = "ta"
    """ट ठ ड ढ ण (retroflex)"""
    TA_VARGA2 = "ta2"
    """त थ द ध न (dental)"""
    PA_VARGA = "pa"
    """प फ ब भ म"""
    ANTASTHA = "antastha"
    """य र ल व (semivowels)"""
    USHMA = "ushma"
    """श ष स (sibilants)"""
    OTHER = "other"
    """ह, and other consonants"""


_VARGA_MEMBERS: dict[Varga, str] = {
    # Nukta forms: क़ ख़ ग़ / ज़ / ड़ ढ़ / फ़ / य़
    Varga.KA_VARGA: "कखगघङ\u0958\u0959\u095A",
    Varga.CHA_VARGA: "चछजझञ\u095B",
    Varga.TA_VARGA: "टठडढण\u095C\u095D",
    Varga.TA_VARGA2: "तथदधन",
    Varga.PA_VARGA: "पफबभम\u095E",
    Varga.ANTASTHA: "यरलवळ\u095F",
    Varga.USHMA: "शषस",
    Varga.OTHER: "ह",
}

_VARGA_OF: dict[str, Varga] = {
    ch: group for group, members in _VARGA_MEMBERS.items() for ch in members
}

_POSITIONS: dict[str, int] = {
    ch: position
    for position, members in enumerate(("कचटतप", "खछठथफ", "गजडदब", "घझढधभ", "ङञणनम"), 1)
    for ch in members
}

_PANCHHAM: dict[Varga, str] = {
    Varga.KA_VARGA: "ङ",
    Varga.CHA_VARGA: "ञ",
    Varga.TA_VARGA: "ण",
    Varga.TA_VARGA2: "न",
    Varga.PA_VARGA: "म",
}

_VOICED_COUNTERPART: dict[str, str] = dict(zip("कखचछटठतथपफ", "गघजझडढदधबभ"))


def varga(c: str) -> Varga | None:
    """Return the varga of a consonant, or None for anything else."""
    return _VARGA_OF.get(c)


def is_panchham(c: str) -> bool:
    """True for the fifth (nasal) consonant of a varga: ङ ञ ण न म."""
    return c in _PANCHHAM.values()


def varga_position(c: str) -> int | None:
    """Position of a stop or nasal within its varga, 1 to 5."""
    return _POSITIONS.get(c)


def is_voiceless(c: str) -> bool:
    """True for the 1st and 2nd consonant of a varga, and for sibilants."""
    return varga_position(c) in (1, 2) or c in "शषस" and len(c) == 1


def is_voiced(c: str) -> bool:
    """True for the 3rd to 5th consonant of a varga, semivowels and ह."""
    position = varga_position(c)
    return (position is not None and 3 <= position <= 5) or (
        len(c) == 1 and c in "यरलवह"
    )


def panchham_of(v: Varga) -> str | None:
    """Return the nasal of a varga, or None for groups without one."""
    return _PANCHHAM.get(v)


def voiced_counterpart(c: str) -> str | None:
    """Voiced counterpart of a voiceless stop (position 1→3, 2→4)."""
    return _VOICED_COUNTERPART.get(c)