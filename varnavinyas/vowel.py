"""Vowel length classification and conversions between vowels and vowel signs."""

from __future__ import annotations

from enum import Enum


class SvarType(Enum):
    """Vowel length."""

    HRASVA = "hrasva"
    """ह्रस्व (short): अ इ उ ऋ"""
    DIRGHA = "dirgha"
    """दीर्घ (long): आ ई ऊ ए ऐ ओ औ"""


_SVAR_TYPES: dict[str, SvarType] = {
    **dict.fromkeys("अइउऋऌ", SvarType.HRASVA),
    **dict.fromkeys("आईऊॠॡएऐओऔ", SvarType.DIRGHA),
    **dict.fromkeys("िुृॢ", SvarType.HRASVA),
    **dict.fromkeys("ाीूॄॣेैोौ", SvarType.DIRGHA),
}

_HRASVA_TO_DIRGHA: dict[str, str] = dict(zip("इउऋऌिुृॢ", "ईऊॠॡीूॄॣ"))
_DIRGHA_TO_HRASVA: dict[str, str] = {d: h for h, d in _HRASVA_TO_DIRGHA.items()}

# अ is the inherent vowel and has no matra form.
_SVAR_TO_MATRA: dict[str, str] = dict(zip("आइईउऊऋॠऌॡएऐओऔ", "ािीुूृॄॢॣेैोौ"))
_MATRA_TO_SVAR: dict[str, str] = {m: s for s, m in _SVAR_TO_MATRA.items()}


def svar_type(c: str) -> SvarType | None:
    """Length of a vowel or vowel sign; None for anything else."""
    return _SVAR_TYPES.get(c)


def hrasva_to_dirgha(c: str) -> str | None:
    """Long counterpart of a short vowel or vowel sign (इ→ई, ि→ी)."""
    return _HRASVA_TO_DIRGHA.get(c)


def dirgha_to_hrasva(c: str) -> str | None:
    """Short counterpart of a long vowel or vowel sign (ई→इ, ी→ि)."""
    return _DIRGHA_TO_HRASVA.get(c)


def svar_to_matra(c: str) -> str | None:
    """Vowel sign of a vowel; None for अ and non-vowels."""
    return _SVAR_TO_MATRA.get(c)


def matra_to_svar(c: str) -> str | None:
    """Independent vowel of a vowel sign."""
    return _MATRA_TO_SVAR.get(c)