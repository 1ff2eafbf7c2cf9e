"""Segmentation of text into akshara (syllable) units."""

from __future__ import annotations

from dataclasses import dataclass

from varnavinyas.devanagari import CharType, classify

_TRAILING_SIGNS = frozenset({CharType.SHIRBINDU, CharType.CHANDRABINDU, CharType.VISARGA})


@dataclass(frozen=True)
class Akshara:
    """A syllable unit and its character offsets in the source text."""

    text: str
    start: int
    end: int


def _type_at(text: str, index: int) -> CharType | None:
    if index >= len(text):
        return None
    info = classify(text[index])
    return info.char_type if info is not None else None


def _skip_trailing_signs(text: str, index: int) -> int:
    while _type_at(text, index) in _TRAILING_SIGNS:
        index += 1
    return index


def _consonant_end(text: str, index: int) -> int:
    """End of an akshara whose initial consonant ends just before ``index``."""
    # Onset cluster: halanta + consonant chains such as प्र or त्त्व.
    while _type_at(text, index) is CharType.HALANTA:
        if _type_at(text, index + 1) is CharType.VYANJAN:
            index += 2
        else:
            index += 1  # word-final virama
            break

    if _type_at(text, index) is CharType.MATRA:
        index += 1
    if _type_at(text, index) is CharType.NUKTA:
        index += 1

    # Coda: absorb C + halanta when the following consonant carries its own
    # vowel rather than continuing a longer conjunct chain.
    while (
        _type_at(text, index) is CharType.VYANJAN
        and _type_at(text, index + 1) is CharType.HALANTA
        and _type_at(text, index + 2) is CharType.VYANJAN
    ):
        if _type_at(text, index + 3) is CharType.HALANTA:
            break
        index += 2

    return _skip_trailing_signs(text, index)


def split_aksharas(text: str) -> list[Akshara]:
    """Split text into aksharas.

    A consonant with its conjuncts, vowel sign and coda forms one akshara;
    a standalone vowel forms one; anusvara, chandrabindu and visarga join
    the preceding akshara. Any other character stands alone. Offsets are
    character indices, so ``text[a.start:a.end] == a.text``.
    """
    aksharas: list[Akshara] = []
    index = 0
    while index < len(text):
        kind = _type_at(text, index)
        if kind is CharType.VYANJAN:
            end = _consonant_end(text, index + 1)
        elif kind is CharType.SVAR:
            end = _skip_trailing_signs(text, index + 1)
        elif kind in _TRAILING_SIGNS and aksharas:
            last = aksharas[-1]
            aksharas[-1] = Akshara(text[last.start : index + 1], last.start, index + 1)
            index += 1
            continue
        else:
            end = index + 1
        aksharas.append(Akshara(text[index:end], index, end))
        index = end
    return aksharas