"""Nepali lexicon: word validation and headword metadata lookup."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from varnavinyas.origin_tag import Origin, parse_origin_tag, parse_source_language


class KoshaError(ValueError):
    """Raised when a lexicon cannot be built from its data."""


@dataclass(frozen=True)
class WordEntry:
    """Metadata of a headword."""

    word: str
    pos: str
    """Part-of-speech and origin tags, e.g. ``"[सं.] ना."``."""


def _lines(data: str) -> list[str]:
    lines = data.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _word_set(words: Iterable[str]) -> frozenset[str]:
    result: list[str] = []
    for word in words:
        if result and word < result[-1]:
            raise KoshaError(f"word list is not sorted: {word!r} follows {result[-1]!r}")
        if not result or word != result[-1]:
            result.append(word)
    return frozenset(result)


def _parse_headword(line: str) -> WordEntry | None:
    word, _, pos = line.partition("\t")
    word = word.strip()
    if not word:
        return None
    return WordEntry(word, pos.strip())


class Kosha:
    """A lexicon of word forms with metadata for its headwords."""

    def __init__(self, words: Iterable[str], headwords: Iterable[WordEntry]) -> None:
        """Build from byte-sorted word forms and headword entries.

        Raises KoshaError when the word forms are not in sorted order.
        """
        self._words = _word_set(words)
        self._headwords = sorted(headwords, key=lambda entry: entry.word)
        self._index: dict[str, WordEntry] = {}
        for entry in self._headwords:
            self._index.setdefault(entry.word, entry)

    @classmethod
    def from_data(cls, words_data: str, headwords_data: str) -> Kosha:
        """Build from a word list (one per line) and tab-separated headword data."""
        words = (line for line in _lines(words_data) if line)
        headwords = filter(None, map(_parse_headword, _lines(headwords_data)))
        return cls(words, headwords)

    def contains(self, word: str) -> bool:
        """True if the word form is in the lexicon."""
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def lookup(self, word: str) -> WordEntry | None:
        """Metadata of a headword, or None if it is not a headword."""
        return self._index.get(word)

    def word_count(self) -> int:
        """Number of word forms."""
        return len(self._words)

    def headword_count(self) -> int:
        """Number of headword entries."""
        return len(self._headwords)

    def origin_of(self, word: str) -> Origin | None:
        """Origin given by the headword's first tag, if any."""
        entry = self.lookup(word)
        return parse_origin_tag(entry.pos) if entry else None

    def source_language_of(self, word: str) -> str | None:
        """Source language given by the headword's first tag, if any."""
        entry = self.lookup(word)
        return parse_source_language(entry.pos) if entry else None