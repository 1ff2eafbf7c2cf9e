"""Nepali orthography toolkit: Devanagari characters, aksharas and lexicon lookup."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "consonant",
    "devanagari",
    "kosha",
    "normalize",
    "origin_tag",
    "syllable",
    "vowel",
]