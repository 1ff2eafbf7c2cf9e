"""Command-line interface: analysis of Devanagari characters and syllables."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from varnavinyas.consonant import Varga
from varnavinyas.devanagari import CharType, classify
from varnavinyas.syllable import split_aksharas

_CHAR_TYPE_LABELS: dict[CharType, str] = {
    CharType.SVAR: "स्वर (vowel)",
    CharType.VYANJAN: "व्यञ्जन (consonant)",
    CharType.MATRA: "मात्रा (vowel sign)",
    CharType.HALANTA: "हलन्त (virama)",
    CharType.CHANDRABINDU: "चन्द्रबिन्दु",
    CharType.SHIRBINDU: "शिरबिन्दु (anusvara)",
    CharType.VISARGA: "विसर्ग",
    CharType.NUKTA: "नुक्ता",
    CharType.AVAGRAHA: "अवग्रह",
    CharType.NUMERAL: "अंक (numeral)",
    CharType.DANDA: "दण्ड (punctuation)",
    CharType.OTHER_MARK: "चिह्न (mark)",
}

_VARGA_LABELS: dict[Varga, str] = {
    Varga.KA_VARGA: "क-वर्ग",
    Varga.CHA_VARGA: "च-वर्ग",
    Varga.TA_VARGA: "ट-वर्ग",
    Varga.TA_VARGA2: "त-वर्ग",
    Varga.PA_VARGA: "प-वर्ग",
    Varga.ANTASTHA: "अन्तस्थ",
    Varga.USHMA: "ऊष्म",
    Varga.OTHER: "अन्य",
}


def _describe_char(c: str) -> str:
    head = f"  {c} (U+{ord(c):04X}) \u2014 "
    info = classify(c)
    if info is None:
        return head + "non-Devanagari"
    parts = [head + _CHAR_TYPE_LABELS[info.char_type]]
    if info.varga is not None:
        parts.append(f", {_VARGA_LABELS[info.varga]}")
    if info.is_panchham:
        parts.append(", पञ्चम")
    return "".join(parts)


def describe_akshar(text: str) -> str:
    """Report the aksharas of the text and a classification of each character."""
    aksharas = split_aksharas(text)
    lines = [
        f"Text: {text}",
        f"Aksharas ({len(aksharas)}): {' | '.join(a.text for a in aksharas)}",
        "Characters:",
    ]
    lines.extend(_describe_char(c) for c in text)
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="varnavinyas", description="Nepali orthography toolkit"
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True
    akshar = commands.add_parser(
        "akshar", help="Analyze Devanagari characters and syllables"
    )
    akshar.add_argument("text", help="Text to analyze")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    args = _build_parser().parse_args(argv)
    if args.command == "akshar":
        print(describe_akshar(args.text))
    return 0