# varnavinyas

Tools for working with Nepali text written in Devanagari:

- character classification (vowels, consonants, vowel signs, virama, marks, numerals, dandas)
- consonant groups (varga), nasal (panchham) detection, voicing
- short/long vowel (hrasva/dirgha) conversion and vowel ↔ vowel-sign mapping
- Unicode NFC normalisation
- splitting text into aksharas (syllable units) with character offsets
- an in-memory lexicon built from your own data, with headword metadata and origin-tag parsing
- a command-line tool that prints the aksharas and character classes of a text

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Characters

`varnavinyas.devanagari.classify` returns a `DevanagariChar` (with `char_type`,
`varga` and `is_panchham`) for every code point in U+0900–U+097F, and `None`
for anything else.

```python
from varnavinyas.devanagari import classify, is_svar, is_vyanjan, is_matra, is_halanta, CharType
from varnavinyas.consonant import (
    varga, varga_position, is_panchham, is_voiced, is_voiceless,
    panchham_of, voiced_counterpart, Varga,
)

classify("क").char_type is CharType.VYANJAN   # True
classify("म").is_panchham                     # True
classify("A")                                 # None — not Devanagari
is_svar("अ")                                  # True
is_matra("ा")                                 # True
is_halanta("्")                               # True

varga("क") is Varga.KA_VARGA                  # True
varga_position("घ")                           # 4
is_voiceless("श")                             # True
is_voiced("ह")                                # True
panchham_of(Varga.TA_VARGA2)                  # "न"
voiced_counterpart("क")                       # "ग"
```

## Vowels

```python
from varnavinyas.vowel import (
    SvarType, svar_type, hrasva_to_dirgha, dirgha_to_hrasva, svar_to_matra, matra_to_svar,
)

svar_type("इ") is SvarType.HRASVA   # True
svar_type("ौ") is SvarType.DIRGHA   # True
hrasva_to_dirgha("इ")               # "ई"
dirgha_to_hrasva("ी")               # "ि"
svar_to_matra("आ")                  # "ा"
matra_to_svar("ौ")                  # "औ"
svar_to_matra("अ")                  # None — the inherent vowel has no sign
```

## Syllables

```python
from varnavinyas.syllable import split_aksharas

[a.text for a in split_aksharas("नमस्ते")]     # ["न", "मस्", "ते"]
[a.text for a in split_aksharas("प्रशासन")]    # ["प्र", "शा", "स", "न"]
[a.text for a in split_aksharas("महत्त्व")]    # ["म", "ह", "त्त्व"]
```

Each `Akshara` carries its `text` and the `start`/`end` character offsets of
that text in the input (`text[a.start:a.end] == a.text`), so joining the texts
always gives back the original string. Non-Devanagari characters each form an
akshara of their own.

## Normalisation

```python
from varnavinyas.normalize import normalize

normalize("काठमाडौं नेपाल")   # NFC form; normalize(normalize(s)) == normalize(s)
```

## Lexicon

A `Kosha` is built from a word list (one word per line, in sorted order) and a
headword table (word, a tab, then its part-of-speech and origin tags):

```python
from varnavinyas.kosha import Kosha

kosha = Kosha.from_data(
    "नेपाल\nसरकार\n",
    "नेपाल\tना.\nसरकार\tना. [फा.]\n",
)
kosha.contains("नेपाल")            # True
"नेपाल" in kosha                   # True
kosha.word_count()                  # 2
kosha.headword_count()              # 2
kosha.lookup("सरकार").pos           # "ना. [फा.]"
kosha.source_language_of("सरकार")   # "फारसी"
kosha.origin_of("सरकार")            # Origin.AAGANTUK
```

A word list that is not in sorted order raises `varnavinyas.kosha.KoshaError`.

The tag parser can also be used on its own. Only the first bracketed tag of a
field is read:

```python
from varnavinyas.origin_tag import Origin, parse_origin_tag, parse_source_language

parse_origin_tag("[सं.] ना.")          # Origin.TATSAM
parse_origin_tag("[सं. दण्ड] ना.")     # Origin.TADBHAV
parse_source_language("ना. [अङ्.]")   # "अङ्ग्रेजी"
parse_origin_tag("ना.")               # None — no origin tag
```

## Command line

```
varnavinyas akshar नमस्ते
```

prints the syllable breakdown followed by one line per character with its code
point, its class, its varga and whether it is a panchham:

```
Text: नमस्ते
Aksharas (3): न | मस् | ते
Characters:
  न (U+0928) — व्यञ्जन (consonant), त-वर्ग, पञ्चम
  ...
```

The same report is available from Python as `varnavinyas.cli.describe_akshar(text)`.
Running `varnavinyas` without a command prints usage and exits with status 2.

## What it does not do

- It does not spell-check or correct text, and has no `check` command.
- It does not transliterate between Devanagari and Latin schemes.
- It ships no word list: a `Kosha` holds only the data you pass to it.