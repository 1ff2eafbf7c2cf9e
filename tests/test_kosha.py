import pytest

from varnavinyas.kosha import Kosha, KoshaError, WordEntry
from varnavinyas.origin_tag import Origin

WORDS = "\n".join(sorted(["नेपाल", "भाषा", "देश", "सरकार", "शासन", "किताब"])) + "\n"
HEADWORDS = (
    "नेपाल\n"
    "नेपाले\tवि. [नेपाल+ए]\n"
    "किताब\tना. [अ.]\n"
    "शासन\t[सं.] ना.\n"
    "भाषा\tना. [सं. भाषा]\n"
    "\tना.\n"
    "\n"
)


@pytest.fixture
def lexicon():
    return Kosha.from_data(WORDS, HEADWORDS)


def test_single_word_lexicon_is_scoped():
    word = "टेस्टशब्दनिश्चित"
    custom = Kosha.from_data(f"{word}\n", f"{word}\tना.\n")
    assert custom.contains(word)
    assert not Kosha.from_data(WORDS, HEADWORDS).contains(word)


def test_separate_lexicons_are_independent():
    first = Kosha.from_data("पहिलोनमूना\n", "पहिलोनमूना\tना.\n")
    second = Kosha.from_data("दोस्रोनमूना\n", "दोस्रोनमूना\tना.\n")
    assert first.contains("पहिलोनमूना")
    assert not first.contains("दोस्रोनमूना")
    assert second.contains("दोस्रोनमूना")
    assert not second.contains("पहिलोनमूना")


def test_word_count(lexicon):
    assert lexicon.word_count() == 6


def test_common_words_present(lexicon):
    for word in ["नेपाल", "भाषा", "देश", "सरकार", "शासन"]:
        assert lexicon.contains(word)
        assert word in lexicon


def test_unknown_words(lexicon):
    assert not lexicon.contains("xyzxyzxyz")
    assert not lexicon.contains("ज्ञानज्ञानज्ञान")
    assert lexicon.lookup("xyzxyzxyz") is None


def test_headword_lookup_returns_pos(lexicon):
    assert lexicon.lookup("नेपाले") == WordEntry("नेपाले", "वि. [नेपाल+ए]")
    assert lexicon.lookup("नेपाल") == WordEntry("नेपाल", "")


def test_headword_count_skips_empty_words(lexicon):
    assert lexicon.headword_count() == 5


def test_origin_of(lexicon):
    assert lexicon.origin_of("किताब") is Origin.AAGANTUK
    assert lexicon.origin_of("शासन") is Origin.TATSAM
    assert lexicon.origin_of("भाषा") is Origin.TADBHAV
    assert lexicon.origin_of("नेपाले") is None
    assert lexicon.origin_of("देश") is None


def test_source_language_of(lexicon):
    assert lexicon.source_language_of("किताब") == "अरबी"
    assert lexicon.source_language_of("शासन") == "संस्कृत"
    assert lexicon.source_language_of("नेपाल") is None


def test_unsorted_words_raise():
    with pytest.raises(KoshaError):
        Kosha.from_data("ख\nक\n", "")


def test_duplicate_words_counted_once():
    assert Kosha.from_data("क\nक\nख\n", "").word_count() == 2


def test_crlf_lines_and_blank_lines():
    custom = Kosha.from_data("क\r\n\r\nख\r\n", "क\tना. [फा.]\r\n")
    assert custom.word_count() == 2
    assert custom.contains("ख")
    assert custom.lookup("क") == WordEntry("क", "ना. [फा.]")
    assert custom.source_language_of("क") == "फारसी"


def test_headword_whitespace_trimmed():
    custom = Kosha.from_data("", "  क  \t  वि.  \n")
    assert custom.lookup("क") == WordEntry("क", "वि.")
    assert custom.word_count() == 0