import pytest
from hypothesis import given
from hypothesis import strategies as st

from varnavinyas.normalize import normalize


def test_already_nfc():
    assert normalize("नमस्ते") == "नमस्ते"


def test_idempotence():
    once = normalize("काठमाडौं नेपाल")
    assert normalize(once) == once


def test_empty():
    assert normalize("") == ""


def test_ascii_passthrough():
    assert normalize("hello") == "hello"


def test_composes_nnna():
    assert normalize("\u0928\u093C") == "\u0929"


def test_excluded_nukta_form_decomposes():
    assert normalize("\u0958") == "\u0915\u093C"


@pytest.mark.parametrize("text", ["नमस्ते", "काठमाडौं", "प्रशासन", "विज्ञान", ""])
def test_idempotent_basic(text):
    once = normalize(text)
    assert normalize(once) == once


@given(st.text(alphabet=st.characters(min_codepoint=0x0900, max_codepoint=0x097F), max_size=50))
def test_idempotent_property(text):
    once = normalize(text)
    assert normalize(once) == once