import pytest

from varnavinyas.cli import describe_akshar, main


def test_akshar_prints_syllables(capsys):
    assert main(["akshar", "नमस्ते"]) == 0
    out = capsys.readouterr().out
    assert "Aksharas" in out
    assert "Characters:" in out


def test_akshar_shows_unicode_codepoints(capsys):
    assert main(["akshar", "क"]) == 0
    out = capsys.readouterr().out
    assert "U+0915" in out
    assert "व्यञ्जन" in out


def test_describe_single_consonant_exact():
    expected = "\n".join(
        [
            "Text: क",
            "Aksharas (1): क",
            "Characters:",
            "  क (U+0915) \u2014 व्यञ्जन (consonant), क-वर्ग",
        ]
    )
    assert describe_akshar("क") == expected


def test_describe_namaste_aksharas_line():
    lines = describe_akshar("नमस्ते").split("\n")
    assert lines[0] == "Text: नमस्ते"
    assert lines[1] == "Aksharas (3): न | मस् | ते"
    assert lines[2] == "Characters:"
    assert len(lines) == 3 + len("नमस्ते")


def test_describe_panchham_marked():
    lines = describe_akshar("म").split("\n")
    assert lines[-1] == "  म (U+092E) \u2014 व्यञ्जन (consonant), प-वर्ग, पञ्चम"


def test_describe_matra_and_halanta():
    lines = describe_akshar("स्ते").split("\n")
    assert "  ् (U+094D) \u2014 हलन्त (virama)" in lines
    assert "  े (U+0947) \u2014 मात्रा (vowel sign)" in lines


def test_describe_non_devanagari():
    lines = describe_akshar("a").split("\n")
    assert lines[1] == "Aksharas (1): a"
    assert lines[-1] == "  a (U+0061) \u2014 non-Devanagari"


def test_describe_empty_text():
    assert describe_akshar("") == "Text: \nAksharas (0): \nCharacters:"


def test_no_args_shows_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    assert "usage" in capsys.readouterr().err.lower()


def test_unknown_command_exits_2():
    with pytest.raises(SystemExit) as exc:
        main(["bogus"])
    assert exc.value.code == 2


def test_akshar_requires_text(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["akshar"])
    assert exc.value.code == 2
    assert "text" in capsys.readouterr().err