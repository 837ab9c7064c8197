from pathlib import Path

import pytest

from readability_helper.pipeline import default_scorer
from readability_helper.services import (
    TextstatSyllableCounter,
    Vocabulary,
    WordListVocabulary,
    load_textstat_word_list,
    load_word_list,
)
from readability_helper.services import vocabulary as vocabulary_module
from readability_helper.services.vocabulary import parse_word_list


def test_lookup_is_exact_and_case_sensitive():
    vocabulary = WordListVocabulary({"Dale-Chall": {"cat"}})

    assert vocabulary.names == ["dale-chall"]
    assert vocabulary.is_familiar("cat", "dale-chall")
    assert vocabulary.is_familiar("cat", Vocabulary.DALE_CHALL)
    assert not vocabulary.is_familiar("Cat", "dale-chall")
    assert not vocabulary.is_familiar("cat", "spache")
    assert not vocabulary.is_familiar("cat", "klingon")


def test_parse_word_list_skips_comments_and_blanks():
    words = parse_word_list("# header\n\nthe\n  cat  \n#dog\nsat\n")
    assert words == frozenset({"the", "cat", "sat"})


def test_missing_word_list_is_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    with caplog.at_level("WARNING"):
        words = load_word_list(tmp_path / "missing.txt")
    assert words == frozenset()
    assert "does not exist" in caplog.text


def test_from_paths_prefers_configured_files(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    calls = []

    def fake_textstat_list():
        calls.append(True)
        return frozenset({"bundled"})

    monkeypatch.setattr(vocabulary_module, "load_textstat_word_list", fake_textstat_list)
    spache = tmp_path / "spache.txt"
    spache.write_text("Cats\nrun\n", encoding="utf-8")

    vocabulary = WordListVocabulary.from_paths({"spache": str(spache)})

    assert vocabulary.is_familiar("Cats", "spache")
    assert not vocabulary.is_familiar("bundled", "spache")
    assert vocabulary.is_familiar("bundled", "dale-chall")
    assert len(calls) == 1


def test_from_paths_shares_the_bundled_list(monkeypatch: pytest.MonkeyPatch):
    calls = []

    def fake_textstat_list():
        calls.append(True)
        return frozenset({"bundled"})

    monkeypatch.setattr(vocabulary_module, "load_textstat_word_list", fake_textstat_list)
    vocabulary = WordListVocabulary.from_paths()

    assert vocabulary.names == ["dale-chall", "spache"]
    assert vocabulary.is_familiar("bundled", "spache")
    assert len(calls) == 1


def test_textstat_syllable_counter():
    counter = TextstatSyllableCounter()
    assert counter.count("") == 0
    assert counter.count("The cat sat.") >= 3


def test_bundled_word_list_is_loaded():
    """textstat's own Dale-Chall list backs the default vocabularies."""
    words = load_textstat_word_list()
    assert len(words) > 1000
    assert {"the", "cat", "sat", "on", "mat"} <= words

    scorer = default_scorer()
    assert scorer.difficult_word_count("the cat sat on the mat", "dale-chall") == 0
    assert scorer.difficult_word_count("the cat sat on the mat", "spache") == 0
