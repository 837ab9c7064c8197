import math

import pytest

from readability_helper.formulas import Formula
from readability_helper.scoring import ReadabilityScorer


def test_flesch_document_matches_rounded_formula(scorer: ReadabilityScorer):
    text = "The cat sat. The dog ran."
    syllables = scorer.syllable_count(text)
    expected = math.floor(206.835 - 1.015 * (6 / 2) - 84.6 * (syllables / 6) + 0.5)

    assert scorer.flesch_document(text) == expected
    assert scorer.score_document("flesch", text) == expected


def test_automated_readability_takes_the_ceiling(scorer: ReadabilityScorer):
    assert scorer.automated_readability_document("Hi.") == -6
    assert scorer.automated_readability_sentence("Hi.") == pytest.approx(-6.8)


def test_sentence_variants_score_as_a_single_sentence(scorer: ReadabilityScorer):
    text = "The cat sat. The dog ran."
    assert scorer.flesch_sentence(text) == pytest.approx(206.835 - 1.015 * 6 - 84.6)
    # 0.39 * 6 + 11.8 - 15.59 is -1.45, rounded half up to a whole grade.
    assert scorer.flesch_kincaid_sentence(text) == -1
    assert scorer.flesch_kincaid_sentence("The cat sat on the mat.") == -1


def test_dale_chall_counts_unfamiliar_words(scorer: ReadabilityScorer):
    text = "The cat sat on the mat."
    assert scorer.difficult_word_count(text, "dale-chall") == 1
    # 1 of 6 words unfamiliar, so the 3.6365 offset applies; one decimal place.
    assert scorer.dale_chall_document(text) == pytest.approx(6.6)


def test_vocabulary_lookup_is_case_sensitive(scorer: ReadabilityScorer):
    assert scorer.difficult_word_count("cat Cat CAT", "dale-chall") == 2


def test_unknown_vocabulary_counts_no_difficult_words(scorer: ReadabilityScorer):
    assert scorer.difficult_word_count("Every word is strange", "oxford") == 0


def test_spache_document_uses_real_sentence_count(scorer: ReadabilityScorer):
    text = "Cats run. Dogs sleep."
    # 2 sentences, 4 words, 1 difficult word.
    assert scorer.spache_document(text) == 3
    assert scorer.spache_sentence("Dogs sleep.") == pytest.approx(
        0.659 + 0.121 * 2 + 0.082 * 50
    )


def test_smog_sentence_scales_to_thirty_sentences(scorer: ReadabilityScorer):
    sentence = "Readability is complicated."
    assert scorer.polysyllabic_word_count(sentence) == 2
    assert scorer.smog_sentence(sentence) == pytest.approx(
        3.1291 + 1.0430 * math.sqrt(60)
    )
    assert scorer.smog_document(sentence) == 11


def test_coleman_liau_document(scorer: ReadabilityScorer):
    text = "Readability formulas approximate difficulty."
    # 4 words, 41 characters, 1 sentence.
    expected = 0.0588 * (41 / 4 * 100) - 0.296 * (1 / 4 * 100) - 15.8
    assert scorer.coleman_liau_document(text) == math.floor(expected + 0.5) == 37


def test_degenerate_documents_are_not_finite(scorer: ReadabilityScorer):
    assert math.isnan(scorer.automated_readability_document(""))
    assert not math.isfinite(scorer.coleman_liau_document("..."))
    assert math.isnan(scorer.flesch_document(""))


def test_formula_functions_cover_every_formula(scorer: ReadabilityScorer):
    for formula in Formula:
        functions = scorer.formula_functions(formula.value)
        assert functions.formula is formula
        assert functions.lower_is_easier is (formula is not Formula.FLESCH)
        assert isinstance(functions.document("The cat sat."), float)
        assert isinstance(functions.sentence("The cat sat."), float)


def test_formula_functions_labels(scorer: ReadabilityScorer):
    assert scorer.formula_functions("smog").label == "SMOG Formula"
    assert scorer.formula_functions("flesch").label == "Flesch Reading Ease"
    with pytest.raises(ValueError):
        scorer.formula_functions("lexile")
