from readability_helper.markup import strip_markdown
from readability_helper.models import Seam, SeamLookup
from readability_helper.seams import SeamFinder, build_seams
from readability_helper.segmentation import split_sentences


def is_subsequence(needle: str, haystack: str) -> bool:
    remaining = iter(haystack)
    return all(char in remaining for char in needle)


def test_bold_markers_become_two_seams():
    finder = SeamFinder("a**b**c", "abc")

    assert finder.seams == (Seam(1, 2), Seam(2, 2))
    assert finder.lookup(1, 1) == SeamLookup(3, 1)
    assert finder.lookup(0, 3) == SeamLookup(0, 7)


def test_identical_texts_have_no_seams():
    text = "Nothing to strip here."
    finder = SeamFinder(text, text)

    assert finder.seams == ()
    assert finder.is_aligned
    for offset in range(len(text)):
        for length in range(1, len(text) - offset + 1):
            assert finder.lookup(offset, length) == SeamLookup(offset, length)


def test_leading_deletion_shifts_start():
    finder = SeamFinder("# Title", "Title")

    assert finder.seams == (Seam(0, 2),)
    assert finder.lookup(0, 5) == SeamLookup(2, 5)


def test_trailing_deletion_records_no_seam():
    seams, matched = build_seams("abc**", "abc")
    assert seams == []
    assert matched == 3


def test_range_spanning_a_seam_is_widened():
    original = "See [the docs](http://x.io) now."
    stripped = "See the docs now."
    finder = SeamFinder(original, stripped)

    span = finder.lookup(0, len(stripped))
    assert original[span.start : span.start + span.length] == original

    docs = stripped.index("docs")
    span = finder.lookup(docs, 4)
    assert original[span.start : span.start + span.length] == "docs"


def test_lookup_round_trips_markdown_sentences():
    original = (
        "# Heading\n\n"
        "Some **bold** words and a [link](https://example.com).\n\n"
        "- a list item with `code`\n"
        "> quoted *emphasis* here!\n"
    )
    stripped = strip_markdown(original)
    finder = SeamFinder(original, stripped)
    assert finder.is_aligned

    for sentence in split_sentences(stripped):
        offset, length = sentence.offset, len(sentence.text)
        span = finder.lookup(offset, length)
        mapped = original[span.start : span.start + span.length]
        expected = stripped[offset : offset + length]
        assert mapped[0] == expected[0]
        assert mapped[-1] == expected[-1]
        assert is_subsequence(expected, mapped)


def test_non_subsequence_is_detectable():
    finder = SeamFinder("abc", "abx")
    assert not finder.is_aligned
    assert SeamFinder("abc", "").is_aligned
