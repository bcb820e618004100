"""Test end-to-end sentence segmentation."""

import json

import pytest

from katana import cut
from katana.core.types import Segmentation
from katana.core.util import safe_json
from katana.segmenters.sentence import SentenceSegmenter


class TestCut:
    """Test the cut() entry point."""

    def test_reference_passage(self, reference_text, reference_sentences):
        """Test that the reference passage splits into exactly nine sentences."""
        result = cut(reference_text)

        assert result == [reference_sentences]
        assert len(result[0]) == 9

    def test_only_whitespace_changes(self, reference_text):
        """Test that segmentation only moves whitespace around."""
        sentences = cut(reference_text)[0]

        def squeeze(s):
            return "".join(s.split())

        assert squeeze("".join(sentences)) == squeeze(reference_text)

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", " \n \t\n"])
    def test_empty_input(self, text):
        assert cut(text) == []

    def test_text_without_terminators(self):
        assert cut("  just some words  ") == [["just some words"]]

    def test_paragraphs_follow_newlines(self):
        text = "First one. Second one.\nNew paragraph here.\n\n\nLast"
        assert cut(text) == [
            ["First one.", "Second one."],
            ["New paragraph here."],
            ["Last"],
        ]

    def test_decimal_numbers_are_not_split(self):
        assert cut("It took about 1.5 minutes to finish.") == [
            ["It took about 1.5 minutes to finish."]
        ]

    def test_initials_and_titles_do_not_split(self):
        text = "the environmentalist Dr. C. Jeung of China's growth"
        assert cut(text) == [[text]]

    def test_titles(self):
        assert cut("Mrs. Smith met Mr. Jones today.") == [["Mrs. Smith met Mr. Jones today."]]

    def test_acronyms(self):
        assert cut("She moved to the U.S. last year. Then back.") == [
            ["She moved to the U.S. last year.", "Then back."]
        ]

    def test_ellipsis_is_kept_verbatim(self):
        result = cut("Wait... what happened?")

        assert result == [["Wait...", "what happened?"]]
        assert "." not in [s for p in result for s in p]

    def test_stuck_ellipsis(self):
        assert cut("Wait...what") == [["Wait...", "what"]]

    def test_composite_abbreviation(self):
        assert cut("This was shown by Smith et al.. The end.") == [
            ["This was shown by Smith et al..", "The end."]
        ]

    def test_parenthetical_sentence(self):
        text = "(This is another sentence in parens.)"
        assert cut(text) == [[text]]

    def test_parenthetical_after_sentence(self):
        assert cut("It rained. (Again!) We stayed in.") == [
            ["It rained.", "(Again!)", "We stayed in."]
        ]

    def test_single_quote_inside_double_quote(self):
        text = "Others yet say: \"Should we be scared about these 'protests'?\""
        result = cut(text)

        assert result == [[text]]
        assert result[0][0].endswith("'?\"")

    def test_terminator_then_single_then_double_quote(self):
        assert cut("He wrote: \"She said 'stop.'\" Then left.") == [
            ["He wrote: \"She said 'stop.'\"", "Then left."]
        ]

    def test_single_quote_closing(self):
        assert cut("She said 'stop.' Then left.") == [["She said 'stop.'", "Then left."]]

    def test_curly_quotes(self):
        assert cut("“He said 'no'.” Fine.") == [["“He said 'no'.”", "Fine."]]

    def test_opening_quote_stays_with_its_sentence(self):
        assert cut('He left. "Hi," she said.') == [["He left.", '"Hi," she said.']]

    def test_paren_then_quote(self):
        assert cut('He said (quoted.)" Then more.') == [
            ['He said (quoted.)"', "Then more."]
        ]

    def test_paren_after_closing_quote_starts_next_sentence(self):
        assert cut('He said "hi.") Then more.') == [
            ['He said "hi."', ") Then more."]
        ]

    def test_reserved_characters_survive(self):
        assert cut("Keep \ufdd5 here. Next.") == [["Keep \ufdd5 here.", "Next."]]

    def test_sentences_are_never_empty(self, reference_text):
        text = reference_text + "\n \n...\n!?\n" + reference_text
        for paragraph in cut(text):
            assert paragraph
            for sentence in paragraph:
                assert sentence and sentence == sentence.strip()


class TestSentenceSegmenter:
    """Test the SentenceSegmenter class."""

    def test_segment_is_flat(self):
        segmenter = SentenceSegmenter()
        assert segmenter.segment("One day. Two days.\nThree days.") == [
            "One day.", "Two days.", "Three days."
        ]

    def test_cut_matches_function(self, reference_text):
        assert SentenceSegmenter().cut(reference_text) == cut(reference_text)

    def test_analyze(self):
        result = SentenceSegmenter().analyze("One day. Two days.\nThree days.")

        assert isinstance(result, Segmentation)
        assert result.paragraph_count == 2
        assert result.sentence_count == 3
        assert result.sentences == ["One day.", "Two days.", "Three days."]

    def test_logging_and_metrics(self, test_logger, test_meter):
        segmenter = SentenceSegmenter(logger=test_logger, meter=test_meter)
        segmenter.cut("One day. Two days.")

        level, msg, kv = test_logger.messages[-1]
        assert level == "info"
        assert msg == "segmentation_complete"
        assert kv["sentences"] == 2
        assert kv["paragraphs"] == 1
        assert len(kv["text_hash"]) == 16
        assert ("katana.sentences", 2) in test_meter.observations

    def test_segmentation_serializes(self):
        result = SentenceSegmenter().analyze("One day. Two days.")
        assert json.loads(safe_json(result)) == {"paragraphs": [["One day.", "Two days."]]}
