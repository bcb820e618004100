"""Deterministic sentence segmenter with no external dependencies."""

from typing import List, Optional

from ..core.abc import Logger, Meter
from ..core.types import Segmentation
from ..core.util import hash_text
from .protector import protect
from .repair import repair_sentences
from .splitter import split_sentences


def cut(text: str) -> List[List[str]]:
    """
    Split text into paragraphs of sentences.

    Periods in abbreviations, initials, titles, decimal numbers and ellipses
    do not end a sentence. Terminators followed by a closing quote or
    parenthesis keep their original order.

    Args:
        text: Plain text; newlines separate paragraphs

    Returns:
        List[List[str]]: Non-empty paragraphs of trimmed, non-empty sentences
    """
    return repair_sentences(split_sentences(protect(text)))


class SentenceSegmenter:
    """
    Deterministic rule-based sentence segmenter.
    Protects ambiguous periods, splits on the remaining terminators and
    repairs the punctuation afterwards.
    """

    def __init__(self, *, logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize segmenter.

        Args:
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.log = logger
        self.meter = meter

    def analyze(self, text: str) -> Segmentation:
        """
        Segment text and report the result.

        Args:
            text: Input text to segment

        Returns:
            Segmentation: Paragraphs of sentences
        """
        result = Segmentation(paragraphs=cut(text))

        if self.meter:
            self.meter.observe("katana.paragraphs", result.paragraph_count)
            self.meter.observe("katana.sentences", result.sentence_count)
        if self.log:
            self.log.info("segmentation_complete",
                          text_hash=hash_text(text),
                          text_length=len(text),
                          paragraphs=result.paragraph_count,
                          sentences=result.sentence_count)
        return result

    def cut(self, text: str) -> List[List[str]]:
        return self.analyze(text).paragraphs

    def segment(self, text: str) -> List[str]:
        """
        Segment text into a flat list of sentences.

        Args:
            text: Input text to segment

        Returns:
            List[str]: Sentences in input order
        """
        return self.analyze(text).sentences
