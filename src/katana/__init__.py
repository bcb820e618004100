"""
Katana - Sentence and paragraph segmentation for prose and HTML.

Ambiguous periods (abbreviations, initials, decimals, ellipses, titles) are
protected before splitting, so sentence boundaries come out right.
"""

__version__ = "0.1.0"

from .segmenters.sentence import SentenceSegmenter, cut
from .runtime.preparer import TextPreparer, prepare_text

__all__ = ["SentenceSegmenter", "TextPreparer", "cut", "prepare_text"]
