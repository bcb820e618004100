"""Repair pass: decode sentinel markers and restore punctuation order."""

from typing import List

from ..core.sentinel import (
    CLOSING_MARKERS,
    PERIOD_MARKERS,
    closing_marker_pattern,
    unescape_reserved,
)

_PERIOD_TABLE = str.maketrans({marker.value: "." for marker in PERIOD_MARKERS})

# Stacked markers sit left to right in protection order, so the latest
# marker is next to the terminator and must be decoded first.
_CLOSING_REPAIRS = tuple(
    (closing_marker_pattern(marker), before + r"\g<term>" + after)
    for marker, (before, after) in reversed(list(CLOSING_MARKERS.items()))
)


def repair_sentence(sentence: str) -> str:
    """
    Restore the original punctuation of one raw sentence and trim it.

    Args:
        sentence: Raw sentence produced by split_sentences()

    Returns:
        str: Repaired sentence, possibly empty
    """
    sentence = sentence.translate(_PERIOD_TABLE)
    for pattern, replacement in _CLOSING_REPAIRS:
        sentence = pattern.sub(replacement, sentence)
    return unescape_reserved(sentence).strip()


def repair_sentences(paragraphs: List[List[str]]) -> List[List[str]]:
    """
    Repair every sentence and drop the ones left empty.

    Paragraphs without surviving sentences are dropped as well.

    Args:
        paragraphs: Output of split_sentences()

    Returns:
        List[List[str]]: Final paragraphs of sentences
    """
    repaired = []
    for paragraph in paragraphs:
        sentences = [s for s in (repair_sentence(raw) for raw in paragraph) if s]
        if sentences:
            repaired.append(sentences)
    return repaired
