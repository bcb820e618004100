"""Structural split of protected text into paragraphs of sentences."""

from typing import List

from ..core.sentinel import TERMINATORS


def split_sentences(text: str) -> List[List[str]]:
    """
    Split protected text on terminators and newlines.

    Every '.', '?' or '!' still present ends a sentence; every newline ends a
    paragraph. Sentences are returned raw, without any repair.

    Args:
        text: Output of protect()

    Returns:
        List[List[str]]: Paragraphs, each a list of raw sentences
    """
    paragraphs: List[List[str]] = []
    paragraph: List[str] = []
    sentence: List[str] = []

    for char in text:
        if char == "\n":
            if sentence:
                paragraph.append("".join(sentence))
                sentence = []
            if paragraph:
                paragraphs.append(paragraph)
                paragraph = []
            continue

        sentence.append(char)
        if char in TERMINATORS:
            paragraph.append("".join(sentence))
            sentence = []

    if sentence:
        paragraph.append("".join(sentence))
    if paragraph:
        paragraphs.append(paragraph)

    return paragraphs
