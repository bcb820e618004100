"""Result structures for Katana operations."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Segmentation:
    """Paragraphs of sentences produced by a segmenter."""
    paragraphs: List[List[str]] = field(default_factory=list)

    @property
    def sentences(self) -> List[str]:
        """All sentences, flattened in reading order."""
        return [sentence for paragraph in self.paragraphs for sentence in paragraph]

    @property
    def paragraph_count(self) -> int:
        return len(self.paragraphs)

    @property
    def sentence_count(self) -> int:
        return sum(len(paragraph) for paragraph in self.paragraphs)


@dataclass
class PreparedText:
    """Result of running markup through the preparation pipeline."""
    source: str                    # Cleaned plain text handed to the segmenter
    segmentation: Segmentation
    text: str                      # Sentences and paragraphs joined for output

    @property
    def paragraphs(self) -> List[List[str]]:
        return self.segmentation.paragraphs
