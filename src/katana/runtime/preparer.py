"""Preparation pipeline turning HTML into segmented, readable text."""

from typing import Optional

from ..config.schema import PipelineConfig
from ..core.abc import Logger, Meter, Segmenter
from ..core.types import PreparedText, Segmentation
from ..core.util import hash_text
from ..markup.clean import remove_html_tags
from ..markup.markdown import MarkupError, html_to_markdown
from ..segmenters.sentence import SentenceSegmenter


def flatten_lines(text: str) -> str:
    """Strip every line, drop empty ones and join the rest with spaces."""
    lines = (line.strip() for line in text.split("\n"))
    return " ".join(line for line in lines if line)


class TextPreparer:
    """
    Runs markup through rendering, cleaning and sentence segmentation.
    Source line breaks carry no meaning; paragraphs come from the markup.
    """

    def __init__(self, *, config: Optional[PipelineConfig] = None,
                 segmenter: Optional[Segmenter] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize preparer with config and dependencies.

        Args:
            config: Validated pipeline config (defaults apply if None)
            segmenter: Optional segmenter (fallback to SentenceSegmenter)
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.config = config or PipelineConfig()
        self.segmenter = segmenter or SentenceSegmenter()
        self.log = logger
        self.meter = meter

    def to_plain_text(self, html: str) -> str:
        """
        Render and clean markup without segmenting it.

        Raises:
            MarkupError: If the configured parser is not available
        """
        markup = self.config.markup
        try:
            rendered = html_to_markdown(flatten_lines(html),
                                        parser=markup.parser,
                                        fence_code=markup.fence_code)
        except MarkupError as e:
            if self.log:
                self.log.error("Markup rendering failed", error=str(e), parser=markup.parser)
            raise
        return remove_html_tags(rendered, self.config.cleaning)

    def prepare(self, html: str) -> PreparedText:
        """
        Prepare markup for downstream readers.

        Args:
            html: HTML document or fragment

        Returns:
            PreparedText: Cleaned source, segmentation and joined text

        Raises:
            MarkupError: If the configured parser is not available
        """
        source = self.to_plain_text(html)
        segmentation = Segmentation(paragraphs=self.segmenter.cut(source))

        output = self.config.output
        text = output.paragraph_separator.join(
            output.sentence_separator.join(paragraph)
            for paragraph in segmentation.paragraphs
        )

        if self.meter:
            self.meter.inc("katana.documents_prepared")
            self.meter.observe("katana.prepared_length", len(text))
        if self.log:
            self.log.info("text_prepared",
                          html_hash=hash_text(html),
                          paragraphs=segmentation.paragraph_count,
                          sentences=segmentation.sentence_count)

        return PreparedText(source=source, segmentation=segmentation, text=text)


def prepare_text(html: str, config: Optional[PipelineConfig] = None) -> str:
    """
    Convert HTML into segmented plain text.

    Sentences are joined with a space and paragraphs with a blank line
    unless the config says otherwise.

    Args:
        html: HTML document or fragment
        config: Optional pipeline config

    Returns:
        str: Prepared text
    """
    return TextPreparer(config=config).prepare(html).text
