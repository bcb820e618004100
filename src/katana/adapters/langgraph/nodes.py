"""LangGraph node factories for Katana integration."""

from langchain_core.runnables import RunnableLambda
from ...core.abc import Segmenter
from ...runtime.preparer import TextPreparer
from .state_keys import *


def make_segment_node(segmenter: Segmenter, text_key: str = DOCUMENT_TEXT):
    """
    Create a LangGraph node that splits plain text into sentences.

    Args:
        segmenter: Segmenter instance, e.g. SentenceSegmenter
        text_key: State key containing the text to segment

    Returns:
        RunnableLambda: Node that adds paragraphs and sentences to state
    """
    def _segment(state):
        paragraphs = segmenter.cut(state.get(text_key, ""))
        return {
            PARAGRAPHS: paragraphs,
            SENTENCES: [s for paragraph in paragraphs for s in paragraph],
        }

    return RunnableLambda(_segment)


def make_prepare_node(preparer: TextPreparer, html_key: str = DOCUMENT_HTML):
    """
    Create a LangGraph node that turns HTML into prepared text.

    Args:
        preparer: Configured TextPreparer instance
        html_key: State key containing the HTML to prepare

    Returns:
        RunnableLambda: Node that adds prepared text, paragraphs and sentences
    """
    def _prepare(state):
        result = preparer.prepare(state.get(html_key, ""))
        return {
            PREPARED_TEXT: result.text,
            PARAGRAPHS: result.paragraphs,
            SENTENCES: result.segmentation.sentences,
        }

    return RunnableLambda(_prepare)
