"""Markup-to-text cleaning applied before sentence segmentation."""

import html
import re
from typing import Mapping, Optional

from ..config.schema import CleaningCfg

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_HEADING_RE = re.compile(r"<h([1-6])(?:\s[^>]*)?>(.*?)</h\1\s*>", re.DOTALL | re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")
_SPACES_RE = re.compile(r" {2,}")
_BLANK_LINE_RE = re.compile(r"\n\s*?\n")
_FOOTNOTE_RE = re.compile(r"\s?\[[0-9]+\]")
_NEWLINES_RE = re.compile(r"\n{3,}")

# Lines that only carry a footnote back reference, e.g. "^ Smith 2004"
FOOTNOTE_BACKREF_PREFIX = "^ "


def strip_comments(text: str) -> str:
    return _COMMENT_RE.sub("", text)


def unwrap_headings(text: str) -> str:
    """Replace heading elements by their content followed by a blank line."""
    return _HEADING_RE.sub(lambda m: m.group(2) + "\n\n", text)


def unescape_entities(text: str) -> str:
    """Decode HTML character references; non-breaking spaces become spaces."""
    return html.unescape(text).replace("\xa0", " ")


def strip_tags(text: str) -> str:
    return _TAG_RE.sub(" ", text)


def collapse_spaces(text: str) -> str:
    return _SPACES_RE.sub(" ", text)


def normalize_abbreviations(text: str, abbreviations: Mapping[str, str]) -> str:
    """
    Fold lowercase abbreviations into forms without periods.

    Only occurrences starting at a word boundary are replaced, so "first."
    is not mistaken for "st.".

    Args:
        text: Plain text
        abbreviations: Mapping of abbreviation to replacement

    Returns:
        str: Text with abbreviations replaced
    """
    for abbreviation, replacement in abbreviations.items():
        pattern = r"(?<![\w.])" + re.escape(abbreviation)
        text = re.sub(pattern, lambda _m, r=replacement: r, text)
    return text


def collapse_blank_lines(text: str) -> str:
    return _BLANK_LINE_RE.sub("\n\n", text)


def strip_footnotes(text: str) -> str:
    """Remove bracketed numeric references such as [12]."""
    return _FOOTNOTE_RE.sub("", text)


def trim_lines(text: str) -> str:
    lines = (line.strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if not line.startswith(FOOTNOTE_BACKREF_PREFIX))


def collapse_newlines(text: str) -> str:
    return _NEWLINES_RE.sub("\n\n", text)


def remove_html_tags(text: str, cleaning: Optional[CleaningCfg] = None) -> str:
    """
    Turn markup into plain text ready for segmentation.

    Steps run in a fixed order: comments, headings, tags, entities, spaces,
    abbreviations, blank lines, footnotes, lines, newlines.

    Args:
        text: Markup or markdown text
        cleaning: Optional cleaning configuration (defaults apply if None)

    Returns:
        str: Plain text whose paragraphs are separated by blank lines
    """
    cleaning = cleaning or CleaningCfg()

    if cleaning.strip_comments:
        text = strip_comments(text)
    if cleaning.unwrap_headings:
        text = unwrap_headings(text)
    # tags first, so escaped angle brackets decode to text and stay
    text = strip_tags(text)
    text = unescape_entities(text)
    text = collapse_spaces(text)
    if cleaning.normalize_abbreviations:
        text = normalize_abbreviations(text, cleaning.abbreviations)
    text = collapse_blank_lines(text)
    if cleaning.strip_footnotes:
        text = strip_footnotes(text)
    text = trim_lines(text)
    return collapse_newlines(text)
