"""Sentinel markers used to shield ambiguous punctuation during segmentation."""

import re
from enum import Enum
from typing import Dict, Tuple

# Unicode noncharacters U+FDD0..U+FDEF are reserved for internal use and never
# appear in interchanged text. Every marker is one code point from this block.
RESERVED_FIRST = 0xFDD0
RESERVED_LAST = 0xFDEF

# Reserved code points found in the input are written as ESCAPE + a code point
# from Supplementary Private Use Area-A, so they can never be read as markers.
ESCAPE = chr(RESERVED_LAST)
_ESCAPE_BASE = 0xF0000

TERMINATORS = ".?!"


class Marker(str, Enum):
    """One marker kind per protection rule."""
    COMPOSITE_ABBREVIATION = "\ufdd0"
    SUSPENSION_POINT = "\ufdd1"
    DECIMAL_POINT = "\ufdd2"
    BARE_DECIMAL_POINT = "\ufdd3"
    ACRONYM_PERIOD = "\ufdd4"
    INITIAL_PERIOD = "\ufdd5"
    TITLE_PERIOD = "\ufdd6"
    CLOSE_PAREN = "\ufdd7"
    SINGLE_THEN_DOUBLE_QUOTE = "\ufdd8"
    SINGLE_THEN_CURLY_QUOTE = "\ufdd9"
    CURLY_QUOTE = "\ufdda"
    STRAIGHT_SINGLE_DOUBLE_QUOTE = "\ufddb"
    SINGLE_QUOTE = "\ufddc"
    DOUBLE_QUOTE = "\ufddd"


# Markers standing in for a literal period.
PERIOD_MARKERS = (
    Marker.COMPOSITE_ABBREVIATION,
    Marker.SUSPENSION_POINT,
    Marker.DECIMAL_POINT,
    Marker.BARE_DECIMAL_POINT,
    Marker.ACRONYM_PERIOD,
    Marker.INITIAL_PERIOD,
    Marker.TITLE_PERIOD,
)

# Markers standing in for closing glyphs moved in front of a terminator.
# Value is (text before the terminator, text after the terminator).
CLOSING_MARKERS: Dict[Marker, Tuple[str, str]] = {
    Marker.CLOSE_PAREN: ("", ")"),
    Marker.SINGLE_THEN_DOUBLE_QUOTE: ("'", '"'),
    Marker.SINGLE_THEN_CURLY_QUOTE: ("'", "”"),
    Marker.CURLY_QUOTE: ("", "”"),
    Marker.STRAIGHT_SINGLE_DOUBLE_QUOTE: ("", "'\""),
    Marker.SINGLE_QUOTE: ("", "'"),
    Marker.DOUBLE_QUOTE: ("", '"'),
}

_RESERVED_RE = re.compile("[%s-%s]" % (chr(RESERVED_FIRST), chr(RESERVED_LAST)))
_ESCAPED_RE = re.compile(re.escape(ESCAPE) + "(.)", re.DOTALL)


def escape_reserved(text: str) -> str:
    """
    Escape reserved code points so they survive protection untouched.

    Args:
        text: Raw input text

    Returns:
        str: Text in which no reserved code point appears unescaped
    """
    return _RESERVED_RE.sub(
        lambda m: ESCAPE + chr(_ESCAPE_BASE + ord(m.group(0)) - RESERVED_FIRST),
        text,
    )


def unescape_reserved(text: str) -> str:
    """Reverse escape_reserved()."""
    return _ESCAPED_RE.sub(
        lambda m: chr(RESERVED_FIRST + ord(m.group(1)) - _ESCAPE_BASE),
        text,
    )


def closing_marker_pattern(marker: Marker) -> "re.Pattern[str]":
    """Pattern matching a closing marker together with the terminator after it."""
    return re.compile(re.escape(marker.value) + "(?P<term>[.?!])")
