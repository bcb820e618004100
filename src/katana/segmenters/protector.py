"""Protection pass: shield ambiguous periods before sentences are split."""

import re
from dataclasses import dataclass
from typing import Callable, Tuple, Union

from ..core.sentinel import Marker, escape_reserved

Replacement = Union[str, Callable[[re.Match], str]]


@dataclass(frozen=True)
class ProtectionRule:
    """A named substitution applied to the output of the previous rule."""
    name: str
    pattern: re.Pattern
    replacement: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _mark_periods(marker: Marker) -> Callable[[re.Match], str]:
    """Replacement that swaps every period in the match for a marker."""
    def _replace(match: re.Match) -> str:
        return match.group(0).replace(".", marker.value)
    return _replace


def _closing(marker: Marker) -> str:
    # closing glyphs move in front of the terminator, which stays last
    return marker.value + r"\g<term>"


# Order is load-bearing: each rule only sees the periods earlier rules left.
PROTECTION_RULES: Tuple[ProtectionRule, ...] = (
    ProtectionRule(
        "composite_abbreviation",
        re.compile(r"(?P<comp>et al)\.(?=\.)"),
        r"\g<comp>" + Marker.COMPOSITE_ABBREVIATION.value,
    ),
    ProtectionRule(
        "suspension_points",
        re.compile(r"\.{3}"),
        Marker.SUSPENSION_POINT.value * 2 + ".",
    ),
    ProtectionRule(
        "decimal_number",
        re.compile(r"(?<=[0-9])\.(?=[0-9])"),
        Marker.DECIMAL_POINT.value,
    ),
    ProtectionRule(
        "bare_decimal_number",
        re.compile(r"(?<!\S)\.(?=[0-9])"),
        Marker.BARE_DECIMAL_POINT.value,
    ),
    ProtectionRule(
        "acronym",
        re.compile(r"(?:[A-Za-z]\.){2,}"),
        _mark_periods(Marker.ACRONYM_PERIOD),
    ),
    ProtectionRule(
        "initial",
        re.compile(r"(?P<init>[A-Z])\."),
        r"\g<init>" + Marker.INITIAL_PERIOD.value,
    ),
    ProtectionRule(
        "title",
        re.compile(r"(?P<title>[A-Z][a-z]{1,3})\."),
        r"\g<title>" + Marker.TITLE_PERIOD.value,
    ),
    ProtectionRule(
        "unstick_sentences",
        re.compile(r"(?P<left>[^.?!]\.|!|\?)(?P<right>[^\s\"'])"),
        r"\g<left> \g<right>",
    ),
    # Runs before the quote rules, so in `"hi.")` the `)` is not moved and
    # starts the next sentence.
    ProtectionRule(
        "terminator_before_paren",
        re.compile(r"(?P<term>[.?!])\s?\)"),
        _closing(Marker.CLOSE_PAREN),
    ),
    # Curly closings may be preceded by the space unstick_sentences inserted.
    # Straight quotes must be adjacent so an opening quote is left alone.
    ProtectionRule(
        "single_then_double_quote",
        re.compile(r"'(?P<term>[.?!])\""),
        _closing(Marker.SINGLE_THEN_DOUBLE_QUOTE),
    ),
    ProtectionRule(
        "single_then_curly_quote",
        re.compile(r"'(?P<term>[.?!])\s?”"),
        _closing(Marker.SINGLE_THEN_CURLY_QUOTE),
    ),
    ProtectionRule(
        "curly_quote",
        re.compile(r"(?P<term>[.?!])\s?”"),
        _closing(Marker.CURLY_QUOTE),
    ),
    ProtectionRule(
        "straight_single_double_quote",
        re.compile(r"(?P<term>[.?!])'\""),
        _closing(Marker.STRAIGHT_SINGLE_DOUBLE_QUOTE),
    ),
    ProtectionRule(
        "single_quote",
        re.compile(r"(?P<term>[.?!])'"),
        _closing(Marker.SINGLE_QUOTE),
    ),
    ProtectionRule(
        "double_quote",
        re.compile(r"(?P<term>[.?!])\""),
        _closing(Marker.DOUBLE_QUOTE),
    ),
)


def protect(text: str) -> str:
    """
    Replace ambiguous punctuation with sentinel markers.

    After this pass every literal '.', '?' and '!' left in the text is a
    genuine sentence terminator.

    Args:
        text: Plain input text

    Returns:
        str: Protected text
    """
    text = escape_reserved(text)
    for rule in PROTECTION_RULES:
        text = rule.apply(text)
    return text
