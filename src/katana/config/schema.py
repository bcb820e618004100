"""Pydantic schemas for YAML pipeline configuration."""

from pydantic import BaseModel, Field
from typing import Dict, List, Literal

# Lowercase abbreviations folded into period-free forms before segmentation
DEFAULT_ABBREVIATIONS: Dict[str, str] = {
    "i.e.": "ie",
    "e.g.": "eg",
    "etc.": "etc",
    "mr.": "mr",
    "mrs.": "mrs",
    "vs.": "vs",
    "dr.": "dr",
    "prof.": "prof",
    "sr.": "sr",
    "jr.": "jr",
    "st.": "st",
    "jan.": "jan",
    "feb.": "feb",
    "mar.": "mar",
    "apr.": "apr",
    "jun.": "jun",
    "jul.": "jul",
    "aug.": "aug",
    "sept.": "sept",
    "oct.": "oct",
    "nov.": "nov",
    "dec.": "dec",
    "a.m.": "am",
    "p.m.": "pm",
    "u.s.": "us",
    "u.k.": "uk",
}


class MarkupCfg(BaseModel):
    """How markup is parsed before cleaning."""
    parser: Literal["html.parser", "lxml", "html5lib"] = Field(
        default="html.parser", description="BeautifulSoup tree builder")
    fence_code: bool = Field(default=True,
                             description="Render pre/code/samp as markdown code")

    class Config:
        extra = "forbid"


class CleaningCfg(BaseModel):
    """Markup-to-text cleaning steps."""
    strip_comments: bool = True
    unwrap_headings: bool = True
    normalize_abbreviations: bool = True
    strip_footnotes: bool = Field(default=True,
                                  description="Remove bracketed numeric references like [3]")
    abbreviations: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ABBREVIATIONS))

    class Config:
        extra = "forbid"


class OutputCfg(BaseModel):
    """How segmented text is joined back together."""
    sentence_separator: str = " "
    paragraph_separator: str = "\n\n"

    class Config:
        extra = "forbid"


class PipelineConfig(BaseModel):
    """Complete configuration for the preparation pipeline."""
    version: int = Field(default=1, description="Config schema version")
    markup: MarkupCfg = Field(default_factory=MarkupCfg)
    cleaning: CleaningCfg = Field(default_factory=CleaningCfg)
    output: OutputCfg = Field(default_factory=OutputCfg)

    class Config:
        extra = "forbid"  # Strict validation

    def validate_settings(self) -> List[str]:
        """Validate settings and return any issues."""
        issues = []

        bad_keys = [k for k in self.cleaning.abbreviations
                    if not k.endswith(".") or k != k.lower()]
        if bad_keys:
            issues.append(f"Abbreviations must be lowercase and end with '.': {bad_keys}")

        dotted = [v for v in self.cleaning.abbreviations.values() if "." in v]
        if dotted:
            issues.append(f"Abbreviation replacements must not contain '.': {dotted}")

        if not self.output.paragraph_separator:
            issues.append("Empty paragraph_separator")

        return issues
