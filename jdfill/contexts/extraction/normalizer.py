"""
Text normalization for the Extraction context.

Cleans pasted job description text before pattern matching and provides the
casing helpers used to render extracted values. Pasted text routinely carries
non-breaking spaces, smart quotes and bullet glyphs from word processors and
web pages; these are flattened to ASCII so the patterns see plain text.
"""

import re
import unicodedata
from dataclasses import dataclass, field

# Unicode replacements: problematic char to ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    # Zero-width characters: remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM
    # Quotes
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    # Dashes
    "\u2013": "-",  # en dash
    "\u2014": "-",  # em dash
    # Bullets and misc
    "\u2022": "*",  # bullet
    "\u2026": "...",  # ellipsis
    "\u00b7": "*",  # middle dot
}

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that cause matching issues.

    Applies NFKC normalization and replaces common problematic characters
    with ASCII equivalents.

    Args:
        text: Raw text possibly containing problematic unicode

    Returns:
        Text with normalized unicode
    """
    text = unicodedata.normalize("NFKC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace (including newlines) to single spaces and trim."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def capitalize_words(text: str, lower_rest: bool = False) -> str:
    """
    Upper-case the first character of every space-separated word.

    Unlike str.title(), characters after punctuation are left alone, so
    "node.js" becomes "Node.js" rather than "Node.Js".

    Args:
        text: Input text
        lower_rest: Lower-case the remainder of each word ("PUNE" -> "Pune")

    Returns:
        Text with each word capitalized
    """
    words = []
    for word in text.split(" "):
        rest = word[1:].lower() if lower_rest else word[1:]
        words.append(word[:1].upper() + rest)
    return " ".join(words)


@dataclass(frozen=True)
class JobDocument:
    """
    Immutable job description text prepared for matching.

    Attributes:
        original: Text exactly as supplied (kept for the submitted record)
        normalized: Unicode-cleaned, case-preserved text for regex matching
        lowered: Lower-cased normalized text for keyword containment scans
    """

    original: str
    normalized: str = field(init=False)
    lowered: str = field(init=False)

    def __post_init__(self):
        normalized = normalize_unicode(self.original)
        object.__setattr__(self, "normalized", normalized)
        object.__setattr__(self, "lowered", normalized.lower())

    def __len__(self) -> int:
        return len(self.original)
