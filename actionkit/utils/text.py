from __future__ import annotations

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")


def slugify(value: str) -> str:
    """Lowercase the value and replace whitespace runs with a hyphen"""
    return _WHITESPACE_RE.sub("-", value.lower())


def locale_key(value: str) -> tuple[str, str]:
    """Sort key approximating a locale-aware string comparison.

    Accents and case are ignored on the first pass and only break ties, so
    "acme" sorts before "Zebra" and "Éclair" sorts next to "eclair".
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), value
