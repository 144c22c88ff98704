"""Shared helpers"""

from actionkit.utils.logging import setup_logging
from actionkit.utils.text import locale_key, slugify

__all__ = ["locale_key", "setup_logging", "slugify"]
