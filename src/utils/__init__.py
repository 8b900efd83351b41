"""
Utils - Shared text helpers.
"""

from .normalization import normalize_text, strip_html

__all__ = [
    "normalize_text",
    "strip_html",
]
