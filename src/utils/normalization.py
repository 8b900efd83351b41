"""
Text normalization for legislative sources.

Every parser in this package funnels its output through one of the two
functions below, so that provision content, titles and chapter labels share
a single canonical form: tags removed, the common HTML entities decoded and
whitespace collapsed to single spaces.

Example:
    >>> strip_html("<B>12.&nbsp;Title</B>\\n  text &amp; more")
    '12. Title text & more'
    >>> normalize_text("  Body\\n\\n text  ")
    'Body text'
"""

import re

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")

# Decoded in this order: "&amp;lt;" therefore ends up as "<".
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def strip_html(markup: str) -> str:
    """
    Removes tags, decodes the common HTML entities and collapses whitespace.

    Each tag is replaced by a space so that adjacent cells or headings do
    not fuse into one word.

    Args:
        markup: HTML fragment (or plain text)

    Returns:
        Single-spaced, trimmed text
    """
    text = _TAG_RE.sub(" ", markup)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return normalize_text(text)


def normalize_text(text: str) -> str:
    """Collapses whitespace runs into single spaces and trims."""
    return _WHITESPACE_RE.sub(" ", text).strip()
