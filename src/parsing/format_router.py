"""
Format router: picks the structural parser for a document.

Strategy table:
==============

| Format | Identity                        | Strategy          |
|--------|---------------------------------|-------------------|
| html   | privacy-protection-law-1981     | privacy_law_html  |
| html   | anything else                   | generic_html      |
| text   | id starting with "basic-law-"   | basic_law_text    |
| text   | computer-law-1995               | statute_text      |
| text   | anything else                   | statute_text      |

The strategy is resolved once per document; parsers never re-check the
identity.

Usage:
=====

    ```python
    from src.parsing import parse_act, SourceFormat

    act = parse_act(html, identity, SourceFormat.HTML)
    act = parse_act(pdf_text, identity, "pdf")   # PDF sources arrive as text
    print(act.to_json())
    ```
"""

import logging
from enum import Enum
from typing import Optional, Union

from ..registry.models import ActIdentity
from .act_models import ParsedAct, ParserConfig
from .base_parser import BaseActParser
from .html_parser import HtmlSectionParser, PrivacyLawHtmlParser
from .text_parser import COMPUTERS_LAW_LAYOUT, BasicLawTextParser, StatuteTextParser

logger = logging.getLogger(__name__)

PRIVACY_LAW_ID = "privacy-protection-law-1981"
COMPUTERS_LAW_ID = "computer-law-1995"
BASIC_LAW_PREFIX = "basic-law-"


class SourceFormat(str, Enum):
    """Declared format of the raw text."""

    HTML = "html"
    TEXT = "text"

    @classmethod
    def from_label(cls, label: Union[str, "SourceFormat"]) -> "SourceFormat":
        """
        Maps a source label to a format.

        Raises:
            ValueError: unknown label
        """
        if isinstance(label, cls):
            return label
        key = str(label).strip().lower()
        if key in ("html", "htm"):
            return cls.HTML
        if key in ("text", "txt", "pdf"):
            return cls.TEXT
        raise ValueError(f"Unknown source format: {label!r}")


class ParserStrategy(str, Enum):
    """Structural parser selected for a document."""

    PRIVACY_LAW_HTML = "privacy_law_html"
    GENERIC_HTML = "generic_html"
    STATUTE_TEXT = "statute_text"
    BASIC_LAW_TEXT = "basic_law_text"


def resolve_strategy(
    identity: ActIdentity, fmt: Union[str, SourceFormat]
) -> ParserStrategy:
    """Selects the strategy from the source format and the act id."""
    fmt = SourceFormat.from_label(fmt)

    if fmt == SourceFormat.HTML:
        if identity.id == PRIVACY_LAW_ID:
            return ParserStrategy.PRIVACY_LAW_HTML
        return ParserStrategy.GENERIC_HTML

    if identity.id.startswith(BASIC_LAW_PREFIX):
        return ParserStrategy.BASIC_LAW_TEXT
    if identity.id != COMPUTERS_LAW_ID:
        logger.debug(f"No text strategy registered for {identity.id}, using statute_text")
    return ParserStrategy.STATUTE_TEXT


def build_parser(
    strategy: ParserStrategy, config: Optional[ParserConfig] = None
) -> BaseActParser:
    """Instantiates the parser for a strategy."""
    if strategy == ParserStrategy.PRIVACY_LAW_HTML:
        return PrivacyLawHtmlParser(config)
    if strategy == ParserStrategy.GENERIC_HTML:
        return HtmlSectionParser(config)
    if strategy == ParserStrategy.BASIC_LAW_TEXT:
        return BasicLawTextParser(config)
    return StatuteTextParser(config, layout=COMPUTERS_LAW_LAYOUT)


def parse_act(
    raw_text: str,
    identity: ActIdentity,
    fmt: Union[str, SourceFormat],
    config: Optional[ParserConfig] = None,
) -> ParsedAct:
    """
    Parses one document into a ParsedAct.

    Args:
        raw_text: Page HTML or extracted plain text
        identity: Identity record of the act
        fmt: Declared source format ("html", "text", "pdf"...)
        config: Content limits (defaults to the global config)

    Returns:
        ParsedAct, possibly with no provisions. Choosing a metadata-only
        record instead is up to the caller.
    """
    strategy = resolve_strategy(identity, fmt)
    parser = build_parser(strategy, config)

    act = parser.parse(raw_text or "", identity)

    if not act.provisions:
        logger.warning(
            f"{identity.id}: no provisions recovered "
            f"(strategy={strategy.value}, {len(raw_text or '')} chars)"
        )

    return act
