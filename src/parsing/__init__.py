"""
Parsing module for Israeli legislation.

Recovers the structure of an act (numbered sections, chapter scope, titles
and quoted-term definitions) from weakly marked source text, using regex
heading scans and line state machines only.

Parsing Architecture:
====================

    raw text + ActIdentity + format
         │
         ▼
    ┌─────────────────────────────────────────────────────────────────────┐
    │                         Format Router                               │
    │                                                                     │
    │  (format, act id) ──► ParserStrategy (resolved once)                │
    └─────────────────────────────────────────────────────────────────────┘
                                    │
              ┌─────────────────────┴──────────────────────┐
              ▼                                            ▼
    ┌───────────────────────────┐          ┌──────────────────────────────┐
    │     HTML heading scan     │          │   Plain-text state machines  │
    │                           │          │                              │
    │  PrivacyLawHtmlParser     │          │  StatuteTextParser           │
    │  HtmlSectionParser        │          │  BasicLawTextParser          │
    └───────────────────────────┘          └──────────────────────────────┘
              │                                            │
              └─────────────────────┬──────────────────────┘
                                    ▼
    ┌─────────────────────────────────────────────────────────────────────┐
    │                         BaseActParser.finalize                      │
    │                                                                     │
    │  threshold (> 10 chars) ──► DefinitionExtractor ──► truncate (8000) │
    └─────────────────────────────────────────────────────────────────────┘
                                    │
                                    ▼
                   ParsedAct (provisions in source order)

Usage:
=====

    ```python
    from src.parsing import parse_act
    from src.registry import load_act_index

    acts = load_act_index()
    act = parse_act(html, acts["privacy-protection-law-1981"], "html")

    for provision in act.provisions:
        print(f"{provision.provision_ref}: {provision.title}")
    ```
"""

from .act_models import (
    Provision,
    Definition,
    ParsedAct,
    ParserConfig,
)
from .definition_extractor import DefinitionExtractor
from .base_parser import BaseActParser, SectionDraft
from .html_parser import HtmlSectionParser, PrivacyLawHtmlParser
from .text_parser import (
    StatuteLayout,
    StatuteTextParser,
    BasicLawTextParser,
    COMPUTERS_LAW_LAYOUT,
    DEFAULT_LAYOUT,
)
from .format_router import (
    SourceFormat,
    ParserStrategy,
    resolve_strategy,
    build_parser,
    parse_act,
)

__all__ = [
    # Models
    "Provision",
    "Definition",
    "ParsedAct",
    "ParserConfig",
    # Definitions
    "DefinitionExtractor",
    # Parsers
    "BaseActParser",
    "SectionDraft",
    "HtmlSectionParser",
    "PrivacyLawHtmlParser",
    "StatuteLayout",
    "StatuteTextParser",
    "BasicLawTextParser",
    "COMPUTERS_LAW_LAYOUT",
    "DEFAULT_LAYOUT",
    # Router
    "SourceFormat",
    "ParserStrategy",
    "resolve_strategy",
    "build_parser",
    "parse_act",
]
