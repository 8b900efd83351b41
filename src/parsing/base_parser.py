"""
Shared finalize step for the structural parsers.

Every parser (HTML heading scan, plain-text state machines) produces a list
of SectionDraft objects in source order. BaseActParser turns them into the
ParsedAct aggregate:

    SectionDraft(section, title, content, chapter)
           │
           ├── normalize_text(content)
           ├── drop when len(content) <= min_content_length
           ├── definitional section? ──► DefinitionExtractor (full content)
           └── truncate to max_content_length ──► Provision("sec" + section)
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..registry.models import ActIdentity
from ..utils.normalization import normalize_text
from .act_models import Definition, ParsedAct, ParserConfig, Provision
from .definition_extractor import DefinitionExtractor

logger = logging.getLogger(__name__)


@dataclass
class SectionDraft:
    """Section being accumulated by a parser, before the finalize rules."""

    section: str
    title: str = ""
    content: str = ""
    chapter: Optional[str] = None

    def append(self, text: str) -> None:
        self.content += " " + text


class BaseActParser:
    """
    Base class for the structural parsers.

    Subclasses implement extract_sections() and set the definitional section
    labels plus the definition pattern style.
    """

    name = "base"
    definitional_sections: frozenset = frozenset()
    definition_style = "text"

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig.from_config()
        self.extractor = DefinitionExtractor(self.definition_style)

    def extract_sections(self, raw_text: str) -> list[SectionDraft]:
        raise NotImplementedError

    def parse(self, raw_text: str, identity: ActIdentity) -> ParsedAct:
        """
        Parses raw text into a ParsedAct.

        Never raises on malformed text: no recognizable structure gives an
        act with no provisions.
        """
        drafts = self.extract_sections(raw_text)
        provisions, definitions = self.finalize(drafts)

        logger.info(
            f"[{self.name}] {identity.id}: "
            f"{len(provisions)} provisions, {len(definitions)} definitions "
            f"({len(drafts)} candidate sections)"
        )

        return ParsedAct.from_identity(identity, provisions, definitions)

    def finalize(
        self, drafts: Iterable[SectionDraft]
    ) -> tuple[list[Provision], list[Definition]]:
        """Applies the content threshold, definition extraction and truncation."""
        provisions: list[Provision] = []
        definitions: list[Definition] = []

        for draft in drafts:
            content = normalize_text(draft.content)
            if not self.config.accepts(content):
                logger.debug(f"Section {draft.section} dropped: content {content!r}")
                continue

            provision_ref = f"sec{draft.section}"
            if draft.section in self.definitional_sections:
                self.extractor.extract(content, provision_ref, definitions)

            provisions.append(
                Provision(
                    provision_ref=provision_ref,
                    section=draft.section,
                    title=draft.title,
                    content=self.config.truncate(content),
                    chapter=draft.chapter or None,
                )
            )

        return provisions, definitions
