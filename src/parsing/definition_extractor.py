"""
Definition extractor for definitional provisions.

Runs only over the content of provisions designated as definitional (for
example section 1 of a statute, or sections 3, 7 and 17C of the privacy law)
and picks up the quoted-term shape:

    "term" - definition text;
    “term” – definition text;

Two pattern sets exist:

| Style | Patterns                               | Definition ends at   |
|-------|----------------------------------------|----------------------|
| html  | curly-or-straight quotes, single dash  | ";" or end of content|
| text  | curly-or-straight, then straight-only; | ";"                  |
|       | one or more dashes                     |                      |

Each pattern finds the quoted term and the dash; the definition then runs
up to the next ";". Matches do not overlap: scanning resumes after the ";".

A quoted term always ends at the first closing quote after its opening
quote, so every opening quote that shares that closing quote leads to the
same term and dash. TermPattern.search checks each closing quote once and
then moves past it, which keeps the scan linear on quote floods.

Every match of every pattern is collected first (pattern order, then offset
order); candidates are then normalized and filtered, and a term already
captured earlier in the same document is never replaced.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Optional

from ..utils.normalization import normalize_text
from .act_models import Definition

logger = logging.getLogger(__name__)

# Term 1..80 chars, definition > 5 chars
MAX_TERM_LENGTH = 80
MIN_DEFINITION_LENGTH = 5

TERMINATOR = ";"


@dataclass(frozen=True)
class TermPattern:
    """Quoted term followed by a dash."""

    opening: re.Pattern
    closing: re.Pattern
    dash: re.Pattern

    def search(self, content: str, pos: int = 0) -> Optional[tuple[str, int]]:
        """
        First quoted term at or after pos.

        Returns:
            (raw term, offset right after the dash), or None
        """
        while True:
            start = self.opening.search(content, pos)
            if not start:
                return None

            close = self.closing.search(content, start.end())
            if not close:
                return None

            if close.start() == start.end():
                # Empty term
                pos = start.end()
                continue

            dash = self.dash.match(content, close.end())
            if dash:
                return content[start.end():close.start()], dash.end()

            # Same closing quote for every opening before it
            pos = close.start()


PATTERNS = {
    "html": (
        TermPattern(
            opening=re.compile(r'["“]'),
            closing=re.compile(r'["”]'),
            dash=re.compile(r'\s*[-–—]\s*'),
        ),
    ),
    "text": (
        TermPattern(
            opening=re.compile(r'["“]'),
            closing=re.compile(r'["”]'),
            dash=re.compile(r'\s*[-–—]+\s*'),
        ),
        TermPattern(
            opening=re.compile(r'"'),
            closing=re.compile(r'"'),
            dash=re.compile(r'\s*[-–—]+\s*'),
        ),
    ),
}

# Styles whose last definition may run to the end of the content
OPEN_ENDED = frozenset({"html"})


class DefinitionExtractor:
    """
    Extracts quoted-term definitions into a per-document accumulator.

    Usage:
        extractor = DefinitionExtractor("text")
        definitions = []
        extractor.extract(section_1_content, "sec1", definitions)
    """

    def __init__(self, style: str = "text"):
        if style not in PATTERNS:
            raise ValueError(f"Unknown definition style: {style}")
        self.style = style
        self.patterns = PATTERNS[style]
        self.open_ended = style in OPEN_ENDED

    def iter_candidates(self, content: str) -> Iterator[tuple[str, str]]:
        """Raw (term, definition) pairs, pattern by pattern."""
        for pattern in self.patterns:
            pos = 0
            while True:
                found = pattern.search(content, pos)
                if not found:
                    break
                term, start = found

                end = content.find(TERMINATOR, start)
                if end < 0:
                    if not self.open_ended:
                        # No terminator left for any later match either
                        break
                    end = len(content)

                yield term, content[start:end]
                pos = end + 1

    def extract(
        self,
        content: str,
        source_provision: str,
        definitions: list[Definition],
    ) -> int:
        """
        Appends new definitions found in content.

        Args:
            content: Normalized (untruncated) provision content
            source_provision: provision_ref of the definitional provision
            definitions: Document accumulator, updated in place

        Returns:
            Number of definitions appended
        """
        candidates = list(self.iter_candidates(content))
        seen = {d.term for d in definitions}
        added = 0

        for raw_term, raw_definition in candidates:
            term = normalize_text(raw_term)
            definition = normalize_text(raw_definition)

            if not (1 <= len(term) <= MAX_TERM_LENGTH):
                logger.debug(f"{source_provision}: term length out of range: {term[:40]!r}")
                continue
            if len(definition) <= MIN_DEFINITION_LENGTH:
                logger.debug(f"{source_provision}: definition too short for {term!r}")
                continue
            if term in seen:
                logger.debug(f"{source_provision}: duplicated term ignored: {term!r}")
                continue

            definitions.append(
                Definition(term=term, definition=definition, source_provision=source_provision)
            )
            seen.add(term)
            added += 1

        return added
