"""
HTML structural parser.

Recovers chapters and numbered sections from pages where both kinds of
heading are wrapped in bold tags:

    <B>CHAPTER ONE: PRIVACY</B>
    <B><a name="s1"></a>1. Infringement of privacy</B>
    No person shall infringe the privacy of another ...
    <B>2. Definitions</B>
    ...

Algorithm:
=========

    body (HTML)
      │
      ├── PATTERN_CHAPTER / PATTERN_ARTICLE ──► chapter headings (offset, label)
      │                                          merged, sorted by offset
      ├── PATTERN_SECTION ──► section headings (offset, label, title)
      │
      └── for each section, in source order:
              chapter = last chapter heading with offset < section offset
              span    = body[offset : next section offset]
              content = strip_html(span)

Heading matches are resolved by source offset only; nesting of tags is never
interpreted.

Variants:
========

| Parser                | Body trimming                     | Definitional sections |
|-----------------------|-----------------------------------|-----------------------|
| HtmlSectionParser     | none                              | none                  |
| PrivacyLawHtmlParser  | "PROTECTION OF PRIVACY LAW" up to | 3, 7, 17C             |
|                       | the closing </TD></TR></TABLE><BR>|                       |
"""

import bisect
import logging
import re
from dataclasses import dataclass
from typing import Iterator, Optional

from ..utils.normalization import strip_html
from .base_parser import BaseActParser, SectionDraft

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Heading:
    """Heading match with its offset in the body."""

    offset: int
    label: str
    title: str = ""


class HtmlSectionParser(BaseActParser):
    """
    Generic HTML parser (no act-specific body trimming).

    Usage:
        parser = HtmlSectionParser()
        act = parser.parse(html, identity)
    """

    name = "generic_html"
    definition_style = "html"

    # =========================================================================
    # REGEX PATTERNS
    # =========================================================================

    # Section: <B>12. Title</B>, <B><a name="s12"></a>17C. Title</B>
    PATTERN_SECTION = re.compile(
        r'<B>(?:<a[^>]*></a>)?\s*(\d+[A-Z]?)\.\s+([^<]+)</B>',
        re.IGNORECASE
    )

    # Chapter: <B>CHAPTER TWO: DATABASES</B>
    PATTERN_CHAPTER = re.compile(
        r'<B>\s*(CHAPTER\s+[^:<]+:\s*[^<]+)</B>',
        re.IGNORECASE
    )

    # Second chapter convention: <B>Article One: Direct Mail</B>
    PATTERN_ARTICLE = re.compile(
        r'<B>\s*(Article\s+[^:<]+:\s*[^<]+)</B>',
        re.IGNORECASE
    )

    def extract_body(self, html: str) -> str:
        """Part of the page holding the act text."""
        return html

    def iter_chapters(self, body: str) -> Iterator[Heading]:
        for pattern in (self.PATTERN_CHAPTER, self.PATTERN_ARTICLE):
            for match in pattern.finditer(body):
                yield Heading(offset=match.start(), label=strip_html(match.group(1)))

    def iter_sections(self, body: str) -> Iterator[Heading]:
        for match in self.PATTERN_SECTION.finditer(body):
            yield Heading(
                offset=match.start(),
                label=match.group(1),
                title=strip_html(match.group(2)),
            )

    def extract_sections(self, raw_text: str) -> list[SectionDraft]:
        body = self.extract_body(raw_text)

        chapters = sorted(self.iter_chapters(body), key=lambda h: h.offset)
        chapter_offsets = [c.offset for c in chapters]
        sections = list(self.iter_sections(body))

        drafts = []
        for i, heading in enumerate(sections):
            end_pos = sections[i + 1].offset if i + 1 < len(sections) else len(body)
            chapter = self._find_chapter(heading.offset, chapters, chapter_offsets)

            drafts.append(
                SectionDraft(
                    section=heading.label,
                    title=heading.title,
                    content=strip_html(body[heading.offset:end_pos]),
                    chapter=chapter,
                )
            )

        logger.debug(
            f"[{self.name}] {len(chapters)} chapter headings, "
            f"{len(sections)} section headings in {len(body)} chars"
        )
        return drafts

    @staticmethod
    def _find_chapter(
        position: int, chapters: list[Heading], offsets: list[int]
    ) -> Optional[str]:
        """Label of the last chapter heading strictly before position."""
        idx = bisect.bisect_left(offsets, position)
        if idx == 0:
            return None
        return chapters[idx - 1].label


class PrivacyLawHtmlParser(HtmlSectionParser):
    """Protection of Privacy Law, 5741-1981 (HTML mirror page)."""

    name = "privacy_law_html"
    definitional_sections = frozenset({"3", "7", "17C"})

    BODY_START = re.compile(r'PROTECTION OF PRIVACY LAW', re.IGNORECASE)
    BODY_END = re.compile(r'</TD>\s*</TR>\s*</TABLE>\s*<BR>', re.IGNORECASE)

    def extract_body(self, html: str) -> str:
        """
        Trims the page to the act text.

        The body runs from the first occurrence of the act title up to the
        first table-closing sequence after it. The whole page is used when
        either marker is missing.
        """
        start = self.BODY_START.search(html)
        if not start:
            logger.debug(f"[{self.name}] act title not found, using whole page")
            return html

        end = self.BODY_END.search(html, start.start())
        if not end:
            logger.debug(f"[{self.name}] closing table not found, using whole page")
            return html

        return html[start.start():end.start()]
