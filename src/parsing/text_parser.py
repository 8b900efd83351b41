"""
Plain-text structural parsers (text recovered from PDFs).

Plain text carries no markup: sections, titles and chapter scope are implied
by line layout only. Two conventions are supported.

Statute Convention (StatuteTextParser):
======================================

    Chapter One: Preliminary          ◄── chapter scope

    Definitions                       ◄── marginal note (title buffer)

    1.                                ◄── section alone: title = buffer

    In this Law -                     ◄── content
    "computer material" - ...;

    2. A person who unlawfully...     ◄── section inline: content seeded
                                          with the full line

Once a section is open, every ordinary line is content of that section; the
marginal-note buffer only fills while no section is open.

State machine, per trimmed line, in priority order:

| # | Line                        | Action                                    |
|---|-----------------------------|-------------------------------------------|
| 1 | Chapter <Word>: <text>      | chapter = line, clear buffer              |
| 2 | N.  / 17C.                  | close section, title from buffer, open    |
|   |                             | empty section, clear buffer               |
| 3 | N. text                     | as 2, content = full line ("N. Published  |
|   |                             | in ..." footnotes fall through to 4)      |
| 4 | other non-empty line        | in section: append (skip page numbers and |
|   |                             | running header); else: buffer it unless   |
|   |                             | noise (Go / Section N reset the buffer)   |
| 5 | blank line                  | nothing; notes survive blank lines        |

The source layout (masthead, running header, body-start marker) is described
by a StatuteLayout; the table of contents before the body-start marker is
skipped.

Basic-Law Convention (BasicLawTextParser):
=========================================

    Human dignity                      ◄── title by look-back (max 4 lines,
    and liberty                            stops at a blank line once some
                                           title text exists)
    2. There shall be no violation...  ◄── section line

No chapters and no definitional sections. Running header/footer lines of the
Knesset translations are skipped.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from ..utils.normalization import normalize_text
from .base_parser import BaseActParser, SectionDraft
from .act_models import ParserConfig

logger = logging.getLogger(__name__)


# =============================================================================
# STATUTE CONVENTION
# =============================================================================


@dataclass(frozen=True)
class StatuteLayout:
    """
    Page furniture of a plain-text statute source.

    Attributes:
        masthead: Act name repeated on pages and in the ToC (title noise)
        running_header: Page header repeated inside section content
        body_start: Marker where the act text starts (None = whole text)
        definitional_sections: Section labels holding definitions
    """

    masthead: str
    running_header: str
    body_start: Optional[str] = None
    definitional_sections: frozenset = field(default_factory=lambda: frozenset({"1"}))


# UNODC English translation of the Computers Law, 5755-1995
COMPUTERS_LAW_LAYOUT = StatuteLayout(
    masthead="Computers Law",
    running_header="Computers Law, 1995",
    body_start="Computers Law, 5755",
)

DEFAULT_LAYOUT = COMPUTERS_LAW_LAYOUT


class StatuteTextParser(BaseActParser):
    """
    Line state machine for the statute convention.

    Usage:
        parser = StatuteTextParser()                       # Computers Law layout
        parser = StatuteTextParser(layout=my_layout)
        act = parser.parse(text, identity)
    """

    name = "statute_text"
    definition_style = "text"

    # =========================================================================
    # REGEX PATTERNS
    # =========================================================================

    # "Chapter One: Preliminary", "CHAPTER 3: Evidence"
    PATTERN_CHAPTER = re.compile(r'^Chapter\s+\w+:\s*\S', re.IGNORECASE)

    # "1.", "17C."
    PATTERN_SECTION_ALONE = re.compile(r'^(\d+[A-Za-z]?)\.\s*$')

    # "2. A person who..."
    PATTERN_SECTION_INLINE = re.compile(r'^(\d+[A-Za-z]?)\.\s+(.+)')

    # Footnote that looks like a section line: "1. Published in Sefer Ha-Chukkim..."
    PATTERN_FOOTNOTE = re.compile(r'^Published in', re.IGNORECASE)
    PATTERN_NUMBERED_FOOTNOTE = re.compile(r'^\d+[A-Za-z]?\.\s+Published in', re.IGNORECASE)

    # Table-of-contents markers (reset the title buffer)
    PATTERN_TOC_GO = re.compile(r'^Go$', re.IGNORECASE)
    PATTERN_TOC_SECTION = re.compile(r'^Section\s+\d+')

    PATTERN_DIGITS = re.compile(r'^\d+$')

    # Lines never used as titles
    TITLE_NOISE = (
        re.compile(r'^Chapter\s+', re.IGNORECASE),
        PATTERN_TOC_GO,
        PATTERN_TOC_SECTION,
        re.compile(r'^Clause\s+', re.IGNORECASE),
        re.compile(r'^\*'),
        re.compile(r'^Contents$'),
        PATTERN_DIGITS,
        PATTERN_FOOTNOTE,
        PATTERN_NUMBERED_FOOTNOTE,
    )

    MAX_TITLE_LINE = 100

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        layout: StatuteLayout = DEFAULT_LAYOUT,
    ):
        self.layout = layout
        self.definitional_sections = layout.definitional_sections
        super().__init__(config)

        masthead = re.escape(layout.masthead)
        self._masthead = re.compile(rf'^{masthead}', re.IGNORECASE)
        self._running_header = re.compile(
            rf'^{re.escape(layout.running_header)}', re.IGNORECASE
        )

    def _body(self, text: str) -> str:
        if self.layout.body_start:
            start = text.find(self.layout.body_start)
            if start >= 0:
                return text[start:]
            logger.debug(f"[{self.name}] body marker {self.layout.body_start!r} not found, using whole text")
        return text

    def _is_title_line(self, line: str) -> bool:
        if not line or len(line) >= self.MAX_TITLE_LINE:
            return False
        if self._masthead.match(line):
            return False
        return not any(p.match(line) for p in self.TITLE_NOISE)

    def _title_from(self, notes: list[str]) -> str:
        return normalize_text(" ".join(n for n in notes if self._is_title_line(n)))

    def _is_buffer_noise(self, line: str) -> bool:
        return bool(
            self.PATTERN_TOC_GO.match(line)
            or self.PATTERN_TOC_SECTION.match(line)
            or self._masthead.match(line)
            or self.PATTERN_DIGITS.match(line)
            or line == "*"
            or self.PATTERN_FOOTNOTE.match(line)
            or self.PATTERN_NUMBERED_FOOTNOTE.match(line)
        )

    def _is_content_noise(self, line: str) -> bool:
        # Page numbers and the running header
        if self.PATTERN_DIGITS.match(line) and len(line) <= 3:
            return True
        return bool(self._running_header.match(line))

    def extract_sections(self, raw_text: str) -> list[SectionDraft]:
        drafts: list[SectionDraft] = []
        current: Optional[SectionDraft] = None
        chapter: Optional[str] = None
        notes: list[str] = []

        for raw_line in self._body(raw_text).split("\n"):
            line = raw_line.strip()

            # 1. Chapter heading
            if self.PATTERN_CHAPTER.match(line):
                chapter = normalize_text(line)
                notes = []
                continue

            # 2. Section number alone
            match = self.PATTERN_SECTION_ALONE.match(line)
            if match:
                if current:
                    drafts.append(current)
                current = SectionDraft(
                    section=match.group(1),
                    title=self._title_from(notes),
                    chapter=chapter,
                )
                notes = []
                continue

            # 3. Section number with inline text
            match = self.PATTERN_SECTION_INLINE.match(line)
            if match and not self.PATTERN_FOOTNOTE.match(match.group(2)):
                if current:
                    drafts.append(current)
                current = SectionDraft(
                    section=match.group(1),
                    title=self._title_from(notes),
                    content=normalize_text(line),
                    chapter=chapter,
                )
                notes = []
                continue

            # 5. Blank line
            if not line:
                continue

            # 4. Ordinary line
            if current:
                if not self._is_content_noise(line):
                    current.append(normalize_text(line))
            elif not self._is_buffer_noise(line):
                notes.append(line)
            elif self.PATTERN_TOC_GO.match(line) or self.PATTERN_TOC_SECTION.match(line):
                notes = []

        if current:
            drafts.append(current)

        return drafts


# =============================================================================
# BASIC-LAW CONVENTION
# =============================================================================


class BasicLawTextParser(BaseActParser):
    """
    Section parser for the Knesset Basic Law translations.

    Titles are recovered by looking back over the lines preceding each
    section line instead of buffering forward.
    """

    name = "basic_law_text"

    PATTERN_SECTION = re.compile(r'^(\d+[a-z]?)\.\s*(.*)')

    # Look-back stops on these
    PATTERN_PREVIOUS_SECTION = re.compile(r'^\d+[a-z]?\.\s')
    PATTERN_AMENDMENT = re.compile(r'^\(Amendment')

    # Running header / footer of the translations
    PAGE_NOISE = (
        re.compile(r'^BASIC-LAW:', re.IGNORECASE),
        re.compile(r'^This unofficial', re.IGNORECASE),
        re.compile(r'^For the full', re.IGNORECASE),
        re.compile(r'^Special thanks', re.IGNORECASE),
    )

    LOOK_BACK = 4
    MAX_TITLE_LINE = 100

    def _look_back_title(self, lines: list[str], index: int) -> str:
        """Title from up to LOOK_BACK lines above the section line."""
        parts: list[str] = []
        for j in range(index - 1, max(0, index - self.LOOK_BACK) - 1, -1):
            previous = lines[j].strip()
            if (
                previous
                and len(previous) < self.MAX_TITLE_LINE
                and not self.PATTERN_PREVIOUS_SECTION.match(previous)
                and not self.PATTERN_AMENDMENT.match(previous)
            ):
                parts.insert(0, previous)
            elif not previous and parts:
                break
        return normalize_text(" ".join(parts))

    def extract_sections(self, raw_text: str) -> list[SectionDraft]:
        drafts: list[SectionDraft] = []
        current: Optional[SectionDraft] = None
        lines = raw_text.split("\n")

        for i, raw_line in enumerate(lines):
            line = raw_line.strip()

            match = self.PATTERN_SECTION.match(line)
            if match:
                if current:
                    drafts.append(current)
                current = SectionDraft(
                    section=match.group(1),
                    title=self._look_back_title(lines, i),
                    content=normalize_text(line) if match.group(2) else "",
                )
                continue

            if current and line:
                if any(p.match(line) for p in self.PAGE_NOISE):
                    continue
                current.append(normalize_text(line))

        if current:
            drafts.append(current)

        return drafts
