"""
Act Models - Data structures for parsed legislation.

This module defines the output of every parser in the package: Provision,
Definition and the ParsedAct aggregate that is handed to the storage loader.

Data Flow:
=========

    raw text + ActIdentity
           │
           ▼
    ┌─────────────────────────────────────────────────────────────────────┐
    │                 HTML / plain-text structural parser                 │
    │                                                                     │
    │  text ──► [heading scan / line state machine] ──► Provision list    │
    │                                                                     │
    │  definitional provisions ──► DefinitionExtractor ──► Definitions    │
    └─────────────────────────────────────────────────────────────────────┘
           │
           ▼
    ParsedAct (immutable, provisions in source order)
           │
           └── to_dict() / to_json() ──► storage loader (seed record)

Provision Fields:
================

| Field         | Example                 | Notes                             |
|---------------|-------------------------|-----------------------------------|
| provision_ref | sec17C                  | "sec" + section label             |
| section       | 17C                     | unique within the document        |
| chapter       | Chapter Two: Offences   | scope of the section, optional    |
| title         | Unlawful access         | marginal note or heading, may be ""|
| content       | 4. A person who...      | normalized, at most 8000 chars    |

Metadata-Only Records:
=====================

When structural parsing recovers nothing useful the ingestion orchestrator
may substitute a record built with ParsedAct.metadata_only(): identity
fields (and optionally a description) with no provisions or definitions.
That decision is never taken by the parsers themselves.
"""

import json
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..config import Config, config as global_config
from ..registry.models import ActIdentity, ActStatus

ACT_TYPE = "statute"


@dataclass
class ParserConfig:
    """Content limits shared by every structural parser."""

    max_content_length: int = 8000  # Silent hard cap
    min_content_length: int = 10    # Content at or below this is dropped

    @classmethod
    def from_config(cls, cfg: Optional[Config] = None) -> "ParserConfig":
        cfg = cfg or global_config
        return cls(
            max_content_length=cfg.max_content_length,
            min_content_length=cfg.min_content_length,
        )

    def accepts(self, content: str) -> bool:
        """False for stray digits, page artifacts and other short matches."""
        return len(content) > self.min_content_length

    def truncate(self, content: str) -> str:
        return content[: self.max_content_length]


@dataclass(frozen=True)
class Provision:
    """
    A numbered section of an act.

    Attributes:
        provision_ref: Stable reference ("sec" + section)
        section: Section label (ex: "1", "17C", "270A")
        title: Heading or marginal note ("" when unknown)
        content: Normalized text of the section
        chapter: Label of the enclosing chapter heading, if any
    """

    provision_ref: str
    section: str
    title: str
    content: str
    chapter: Optional[str] = None

    def to_dict(self) -> dict:
        """Converts to the seed record shape (chapter omitted when absent)."""
        data = {"provision_ref": self.provision_ref}
        if self.chapter:
            data["chapter"] = self.chapter
        data["section"] = self.section
        data["title"] = self.title
        data["content"] = self.content
        return data

    def __repr__(self) -> str:
        preview = self.content[:50] + "..." if len(self.content) > 50 else self.content
        return f"Provision({self.provision_ref}, '{preview}')"


@dataclass(frozen=True)
class Definition:
    """A quoted term defined inside a definitional provision."""

    term: str
    definition: str
    source_provision: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"term": self.term, "definition": self.definition}
        if self.source_provision:
            data["source_provision"] = self.source_provision
        return data


@dataclass(frozen=True)
class ParsedAct:
    """
    Structured result of parsing one act.

    Attributes:
        id: Act id (from the identity record)
        title: Local-language title
        title_en: English title
        short_name: Abbreviation
        status: Lifecycle status
        issued_date: Issuance date
        in_force_date: Effective date
        url: Source URL
        provisions: Provisions in order of appearance in the source
        definitions: Definitions, unique by term (first occurrence wins)
        description: Free-text summary (metadata-only records)
    """

    id: str
    title: str
    title_en: str
    short_name: str
    status: ActStatus
    issued_date: str
    in_force_date: str
    url: str
    provisions: tuple[Provision, ...] = ()
    definitions: tuple[Definition, ...] = ()
    description: Optional[str] = None
    type: str = field(default=ACT_TYPE, init=False)

    @classmethod
    def from_identity(
        cls,
        identity: ActIdentity,
        provisions: Sequence[Provision] = (),
        definitions: Sequence[Definition] = (),
        description: Optional[str] = None,
    ) -> "ParsedAct":
        """Builds the aggregate from an identity record and parser output."""
        return cls(
            id=identity.id,
            title=identity.title,
            title_en=identity.title_en,
            short_name=identity.abbreviation,
            status=identity.status,
            issued_date=identity.issued_date,
            in_force_date=identity.in_force_date,
            url=identity.url,
            provisions=tuple(provisions),
            definitions=tuple(definitions),
            description=description,
        )

    @classmethod
    def metadata_only(
        cls, identity: ActIdentity, description: Optional[str] = None
    ) -> "ParsedAct":
        """Builds a record carrying identity metadata and no provisions."""
        return cls.from_identity(identity, description=description)

    @property
    def is_metadata_only(self) -> bool:
        return not self.provisions

    def get_provision(self, section: str) -> Optional[Provision]:
        """Looks up a provision by section label."""
        for provision in self.provisions:
            if provision.section == section:
                return provision
        return None

    @property
    def chapters(self) -> list[str]:
        """Distinct chapter labels, in order of first appearance."""
        seen: list[str] = []
        for provision in self.provisions:
            if provision.chapter and provision.chapter not in seen:
                seen.append(provision.chapter)
        return seen

    def to_dict(self) -> dict:
        """Converts to the seed record consumed by the storage loader."""
        data = {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "title_en": self.title_en,
            "short_name": self.short_name,
            "status": self.status.value,
            "issued_date": self.issued_date,
            "in_force_date": self.in_force_date,
            "url": self.url,
        }
        if self.description:
            data["description"] = self.description
        data["provisions"] = [p.to_dict() for p in self.provisions]
        data["definitions"] = [d.to_dict() for d in self.definitions]
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    def __repr__(self) -> str:
        return (
            f"ParsedAct("
            f"id={self.id}, "
            f"provisions={len(self.provisions)}, "
            f"definitions={len(self.definitions)})"
        )
