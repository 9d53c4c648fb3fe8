"""Corpus data models.

Defines the collection containers fed into the compiler, the compiled
Corpus itself, and the defect reports produced while compiling and
validating it.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from metricdeck.lib.errors import SlugNotFoundError
from metricdeck.models.guide import Guide
from metricdeck.models.term import GlossaryTerm

RecordKind = Literal["term", "guide"]


class DuplicatePolicy(str, Enum):
    """How the compiler resolves two records sharing a slug."""

    ERROR = "error"
    LAST_WINS = "last-wins"


class TermCollection(BaseModel):
    """Ordered group of canonical terms from one authored file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Collection name, e.g. 'core' or 'saas'")
    terms: tuple[GlossaryTerm, ...] = Field(default=(), description="Terms in order")


class GuideCollection(BaseModel):
    """Ordered group of guides from one authored file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Collection name")
    guides: tuple[Guide, ...] = Field(default=(), description="Guides in order")


class DuplicateSlug(BaseModel):
    """Two records of the same kind claiming one slug."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: RecordKind = Field(..., description="Record kind: term or guide")
    slug: str = Field(..., description="The contested slug")
    first_collection: str = Field(
        ..., description="Collection holding the earlier record"
    )
    duplicate_collection: str = Field(
        ..., description="Collection holding the later record"
    )

    def describe(self) -> str:
        """One-line human-readable description."""
        return (
            f"{self.kind} '{self.slug}' in '{self.duplicate_collection}' "
            f"duplicates the one in '{self.first_collection}'"
        )


class DanglingReference(BaseModel):
    """A cross-reference whose target slug does not exist."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_kind: RecordKind = Field(..., description="Kind of the referring record")
    source_slug: str = Field(..., description="Slug of the referring record")
    relation: str = Field(..., description="Relation field holding the reference")
    target_slug: str = Field(..., description="Missing target slug")

    def describe(self) -> str:
        """One-line human-readable description."""
        target_kind = "guide" if self.source_kind == "term" else "glossary term"
        return (
            f"{self.source_kind} '{self.source_slug}' references missing "
            f"{target_kind} '{self.target_slug}' ({self.relation})"
        )


@dataclass(frozen=True)
class Corpus:
    """Compiled, slug-indexed content corpus.

    Built once by ``build_corpus`` and never mutated afterwards; the index
    mappings are read-only views.

    Attributes:
        terms: All terms, collection order then item order
        guides: All guides, collection order then item order
        term_index: Slug to term mapping
        guide_index: Slug to guide mapping
        duplicates: Duplicate slugs resolved under the last-wins policy
    """

    terms: tuple[GlossaryTerm, ...]
    guides: tuple[Guide, ...]
    term_index: Mapping[str, GlossaryTerm]
    guide_index: Mapping[str, Guide]
    duplicates: tuple[DuplicateSlug, ...] = ()

    def get_term(self, slug: str) -> GlossaryTerm | None:
        """Look up a term by slug."""
        return self.term_index.get(slug)

    def get_guide(self, slug: str) -> Guide | None:
        """Look up a guide by slug."""
        return self.guide_index.get(slug)

    def require_term(self, slug: str) -> GlossaryTerm:
        """Look up a term by slug, raising SlugNotFoundError if absent."""
        term = self.term_index.get(slug)
        if term is None:
            raise SlugNotFoundError("term", slug)
        return term

    def require_guide(self, slug: str) -> Guide:
        """Look up a guide by slug, raising SlugNotFoundError if absent."""
        guide = self.guide_index.get(slug)
        if guide is None:
            raise SlugNotFoundError("guide", slug)
        return guide

    def terms_by_title(self) -> list[GlossaryTerm]:
        """Terms sorted by title for glossary listings."""
        return sorted(self.terms, key=lambda t: (t.title.casefold(), t.slug))

    def terms_in_category(self, category: str) -> list[GlossaryTerm]:
        """Title-sorted terms belonging to one category."""
        return [t for t in self.terms_by_title() if t.category == category]

    def guides_in_category(self, category: str) -> list[Guide]:
        """Guides belonging to one category, in corpus order."""
        return [g for g in self.guides if g.category == category]
