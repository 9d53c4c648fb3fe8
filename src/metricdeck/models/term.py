"""Glossary term models.

Terms exist in two shapes:

- TermSeed: the compact authoring shorthand. Authors fill in a description
  and optional formula, example, bullets and mistakes.
- GlossaryTerm: the canonical record with fully materialized sections.

``metricdeck.content.seed.expand_seed`` is the only code path that turns a
seed into a canonical term.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from metricdeck.lib.validation import (
    validate_date_string,
    validate_non_blank,
    validate_slug,
)
from metricdeck.models.blocks import (
    DEFINITION_HEADING,
    ContentBlock,
    HeadingBlock,
    ParagraphBlock,
)
from metricdeck.models.content import CategorySlug, Faq


class TermSeed(BaseModel):
    """Authoring shorthand for a glossary term."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    slug: str = Field(..., description="Unique, URL-safe term identifier")
    title: str = Field(..., description="Display title")
    description: str = Field(..., description="Short summary, reused as definition")
    category: CategorySlug | None = Field(
        None, description="Category (defaults to the collection default)"
    )
    updated_at: str | None = Field(
        None,
        alias="updatedAt",
        description="YYYY-MM-DD (defaults to the collection fallback date)",
    )
    formula: str | None = Field(None, description="Formula paragraph")
    example: str | None = Field(None, description="Worked example paragraph")
    bullets: tuple[str, ...] = Field(default=(), description="How-to-use bullets")
    mistakes: tuple[str, ...] = Field(default=(), description="Common mistakes")
    faqs: tuple[Faq, ...] = Field(default=(), description="Frequently asked questions")
    related_guide_slugs: tuple[str, ...] = Field(
        default=(), alias="relatedGuideSlugs", description="Guides this term links to"
    )
    related_calculator_slugs: tuple[str, ...] = Field(
        default=(),
        alias="relatedCalculatorSlugs",
        description="External calculator identifiers",
    )

    @field_validator("slug")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug is lowercase and hyphen-separated."""
        return validate_slug(v)

    @field_validator("title", "description")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        """Validate title and description are not empty."""
        return validate_non_blank(v, "title/description")

    @field_validator("updated_at")
    @classmethod
    def validate_updated_at(cls, v: str | None) -> str | None:
        """Validate updatedAt is a calendar date when provided."""
        if v is None:
            return v
        return validate_date_string(v)


class GlossaryTerm(BaseModel):
    """Canonical glossary term, ready for rendering."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    slug: str = Field(..., description="Unique, URL-safe term identifier")
    title: str = Field(..., description="Display title")
    description: str = Field(..., description="Short summary")
    category: CategorySlug = Field(..., description="Content category")
    updated_at: str = Field(..., alias="updatedAt", description="YYYY-MM-DD")
    sections: tuple[ContentBlock, ...] = Field(
        ..., description="Body blocks in rendering order"
    )
    faqs: tuple[Faq, ...] = Field(default=(), description="Frequently asked questions")
    related_guide_slugs: tuple[str, ...] = Field(
        default=(), alias="relatedGuideSlugs", description="Guides this term links to"
    )
    related_calculator_slugs: tuple[str, ...] = Field(
        default=(),
        alias="relatedCalculatorSlugs",
        description="External calculator identifiers",
    )

    @field_validator("slug")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug is lowercase and hyphen-separated."""
        return validate_slug(v)

    @field_validator("title", "description")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        """Validate title and description are not empty."""
        return validate_non_blank(v, "title/description")

    @field_validator("updated_at")
    @classmethod
    def validate_updated_at(cls, v: str) -> str:
        """Validate updatedAt is a calendar date."""
        return validate_date_string(v)

    @field_validator("sections")
    @classmethod
    def validate_sections(cls, v: tuple[ContentBlock, ...]) -> tuple[ContentBlock, ...]:
        """Validate the term opens with a Definition heading and paragraph."""
        if not v:
            raise ValueError("term must have at least one section")
        opening = v[:2]
        if (
            len(opening) < 2
            or not isinstance(opening[0], HeadingBlock)
            or opening[0].level != "h2"
            or opening[0].text != DEFINITION_HEADING
            or not isinstance(opening[1], ParagraphBlock)
        ):
            raise ValueError(
                f"term sections must open with an h2 '{DEFINITION_HEADING}' "
                "heading followed by a paragraph"
            )
        return v
