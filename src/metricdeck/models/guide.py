"""Guide models.

Guides are long-form explainer articles authored directly in canonical form:
their sections are written block by block rather than derived from a seed.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from metricdeck.lib.validation import (
    validate_date_string,
    validate_non_blank,
    validate_slug,
)
from metricdeck.models.blocks import ContentBlock
from metricdeck.models.content import CategorySlug, Faq, GuideExample


class Guide(BaseModel):
    """Long-form guide article."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    slug: str = Field(..., description="Unique, URL-safe guide identifier")
    title: str = Field(..., description="Display title")
    description: str = Field(..., description="Short summary")
    category: CategorySlug = Field(..., description="Content category")
    updated_at: str = Field(..., alias="updatedAt", description="YYYY-MM-DD")
    sections: tuple[ContentBlock, ...] = Field(
        ..., description="Body blocks in rendering order"
    )
    related_calculator_slugs: tuple[str, ...] = Field(
        default=(),
        alias="relatedCalculatorSlugs",
        description="External calculator identifiers, in display order",
    )
    related_glossary_slugs: tuple[str, ...] = Field(
        default=(),
        alias="relatedGlossarySlugs",
        description="Glossary terms this guide links to",
    )
    faqs: tuple[Faq, ...] = Field(default=(), description="Frequently asked questions")
    examples: tuple[GuideExample, ...] = Field(
        default=(), description="Worked examples with prefilled calculators"
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
        """Validate the guide has at least one block."""
        if not v:
            raise ValueError("guide must have at least one section")
        return v
