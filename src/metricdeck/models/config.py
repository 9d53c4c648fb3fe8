"""Configuration models for content loading.

ContentSettings controls where content is read from and how the build
treats defects. ContentManifest describes the authored files that make up a
corpus and the order they are merged in, with the CollectionDefaults each
term collection applies to its seeds.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from metricdeck.lib.validation import validate_date_string, validate_non_blank
from metricdeck.models.content import CategorySlug
from metricdeck.models.corpus import DuplicatePolicy


class CollectionDefaults(BaseModel):
    """Fallback values a term collection applies to its seeds."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    category: CategorySlug = Field(..., description="Default category")
    updated_at: str = Field(
        ..., alias="updatedAt", description="Fallback YYYY-MM-DD date"
    )

    @field_validator("updated_at")
    @classmethod
    def validate_updated_at(cls, v: str) -> str:
        """Validate the fallback date."""
        return validate_date_string(v)


class ContentSettings(BaseModel):
    """Content build settings.

    Every field is optional so partial settings from CLI flags and
    environment variables can be layered; ``resolve_settings`` fills the
    gaps from built-in defaults.
    """

    model_config = ConfigDict(extra="forbid")

    content_dir: str | None = Field(
        None, description="Directory holding content.yaml (bundled data if unset)"
    )
    duplicate_policy: DuplicatePolicy | None = Field(
        None, description="Duplicate slug policy: error or last-wins"
    )
    strict: bool | None = Field(
        None, description="Fail the build on dangling cross-references"
    )


class TermCollectionEntry(BaseModel):
    """Manifest entry for one term collection file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(..., description="Collection name")
    file: str = Field(..., description="Path relative to the content directory")
    defaults: CollectionDefaults = Field(
        ..., description="Category and date fallbacks for seeds"
    )

    @field_validator("name", "file")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate name and file are not empty."""
        return validate_non_blank(v, "collection name/file")


class GuideCollectionEntry(BaseModel):
    """Manifest entry for one guide collection file."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Collection name")
    file: str = Field(..., description="Path relative to the content directory")

    @field_validator("name", "file")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate name and file are not empty."""
        return validate_non_blank(v, "collection name/file")


class ContentManifest(BaseModel):
    """Ordered list of content files making up a corpus."""

    model_config = ConfigDict(extra="forbid")

    terms: list[TermCollectionEntry] = Field(
        default_factory=list, description="Term collections in merge order"
    )
    guides: list[GuideCollectionEntry] = Field(
        default_factory=list, description="Guide collections in merge order"
    )
