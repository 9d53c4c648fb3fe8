"""Content block models.

A content block is one renderable unit of a term or guide body. Blocks are
authored in YAML as tagged mappings and parsed into one of four variants:

- HeadingBlock: ``{type: h2|h3, text}``
- ParagraphBlock: ``{type: p, text}``
- BulletListBlock: ``{type: bullets, items: [...]}``
- TableBlock: ``{type: table, columns: [...], rows: [[...], ...]}``

Malformed blocks (empty bullet lists, ragged tables) fail validation here so
the renderer never has to handle them.
"""

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    field_validator,
    model_validator,
)

from metricdeck.lib.validation import validate_non_blank

# Every glossary term opens with this h2 followed by a paragraph
DEFINITION_HEADING = "Definition"


class HeadingBlock(BaseModel):
    """Section heading."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["h2", "h3"] = Field(default="h2", description="Heading level")
    text: str = Field(..., description="Heading text")

    @property
    def level(self) -> str:
        """Heading level, ``h2`` or ``h3``."""
        return self.type

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate heading text is not empty."""
        return validate_non_blank(v, "heading text")


class ParagraphBlock(BaseModel):
    """Plain paragraph of text."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["p"] = Field(default="p", description="Block type")
    text: str = Field(..., description="Paragraph text")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate paragraph text is not empty."""
        return validate_non_blank(v, "paragraph text")


class BulletListBlock(BaseModel):
    """Ordered bullet list; item order is rendering order."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["bullets"] = Field(default="bullets", description="Block type")
    items: tuple[str, ...] = Field(..., description="Bullet items in order")

    @field_validator("items")
    @classmethod
    def validate_items(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate the list has at least one non-empty item."""
        if not v:
            raise ValueError("bullet list must have at least one item")
        for item in v:
            validate_non_blank(item, "bullet item")
        return v


class TableBlock(BaseModel):
    """Table with a header row and same-width body rows."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["table"] = Field(default="table", description="Block type")
    columns: tuple[str, ...] = Field(..., description="Column headers in order")
    rows: tuple[tuple[str, ...], ...] = Field(
        default=(), description="Body rows, each with one cell per column"
    )

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate the table declares at least one column."""
        if not v:
            raise ValueError("table must have at least one column")
        return v

    @model_validator(mode="after")
    def validate_row_widths(self) -> "TableBlock":
        """Validate every row has exactly one cell per column."""
        width = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(
                    f"table row {index} has {len(row)} cells, expected {width}"
                )
        return self


def _get_block_type(v: Any) -> str:
    """Extract block tag from dict or model for discrimination.

    Both heading levels map to the same HeadingBlock variant.

    Args:
        v: Block data as dict (from YAML) or model instance

    Returns:
        Variant tag for discriminator matching
    """
    if isinstance(v, dict):
        block_type = v.get("type", "")
    else:
        block_type = getattr(v, "type", "")
    if block_type in ("h2", "h3"):
        return "heading"
    return str(block_type)


# Discriminated union for all block variants
ContentBlock = Annotated[
    Annotated[HeadingBlock, Tag("heading")]
    | Annotated[ParagraphBlock, Tag("p")]
    | Annotated[BulletListBlock, Tag("bullets")]
    | Annotated[TableBlock, Tag("table")],
    Discriminator(_get_block_type),
]
