"""Shared content models: categories, FAQs, and guide worked examples."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    field_validator,
)

from metricdeck.lib.validation import validate_non_blank

CategorySlug = Literal["saas-metrics", "paid-ads", "finance"]

CATEGORY_SLUGS: tuple[str, ...] = ("saas-metrics", "paid-ads", "finance")


def _freeze_params(v: Mapping[str, str]) -> Mapping[str, str]:
    """Wrap calculator params in a read-only view, keeping authored order."""
    return MappingProxyType(dict(v))


def _thaw_params(v: Mapping[str, str]) -> dict[str, str]:
    return dict(v)


# Read-only once validated; dumps back to a plain dict
CalculatorParams = Annotated[
    Mapping[str, str],
    AfterValidator(_freeze_params),
    PlainSerializer(_thaw_params, return_type=dict[str, str]),
]


class Category(BaseModel):
    """Display metadata for a content category."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    slug: CategorySlug = Field(..., description="Category identifier")
    title: str = Field(..., description="Human-readable category name")
    description: str = Field(..., description="One-line category summary")


class Faq(BaseModel):
    """A question and answer owned by a term or guide."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    question: str = Field(..., description="Question text")
    answer: str = Field(..., description="Answer text")

    @field_validator("question", "answer")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate question and answer are not empty."""
        return validate_non_blank(v, "faq text")


class GuideExample(BaseModel):
    """Worked example linking a guide to a prefilled calculator.

    The calculator slug and parameter map belong to the external calculator
    system and are passed through unchanged.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    label: str = Field(..., description="Example label shown to readers")
    calculator_slug: str = Field(
        ..., alias="calculatorSlug", description="External calculator identifier"
    )
    params: CalculatorParams = Field(
        default_factory=dict,
        validate_default=True,
        description="Calculator parameters, in order",
    )
    note: str | None = Field(None, description="Optional explanatory note")

    @field_validator("label", "calculator_slug")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate label and calculator slug are not empty."""
        return validate_non_blank(v, "example field")
