"""Default configuration values for metricdeck."""

from pathlib import Path

from metricdeck.models.content import Category

# Content bundled with the package
BUNDLED_CONTENT_DIR = Path(__file__).resolve().parent.parent / "data"

MANIFEST_FILENAME = "content.yaml"

# Content settings defaults
DEFAULT_CONTENT_SETTINGS: dict[str, str | bool | None] = {
    "content_dir": None,  # bundled data
    "duplicate_policy": "error",
    "strict": False,
}

# Display metadata for the closed category set
CATEGORIES: tuple[Category, ...] = (
    Category(
        slug="saas-metrics",
        title="SaaS Metrics",
        description="Recurring revenue, retention, and unit economics for subscription businesses.",
    ),
    Category(
        slug="paid-ads",
        title="Paid Ads",
        description="Acquisition cost, return on ad spend, and funnel metrics for paid media.",
    ),
    Category(
        slug="finance",
        title="Finance",
        description="Valuation, margins, cash flow, and break-even analysis.",
    ),
)


def get_category(slug: str) -> Category | None:
    """Return display metadata for a category slug."""
    for category in CATEGORIES:
        if category.slug == slug:
            return category
    return None
