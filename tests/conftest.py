"""Pytest configuration and shared fixtures for metricdeck tests."""

import logging
import os
import shutil
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import yaml

from metricdeck.models.blocks import HeadingBlock, ParagraphBlock
from metricdeck.models.guide import Guide
from metricdeck.models.term import GlossaryTerm


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None]:
    """Undo setup_logging() handler and level changes made by CLI tests."""
    yield
    namespace_logger = logging.getLogger("metricdeck")
    for handler in list(namespace_logger.handlers):
        namespace_logger.removeHandler(handler)
    namespace_logger.setLevel(logging.NOTSET)


@pytest.fixture
def isolated_env() -> Generator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Saves current environment, clears METRICDECK_* variables, and restores
    everything after the test.

    Yields:
        Dictionary of original environment variables
    """
    original_env = os.environ.copy()
    for key in list(os.environ):
        if key.startswith("METRICDECK_"):
            del os.environ[key]
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def make_term() -> Callable[..., GlossaryTerm]:
    """Factory for minimal canonical glossary terms."""

    def _make(slug: str, **overrides: Any) -> GlossaryTerm:
        data: dict[str, Any] = {
            "slug": slug,
            "title": slug.replace("-", " ").title(),
            "description": f"{slug} description",
            "category": "saas-metrics",
            "updated_at": "2026-01-23",
            "sections": (
                HeadingBlock(text="Definition"),
                ParagraphBlock(text=f"{slug} definition"),
            ),
        }
        data.update(overrides)
        return GlossaryTerm(**data)

    return _make


@pytest.fixture
def make_guide() -> Callable[..., Guide]:
    """Factory for minimal guides."""

    def _make(slug: str, **overrides: Any) -> Guide:
        data: dict[str, Any] = {
            "slug": slug,
            "title": slug.replace("-", " ").title(),
            "description": f"{slug} description",
            "category": "saas-metrics",
            "updated_at": "2026-01-05",
            "sections": (
                HeadingBlock(text="Definition"),
                ParagraphBlock(text=f"{slug} body"),
            ),
        }
        data.update(overrides)
        return Guide(**data)

    return _make


@pytest.fixture
def write_content(temp_dir: Path) -> Callable[..., Path]:
    """Write a content directory (manifest plus collection files).

    The returned callable takes a mapping of collection name to a list of
    raw term records, and a list of raw guide records, and returns the
    content directory path.
    """

    def _write(
        term_collections: dict[str, list[dict[str, Any]]],
        guides: list[dict[str, Any]] | None = None,
        category: str = "saas-metrics",
        updated_at: str = "2026-01-23",
    ) -> Path:
        manifest: dict[str, Any] = {"terms": [], "guides": []}
        for name, records in term_collections.items():
            file_name = f"{name}.yaml"
            (temp_dir / file_name).write_text(
                yaml.safe_dump({"terms": records}, sort_keys=False),
                encoding="utf-8",
            )
            manifest["terms"].append(
                {
                    "name": name,
                    "file": file_name,
                    "defaults": {"category": category, "updatedAt": updated_at},
                }
            )
        (temp_dir / "guides.yaml").write_text(
            yaml.safe_dump({"guides": guides or []}, sort_keys=False),
            encoding="utf-8",
        )
        manifest["guides"].append({"name": "guides", "file": "guides.yaml"})
        (temp_dir / "content.yaml").write_text(
            yaml.safe_dump(manifest, sort_keys=False), encoding="utf-8"
        )
        return temp_dir

    return _write
