"""Content loader for metricdeck.

This module provides the ContentLoader class for reading the content
manifest and the authored YAML collection files, validating them, and
compiling them into a Corpus.
"""

import logging
import os
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import Discriminator, Tag, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from metricdeck.config.defaults import (
    BUNDLED_CONTENT_DIR,
    DEFAULT_CONTENT_SETTINGS,
    MANIFEST_FILENAME,
)
from metricdeck.config.validator import flatten_pydantic_errors
from metricdeck.content.compiler import build_corpus
from metricdeck.content.report import build_report
from metricdeck.content.seed import expand_seed
from metricdeck.lib.errors import ConfigError, FileNotFoundError
from metricdeck.models.config import (
    CollectionDefaults,
    ContentManifest,
    ContentSettings,
)
from metricdeck.models.corpus import Corpus, GuideCollection, TermCollection
from metricdeck.models.guide import Guide
from metricdeck.models.term import GlossaryTerm, TermSeed

logger = logging.getLogger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "content_dir": "METRICDECK_CONTENT_DIR",
    "duplicate_policy": "METRICDECK_DUPLICATE_POLICY",
    "strict": "METRICDECK_STRICT",
}


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to appropriate type.

    Args:
        field_name: Name of the field (used to determine type)
        value: String value from environment variable

    Returns:
        Parsed value in correct type (bool or str)
    """
    if field_name == "strict":
        return value.lower() in ("true", "1", "yes", "on")
    return value


def _get_env_value(
    field_name: str, env_vars: os._Environ[str] | dict[str, str]
) -> Any | None:
    """Get environment variable value for a field.

    Args:
        field_name: Name of field to get
        env_vars: Environment variables mapping

    Returns:
        Parsed value or None if not set
    """
    env_var_name = ENV_VAR_MAP.get(field_name)
    if not env_var_name or env_var_name not in env_vars:
        return None
    return _parse_env_value(field_name, env_vars[env_var_name])


def _term_record_kind(v: Any) -> str:
    """Authored terms with a sections list are canonical; the rest are seeds."""
    if isinstance(v, dict):
        return "canonical" if "sections" in v else "seed"
    return "canonical" if isinstance(v, GlossaryTerm) else "seed"


TermRecord = Annotated[
    Annotated[GlossaryTerm, Tag("canonical")] | Annotated[TermSeed, Tag("seed")],
    Discriminator(_term_record_kind),
]

_TERM_RECORDS: TypeAdapter[list[GlossaryTerm | TermSeed]] = TypeAdapter(
    list[TermRecord]
)
_GUIDE_RECORDS: TypeAdapter[list[Guide]] = TypeAdapter(list[Guide])


class ContentLoader:
    """Loads and validates authored content from YAML files.

    This class handles:
    - Parsing YAML files into Python dictionaries
    - Reading the content manifest (collection files in merge order)
    - Validating term and guide records, expanding term seeds
    - Converting validation errors into author-friendly messages
    - Compiling everything into a Corpus
    """

    def parse_yaml(self, file_path: str) -> dict[str, Any]:
        """Parse a YAML file and return its contents as a dictionary.

        Args:
            file_path: Path to the YAML file to parse

        Returns:
            Dictionary containing parsed YAML content ({} if file is empty)

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the file is not UTF-8, YAML parsing fails, or the
                top level is not a mapping
        """
        path = Path(file_path)

        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise FileNotFoundError(
                file_path,
                f"Content file not found at {file_path}. "
                f"Please ensure the file exists at this path.",
            ) from e
        except UnicodeDecodeError as e:
            raise ConfigError(
                "yaml_parse",
                f"Content file {file_path} is not valid UTF-8: {str(e)}",
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse",
                f"Failed to parse YAML file {file_path}: {str(e)}",
            ) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(
                "yaml_parse",
                f"Expected a mapping at the top of {file_path}, "
                f"got {type(content).__name__}",
            )
        logger.debug(f"Parsed content file {file_path}")
        return content

    def _records(self, content: dict[str, Any], key: str, file_path: str) -> list[Any]:
        records = content.get(key) or []
        if not isinstance(records, list):
            raise ConfigError(
                f"{key}_parse",
                f"'{key}' in {file_path} must be a list of records",
            )
        return records

    def load_manifest(self, content_dir: str) -> ContentManifest:
        """Load content.yaml from a content directory.

        Args:
            content_dir: Directory containing the manifest

        Returns:
            Validated ContentManifest

        Raises:
            FileNotFoundError: If the manifest does not exist
            ConfigError: If the manifest is invalid
        """
        manifest_path = Path(content_dir) / MANIFEST_FILENAME
        content = self.parse_yaml(str(manifest_path))
        try:
            return ContentManifest(**content)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            raise ConfigError(
                "manifest_validation",
                f"Invalid content manifest in {manifest_path}:\n{error_text}",
            ) from e

    def load_term_collection(
        self, file_path: str, name: str, defaults: CollectionDefaults
    ) -> TermCollection:
        """Load one term collection file.

        Records carrying ``sections`` are taken as canonical terms; all others
        are seeds and are expanded with the collection defaults. Authored
        order is preserved.

        Args:
            file_path: Path to the collection YAML file
            name: Collection name used in duplicate reports
            defaults: Category and date fallbacks for seeds

        Returns:
            TermCollection in authored order

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If any record fails validation
        """
        content = self.parse_yaml(file_path)
        raw_records = self._records(content, "terms", file_path)

        try:
            records = _TERM_RECORDS.validate_python(raw_records)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e, raw_records))
            raise ConfigError(
                "terms_validation",
                f"Invalid term records in {file_path}:\n{error_text}",
            ) from e

        terms: list[GlossaryTerm] = []
        for record in records:
            if isinstance(record, GlossaryTerm):
                terms.append(record)
                continue
            try:
                terms.append(expand_seed(record, defaults))
            except PydanticValidationError as e:
                error_text = "\n".join(flatten_pydantic_errors(e))
                raise ConfigError(
                    "terms_validation",
                    f"Seed '{record.slug}' in {file_path} does not expand "
                    f"to a valid term:\n{error_text}",
                ) from e

        logger.debug(f"Loaded {len(terms)} terms from collection '{name}'")
        return TermCollection(name=name, terms=tuple(terms))

    def load_guide_collection(self, file_path: str, name: str) -> GuideCollection:
        """Load one guide collection file.

        Args:
            file_path: Path to the collection YAML file
            name: Collection name used in duplicate reports

        Returns:
            GuideCollection in authored order

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If any record fails validation
        """
        content = self.parse_yaml(file_path)
        raw_records = self._records(content, "guides", file_path)

        try:
            guides = _GUIDE_RECORDS.validate_python(raw_records)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e, raw_records))
            raise ConfigError(
                "guides_validation",
                f"Invalid guide records in {file_path}:\n{error_text}",
            ) from e

        logger.debug(f"Loaded {len(guides)} guides from collection '{name}'")
        return GuideCollection(name=name, guides=tuple(guides))

    def load_corpus(self, settings: ContentSettings) -> Corpus:
        """Load every collection named in the manifest and compile a Corpus.

        Args:
            settings: Resolved content settings

        Returns:
            Compiled Corpus

        Raises:
            FileNotFoundError: If the manifest or a collection file is missing
            ConfigError: If any file is invalid
            DuplicateSlugError: If slugs collide under the error policy
            ContentIntegrityError: If strict and the corpus has defects
        """
        content_dir = Path(settings.content_dir or BUNDLED_CONTENT_DIR)
        manifest = self.load_manifest(str(content_dir))

        term_collections = [
            self.load_term_collection(
                str(content_dir / entry.file), entry.name, entry.defaults
            )
            for entry in manifest.terms
        ]
        guide_collections = [
            self.load_guide_collection(str(content_dir / entry.file), entry.name)
            for entry in manifest.guides
        ]

        logger.info(
            f"Loaded {len(term_collections)} term collection(s) and "
            f"{len(guide_collections)} guide collection(s) from {content_dir}"
        )
        corpus = build_corpus(
            term_collections,
            guide_collections,
            duplicate_policy=settings.duplicate_policy or "error",
        )

        if settings.strict:
            build_report(corpus).raise_for_defects()
        return corpus

    def resolve_settings(
        self,
        cli_settings: ContentSettings | None = None,
        defaults: dict[str, Any] | None = None,
    ) -> ContentSettings:
        """Resolve content settings with priority hierarchy.

        Configuration priority (highest to lowest):
        1. CLI flags (cli_settings)
        2. Environment variables (METRICDECK_* vars)
        3. Built-in defaults

        Args:
            cli_settings: Settings from CLI flags (optional)
            defaults: Dictionary of default values

        Returns:
            Resolved ContentSettings

        Raises:
            ConfigError: If a resolved value is invalid
        """
        defaults = DEFAULT_CONTENT_SETTINGS if defaults is None else defaults
        resolved: dict[str, Any] = {}

        for field in ContentSettings.model_fields:
            if cli_settings and getattr(cli_settings, field, None) is not None:
                resolved[field] = getattr(cli_settings, field)
            elif (env_value := _get_env_value(field, os.environ)) is not None:
                resolved[field] = env_value
            else:
                resolved[field] = defaults.get(field)

        try:
            return ContentSettings(**resolved)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            raise ConfigError(
                "settings_validation", f"Invalid content settings:\n{error_text}"
            ) from e


def load_corpus(cli_settings: ContentSettings | None = None) -> Corpus:
    """Resolve settings and load the corpus in one call.

    This is the startup entry point for host applications and the CLI.

    Args:
        cli_settings: Optional settings from CLI flags

    Returns:
        Compiled Corpus
    """
    loader = ContentLoader()
    settings = loader.resolve_settings(cli_settings)
    return loader.load_corpus(settings)
