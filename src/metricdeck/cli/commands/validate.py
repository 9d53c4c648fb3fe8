"""CLI command for validating the content corpus.

Implements the 'metricdeck validate' command, the build-time check that
compiles every collection and reports all duplicate slugs and dangling
cross-references in one pass.
"""

import sys
from pathlib import Path

import click

from metricdeck.config.loader import ContentLoader
from metricdeck.content.report import ContentReport, build_report
from metricdeck.lib.errors import (
    ConfigError,
    DuplicateSlugError,
    FileNotFoundError,
    MetricDeckError,
)
from metricdeck.lib.logging_config import get_logger, setup_logging
from metricdeck.models.config import ContentSettings
from metricdeck.models.corpus import DuplicatePolicy

logger = get_logger(__name__)


@click.command()
@click.argument(
    "content_dir",
    type=click.Path(exists=True, file_okay=False),
    required=False,
)
@click.option(
    "--duplicate-policy",
    type=click.Choice([p.value for p in DuplicatePolicy]),
    default=None,
    help="How to resolve duplicate slugs (default: error)",
)
@click.option(
    "--output",
    type=click.Path(),
    default=None,
    help="Path to save the JSON content report",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output with debug information",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only print the summary line",
)
def validate(
    content_dir: str | None,
    duplicate_policy: str | None,
    output: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Compile the content corpus and report every content defect.

    CONTENT_DIR is the directory holding content.yaml. Defaults to
    METRICDECK_CONTENT_DIR, then to the bundled content.

    Exit codes: 0 = clean, 1 = content defects, 2 = configuration error.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    logger.info(
        f"Validate command invoked: content_dir={content_dir}, "
        f"duplicate_policy={duplicate_policy}"
    )

    try:
        loader = ContentLoader()
        settings = loader.resolve_settings(
            ContentSettings(
                content_dir=content_dir,
                duplicate_policy=duplicate_policy,
            )
        )
        # Defects are reported below, never raised mid-build
        settings = settings.model_copy(update={"strict": False})

        corpus = loader.load_corpus(settings)
        report = build_report(corpus)

        if quiet:
            click.echo(report.summary().splitlines()[0])
        else:
            click.echo(report.summary())

        if output:
            _save_report(report, output)

        if report.ok:
            logger.info("Content is clean")
            sys.exit(0)
        else:
            logger.info("Exiting with failure status (content defects)")
            sys.exit(1)

    except DuplicateSlugError as e:
        logger.error(f"Duplicate slugs: {e}")
        click.echo(f"Content Error: {e}", err=True)
        sys.exit(1)
    except (ConfigError, FileNotFoundError) as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(2)
    except MetricDeckError as e:
        logger.error(f"Content load failed: {e}", exc_info=True)
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(2)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(2)


def _save_report(report: ContentReport, output: str) -> None:
    """Write the content report as JSON.

    Args:
        report: ContentReport to save
        output: Output file path

    Raises:
        OSError: If the report cannot be written
    """
    try:
        Path(output).write_text(report.model_dump_json(indent=2), encoding="utf-8")
        click.echo(f"Report saved to {output}")
    except OSError as e:
        logger.error(f"Failed to write report to {output}: {e}")
        raise
