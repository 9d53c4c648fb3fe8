"""metricdeck command-line entry point."""

import click

from metricdeck import __version__
from metricdeck.cli.commands.show import list_records, show
from metricdeck.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__, prog_name="metricdeck")
def main() -> None:
    """metricdeck - build-time tooling for the glossary and guide corpus."""


main.add_command(validate)
main.add_command(show)
main.add_command(list_records)


if __name__ == "__main__":
    main()
