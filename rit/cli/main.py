"""Main CLI entry point for Rit."""

import logging

import click
from colorama import init

from rit import __version__
from rit.cli.output import BANNER
from rit.cli.commands import init_cmd, add_cmd, commit_cmd, status_cmd, remote_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class RitGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=RitGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Log debug details')
def cli(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(status_cmd)
cli.add_command(remote_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
