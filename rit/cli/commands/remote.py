"""Remote command - manage the remote URL."""

import click
from rit.core.repository import Repository
from rit.cli.output import success, error, info


def _find_repo():
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a rit repository"))
        raise click.Abort()
    return repo


@click.group('remote')
def remote_cmd():
    """Manage the remote repository URL."""
    pass


@remote_cmd.command('set-url')
@click.argument('url')
def remote_set_url(url):
    """
    Set the remote repository URL.

    URL: Remote repository URL or path

    Example:
        rit remote set-url https://example.com/project.git
    """
    repo = _find_repo()

    try:
        repo.config.set_remote_url(url)
    except OSError as e:
        click.echo(error(f"Failed to set remote URL: {e}"))
        raise click.Abort()

    click.echo(success(f"Remote URL set to {url}"))


@remote_cmd.command('get-url')
def remote_get_url():
    """Show the remote repository URL."""
    repo = _find_repo()

    url = repo.config.get_remote_url()
    if not url:
        click.echo(error("No remote URL configured"))
        click.echo(info("Use 'rit remote set-url <url>' to set one"))
        raise click.Abort()

    click.echo(url)
