"""Commit command - create a commit from staged changes."""

import click
from rit.core.repository import Repository
from rit.operations.commit import create_commit
from rit.cli.output import success, error, info


@click.command('commit')
@click.option('-m', '--message', required=True, help='Commit message')
def commit_cmd(message):
    """
    Record changes to the repository.

    Creates a commit from the staged changes in the index and moves
    refs/heads/main to it. If the staged snapshot matches one already
    committed, nothing is recorded.

    Examples:
        rit commit -m "Initial commit"
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a rit repository"))
        raise click.Abort()

    try:
        parent = repo.refs.resolve_head()
        commit_hash = create_commit(repo, message)
    except (OSError, ValueError) as e:
        click.echo(error(f"Failed to create commit: {e}"))
        raise click.Abort()

    if commit_hash is None:
        click.echo(info("Nothing to commit, staged snapshot unchanged"))
        return

    click.echo(success(f"Created commit {commit_hash[:7]}"))
    click.echo(info(f"Message: {message.strip()}"))
    if parent:
        click.echo(info(f"Parent: {parent[:7]}"))
    else:
        click.echo(info("(root commit)"))
