"""Add command - stage files for commit."""

import click
from pathlib import Path
from rit.core.repository import Repository
from rit.operations.add import add_paths
from rit.utils.ignore import get_ignore_list, walk_paths
from rit.cli.output import success, error, info


def to_repo_path(repo, path: str) -> str:
    """Rebase a path given relative to the current directory onto the repository root."""
    if Path(path).is_absolute():
        return path
    cwd = Path.cwd().resolve()
    if cwd == repo.work_tree:
        return path
    try:
        prefix = cwd.relative_to(repo.work_tree)
    except ValueError:
        return path
    return (prefix / path).as_posix()


@click.command('add')
@click.argument('paths', nargs=-1)
@click.option('-a', '--all', 'add_all', is_flag=True, help='Add all files not excluded by .ritignore')
def add_cmd(paths, add_all):
    """
    Add file contents to the staging area.

    Stage files for the next commit. Modified files must be added
    again to stage the new changes. Directories are not supported;
    use --all to stage every file in the working tree.

    Examples:
        rit add file.txt
        rit add src/main.py src/util.py
        rit add --all
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a rit repository"))
        raise click.Abort()

    if add_all:
        targets = walk_paths(repo.work_tree, get_ignore_list(repo.work_tree))
    elif paths:
        targets = [to_repo_path(repo, p) for p in paths]
    else:
        click.echo(error("Nothing specified, nothing added"))
        click.echo(info("Use 'rit add <file>' or 'rit add --all'"))
        raise click.Abort()

    try:
        result = add_paths(repo, targets)
    except (OSError, ValueError) as e:
        click.echo(error(f"Failed to update index: {e}"))
        raise click.Abort()

    if result.added:
        click.echo(success(f"Added {len(result.added)} file(s) to staging area"))
        for file in result.added:
            click.echo(info(f"  {file}"))

    for file in result.unchanged:
        click.echo(info(f"{file} already added"))

    if result.failed:
        click.echo()
        click.echo(error(f"Failed to add {len(result.failed)} file(s):"))
        for file, reason in result.failed:
            click.echo(error(f"  {file}: {reason}"))
        raise click.Abort()
