"""Initialize a new Rit repository."""

import click
from pathlib import Path
from rit.core.repository import Repository
from rit.cli.output import success, error, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Rit repository.

    Creates a .rit directory with the object store, the refs directory
    and a configuration file.

    Examples:
        rit init                    # Initialize in current directory
        rit init my-project         # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()

    if not repo_path.exists():
        repo_path.mkdir(parents=True)
        click.echo(info(f"Created directory {repo_path}"))

    try:
        repo = Repository(str(repo_path)).init()
    except FileExistsError:
        click.echo(error(f"Repository already exists at {repo_path}"))
        raise click.Abort()
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {path}"))
        raise click.Abort()
    except OSError as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()

    click.echo(success(f"Initialized empty Rit repository in {repo.rit_dir}"))
    click.echo(info("You can now start tracking files with:"))
    click.echo(info("  rit add <file>"))
    click.echo(info("  rit commit -m 'message'"))
