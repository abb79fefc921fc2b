"""Status command - show working tree status."""

import click
from colorama import Fore, Style
from rit.core.repository import Repository
from rit.operations.status import compute_status
from rit.cli.output import success, error, info


def display_path(path: str) -> str:
    return path[2:] if path.startswith('./') else path


@click.command('status')
def status_cmd():
    """
    Show the working tree status.

    Displays:
    - Changes staged for commit (in index, not yet committed)
    - Changes not staged for commit (modified since they were added)
    - Untracked files (neither staged nor committed)

    Files matching .ritignore and hidden files are not listed.
    Deleted files are not detected.

    Examples:
        rit status
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a rit repository"))
        raise click.Abort()

    try:
        report = compute_status(repo)
    except (OSError, ValueError) as e:
        click.echo(error(f"Failed to compute status: {e}"))
        raise click.Abort()

    click.echo(f"On branch {Fore.CYAN}main{Style.RESET_ALL}")
    click.echo()

    if report.staged_uncommitted:
        click.echo(Fore.GREEN + "Changes to be committed:" + Style.RESET_ALL)
        click.echo()
        for path in sorted(report.staged_uncommitted):
            click.echo(f"  {Fore.GREEN}staged:     {display_path(path)}{Style.RESET_ALL}")
        click.echo()

    if report.staged_modified:
        click.echo(Fore.YELLOW + "Changes not staged for commit:" + Style.RESET_ALL)
        click.echo(info("  (use \"rit add <file>...\" to update what will be committed)"))
        click.echo()
        for path in sorted(report.staged_modified):
            click.echo(f"  {Fore.YELLOW}modified:   {display_path(path)}{Style.RESET_ALL}")
        click.echo()

    if report.untracked:
        click.echo(Fore.RED + "Untracked files:" + Style.RESET_ALL)
        click.echo(info("  (use \"rit add <file>...\" to include in what will be committed)"))
        click.echo()
        for path in sorted(report.untracked):
            click.echo(f"  {Fore.RED}{display_path(path)}{Style.RESET_ALL}")
        click.echo()

    if report.clean:
        click.echo(success("Nothing to commit, working tree clean"))
