"""CLI commands for Rit."""

from rit.cli.commands.init import init_cmd
from rit.cli.commands.add import add_cmd
from rit.cli.commands.commit import commit_cmd
from rit.cli.commands.status import status_cmd
from rit.cli.commands.remote import remote_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'status_cmd', 'remote_cmd']
