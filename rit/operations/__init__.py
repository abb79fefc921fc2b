"""Operations module for high-level Rit operations.

This module contains the logic behind the commands:
- Staging files (add)
- Recording commits
- Status computation
"""

from rit.operations.add import add_paths, AddResult
from rit.operations.commit import create_commit, read_commit, read_head_tree
from rit.operations.status import compute_status, classify, FileState, StatusReport

__all__ = [
    'add_paths', 'AddResult',
    'create_commit', 'read_commit', 'read_head_tree',
    'compute_status', 'classify', 'FileState', 'StatusReport',
]
