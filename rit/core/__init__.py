"""Core functionality for Rit.

This module contains the core data structures:
- Rit objects (Tree, Commit)
- Content-addressed object store
- Repository management
- Index/staging area
- Head reference
- Configuration management
- Hashing utilities

For add, commit and status, see rit.operations
For ignore handling and path enumeration, see rit.utils
"""

from rit.core.objects import RitObject, Tree, TreeEntry, Commit
from rit.core.store import ObjectStore
from rit.core.repository import Repository
from rit.core.hash import digest, hash_object, hash_file
from rit.core.index import Index, IndexEntry, IndexHeader
from rit.core.refs import RefManager
from rit.core.config import Config

__all__ = [
    'RitObject',
    'Tree',
    'TreeEntry',
    'Commit',
    'ObjectStore',
    'Repository',
    'Index',
    'IndexEntry',
    'IndexHeader',
    'RefManager',
    'Config',
    'digest',
    'hash_object',
    'hash_file',
]
