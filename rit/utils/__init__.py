"""Utilities module for common helper functions.

This module contains:
- Ignore file handling (.ritignore)
- Working-tree path enumeration
"""

from rit.utils.ignore import IgnoreList, walk_paths, canonical_path, get_ignore_list

__all__ = [
    'IgnoreList', 'walk_paths', 'canonical_path', 'get_ignore_list',
]
