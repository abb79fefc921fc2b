"""Rit - a minimal Git-like version control system implemented in Python."""

__version__ = '0.1.0'

from rit.core.repository import Repository
from rit.core.objects import RitObject, Tree, Commit

__all__ = [
    'Repository',
    'RitObject',
    'Tree',
    'Commit',
]
