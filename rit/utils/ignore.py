"""Ignore handling and working-tree enumeration for .ritignore files."""

import os
from pathlib import Path
from typing import Iterable, List, Optional


class IgnoreList:
    """
    Substring-based ignore list.

    Each non-empty, non-comment line of ``.ritignore`` is a term; a file or
    directory name is ignored when it contains any term.
    """

    def __init__(self, terms: Optional[Iterable[str]] = None):
        """Initialize list with optional terms."""
        self.terms: List[str] = []
        for term in terms or []:
            self.add_term(term)

    def add_term(self, term: str) -> None:
        """
        Add a term to the list.

        Args:
            term: Substring to match against entry names
        """
        # Skip empty lines and comments
        term = term.strip()
        if not term or term.startswith('#'):
            return
        self.terms.append(term)

    def load_file(self, path: Path) -> bool:
        """
        Load terms from an ignore file.

        Args:
            path: Path to the ignore file

        Returns:
            True if the file existed and was loaded
        """
        if not path.exists():
            return False

        for line in path.read_text().splitlines():
            self.add_term(line)
        return True

    def is_ignored(self, name: str) -> bool:
        """Check if an entry name matches any term."""
        return any(term in name for term in self.terms)

    def __len__(self) -> int:
        return len(self.terms)


def is_hidden(name: str) -> bool:
    return name.startswith('.')


def canonical_path(path: str) -> str:
    """
    Turn a working-tree relative path into its index key.

    Separators become '/', and './' is prepended when missing. Symlinks and
    '..' components are left alone.
    """
    path = path.replace(os.sep, '/')
    if not path.startswith('./'):
        path = './' + path
    return path


def walk_paths(work_tree: Path, ignore: Optional[IgnoreList] = None) -> List[str]:
    """
    List non-ignored files in the working tree.

    Hidden entries (including ``.rit`` and ``.ritignore``) and entries whose
    name matches the ignore list are skipped; skipped directories are not
    descended into.

    Args:
        work_tree: Repository root
        ignore: Ignore list, or None to ignore nothing but hidden entries

    Returns:
        Sorted './'-relative paths
    """
    if ignore is None:
        ignore = IgnoreList()
    work_tree = Path(work_tree)
    paths = []

    for dirpath, dirnames, filenames in os.walk(work_tree):
        dirnames[:] = [
            d for d in dirnames
            if not is_hidden(d) and not ignore.is_ignored(d)
        ]
        for filename in filenames:
            if is_hidden(filename) or ignore.is_ignored(filename):
                continue
            full_path = Path(dirpath) / filename
            if not full_path.is_file():
                continue
            rel_path = full_path.relative_to(work_tree).as_posix()
            paths.append(canonical_path(rel_path))

    return sorted(paths)


def get_ignore_list(repo_root: Path) -> IgnoreList:
    """
    Create an IgnoreList for a repository from its .ritignore file.

    Args:
        repo_root: Path to repository root

    Returns:
        Configured IgnoreList instance
    """
    ignore = IgnoreList()
    ignore.load_file(Path(repo_root) / '.ritignore')
    return ignore
