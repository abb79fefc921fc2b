"""Three-way status: working tree vs. index vs. head commit."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from rit.core.hash import digest
from rit.core.index import Index
from rit.operations.commit import read_head_tree
from rit.utils.ignore import canonical_path, get_ignore_list, walk_paths

logger = logging.getLogger(__name__)


class FileState(Enum):
    UP_TO_DATE = 'up-to-date'
    STAGED_MODIFIED = 'staged-modified'
    STAGED_UNCOMMITTED = 'staged-uncommitted'
    UNTRACKED = 'untracked'


def classify(
    path: str,
    current: bytes,
    index_files: Dict[str, bytes],
    head_files: Dict[str, bytes],
) -> FileState:
    """
    Classify one working-tree file.

    Rules are checked in order:
    1. committed with the same digest -> UP_TO_DATE
    2. staged with a different digest -> STAGED_MODIFIED
    3. staged with the same digest -> STAGED_UNCOMMITTED
    4. neither staged nor committed -> UNTRACKED

    A file that is only in the head tree with a different digest is
    reported as STAGED_MODIFIED.

    Args:
        path: Index key of the file
        current: Digest of the file's current content
        index_files: Staged path -> digest
        head_files: Committed path -> digest
    """
    if head_files.get(path) == current:
        return FileState.UP_TO_DATE

    staged = index_files.get(path)
    if staged is not None:
        if staged != current:
            return FileState.STAGED_MODIFIED
        return FileState.STAGED_UNCOMMITTED

    if path in head_files:
        return FileState.STAGED_MODIFIED

    return FileState.UNTRACKED


@dataclass
class StatusReport:
    """Paths grouped by state; up-to-date files are left out."""
    untracked: List[str] = field(default_factory=list)
    staged_modified: List[str] = field(default_factory=list)
    staged_uncommitted: List[str] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not (self.untracked or self.staged_modified or self.staged_uncommitted)

    def add(self, path: str, state: FileState) -> None:
        if state is FileState.UNTRACKED:
            self.untracked.append(path)
        elif state is FileState.STAGED_MODIFIED:
            self.staged_modified.append(path)
        elif state is FileState.STAGED_UNCOMMITTED:
            self.staged_uncommitted.append(path)


def compute_status(repo, paths: Optional[Iterable[str]] = None) -> StatusReport:
    """
    Compare the working tree against the index and the head commit.

    Files that were staged or committed but no longer exist in the working
    tree are not reported.

    Args:
        repo: Repository instance
        paths: Working-tree paths to check; defaults to every file not
            excluded by .ritignore

    Returns:
        StatusReport

    Raises:
        ValueError: If the index, head reference or head objects are corrupt
        OSError: On read errors other than a missing index or head
    """
    if paths is None:
        paths = walk_paths(repo.work_tree, get_ignore_list(repo.work_tree))

    index_files = Index.load_or_empty(repo.index_file).as_dict()

    head_tree = read_head_tree(repo)
    head_files = head_tree.to_dict() if head_tree is not None else {}

    report = StatusReport()
    for path in paths:
        key = canonical_path(str(path))
        full_path = repo.work_tree / Path(key)
        with open(full_path, 'rb') as f:
            current = digest(f.read())

        state = classify(key, current, index_files, head_files)
        logger.debug("%s: %s", key, state.value)
        report.add(key, state)

    return report
