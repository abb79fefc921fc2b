"""Staging files into the index."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

from rit.core.hash import digest
from rit.core.index import Index, IndexEntry
from rit.utils.ignore import canonical_path

logger = logging.getLogger(__name__)


@dataclass
class AddResult:
    """Outcome of staging a batch of paths."""
    added: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.added) + len(self.unchanged)

    @property
    def ok(self) -> bool:
        """True only if every requested path was staged."""
        return not self.failed


def _stage_path(repo, index: Index, path: str, result: AddResult) -> None:
    # Failures are reported under the path exactly as the caller gave it.
    given = path
    full_path = Path(path)
    if not full_path.is_absolute():
        full_path = repo.work_tree / full_path

    if not full_path.exists():
        logger.info("%s does not exist; skipping", given)
        result.failed.append((given, "File not found"))
        return

    if full_path.is_dir():
        logger.info("%s is a directory; skipping", given)
        result.failed.append((given, "Is a directory"))
        return

    if Path(path).is_absolute():
        try:
            path = full_path.relative_to(repo.work_tree).as_posix()
        except ValueError:
            logger.info("%s is outside the repository; skipping", given)
            result.failed.append((given, "Outside repository"))
            return

    key = canonical_path(path)
    try:
        key.encode('utf-8')
    except UnicodeEncodeError:
        logger.info("%r is not a UTF-8 path; skipping", given)
        result.failed.append((given, "Path is not valid UTF-8"))
        return

    try:
        with open(full_path, 'rb') as f:
            data = f.read()
        st = os.stat(full_path)
    except OSError as e:
        logger.info("Cannot read %s: %s", given, e)
        result.failed.append((given, str(e)))
        return

    sha256 = digest(data)

    existing = index.get_entry(key)
    if existing is not None:
        if existing.sha256 == sha256:
            logger.info("%s already added", key)
            result.unchanged.append(key)
            return

        # No reference counting: another path may still share this blob.
        try:
            repo.objects.delete(existing.hexdigest)
        except FileNotFoundError:
            logger.warning("Old object %s for %s is already gone", existing.hexdigest, key)
        except OSError as e:
            logger.info("Cannot remove old object for %s: %s", key, e)
            result.failed.append((given, str(e)))
            return
        index.remove_entry(key)
        logger.debug("Replacing %s (%s)", key, existing.hexdigest[:7])

    try:
        repo.objects.put(data)
    except OSError as e:
        logger.info("Cannot store %s: %s", key, e)
        result.failed.append((given, str(e)))
        return

    index.add_entry(IndexEntry.from_stat(key, sha256, st))
    result.added.append(key)
    logger.debug("Added %s (%s)", key, sha256.hex()[:7])


def add_paths(repo, paths: Iterable[str]) -> AddResult:
    """
    Stage files for commit.

    Every path is processed independently. Missing paths, directories and
    names that are not valid UTF-8 are logged and recorded as failures
    (under the path as given) without stopping the batch. The
    index is rewritten once at the end if anything was staged, so a batch
    with some failures is still partially persisted.

    Args:
        repo: Repository instance
        paths: File paths relative to the working tree (or absolute paths
            inside it)

    Returns:
        AddResult: Per-path outcome; ``ok`` is False if any path failed

    Raises:
        ValueError: If the existing index is corrupt
        OSError: If the index cannot be read or written
    """
    index = Index.load_or_empty(repo.index_file)
    result = AddResult()

    for path in paths:
        _stage_path(repo, index, str(path), result)

    if result.succeeded:
        index.store(repo.index_file)
        logger.debug("Wrote index with %d entries", len(index))

    return result
