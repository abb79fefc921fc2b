"""Recording the staging area as a commit."""

import logging
from typing import Optional

from rit.core.hash import from_hex
from rit.core.index import Index
from rit.core.objects import Commit, Tree

logger = logging.getLogger(__name__)


def write_tree(repo, index: Index) -> Optional[str]:
    """
    Store the tree for an index.

    Returns:
        Hex digest of the new tree, or None if an identical tree was
        already stored
    """
    tree = Tree.from_index(index)
    try:
        return repo.objects.put(tree.serialize(), exclusive=True)
    except FileExistsError:
        logger.info("Tree %s already stored", tree.hash[:7])
        return None


def create_commit(repo, message: str) -> Optional[str]:
    """
    Create a commit from the staged changes in the index.

    The tree is stored first, then the commit object, and only then is the
    head reference overwritten, so a failure part way never leaves the
    head pointing at a missing commit.

    A tree that already exists in the store is taken to mean nothing
    changed; no commit is written and the head is left alone.

    Args:
        repo: Repository instance
        message: Commit message

    Returns:
        Hex digest of the new commit, or None if there was nothing to commit

    Raises:
        ValueError: If the index or head reference is corrupt
        OSError: If any object or reference cannot be read or written
    """
    index = Index.load_or_empty(repo.index_file)

    tree_hash = write_tree(repo, index)
    if tree_hash is None:
        return None

    parent = repo.refs.read_head()

    commit = Commit.create(
        tree=from_hex(tree_hash),
        parent=parent,
        message=message,
    )
    commit_hash = repo.objects.put(commit.serialize())

    repo.refs.write_head(from_hex(commit_hash))
    logger.info("Created commit %s (tree %s, %d files)", commit_hash[:7], tree_hash[:7], len(index))

    return commit_hash


def read_commit(repo, commit_hash: str) -> Commit:
    """Load and parse a commit object."""
    return Commit.deserialize(repo.objects.get(commit_hash))


def read_head_tree(repo) -> Optional[Tree]:
    """
    Tree of the current head commit.

    Returns:
        Tree, or None if there are no commits yet
    """
    head = repo.refs.read_head()
    if head is None:
        return None

    commit_data = repo.objects.get(head.hex())
    tree_digest = Commit.tree_of(commit_data)
    return Tree.deserialize(repo.objects.get(tree_digest.hex()))
