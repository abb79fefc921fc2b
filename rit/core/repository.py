"""Repository management for Rit VCS."""

from pathlib import Path
from typing import Optional

from .config import Config
from .refs import RefManager
from .store import ObjectStore

RIT_DIR = '.rit'
IGNORE_FILE = '.ritignore'


class Repository:
    """
    Represents a Rit repository.

    A repository manages the .rit directory structure and hands out the
    object store, reference manager and configuration.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.rit_dir = self.work_tree / RIT_DIR
        self.objects_dir = self.rit_dir / 'objects'
        self.refs_dir = self.rit_dir / 'refs'
        self.heads_dir = self.refs_dir / 'heads'
        self.head_file = self.heads_dir / 'main'
        self.index_file = self.rit_dir / 'INDEX'
        self.config_file = self.rit_dir / 'config'
        self.ignore_file = self.work_tree / IGNORE_FILE

        self.objects = ObjectStore(self.objects_dir)
        self.refs = RefManager(self)
        self._config = None

    @property
    def config(self) -> Config:
        """Get Config instance."""
        if self._config is None:
            self._config = Config(self.config_file)
        return self._config

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .rit directory structure:
        .rit/
        ├── objects/       # Object store
        ├── refs/
        │   └── heads/     # Head reference (main)
        └── config         # Repository configuration

        The INDEX and refs/heads/main files appear on first add and commit.

        Returns:
            Repository: self for method chaining

        Raises:
            FileExistsError: If repository already exists
        """
        if self.rit_dir.exists():
            raise FileExistsError(f"Repository already exists at {self.rit_dir}")

        self.rit_dir.mkdir()
        self.objects_dir.mkdir()
        self.refs_dir.mkdir()
        self.heads_dir.mkdir()

        self.config_file.write_text('[remote]\nurl = \n')

        return self

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / RIT_DIR).is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"
