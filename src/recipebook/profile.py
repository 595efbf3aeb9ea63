"""Profile management for recipebook storage and configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables at module import
load_dotenv()


class Profile:
    """Manages profile-specific paths for recipebook storage.

    A profile determines where recipebook keeps its save file and logs.
    The active profile is determined by the RECIPEBOOK_PROFILE environment
    variable, defaulting to "default" if not set. RECIPEBOOK_HOME moves the
    whole data tree somewhere else.
    """

    SAVE_FILE_NAME = "recipes.yml"

    def __init__(self, name: Optional[str] = None, home: Optional[Path] = None):
        """Initialize profile with given name or from environment.

        Args:
            name: Profile name. If None, uses RECIPEBOOK_PROFILE env var or "default".
            home: Data home. If None, uses RECIPEBOOK_HOME env var or the project data dir.
        """
        self.name = name or os.getenv("RECIPEBOOK_PROFILE", "default")
        self._home = Path(home) if home else self._find_home()
        self._data_root = self._home / self.name

        # Create profile directories if they don't exist
        self._ensure_directories()

    def _find_home(self) -> Path:
        """Find the data home from the environment or the project root."""
        env_home = os.getenv("RECIPEBOOK_HOME")
        if env_home:
            return Path(env_home).expanduser()

        current = Path(__file__).resolve().parent
        while current != current.parent:
            if (current / "pyproject.toml").exists() or (current / ".git").exists():
                return current / "data"
            current = current.parent

        # Installed outside a checkout
        return Path.home() / ".recipebook"

    def _ensure_directories(self) -> None:
        """Create profile directories if they don't exist."""
        self.data_root.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    @property
    def data_root(self) -> Path:
        """Root directory for profile data."""
        return self._data_root

    @property
    def save_file(self) -> Path:
        """Path to the recipe save file."""
        return self._data_root / self.SAVE_FILE_NAME

    @property
    def logs_dir(self) -> Path:
        """Directory for log files."""
        return self._data_root / "logs"

    @property
    def log_file(self) -> Path:
        """Path to the main recipebook log file."""
        return self.logs_dir / "recipebook.log"

    @classmethod
    def current(cls) -> "Profile":
        """Get the current active profile."""
        return cls()

    def __str__(self) -> str:
        return f"Profile({self.name})"

    def __repr__(self) -> str:
        return f"Profile(name={self.name!r}, data_root={self._data_root!s})"
