"""Configuration handling for git-status-of-so-many"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple, Union

import yaml

from git_status_of_so_many.constants import DEFAULT_SETTINGS_FILE, EXAMPLE_SETTINGS_FILE
from git_status_of_so_many.exceptions import ConfigurationError
from git_status_of_so_many.logging_config import get_logger

logger = get_logger(__name__)

SETUP_HINT = (
    f"Configure me first!:\n"
    f"  cp {EXAMPLE_SETTINGS_FILE} {DEFAULT_SETTINGS_FILE}\n"
    f"  vim {DEFAULT_SETTINGS_FILE}"
)
REPAIR_HINT = f"Remove {DEFAULT_SETTINGS_FILE} and run/configure again."

# Key used by the first settings documents, still accepted
LEGACY_HOME_KEY = "your_home_of_all_git_repos"


@dataclass(frozen=True)
class Settings:
    """Where to look for repositories and which of them to favor or skip."""

    repos_home: Path
    favorite_repos: Tuple[str, ...] = field(default_factory=tuple)
    excluded_repos: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate settings after initialization."""
        self._validate_repos_home()
        self._validate_patterns("favorite_repos")
        self._validate_patterns("excluded_repos")

    def _validate_repos_home(self):
        """Validate repos_home points to an existing directory."""
        if not self.repos_home.is_dir():
            raise ConfigurationError(
                f"repos_home is not a directory: {self.repos_home}",
                hint=f"Point repos_home in {DEFAULT_SETTINGS_FILE} at the directory holding your repositories.",
            )

    def _validate_patterns(self, name: str):
        """Validate a pattern list holds only strings."""
        patterns = getattr(self, name)
        if not all(isinstance(pattern, str) for pattern in patterns):
            raise ConfigurationError(f"{name} must be a list of strings", hint=REPAIR_HINT)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Settings":
        """Create Settings from the parsed settings document."""
        section = config_dict.get("settings", config_dict)
        if not isinstance(section, dict):
            raise ConfigurationError("'settings' must be a mapping", hint=REPAIR_HINT)

        home = section.get("repos_home") or section.get(LEGACY_HOME_KEY)
        if not home or not isinstance(home, str):
            raise ConfigurationError("Missing 'repos_home' in settings", hint=REPAIR_HINT)

        return cls(
            repos_home=Path(os.path.expandvars(home)).expanduser(),
            favorite_repos=_pattern_tuple(section, "favorite_repos"),
            excluded_repos=_pattern_tuple(section, "excluded_repos"),
        )


@dataclass(frozen=True)
class Options:
    """Flags controlling one run, built once from the command line."""

    verbose: bool = False
    silent: bool = False
    show_stashes: bool = False
    show_commits_after_tag: bool = False
    favorites_only: bool = False
    pause: bool = False
    debug: bool = False


def _pattern_tuple(section: dict, key: str) -> Tuple[str, ...]:
    value = section.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list):
        raise ConfigurationError(f"{key} must be a list of strings", hint=REPAIR_HINT)
    return tuple(value)


def load_settings(path: Union[str, Path] = DEFAULT_SETTINGS_FILE) -> Settings:
    """Read the settings document at `path`.

    Raises:
        ConfigurationError: the file is missing, is not valid YAML, or does not
            describe a usable repos_home.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Settings file not found: {path}", hint=SETUP_HINT)

    try:
        with path.open(encoding="utf-8") as handle:
            document = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"Sth wrong with reading: {path}. Error: {e}", hint=REPAIR_HINT
        ) from e

    if not isinstance(document, dict):
        raise ConfigurationError(f"Settings file is empty or not a mapping: {path}", hint=REPAIR_HINT)

    settings = Settings.from_dict(document)
    logger.debug(f"Loaded settings from {path}: {settings}")
    return settings
