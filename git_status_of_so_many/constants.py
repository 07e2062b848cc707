"""Shared constants for git-status-of-so-many."""

# Repository discovery
GIT_DIR = ".git"
MAX_SEARCH_DEPTH = 3  # repositories nested deeper are not searched

# Default settings document, relative to the working directory
DEFAULT_SETTINGS_FILE = "settings.yml"
EXAMPLE_SETTINGS_FILE = "settings.yml.example"

# Wording of `git status` that the status parser keys on
GIT_MSG_HAS_COMMITS = "Your branch is ahead of"
GIT_MSG_IS_DIRTY = "Changes not staged for commit"
GIT_MSG_UNTRACKED = "untracked files"
GIT_MSG_BRANCH = "branch"

# Older git prefixed every status line with "# "
LEGACY_COMMENT_PREFIX = "# "
BRANCH_PREFIX = "On branch "
UNKNOWN_BRANCH = "?"

# Report layout
MAX_COMMITS_ABOVE_TAG = 21
COMMIT_MARKER = "->"
INSPECT_COMMAND = "git status"

# Symbols
SYMBOL_TAG = "tag: "
