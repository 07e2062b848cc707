"""Read-only git queries run inside one repository"""

from pathlib import Path
from typing import List, Union

import git

from git_status_of_so_many.exceptions import GitQueryError
from git_status_of_so_many.logging_config import get_logger

logger = get_logger(__name__)

# git is asked to speak untranslated English so status wording can be parsed
GIT_ENVIRONMENT = {"LC_ALL": "C", "LANGUAGE": "C"}


class GitQueries:
    """Service for the git queries behind one repository's status.

    Every public method returns the command's output as a list of lines and
    degrades to an empty list when git cannot answer; the failure is only
    logged. Commands are passed to git as argument lists, never as a shell
    string.
    """

    def __init__(self, repo_path: Union[str, Path]):
        """Initialize the service.

        Args:
            repo_path: Path to the git repository (string path, not repo object)
        """
        self.repo_path = str(repo_path)

    def _get_repo(self) -> git.Repo:
        """Open the repository.

        Raises:
            GitQueryError: the path is not a usable git repository
        """
        try:
            return git.Repo(self.repo_path)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise GitQueryError("open", self.repo_path, str(e)) from e

    def _run(self, command: str, *args: str) -> List[str]:
        """Run `git <command> <args>` in the repository and return its lines.

        Raises:
            GitQueryError: git could not be run or exited with an error
        """
        repo = self._get_repo()
        try:
            with repo.git.custom_environment(**GIT_ENVIRONMENT):
                output = getattr(repo.git, command)(*args)
        except git.exc.GitCommandError as e:
            raise GitQueryError(command, self.repo_path, (e.stderr or "").strip()) from e
        except git.exc.GitCommandNotFound as e:
            raise GitQueryError(command, self.repo_path, "git binary not found") from e
        finally:
            repo.close()
        return output.splitlines()

    def _lines(self, command: str, *args: str) -> List[str]:
        """Like _run, but a failing query yields no lines."""
        try:
            return self._run(command, *args)
        except GitQueryError as e:
            logger.debug(str(e))
            return []

    def status(self) -> List[str]:
        """Output of `git status`."""
        return self._lines("status")

    def stash_list(self) -> List[str]:
        """Output of `git stash list`."""
        return self._lines("stash", "list")

    def decorated_log(self) -> List[str]:
        """One line per decorated commit, newest first, for locating tags."""
        return self._lines("log", "--oneline", "--decorate=short", "--simplify-by-decoration", "--no-color")

    def tagged_commit(self, tag: str) -> str:
        """Return the hash of the commit `tag` points at, or an empty string."""
        lines = self._lines("rev_list", "-n", "1", tag, "--")
        return lines[0].strip() if lines else ""

    def commits_since(self, commit: str) -> List[str]:
        """One-line summaries of the commits after `commit` up to HEAD, newest first."""
        return self._lines("log", "--oneline", "--no-color", f"{commit}..HEAD")
