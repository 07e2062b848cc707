"""Pytest fixtures for git-status-of-so-many tests"""
import io
import tempfile
from pathlib import Path

import git
import pytest
from rich.console import Console

from git_status_of_so_many.config import Options, Settings


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


def commit_file(repo: git.Repo, name: str, content: str, message: str) -> git.Commit:
    """Write a file into the repository and commit it."""
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message)


def init_repo(path: Path) -> git.Repo:
    """Create a real Git repository with one commit on 'main'."""
    path.mkdir(parents=True, exist_ok=True)
    repo = git.Repo.init(path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')
    return repo


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo = init_repo(temp_dir / "test_repo")

    yield repo

    # Cleanup
    repo.close()


@pytest.fixture
def git_repo_with_origin(git_repo, temp_dir):
    """A repository whose 'main' tracks a local bare 'origin'."""
    origin_path = temp_dir / "origin.git"
    git.Repo.init(origin_path, bare=True).close()
    git_repo.create_remote('origin', str(origin_path))
    git_repo.git.push('-u', 'origin', 'main')
    yield git_repo


@pytest.fixture
def settings(temp_dir):
    """Settings rooted at the temporary directory."""
    return Settings(repos_home=temp_dir)


@pytest.fixture
def console():
    """A console that records plain text instead of writing to a terminal."""
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=200)


def console_text(console: Console) -> str:
    """Return everything printed on a console from the `console` fixture."""
    return console.file.getvalue()


@pytest.fixture
def all_options():
    """Options with every optional query switched on."""
    return Options(show_stashes=True, show_commits_after_tag=True)
