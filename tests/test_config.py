"""Tests for settings loading"""
from pathlib import Path

import pytest

from git_status_of_so_many.config import Settings, load_settings
from git_status_of_so_many.exceptions import ConfigurationError


def write_settings(path: Path, text: str) -> Path:
    settings_file = path / "settings.yml"
    settings_file.write_text(text)
    return settings_file


class TestLoadSettings:
    """Test reading the settings document."""

    def test_full_document(self, temp_dir):
        settings_file = write_settings(temp_dir, f"""
settings:
  repos_home: {temp_dir}
  favorite_repos:
    - /work/
    - dotfiles/
  excluded_repos:
    - /archive/
""")
        settings = load_settings(settings_file)

        assert settings.repos_home == temp_dir
        assert settings.favorite_repos == ("/work/", "dotfiles/")
        assert settings.excluded_repos == ("/archive/",)

    def test_legacy_home_key(self, temp_dir):
        settings_file = write_settings(temp_dir, f"settings:\n  your_home_of_all_git_repos: {temp_dir}\n")

        settings = load_settings(settings_file)

        assert settings.repos_home == temp_dir
        assert settings.favorite_repos == ()
        assert settings.excluded_repos == ()

    def test_document_without_settings_section(self, temp_dir):
        settings_file = write_settings(temp_dir, f"repos_home: {temp_dir}\nexcluded_repos: /tmp/\n")

        settings = load_settings(settings_file)

        assert settings.excluded_repos == ("/tmp/",)

    def test_home_directory_is_expanded(self, temp_dir, monkeypatch):
        monkeypatch.setenv("HOME", str(temp_dir))
        (temp_dir / "code").mkdir()
        settings_file = write_settings(temp_dir, "settings:\n  repos_home: ~/code\n")

        assert load_settings(settings_file).repos_home == temp_dir / "code"

    def test_missing_file(self, temp_dir):
        with pytest.raises(ConfigurationError) as excinfo:
            load_settings(temp_dir / "settings.yml")

        assert "cp settings.yml.example settings.yml" in excinfo.value.hint

    def test_malformed_yaml(self, temp_dir):
        settings_file = write_settings(temp_dir, "settings: [unclosed\n")

        with pytest.raises(ConfigurationError):
            load_settings(settings_file)

    def test_empty_document(self, temp_dir):
        settings_file = write_settings(temp_dir, "")

        with pytest.raises(ConfigurationError):
            load_settings(settings_file)

    def test_missing_repos_home(self, temp_dir):
        settings_file = write_settings(temp_dir, "settings:\n  favorite_repos: [a]\n")

        with pytest.raises(ConfigurationError, match="repos_home"):
            load_settings(settings_file)

    def test_repos_home_does_not_exist(self, temp_dir):
        settings_file = write_settings(temp_dir, f"settings:\n  repos_home: {temp_dir / 'nope'}\n")

        with pytest.raises(ConfigurationError, match="not a directory"):
            load_settings(settings_file)

    def test_patterns_must_be_a_list(self, temp_dir):
        settings_file = write_settings(temp_dir, f"settings:\n  repos_home: {temp_dir}\n  excluded_repos: {{a: b}}\n")

        with pytest.raises(ConfigurationError, match="excluded_repos"):
            load_settings(settings_file)

    def test_patterns_must_be_strings(self, temp_dir):
        settings_file = write_settings(temp_dir, f"settings:\n  repos_home: {temp_dir}\n  favorite_repos: [1, 2]\n")

        with pytest.raises(ConfigurationError, match="favorite_repos"):
            load_settings(settings_file)


class TestSettings:
    """Test Settings validation."""

    def test_settings_are_frozen(self, temp_dir):
        settings = Settings(repos_home=temp_dir)
        with pytest.raises(AttributeError):
            settings.repos_home = Path("/")
