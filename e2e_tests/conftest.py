"""Fixtures for end-to-end CLI tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_project(tmp_path, monkeypatch):
    """Run every CLI test from an empty project directory with no user config."""
    for name in (
        "CHAKRA_NEXT_OUTPUT",
        "CHAKRA_NEXT_EXTENSION",
        "CHAKRA_NEXT_SKIP_INSTALL",
    ):
        monkeypatch.delenv(name, raising=False)
    config_file = tmp_path / "home" / ".chakra-next" / "config.toml"
    monkeypatch.setattr("chakra_next.config.get_config_file", lambda: config_file)
    monkeypatch.setattr("chakra_next.main.get_config_file", lambda: config_file)
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project
