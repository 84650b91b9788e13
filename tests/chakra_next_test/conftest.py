"""Shared fixtures for chakra-next unit tests."""

import pytest

CONFIG_ENV_VARS = (
    "CHAKRA_NEXT_OUTPUT",
    "CHAKRA_NEXT_EXTENSION",
    "CHAKRA_NEXT_SKIP_INSTALL",
)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Keep the developer's own chakra-next settings out of the tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def config_file(tmp_path, monkeypatch):
    """Point the config loader at a file inside tmp_path (not created)."""
    path = tmp_path / "home" / ".chakra-next" / "config.toml"
    monkeypatch.setattr("chakra_next.config.get_config_file", lambda: path)
    return path


@pytest.fixture()
def make_chakra_install():
    """Create a fake node_modules/@chakra-ui/react under a directory."""

    def _make(root):
        package_dir = root / "node_modules" / "@chakra-ui" / "react"
        package_dir.mkdir(parents=True)
        (package_dir / "package.json").write_text('{"name": "@chakra-ui/react"}')
        return package_dir

    return _make
